"""
APS Calculator / Projector

Converts subject percentages into an Admission Point Score on the CAPS
1-7 scale and projects a final-score range from the current grade.
"""

import math
from typing import Any, Dict, Mapping, Optional

from .contracts import ProjectedAPS
from .subjects import as_percentage
from .constants import (
    APS_POINT_BANDS,
    APS_FLOOR_POINTS,
    MAX_APS,
    GRADE_OPTIMISM_FACTORS,
    DEFAULT_OPTIMISM_FACTOR,
)


def mark_to_points(percentage: float) -> int:
    """Map a percentage to CAPS points (>=80 -> 7 ... <30 -> 1)."""
    for lower_bound, points in APS_POINT_BANDS:
        if percentage >= lower_bound:
            return points
    return APS_FLOOR_POINTS


def compute_aps(marks: Optional[Mapping[str, Any]]) -> int:
    """
    Sum CAPS points across every provided mark.

    The caller decides which subjects count (e.g. best six). Non-numeric
    and out-of-range marks are skipped.

    Args:
        marks: Subject -> percentage

    Returns:
        Total APS (0 when nothing usable was supplied)
    """
    if not marks or not isinstance(marks, Mapping):
        return 0

    total = 0
    for mark in marks.values():
        value = as_percentage(mark)
        if value is not None:
            total += mark_to_points(value)
    return total


def project_final_aps(current_aps: int, grade: int) -> ProjectedAPS:
    """
    Project the final APS range from current performance.

    min is the current APS; max applies the grade's optimism factor and is
    capped at 42 (never below min).
    """
    current = max(0, int(current_aps))
    factor = GRADE_OPTIMISM_FACTORS.get(grade, DEFAULT_OPTIMISM_FACTOR)
    # half-up rounding
    projected_max = min(MAX_APS, int(math.floor(current * factor + 0.5)))
    return ProjectedAPS(
        min=current,
        max=max(current, projected_max),
        current=current,
    )


def projection_for_marks(marks: Dict[str, float], grade: int) -> ProjectedAPS:
    """Convenience: compute the APS of ``marks`` and project it."""
    return project_final_aps(compute_aps(marks), grade)
