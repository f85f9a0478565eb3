"""
Admission Probability Scorer

Buckets a projected APS range against a program's required APS.
"""

from .contracts import ProjectedAPS
from .constants import (
    PROBABILITY_WELL_ABOVE,
    PROBABILITY_MEETS,
    PROBABILITY_LIKELY,
    PROBABILITY_POSSIBLE,
    PROBABILITY_CHALLENGING,
    PROBABILITY_FLOOR,
    FEASIBILITY_HIGH_THRESHOLD,
    FEASIBILITY_MEDIUM_THRESHOLD,
)


def admission_probability(projected: ProjectedAPS, required_aps: int) -> int:
    """
    Admission likelihood bucket (one of 95/85/70/50/25/10).

    Args:
        projected: Projected APS range
        required_aps: Program's required APS

    Returns:
        Probability percentage
    """
    if projected.min >= required_aps + 5:
        return PROBABILITY_WELL_ABOVE
    if projected.min >= required_aps:
        return PROBABILITY_MEETS
    if projected.max >= required_aps + 2:
        return PROBABILITY_LIKELY
    if projected.max >= required_aps:
        return PROBABILITY_POSSIBLE
    if projected.max >= required_aps - 3:
        return PROBABILITY_CHALLENGING
    return PROBABILITY_FLOOR


def feasibility_label(probability: int) -> str:
    if probability >= FEASIBILITY_HIGH_THRESHOLD:
        return "High"
    if probability >= FEASIBILITY_MEDIUM_THRESHOLD:
        return "Medium"
    return "Challenging"
