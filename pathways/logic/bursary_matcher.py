"""
Bursary Matcher

Scores each funding option from independent weighted checks and ranks
the ones the student is likely eligible for.
"""

import logging
from typing import List, Sequence, Tuple

from .contracts import (
    StudentProfile,
    BursaryDefinition,
    BursaryMatch,
    ProjectedAPS,
)
from .constants import (
    BURSARY_APS_WEIGHT,
    BURSARY_NEED_WEIGHT,
    BURSARY_FIELD_WEIGHT,
    BURSARY_SUBJECT_WEIGHT,
    BURSARY_INCLUDE_THRESHOLD,
    BURSARY_MAX_SCORE,
    MAX_BURSARY_RECOMMENDATIONS,
    NSFAS_INCOME_CEILING,
)
from .subjects import normalize, student_mark

logger = logging.getLogger(__name__)


def _qualifies_on_need(bursary: BursaryDefinition, student: StudentProfile) -> bool:
    if not bursary.needs_based:
        return False
    if student.first_generation:
        return True
    ceiling = bursary.income_ceiling if bursary.income_ceiling is not None else NSFAS_INCOME_CEILING
    return student.household_income is not None and student.household_income <= ceiling


def _meets_subject_requirements(bursary: BursaryDefinition, student: StudentProfile) -> bool:
    if not bursary.subject_requirements:
        return False
    for subject, minimum in bursary.subject_requirements.items():
        mark = student_mark(student, subject)
        if mark is None or mark < minimum:
            return False
    return True


def score_bursary(
    bursary: BursaryDefinition,
    student: StudentProfile,
    projected: ProjectedAPS,
    interest_tags: Sequence[str]
) -> Tuple[int, List[str]]:
    """
    Compute a 0-100 eligibility score for one bursary.

    Checks (each independent):
    - APS threshold met by the projected maximum: +30
    - Low-income / first-generation on a needs-based bursary: +40
    - Career-field alignment with the student's interest tags: +30
    - Bursary subject-mark requirements all met: +40

    Returns:
        (score clamped to [0, 100], human-readable reasons)
    """
    score = 0
    reasons: List[str] = []

    if projected.max >= bursary.min_aps:
        score += BURSARY_APS_WEIGHT
        reasons.append(f"APS requirement met ({bursary.min_aps}+ required)")

    if _qualifies_on_need(bursary, student):
        score += BURSARY_NEED_WEIGHT
        if student.first_generation:
            reasons.append("First-generation student (likely qualifies)")
        else:
            reasons.append("Household income within the funding ceiling")

    tags = {normalize(tag) for tag in interest_tags}
    aligned = [field for field in bursary.career_fields if normalize(field) in tags]
    if aligned:
        score += BURSARY_FIELD_WEIGHT
        reasons.append(f"Career interest alignment ({', '.join(aligned)})")

    if _meets_subject_requirements(bursary, student):
        score += BURSARY_SUBJECT_WEIGHT
        required = ", ".join(
            f"{subject} {minimum:g}%+" for subject, minimum in bursary.subject_requirements.items()
        )
        reasons.append(f"Subject requirements met ({required})")

    return max(0, min(BURSARY_MAX_SCORE, score)), reasons


def match_bursaries(
    bursaries: Sequence[BursaryDefinition],
    student: StudentProfile,
    projected: ProjectedAPS,
    interest_tags: Sequence[str],
    limit: int = MAX_BURSARY_RECOMMENDATIONS
) -> Tuple[List[BursaryMatch], int]:
    """
    Score, filter (score >= 30) and rank bursaries.

    Returns:
        (top bursaries sorted by score, total eligible before the cap)
    """
    eligible: List[BursaryMatch] = []

    for bursary in bursaries:
        score, reasons = score_bursary(bursary, student, projected, interest_tags)
        if score < BURSARY_INCLUDE_THRESHOLD:
            continue
        eligible.append(BursaryMatch(
            id=bursary.id,
            name=bursary.name,
            amount=bursary.amount,
            deadline=bursary.deadline,
            urgency=bursary.urgency,
            application_url=bursary.application_url,
            eligibility_score=score,
            eligibility_reasons=reasons,
            match_percentage=score,
        ))

    eligible.sort(key=lambda b: b.eligibility_score, reverse=True)

    logger.debug(f"Bursaries eligible: {len(eligible)} of {len(bursaries)}")

    return eligible[:limit], len(eligible)
