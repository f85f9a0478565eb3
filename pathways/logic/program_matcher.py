"""
Program Matcher

Ranks University x Program entries by admission probability for the
categories the student is interested in.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from .contracts import ProgramOffering, ProgramMatch, ProjectedAPS
from .admission import admission_probability, feasibility_label
from .constants import DEFAULT_CATEGORIES, PROBABILITY_FLOOR, MAX_PROGRAM_RECOMMENDATIONS

logger = logging.getLogger(__name__)


def relevant_categories(interest_tags: Sequence[str]) -> List[str]:
    """Categories to search; falls back to the broad default set."""
    tags = [tag.lower() for tag in interest_tags]
    return tags if tags else list(DEFAULT_CATEGORIES)


def match_programs(
    programs: Sequence[ProgramOffering],
    interest_tags: Sequence[str],
    projected: ProjectedAPS,
    excluded_career_ids: Iterable[str] = (),
    limit: int = MAX_PROGRAM_RECOMMENDATIONS
) -> Tuple[List[ProgramMatch], int]:
    """
    Match and rank programs.

    Args:
        programs: Catalog program entries
        interest_tags: Tags from the interest classifier
        projected: Student's projected APS range
        excluded_career_ids: Careers blocked by the gates; their programs are skipped
        limit: Maximum programs to return

    Returns:
        (top programs sorted by probability, total matches before the cap)
    """
    categories = set(relevant_categories(interest_tags))
    excluded = set(excluded_career_ids)

    matched: List[ProgramMatch] = []
    for program in programs:
        if program.category.lower() not in categories:
            continue
        if program.career_id is not None and program.career_id in excluded:
            continue

        probability = admission_probability(projected, program.aps_required)
        if probability < PROBABILITY_FLOOR:
            continue

        matched.append(ProgramMatch(
            university=program.university,
            program=program.program,
            category=program.category,
            aps_required=program.aps_required,
            projected_aps=projected,
            admission_probability=probability,
            feasibility=feasibility_label(probability),
            subject_requirements=list(program.subject_requirements),
            application_deadline=program.application_deadline,
            duration=program.duration,
            career_id=program.career_id,
        ))

    # Stable sort keeps catalog order among equal probabilities
    matched.sort(key=lambda m: m.admission_probability, reverse=True)

    logger.debug(f"Programs matched: {len(matched)} in categories {sorted(categories)}")

    return matched[:limit], len(matched)
