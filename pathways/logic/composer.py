"""
Recommendation Composer

Top-level entry point that sequences the core components into a single
RecommendationSet, or a FailureResult when anything goes wrong.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional, Union

from .contracts import (
    StudentProfile,
    CareerCatalog,
    RecommendationSet,
    FailureResult,
    ApsSummary,
    CareerSummary,
    RecommendationMetadata,
)
from .aps import compute_aps, project_final_aps
from .interest_classifier import classify_interests
from .orchestrator import GateOrchestrator
from .program_matcher import match_programs
from .bursary_matcher import match_bursaries
from .timeline import phase_for
from .constants import (
    UNIVERSITY_ELIGIBLE_APS,
    MAX_PROGRAM_RECOMMENDATIONS,
    MAX_BURSARY_RECOMMENDATIONS,
    ENGINE_VERSION,
)

logger = logging.getLogger(__name__)

RecommendationResult = Union[RecommendationSet, FailureResult]


class RecommendationComposer:
    """
    Orchestrates the recommendation pipeline.

    Pipeline flow:
    1. APS - Compute current APS and project the final range
    2. Timeline - Urgency phase for the grade at ``now``
    3. Gates - Filter the career catalog into eligible / blocked
    4. Programs - Match programs for the student's interests
    5. Bursaries - Match funding options
    6. Assembly - Build the RecommendationSet
    """

    def __init__(
        self,
        orchestrator: Optional[GateOrchestrator] = None,
        max_programs: int = MAX_PROGRAM_RECOMMENDATIONS,
        max_bursaries: int = MAX_BURSARY_RECOMMENDATIONS,
    ):
        self.orchestrator = orchestrator or GateOrchestrator()
        self.max_programs = max_programs
        self.max_bursaries = max_bursaries
        self.version = ENGINE_VERSION

    def compose(
        self,
        student: Union[StudentProfile, Dict[str, Any]],
        catalog: Union[CareerCatalog, Dict[str, Any]],
        now: date,
        timeout: Optional[float] = None
    ) -> RecommendationResult:
        """
        Generate recommendations for one student.

        Never raises: any fault (malformed profile or catalog entry, gate
        timeout) is returned as a FailureResult.

        Args:
            student: Student profile, or a dict matching its fields
            catalog: Catalog snapshot, or a dict matching its fields
            now: Current date, used only by the timeline planner
            timeout: Optional timeout in seconds for catalog filtering

        Returns:
            RecommendationSet on success, FailureResult otherwise
        """
        try:
            return self._compose(student, catalog, now, timeout)
        except Exception as e:
            logger.exception(f"❌ Recommendation pipeline failed: {e}")
            return FailureResult(error=str(e) or e.__class__.__name__)

    def _compose(
        self,
        student: Union[StudentProfile, Dict[str, Any]],
        catalog: Union[CareerCatalog, Dict[str, Any]],
        now: date,
        timeout: Optional[float]
    ) -> RecommendationSet:
        if now is None:
            raise ValueError("now must be supplied")

        profile = student if isinstance(student, StudentProfile) else StudentProfile.model_validate(student)
        snapshot = catalog if isinstance(catalog, CareerCatalog) else CareerCatalog.model_validate(catalog)

        logger.info(
            f"🚀 Starting recommendation pipeline for student: {profile.student_id or 'anonymous'} "
            f"(grade {profile.grade})"
        )

        # Step 1: APS
        current_aps = compute_aps(profile.marks)
        projected = project_final_aps(current_aps, profile.grade)
        logger.info(f"🎯 APS current={current_aps} projected={projected.min}-{projected.max}")

        # Step 2: Timeline
        timeline = phase_for(profile.grade, now)

        # Step 3: Gates
        filtered = self.orchestrator.filter_catalog(profile, snapshot.careers, timeout=timeout)

        # Step 4: Programs
        interest_tags = classify_interests(profile.career_interest_text)
        blocked_ids = [assessment.career_id for assessment in filtered.blocked]
        programs, total_programs = match_programs(
            snapshot.programs,
            interest_tags,
            projected,
            excluded_career_ids=blocked_ids,
            limit=self.max_programs,
        )

        # Step 5: Bursaries
        bursaries, total_bursaries = match_bursaries(
            snapshot.bursaries,
            profile,
            projected,
            interest_tags,
            limit=self.max_bursaries,
        )

        logger.info(
            f"✨ Recommendation pipeline complete: {len(programs)} programs, "
            f"{len(bursaries)} bursaries"
        )

        # Step 6: Assembly
        return RecommendationSet(
            student_id=profile.student_id,
            aps=ApsSummary(
                current=current_aps,
                projected=projected,
                university_eligible=projected.max >= UNIVERSITY_ELIGIBLE_APS,
            ),
            timeline=timeline,
            eligible_careers=filtered.eligible,
            blocked_careers=filtered.blocked,
            career_summary=CareerSummary(
                total=filtered.total,
                eligible=filtered.eligible_count,
                blocked=filtered.blocked_count,
            ),
            ranked_programs=programs,
            ranked_bursaries=bursaries,
            metadata=RecommendationMetadata(
                total_programs_found=total_programs,
                total_bursaries_found=total_bursaries,
                generated_at=now.isoformat(),
                engine_version=self.version,
            ),
        )


# Convenience function for simple usage
def generate_recommendations(
    student: Union[StudentProfile, Dict[str, Any]],
    catalog: Union[CareerCatalog, Dict[str, Any]],
    now: date,
    orchestrator: Optional[GateOrchestrator] = None,
    timeout: Optional[float] = None
) -> RecommendationResult:
    """
    Convenience function to get recommendations.

    Args:
        student: Student profile
        catalog: Career/program/bursary catalog snapshot
        now: Current date
        orchestrator: Optional pre-built orchestrator (default ten gates otherwise)
        timeout: Optional timeout in seconds for catalog filtering

    Returns:
        RecommendationSet or FailureResult
    """
    composer = RecommendationComposer(orchestrator)
    return composer.compose(student, catalog, now, timeout=timeout)
