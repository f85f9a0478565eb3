"""
Gate Orchestrator

Runs a fixed, explicitly constructed gate list against one career or a
whole catalog and aggregates the verdicts into CareerAssessments.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .contracts import (
    StudentProfile,
    CareerOption,
    CareerAssessment,
    CatalogFilterResult,
    GateVerdict,
    Severity,
)
from .gates import Gate, build_default_gates

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class GateOrchestrator:
    """
    Aggregates gate verdicts per career.

    A career is blocked iff at least one gate blocks it. Evaluation of a
    catalog fans out per career; results come back in catalog order.
    """

    def __init__(
        self,
        gates: Optional[Sequence[Gate]] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """
        Args:
            gates: Gates to run, in order. Defaults to the standard ten.
            max_workers: Upper bound on worker threads for filter_catalog
        """
        self.gates = tuple(gates) if gates is not None else build_default_gates()
        self.max_workers = max(1, int(max_workers))

    def evaluate_career(
        self,
        student: StudentProfile,
        career: CareerOption
    ) -> CareerAssessment:
        """
        Run every gate for one career.

        Returns:
            CareerAssessment with blocking verdicts, warnings and notes
        """
        verdicts: List[GateVerdict] = [gate.evaluate(student, career) for gate in self.gates]

        critical_blocks = [v for v in verdicts if v.blocked]
        warnings = [v for v in verdicts if v.severity == Severity.WARNING]
        notes = [
            v for v in verdicts
            if not v.blocked and v.severity == Severity.INFO and v.reason
        ]

        if critical_blocks:
            logger.debug(
                f"Career {career.id} blocked by: {[v.gate for v in critical_blocks]}"
            )

        return CareerAssessment(
            career_id=career.id,
            career_name=career.name,
            category=career.category,
            blocked=any(v.blocked for v in verdicts),
            critical_blocks=critical_blocks,
            warnings=warnings,
            notes=notes,
        )

    def filter_catalog(
        self,
        student: StudentProfile,
        careers: Sequence[CareerOption],
        timeout: Optional[float] = None
    ) -> CatalogFilterResult:
        """
        Evaluate every career and partition into eligible / blocked.

        Args:
            student: Student profile
            careers: Career catalog snapshot (not mutated)
            timeout: Optional overall timeout in seconds; exceeding it raises
                concurrent.futures.TimeoutError

        Returns:
            CatalogFilterResult with summary counts
        """
        if not careers:
            return CatalogFilterResult()

        workers = min(self.max_workers, len(careers))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            assessments = list(executor.map(
                lambda career: self.evaluate_career(student, career),
                careers,
                timeout=timeout,
            ))

        eligible = [a for a in assessments if not a.blocked]
        blocked = [a for a in assessments if a.blocked]

        logger.info(
            f"🚦 Gates evaluated: {len(assessments)} careers, "
            f"{len(eligible)} eligible, {len(blocked)} blocked"
        )

        return CatalogFilterResult(
            eligible=eligible,
            blocked=blocked,
            total=len(assessments),
            eligible_count=len(eligible),
            blocked_count=len(blocked),
        )
