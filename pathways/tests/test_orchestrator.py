"""
Gate Orchestrator tests
"""

from concurrent.futures import TimeoutError as FuturesTimeoutError
import time

import pytest

from pathways.logic.contracts import CareerOption, GateVerdict, Severity
from pathways.logic.gates import Gate, GateKind, build_default_gates
from pathways.logic.orchestrator import GateOrchestrator


def _career(career_id, **overrides):
    data = {"id": career_id, "name": career_id.title(), "category": "business"}
    data.update(overrides)
    return CareerOption(**data)


def test_low_budget_student_gets_warning_not_block(strong_student, engineering_career):
    student = strong_student.model_copy(update={"budget_limit": "low"})

    assessment = GateOrchestrator().evaluate_career(student, engineering_career)

    assert assessment.blocked is False
    assert assessment.critical_blocks == []
    budget = [w for w in assessment.warnings if w.gate == GateKind.BUDGET.value]
    assert len(budget) == 1
    assert budget[0].severity == Severity.WARNING
    assert budget[0].nsfas_eligible is True


def test_blocked_iff_any_gate_blocks(strong_student):
    careers = [
        _career("plain"),
        _career("needs_science", requires_physical_science=True, required_subjects=["Chemistry"]),
        _career("nbt", requires_nbt=True),
    ]
    orchestrator = GateOrchestrator()

    for career in careers:
        verdicts = [gate.evaluate(strong_student, career) for gate in orchestrator.gates]
        assessment = orchestrator.evaluate_career(strong_student, career)
        assert assessment.blocked == any(v.blocked for v in verdicts)
        assert len(assessment.critical_blocks) == sum(1 for v in verdicts if v.blocked)


def test_info_verdicts_with_reason_become_notes(strong_student):
    assessment = GateOrchestrator().evaluate_career(strong_student, _career("nbt", requires_nbt=True))

    assert assessment.blocked is False
    assert [note.gate for note in assessment.notes] == [GateKind.NBT.value]


def test_filter_catalog_partitions_in_catalog_order(strong_student):
    careers = [
        _career("a"),
        _career("b", requires_core_math=True, min_math_mark=100),
        _career("c"),
        _career("d", category="healthcare"),
    ]
    student = strong_student.model_copy(update={"dislikes": ["blood"], "math_mark": 60})

    result = GateOrchestrator(max_workers=3).filter_catalog(student, careers)

    assert [a.career_id for a in result.eligible] == ["a", "c"]
    assert [a.career_id for a in result.blocked] == ["b", "d"]
    assert result.total == 4
    assert result.eligible_count + result.blocked_count == result.total
    assert {a.career_id for a in result.eligible}.isdisjoint({a.career_id for a in result.blocked})


def test_filter_catalog_empty(strong_student):
    result = GateOrchestrator().filter_catalog(strong_student, [])
    assert result.total == 0
    assert result.eligible == [] and result.blocked == []


def test_filter_catalog_does_not_mutate_careers(strong_student, catalog):
    before = [career.model_dump() for career in catalog.careers]
    GateOrchestrator().filter_catalog(strong_student, catalog.careers)
    assert [career.model_dump() for career in catalog.careers] == before


def test_custom_gate_list():
    def always_block(student, career):
        return GateVerdict(gate="custom", blocked=True, severity=Severity.CRITICAL, reason="no")

    orchestrator = GateOrchestrator([Gate(GateKind.MATH, always_block)])

    assert len(orchestrator.gates) == 1
    assert len(build_default_gates()) == 10


def test_custom_gate_blocks_everything(strong_student):
    def always_block(student, career):
        return GateVerdict(gate="custom", blocked=True, severity=Severity.CRITICAL, reason="no")

    orchestrator = GateOrchestrator([Gate(GateKind.MATH, always_block)])
    result = orchestrator.filter_catalog(strong_student, [_career("a"), _career("b")])

    assert result.blocked_count == 2
    assert result.eligible == []


def test_filter_catalog_timeout(strong_student):
    def slow_gate(student, career):
        time.sleep(0.5)
        return GateVerdict.passed("slow")

    orchestrator = GateOrchestrator([Gate(GateKind.MATH, slow_gate)], max_workers=1)

    with pytest.raises(FuturesTimeoutError):
        orchestrator.filter_catalog(strong_student, [_career("a"), _career("b")], timeout=0.05)
