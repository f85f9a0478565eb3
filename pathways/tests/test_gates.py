"""
Gate Set tests

Covers each of the ten gates, including the published scenarios:
Math Lit -> Engineering, low math mark -> Medicine, wrong subjects in
Grade 10 vs Grade 11.
"""

from pathways.logic.contracts import (
    StudentProfile,
    CareerOption,
    UniversityOffering,
    Severity,
)
from pathways.logic.gates import (
    GateKind,
    build_default_gates,
    evaluate_math_gate,
    evaluate_science_gate,
    evaluate_aps_gate,
    evaluate_budget_gate,
    evaluate_deadline_gate,
    evaluate_nbt_gate,
    evaluate_language_gate,
    evaluate_funding_awareness_gate,
    evaluate_category_mismatch_gate,
    evaluate_geographic_gate,
)


def _student(**overrides) -> StudentProfile:
    data = {
        "grade": 11,
        "math_type": "Pure Mathematics",
        "subjects": ["Mathematics", "Physical Sciences", "English"],
        "knows_about_nsfas": True,
    }
    data.update(overrides)
    return StudentProfile(**data)


def _career(**overrides) -> CareerOption:
    data = {"id": "career", "name": "Career", "category": "Engineering"}
    data.update(overrides)
    return CareerOption(**data)


# =============================================================================
# MATH
# =============================================================================

def test_math_literacy_blocks_core_math_career_in_grade_11():
    student = _student(math_type="Math Literacy", subjects=["Math Literacy", "Life Sciences", "English", "History"])
    career = _career(name="Mechanical Engineering", requires_core_math=True)

    verdict = evaluate_math_gate(student, career)

    assert verdict.blocked is True
    assert verdict.severity == Severity.CRITICAL
    assert verdict.fixable is False
    assert verdict.alternatives


def test_math_literacy_block_is_fixable_in_grade_10():
    student = _student(grade=10, math_type="Math Literacy")
    verdict = evaluate_math_gate(student, _career(requires_core_math=True))

    assert verdict.blocked is True
    assert verdict.fixable is True
    assert verdict.deadline_hint


def test_math_literacy_always_blocks_core_math_for_every_grade():
    for grade in (10, 11, 12):
        for mark in (None, 30, 95):
            student = _student(grade=grade, math_type="Math Literacy", math_mark=mark)
            assert evaluate_math_gate(student, _career(requires_core_math=True)).blocked is True


def test_math_mark_gap_above_15_blocks():
    student = _student(grade=12, math_mark=52, subjects=["Mathematics", "Physical Sciences", "Life Sciences", "English"])
    career = _career(name="Medicine", category="Healthcare", requires_core_math=True,
                     requires_physical_science=True, min_math_mark=70)

    verdict = evaluate_math_gate(student, career)

    assert verdict.gap == 18
    assert verdict.blocked is True
    assert verdict.severity == Severity.CRITICAL


def test_math_mark_gap_of_15_only_warns():
    verdict = evaluate_math_gate(_student(math_mark=55), _career(min_math_mark=70))

    assert verdict.blocked is False
    assert verdict.severity == Severity.WARNING
    assert verdict.gap == 15


def test_math_mark_falls_back_to_marks_table():
    student = _student(marks={"Maths": 40})
    verdict = evaluate_math_gate(student, _career(min_math_mark=70))

    assert verdict.blocked is True
    assert verdict.gap == 30


def test_math_gate_passes_without_any_mark():
    verdict = evaluate_math_gate(_student(), _career(min_math_mark=70))
    assert verdict.blocked is False
    assert verdict.reason == ""


# =============================================================================
# SCIENCE
# =============================================================================

def test_science_gate_grade_10_is_fixable():
    student = _student(grade=10, subjects=["Mathematics", "Life Sciences", "History", "English"])
    career = _career(name="Pharmacy", category="Healthcare", requires_physical_science=True)

    verdict = evaluate_science_gate(student, career)

    assert verdict.blocked is True
    assert verdict.fixable is True
    assert "Nursing" in verdict.alternatives


def test_science_gate_alternatives_depend_on_life_sciences():
    with_life = evaluate_science_gate(
        _student(subjects=["Mathematics", "Life Sciences"]), _career(requires_physical_science=True)
    )
    without_life = evaluate_science_gate(
        _student(subjects=["Mathematics", "History"]), _career(requires_physical_science=True)
    )

    assert with_life.fixable is False
    assert with_life.alternatives != without_life.alternatives


def test_science_gate_accepts_subject_alias():
    student = _student(subjects=["Mathematics", "physical science"])
    assert evaluate_science_gate(student, _career(requires_physical_science=True)).blocked is False


# =============================================================================
# APS
# =============================================================================

def test_aps_gate_skipped_in_grade_10():
    student = _student(grade=10, marks={"Mathematics": 30})
    career = _career(universities=[UniversityOffering(name="UCT", min_aps=40, annual_cost=60000)])
    assert evaluate_aps_gate(student, career).blocked is False


def test_aps_gate_blocks_when_no_university_reachable():
    # 4 x 50% -> 16 points, grade 12 projection max 16
    student = _student(grade=12, marks={"A": 50, "B": 50, "C": 50, "D": 50})
    career = _career(universities=[
        UniversityOffering(name="UCT", min_aps=35, annual_cost=60000),
        UniversityOffering(name="TUT", min_aps=25, annual_cost=40000),
    ])

    verdict = evaluate_aps_gate(student, career)

    assert verdict.blocked is True
    assert verdict.severity == Severity.CRITICAL
    assert verdict.gap == 25 - 16
    assert "25" in verdict.reason


def test_aps_gate_lists_qualifying_universities(aps_38_marks):
    student = _student(grade=12, marks=aps_38_marks)
    career = _career(universities=[
        UniversityOffering(name="UCT", min_aps=42, annual_cost=60000),
        UniversityOffering(name="UJ", min_aps=30, annual_cost=40000),
    ])

    verdict = evaluate_aps_gate(student, career)

    assert verdict.blocked is False
    assert verdict.severity == Severity.INFO
    assert verdict.alternatives == ["UJ"]


# =============================================================================
# BUDGET
# =============================================================================

def test_budget_gate_warns_but_never_blocks(engineering_career, aps_38_marks):
    student = _student(budget_limit="low", marks=aps_38_marks)

    verdict = evaluate_budget_gate(student, engineering_career)

    assert verdict.blocked is False
    assert verdict.severity == Severity.WARNING
    assert verdict.nsfas_eligible is True
    assert "NSFAS" in verdict.reason


def test_budget_gate_quiet_when_bursaries_listed(engineering_career):
    career = engineering_career.model_copy(update={"bursaries": ["sasol_engineering"]})
    assert evaluate_budget_gate(_student(budget_limit="low"), career).severity == Severity.INFO


def test_budget_gate_only_for_low_budget(engineering_career):
    assert evaluate_budget_gate(_student(budget_limit="medium"), engineering_career).reason == ""
    assert evaluate_budget_gate(_student(), engineering_career).reason == ""


def test_budget_gate_uses_mean_cost():
    career = _career(universities=[
        UniversityOffering(name="A", min_aps=20, annual_cost=50000),
        UniversityOffering(name="B", min_aps=20, annual_cost=20000),
    ])
    # mean 35000 is under the threshold
    assert evaluate_budget_gate(_student(budget_limit="low"), career).reason == ""


# =============================================================================
# DEADLINE
# =============================================================================

def test_deadline_gate_blocks_missing_subject_after_grade_10():
    student = _student(subjects=["Mathematics", "Life Sciences", "English", "History"])
    career = _career(name="Chemical Engineering", requires_physical_science=True,
                     required_subjects=["Physical Sciences"])

    verdict = evaluate_deadline_gate(student, career)

    assert verdict.blocked is True
    assert verdict.fixable is False
    assert "Accounting" in verdict.alternatives
    assert len(verdict.alternatives) <= 5


def test_deadline_gate_ignores_grade_10():
    student = _student(grade=10, subjects=["History"])
    assert evaluate_deadline_gate(student, _career(required_subjects=["Physical Sciences"])).blocked is False


# =============================================================================
# NBT / LANGUAGE / FUNDING / CATEGORY / GEOGRAPHIC
# =============================================================================

def test_nbt_gate_warns_in_grade_12_and_informs_earlier():
    career = _career(requires_nbt=True)
    grade_12 = evaluate_nbt_gate(_student(grade=12), career)
    grade_11 = evaluate_nbt_gate(_student(grade=11), career)

    assert grade_12.severity == Severity.WARNING
    assert grade_11.severity == Severity.INFO and grade_11.reason
    assert not grade_12.blocked and not grade_11.blocked
    assert evaluate_nbt_gate(_student(grade=12, has_written_nbt=True), career).reason == ""


def test_language_gate_blocks_when_gap_exceeds_20():
    career = _career(min_english_mark=75)

    blocked = evaluate_language_gate(_student(marks={"English Home Language": 50}), career)
    warned = evaluate_language_gate(_student(marks={"English": 55}), career)

    assert blocked.blocked is True and blocked.gap == 25
    assert warned.blocked is False and warned.severity == Severity.WARNING and warned.gap == 20


def test_language_gate_passes_without_english_mark():
    assert evaluate_language_gate(_student(), _career(min_english_mark=75)).blocked is False


def test_funding_awareness_gate():
    career = _career()
    unaware = _student(knows_about_nsfas=False, household_income=120000)
    aware = _student(knows_about_nsfas=True, household_income=120000)
    wealthy = _student(knows_about_nsfas=False, household_income=900000)

    verdict = evaluate_funding_awareness_gate(unaware, career)
    assert verdict.severity == Severity.WARNING
    assert verdict.nsfas_eligible is True
    assert verdict.blocked is False
    assert evaluate_funding_awareness_gate(aware, career).reason == ""
    assert evaluate_funding_awareness_gate(wealthy, career).reason == ""


def test_category_mismatch_blocks_healthcare_for_blood_dislike():
    career = _career(name="Medicine", category="Healthcare")
    verdict = evaluate_category_mismatch_gate(_student(dislikes=["Blood", "crowds"]), career)

    assert verdict.blocked is True
    assert verdict.severity == Severity.CRITICAL
    assert verdict.alternatives == ["Biomedical Engineering", "Health Informatics", "Pharmacology", "Medical Research"]


def test_category_mismatch_alternatives_are_static():
    healthcare = evaluate_category_mismatch_gate(
        _student(dislikes=["blood"]), _career(category="healthcare")
    )
    engineering = evaluate_category_mismatch_gate(
        _student(dislikes=["math"]), _career(category="engineering")
    )
    assert healthcare.alternatives == engineering.alternatives
    assert engineering.blocked is False


def test_category_mismatch_public_speaking_warns():
    verdict = evaluate_category_mismatch_gate(
        _student(dislikes=["public speaking"]), _career(category="law", requires_public_speaking=True)
    )
    assert verdict.severity == Severity.WARNING
    assert verdict.blocked is False


def test_geographic_gate_warns_outside_preferred_province():
    career = _career(universities=[UniversityOffering(name="UCT", min_aps=30, annual_cost=60000, province="Western Cape")])

    away = evaluate_geographic_gate(_student(location_preference="Gauteng"), career)
    home = evaluate_geographic_gate(_student(location_preference="western cape"), career)
    anywhere = evaluate_geographic_gate(_student(location_preference="anywhere"), career)

    assert away.severity == Severity.WARNING and not away.blocked
    assert "UCT (Western Cape)" in away.alternatives
    assert home.reason == ""
    assert anywhere.reason == ""


def test_default_gates_cover_every_kind_once():
    kinds = [gate.kind for gate in build_default_gates()]
    assert kinds == list(GateKind)
