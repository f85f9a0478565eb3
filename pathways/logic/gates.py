"""
Gate Set

Ten independent eligibility checks. Each gate is a pure function of
(student, career) -> GateVerdict with no shared state; gates are tagged
with a GateKind and collected into an explicit, ordered tuple.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Tuple

from .contracts import (
    StudentProfile,
    CareerOption,
    GateVerdict,
    Severity,
    MathType,
    BudgetLimit,
)
from .constants import (
    MATHEMATICS,
    PHYSICAL_SCIENCES,
    LIFE_SCIENCES,
    ENGLISH,
    MATH_GAP_BLOCK_THRESHOLD,
    ENGLISH_GAP_BLOCK_THRESHOLD,
    BUDGET_MEAN_COST_THRESHOLD,
    NSFAS_INCOME_CEILING,
    SUBJECT_CHANGE_DEADLINE,
    NBT_DEADLINE,
    NSFAS_DEADLINE,
    ANYWHERE,
    MATH_LITERACY_ALTERNATIVES,
    LIFE_SCIENCES_ALTERNATIVES,
    NON_SCIENCE_ALTERNATIVES,
    APS_SHORTFALL_ALTERNATIVES,
    BUDGET_ALTERNATIVES,
    CATEGORY_MISMATCH_ALTERNATIVES,
    DISTANCE_LEARNING_OPTION,
    SUBJECT_PATHWAYS,
    MAX_PATHWAY_ALTERNATIVES,
    HEALTHCARE_CATEGORY,
    BLOOD_DISLIKE,
    PUBLIC_SPEAKING_DISLIKES,
    MATH_DISLIKES,
    MATH_HEAVY_CATEGORIES,
)
from .aps import projection_for_marks
from .subjects import normalize, has_subject, mark_for, student_mark


class GateKind(str, Enum):
    MATH = "math"
    SCIENCE = "science"
    APS = "aps"
    BUDGET = "budget"
    DEADLINE = "deadline"
    NBT = "nbt"
    LANGUAGE = "language"
    FUNDING_AWARENESS = "funding_awareness"
    CATEGORY_MISMATCH = "category_mismatch"
    GEOGRAPHIC = "geographic"


GateFn = Callable[[StudentProfile, CareerOption], GateVerdict]


@dataclass(frozen=True)
class Gate:
    """A tagged gate: its kind plus the pure function that evaluates it."""
    kind: GateKind
    evaluate: GateFn


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _dislikes(student: StudentProfile) -> List[str]:
    return [normalize(d) for d in student.dislikes if d and d.strip()]


def _format_gap(gap: float) -> str:
    return f"{gap:g}"


# =============================================================================
# GATES
# =============================================================================

def evaluate_math_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """
    Math stream and mark requirements.

    Math Literacy never satisfies a core-math career; switching stream is
    only possible in Grade 10. A mark shortfall blocks when the gap exceeds
    15 percentage points and warns otherwise.
    """
    gate = GateKind.MATH.value

    if student.math_type == MathType.MATH_LITERACY and career.requires_core_math:
        fixable = student.grade == 10
        return GateVerdict(
            gate=gate,
            blocked=True,
            severity=Severity.CRITICAL,
            reason=f"{career.name} requires Pure Mathematics; Math Literacy is not accepted",
            alternatives=list(MATH_LITERACY_ALTERNATIVES),
            fixable=fixable,
            deadline_hint=SUBJECT_CHANGE_DEADLINE if fixable else None,
        )

    math_mark = student_mark(student, MATHEMATICS)
    if career.min_math_mark is not None and math_mark is not None and math_mark < career.min_math_mark:
        gap = career.min_math_mark - math_mark
        if gap > MATH_GAP_BLOCK_THRESHOLD:
            return GateVerdict(
                gate=gate,
                blocked=True,
                severity=Severity.CRITICAL,
                reason=(
                    f"Mathematics mark {math_mark:g}% is {_format_gap(gap)}% below "
                    f"the {career.min_math_mark:g}% required for {career.name}"
                ),
                alternatives=[career.tvet_alternative] if career.tvet_alternative else [],
                fixable=student.grade < 12,
                gap=gap,
            )
        return GateVerdict(
            gate=gate,
            severity=Severity.WARNING,
            reason=(
                f"Mathematics mark {math_mark:g}% is {_format_gap(gap)}% below "
                f"the {career.min_math_mark:g}% required; improvement needed"
            ),
            gap=gap,
        )

    return GateVerdict.passed(gate)


def evaluate_science_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """Physical Sciences requirement; only addable in Grade 10."""
    gate = GateKind.SCIENCE.value

    if not career.requires_physical_science or has_subject(student.subjects, PHYSICAL_SCIENCES):
        return GateVerdict.passed(gate)

    fixable = student.grade == 10
    if has_subject(student.subjects, LIFE_SCIENCES):
        alternatives = list(LIFE_SCIENCES_ALTERNATIVES)
    else:
        alternatives = list(NON_SCIENCE_ALTERNATIVES)

    return GateVerdict(
        gate=gate,
        blocked=True,
        severity=Severity.CRITICAL,
        reason=f"{career.name} requires {PHYSICAL_SCIENCES}",
        alternatives=alternatives,
        fixable=fixable,
        deadline_hint=SUBJECT_CHANGE_DEADLINE if fixable else None,
    )


def evaluate_aps_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """
    Projected APS against every university offering (Grade 11+ only).

    Blocks when no offering is reachable; notes the qualifying universities
    when only some are.
    """
    gate = GateKind.APS.value

    if student.grade < 11 or not student.marks or not career.universities:
        return GateVerdict.passed(gate)

    projected = projection_for_marks(student.marks, student.grade)
    qualifying = [u for u in career.universities if projected.max >= u.min_aps]

    if not qualifying:
        lowest = min(u.min_aps for u in career.universities)
        gap = lowest - projected.max
        alternatives = [career.tvet_alternative] if career.tvet_alternative else []
        alternatives.extend(APS_SHORTFALL_ALTERNATIVES)
        return GateVerdict(
            gate=gate,
            blocked=True,
            severity=Severity.CRITICAL,
            reason=(
                f"Projected APS {projected.min}-{projected.max} is below the lowest "
                f"requirement ({lowest}) for {career.name}"
            ),
            alternatives=alternatives,
            fixable=student.grade == 11,
            gap=gap,
        )

    if len(qualifying) < len(career.universities):
        names = ", ".join(u.name for u in qualifying)
        return GateVerdict(
            gate=gate,
            severity=Severity.INFO,
            reason=f"Projected APS {projected.max} qualifies for: {names}",
            alternatives=[u.name for u in qualifying],
        )

    return GateVerdict.passed(gate)


def evaluate_budget_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """
    Affordability for low-budget students.

    Never blocks: an expensive career without listed
    bursaries only produces a warning pointing at NSFAS.
    """
    gate = GateKind.BUDGET.value

    if student.budget_limit != BudgetLimit.LOW or not career.universities:
        return GateVerdict.passed(gate)

    mean_cost = sum(u.annual_cost for u in career.universities) / len(career.universities)
    if mean_cost > BUDGET_MEAN_COST_THRESHOLD and not career.bursaries:
        alternatives = [career.tvet_alternative] if career.tvet_alternative else []
        alternatives.extend(BUDGET_ALTERNATIVES)
        return GateVerdict(
            gate=gate,
            blocked=False,
            severity=Severity.WARNING,
            reason=(
                f"Average annual cost R{mean_cost:,.0f} exceeds a low budget and no "
                f"bursaries are listed; you may qualify for NSFAS funding"
            ),
            alternatives=alternatives,
            nsfas_eligible=True,
            deadline_hint=NSFAS_DEADLINE,
        )

    return GateVerdict.passed(gate)


def _pathway_alternatives(subjects: Iterable[str]) -> List[str]:
    alternatives: List[str] = []
    for subject in subjects:
        for career_name in SUBJECT_PATHWAYS.get(normalize(subject), []):
            if career_name not in alternatives:
                alternatives.append(career_name)
    return alternatives[:MAX_PATHWAY_ALTERNATIVES]


def evaluate_deadline_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """Required subjects after Grade 10, when subject changes are closed."""
    gate = GateKind.DEADLINE.value

    if student.grade <= 10 or not career.required_subjects:
        return GateVerdict.passed(gate)

    missing = [s for s in career.required_subjects if not has_subject(student.subjects, s)]
    if not missing:
        return GateVerdict.passed(gate)

    return GateVerdict(
        gate=gate,
        blocked=True,
        severity=Severity.CRITICAL,
        reason=(
            f"Missing required subject(s) for {career.name}: {', '.join(missing)}. "
            f"Subjects cannot be added after Grade 10"
        ),
        alternatives=_pathway_alternatives(student.subjects),
        fixable=False,
    )


def evaluate_nbt_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    gate = GateKind.NBT.value

    if not career.requires_nbt or student.has_written_nbt:
        return GateVerdict.passed(gate)

    if student.grade == 12:
        return GateVerdict(
            gate=gate,
            severity=Severity.WARNING,
            reason=f"{career.name} requires the National Benchmark Test (NBT)",
            deadline_hint=NBT_DEADLINE,
        )
    return GateVerdict(
        gate=gate,
        severity=Severity.INFO,
        reason=f"{career.name} will require the NBT in Grade 12",
        deadline_hint=NBT_DEADLINE,
    )


def evaluate_language_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """English mark requirement; blocks when the gap exceeds 20."""
    gate = GateKind.LANGUAGE.value

    if career.min_english_mark is None:
        return GateVerdict.passed(gate)

    english_mark = mark_for(student.marks, ENGLISH)
    if english_mark is None or english_mark >= career.min_english_mark:
        return GateVerdict.passed(gate)

    gap = career.min_english_mark - english_mark
    if gap > ENGLISH_GAP_BLOCK_THRESHOLD:
        return GateVerdict(
            gate=gate,
            blocked=True,
            severity=Severity.CRITICAL,
            reason=(
                f"English mark {english_mark:g}% is {_format_gap(gap)}% below "
                f"the {career.min_english_mark:g}% required for {career.name}"
            ),
            alternatives=[career.tvet_alternative] if career.tvet_alternative else [],
            fixable=student.grade < 12,
            gap=gap,
        )
    return GateVerdict(
        gate=gate,
        severity=Severity.WARNING,
        reason=f"English mark is {_format_gap(gap)}% below the requirement for {career.name}",
        gap=gap,
    )


def evaluate_funding_awareness_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    gate = GateKind.FUNDING_AWARENESS.value

    if student.knows_about_nsfas:
        return GateVerdict.passed(gate)

    low_income = (
        student.household_income is not None
        and student.household_income <= NSFAS_INCOME_CEILING
    )
    if low_income or student.budget_limit == BudgetLimit.LOW:
        return GateVerdict(
            gate=gate,
            severity=Severity.WARNING,
            reason=(
                "You may qualify for NSFAS, which covers tuition and allowances "
                f"for households earning up to R{NSFAS_INCOME_CEILING:,}"
            ),
            nsfas_eligible=True,
            deadline_hint=NSFAS_DEADLINE,
        )

    return GateVerdict.passed(gate)


def evaluate_category_mismatch_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    """Conflicts between the career's category and the student's dislikes."""
    gate = GateKind.CATEGORY_MISMATCH.value
    dislikes = _dislikes(student)
    if not dislikes:
        return GateVerdict.passed(gate)

    category = normalize(career.category)

    if category == HEALTHCARE_CATEGORY and BLOOD_DISLIKE in dislikes:
        return GateVerdict(
            gate=gate,
            blocked=True,
            severity=Severity.CRITICAL,
            reason=f"{career.name} involves regular contact with blood, which you listed as a dislike",
            alternatives=list(CATEGORY_MISMATCH_ALTERNATIVES),
            fixable=False,
        )

    if career.requires_public_speaking and any(d in PUBLIC_SPEAKING_DISLIKES for d in dislikes):
        return GateVerdict(
            gate=gate,
            severity=Severity.WARNING,
            reason=f"{career.name} involves regular public speaking",
            alternatives=list(CATEGORY_MISMATCH_ALTERNATIVES),
        )

    if category in MATH_HEAVY_CATEGORIES and any(d in MATH_DISLIKES for d in dislikes):
        return GateVerdict(
            gate=gate,
            severity=Severity.WARNING,
            reason=f"{career.name} relies heavily on mathematics, which you listed as a dislike",
            alternatives=list(CATEGORY_MISMATCH_ALTERNATIVES),
        )

    return GateVerdict.passed(gate)


def evaluate_geographic_gate(student: StudentProfile, career: CareerOption) -> GateVerdict:
    gate = GateKind.GEOGRAPHIC.value
    preference = normalize(student.location_preference)

    if preference == ANYWHERE or not career.universities:
        return GateVerdict.passed(gate)

    if any(normalize(u.province) == preference for u in career.universities):
        return GateVerdict.passed(gate)

    alternatives = [f"{u.name} ({u.province})" for u in career.universities]
    alternatives.append(DISTANCE_LEARNING_OPTION)
    return GateVerdict(
        gate=gate,
        severity=Severity.WARNING,
        reason=f"No university offering {career.name} in {student.location_preference}",
        alternatives=alternatives,
    )


def build_default_gates() -> Tuple[Gate, ...]:
    """Construct the standard ten-gate set, in evaluation order."""
    return (
        Gate(GateKind.MATH, evaluate_math_gate),
        Gate(GateKind.SCIENCE, evaluate_science_gate),
        Gate(GateKind.APS, evaluate_aps_gate),
        Gate(GateKind.BUDGET, evaluate_budget_gate),
        Gate(GateKind.DEADLINE, evaluate_deadline_gate),
        Gate(GateKind.NBT, evaluate_nbt_gate),
        Gate(GateKind.LANGUAGE, evaluate_language_gate),
        Gate(GateKind.FUNDING_AWARENESS, evaluate_funding_awareness_gate),
        Gate(GateKind.CATEGORY_MISMATCH, evaluate_category_mismatch_gate),
        Gate(GateKind.GEOGRAPHIC, evaluate_geographic_gate),
    )
