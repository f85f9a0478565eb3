"""
Data Contracts for the Pathways Recommendation Core

Defines Pydantic models for StudentProfile and CareerCatalog (input),
the intermediate gate/assessment structures, and RecommendationSet /
FailureResult (output). These contracts are the API boundary for the core.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from enum import Enum

from .constants import VALID_GRADES, ANYWHERE, ENGINE_VERSION
from .subjects import as_percentage


# =============================================================================
# ENUMS
# =============================================================================

class MathType(str, Enum):
    """Mathematics stream the student is registered for."""
    PURE_MATH = "Pure Mathematics"
    MATH_LITERACY = "Math Literacy"


class BudgetLimit(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Severity(str, Enum):
    """Severity of a single gate verdict."""
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"


class UrgencyTier(str, Enum):
    INFO = "INFO"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentProfile(BaseModel):
    """
    Input contract for the recommendation core.
    Assembled upstream from questionnaire input; malformed optional
    fields are normalised to "no constraint" rather than rejected.
    """
    # Identity (optional, for tracking)
    student_id: Optional[str] = None

    # Academic Background
    grade: int
    math_type: MathType = MathType.PURE_MATH
    math_mark: Optional[float] = None
    subjects: List[str] = Field(default_factory=list)
    marks: Dict[str, float] = Field(default_factory=dict)

    # Constraints
    budget_limit: Optional[BudgetLimit] = None
    location_preference: str = ANYWHERE
    dislikes: List[str] = Field(default_factory=list)
    household_income: Optional[float] = None
    first_generation: bool = False

    # Awareness
    knows_about_nsfas: bool = False
    has_written_nbt: bool = False

    # Free text
    career_interest_text: Optional[str] = None

    class Config:
        use_enum_values = True

    @field_validator("grade")
    @classmethod
    def _check_grade(cls, value: int) -> int:
        if value not in VALID_GRADES:
            raise ValueError(f"grade must be one of {VALID_GRADES}, got {value}")
        return value

    @field_validator("math_mark", mode="before")
    @classmethod
    def _normalise_math_mark(cls, value: Any) -> Optional[float]:
        return as_percentage(value)

    @field_validator("marks", mode="before")
    @classmethod
    def _drop_invalid_marks(cls, value: Any) -> Dict[str, float]:
        if not isinstance(value, dict):
            return {}
        cleaned: Dict[str, float] = {}
        for subject, mark in value.items():
            percentage = as_percentage(mark)
            if percentage is not None:
                cleaned[str(subject)] = percentage
        return cleaned

    @field_validator("household_income", mode="before")
    @classmethod
    def _normalise_income(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            income = float(value)
        except (TypeError, ValueError):
            return None
        return income if income >= 0 else None

    @field_validator("location_preference", mode="before")
    @classmethod
    def _default_location(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            return ANYWHERE
        return value.strip()

    @field_validator("student_id", "career_interest_text", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("math_type", mode="before")
    @classmethod
    def _normalise_math_type(cls, value: Any) -> MathType:
        for member in MathType:
            if value == member or (isinstance(value, str) and value.strip().lower() == member.value.lower()):
                return member
        return MathType.PURE_MATH

    @field_validator("budget_limit", mode="before")
    @classmethod
    def _normalise_budget(cls, value: Any) -> Optional[BudgetLimit]:
        for member in BudgetLimit:
            if value == member or (isinstance(value, str) and value.strip().lower() == member.value):
                return member
        return None

    @field_validator("subjects", "dislikes", mode="before")
    @classmethod
    def _string_entries(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [entry for entry in value if isinstance(entry, str)]

    @field_validator("first_generation", "knows_about_nsfas", "has_written_nbt", mode="before")
    @classmethod
    def _strict_flag(cls, value: Any) -> bool:
        return value if isinstance(value, bool) else False


class UniversityOffering(BaseModel):
    """A university offering a career's qualification."""
    name: str
    min_aps: int
    annual_cost: float
    province: str = ""


class CareerOption(BaseModel):
    """A career from the catalog together with its entry requirements."""
    id: str
    name: str
    category: str
    requires_core_math: bool = False
    min_math_mark: Optional[float] = None
    requires_physical_science: bool = False
    min_english_mark: Optional[float] = None
    required_subjects: List[str] = Field(default_factory=list)
    requires_public_speaking: bool = False
    requires_nbt: bool = False
    universities: List[UniversityOffering] = Field(default_factory=list)
    bursaries: List[str] = Field(default_factory=list)
    tvet_alternative: Optional[str] = None


class BursaryDefinition(BaseModel):
    """A funding option and its eligibility thresholds."""
    id: str
    name: str
    amount: str
    min_aps: int = 0
    income_ceiling: Optional[float] = None
    needs_based: bool = False
    career_fields: List[str] = Field(default_factory=list)
    subject_requirements: Dict[str, float] = Field(default_factory=dict)
    deadline: str = ""
    urgency: UrgencyTier = UrgencyTier.INFO
    application_url: Optional[str] = None

    class Config:
        use_enum_values = True


class ProgramOffering(BaseModel):
    """A single University x Program entry."""
    university: str
    program: str
    aps_required: int
    category: str
    subject_requirements: List[str] = Field(default_factory=list)
    application_deadline: str = ""
    duration: str = ""
    career_id: Optional[str] = None


class CareerCatalog(BaseModel):
    """Read-only snapshot of careers, programs and bursaries for one request."""
    careers: List[CareerOption] = Field(default_factory=list)
    programs: List[ProgramOffering] = Field(default_factory=list)
    bursaries: List[BursaryDefinition] = Field(default_factory=list)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class GateVerdict(BaseModel):
    """Outcome of one gate for one (student, career) pair."""
    gate: str
    blocked: bool = False
    severity: Severity = Severity.INFO
    reason: str = ""
    alternatives: List[str] = Field(default_factory=list)
    fixable: bool = False
    gap: Optional[float] = None
    deadline_hint: Optional[str] = None
    nsfas_eligible: Optional[bool] = None

    class Config:
        use_enum_values = True

    @classmethod
    def passed(cls, gate: str) -> "GateVerdict":
        """Verdict for a gate that found nothing to report."""
        return cls(gate=gate)


class CareerAssessment(BaseModel):
    """Aggregated gate verdicts for one career."""
    career_id: str
    career_name: str
    category: str
    blocked: bool = False
    critical_blocks: List[GateVerdict] = Field(default_factory=list)
    warnings: List[GateVerdict] = Field(default_factory=list)
    notes: List[GateVerdict] = Field(default_factory=list)


class CatalogFilterResult(BaseModel):
    """Catalog partitioned into eligible and blocked careers."""
    eligible: List[CareerAssessment] = Field(default_factory=list)
    blocked: List[CareerAssessment] = Field(default_factory=list)
    total: int = 0
    eligible_count: int = 0
    blocked_count: int = 0


class ProjectedAPS(BaseModel):
    min: int
    max: int
    current: int


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ApsSummary(BaseModel):
    current: int
    projected: ProjectedAPS
    university_eligible: bool


class ProgramMatch(BaseModel):
    """A ranked university program with admission likelihood."""
    university: str
    program: str
    category: str
    aps_required: int
    projected_aps: ProjectedAPS
    admission_probability: int
    feasibility: str
    subject_requirements: List[str] = Field(default_factory=list)
    application_deadline: str = ""
    duration: str = ""
    career_id: Optional[str] = None


class BursaryMatch(BaseModel):
    """A ranked funding option with its eligibility score."""
    id: str
    name: str
    amount: str
    deadline: str = ""
    urgency: UrgencyTier = UrgencyTier.INFO
    application_url: Optional[str] = None
    eligibility_score: int = Field(ge=0, le=100)
    eligibility_reasons: List[str] = Field(default_factory=list)
    match_percentage: int = Field(ge=0, le=100)

    class Config:
        use_enum_values = True


class TimelinePlan(BaseModel):
    """Grade-appropriate urgency phase and prioritised actions."""
    grade: int
    phase: str
    urgency: UrgencyTier
    timeline: str
    action_items: List[str] = Field(default_factory=list)
    as_of: str

    class Config:
        use_enum_values = True


class CareerSummary(BaseModel):
    total: int = 0
    eligible: int = 0
    blocked: int = 0


class RecommendationMetadata(BaseModel):
    total_programs_found: int = 0
    total_bursaries_found: int = 0
    generated_at: str
    engine_version: str = ENGINE_VERSION


class RecommendationSet(BaseModel):
    """
    Output contract for the recommendation core.
    Created fresh per request and immutable once returned.
    """
    success: bool = True
    student_id: Optional[str] = None
    aps: ApsSummary
    timeline: TimelinePlan
    eligible_careers: List[CareerAssessment] = Field(default_factory=list)
    blocked_careers: List[CareerAssessment] = Field(default_factory=list)
    career_summary: CareerSummary = Field(default_factory=CareerSummary)
    ranked_programs: List[ProgramMatch] = Field(default_factory=list)
    ranked_bursaries: List[BursaryMatch] = Field(default_factory=list)
    metadata: RecommendationMetadata

    class Config:
        frozen = True


class FailureResult(BaseModel):
    """Structured failure; callers fall back to generic guidance."""
    success: bool = False
    error: str
    fallback: bool = True

    class Config:
        frozen = True
