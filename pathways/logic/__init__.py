"""
Pathways Logic Module

Provides the deterministic core that filters careers through eligibility
gates and ranks university programs and bursaries for a student.
"""

from .contracts import (
    StudentProfile,
    CareerOption,
    UniversityOffering,
    BursaryDefinition,
    ProgramOffering,
    CareerCatalog,
    GateVerdict,
    CareerAssessment,
    CatalogFilterResult,
    ProjectedAPS,
    ProgramMatch,
    BursaryMatch,
    TimelinePlan,
    RecommendationSet,
    FailureResult,
    MathType,
    BudgetLimit,
    Severity,
    UrgencyTier,
)
from .aps import compute_aps, project_final_aps
from .admission import admission_probability, feasibility_label
from .interest_classifier import classify_interests
from .gates import Gate, GateKind, build_default_gates
from .orchestrator import GateOrchestrator
from .program_matcher import match_programs
from .bursary_matcher import match_bursaries, score_bursary
from .timeline import phase_for
from .composer import RecommendationComposer, generate_recommendations
from .formatter import format_recommendations
from .catalog import load_default_catalog

__all__ = [
    # Main entry point
    "RecommendationComposer",
    "generate_recommendations",
    "format_recommendations",
    "load_default_catalog",

    # Components
    "GateOrchestrator",
    "Gate",
    "GateKind",
    "build_default_gates",
    "compute_aps",
    "project_final_aps",
    "admission_probability",
    "feasibility_label",
    "classify_interests",
    "match_programs",
    "match_bursaries",
    "score_bursary",
    "phase_for",

    # Contracts
    "StudentProfile",
    "CareerOption",
    "UniversityOffering",
    "BursaryDefinition",
    "ProgramOffering",
    "CareerCatalog",
    "GateVerdict",
    "CareerAssessment",
    "CatalogFilterResult",
    "ProjectedAPS",
    "ProgramMatch",
    "BursaryMatch",
    "TimelinePlan",
    "RecommendationSet",
    "FailureResult",

    # Enums
    "MathType",
    "BudgetLimit",
    "Severity",
    "UrgencyTier",
]
