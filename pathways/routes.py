"""
Pathways API Routes

Exposes the recommendation composer via REST API.
Endpoints: POST /pathways/recommendations, GET /pathways/catalog
"""

import logging
from datetime import date
from typing import Optional, Dict, Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError

from . import config
from .logic.contracts import StudentProfile, CareerCatalog
from .logic.catalog import load_default_catalog
from .logic.constants import ENGINE_VERSION
from .logic.composer import RecommendationComposer
from .logic.formatter import format_recommendations
from .logic.gates import build_default_gates
from .logic.orchestrator import GateOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pathways", tags=["pathways"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    student_profile: Dict[str, Any] = Field(
        ...,
        description="Student profile assembled from the questionnaire",
        examples=[{
            "grade": 11,
            "math_type": "Pure Mathematics",
            "subjects": ["Mathematics", "Physical Sciences", "English"],
            "marks": {"Mathematics": 72, "Physical Sciences": 68, "English": 75},
            "budget_limit": "low",
            "career_interest_text": "I want to become an engineer",
        }]
    )
    catalog: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Career/program/bursary catalog; the seed catalog is used when omitted"
    )
    as_of: Optional[date] = Field(
        default=None,
        description="Date the plan is computed for (defaults to today)"
    )
    include_summary: bool = Field(
        default=False,
        description="Include a plain-text summary of the recommendations"
    )


def get_composer() -> RecommendationComposer:
    """Build a composer from the configured gate set."""
    orchestrator = GateOrchestrator(build_default_gates(), max_workers=config.MAX_WORKERS)
    return RecommendationComposer(
        orchestrator,
        max_programs=config.TOP_PROGRAMS,
        max_bursaries=config.TOP_BURSARIES,
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/recommendations", summary="Get career pathway recommendations")
def get_recommendations(
    request: RecommendationRequest,
    composer: RecommendationComposer = Depends(get_composer)
):
    """
    Generate personalised career pathway recommendations.

    **Request Body:**
    - `student_profile`: Student's grade, subjects, marks and constraints
    - `catalog`: Optional catalog snapshot (seed catalog otherwise)
    - `as_of`: Optional date for the timeline (today otherwise)
    - `include_summary`: Include a plain-text summary

    **Response:**
    - Eligible and blocked careers with gate verdicts
    - Ranked university programs and bursaries
    - Timeline phase and action items
    - Or `success: false, fallback: true` when recommendations could not be built
    """
    # Parse student profile
    try:
        profile = StudentProfile(**request.student_profile)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid student profile: {str(e)}"
        )

    catalog = request.catalog if request.catalog is not None else load_default_catalog()
    as_of = request.as_of or date.today()

    result = composer.compose(profile, catalog, as_of, timeout=config.GATE_TIMEOUT_SECONDS)

    if not result.success:
        logger.warning(f"⚠️ Falling back to generic guidance: {result.error}")

    response_data = result.model_dump(mode="json")
    if request.include_summary:
        response_data["summary"] = format_recommendations(result)
    return response_data


@router.get("/catalog", summary="Seed career catalog")
def get_catalog() -> CareerCatalog:
    return load_default_catalog()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Pathways engine health check")
def health_check():
    """Check if the pathways engine is operational."""
    return {"status": "ok", "engine": "pathways", "version": ENGINE_VERSION}
