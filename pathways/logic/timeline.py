"""
Timeline Planner

Derives the student's urgency phase and prioritised actions from grade
and an explicitly supplied date.
"""

from datetime import date
from typing import Dict, List, Tuple

from .contracts import TimelinePlan, UrgencyTier

# phase -> (urgency, headline, ordered actions)
PHASES: Dict[str, Tuple[UrgencyTier, str, List[str]]] = {
    "post-finals": (
        UrgencyTier.CRITICAL,
        "Finals complete - Focus on applications",
        [
            "Submit university applications NOW",
            "Apply for NSFAS immediately",
            "Prepare backup options",
        ],
    ),
    "finals-preparation": (
        UrgencyTier.CRITICAL,
        "Finals approaching - Optimize performance",
        [
            "Focus on final exam preparation",
            "Submit applications early",
            "Secure bursary applications",
        ],
    ),
    "decision-year": (
        UrgencyTier.HIGH,
        "1 year to finals - Critical decisions needed",
        [
            "Optimize subject performance",
            "Research university programs",
            "Start bursary applications",
        ],
    ),
    "exploration": (
        UrgencyTier.MEDIUM,
        "2+ years to finals - Build strong foundation",
        [
            "Focus on academic improvement",
            "Explore career options",
            "Build extracurricular profile",
        ],
    ),
}

# Grade 12 finals are written from November
FINALS_MONTH = 11


def phase_name(grade: int, now: date) -> str:
    if grade == 12:
        return "post-finals" if now.month >= FINALS_MONTH else "finals-preparation"
    if grade == 11:
        return "decision-year"
    return "exploration"


def phase_for(grade: int, now: date) -> TimelinePlan:
    """
    Build the timeline plan for a grade at a given date.

    Args:
        grade: 10, 11 or 12
        now: Current date, injected by the caller

    Returns:
        TimelinePlan with phase, urgency and ordered action items
    """
    name = phase_name(grade, now)
    urgency, headline, actions = PHASES[name]
    return TimelinePlan(
        grade=grade,
        phase=name,
        urgency=urgency,
        timeline=headline,
        action_items=list(actions),
        as_of=now.isoformat(),
    )
