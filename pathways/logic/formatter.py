"""
Recommendation Formatter

Renders a RecommendationSet as plain-text context for downstream
text-generation and report layers.
"""

from typing import List

from .composer import RecommendationResult
from .contracts import RecommendationSet

FALLBACK_GUIDANCE = (
    "Unable to generate specific program recommendations. Provide general guidance."
)


def format_recommendations(result: RecommendationResult) -> str:
    """
    Format recommendations as a context block.

    Args:
        result: Output of the composer

    Returns:
        Multi-line summary, or the generic-guidance sentence for a failure
    """
    if not isinstance(result, RecommendationSet) or not result.success:
        return FALLBACK_GUIDANCE

    aps = result.aps
    timeline = result.timeline
    lines: List[str] = [
        "STUDENT APS DATA:",
        f"- Current APS: {aps.current}",
        f"- Projected APS: {aps.projected.min}-{aps.projected.max}",
        f"- University Eligible: {'Yes' if aps.university_eligible else 'No'}",
        "",
        "TIMELINE CONTEXT:",
        f"- Phase: {timeline.phase}",
        f"- Urgency: {timeline.urgency}",
        f"- Timeline: {timeline.timeline}",
        "",
        "CAREER GATES:",
        f"- Eligible: {result.career_summary.eligible} of {result.career_summary.total}",
    ]

    for assessment in result.blocked_careers:
        reasons = "; ".join(block.reason for block in assessment.critical_blocks)
        lines.append(f"- BLOCKED {assessment.career_name}: {reasons}")

    lines.append("")
    lines.append("SPECIFIC PROGRAM MATCHES:")
    for index, program in enumerate(result.ranked_programs, 1):
        lines.extend([
            f"{index}. {program.program} at {program.university}",
            f"   - APS Required: {program.aps_required} "
            f"(Student projected: {aps.projected.min}-{aps.projected.max})",
            f"   - Admission Chance: {program.admission_probability}%",
            f"   - Application Deadline: {program.application_deadline}",
            f"   - Feasibility: {program.feasibility}",
        ])

    lines.append("")
    lines.append("ELIGIBLE BURSARIES:")
    for index, bursary in enumerate(result.ranked_bursaries, 1):
        lines.extend([
            f"{index}. {bursary.name}: {bursary.amount}",
            f"   - Eligibility: {bursary.match_percentage}% match",
            f"   - Deadline: {bursary.deadline} ({bursary.urgency})",
            f"   - Reasons: {', '.join(bursary.eligibility_reasons)}",
        ])

    lines.append("")
    lines.append("PRIORITY ACTIONS:")
    lines.extend(f"- {item}" for item in timeline.action_items)

    return "\n".join(lines)
