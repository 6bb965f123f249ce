"""
Natural-language justification for a pattern under a given project context.
"""

from typing import List

from architecture_core.models import ArchitecturePattern, ProjectContext

FALLBACK_REASON = "Well-balanced architecture for your requirements"


def explain(pattern: ArchitecturePattern, project_context: ProjectContext) -> List[str]:
    """
    Explain how well a pattern fits the project context.

    Context warnings come first, in a fixed order, followed by positive callouts
    that depend on the pattern alone.

    Args:
        pattern: The pattern to justify
        project_context: Constraints supplied with the comparison request

    Returns:
        List[str]: One sentence per rule that fired; never empty
    """
    traits = pattern.characteristics
    reasons: List[str] = []

    # Team size
    if project_context.team_size == "small" and traits.team_size == "large":
        reasons.append("May be overkill for small team - consider simpler architecture")
    elif project_context.team_size == "large" and traits.team_size == "small":
        reasons.append("May not scale well with large team - consider more distributed approach")

    # Budget
    if project_context.budget == "low" and traits.cost == "high":
        reasons.append("High cost may not fit budget constraints")

    # Timeline
    if project_context.timeline == "short" and traits.time_to_market == "slow":
        reasons.append("May take too long to implement for tight timeline")

    # Scale
    if project_context.expected_scale == "high" and traits.scalability == "low":
        reasons.append("May not handle expected scale - consider more scalable architecture")

    # Complexity
    if project_context.complexity == "low" and traits.complexity == "high":
        reasons.append("May be too complex for simple requirements")

    # Positive aspects
    if traits.scalability == "high":
        reasons.append("Excellent scalability for future growth")
    if traits.maintainability == "high":
        reasons.append("High maintainability for long-term success")
    if traits.cost == "low":
        reasons.append("Cost-effective solution")

    return reasons or [FALLBACK_REASON]
