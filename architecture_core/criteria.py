"""
Fixed comparison criteria and their weights.

The weights must sum to 1.0; this is checked when the module is imported.
"""

import math
from typing import List

from architecture_core.models import ComparisonCriterion


CRITERIA: List[ComparisonCriterion] = [
    ComparisonCriterion(
        id="scalability",
        name="Scalability",
        description="Ability to handle increased load",
        weight=0.20,
        category="technical",
    ),
    ComparisonCriterion(
        id="maintainability",
        name="Maintainability",
        description="Ease of maintaining and updating",
        weight=0.15,
        category="technical",
    ),
    ComparisonCriterion(
        id="performance",
        name="Performance",
        description="Response time and throughput",
        weight=0.15,
        category="technical",
    ),
    ComparisonCriterion(
        id="cost",
        name="Cost",
        description="Development and operational costs",
        weight=0.15,
        category="business",
    ),
    ComparisonCriterion(
        id="complexity",
        name="Complexity",
        description="Implementation and operational complexity",
        weight=0.10,
        category="technical",
    ),
    ComparisonCriterion(
        id="timeToMarket",
        name="Time to Market",
        description="Speed of development and deployment",
        weight=0.10,
        category="business",
    ),
    ComparisonCriterion(
        id="teamSize",
        name="Team Size",
        description="Required team size and skills",
        weight=0.10,
        category="operational",
    ),
    ComparisonCriterion(
        id="security",
        name="Security",
        description="Security features and considerations",
        weight=0.05,
        category="technical",
    ),
]

# Criteria where a lower qualitative level is the better one
LOWER_IS_BETTER = frozenset({"cost", "complexity"})

# Criterion id -> attribute on models.Characteristics
CHARACTERISTIC_FIELDS = {
    "scalability": "scalability",
    "maintainability": "maintainability",
    "performance": "performance",
    "cost": "cost",
    "complexity": "complexity",
    "timeToMarket": "time_to_market",
    "teamSize": "team_size",
    "security": "security",
}


def _check_weights(criteria: List[ComparisonCriterion]) -> None:
    total = sum(criterion.weight for criterion in criteria)
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"Comparison criteria weights must sum to 1.0, got {total}")
    ids = [criterion.id for criterion in criteria]
    if len(set(ids)) != len(ids):
        raise ValueError("Comparison criteria ids must be unique")


_check_weights(CRITERIA)


def list_criteria() -> List[ComparisonCriterion]:
    """Return a copy of the fixed comparison criteria, in weighting order."""
    return [criterion.model_copy() for criterion in CRITERIA]
