"""
Scoring and ranking of architecture patterns.

This module converts the qualitative characteristics of a pattern into ordinal
scores, combines them with the fixed criterion weights and ranks patterns,
operating entirely in memory without catalog dependencies.
"""

from typing import Dict, List, Sequence

from architecture_core.criteria import CHARACTERISTIC_FIELDS, CRITERIA, LOWER_IS_BETTER
from architecture_core.errors import DataIntegrityError, InsufficientInputError
from architecture_core.models import ArchitecturePattern, ScoredPattern

ORDINAL_SCORES: Dict[str, int] = {
    "low": 1,
    "small": 1,
    "fast": 1,
    "medium": 2,
    "high": 3,
    "large": 3,
    "slow": 3,
}

_DEFAULT_DOMAIN = ("low", "medium", "high")
_FIELD_DOMAINS = {
    "team_size": ("small", "medium", "large"),
    "time_to_market": ("fast", "medium", "slow"),
}

# Equal totals must compare equal regardless of summation order
_SCORE_PRECISION = 10


def score(pattern: ArchitecturePattern, criterion_id: str) -> int:
    """
    Score one pattern against one criterion.

    Args:
        pattern: The pattern to score
        criterion_id: Id of a comparison criterion (e.g. "scalability", "timeToMarket")

    Returns:
        int: 1, 2 or 3. Inverted for criteria where lower is better (cost, complexity).

    Raises:
        ValueError: If criterion_id is not a known criterion
        DataIntegrityError: If the characteristic is missing or holds an unknown level
    """
    field = CHARACTERISTIC_FIELDS.get(criterion_id)
    if field is None:
        raise ValueError(f"Unknown comparison criterion: {criterion_id}")

    level = getattr(pattern.characteristics, field, None)
    if level is None:
        raise DataIntegrityError(
            f"Pattern '{pattern.id}' is missing characteristic '{criterion_id}'"
        )

    if level not in _FIELD_DOMAINS.get(field, _DEFAULT_DOMAIN):
        raise DataIntegrityError(
            f"Pattern '{pattern.id}' has unrecognised {criterion_id} level: {level!r}"
        )

    ordinal = ORDINAL_SCORES[level]
    if criterion_id in LOWER_IS_BETTER:
        return 4 - ordinal
    return ordinal


def score_breakdown(pattern: ArchitecturePattern) -> Dict[str, int]:
    """Return the score of a pattern for every fixed criterion."""
    return {criterion.id: score(pattern, criterion.id) for criterion in CRITERIA}


def weighted_score(pattern: ArchitecturePattern) -> float:
    """
    Calculate the weighted score of a pattern across all criteria.

    Returns:
        float: Between 1.0 (worst on every criterion) and 3.0 (best on every criterion)
    """
    total = sum(score(pattern, criterion.id) * criterion.weight for criterion in CRITERIA)
    return round(total, _SCORE_PRECISION)


def rank(patterns: Sequence[ArchitecturePattern]) -> List[ScoredPattern]:
    """
    Score and rank patterns, best first.

    Patterns with equal weighted scores keep their input order.

    Args:
        patterns: At least two patterns to compare

    Returns:
        List[ScoredPattern]: Every input pattern with its weighted score and
        per-criterion scores, in ranked order

    Raises:
        InsufficientInputError: If fewer than two patterns are given
    """
    if len(patterns) < 2:
        raise InsufficientInputError(
            f"At least 2 patterns are required for ranking, got {len(patterns)}"
        )

    scored = [
        ScoredPattern.model_validate({
            **pattern.model_dump(),
            "weighted_score": weighted_score(pattern),
            "scores": score_breakdown(pattern),
        })
        for pattern in patterns
    ]

    # sorted() is stable, including with reverse=True
    return sorted(scored, key=lambda p: p.weighted_score, reverse=True)
