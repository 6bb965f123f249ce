"""
Comparison orchestrator.

Retrieves patterns from the catalog, ranks them and builds the recommendation
block with reasoning for the winner and up to two alternatives. The only I/O is
the catalog read; everything after that is pure computation.
"""

from typing import Iterable, List, Optional

from architecture_core.catalog import PatternCatalog
from architecture_core.errors import NotFoundError, ValidationError
from architecture_core.logger import info
from architecture_core.models import (
    Alternative,
    ArchitecturePattern,
    ComparisonResult,
    PatternFilter,
    ProjectContext,
    Recommendation,
)
from architecture_core.reasoning import explain
from architecture_core.scoring import rank

MAX_ALTERNATIVES = 2


async def list_patterns(
    catalog: PatternCatalog, pattern_filter: Optional[PatternFilter] = None
) -> List[ArchitecturePattern]:
    """List catalog patterns, optionally restricted by category, complexity or scalability."""
    return await catalog.find_all_patterns(pattern_filter)


async def get_pattern(catalog: PatternCatalog, pattern_id: str) -> ArchitecturePattern:
    """
    Fetch a single pattern.

    Raises:
        NotFoundError: If no pattern has this id
    """
    pattern = await catalog.get_pattern(pattern_id)
    if pattern is None:
        raise NotFoundError([pattern_id])
    return pattern


async def compare(
    catalog: PatternCatalog,
    pattern_ids: Iterable[str],
    project_context: ProjectContext,
) -> ComparisonResult:
    """
    Compare architecture patterns for a project.

    Args:
        catalog: Where the patterns are read from
        pattern_ids: Ids of the patterns to compare; duplicates are ignored
        project_context: Project constraints used for the reasoning text

    Returns:
        ComparisonResult: Ranked patterns, recommendation and the echoed context

    Raises:
        ValidationError: If fewer than two distinct ids are given
        NotFoundError: If any id is not in the catalog (lists every missing id)
        DataIntegrityError: If a stored pattern cannot be scored
    """
    requested = list(dict.fromkeys(pattern_ids))
    if len(requested) < 2:
        raise ValidationError("At least 2 patterns must be selected for comparison")

    patterns = await catalog.find_patterns_by_id(requested)

    found_ids = {pattern.id for pattern in patterns}
    missing = [pattern_id for pattern_id in requested if pattern_id not in found_ids]
    if missing:
        raise NotFoundError(missing)

    # Rank in request order so ties favour the pattern the caller listed first
    by_id = {pattern.id: pattern for pattern in patterns}
    ranked = rank([by_id[pattern_id] for pattern_id in requested])

    best = ranked[0]
    recommendation = Recommendation(
        best_pattern=best,
        reasoning=explain(best, project_context),
        alternatives=[
            Alternative(pattern=alternative, reasoning=explain(alternative, project_context))
            for alternative in ranked[1:1 + MAX_ALTERNATIVES]
        ],
    )

    info(
        "Compared architecture patterns",
        pattern_ids=requested,
        best_pattern=best.id,
        weighted_score=best.weighted_score,
    )

    return ComparisonResult(
        patterns=ranked,
        recommendation=recommendation,
        project_context=project_context,
    )
