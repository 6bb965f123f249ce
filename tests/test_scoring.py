"""Tests for pattern scoring and ranking."""

import itertools

import pytest

from architecture_core.criteria import CRITERIA, list_criteria
from architecture_core.errors import DataIntegrityError, InsufficientInputError, ValidationError
from architecture_core.models import ArchitecturePattern, Characteristics
from architecture_core.scoring import rank, score, score_breakdown, weighted_score

from conftest import build_pattern


# ---- Criteria ----

def test_criteria_weights_sum_to_one() -> None:
    """The eight fixed criteria carry weights that sum to 1.0."""
    criteria = list_criteria()
    assert len(criteria) == 8
    assert sum(c.weight for c in criteria) == pytest.approx(1.0)


def test_criteria_weights() -> None:
    """Each criterion has its fixed weight."""
    weights = {c.id: c.weight for c in list_criteria()}
    assert weights == {
        "scalability": 0.20,
        "maintainability": 0.15,
        "performance": 0.15,
        "cost": 0.15,
        "complexity": 0.10,
        "timeToMarket": 0.10,
        "teamSize": 0.10,
        "security": 0.05,
    }


def test_list_criteria_returns_copies() -> None:
    """Mutating the returned criteria does not touch the fixed table."""
    criteria = list_criteria()
    criteria[0].weight = 0.99
    assert CRITERIA[0].weight == 0.20


# ---- Scoring Function ----

@pytest.mark.parametrize(
    "criterion, trait, level, expected",
    [
        ("scalability", "scalability", "low", 1),
        ("scalability", "scalability", "medium", 2),
        ("scalability", "scalability", "high", 3),
        ("teamSize", "teamSize", "small", 1),
        ("teamSize", "teamSize", "large", 3),
        ("timeToMarket", "timeToMarket", "fast", 1),
        ("timeToMarket", "timeToMarket", "slow", 3),
        ("security", "security", "high", 3),
    ],
)
def test_ordinal_scores(criterion: str, trait: str, level: str, expected: int) -> None:
    """Qualitative levels map to ordinal scores 1-3."""
    pattern = build_pattern("p", **{trait: level})
    assert score(pattern, criterion) == expected


@pytest.mark.parametrize("criterion", ["cost", "complexity"])
@pytest.mark.parametrize(
    "level, expected",
    [("low", 3), ("medium", 2), ("high", 1)],
    ids=["low", "medium", "high"],
)
def test_lower_is_better_criteria_are_inverted(criterion: str, level: str, expected: int) -> None:
    """For cost and complexity a low level is the best score."""
    pattern = build_pattern("p", **{criterion: level})
    assert score(pattern, criterion) == expected


def test_slow_time_to_market_is_not_inverted() -> None:
    """Slow time to market scores 3; only cost and complexity are inverted."""
    slow = build_pattern("slow", timeToMarket="slow")
    fast = build_pattern("fast", timeToMarket="fast")
    assert score(slow, "timeToMarket") > score(fast, "timeToMarket")


def test_missing_security_level_is_a_data_error() -> None:
    """Scoring never defaults a missing characteristic."""
    pattern = build_pattern("p")
    pattern.characteristics.security = None
    with pytest.raises(DataIntegrityError, match="security"):
        score(pattern, "security")


def test_unrecognised_level_is_a_data_error() -> None:
    """A level outside the characteristic's domain is rejected."""
    characteristics = Characteristics.model_construct(
        complexity="small", scalability="high", maintainability="high", performance="high",
        cost="low", team_size="small", time_to_market="fast", security="high",
    )
    pattern = ArchitecturePattern.model_construct(
        id="broken", name="Broken", category="layered", description="", characteristics=characteristics
    )
    with pytest.raises(DataIntegrityError, match="complexity"):
        score(pattern, "complexity")


def test_unknown_criterion() -> None:
    """Asking for a criterion that does not exist is a programming error."""
    with pytest.raises(ValueError):
        score(build_pattern("p"), "flexibility")


def test_score_breakdown_covers_every_criterion(pattern_a: ArchitecturePattern) -> None:
    """The breakdown has one integer score per criterion."""
    breakdown = score_breakdown(pattern_a)
    assert set(breakdown) == {c.id for c in CRITERIA}
    assert all(value in (1, 2, 3) for value in breakdown.values())


# ---- Weighted Score ----

def test_weighted_score_examples(pattern_a: ArchitecturePattern, pattern_b: ArchitecturePattern) -> None:
    """Weighted scores for the simple and the scalable fixture patterns."""
    # A: .3 + .2 + .3 + .3 + .45 + .1 + .1 + .05
    assert weighted_score(pattern_a) == pytest.approx(1.80)
    # B: .1 + .6 + .45 + .45 + .15 + .3 + .3 + .05
    assert weighted_score(pattern_b) == pytest.approx(2.40)


def test_weighted_score_extremes() -> None:
    """All-best characteristics score 3.0, all-worst score 1.0."""
    best = build_pattern(
        "best", complexity="low", scalability="high", maintainability="high", performance="high",
        cost="low", teamSize="large", timeToMarket="slow", security="high",
    )
    worst = build_pattern(
        "worst", complexity="high", scalability="low", maintainability="low", performance="low",
        cost="high", teamSize="small", timeToMarket="fast", security="low",
    )
    assert weighted_score(best) == pytest.approx(3.0)
    assert weighted_score(worst) == pytest.approx(1.0)


def test_weighted_score_always_within_bounds() -> None:
    """Every combination of levels stays within [1.0, 3.0]."""
    levels = ("low", "medium", "high")
    for complexity, scalability, cost, team, ttm in itertools.product(
        levels, levels, levels, ("small", "medium", "large"), ("fast", "medium", "slow")
    ):
        pattern = build_pattern(
            "p", complexity=complexity, scalability=scalability, cost=cost,
            teamSize=team, timeToMarket=ttm,
        )
        assert 1.0 <= weighted_score(pattern) <= 3.0


@pytest.mark.parametrize("criterion", ["cost", "complexity"])
def test_lowering_cost_or_complexity_raises_score(criterion: str) -> None:
    """Lower cost or complexity strictly increases the weighted score."""
    high = weighted_score(build_pattern("p", **{criterion: "high"}))
    medium = weighted_score(build_pattern("p", **{criterion: "medium"}))
    low = weighted_score(build_pattern("p", **{criterion: "low"}))
    assert high < medium < low


# ---- Ranking ----

def test_rank_orders_by_weighted_score(pattern_a: ArchitecturePattern, pattern_b: ArchitecturePattern) -> None:
    """Higher weighted score ranks first regardless of input order."""
    ranked = rank([pattern_a, pattern_b])
    assert [p.id for p in ranked] == ["b", "a"]
    assert ranked[0].weighted_score >= ranked[1].weighted_score


def test_rank_attaches_scores(pattern_a: ArchitecturePattern, pattern_b: ArchitecturePattern) -> None:
    """Each ranked pattern carries its score breakdown and original data."""
    ranked = rank([pattern_a, pattern_b])
    by_id = {p.id: p for p in ranked}
    assert by_id["a"].scores == score_breakdown(pattern_a)
    assert by_id["a"].characteristics == pattern_a.characteristics
    assert by_id["b"].name == "Pattern B"


def test_rank_is_stable_for_ties() -> None:
    """Patterns with equal scores keep their input order."""
    first = build_pattern("first")
    second = build_pattern("second")
    third = build_pattern("third", scalability="high")

    ranked = rank([first, second, third])
    assert [p.id for p in ranked] == ["third", "first", "second"]

    ranked = rank([second, first, third])
    assert [p.id for p in ranked] == ["third", "second", "first"]


def test_rank_ties_across_different_characteristics() -> None:
    """Equal totals from different breakdowns still count as ties."""
    # cost low (+.15) vs maintainability high (+.15)
    cheap = build_pattern("cheap", cost="low")
    maintainable = build_pattern("maintainable", maintainability="high")
    assert weighted_score(cheap) == weighted_score(maintainable)
    assert [p.id for p in rank([cheap, maintainable])] == ["cheap", "maintainable"]
    assert [p.id for p in rank([maintainable, cheap])] == ["maintainable", "cheap"]


@pytest.mark.parametrize("count", [0, 1])
def test_rank_requires_two_patterns(count: int) -> None:
    """Ranking fewer than two patterns is rejected."""
    patterns = [build_pattern(f"p{i}") for i in range(count)]
    with pytest.raises(InsufficientInputError):
        rank(patterns)


def test_insufficient_input_is_a_validation_error() -> None:
    """Callers can handle InsufficientInputError as a ValidationError."""
    assert issubclass(InsufficientInputError, ValidationError)
