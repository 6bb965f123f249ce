"""
Shared fixtures for the Architecture Advisor tests.
"""

from typing import Any, Callable, Dict, Optional

import pytest

from architecture_core.catalog import InMemoryPatternCatalog
from architecture_core.models import ArchitecturePattern, ProjectContext
from architecture_core.seed_patterns import SEED_PATTERNS

BASE_CHARACTERISTICS: Dict[str, str] = {
    "complexity": "medium",
    "scalability": "medium",
    "maintainability": "medium",
    "performance": "medium",
    "cost": "medium",
    "teamSize": "medium",
    "timeToMarket": "medium",
    "security": "medium",
}


def build_pattern(pattern_id: str, name: Optional[str] = None, category: str = "layered", **traits: str) -> ArchitecturePattern:
    """
    Build a pattern with medium characteristics, overridden by `traits`.

    Trait keys use the JSON names (teamSize, timeToMarket, ...).
    """
    characteristics = {**BASE_CHARACTERISTICS, **traits}
    return ArchitecturePattern.model_validate({
        "id": pattern_id,
        "name": name or pattern_id.title(),
        "category": category,
        "description": f"Test pattern {pattern_id}",
        "characteristics": characteristics,
    })


@pytest.fixture
def pattern_factory() -> Callable[..., ArchitecturePattern]:
    return build_pattern


@pytest.fixture
def pattern_a() -> ArchitecturePattern:
    """Simple, cheap and fast to build."""
    return build_pattern(
        "a", name="Pattern A", category="monolithic",
        complexity="low", scalability="low", maintainability="medium", performance="medium",
        cost="low", teamSize="small", timeToMarket="fast", security="low",
    )


@pytest.fixture
def pattern_b() -> ArchitecturePattern:
    """Powerful, expensive and slow to build."""
    return build_pattern(
        "b", name="Pattern B", category="microservices",
        complexity="high", scalability="high", maintainability="high", performance="high",
        cost="high", teamSize="large", timeToMarket="slow", security="low",
    )


@pytest.fixture
def small_project() -> ProjectContext:
    return ProjectContext(
        team_size="small", budget="low", timeline="short", expected_scale="low", complexity="low"
    )


@pytest.fixture
def seed_catalog() -> InMemoryPatternCatalog:
    return InMemoryPatternCatalog(SEED_PATTERNS)


@pytest.fixture
def raw_pattern() -> Dict[str, Any]:
    """A raw catalog record in stored (camelCase) form."""
    return {
        "id": "raw",
        "name": "Raw Pattern",
        "category": "hexagonal",
        "description": "Stored record",
        "characteristics": dict(BASE_CHARACTERISTICS),
    }
