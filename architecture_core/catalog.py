"""
Architecture pattern catalog.

Two interchangeable backends are provided: an in-memory catalog (default, seeded
from architecture_core.seed_patterns) and an async SQLAlchemy catalog used when
DATABASE_URL is configured. Both validate stored records into ArchitecturePattern
models and report invalid records as DataIntegrityError.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pydantic
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from architecture_core import config
from architecture_core.db import PatternOrm, create_engine, create_sessionmaker, initialize_database
from architecture_core.errors import DataIntegrityError
from architecture_core.logger import get_logger, info
from architecture_core.models import ArchitecturePattern, PatternFilter
from architecture_core.seed_patterns import SEED_PATTERNS

logger = get_logger(__name__)

PatternRecord = Mapping[str, Any]


def load_pattern(record: PatternRecord) -> ArchitecturePattern:
    """
    Validate a raw catalog record into an ArchitecturePattern.

    Raises:
        DataIntegrityError: If the record is missing fields or holds unknown values
    """
    try:
        return ArchitecturePattern.model_validate(record)
    except pydantic.ValidationError as e:
        record_id = record.get("id", "<unknown>") if isinstance(record, Mapping) else "<unknown>"
        raise DataIntegrityError(f"Invalid architecture pattern record '{record_id}': {e}") from e


def _unique(ids: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(ids))


def _matches(pattern: ArchitecturePattern, pattern_filter: Optional[PatternFilter]) -> bool:
    if pattern_filter is None:
        return True
    if pattern_filter.category and pattern.category != pattern_filter.category:
        return False
    if pattern_filter.complexity and pattern.characteristics.complexity != pattern_filter.complexity:
        return False
    if pattern_filter.scalability and pattern.characteristics.scalability != pattern_filter.scalability:
        return False
    return True


class PatternCatalog(ABC):
    """Read access to stored architecture patterns, plus development seeding."""

    @abstractmethod
    async def find_patterns_by_id(self, ids: Sequence[str]) -> List[ArchitecturePattern]:
        """
        Return the patterns whose ids are in `ids`, in request order.

        Unknown ids are skipped and duplicates collapse, so the result may be
        shorter than `ids`.
        """

    @abstractmethod
    async def find_all_patterns(
        self, pattern_filter: Optional[PatternFilter] = None
    ) -> List[ArchitecturePattern]:
        """Return every pattern matching the filter, sorted by name."""

    @abstractmethod
    async def seed(self, records: Iterable[PatternRecord]) -> int:
        """Replace the catalog contents with `records`; returns the new count."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored patterns."""

    async def get_pattern(self, pattern_id: str) -> Optional[ArchitecturePattern]:
        found = await self.find_patterns_by_id([pattern_id])
        return found[0] if found else None

    async def close(self) -> None:
        """Release any resources held by the catalog."""


class InMemoryPatternCatalog(PatternCatalog):
    """Catalog held in process memory."""

    def __init__(self, records: Optional[Iterable[PatternRecord]] = None):
        self._patterns: Dict[str, ArchitecturePattern] = {}
        if records is not None:
            self._load(records)

    def _load(self, records: Iterable[PatternRecord]) -> None:
        patterns = [load_pattern(record) for record in records]
        self._patterns = {pattern.id: pattern for pattern in patterns}

    async def find_patterns_by_id(self, ids: Sequence[str]) -> List[ArchitecturePattern]:
        return [
            self._patterns[pattern_id].model_copy(deep=True)
            for pattern_id in _unique(ids)
            if pattern_id in self._patterns
        ]

    async def find_all_patterns(
        self, pattern_filter: Optional[PatternFilter] = None
    ) -> List[ArchitecturePattern]:
        matching = [
            pattern.model_copy(deep=True)
            for pattern in self._patterns.values()
            if _matches(pattern, pattern_filter)
        ]
        return sorted(matching, key=lambda pattern: pattern.name)

    async def seed(self, records: Iterable[PatternRecord]) -> int:
        self._load(records)
        info("Seeded in-memory pattern catalog", count=len(self._patterns))
        return len(self._patterns)

    async def count(self) -> int:
        return len(self._patterns)


class SqlPatternCatalog(PatternCatalog):
    """Catalog stored in the 'architecture_patterns' table."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._sessionmaker = create_sessionmaker(engine)

    @staticmethod
    def _to_pattern(row: PatternOrm) -> ArchitecturePattern:
        return load_pattern(row.document)

    async def find_patterns_by_id(self, ids: Sequence[str]) -> List[ArchitecturePattern]:
        requested = _unique(ids)
        if not requested:
            return []

        async with self._sessionmaker() as session:
            result = await session.execute(select(PatternOrm).where(PatternOrm.id.in_(requested)))
            rows = {row.id: row for row in result.scalars().all()}

        return [self._to_pattern(rows[pattern_id]) for pattern_id in requested if pattern_id in rows]

    async def find_all_patterns(
        self, pattern_filter: Optional[PatternFilter] = None
    ) -> List[ArchitecturePattern]:
        stmt = select(PatternOrm)
        if pattern_filter is not None:
            if pattern_filter.category:
                stmt = stmt.where(PatternOrm.category == pattern_filter.category)
            if pattern_filter.complexity:
                stmt = stmt.where(PatternOrm.complexity == pattern_filter.complexity)
            if pattern_filter.scalability:
                stmt = stmt.where(PatternOrm.scalability == pattern_filter.scalability)
        stmt = stmt.order_by(PatternOrm.name)

        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            rows = result.scalars().all()

        return [self._to_pattern(row) for row in rows]

    async def seed(self, records: Iterable[PatternRecord]) -> int:
        # Validate everything before touching the table
        patterns = [load_pattern(record) for record in records]

        async with self._sessionmaker() as session:
            async with session.begin():
                await session.execute(delete(PatternOrm))
                session.add_all([
                    PatternOrm(
                        id=pattern.id,
                        name=pattern.name,
                        category=pattern.category,
                        complexity=pattern.characteristics.complexity,
                        scalability=pattern.characteristics.scalability,
                        document=pattern.model_dump(mode="json", by_alias=True),
                    )
                    for pattern in patterns
                ])

        info("Seeded SQL pattern catalog", count=len(patterns))
        return len(patterns)

    async def count(self) -> int:
        async with self._sessionmaker() as session:
            result = await session.execute(select(func.count()).select_from(PatternOrm))
            return int(result.scalar_one())

    async def close(self) -> None:
        await self._engine.dispose()


async def build_catalog(
    database_url: Optional[str] = None,
    seed_on_startup: Optional[bool] = None,
) -> PatternCatalog:
    """
    Build the catalog backend selected by configuration.

    Args:
        database_url: Async SQLAlchemy URL; defaults to config.DATABASE_URL.
            When unset an in-memory catalog is used.
        seed_on_startup: Seed an empty catalog with the built-in patterns;
            defaults to config.SEED_ON_STARTUP.

    Returns:
        PatternCatalog: Ready-to-use catalog
    """
    if database_url is None:
        database_url = config.DATABASE_URL
    if seed_on_startup is None:
        seed_on_startup = config.SEED_ON_STARTUP

    catalog: PatternCatalog
    if database_url:
        engine = await create_engine(database_url)
        await initialize_database(engine)
        catalog = SqlPatternCatalog(engine)
        backend = "sql"
    else:
        catalog = InMemoryPatternCatalog()
        backend = "memory"

    if seed_on_startup and await catalog.count() == 0:
        await catalog.seed(SEED_PATTERNS)

    info("Pattern catalog ready", backend=backend, patterns=await catalog.count())
    return catalog
