"""
Error taxonomy for the architecture comparison engine.

Every error is terminal for the request that raised it. The engine is pure and
deterministic, so nothing here is ever retried; the API layer translates these
into HTTP responses.
"""

from typing import Iterable, List


class ArchitectureAdvisorError(Exception):
    """Base class for all errors raised by architecture_core."""


class ValidationError(ArchitectureAdvisorError):
    """The caller supplied input the engine cannot work with."""


class InsufficientInputError(ValidationError):
    """Fewer than two patterns were handed to the ranking engine."""


class NotFoundError(ArchitectureAdvisorError):
    """One or more requested patterns do not exist in the catalog."""

    def __init__(self, missing_ids: Iterable[str]):
        self.missing_ids: List[str] = list(missing_ids)
        if len(self.missing_ids) == 1:
            message = f"Architecture pattern not found: {self.missing_ids[0]}"
        else:
            message = f"Architecture patterns not found: {', '.join(self.missing_ids)}"
        super().__init__(message)


class DataIntegrityError(ArchitectureAdvisorError):
    """A stored pattern is missing a characteristic or holds an unknown value."""
