"""
Result wrapper pairing a query result with its emission count.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class QueryCountResult(Generic[T]):
    """
    A query result together with the number of times the query stream has
    emitted, counting this emission.

    ``emit_count`` is 1-based and expected to be >= 1; it is not validated.
    """
    result: T
    emit_count: int

    @classmethod
    def create(cls, result: T, emit_count: int) -> "QueryCountResult[T]":
        return cls(result, emit_count)

    @property
    def update_count(self) -> int:
        """Number of times the query has been updated; 0 for the initial result."""
        return self.emit_count - 1

    @property
    def is_initial_update(self) -> bool:
        """True if this is the first result the query has produced."""
        return self.emit_count == 1
