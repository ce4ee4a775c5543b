"""
Consumers' shortcuts for telling initial results from updates.
"""

from typing import AsyncIterator, TypeVar

from .result import QueryCountResult
from .stream_operators import StreamOperators, close_stream

T = TypeVar('T')


def updates_only(source: AsyncIterator[QueryCountResult[T]]) -> AsyncIterator[T]:
    """Yield the unwrapped result of every emission except the initial one."""
    return StreamOperators.map(
        StreamOperators.filter(source, lambda wrapper: not wrapper.is_initial_update),
        lambda wrapper: wrapper.result,
    )


async def initial_only(source: AsyncIterator[QueryCountResult[T]]) -> AsyncIterator[T]:
    """Yield the unwrapped initial result, then close the source."""
    try:
        async for wrapper in source:
            if wrapper.is_initial_update:
                yield wrapper.result
                return
    finally:
        await close_stream(source)
