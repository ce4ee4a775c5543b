"""
Stream Operators for Reactive Programming

Operators over asynchronous iterators, the stream abstraction used throughout
querycount. A stream completes when its iterator is exhausted and fails when
``__anext__`` raises; every operator here forwards both signals unchanged.
"""

import inspect
from typing import AsyncIterator, Awaitable, Callable, Optional, Any, Tuple, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')

StreamTransformer = Callable[[AsyncIterator[Any]], AsyncIterator[Any]]

_EXHAUSTED = object()


async def _call(func: Callable[..., Union[U, Awaitable[U]]], *args: Any) -> U:
    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def close_stream(source: Any) -> None:
    """Close an async stream if it supports ``aclose()``."""
    aclose = getattr(source, "aclose", None)
    if aclose is not None:
        await aclose()


class StreamOperators:
    """
    Collection of reactive stream operators for data transformation.

    Callables passed to ``map`` and ``filter`` may be plain functions or
    coroutine functions. Exceptions raised by a source or by a callable
    propagate to the consumer untouched.
    """

    @staticmethod
    async def map(
        source: AsyncIterator[T],
        mapper: Callable[[T], Union[U, Awaitable[U]]]
    ) -> AsyncIterator[U]:
        """
        Transform each item in the stream using the mapper function.

        Args:
            source: Source stream
            mapper: Function to transform each item

        Yields:
            Transformed items
        """
        try:
            async for item in source:
                yield await _call(mapper, item)
        finally:
            await close_stream(source)

    @staticmethod
    async def filter(
        source: AsyncIterator[T],
        predicate: Callable[[T], Union[bool, Awaitable[bool]]]
    ) -> AsyncIterator[T]:
        """
        Filter items in the stream based on predicate.

        Args:
            source: Source stream
            predicate: Function to test each item

        Yields:
            Items that pass the predicate
        """
        try:
            async for item in source:
                if await _call(predicate, item):
                    yield item
        finally:
            await close_stream(source)

    @staticmethod
    async def zip(*sources: Any) -> AsyncIterator[Tuple[Any, ...]]:
        """
        Zip multiple streams together, positionally.

        Sources are pulled left to right for every tuple, so a source to the
        right is never advanced once a source to its left has completed or
        failed. Plain (sync) iterators and iterables are accepted alongside
        async ones. Async sources are closed when the zipped stream ends.

        Args:
            sources: Multiple source streams

        Yields:
            Tuples of items from all sources
        """
        iterators = [
            aiter(source) if hasattr(source, "__aiter__") else iter(source)
            for source in sources
        ]

        try:
            while True:
                items = []
                for iterator in iterators:
                    if hasattr(iterator, "__anext__"):
                        try:
                            item = await anext(iterator)
                        except StopAsyncIteration:
                            return
                    else:
                        item = next(iterator, _EXHAUSTED)
                        if item is _EXHAUSTED:
                            return
                    items.append(item)
                yield tuple(items)
        finally:
            for iterator in iterators:
                await close_stream(iterator)

    @staticmethod
    def compose(
        source: AsyncIterator[Any],
        *transformers: Optional[StreamTransformer]
    ) -> AsyncIterator[Any]:
        """
        Apply stream-to-stream transformers left to right.

        ``compose(source, a, b)`` is ``b(a(source))``. ``None`` entries are
        skipped so optional stages can be passed inline.
        """
        stream = source
        for transformer in transformers:
            if transformer is None:
                continue
            stream = transformer(stream)
        return stream

