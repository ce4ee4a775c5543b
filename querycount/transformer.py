"""
Query Count Transformer

Compose with a self-updating query stream to count how many times the query
has emitted results:

    async for wrapper in QueryCountTransformer.create()(query_stream):
        if not wrapper.is_initial_update:
            do_something(wrapper.result)

or, with other stages, ``StreamOperators.compose(query_stream,
QueryCountTransformer.create(), ...)``.
"""

import logging
from typing import AsyncIterator, Generic, Optional, TypeVar

from .core.config import get_app_configuration
from .counter import QueryCounter
from .result import QueryCountResult
from .stream_operators import StreamOperators

logger = logging.getLogger(__name__)

T = TypeVar('T')


class QueryCountTransformer(Generic[T]):
    """
    Stream-to-stream adapter wrapping each upstream item in a QueryCountResult.

    The n-th item of the output pairs the n-th upstream item with emit count n.
    Every application of the transformer gets its own QueryCounter, so counts
    are never shared between subscriptions. Completion and errors of the
    upstream are forwarded unchanged.
    """

    def __init__(self, trace: bool = False):
        self.trace = trace

    @classmethod
    def create(cls, trace: Optional[bool] = None) -> "QueryCountTransformer[T]":
        """
        Return a new transformer.

        Args:
            trace: Log every emitted result at DEBUG. Defaults to
                QUERYCOUNT_TRACE_EMISSIONS from the app configuration, which
                also makes get_logger() run the ``querycount`` logger at DEBUG.
                An explicit ``trace=True`` needs that logger at DEBUG to show.
        """
        if trace is None:
            trace = get_app_configuration().QUERYCOUNT_TRACE_EMISSIONS
        return cls(trace=trace)

    def apply(self, upstream: AsyncIterator[T]) -> AsyncIterator[QueryCountResult[T]]:
        return self._subscribe(upstream)

    __call__ = apply

    async def _subscribe(self, upstream: AsyncIterator[T]) -> AsyncIterator[QueryCountResult[T]]:
        counter = QueryCounter()
        logger.debug(f"subscribe: counting emissions of {upstream!r}")

        # upstream goes first so the counter is only stepped for real items
        zipped = StreamOperators.zip(upstream, counter)
        try:
            while True:
                # only errors raised while pulling belong to the upstream
                try:
                    item, emit_count = await anext(zipped)
                except StopAsyncIteration:
                    break
                except Exception as e:
                    logger.warning(f"Upstream failed after {counter.current} emission(s): {type(e).__name__}: {e}")
                    raise
                wrapper = QueryCountResult.create(item, emit_count)
                if self.trace:
                    logger.debug(
                        f"emit #{emit_count} (update_count={wrapper.update_count}, "
                        f"initial={wrapper.is_initial_update}): {item!r}"
                    )
                yield wrapper
        finally:
            await zipped.aclose()

        logger.debug(f"complete after {counter.current} emission(s)")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(trace={self.trace})"


def count_queries(upstream: AsyncIterator[T], *, trace: Optional[bool] = None) -> AsyncIterator[QueryCountResult[T]]:
    """Shorthand for ``QueryCountTransformer.create(trace=trace)(upstream)``."""
    return QueryCountTransformer.create(trace=trace)(upstream)
