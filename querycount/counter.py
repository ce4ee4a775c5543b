"""
Per-subscription emission counter.
"""

import threading
from typing import Iterator

from .core.exceptions import UnsupportedOperationError


class QueryCounter:
    """
    Endless iterator over 1, 2, 3, ...

    Each step is taken under a lock, so callers on different threads can never
    observe a skipped or repeated value. There is no upper bound and no way to
    rewind; ``remove()`` and ``reset()`` raise UnsupportedOperationError.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Last value handed out, 0 before the first step."""
        with self._lock:
            return self._value

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()

    def remove(self) -> None:
        raise UnsupportedOperationError("remove", type(self).__name__)

    def reset(self) -> None:
        raise UnsupportedOperationError("reset", type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(current={self.current})"
