"""
Tests for QueryCounter and QueryCountResult.
"""

import dataclasses
import threading
import pytest

from querycount import QueryCounter, QueryCountResult, UnsupportedOperationError, QueryCountError


class TestQueryCounter:
    """Test cases for the emission counter."""

    def test_counts_from_one(self):
        counter = QueryCounter()
        assert counter.current == 0
        assert [counter.next() for _ in range(5)] == [1, 2, 3, 4, 5]
        assert counter.current == 5

    def test_iterator_protocol_never_ends(self):
        counter = QueryCounter()
        assert iter(counter) is counter
        values = [value for _, value in zip(range(1000), counter)]
        assert values == list(range(1, 1001))

    def test_instances_are_independent(self):
        first = QueryCounter()
        second = QueryCounter()
        first.next()
        first.next()
        assert second.next() == 1
        assert first.next() == 3

    def test_remove_is_unsupported(self):
        counter = QueryCounter()
        with pytest.raises(UnsupportedOperationError, match=r"QueryCounter\.remove\(\) not supported"):
            counter.remove()

    def test_reset_is_unsupported(self):
        counter = QueryCounter()
        counter.next()
        with pytest.raises(QueryCountError) as exc_info:
            counter.reset()
        assert exc_info.value.operation == "reset"
        # The failed rewind leaves the sequence untouched
        assert counter.next() == 2

    def test_concurrent_steps_neither_skip_nor_repeat(self):
        """Values drawn from many threads are exactly 1..N."""
        counter = QueryCounter()
        drawn = []
        lock = threading.Lock()

        def worker():
            local = [counter.next() for _ in range(500)]
            with lock:
                drawn.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(drawn) == list(range(1, 4001))
        assert counter.current == 4000


class TestQueryCountResult:
    """Test cases for the result wrapper."""

    def test_initial_result(self):
        wrapper = QueryCountResult.create("rows", 1)
        assert wrapper.result == "rows"
        assert wrapper.emit_count == 1
        assert wrapper.update_count == 0
        assert wrapper.is_initial_update is True

    def test_update_result(self):
        wrapper = QueryCountResult.create(["a", "b"], 4)
        assert wrapper.result == ["a", "b"]
        assert wrapper.update_count == 3
        assert wrapper.is_initial_update is False

    def test_is_immutable(self):
        wrapper = QueryCountResult.create("rows", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            wrapper.emit_count = 2  # type: ignore[misc]

    def test_emit_count_is_not_validated(self):
        wrapper = QueryCountResult(None, 0)
        assert wrapper.update_count == -1
        assert wrapper.is_initial_update is False

    def test_equality(self):
        assert QueryCountResult.create("x", 2) == QueryCountResult("x", 2)
        assert QueryCountResult.create("x", 2) != QueryCountResult("x", 3)
