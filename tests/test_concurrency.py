"""Tests for the concurrent join strategies."""

import asyncio
import threading
import time

import pytest

from app.core.concurrency import gather_all_or_nothing, gather_all_settled


def fail():
    raise RuntimeError("query failed")


class TestAllSettled:
    def test_each_branch_resolves_independently(self):
        ok, failed = asyncio.run(gather_all_settled(lambda: [1, 2, 3], fail))

        assert ok.fulfilled
        assert ok.value == [1, 2, 3]
        assert not failed.fulfilled
        assert isinstance(failed.error, RuntimeError)
        assert failed.value_or([]) == []

    def test_branches_run_concurrently(self):
        barrier = threading.Barrier(2, timeout=2)

        def branch():
            barrier.wait()
            return True

        results = asyncio.run(gather_all_settled(branch, branch))

        assert all(r.fulfilled for r in results)


class TestAllOrNothing:
    def test_returns_values_in_order(self):
        def slow():
            time.sleep(0.02)
            return "stock"

        assert asyncio.run(gather_all_or_nothing(slow, lambda: "price")) == ["stock", "price"]

    def test_any_failure_fails_the_whole(self):
        with pytest.raises(RuntimeError):
            asyncio.run(gather_all_or_nothing(lambda: "stock", fail))
