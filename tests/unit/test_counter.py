"""Unit tests for cuid2/counter.py: lazy seeding, monotonic values, int64 wrap."""

from __future__ import annotations

import threading
from typing import Any

from cuid2.constants import COUNTER_SEED_MULTIPLIER, INT64_MAX, INT64_MIN
from cuid2.counter import Counter, seed_value, wrap_int64
from cuid2.platform import SystemPlatform

# ─── Seeding ──────────────────────────────────────────────────────────────────


class TestSeed:
    def test_multiplier_is_odd(self) -> None:
        assert COUNTER_SEED_MULTIPLIER % 2 == 1

    def test_seed_is_random_times_multiplier(self) -> None:
        assert seed_value(7) == 7 * COUNTER_SEED_MULTIPLIER

    def test_negative_random_value(self) -> None:
        assert seed_value(-1) == -COUNTER_SEED_MULTIPLIER

    def test_seed_wraps_into_int64(self) -> None:
        assert seed_value(INT64_MAX) == (1 << 63) - COUNTER_SEED_MULTIPLIER
        for raw in (INT64_MAX, INT64_MIN, 1 << 62, -(1 << 62)):
            assert INT64_MIN <= seed_value(raw) <= INT64_MAX

    def test_wrap_int64(self) -> None:
        assert wrap_int64(INT64_MAX + 1) == INT64_MIN
        assert wrap_int64(INT64_MIN - 1) == INT64_MAX
        assert wrap_int64(42) == 42


# ─── next() ───────────────────────────────────────────────────────────────────


class TestNext:
    def test_not_seeded_until_first_use(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        assert not counter.initialized
        assert fake_platform.random_int64_calls == 0

    def test_first_value_is_seed(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        assert counter.next() == seed_value(fake_platform.seed)
        assert counter.initialized

    def test_increments_by_one(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        values = [counter.next() for _ in range(100)]
        assert values == list(range(values[0], values[0] + 100))

    def test_seeded_once(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        for _ in range(10):
            counter.next()
        assert fake_platform.random_int64_calls == 1

    def test_wraps_at_int64_max(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        counter.next()
        counter._value = INT64_MAX
        assert counter.next() == INT64_MAX
        assert counter.next() == INT64_MIN
        assert counter.next() == INT64_MIN + 1

    def test_independent_counters_do_not_share_values(self, make_platform: Any) -> None:
        a = Counter(make_platform(seed=1))
        b = Counter(make_platform(seed=1))
        assert a.next() == b.next()
        a.next()
        assert b.next() == seed_value(1) + 1


# ─── Concurrency ──────────────────────────────────────────────────────────────


class TestConcurrency:
    def test_concurrent_first_access_seeds_once(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        barrier = threading.Barrier(20)
        results: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            value = counter.next()
            with lock:
                results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert fake_platform.random_int64_calls == 1
        seed = seed_value(fake_platform.seed)
        assert sorted(results) == list(range(seed, seed + 20))

    def test_values_form_contiguous_range_across_threads(self) -> None:
        """20 threads x 500 calls -> exactly {seed, ..., seed + 9999}."""
        counter = Counter(SystemPlatform())
        results: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            values = [counter.next() for _ in range(500)]
            with lock:
                results.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 10_000
        assert len(set(results)) == 10_000
        ordered = sorted(results)
        assert ordered[-1] - ordered[0] == 9_999

    def test_per_thread_values_increase(self, fake_platform: Any) -> None:
        counter = Counter(fake_platform)
        per_thread: list[list[int]] = [[] for _ in range(8)]

        def worker(idx: int) -> None:
            for _ in range(200):
                per_thread[idx].append(counter.next())

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for values in per_thread:
            assert values == sorted(values)
