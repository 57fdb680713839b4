"""generate() latency benchmark.

Measures per-call latency of Cuid2Generator.generate() at several lengths,
plus the one-time fingerprint computation, against a 0.1ms p99 budget.

Usage (from project root):
    python benchmarks/bench_generate.py
"""

from __future__ import annotations

import time
from typing import Any

from cuid2 import Cuid2Generator
from cuid2.constants import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH

P99_BUDGET_MS = 0.1

LENGTHS = (MIN_LENGTH, 10, DEFAULT_LENGTH, MAX_LENGTH)


def measure_p99(fn: Any, *args: Any, n: int = 10_000) -> tuple[float, float, float]:
    """Run fn(*args) n times and return (p50, p99, max) in milliseconds."""
    latencies: list[float] = []
    for _ in range(n):
        start = time.perf_counter()
        fn(*args)
        elapsed = (time.perf_counter() - start) * 1_000
        latencies.append(elapsed)
    latencies.sort()
    p50 = latencies[int(0.50 * n)]
    p99 = latencies[int(0.99 * n)]
    return p50, p99, latencies[-1]


def run_benchmarks() -> bool:
    """Run all benchmarks. Returns True if all pass."""
    WARMUP = 500
    N = 10_000

    generator = Cuid2Generator()

    print("=" * 70)
    print("cuid2 generate() Benchmark")
    print(f"Warmup: {WARMUP} calls | Measurement: {N} calls each")
    print("=" * 70)

    start = time.perf_counter()
    fingerprint = generator.state.fingerprint.get()
    init_ms = (time.perf_counter() - start) * 1_000
    print(f"  fingerprint: {len(fingerprint)} bytes in {init_ms:.3f}ms (one-time)")

    all_pass = True
    for length in LENGTHS:
        for _ in range(WARMUP):
            generator.generate(length)

        p50, p99, worst = measure_p99(generator.generate, length, n=N)
        passed = p99 <= P99_BUDGET_MS
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_pass = False
        print(f"  [{status}] length={length}")
        print(f"          p50={p50:.4f}ms  p99={p99:.4f}ms  worst={worst:.4f}ms")

    print("=" * 70)
    if all_pass:
        print(f"RESULT: ALL BENCHMARKS PASSED (p99 < {P99_BUDGET_MS}ms)")
    else:
        print(f"RESULT: SOME BENCHMARKS FAILED (p99 exceeded {P99_BUDGET_MS}ms)")
        print("        Large environments inflate the fingerprint and hash input.")
    print("=" * 70)

    return all_pass


if __name__ == "__main__":
    import sys

    passed = run_benchmarks()
    sys.exit(0 if passed else 1)
