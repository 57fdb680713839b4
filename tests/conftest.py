"""Root test configuration for cuid2.

Provides a deterministic ``FakePlatform`` (satisfies the ``Platform``
protocol) through the ``make_platform`` / ``fake_platform`` fixtures, and
isolates every test from CUID2_* environment variables so a developer's shell
settings never leak into config or CLI tests.
"""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, Iterable, Optional, Union

import pytest

from cuid2.generator import Cuid2Generator, GeneratorState

FIXED_TICKS = 17_000_000_000_000_000


class FakePlatform:
    """Deterministic Platform for tests.

    random_bytes() yields a repeating byte stream (0, 1, 2, ... by default)
    and counts calls, so tests can predict both content and how much
    randomness was consumed.
    """

    def __init__(
        self,
        seed: int = 7,
        hostname: Union[str, BaseException] = "test-host",
        pid: int = 0x01020304,
        env: Any = None,
        byte_source: Optional[Iterable[int]] = None,
    ) -> None:
        self.seed = seed
        self._hostname = hostname
        self.pid = pid
        self.env = env if env is not None else {"B": "2", "A": "1"}
        self._bytes = itertools.cycle(list(byte_source) if byte_source is not None else range(256))
        self._lock = threading.Lock()
        self.random_int64_calls = 0
        self.random_bytes_calls = 0
        self.random_bytes_drawn = 0
        self.hostname_calls = 0
        self.environment_calls = 0

    def random_bytes(self, length: int) -> bytes:
        with self._lock:
            self.random_bytes_calls += 1
            self.random_bytes_drawn += length
            return bytes(next(self._bytes) for _ in range(length))

    def random_int64(self) -> int:
        with self._lock:
            self.random_int64_calls += 1
        return self.seed

    def hostname(self) -> str:
        with self._lock:
            self.hostname_calls += 1
        if isinstance(self._hostname, BaseException):
            raise self._hostname
        return self._hostname

    def process_id(self) -> int:
        return self.pid

    def environment_variables(self) -> Any:
        with self._lock:
            self.environment_calls += 1
        return self.env


@pytest.fixture(autouse=True)
def isolate_cuid2_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CUID2_* overrides from the environment for every test."""
    for name in ("CUID2_CONFIG", "CUID2_LENGTH", "CUID2_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_platform() -> Callable[..., FakePlatform]:
    """Factory for FakePlatform instances with custom behaviour."""
    return FakePlatform


@pytest.fixture
def fake_platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def make_generator() -> Callable[..., Cuid2Generator]:
    """Build a generator over a platform with a fixed clock."""

    def _make(platform: Any, clock: Callable[[], int] = lambda: FIXED_TICKS) -> Cuid2Generator:
        return Cuid2Generator(
            platform=platform,
            state=GeneratorState.create(platform),
            clock=clock,
        )

    return _make


@pytest.fixture
def fake_generator(fake_platform: FakePlatform, make_generator: Callable[..., Cuid2Generator]) -> Cuid2Generator:
    return make_generator(fake_platform)


@pytest.fixture
def fixed_ticks() -> int:
    """The timestamp returned by generators built with ``make_generator``."""
    return FIXED_TICKS
