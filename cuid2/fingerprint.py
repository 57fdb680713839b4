"""Host fingerprint: a per-process byte string that tells generators apart.

Layout, concatenated without separators or length prefixes:

  1. hostname encoded as UTF-8 (random 16-char hex string if lookup fails)
  2. process id as 4 little-endian bytes
  3. for every environment variable, sorted by the UTF-8 bytes of its key,
     the UTF-8 bytes of ``key=value``

The bytes are computed once, on first ``get()``, and cached for the lifetime
of the ``Fingerprint`` object. Concurrent first calls compute them exactly once.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Optional, Tuple, Union

from cuid2.constants import FALLBACK_HOSTNAME_BYTES
from cuid2.platform import Platform
from cuid2.utils.encoding import pack_uint32_le
from cuid2.utils.logger import PerformanceLogger, get_logger

logger = get_logger(__name__)

EnvironmentSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _to_utf8(text: str) -> bytes:
    # surrogateescape restores the original bytes of undecodable POSIX env entries.
    return text.encode("utf-8", "surrogateescape")


def random_hostname(platform: Platform) -> str:
    """Return a random lowercase hex string used when the hostname is unavailable."""
    return platform.random_bytes(FALLBACK_HOSTNAME_BYTES).hex()


def resolve_hostname(platform: Platform) -> str:
    """Return the platform hostname, or a random hex fallback. Never raises OSError."""
    try:
        hostname = platform.hostname()
    except OSError as exc:
        logger.warning("hostname_lookup_failed", error=str(exc))
        return random_hostname(platform)
    if not hostname:
        logger.warning("hostname_lookup_failed", error="empty hostname")
        return random_hostname(platform)
    return hostname


def serialize_environment(env: EnvironmentSource) -> bytes:
    """Concatenate ``key=value`` pairs in ascending byte-wise key order.

    ``env`` may be a mapping or an iterable of (key, value) pairs; duplicate
    keys keep the last value.
    """
    unique = dict(env.items() if isinstance(env, Mapping) else env)
    ordered = sorted(unique.items(), key=lambda item: _to_utf8(item[0]))
    return b"".join(_to_utf8(f"{key}={value}") for key, value in ordered)


def compute_fingerprint(platform: Platform) -> bytes:
    """Build the fingerprint bytes from the platform's current state."""
    hostname = resolve_hostname(platform)
    return (
        _to_utf8(hostname)
        + pack_uint32_le(platform.process_id())
        + serialize_environment(platform.environment_variables())
    )


class Fingerprint:
    """Lazily computed, immutable fingerprint bytes."""

    def __init__(self, platform: Platform) -> None:
        self._platform = platform
        self._value: Optional[bytes] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def get(self) -> bytes:
        """Return the cached fingerprint, computing it on the first call."""
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is None:
                with PerformanceLogger("fingerprint_compute", logger=logger):
                    computed = compute_fingerprint(self._platform)
                logger.debug("fingerprint_ready", size=len(computed))
                self._value = computed
            return self._value
