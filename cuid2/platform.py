"""Platform protocol: the operating-system boundary consumed by cuid2.

The generator never touches ``os``, ``socket`` or ``secrets`` directly. It
asks a ``Platform`` for randomness, the hostname, the process id and the
environment. ``SystemPlatform`` is the real implementation; tests supply
deterministic fakes that satisfy the same protocol.

Contract notes:
  - random_bytes() / random_int64() are cryptographically secure and
    assumed infallible.
  - hostname() is best effort. It may raise OSError or return "". The
    fingerprint substitutes a random hex string in that case.
  - environment_variables() need not be sorted.
"""

from __future__ import annotations

import os
import secrets
import socket
from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class Platform(Protocol):
    """Operating-system services used to build identifiers.

    Implementations must be safe to call from several threads at once.
    cuid2 adds no locking around them.
    """

    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` cryptographically secure random bytes."""
        ...

    def random_int64(self) -> int:
        """Return a cryptographically random signed 64-bit integer."""
        ...

    def hostname(self) -> str:
        """Return the host name. May raise OSError."""
        ...

    def process_id(self) -> int:
        """Return the id of the current process."""
        ...

    def environment_variables(self) -> Mapping[str, str]:
        """Return the process environment as a key -> value mapping."""
        ...


class SystemPlatform:
    """Platform backed by the running interpreter and operating system."""

    def random_bytes(self, length: int) -> bytes:
        return secrets.token_bytes(length)

    def random_int64(self) -> int:
        return int.from_bytes(secrets.token_bytes(8), "little", signed=True)

    def hostname(self) -> str:
        return socket.gethostname()

    def process_id(self) -> int:
        return os.getpid()

    def environment_variables(self) -> Mapping[str, str]:
        # Snapshot: os.environ is live and may change under us.
        return dict(os.environ)
