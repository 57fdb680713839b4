"""Exceptions raised by the cuid2 public API.

Only two failure kinds cross the API boundary:

  InvalidArgumentError  the caller asked for a length outside [MIN_LENGTH, MAX_LENGTH]
  CryptoFailureError    the hash primitive is unavailable or misbehaved

Hostname lookup failures never surface here; the fingerprint absorbs them.
"""

from __future__ import annotations

from typing import Optional

from cuid2.constants import MAX_LENGTH, MIN_LENGTH


class Cuid2Error(Exception):
    """Base class for all cuid2 errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(Cuid2Error, ValueError):
    """Raised when the requested identifier length is out of range.

    Always recoverable by the caller. Never retried internally.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        minimum: int = MIN_LENGTH,
        maximum: int = MAX_LENGTH,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(message or f"length must be between {minimum} and {maximum}")


class CryptoFailureError(Cuid2Error):
    """Raised when the SHA3-512 primitive cannot produce a usable digest."""

    def __init__(self, message: str = "SHA3-512 hashing failed") -> None:
        super().__init__(message)
