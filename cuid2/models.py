"""Outcome type for identifier generation.

``Cuid2Generator.try_generate()`` returns a ``GenerationResult`` instead of
raising. ``GenerationResult.unwrap()`` converts a failure back into the
matching exception from ``cuid2.errors`` for callers that prefer exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cuid2.errors import CryptoFailureError, Cuid2Error, InvalidArgumentError


class ErrorKind(str, Enum):
    """The two failure kinds a generation call can report."""

    INVALID_ARGUMENT = "invalid_argument"
    CRYPTO_FAILURE = "crypto_failure"


@dataclass(frozen=True)
class GenerationResult:
    """Tagged success/failure outcome of a single generation call.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: str) -> "GenerationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "GenerationResult":
        return cls(error=error, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_exception(self) -> Optional[Cuid2Error]:
        """Return the exception matching this failure, or None on success."""
        if self.error is ErrorKind.INVALID_ARGUMENT:
            return InvalidArgumentError(self.message)
        if self.error is ErrorKind.CRYPTO_FAILURE:
            return CryptoFailureError(self.message or "SHA3-512 hashing failed")
        return None

    def unwrap(self) -> str:
        """Return the identifier, or raise the matching ``Cuid2Error``."""
        exc = self.to_exception()
        if exc is not None:
            raise exc
        if self.value is None:
            raise Cuid2Error("generation result holds neither an identifier nor an error")
        return self.value
