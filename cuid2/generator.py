"""CUID2 identifier generation.

An identifier is built from, in this order:

  1. the current time in 100 ns ticks            (8 bytes, little-endian)
  2. the next value of the process counter        (8 bytes, little-endian)
  3. the host fingerprint                          (variable)
  4. ``length`` fresh random bytes                 (variable)

The concatenation is hashed with SHA3-512, the 64-byte digest is base-36
encoded, and the result is a random lowercase letter followed by the first
``length - 1`` encoded characters.

State (counter + fingerprint) lives in an explicit ``GeneratorState`` that a
``Cuid2Generator`` holds by reference. The module-level ``generate()`` and
``try_generate()`` share one lazily created process-wide generator.

``try_generate()`` never raises for the two modelled failure kinds; it
returns a ``GenerationResult``. ``generate()`` unwraps that result and raises
``InvalidArgumentError`` or ``CryptoFailureError``.
"""

from __future__ import annotations

import hashlib
import operator
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from cuid2.constants import (
    DEFAULT_LENGTH,
    HASH_ALGORITHM,
    HASH_DIGEST_SIZE,
    MAX_LENGTH,
    MIN_LENGTH,
    PREFIX_LENGTH,
)
from cuid2.counter import Counter
from cuid2.errors import CryptoFailureError
from cuid2.fingerprint import Fingerprint
from cuid2.models import ErrorKind, GenerationResult
from cuid2.platform import Platform, SystemPlatform
from cuid2.utils.clock import timestamp_ticks
from cuid2.utils.encoding import encode_base36, pack_int64_le, prefix_letter
from cuid2.utils.logger import get_logger

logger = get_logger(__name__)


# ─── Pipeline steps ───────────────────────────────────────────────────────────


def validate_length(length: object) -> Optional[str]:
    """Return an error message if ``length`` is not an integer in [MIN_LENGTH, MAX_LENGTH].

    Any object implementing ``__index__`` (e.g. ``numpy.int64``) counts as an
    integer; ``bool`` does not.
    """
    if isinstance(length, bool):
        return f"length must be an integer between {MIN_LENGTH} and {MAX_LENGTH}"
    try:
        length = operator.index(length)
    except TypeError:
        return f"length must be an integer between {MIN_LENGTH} and {MAX_LENGTH}"
    if length < MIN_LENGTH or length > MAX_LENGTH:
        return f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}"
    return None


def build_hash_input(
    timestamp: int,
    counter: int,
    fingerprint: bytes,
    random_bytes: bytes,
) -> bytes:
    """Concatenate the hash inputs in their fixed order, without length prefixes."""
    buffer = bytearray()
    buffer += pack_int64_le(timestamp)
    buffer += pack_int64_le(counter)
    buffer += fingerprint
    buffer += random_bytes
    return bytes(buffer)


def compute_hash(data: bytes) -> bytes:
    """Return the SHA3-512 digest of ``data``.

    Raises:
        CryptoFailureError: hashlib has no SHA3-512, or the digest is not 64 bytes.
    """
    try:
        hasher = hashlib.new(HASH_ALGORITHM)
        hasher.update(data)
        digest = hasher.digest()
    except (ValueError, TypeError) as exc:
        raise CryptoFailureError(f"SHA3-512 hashing failed: {exc}") from exc

    if len(digest) != HASH_DIGEST_SIZE:
        raise CryptoFailureError(
            f"SHA3-512 returned {len(digest)} bytes, expected {HASH_DIGEST_SIZE}"
        )
    return digest


def format_identifier(prefix: str, encoded: str, length: int) -> str:
    """Join ``prefix`` with the first ``length - 1`` characters of ``encoded``.

    Raises:
        CryptoFailureError: ``encoded`` is too short to fill the identifier.
            A 64-byte digest encodes to up to 100 base-36 digits, so this only
            happens when the digest is degenerate.
    """
    needed = length - PREFIX_LENGTH
    if len(encoded) < needed:
        raise CryptoFailureError(
            f"encoded digest has {len(encoded)} characters, need {needed}"
        )
    return prefix + encoded[:needed]


# ─── State ────────────────────────────────────────────────────────────────────


@dataclass
class GeneratorState:
    """Process-scoped state shared by generators: counter and fingerprint."""

    counter: Counter
    fingerprint: Fingerprint

    @classmethod
    def create(cls, platform: Platform) -> "GeneratorState":
        """Create uninitialised state; both parts are seeded on first use."""
        return cls(counter=Counter(platform), fingerprint=Fingerprint(platform))


# ─── Generator ────────────────────────────────────────────────────────────────


class Cuid2Generator:
    """Thread-safe CUID2 generator.

    Usage:
        generator = Cuid2Generator()
        identifier = generator.generate()        # 24 characters
        short_id = generator.generate(10)

    Args:
        platform: OS boundary (defaults to ``SystemPlatform``).
        state:    Counter/fingerprint holder. Generators sharing a state
                  share its counter sequence.
        clock:    Returns the current time in 100 ns ticks.
    """

    def __init__(
        self,
        platform: Optional[Platform] = None,
        state: Optional[GeneratorState] = None,
        clock: Callable[[], int] = timestamp_ticks,
    ) -> None:
        self.platform: Platform = platform if platform is not None else SystemPlatform()
        self.state = state if state is not None else GeneratorState.create(self.platform)
        self.clock = clock

    def try_generate(self, length: int = DEFAULT_LENGTH) -> GenerationResult:
        """Generate an identifier, reporting failures as a ``GenerationResult``.

        An invalid length is rejected before any randomness is drawn or the
        counter is advanced.
        """
        error = validate_length(length)
        if error is not None:
            logger.debug("length_rejected", length=repr(length))
            return GenerationResult.failure(ErrorKind.INVALID_ARGUMENT, error)
        length = operator.index(length)

        timestamp = self.clock()
        counter = self.state.counter.next()
        fingerprint = self.state.fingerprint.get()
        random_bytes = self.platform.random_bytes(length)
        prefix = prefix_letter(self.platform.random_bytes(1)[0])

        try:
            digest = compute_hash(build_hash_input(timestamp, counter, fingerprint, random_bytes))
            identifier = format_identifier(prefix, encode_base36(digest), length)
        except CryptoFailureError as exc:
            logger.error("crypto_failure", error=exc.message)
            return GenerationResult.failure(ErrorKind.CRYPTO_FAILURE, exc.message)

        return GenerationResult.success(identifier)

    def generate(self, length: int = DEFAULT_LENGTH) -> str:
        """Generate an identifier of exactly ``length`` characters.

        Raises:
            InvalidArgumentError: ``length`` is outside [4, 32].
            CryptoFailureError: the hash primitive failed.
        """
        return self.try_generate(length).unwrap()


# ─── Process-wide default ─────────────────────────────────────────────────────

_default_generator: Optional[Cuid2Generator] = None
_default_lock = threading.Lock()


def get_default_generator() -> Cuid2Generator:
    """Return the process-wide generator, creating it on first use."""
    global _default_generator
    generator = _default_generator
    if generator is not None:
        return generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = Cuid2Generator()
        return _default_generator


def try_generate(length: int = DEFAULT_LENGTH) -> GenerationResult:
    """``Cuid2Generator.try_generate`` on the process-wide generator."""
    return get_default_generator().try_generate(length)


def generate(length: int = DEFAULT_LENGTH) -> str:
    """Generate a CUID2 identifier with the process-wide generator.

    Example:
        >>> identifier = generate()
        >>> len(identifier)
        24
    """
    return get_default_generator().generate(length)
