"""Shared constants for cuid2.

All numeric bounds and fixed values used across modules are defined here.
No magic numbers in other modules: import from here.
"""

# ─── Identifier length ────────────────────────────────────────────────────────

# Default identifier length in characters.
DEFAULT_LENGTH: int = 24

# Shortest identifier accepted by generate(). Shorter ids collide far too often.
MIN_LENGTH: int = 4

# Longest identifier accepted by generate().
MAX_LENGTH: int = 32

# The random lowercase letter that starts every identifier.
PREFIX_LENGTH: int = 1

# ─── Counter ──────────────────────────────────────────────────────────────────

# Odd multiplier applied to the random counter seed so that independently
# seeded processes start far apart in the int64 range.
COUNTER_SEED_MULTIPLIER: int = 476_782_367

INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1
UINT64_MASK: int = (1 << 64) - 1

# ─── Encoding ─────────────────────────────────────────────────────────────────

BASE36_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE36_RADIX: int = 36

PREFIX_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz"

# ─── Hashing ──────────────────────────────────────────────────────────────────

# NIST FIPS-202 SHA3-512, as named by hashlib.
HASH_ALGORITHM: str = "sha3_512"
HASH_DIGEST_SIZE: int = 64

# ─── Time ─────────────────────────────────────────────────────────────────────

# Timestamps are 100-nanosecond ticks since the Unix epoch.
NANOSECONDS_PER_TICK: int = 100
TICKS_PER_SECOND: int = 10_000_000

# ─── Fingerprint ──────────────────────────────────────────────────────────────

# Random bytes drawn for the hostname fallback (hex encoded -> 16 characters).
FALLBACK_HOSTNAME_BYTES: int = 8
