"""Byte-level encoding helpers for identifier generation.

  encode_base36()   big-endian bytes of any width -> base-36 digits (0-9a-z)
  pack_int64_le()   signed 64-bit integer -> 8 little-endian bytes
  pack_uint32_le()  process id -> 4 little-endian bytes
  prefix_letter()   one random byte -> lowercase letter a-z

Python integers are unbounded, so a 64-byte digest converts exactly without
any manual long division.
"""

from __future__ import annotations

from cuid2.constants import (
    BASE36_ALPHABET,
    BASE36_RADIX,
    PREFIX_ALPHABET,
    UINT64_MASK,
)

_UINT32_MASK = 0xFFFFFFFF


def encode_base36(data: bytes) -> str:
    """Encode ``data`` as a base-36 string.

    The input is read as one big-endian unsigned integer. Leading zero bytes
    do not produce leading ``"0"`` digits; empty or all-zero input yields
    ``"0"``. The output is not truncated.

    Examples:
        >>> encode_base36(bytes([42]))
        '16'
        >>> encode_base36(bytes([1, 0]))
        '74'
    """
    num = int.from_bytes(bytes(data), "big")
    if num == 0:
        return "0"

    digits: list[str] = []
    while num:
        num, remainder = divmod(num, BASE36_RADIX)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def pack_int64_le(value: int) -> bytes:
    """Serialize a signed 64-bit integer as 8 little-endian bytes (two's complement)."""
    return (value & UINT64_MASK).to_bytes(8, "little")


def pack_uint32_le(value: int) -> bytes:
    """Serialize the low 32 bits of ``value`` as 4 little-endian bytes."""
    return (value & _UINT32_MASK).to_bytes(4, "little")


def prefix_letter(random_byte: int) -> str:
    # 256 % 26 != 0: the bias towards a-v is accepted.
    return PREFIX_ALPHABET[random_byte % len(PREFIX_ALPHABET)]
