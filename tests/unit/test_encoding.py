"""Unit tests for cuid2/utils/encoding.py: base-36 codec and byte packing."""

from __future__ import annotations

import re

import pytest

from cuid2.constants import INT64_MAX, INT64_MIN
from cuid2.utils.encoding import (
    encode_base36,
    pack_int64_le,
    pack_uint32_le,
    prefix_letter,
)

BASE36_RE = re.compile(r"^[0-9a-z]+$")


# ─── encode_base36 ────────────────────────────────────────────────────────────


class TestEncodeBase36:
    def test_empty_input_is_zero(self) -> None:
        assert encode_base36(b"") == "0"

    def test_all_zero_input_is_zero(self) -> None:
        assert encode_base36(bytes([0, 0, 0, 0])) == "0"

    @pytest.mark.parametrize(
        "data, expected",
        [
            ([42], "16"),
            ([255], "73"),
            ([1, 0], "74"),
            ([35], "z"),
            ([36], "10"),
            ([1], "1"),
        ],
    )
    def test_known_values(self, data: list[int], expected: str) -> None:
        assert encode_base36(bytes(data)) == expected

    def test_leading_zero_bytes_do_not_add_digits(self) -> None:
        """Big-integer semantics: 0x00002a encodes like 0x2a."""
        assert encode_base36(bytes([0, 0, 42])) == "16"

    def test_accepts_bytearray(self) -> None:
        assert encode_base36(bytearray([1, 0])) == "74"

    def test_digest_width_input_round_trips_through_int(self) -> None:
        """A 64-byte value must be converted with no loss of precision."""
        data = bytes(range(1, 65))
        encoded = encode_base36(data)
        assert BASE36_RE.match(encoded)
        assert int(encoded, 36) == int.from_bytes(data, "big")

    def test_max_digest_is_far_longer_than_max_identifier(self) -> None:
        encoded = encode_base36(b"\xff" * 64)
        assert len(encoded) == 100
        assert len(encoded) > 31

    def test_no_leading_zero_digit(self) -> None:
        encoded = encode_base36(bytes([0, 1, 2, 3]))
        assert not encoded.startswith("0")


# ─── Integer packing ──────────────────────────────────────────────────────────


class TestPackInt64:
    def test_one_is_little_endian(self) -> None:
        assert pack_int64_le(1) == b"\x01" + b"\x00" * 7

    def test_minus_one_is_twos_complement(self) -> None:
        assert pack_int64_le(-1) == b"\xff" * 8

    def test_bounds(self) -> None:
        assert pack_int64_le(INT64_MAX) == b"\xff" * 7 + b"\x7f"
        assert pack_int64_le(INT64_MIN) == b"\x00" * 7 + b"\x80"

    def test_always_eight_bytes(self) -> None:
        for value in (0, 1, 255, 1 << 40, -(1 << 40)):
            assert len(pack_int64_le(value)) == 8


class TestPackUint32:
    def test_pid_layout(self) -> None:
        assert pack_uint32_le(0x01020304) == b"\x04\x03\x02\x01"

    def test_truncates_to_low_32_bits(self) -> None:
        assert pack_uint32_le(0x1_0000_0005) == b"\x05\x00\x00\x00"


# ─── prefix_letter ────────────────────────────────────────────────────────────


class TestPrefixLetter:
    def test_range_endpoints(self) -> None:
        assert prefix_letter(0) == "a"
        assert prefix_letter(25) == "z"
        assert prefix_letter(26) == "a"

    def test_every_byte_maps_to_lowercase_letter(self) -> None:
        letters = {prefix_letter(b) for b in range(256)}
        assert letters == set("abcdefghijklmnopqrstuvwxyz")

    def test_modulo_mapping(self) -> None:
        assert prefix_letter(255) == "v"
