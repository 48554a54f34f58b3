"""Tests for the size field codec."""

from __future__ import annotations

import pytest

from s5cid.codec.size import decode_size, encode_size
from s5cid.errors import SizeOverflowError


def test_zero_encodes_to_empty():
    assert encode_size(0, 16) == b""
    assert encode_size(0, 1) == b""
    assert decode_size(b"") == 0


def test_minimal_length():
    assert len(encode_size(255, 16)) == 1
    assert len(encode_size(256, 16)) == 2
    assert len(encode_size(65535, 16)) == 2
    assert len(encode_size(65536, 16)) == 3


def test_little_endian_layout():
    assert encode_size(5) == b"\x05"
    assert encode_size(0x0102) == b"\x02\x01"
    assert decode_size(b"\x00\x00\x10") == 0x100000


@pytest.mark.parametrize(
    "value", [1, 5, 255, 256, 1_048_576, 2**32 - 1, 2**53 - 1, 2**53 + 1, 2**64 - 1]
)
def test_round_trip(value: int):
    assert decode_size(encode_size(value, 16)) == value


def test_values_beyond_double_precision_survive():
    value = 2**63 + 12345
    assert decode_size(encode_size(value)) == value


def test_largest_value_for_bound():
    assert len(encode_size(2**128 - 1, 16)) == 16


def test_overflow_raises():
    with pytest.raises(SizeOverflowError) as exc_info:
        encode_size(2**128, 16)
    assert exc_info.value.max_bytes == 16

    with pytest.raises(SizeOverflowError):
        encode_size(256, 1)


def test_negative_rejected():
    with pytest.raises(ValueError):
        encode_size(-1)


def test_decode_ignores_trailing_zero_bytes():
    """Non-minimal input still decodes to the same value."""
    assert decode_size(b"\x05\x00\x00") == 5
