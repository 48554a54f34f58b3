"""Minimal little-endian encoding for the CID size field."""

from __future__ import annotations

from s5cid.errors import SizeOverflowError

DEFAULT_MAX_SIZE_BYTES = 16


def encode_size(value: int, max_bytes: int = DEFAULT_MAX_SIZE_BYTES) -> bytes:
    """Encode *value* in as few little-endian bytes as possible.

    Zero encodes to ``b""``. Raises :class:`SizeOverflowError` when the value
    needs more than *max_bytes* bytes.
    """
    if value < 0:
        raise ValueError(f"size must be non-negative, got {value}")
    length = (value.bit_length() + 7) // 8
    if length > max_bytes:
        raise SizeOverflowError(value, max_bytes)
    return value.to_bytes(length, "little")


def decode_size(data: bytes) -> int:
    """Interpret *data* as a little-endian unsigned integer; empty is 0."""
    return int.from_bytes(data, "little")
