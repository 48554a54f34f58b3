"""Byte-level codecs: multibase text encodings and the size field."""

from s5cid.codec.multibase import (
    BASE32_ALPHABET,
    BASE58_ALPHABET,
    Multibase,
    decode_base32,
    decode_base58,
    decode_base64url,
    encode_base32,
    encode_base58,
    encode_base64url,
)
from s5cid.codec.size import DEFAULT_MAX_SIZE_BYTES, decode_size, encode_size

__all__ = [
    "BASE32_ALPHABET",
    "BASE58_ALPHABET",
    "DEFAULT_MAX_SIZE_BYTES",
    "Multibase",
    "decode_base32",
    "decode_base58",
    "decode_base64url",
    "decode_size",
    "encode_base32",
    "encode_base58",
    "encode_base64url",
    "encode_size",
]
