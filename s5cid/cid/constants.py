"""Registered byte values for the S5 CID format."""

from __future__ import annotations

from enum import IntEnum


class CidType(IntEnum):
    """CID type tags.

    The values were picked so that the base58 and base32 forms of different
    CID types are easy to tell apart and do not collide with multicodec.
    """

    RAW = 0x26
    METADATA_MEDIA = 0xC5
    METADATA_WEBAPP = 0x59
    RESOLVER = 0x25
    USER_IDENTITY = 0x77
    BRIDGE = 0x3A
    ENCRYPTED = 0xAE


class HashAlgorithm(IntEnum):
    """Multihash function ids."""

    BLAKE3_DEFAULT = 0x1F  # BLAKE3, 256-bit output


DIGEST_LENGTH = 32
MULTIHASH_LENGTH = 1 + DIGEST_LENGTH
CID_HEAD_LENGTH = 1 + MULTIHASH_LENGTH
