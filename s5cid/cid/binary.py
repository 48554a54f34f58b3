"""Packing and unpacking of the binary CID layout.

```
offset 0        : type tag (1 byte)
offset 1..33    : multihash = [hash-fn id (1 byte)][digest (32 bytes)]
offset 34..end  : size, little-endian, minimal length (may be empty)
```
"""

from __future__ import annotations

from s5cid.cid.constants import (
    CID_HEAD_LENGTH,
    DIGEST_LENGTH,
    MULTIHASH_LENGTH,
    HashAlgorithm,
)
from s5cid.codec.multibase import encode_base64url
from s5cid.codec.size import DEFAULT_MAX_SIZE_BYTES, decode_size, encode_size
from s5cid.errors import MalformedCIDError


# ── Multihash ────────────────────────────────────────────────────────


def multihash_from_digest(
    digest: bytes, hash_id: int = HashAlgorithm.BLAKE3_DEFAULT
) -> bytes:
    """Prepend the hash function id to a 32-byte digest."""
    if len(digest) != DIGEST_LENGTH:
        raise MalformedCIDError(
            f"digest must be {DIGEST_LENGTH} bytes, got {len(digest)}"
        )
    return bytes([hash_id]) + digest


def digest_from_multihash(multihash: bytes) -> bytes:
    """Strip the hash function id byte."""
    return multihash[1:]


def multihash_to_base64url(multihash: bytes) -> str:
    return encode_base64url(multihash)


# ── CID ──────────────────────────────────────────────────────────────


def pack_cid(
    type_tag: int,
    multihash: bytes,
    size: int,
    max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
) -> bytes:
    """Concatenate ``type_tag || multihash || encode_size(size)``."""
    if not 0 <= type_tag <= 0xFF:
        raise MalformedCIDError(f"type tag must fit in one byte, got {type_tag}")
    if len(multihash) != MULTIHASH_LENGTH:
        raise MalformedCIDError(
            f"multihash must be {MULTIHASH_LENGTH} bytes, got {len(multihash)}"
        )
    return bytes([type_tag]) + multihash + encode_size(size, max_size_bytes)


def _check_head(cid_bytes: bytes) -> None:
    if len(cid_bytes) < CID_HEAD_LENGTH:
        raise MalformedCIDError(
            f"CID must be at least {CID_HEAD_LENGTH} bytes, got {len(cid_bytes)}"
        )


def unpack_type(cid_bytes: bytes) -> int:
    _check_head(cid_bytes)
    return cid_bytes[0]


def unpack_multihash(cid_bytes: bytes) -> bytes:
    """Return the 33 bytes following the type tag."""
    _check_head(cid_bytes)
    return bytes(cid_bytes[1:CID_HEAD_LENGTH])


def unpack_size(cid_bytes: bytes) -> int:
    """Decode the trailing size field. A bare 34-byte head has size 0."""
    _check_head(cid_bytes)
    return decode_size(cid_bytes[CID_HEAD_LENGTH:])


def unpack_digest(cid_bytes: bytes) -> bytes:
    return digest_from_multihash(unpack_multihash(cid_bytes))
