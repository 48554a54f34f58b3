"""Fields derived from CID text: multihash, size, digest and a full report."""

from __future__ import annotations

from s5cid.cid.binary import (
    multihash_to_base64url,
    unpack_digest,
    unpack_multihash,
    unpack_size,
)
from s5cid.cid.models import CidInfo
from s5cid.cid.text import decode_cid
from s5cid.codec.multibase import Multibase
from s5cid.errors import NoDigestAvailableError


def extract_multihash(text: str) -> bytes:
    return unpack_multihash(decode_cid(text))


def extract_size(text: str) -> int:
    return unpack_size(decode_cid(text))


def has_nonzero_size(text: str) -> bool:
    return extract_size(text) != 0


def _require_size(cid_bytes: bytes, text: str) -> None:
    if unpack_size(cid_bytes) == 0:
        raise NoDigestAvailableError(f"CID {text!r} declares size 0 and carries no digest")


def extract_digest_hex(text: str) -> str:
    """Hex digest of a CID; raises :class:`NoDigestAvailableError` for size 0."""
    cid_bytes = decode_cid(text)
    _require_size(cid_bytes, text)
    return unpack_digest(cid_bytes).hex()


def extract_multihash_base64url(text: str) -> str:
    cid_bytes = decode_cid(text)
    _require_size(cid_bytes, text)
    return multihash_to_base64url(unpack_multihash(cid_bytes))


def describe_all(text: str) -> CidInfo:
    """Decode *text* once and report all three forms plus digest and size."""
    cid_bytes = decode_cid(text)
    size = unpack_size(cid_bytes)

    mhash_b64: str | None = None
    digest_hex: str | None = None
    if size != 0:
        mhash_b64 = multihash_to_base64url(unpack_multihash(cid_bytes))
        digest_hex = unpack_digest(cid_bytes).hex()

    return CidInfo(
        z_form=Multibase.BASE58BTC.encode(cid_bytes),
        u_form=Multibase.BASE64URL.encode(cid_bytes),
        b_form=Multibase.BASE32.encode(cid_bytes),
        base64url_multihash=mhash_b64,
        digest_hex=digest_hex,
        size=size,
    )
