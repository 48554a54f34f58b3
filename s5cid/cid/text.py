"""Prefixed text forms of a binary CID."""

from __future__ import annotations

from s5cid.codec.multibase import Multibase
from s5cid.errors import InvalidCIDError

PrefixLike = Multibase | str


def resolve_prefix(prefix: PrefixLike) -> Multibase:
    """Map a prefix character (``B`` counts as ``b``) to its :class:`Multibase`."""
    if isinstance(prefix, Multibase):
        return prefix
    if prefix == "B":
        return Multibase.BASE32
    try:
        return Multibase(prefix)
    except ValueError:
        raise InvalidCIDError(f"Unsupported multibase prefix {prefix!r}") from None


def encode_cid(prefix: PrefixLike, cid_bytes: bytes) -> str:
    """Encode *cid_bytes* as ``z`` base58btc, ``u`` base64url or ``b`` lowercase base32."""
    return resolve_prefix(prefix).encode(cid_bytes)


def split_cid(text: str) -> tuple[Multibase, str]:
    """Split CID text into its multibase and the undecoded payload."""
    if not text:
        raise InvalidCIDError("Empty CID")
    return resolve_prefix(text[0]), text[1:]


def decode_cid(text: str) -> bytes:
    """Decode any of the three prefixed forms back to binary.

    The base32 body is case-insensitive; base58btc and base64url are not.
    """
    base, payload = split_cid(text)
    return base.decode(payload)
