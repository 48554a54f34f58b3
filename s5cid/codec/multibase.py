"""Multibase codecs: base58btc, RFC 4648 base32 and base64url, all unpadded."""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Callable
from enum import Enum

import base58

from s5cid.errors import InvalidEncodingError

BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_BASE58_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]*")
_BASE32_RE = re.compile(r"[A-Z2-7]*")
_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def _first_outside(text: str, alphabet: str) -> str:
    return next(c for c in text if c not in alphabet)


# ── base58btc ────────────────────────────────────────────────────────


def encode_base58(data: bytes) -> str:
    """Encode *data* as a big-endian integer in the Bitcoin base58 alphabet.

    Leading zero bytes carry no value and are dropped, so ``b"\\x00\\x01"``
    and ``b"\\x01"`` encode to the same string. Empty input gives ``""``.
    """
    return base58.b58encode(data.lstrip(b"\0")).decode("ascii")


def decode_base58(text: str) -> bytes:
    """Decode base58btc *text* into its minimal big-endian byte string."""
    if not _BASE58_RE.fullmatch(text):
        raise InvalidEncodingError("base58btc", _first_outside(text, BASE58_ALPHABET))
    try:
        return base58.b58decode(text).lstrip(b"\0")
    except ValueError as e:
        raise InvalidEncodingError("base58btc", detail=str(e)) from e


# ── base32 (RFC 4648) ────────────────────────────────────────────────


def encode_base32(data: bytes) -> str:
    """RFC 4648 base32 in the uppercase alphabet, without ``=`` padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode_base32(text: str) -> bytes:
    """Decode unpadded uppercase base32. Trailing bits short of a byte are dropped.

    Callers that accept lowercase input must uppercase it first. Lengths that
    unpadded base32 never produces (1, 3 or 6 mod 8) are rejected.
    """
    if not _BASE32_RE.fullmatch(text):
        raise InvalidEncodingError("base32", _first_outside(text, BASE32_ALPHABET))
    padded = text + "=" * (-len(text) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error as e:
        raise InvalidEncodingError("base32", detail=str(e)) from e


# ── base64url ────────────────────────────────────────────────────────


def encode_base64url(data: bytes) -> str:
    """URL-safe base64 with the ``=`` padding stripped."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64url(text: str) -> bytes:
    """Decode unpadded URL-safe base64, restoring the padding first."""
    if not _BASE64URL_RE.fullmatch(text):
        bad = next(c for c in text if not (c.isascii() and (c.isalnum() or c in "-_")))
        raise InvalidEncodingError("base64url", bad)
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidEncodingError("base64url", detail=str(e)) from e


# ── Prefix dispatch ──────────────────────────────────────────────────


class Multibase(Enum):
    """Multibase prefixes understood by S5, keyed by their prefix character."""

    BASE58BTC = "z"
    BASE64URL = "u"
    BASE32 = "b"

    @property
    def prefix(self) -> str:
        return self.value

    def encode(self, data: bytes) -> str:
        """Encode *data* and prepend the prefix character."""
        encoder, _ = _CODECS[self]
        return self.value + encoder(data)

    def decode(self, payload: str) -> bytes:
        """Decode a payload that has already had its prefix stripped."""
        _, decoder = _CODECS[self]
        return decoder(payload)


def _encode_base32_lower(data: bytes) -> str:
    return encode_base32(data).lower()


def _decode_base32_any_case(text: str) -> bytes:
    # str.upper maps some non-ASCII letters into the alphabet, e.g. "\u00df" -> "SS"
    if not text.isascii():
        raise InvalidEncodingError("base32", next(c for c in text if not c.isascii()))
    return decode_base32(text.upper())


_CODECS: dict[Multibase, tuple[Callable[[bytes], str], Callable[[str], bytes]]] = {
    Multibase.BASE58BTC: (encode_base58, decode_base58),
    Multibase.BASE64URL: (encode_base64url, decode_base64url),
    Multibase.BASE32: (_encode_base32_lower, _decode_base32_any_case),
}
