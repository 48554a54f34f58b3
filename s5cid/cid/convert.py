"""Direct text-to-text conversion between CID multibase forms."""

from __future__ import annotations

from s5cid.cid.text import PrefixLike, resolve_prefix, split_cid
from s5cid.codec.multibase import Multibase
from s5cid.errors import InvalidCIDError
from s5cid.url import get_subdomain


def convert(text: str, from_prefix: PrefixLike, to_prefix: PrefixLike) -> str:
    """Re-encode CID *text* from one multibase form into another.

    Raises :class:`InvalidCIDError` if *text* does not carry *from_prefix*.
    """
    source = resolve_prefix(from_prefix)
    target = resolve_prefix(to_prefix)
    base, payload = split_cid(text)
    if base is not source:
        raise InvalidCIDError(
            f"Expected a {source.name.lower()} CID starting with {source.value!r}, "
            f"got {text[:1]!r}"
        )
    return target.encode(base.decode(payload))


def base58_to_base32(text: str) -> str:
    return convert(text, Multibase.BASE58BTC, Multibase.BASE32)


def base32_to_base58(text: str) -> str:
    return convert(text, Multibase.BASE32, Multibase.BASE58BTC)


def base64url_to_base58(text: str) -> str:
    return convert(text, Multibase.BASE64URL, Multibase.BASE58BTC)


def base58_to_base64url(text: str) -> str:
    return convert(text, Multibase.BASE58BTC, Multibase.BASE64URL)


def base64url_to_base32(text: str) -> str:
    return convert(text, Multibase.BASE64URL, Multibase.BASE32)


def base32_to_base64url(text: str) -> str:
    return convert(text, Multibase.BASE32, Multibase.BASE64URL)


def convert_download_directory_input(text: str) -> str:
    """Normalise a CID or portal URL into the ``b`` form used for directories.

    URLs are not decoded: the first label of the host is assumed to already be
    a base32 CID and is returned as-is. ``b`` CIDs also pass through unchanged.
    """
    if text.startswith("http"):
        subdomain = get_subdomain(text)
        if subdomain is None:
            raise InvalidCIDError(f"No CID subdomain in URL {text!r}")
        return subdomain

    base, _ = split_cid(text)
    if base is Multibase.BASE32:
        return text
    return convert(text, base, Multibase.BASE32)
