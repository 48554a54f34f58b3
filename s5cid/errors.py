"""Exception types raised by the CID codecs."""

from __future__ import annotations


class CIDError(ValueError):
    """Base class for every codec failure."""


class InvalidEncodingError(CIDError):
    """A character falls outside the alphabet of a multibase codec."""

    def __init__(self, encoding: str, char: str | None = None, detail: str | None = None) -> None:
        self.encoding = encoding
        self.char = char
        if detail is None:
            detail = f"invalid character {char!r}" if char is not None else "malformed input"
        super().__init__(f"Invalid {encoding} string: {detail}")


class InvalidCIDError(CIDError):
    """The CID text carries an empty or unrecognised multibase prefix."""


class MalformedCIDError(CIDError):
    """A binary CID or multihash does not have the required layout."""


class NoDigestAvailableError(CIDError):
    """A digest was requested from a CID that declares a zero size."""


class SizeOverflowError(CIDError):
    """A size value does not fit in the allowed number of bytes."""

    def __init__(self, value: int, max_bytes: int) -> None:
        self.value = value
        self.max_bytes = max_bytes
        super().__init__(f"Size {value} does not fit in {max_bytes} byte(s)")
