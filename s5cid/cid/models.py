"""Value types for the CID subsystem."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from s5cid.cid.binary import (
    digest_from_multihash,
    multihash_from_digest,
    pack_cid,
    unpack_multihash,
    unpack_size,
    unpack_type,
)
from s5cid.cid.constants import MULTIHASH_LENGTH, CidType, HashAlgorithm
from s5cid.cid.text import PrefixLike, decode_cid, encode_cid
from s5cid.codec.size import DEFAULT_MAX_SIZE_BYTES
from s5cid.errors import MalformedCIDError


@dataclass(frozen=True)
class Cid:
    """An S5 content identifier: type tag, multihash and declared size."""

    cid_type: int
    multihash: bytes
    size: int = 0

    def __post_init__(self) -> None:
        if len(self.multihash) != MULTIHASH_LENGTH:
            raise MalformedCIDError(
                f"multihash must be {MULTIHASH_LENGTH} bytes, got {len(self.multihash)}"
            )
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    @classmethod
    def from_digest(
        cls,
        digest: bytes,
        size: int,
        cid_type: int = CidType.RAW,
        hash_id: int = HashAlgorithm.BLAKE3_DEFAULT,
    ) -> Cid:
        return cls(cid_type=cid_type, multihash=multihash_from_digest(digest, hash_id), size=size)

    @classmethod
    def from_bytes(cls, data: bytes) -> Cid:
        return cls(
            cid_type=unpack_type(data),
            multihash=unpack_multihash(data),
            size=unpack_size(data),
        )

    @classmethod
    def decode(cls, text: str) -> Cid:
        """Parse any prefixed text form."""
        return cls.from_bytes(decode_cid(text))

    @property
    def digest(self) -> bytes:
        return digest_from_multihash(self.multihash)

    @property
    def hash_algorithm(self) -> int:
        return self.multihash[0]

    @property
    def type_name(self) -> str:
        """Registered name of the type tag, or its hex value if unknown."""
        try:
            return CidType(self.cid_type).name.lower()
        except ValueError:
            return f"0x{self.cid_type:02x}"

    def to_bytes(self, max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES) -> bytes:
        return pack_cid(self.cid_type, self.multihash, self.size, max_size_bytes)

    def encode(self, prefix: PrefixLike = "z") -> str:
        return encode_cid(prefix, self.to_bytes())

    def __str__(self) -> str:
        return self.encode()


class CidInfo(BaseModel):
    """Every representation of a CID plus the fields derived from it.

    ``base64url_multihash`` and ``digest_hex`` are None when the CID declares
    a zero size, since such a CID carries no usable digest.
    """

    z_form: str
    u_form: str
    b_form: str
    base64url_multihash: str | None = None
    digest_hex: str | None = None
    size: int = Field(ge=0)
