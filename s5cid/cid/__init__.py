"""S5 CID binary format, text forms, conversion and extraction."""

from s5cid.cid.binary import (
    digest_from_multihash,
    multihash_from_digest,
    multihash_to_base64url,
    pack_cid,
    unpack_digest,
    unpack_multihash,
    unpack_size,
    unpack_type,
)
from s5cid.cid.constants import (
    CID_HEAD_LENGTH,
    DIGEST_LENGTH,
    MULTIHASH_LENGTH,
    CidType,
    HashAlgorithm,
)
from s5cid.cid.convert import (
    base32_to_base58,
    base32_to_base64url,
    base58_to_base32,
    base58_to_base64url,
    base64url_to_base32,
    base64url_to_base58,
    convert,
    convert_download_directory_input,
)
from s5cid.cid.extract import (
    describe_all,
    extract_digest_hex,
    extract_multihash,
    extract_multihash_base64url,
    extract_size,
    has_nonzero_size,
)
from s5cid.cid.models import Cid, CidInfo
from s5cid.cid.text import decode_cid, encode_cid, resolve_prefix

__all__ = [
    "CID_HEAD_LENGTH",
    "DIGEST_LENGTH",
    "MULTIHASH_LENGTH",
    "Cid",
    "CidInfo",
    "CidType",
    "HashAlgorithm",
    "base32_to_base58",
    "base32_to_base64url",
    "base58_to_base32",
    "base58_to_base64url",
    "base64url_to_base32",
    "base64url_to_base58",
    "convert",
    "convert_download_directory_input",
    "decode_cid",
    "describe_all",
    "digest_from_multihash",
    "encode_cid",
    "extract_digest_hex",
    "extract_multihash",
    "extract_multihash_base64url",
    "extract_size",
    "has_nonzero_size",
    "multihash_from_digest",
    "multihash_to_base64url",
    "pack_cid",
    "resolve_prefix",
    "unpack_digest",
    "unpack_multihash",
    "unpack_size",
    "unpack_type",
]
