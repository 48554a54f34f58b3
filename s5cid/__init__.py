"""s5cid - S5 content identifiers: binary format, multibase text forms and extraction."""

from s5cid.cid import (
    Cid,
    CidInfo,
    CidType,
    HashAlgorithm,
    convert,
    convert_download_directory_input,
    decode_cid,
    describe_all,
    encode_cid,
    extract_digest_hex,
    extract_multihash,
    extract_size,
    pack_cid,
    unpack_digest,
    unpack_multihash,
    unpack_size,
)
from s5cid.codec import Multibase, decode_size, encode_size
from s5cid.config import S5CidConfig, load_config
from s5cid.errors import (
    CIDError,
    InvalidCIDError,
    InvalidEncodingError,
    MalformedCIDError,
    NoDigestAvailableError,
    SizeOverflowError,
)
from s5cid.hashing import cid_from_file, hash_file

__version__ = "0.1.0"

__all__ = [
    "CIDError",
    "Cid",
    "CidInfo",
    "CidType",
    "HashAlgorithm",
    "InvalidCIDError",
    "InvalidEncodingError",
    "MalformedCIDError",
    "Multibase",
    "NoDigestAvailableError",
    "S5CidConfig",
    "SizeOverflowError",
    "cid_from_file",
    "convert",
    "convert_download_directory_input",
    "decode_cid",
    "decode_size",
    "describe_all",
    "encode_cid",
    "encode_size",
    "extract_digest_hex",
    "extract_multihash",
    "extract_size",
    "hash_file",
    "load_config",
    "pack_cid",
    "unpack_digest",
    "unpack_multihash",
    "unpack_size",
]
