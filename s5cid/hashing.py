"""BLAKE3 file digests and CIDs built straight from files on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from blake3 import blake3

from s5cid.cid.constants import CidType
from s5cid.cid.models import Cid

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024


def hash_bytes(data: bytes) -> bytes:
    """32-byte BLAKE3 digest of an in-memory buffer."""
    return blake3(data).digest()


def hash_file(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Stream *path* through BLAKE3 and return the 32-byte digest.

    I/O errors propagate unchanged.
    """
    hasher = blake3()
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.digest()


def file_size(path: str | Path) -> int:
    return os.stat(path).st_size


def cid_from_file(
    path: str | Path,
    cid_type: int = CidType.RAW,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Cid:
    """Build a CID for *path* from its BLAKE3 digest and byte length."""
    size = file_size(path)
    digest = hash_file(path, chunk_size=chunk_size)
    logger.debug("Hashed %s (%d bytes): %s", path, size, digest.hex())
    return Cid.from_digest(digest, size, cid_type=cid_type)
