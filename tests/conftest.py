"""Shared test fixtures for s5cid."""

import pytest

from s5cid.cid.binary import multihash_from_digest, pack_cid
from s5cid.cid.constants import CidType
from s5cid.config.models import S5CidConfig


@pytest.fixture
def zero_digest():
    return bytes(32)


@pytest.fixture
def sample_digest():
    """A digest with no zero bytes so every offset is distinguishable."""
    return bytes(range(1, 33))


@pytest.fixture
def raw_cid_bytes(zero_digest):
    """Raw CID for a 5-byte file whose digest is all zeros (36 bytes)."""
    return pack_cid(CidType.RAW, multihash_from_digest(zero_digest), 5)


@pytest.fixture
def sample_cid_bytes(sample_digest):
    return pack_cid(CidType.RAW, multihash_from_digest(sample_digest), 1_048_576)


@pytest.fixture
def empty_cid_bytes(sample_digest):
    """Raw CID that declares size 0 (bare 34-byte head)."""
    return pack_cid(CidType.RAW, multihash_from_digest(sample_digest), 0)


@pytest.fixture
def sample_config():
    return S5CidConfig()
