"""Tests for the derived extraction API."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from s5cid.cid import extract as extract_module
from s5cid.cid.extract import (
    describe_all,
    extract_digest_hex,
    extract_multihash,
    extract_multihash_base64url,
    extract_size,
    has_nonzero_size,
)
from s5cid.cid.models import CidInfo
from s5cid.cid.text import encode_cid
from s5cid.errors import InvalidCIDError, NoDigestAvailableError

PREFIXES = ["z", "u", "b"]


@pytest.mark.parametrize("prefix", PREFIXES)
def test_concrete_scenario_size(prefix: str, raw_cid_bytes):
    assert extract_size(encode_cid(prefix, raw_cid_bytes)) == 5


@pytest.mark.parametrize("prefix", PREFIXES)
def test_extract_multihash(prefix: str, sample_cid_bytes, sample_digest):
    mhash = extract_multihash(encode_cid(prefix, sample_cid_bytes))
    assert mhash == b"\x1f" + sample_digest


@pytest.mark.parametrize("prefix", PREFIXES)
def test_extract_digest_hex(prefix: str, sample_cid_bytes, sample_digest):
    assert extract_digest_hex(encode_cid(prefix, sample_cid_bytes)) == sample_digest.hex()


def test_zero_digest_hex(raw_cid_bytes):
    assert extract_digest_hex(encode_cid("z", raw_cid_bytes)) == "00" * 32


@pytest.mark.parametrize("prefix", PREFIXES)
def test_zero_size_has_no_digest(prefix: str, empty_cid_bytes):
    text = encode_cid(prefix, empty_cid_bytes)
    with pytest.raises(NoDigestAvailableError):
        extract_digest_hex(text)
    with pytest.raises(NoDigestAvailableError):
        extract_multihash_base64url(text)
    assert extract_size(text) == 0
    assert has_nonzero_size(text) is False


def test_multihash_base64url(raw_cid_bytes):
    encoded = extract_multihash_base64url(encode_cid("u", raw_cid_bytes))
    assert encoded.startswith("HwAA")
    assert len(encoded) == 44


def test_has_nonzero_size(sample_cid_bytes):
    assert has_nonzero_size(encode_cid("b", sample_cid_bytes)) is True


@pytest.mark.parametrize(
    "fn", [extract_multihash, extract_size, extract_digest_hex, describe_all, has_nonzero_size]
)
@pytest.mark.parametrize("bad", ["", "xabc", "Zabc", "s5://zabc"])
def test_unknown_prefix_rejected(fn, bad: str):
    with pytest.raises(InvalidCIDError):
        fn(bad)


# ── describe_all ─────────────────────────────────────────────────────


@pytest.mark.parametrize("prefix", PREFIXES)
def test_describe_all_same_from_any_form(prefix: str, sample_cid_bytes):
    info = describe_all(encode_cid(prefix, sample_cid_bytes))
    assert isinstance(info, CidInfo)
    assert info.z_form == encode_cid("z", sample_cid_bytes)
    assert info.u_form == encode_cid("u", sample_cid_bytes)
    assert info.b_form == encode_cid("b", sample_cid_bytes)
    assert info.size == 1_048_576
    assert info.digest_hex == bytes(range(1, 33)).hex()
    assert info.base64url_multihash == extract_multihash_base64url(info.u_form)


def test_describe_all_zero_size(empty_cid_bytes):
    info = describe_all(encode_cid("z", empty_cid_bytes))
    assert info.size == 0
    assert info.digest_hex is None
    assert info.base64url_multihash is None
    assert info.b_form == encode_cid("b", empty_cid_bytes)


def test_describe_all_decodes_once(sample_cid_bytes):
    text = encode_cid("b", sample_cid_bytes)
    with patch.object(
        extract_module, "decode_cid", wraps=extract_module.decode_cid
    ) as spy:
        describe_all(text)
    assert spy.call_count == 1


def test_describe_all_serializes(sample_cid_bytes):
    data = describe_all(encode_cid("z", sample_cid_bytes)).model_dump()
    assert set(data) == {
        "z_form",
        "u_form",
        "b_form",
        "base64url_multihash",
        "digest_hex",
        "size",
    }
