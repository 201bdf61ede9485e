import hashlib

import pytest
from Crypto.Hash import KangarooTwelve

from hashtab.legacy import (
    MAX_SIZE,
    by_name,
    index_by_name,
    legacy_algorithms,
)


def _digest(name, data):
    ctx = by_name(name).make_context()
    ctx.update(data)
    return ctx.finish()


def test_first_preset_is_crc32():
    assert legacy_algorithms()[0].name == "CRC32"
    assert index_by_name("CRC32") == 0


def test_index_matches_position():
    for position, preset in enumerate(legacy_algorithms()):
        assert preset.index() == position
        assert index_by_name(preset.name) == position


def test_names_unique():
    names = [preset.name for preset in legacy_algorithms()]
    assert len(names) == len(set(names))


def test_sizes_fit_max_and_match_contexts():
    for preset in legacy_algorithms():
        assert 0 < preset.size <= MAX_SIZE
        ctx = preset.make_context()
        assert ctx.output_size() == preset.size
        ctx.update(b"data")
        assert len(ctx.finish()) == preset.size


def test_md5_extensions():
    assert by_name("MD5").extensions == ("md5", "md5sum", "md5sums")


def test_crc32_has_no_extensions():
    assert by_name("CRC32").extensions == ()


def test_security_flags():
    assert by_name("SHA-256").is_secure is True
    assert by_name("MD5").is_secure is False
    assert by_name("SHA3-512").is_secure is True


def test_sha2_matches_hashlib():
    assert _digest("SHA-256", b"abc") == hashlib.sha256(b"abc").digest()
    assert _digest("MD5", b"abc") == hashlib.md5(b"abc").digest()


@pytest.mark.parametrize(
    "name,reference",
    [
        ("SHA3-224", hashlib.sha3_224),
        ("SHA3-256", hashlib.sha3_256),
        ("SHA3-384", hashlib.sha3_384),
        ("SHA3-512", hashlib.sha3_512),
    ],
)
def test_sha3_presets_match_hashlib(name, reference):
    data = b"The quick brown fox jumps over the lazy dog" * 5
    assert _digest(name, data) == reference(data).digest()


def test_k12_256_matches_reference():
    data = b"kangaroo" * 40
    expected = KangarooTwelve.new(data=data, custom=b"").read(32)
    assert _digest("K12-256", data) == expected


def test_blake3_512_prefix_is_blake3():
    data = b"prefix check"
    assert _digest("BLAKE3-512", data)[:32] == _digest("BLAKE3", data)


def test_ph256_size():
    assert by_name("PH256-528").size == MAX_SIZE


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        by_name("NoSuchHash")
    with pytest.raises(KeyError):
        index_by_name("NoSuchHash")