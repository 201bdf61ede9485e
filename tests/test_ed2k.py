import pytest
from Crypto.Hash import MD4

from hashtab.ed2k import CHUNK_SIZE, Ed2kHash


def md4(data):
    return MD4.new(data).digest()


@pytest.mark.parametrize("extra_null", [False, True])
def test_empty_is_md4_of_nothing(extra_null):
    assert Ed2kHash(extra_null).digest().hex() == "31d6cfe0d16ae931b73c59d7e0c089c0"


@pytest.mark.parametrize("extra_null", [False, True])
def test_small_input_is_plain_md4(extra_null):
    h = Ed2kHash(extra_null)
    h.update(b"some file contents")
    assert h.digest() == md4(b"some file contents")


def test_exact_single_chunk_new_variant():
    data = bytes(CHUNK_SIZE)
    h = Ed2kHash(False)
    h.update(data)
    assert h.digest() == md4(data)


def test_exact_single_chunk_old_variant():
    data = bytes(CHUNK_SIZE)
    h = Ed2kHash(True)
    h.update(data)
    assert h.digest() == md4(md4(data) + md4(b""))


def test_two_exact_chunks():
    chunk = bytes(CHUNK_SIZE)
    new = Ed2kHash(False)
    old = Ed2kHash(True)
    for h in (new, old):
        h.update(chunk)
        h.update(chunk)
    assert new.digest() == md4(md4(chunk) * 2)
    assert old.digest() == md4(md4(chunk) * 2 + md4(b""))


@pytest.mark.parametrize("extra_null", [False, True])
def test_chunk_plus_tail(extra_null):
    chunk = bytes(CHUNK_SIZE)
    tail = b"tail"
    h = Ed2kHash(extra_null)
    h.update(chunk + tail)
    assert h.digest() == md4(md4(chunk) + md4(tail))


@pytest.mark.parametrize("extra_null", [False, True])
def test_split_updates_match_single_update(extra_null):
    data = bytes(CHUNK_SIZE) + b"x" * 1000
    whole = Ed2kHash(extra_null)
    whole.update(data)
    pieces = Ed2kHash(extra_null)
    step = 3_000_001
    for start in range(0, len(data), step):
        pieces.update(data[start:start + step])
    assert pieces.digest() == whole.digest()


def test_digest_keeps_state():
    h = Ed2kHash()
    h.update(b"abc")
    assert h.digest() == h.digest()
    h.update(b"def")
    assert h.hexdigest() == md4(b"abcdef").hex()