import hashlib
from concurrent.futures import CancelledError

import pytest

from hashtab.filetask import (
    BLOCK_SIZE,
    MATCH_MISMATCH,
    MATCH_NONE,
    FileHashTask,
    FileInfo,
)
from hashtab.legacy import index_by_name, legacy_algorithms


def _only(*names):
    wanted = {index_by_name(name) for name in names}
    return [i in wanted for i in range(len(legacy_algorithms()))]


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    data = bytes(range(256)) * 40
    path.write_bytes(data)
    return path, data


def test_sha256_result_matches_hashlib(sample):
    path, data = sample
    task = FileHashTask(path, FileInfo("sample.bin"), _only("SHA-256", "MD5"))
    task.run()
    assert task.error is None
    assert task.results[index_by_name("SHA-256")] == hashlib.sha256(data).digest()
    assert task.results[index_by_name("MD5")] == hashlib.md5(data).digest()


def test_disabled_algorithms_have_empty_results(sample):
    path, _ = sample
    task = FileHashTask(path, FileInfo("sample.bin"), _only("SHA-1"))
    task.run()
    enabled_index = index_by_name("SHA-1")
    assert all(
        result == b"" for i, result in enumerate(task.results) if i != enabled_index
    )
    assert len(task.results[enabled_index]) == 20


def test_no_expected_hashes_gives_match_none(sample):
    path, _ = sample
    task = FileHashTask(path, FileInfo("sample.bin"), _only("SHA-256"))
    task.run()
    assert task.match_state == MATCH_NONE


def test_wrong_expected_hash_gives_mismatch(sample):
    path, _ = sample
    info = FileInfo("sample.bin", (bytes(32),))
    task = FileHashTask(path, info, _only("SHA-256"))
    task.run()
    assert task.match_state == MATCH_MISMATCH


def test_matching_hash_gives_its_index(sample):
    path, data = sample
    info = FileInfo("sample.bin", (hashlib.sha256(data).digest(),))
    task = FileHashTask(path, info, _only("SHA-256"))
    task.run()
    assert task.match_state == index_by_name("SHA-256")


def test_secure_match_replaces_insecure_one(sample):
    path, data = sample
    info = FileInfo("sample.bin", (hashlib.md5(data).digest(), hashlib.sha256(data).digest()))
    task = FileHashTask(path, info, _only("MD5", "SHA-256"))
    task.run()
    assert task.match_state == index_by_name("SHA-256")


def test_first_secure_match_is_kept(sample):
    path, data = sample
    info = FileInfo("sample.bin", (hashlib.sha256(data).digest(), hashlib.sha1(data).digest()))
    task = FileHashTask(path, info, _only("SHA-1", "SHA-256"))
    task.run()
    assert task.match_state == index_by_name("SHA-1")


def test_progress_reports_blocks(tmp_path):
    path = tmp_path / "big.bin"
    size = 2 * BLOCK_SIZE + 1000
    path.write_bytes(b"\xab" * size)
    seen = []
    task = FileHashTask(path, FileInfo("big.bin"), _only("SHA-256"), seen.append)
    task.run()
    assert seen == [BLOCK_SIZE, BLOCK_SIZE, 1000]
    assert task.size == size
    assert task.results[index_by_name("SHA-256")] == hashlib.sha256(b"\xab" * size).digest()


def test_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    seen = []
    task = FileHashTask(path, FileInfo("empty"), _only("SHA-256"), seen.append)
    task.run()
    assert seen == [0]
    assert task.results[index_by_name("SHA-256")] == hashlib.sha256(b"").digest()


def test_missing_file_records_error(tmp_path):
    seen = []
    task = FileHashTask(tmp_path / "missing", FileInfo("missing"), _only("SHA-256"), seen.append)
    task.run()
    assert isinstance(task.error, FileNotFoundError)
    assert seen == []
    assert task.results[index_by_name("SHA-256")] == b""


def test_cancel_before_run(sample):
    path, _ = sample
    task = FileHashTask(path, FileInfo("sample.bin"), _only("SHA-256"))
    task.cancel()
    task.run()
    assert isinstance(task.error, CancelledError)
    assert task.results[index_by_name("SHA-256")] == b""


def test_cancel_during_run(tmp_path):
    path = tmp_path / "big.bin"
    path.write_bytes(bytes(2 * BLOCK_SIZE))
    seen = []
    holder = {}

    def progress(size):
        seen.append(size)
        holder["task"].cancel()

    task = FileHashTask(path, FileInfo("big.bin"), _only("SHA-256"), progress)
    holder["task"] = task
    task.run()
    assert isinstance(task.error, CancelledError)
    assert task.results[index_by_name("SHA-256")] == b""
    assert task.size == 2 * BLOCK_SIZE
    assert seen == [BLOCK_SIZE]


def test_display_name(sample):
    path, _ = sample
    task = FileHashTask(path, FileInfo("dir\\sample.bin"), _only("CRC32"))
    assert task.display_name() == "dir\\sample.bin"


def test_wrong_number_of_flags(sample):
    path, _ = sample
    with pytest.raises(ValueError):
        FileHashTask(path, FileInfo("sample.bin"), [True])


def test_run_twice_raises(sample):
    path, _ = sample
    task = FileHashTask(path, FileInfo("sample.bin"), _only("CRC32"))
    task.run()
    with pytest.raises(RuntimeError):
        task.run()