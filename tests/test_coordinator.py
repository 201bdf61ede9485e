import hashlib
import threading

from hashtab.coordinator import PROGRESS_RESOLUTION, Coordinator
from hashtab.exporter import ExportSettings
from hashtab.filetask import FileInfo
from hashtab.legacy import index_by_name, legacy_algorithms


def flags(*names):
    return [preset.name in names for preset in legacy_algorithms()]


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_bytes(content)
    return str(path)


def test_add_files_sums_sizes(tmp_path):
    files = [
        (write(tmp_path, "a", b"12345"), FileInfo("a")),
        (write(tmp_path, "b", b"678"), FileInfo("b")),
    ]
    coord = Coordinator(files, str(tmp_path), ExportSettings(algorithms=flags("MD5")))
    coord.add_files()
    assert coord.size_total == 8
    assert [task.display_name() for task in coord.files] == ["a", "b"]
    assert coord.is_sumfile is False


def test_no_files_finishes_immediately():
    finished = []
    coord = Coordinator([], on_finished=lambda: finished.append(True))
    coord.add_files()
    coord.process_files()
    assert finished == [True]


def test_process_files_runs_all(tmp_path):
    files = [
        (write(tmp_path, "a", b"alpha"), FileInfo("a")),
        (write(tmp_path, "b", b"bravo"), FileInfo("b")),
    ]
    done = threading.Event()
    calls = []
    progress = []

    def finished():
        calls.append(1)
        done.set()

    coord = Coordinator(files, str(tmp_path), ExportSettings(algorithms=flags("MD5")),
                        on_progress=progress.append, on_finished=finished)
    coord.add_files()
    coord.process_files()
    assert done.wait(30)
    coord.cancel()
    md5 = index_by_name("MD5")
    assert [task.results[md5] for task in coord.files] == [
        hashlib.md5(b"alpha").digest(),
        hashlib.md5(b"bravo").digest(),
    ]
    assert calls == [1]
    assert max(progress) == PROGRESS_RESOLUTION


def test_sumfile_type_algorithm_only(tmp_path):
    s = ExportSettings(algorithms=flags("MD5", "SHA-1"), sumfile_algorithm_only=True)
    sha256 = index_by_name("SHA-256")
    coord = Coordinator([(write(tmp_path, "a", b"x"), FileInfo("a"))], "", s, sha256)
    coord.add_files()
    assert coord.is_sumfile is True
    assert s.algorithms == flags("SHA-256")
    assert coord.files[0].enabled == tuple(flags("SHA-256"))


def test_sumfile_type_keeps_others_without_algorithm_only(tmp_path):
    s = ExportSettings(algorithms=flags("MD5"))
    coord = Coordinator([], "", s, index_by_name("SHA-1"))
    coord.add_files()
    assert s.algorithms == flags("MD5", "SHA-1")


def test_sumfile_unknown_type(tmp_path):
    s = ExportSettings(algorithms=flags("MD5"))
    coord = Coordinator([], "", s, -1)
    coord.add_files()
    assert coord.is_sumfile is True
    assert s.algorithms == flags("MD5")


def test_file_progress_reports_part_changes(tmp_path):
    progress = []
    path = write(tmp_path, "a", bytes(512))
    coord = Coordinator([(path, FileInfo("a"))], "", ExportSettings(algorithms=flags("MD5")),
                        on_progress=progress.append)
    coord.add_files()
    coord.file_progress(1)
    assert progress == []
    coord.file_progress(1)
    assert progress == [1]
    coord.file_progress(510)
    assert progress == [1, PROGRESS_RESOLUTION]


def test_file_progress_ignored_when_empty():
    progress = []
    coord = Coordinator([], on_progress=progress.append)
    coord.add_files()
    coord.file_progress(100)
    assert progress == []


def test_default_save_name_single_file():
    coord = Coordinator([("C:\\data\\image.iso", FileInfo("image.iso"))], "C:\\data")
    assert coord.sumfile_default_save_path_and_base_name() == ("C:\\data", "image.iso")


def test_default_save_name_many_files():
    coord = Coordinator(
        [("/d/a", FileInfo("a")), ("/d/b", FileInfo("b"))], "/d"
    )
    assert coord.sumfile_default_save_path_and_base_name() == ("/d", "checksums")


def test_cancel_before_processing_returns(tmp_path):
    coord = Coordinator([(write(tmp_path, "a", b"x"), FileInfo("a"))], "",
                        ExportSettings(algorithms=flags("MD5")))
    coord.add_files()
    coord.cancel()
    assert coord.files[0].cancelled is True