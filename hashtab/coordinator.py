"""Runs hash tasks for a set of files and reports progress and completion."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor

from .exporter import ExportSettings
from .filetask import FileHashTask, FileInfo

PROGRESS_RESOLUTION = 256
SUMFILE_NONE = -2
SUMFILE_UNKNOWN = -1


class Coordinator:
    """Owns the hash tasks for one set of files.

    ``sumfile_type`` is -2 when the files do not come from a checksum file,
    -1 when they do but its algorithm is unknown, and otherwise the preset
    index the checksum file was made with.
    """

    def __init__(
        self,
        files: Iterable[tuple[str, FileInfo]],
        base_path: str = "",
        settings: ExportSettings | None = None,
        sumfile_type: int = SUMFILE_NONE,
        on_progress: Callable[[int], None] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._files = [(os.fspath(path), info) for path, info in files]
        self.base_path = base_path
        self.settings = settings if settings is not None else ExportSettings()
        self.sumfile_type = sumfile_type
        self._on_progress = on_progress
        self._on_finished = on_finished
        self._tasks: list[FileHashTask] = []
        self._size_total = 0
        self._size_progressed = 0
        self._not_finished = 0
        self._lock = threading.Lock()
        self._done = threading.Condition(self._lock)
        self.is_sumfile = False

    @property
    def files(self) -> tuple[FileHashTask, ...]:
        """The tasks, in the order the files were given."""
        return tuple(self._tasks)

    @property
    def size_total(self) -> int:
        return self._size_total

    def add_files(self) -> None:
        """Apply checksum-file settings and create a task for every file."""
        if self.sumfile_type != SUMFILE_NONE:
            self.is_sumfile = True
            if self.sumfile_type != SUMFILE_UNKNOWN:
                algorithms = self.settings.algorithms
                if self.settings.sumfile_algorithm_only:
                    algorithms[:] = [False] * len(algorithms)
                algorithms[self.sumfile_type] = True
        for path, info in self._files:
            task = FileHashTask(path, info, self.settings.algorithms, self.file_progress)
            self._size_total += task.size
            self._tasks.append(task)

    def process_files(self) -> None:
        """Start hashing every task in the background."""
        if not self._tasks:
            if self._on_finished is not None:
                self._on_finished()
            return
        with self._lock:
            self._not_finished += len(self._tasks)
        executor = ThreadPoolExecutor(max_workers=min(len(self._tasks), os.cpu_count() or 1))
        for task in self._tasks:
            executor.submit(task.run).add_done_callback(self._task_completed)
        executor.shutdown(wait=False)

    def _task_completed(self, _future: Future) -> None:
        with self._lock:
            self._not_finished -= 1
            remaining = self._not_finished
            if remaining == 0:
                self._done.notify_all()
        if remaining == 0 and self._on_finished is not None:
            self._on_finished()

    def cancel(self) -> None:
        """Cancel every task and wait until all running ones have stopped."""
        for task in self._tasks:
            task.cancel()
        with self._done:
            self._done.wait_for(lambda: self._not_finished == 0)

    def file_progress(self, size: int) -> None:
        """Account ``size`` hashed bytes, reporting when the coarse progress changes."""
        if self._size_total == 0:
            return
        with self._lock:
            old = self._size_progressed
            new = old + size
            self._size_progressed = new
        old_part = old * PROGRESS_RESOLUTION // self._size_total
        new_part = new * PROGRESS_RESOLUTION // self._size_total
        if old_part != new_part and self._on_progress is not None:
            self._on_progress(new_part)

    def sumfile_default_save_path_and_base_name(self) -> tuple[str, str]:
        """Return the directory and base name proposed for a saved checksum file."""
        name = "checksums"
        if len(self._files) == 1:
            path = self._files[0][0]
            name = path.replace("\\", "/").rsplit("/", 1)[-1]
        return self.base_path, name