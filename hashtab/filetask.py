"""Hashing of one file with every enabled hash preset."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import CancelledError
from dataclasses import dataclass

from .algorithms import HashContext
from .legacy import legacy_algorithms

BLOCK_SIZE = 2 << 20

MATCH_NONE = -1
MATCH_MISMATCH = -2


@dataclass(frozen=True)
class FileInfo:
    """Where a file is shown relative to the base path, and the hashes it should have."""

    relative_path: str
    expected_hashes: tuple[bytes, ...] = ()


class FileHashTask:
    """Reads one file block by block and feeds it to every enabled preset.

    Failures are not raised: a failed file is still a finished task, and the
    exception is kept in :attr:`error`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        file_info: FileInfo,
        enabled: Iterable[bool] | None = None,
        progress: Callable[[int], None] | None = None,
    ) -> None:
        presets = legacy_algorithms()
        if enabled is None:
            flags = [True] * len(presets)
        else:
            flags = [bool(flag) for flag in enabled]
            if len(flags) != len(presets):
                raise ValueError(
                    f"expected {len(presets)} enable flags, got {len(flags)}"
                )
        self.path = os.fspath(path)
        self.file_info = file_info
        self.enabled: tuple[bool, ...] = tuple(flags)
        self._progress = progress
        self._contexts: list[HashContext | None] = [
            preset.make_context() if flag else None
            for preset, flag in zip(presets, flags)
        ]
        self.results: tuple[bytes, ...] = tuple(b"" for _ in presets)
        self.match_state = MATCH_NONE
        self.error: BaseException | None = None
        self.size = 0
        self.cancelled = False
        self.finished = False
        try:
            with open(self.path, "rb") as handle:
                self.size = os.fstat(handle.fileno()).st_size
        except OSError as exc:
            self.error = exc

    def display_name(self) -> str:
        """Return the path shown for this file."""
        return self.file_info.relative_path

    def cancel(self) -> None:
        """Ask the task to stop at the next block boundary."""
        self.cancelled = True

    def run(self) -> None:
        """Hash the whole file, then compute results and the match state."""
        if self.finished:
            raise RuntimeError("task has already run")
        if self.error is None:
            try:
                self._read_all()
            except OSError as exc:
                self.error = exc
            except CancelledError as exc:
                self.error = exc
        self._finish()

    def _read_all(self) -> None:
        offset = 0
        with open(self.path, "rb") as handle:
            while True:
                if self.cancelled:
                    raise CancelledError("hashing was cancelled")
                want = min(self.size - offset, BLOCK_SIZE)
                block = handle.read(want)
                if len(block) != want:
                    raise OSError(f"{self.path}: file shrank while reading")
                for ctx in self._contexts:
                    if ctx is not None:
                        ctx.update(block)
                if self._progress is not None:
                    self._progress(want)
                offset += want
                if self.cancelled:
                    raise CancelledError("hashing was cancelled")
                if offset >= self.size:
                    return

    def _finish(self) -> None:
        self.finished = True
        if self.error is not None:
            return
        presets = legacy_algorithms()
        expected = self.file_info.expected_hashes
        state = MATCH_MISMATCH if expected else MATCH_NONE
        results = []
        for index, ctx in enumerate(self._contexts):
            result = ctx.finish() if ctx is not None else b""
            results.append(result)
            if state == MATCH_NONE:
                continue
            if any(result == hash_ for hash_ in expected):
                # secure algorithms trump insecure ones
                if state == MATCH_MISMATCH or not presets[state].is_secure:
                    state = index
        self.results = tuple(results)
        self.match_state = state