"""Checksum-file exporters: per-algorithm sumfiles, corz .hash files and SFV."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .filetask import FileHashTask
from .legacy import index_by_name, legacy_algorithms

GENERATOR = "hashtab"
_DOT_HASH_TIMESTAMP = "1970.01.01@00.00:00"
_DEFAULT_ENABLED = ("MD5", "SHA-1", "SHA-256", "SHA-512")


def _default_algorithms() -> list[bool]:
    return [preset.name in _DEFAULT_ENABLED for preset in legacy_algorithms()]


@dataclass
class ExportSettings:
    """Which presets are enabled and how checksum files are written."""

    algorithms: list[bool] = field(default_factory=_default_algorithms)
    sumfile_algorithm_only: bool = False
    sumfile_unix_endings: bool = False
    sumfile_banner: bool = True
    sumfile_banner_date: bool = False
    sumfile_forward_slashes: bool = False
    sumfile_uppercase: bool = False
    sumfile_use_double_space: bool = False
    sumfile_dot_hash_compatible: bool = False

    def __post_init__(self) -> None:
        self.algorithms = [bool(flag) for flag in self.algorithms]
        expected = len(legacy_algorithms())
        if len(self.algorithms) != expected:
            raise ValueError(
                f"expected {expected} algorithm flags, got {len(self.algorithms)}"
            )


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _banner(settings: ExportSettings, comment: str, line_end: str) -> str:
    line = f"{comment} Generated by {GENERATOR}"
    if settings.sumfile_banner_date:
        line += f" at {_timestamp()}"
    return f"{line}{line_end}{comment}{line_end}"


def _hex(digest: bytes, uppercase: bool) -> str:
    text = digest.hex()
    return text.upper() if uppercase else text


def _successful_sorted(files: Iterable[FileHashTask]) -> list[FileHashTask]:
    return sorted(
        (task for task in files if task.error is None),
        key=lambda task: task.display_name(),
    )


def _dot_hash_name(name: str) -> str:
    return name.lower().replace("-", "")


def _export_sumfile(
    settings: ExportSettings,
    for_clipboard: bool,
    files: Iterable[FileHashTask],
    algorithm: int | None,
) -> str:
    dot_hash = algorithm is None
    # corz checksum .hash files use CRLF
    line_end = "\r\n" if for_clipboard or dot_hash or not settings.sumfile_unix_endings else "\n"
    separator = "  " if not dot_hash and settings.sumfile_use_double_space else " *"
    uppercase = not dot_hash and settings.sumfile_uppercase
    forward_slashes = not dot_hash and settings.sumfile_forward_slashes
    dot_hash_compatible = dot_hash or settings.sumfile_dot_hash_compatible

    parts: list[str] = []
    if not for_clipboard and settings.sumfile_banner:
        parts.append(_banner(settings, "#", line_end))

    presets = legacy_algorithms()
    names = [_dot_hash_name(preset.name) for preset in presets]
    if dot_hash:
        indices = [i for i, enabled in enumerate(settings.algorithms) if enabled]
    else:
        indices = [algorithm]

    for task in _successful_sorted(files):
        original = task.display_name()
        filename = original.replace("\\", "/") if forward_slashes else original
        for index in indices:
            digest = _hex(task.results[index], uppercase)
            if dot_hash_compatible:
                parts.append(f"#{names[index]}#{original}#{_DOT_HASH_TIMESTAMP}{line_end}")
            parts.append(f"{digest}{separator}{filename}{line_end}")
    return "".join(parts)


class Exporter(ABC):
    """A checksum file format."""

    name: str
    extension: str

    @abstractmethod
    def is_enabled(self, settings: ExportSettings) -> bool:
        """Return whether the format can be written with these settings."""

    @abstractmethod
    def export(
        self,
        settings: ExportSettings,
        for_clipboard: bool,
        files: Iterable[FileHashTask],
    ) -> str:
        """Render finished tasks in this format; failed tasks are left out."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SumfileExporter(Exporter):
    """``<hash> *<name>`` lines for a single preset."""

    def __init__(self, index: int) -> None:
        self.index = index
        preset = legacy_algorithms()[index]
        self.name = preset.name
        self.extension = preset.extensions[0] if preset.extensions else "sums"

    def is_enabled(self, settings: ExportSettings) -> bool:
        return settings.algorithms[self.index]

    def export(self, settings, for_clipboard, files) -> str:
        return _export_sumfile(settings, for_clipboard, files, self.index)


class DotHashExporter(Exporter):
    """corz checksum ``.hash`` files holding every enabled preset."""

    name = ".hash (corz)"
    extension = "hash"

    def is_enabled(self, settings: ExportSettings) -> bool:
        return True

    def export(self, settings, for_clipboard, files) -> str:
        return _export_sumfile(settings, for_clipboard, files, None)


class SFVExporter(Exporter):
    """Simple File Verification: ``<name> <crc32>`` lines."""

    name = "SFV (CRC32)"
    extension = "sfv"

    def is_enabled(self, settings: ExportSettings) -> bool:
        return settings.algorithms[index_by_name("CRC32")]

    def export(self, settings, for_clipboard, files) -> str:
        line_end = "\r\n" if for_clipboard or not settings.sumfile_unix_endings else "\n"
        parts: list[str] = []
        if not for_clipboard and settings.sumfile_banner:
            parts.append(_banner(settings, ";", line_end))
        crc32 = index_by_name("CRC32")
        for task in _successful_sorted(files):
            filename = task.display_name()
            if settings.sumfile_forward_slashes:
                filename = filename.replace("\\", "/")
            digest = _hex(task.results[crc32], settings.sumfile_uppercase)
            parts.append(f"{filename} {digest}{line_end}")
        return "".join(parts)


_EXPORTERS: tuple[Exporter, ...] = (
    *(SumfileExporter(i) for i in range(len(legacy_algorithms()))),
    DotHashExporter(),
    SFVExporter(),
)


def exporters() -> tuple[Exporter, ...]:
    """Return one sumfile exporter per preset, then the .hash and SFV exporters."""
    return _EXPORTERS