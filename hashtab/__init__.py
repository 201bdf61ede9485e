"""Multi-algorithm hashing of files and streams, checksum-file export and a benchmark."""

__version__ = "1.0.0"

__all__ = [
    "algorithms",
    "benchmark",
    "blake2sp",
    "coordinator",
    "crc64",
    "ed2k",
    "exporter",
    "filetask",
    "legacy",
]