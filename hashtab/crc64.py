"""CRC-64 with the reflected ECMA-182 polynomial (the XZ variant)."""

from __future__ import annotations

_POLY = 0xC96C5795D7870F42
_MASK = 0xFFFFFFFFFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ (_POLY if crc & 1 else 0)
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc64(data: bytes | bytearray | memoryview, crc: int = 0) -> int:
    """Return the CRC-64 of ``data``, continuing from a previous ``crc`` value."""
    value = ~crc & _MASK
    table = _TABLE
    for byte in bytes(data):
        value = table[(byte ^ value) & 0xFF] ^ (value >> 8)
    return ~value & _MASK