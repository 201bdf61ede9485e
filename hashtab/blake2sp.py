"""BLAKE2sp: eight-way parallel BLAKE2s tree hash with a 32-byte digest."""

from __future__ import annotations

import hashlib

BLOCK_SIZE = 64
DIGEST_SIZE = 32
PARALLEL_DEGREE = 8


def _leaf(index: int) -> "hashlib._Hash":
    return hashlib.blake2s(
        digest_size=DIGEST_SIZE,
        fanout=PARALLEL_DEGREE,
        depth=2,
        leaf_size=0,
        node_offset=index,
        node_depth=0,
        inner_size=DIGEST_SIZE,
        last_node=index == PARALLEL_DEGREE - 1,
    )


def _root() -> "hashlib._Hash":
    return hashlib.blake2s(
        digest_size=DIGEST_SIZE,
        fanout=PARALLEL_DEGREE,
        depth=2,
        leaf_size=0,
        node_offset=0,
        node_depth=1,
        inner_size=DIGEST_SIZE,
        last_node=True,
    )


class Blake2sp:
    """Incremental BLAKE2sp hasher."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE
    name = "blake2sp"

    def __init__(self, data: bytes = b"") -> None:
        self._leaves = [_leaf(i) for i in range(PARALLEL_DEGREE)]
        self._pos = 0
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed data; 64-byte blocks are dealt round-robin to the leaves."""
        view = memoryview(data).cast("B")
        pos = self._pos
        offset = 0
        total = len(view)
        span = BLOCK_SIZE * PARALLEL_DEGREE
        while offset < total:
            index = pos // BLOCK_SIZE
            take = min(BLOCK_SIZE - pos % BLOCK_SIZE, total - offset)
            self._leaves[index].update(view[offset:offset + take])
            offset += take
            pos = (pos + take) % span
        self._pos = pos

    def copy(self) -> "Blake2sp":
        """Return an independent copy of the current state."""
        clone = Blake2sp.__new__(Blake2sp)
        clone._leaves = [leaf.copy() for leaf in self._leaves]
        clone._pos = self._pos
        return clone

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is kept."""
        root = _root()
        for leaf in self._leaves:
            root.update(leaf.digest())
        return root.digest()

    def hexdigest(self) -> str:
        return self.digest().hex()


def blake2sp(data: bytes = b"") -> bytes:
    """Return the BLAKE2sp digest of ``data``."""
    return Blake2sp(data).digest()