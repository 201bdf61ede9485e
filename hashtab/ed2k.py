"""eD2k hash: MD4 over MD4 digests of 9,728,000-byte chunks."""

from __future__ import annotations

from Crypto.Hash import MD4

CHUNK_SIZE = 9728000


class Ed2kHash:
    """Incremental eD2k hasher.

    With ``extra_null`` the older variant is produced, which appends the MD4 of
    an empty trailing chunk when the input is an exact multiple of the chunk size.
    """

    digest_size = 16

    def __init__(self, extra_null: bool = False) -> None:
        self.extra_null = extra_null
        self._current = MD4.new()
        self._root = MD4.new()
        self._last_chunk_hash = MD4.new().digest()
        self._hashed = 0

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed data, closing a chunk at every chunk-size boundary."""
        view = memoryview(data).cast("B")
        offset = 0
        while offset < len(view):
            room = CHUNK_SIZE - self._hashed % CHUNK_SIZE
            part = view[offset:offset + room]
            self._current.update(part)
            self._hashed += len(part)
            offset += len(part)
            if self._hashed % CHUNK_SIZE == 0:
                self._last_chunk_hash = self._current.digest()
                self._current = MD4.new()
                self._root.update(self._last_chunk_hash)

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the state is kept."""
        if self._hashed < CHUNK_SIZE:
            return self._current.copy().digest()
        if not self.extra_null:
            if self._hashed == CHUNK_SIZE:
                return self._last_chunk_hash
            if self._hashed % CHUNK_SIZE == 0:
                return self._root.copy().digest()
        root = self._root.copy()
        root.update(self._current.copy().digest())
        return root.digest()

    def hexdigest(self) -> str:
        return self.digest().hex()