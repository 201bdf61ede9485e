"""Registry of hash algorithms with a common streaming interface."""

from __future__ import annotations

import hashlib
import struct
import zlib
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from itertools import count

from Crypto.Hash import MD4, RIPEMD160, KangarooTwelve

from .blake2sp import Blake2sp
from .crc64 import crc64
from .ed2k import Ed2kHash

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_UINT_MAX = _U32
_SIZE_MAX = _U64


class InvalidParametersError(ValueError):
    """Raised when an algorithm is given parameters it cannot work with."""


class HashContext(ABC):
    """A running hash computation."""

    @abstractmethod
    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more data."""

    @abstractmethod
    def finish(self) -> bytes:
        """Return the digest of everything fed so far."""

    @abstractmethod
    def output_size(self) -> int:
        """Return the digest length in bytes."""


class _LibContext(HashContext):
    def __init__(self, hasher, size: int) -> None:
        self._hasher = hasher
        self._size = size

    def update(self, data):
        self._hasher.update(bytes(data))

    def finish(self) -> bytes:
        return self._hasher.digest()

    def output_size(self) -> int:
        return self._size


class _Crc32Context(HashContext):
    def __init__(self) -> None:
        self._crc = 0

    def update(self, data):
        self._crc = zlib.crc32(data, self._crc)

    def finish(self) -> bytes:
        return self._crc.to_bytes(4, "big")

    def output_size(self) -> int:
        return 4


class _Crc64Context(HashContext):
    def __init__(self) -> None:
        self._crc = 0

    def update(self, data):
        self._crc = crc64(data, self._crc)

    def finish(self) -> bytes:
        return self._crc.to_bytes(8, "big")

    def output_size(self) -> int:
        return 8


class _Ed2kContext(HashContext):
    def __init__(self, extra_null: bool) -> None:
        self._hasher = Ed2kHash(extra_null)

    def update(self, data):
        self._hasher.update(data)

    def finish(self) -> bytes:
        return self._hasher.digest()

    def output_size(self) -> int:
        return 16


# ---------------------------------------------------------------- xxHash

def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _U32


def _rotl64(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _U64


class _XXH32Context(HashContext):
    P1, P2, P3, P4, P5 = 2654435761, 2246822519, 3266489917, 668265263, 374761393

    def __init__(self, seed: int = 0) -> None:
        p1, p2 = self.P1, self.P2
        self._seed = seed
        self._v = [(seed + p1 + p2) & _U32, (seed + p2) & _U32, seed, (seed - p1) & _U32]
        self._buf = b""
        self._total = 0

    def _round(self, acc: int, lane: int) -> int:
        acc = (acc + lane * self.P2) & _U32
        return (_rotl32(acc, 13) * self.P1) & _U32

    def update(self, data):
        data = self._buf + bytes(data)
        self._total += len(data) - len(self._buf)
        end = len(data) - len(data) % 16
        for lanes in struct.iter_unpack("<4I", data[:end]):
            self._v = [self._round(a, l) for a, l in zip(self._v, lanes)]
        self._buf = data[end:]

    def finish(self) -> bytes:
        if self._total >= 16:
            v1, v2, v3, v4 = self._v
            h = _rotl32(v1, 1) + _rotl32(v2, 7) + _rotl32(v3, 12) + _rotl32(v4, 18)
        else:
            h = self._seed + self.P5
        h = (h + self._total) & _U32
        rest = self._buf
        words = len(rest) // 4
        for (word,) in struct.iter_unpack("<I", rest[:words * 4]):
            h = (h + word * self.P3) & _U32
            h = (_rotl32(h, 17) * self.P4) & _U32
        for byte in rest[words * 4:]:
            h = (h + byte * self.P5) & _U32
            h = (_rotl32(h, 11) * self.P1) & _U32
        h ^= h >> 15
        h = (h * self.P2) & _U32
        h ^= h >> 13
        h = (h * self.P3) & _U32
        h ^= h >> 16
        return h.to_bytes(4, "big")

    def output_size(self) -> int:
        return 4


class _XXH64Context(HashContext):
    P1 = 11400714785074694791
    P2 = 14029467366897019727
    P3 = 1609587929392839161
    P4 = 9650029242287828579
    P5 = 2870177450012600261

    def __init__(self, seed: int = 0) -> None:
        p1, p2 = self.P1, self.P2
        self._seed = seed
        self._v = [(seed + p1 + p2) & _U64, (seed + p2) & _U64, seed, (seed - p1) & _U64]
        self._buf = b""
        self._total = 0

    def _round(self, acc: int, lane: int) -> int:
        acc = (acc + lane * self.P2) & _U64
        return (_rotl64(acc, 31) * self.P1) & _U64

    def _merge(self, acc: int, val: int) -> int:
        acc ^= self._round(0, val)
        return (acc * self.P1 + self.P4) & _U64

    def update(self, data):
        data = self._buf + bytes(data)
        self._total += len(data) - len(self._buf)
        end = len(data) - len(data) % 32
        for lanes in struct.iter_unpack("<4Q", data[:end]):
            self._v = [self._round(a, l) for a, l in zip(self._v, lanes)]
        self._buf = data[end:]

    def finish(self) -> bytes:
        if self._total >= 32:
            v1, v2, v3, v4 = self._v
            h = (_rotl64(v1, 1) + _rotl64(v2, 7) + _rotl64(v3, 12) + _rotl64(v4, 18)) & _U64
            for v in self._v:
                h = self._merge(h, v)
        else:
            h = (self._seed + self.P5) & _U64
        h = (h + self._total) & _U64
        rest = self._buf
        pos = len(rest) - len(rest) % 8
        for (lane,) in struct.iter_unpack("<Q", rest[:pos]):
            h ^= self._round(0, lane)
            h = (_rotl64(h, 27) * self.P1 + self.P4) & _U64
        if len(rest) - pos >= 4:
            (word,) = struct.unpack_from("<I", rest, pos)
            h ^= (word * self.P1) & _U64
            h = (_rotl64(h, 23) * self.P2 + self.P3) & _U64
            pos += 4
        for byte in rest[pos:]:
            h ^= (byte * self.P5) & _U64
            h = (_rotl64(h, 11) * self.P1) & _U64
        h ^= h >> 33
        h = (h * self.P2) & _U64
        h ^= h >> 29
        h = (h * self.P3) & _U64
        h ^= h >> 32
        return h.to_bytes(8, "big")

    def output_size(self) -> int:
        return 8


# ---------------------------------------------------------------- Keccak

def _keccak_constants() -> tuple[tuple[int, ...], tuple[int, ...]]:
    rotations = [0] * 25
    x, y = 1, 0
    for t in range(24):
        rotations[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5

    def rc_bit(t: int) -> int:
        r = 1
        for _ in range(t % 255):
            r <<= 1
            if r & 0x100:
                r ^= 0x171
        return r & 1

    round_constants = []
    for ir in range(24):
        rc = 0
        for j in range(7):
            if rc_bit(j + 7 * ir):
                rc |= 1 << ((1 << j) - 1)
        round_constants.append(rc)
    return tuple(rotations), tuple(round_constants)


_ROTATIONS, _ROUND_CONSTANTS = _keccak_constants()


def _keccak_f(a: list[int]) -> list[int]:
    for rc in _ROUND_CONSTANTS:
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rotl64(c[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ d[i % 5] for i, lane in enumerate(a)]
        b = [0] * 25
        for i, lane in enumerate(a):
            x, y = i % 5, i // 5
            r = _ROTATIONS[i]
            b[y + 5 * ((2 * x + 3 * y) % 5)] = _rotl64(lane, r) if r else lane
        a = [
            b[i] ^ (~b[(i % 5 + 1) % 5 + 5 * (i // 5)] & b[(i % 5 + 2) % 5 + 5 * (i // 5)] & _U64)
            for i in range(25)
        ]
        a[0] ^= rc
    return a


class _Sponge:
    """Keccak-f[1600] sponge with a byte-aligned rate and a delimited suffix."""

    def __init__(self, rate: int, suffix: int) -> None:
        self.rate = rate
        self.suffix = suffix
        self._lanes = [0] * 25
        self._buf = bytearray()

    def copy(self) -> "_Sponge":
        clone = _Sponge(self.rate, self.suffix)
        clone._lanes = list(self._lanes)
        clone._buf = bytearray(self._buf)
        return clone

    def _absorb_block(self, block: bytes | bytearray) -> None:
        padded = bytes(block) + bytes(-len(block) % 8)
        lanes = self._lanes
        for i, (word,) in enumerate(struct.iter_unpack("<Q", padded)):
            lanes[i] ^= word
        self._lanes = _keccak_f(lanes)

    def absorb(self, data) -> None:
        self._buf += data
        rate = self.rate
        if len(self._buf) < rate:
            return
        end = len(self._buf) - len(self._buf) % rate
        view = memoryview(self._buf)
        for start in range(0, end, rate):
            self._absorb_block(view[start:start + rate])
        view.release()
        del self._buf[:end]

    def squeeze(self, length: int) -> bytes:
        """Pad a copy of the state and read ``length`` bytes from it."""
        state = self.copy()
        rate = state.rate
        block = bytearray(state._buf) + bytes(rate - len(state._buf))
        block[len(state._buf)] ^= state.suffix
        if state.suffix & 0x80 and len(state._buf) == rate - 1:
            state._absorb_block(block)
            block = bytearray(rate)
        block[rate - 1] ^= 0x80
        state._absorb_block(block)
        out = bytearray()
        while True:
            raw = b"".join(lane.to_bytes(8, "little") for lane in state._lanes)
            out += raw[:rate]
            if len(out) >= length:
                return bytes(out[:length])
            state._lanes = _keccak_f(state._lanes)


def _keccak_valid(rate: int, capacity: int, suffix: int) -> bool:
    return rate + capacity == 1600 and 0 < rate <= 1600 and rate % 8 == 0 and suffix != 0


class _KeccakContext(HashContext):
    def __init__(self, rate: int, capacity: int, bits: int, suffix: int) -> None:
        self._sponge = _Sponge(rate // 8, suffix)
        self._bits = bits

    def update(self, data):
        self._sponge.absorb(bytes(data))

    def finish(self) -> bytes:
        return self._sponge.squeeze(self._bits // 8)

    def output_size(self) -> int:
        return self._bits // 8


def _left_encode(value: int) -> bytes:
    raw = value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
    return bytes([len(raw)]) + raw


def _right_encode(value: int) -> bytes:
    raw = value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
    return raw + bytes([len(raw)])


def _encode_string(data: bytes) -> bytes:
    return _left_encode(len(data) * 8) + data


def _bytepad(data: bytes, width: int) -> bytes:
    padded = _left_encode(width) + data
    return padded + bytes(-len(padded) % width)


_SECURITY_RATES = {128: 168, 256: 136}


class _ParallelHashContext(HashContext):
    def __init__(self, block_size: int, bits: int, security: int, custom: bytes = b"") -> None:
        if security not in _SECURITY_RATES:
            raise InvalidParametersError(f"unsupported security level {security}")
        rate = _SECURITY_RATES[security]
        self._block_size = block_size
        self._bits = bits
        self._inner_size = security // 4
        self._inner = hashlib.shake_128 if security == 128 else hashlib.shake_256
        self._outer = _Sponge(rate, 0x04)
        self._outer.absorb(_bytepad(_encode_string(b"ParallelHash") + _encode_string(custom), rate))
        self._outer.absorb(_left_encode(block_size))
        self._pending = bytearray()
        self._blocks = 0

    def update(self, data):
        self._pending += data
        size = self._block_size
        if len(self._pending) < size:
            return
        end = len(self._pending) - len(self._pending) % size
        for start in range(0, end, size):
            chunk = bytes(self._pending[start:start + size])
            self._outer.absorb(self._inner(chunk).digest(self._inner_size))
            self._blocks += 1
        del self._pending[:end]

    def finish(self) -> bytes:
        outer = self._outer.copy()
        blocks = self._blocks
        if self._pending:
            outer.absorb(self._inner(bytes(self._pending)).digest(self._inner_size))
            blocks += 1
        outer.absorb(_right_encode(blocks) + _right_encode(self._bits))
        return outer.squeeze(self._bits // 8)

    def output_size(self) -> int:
        return self._bits // 8


def parallel_hash(data: bytes, block_size: int, bits: int, security: int) -> bytes:
    """Return ParallelHash128 or ParallelHash256 of ``data`` with an empty customization."""
    if block_size < 8 or bits < 8:
        raise InvalidParametersError("block size and output length must be at least 8")
    ctx = _ParallelHashContext(block_size, bits, security)
    ctx.update(data)
    return ctx.finish()


class _K12Context(HashContext):
    def __init__(self, size: int) -> None:
        self._hasher = KangarooTwelve.new(custom=b"")
        self._size = size

    def update(self, data):
        self._hasher.update(bytes(data))

    def finish(self) -> bytes:
        return self._hasher.new().update(b"") and b"" or self._read()

    def _read(self) -> bytes:
        # Reading finalizes the object, so replay the data into a fresh one.
        return self._fresh().read(self._size)

    def _fresh(self):
        clone = KangarooTwelve.new(custom=b"")
        clone.update(self._data)
        return clone

    def output_size(self) -> int:
        return self._size


class _K12BufferedContext(_K12Context):
    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._data = bytearray()

    def update(self, data):
        self._data += data

    def finish(self) -> bytes:
        return self._read()


# ---------------------------------------------------------------- BLAKE3

_B3_IV = (0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
          0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19)
_B3_PERM = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)
_CHUNK_START, _CHUNK_END, _PARENT, _ROOT = 1, 2, 4, 8
_B3_BLOCK = 64
_B3_CHUNK = 1024


def _rotr32(x: int, r: int) -> int:
    return ((x >> r) | (x << (32 - r))) & _U32


def _b3_compress(cv, words, counter: int, block_len: int, flags: int) -> list[int]:
    s = [*cv, *_B3_IV[:4], counter & _U32, (counter >> 32) & _U32, block_len, flags]
    m = list(words)

    def g(a, b, c, d, mx, my):
        s[a] = (s[a] + s[b] + mx) & _U32
        s[d] = _rotr32(s[d] ^ s[a], 16)
        s[c] = (s[c] + s[d]) & _U32
        s[b] = _rotr32(s[b] ^ s[c], 12)
        s[a] = (s[a] + s[b] + my) & _U32
        s[d] = _rotr32(s[d] ^ s[a], 8)
        s[c] = (s[c] + s[d]) & _U32
        s[b] = _rotr32(s[b] ^ s[c], 7)

    for rnd in range(7):
        g(0, 4, 8, 12, m[0], m[1])
        g(1, 5, 9, 13, m[2], m[3])
        g(2, 6, 10, 14, m[4], m[5])
        g(3, 7, 11, 15, m[6], m[7])
        g(0, 5, 10, 15, m[8], m[9])
        g(1, 6, 11, 12, m[10], m[11])
        g(2, 7, 8, 13, m[12], m[13])
        g(3, 4, 9, 14, m[14], m[15])
        if rnd < 6:
            m = [m[p] for p in _B3_PERM]
    for i in range(8):
        s[i] ^= s[i + 8]
        s[i + 8] ^= cv[i]
    return s


def _b3_words(block: bytes) -> tuple[int, ...]:
    return struct.unpack("<16I", block + bytes(_B3_BLOCK - len(block)))


@dataclass
class _B3Output:
    cv: tuple[int, ...]
    words: tuple[int, ...]
    counter: int
    block_len: int
    flags: int

    def chaining_value(self) -> tuple[int, ...]:
        return tuple(_b3_compress(self.cv, self.words, self.counter, self.block_len, self.flags)[:8])

    def root_bytes(self, length: int) -> bytes:
        out = bytearray()
        for counter in count():
            if len(out) >= length:
                break
            state = _b3_compress(self.cv, self.words, counter, self.block_len, self.flags | _ROOT)
            out += struct.pack("<16I", *state)
        return bytes(out[:length])


@dataclass
class _B3Chunk:
    cv: tuple[int, ...]
    counter: int
    buf: bytearray = field(default_factory=bytearray)
    blocks: int = 0

    def __len__(self) -> int:
        return self.blocks * _B3_BLOCK + len(self.buf)

    def _start_flag(self) -> int:
        return _CHUNK_START if self.blocks == 0 else 0

    def update(self, data: memoryview) -> None:
        while data:
            if len(self.buf) == _B3_BLOCK:
                state = _b3_compress(self.cv, _b3_words(bytes(self.buf)), self.counter,
                                     _B3_BLOCK, self._start_flag())
                self.cv = tuple(state[:8])
                self.blocks += 1
                self.buf.clear()
            take = min(_B3_BLOCK - len(self.buf), len(data))
            self.buf += data[:take]
            data = data[take:]

    def output(self) -> _B3Output:
        return _B3Output(self.cv, _b3_words(bytes(self.buf)), self.counter, len(self.buf),
                         self._start_flag() | _CHUNK_END)


def _b3_parent(left, right) -> _B3Output:
    return _B3Output(_B3_IV, tuple(left) + tuple(right), 0, _B3_BLOCK, _PARENT)


class _Blake3Context(HashContext):
    def __init__(self, size: int) -> None:
        self._size = size
        self._chunk = _B3Chunk(_B3_IV, 0)
        self._stack: list[tuple[int, ...]] = []

    def _push(self, cv, total: int) -> None:
        while total & 1 == 0:
            cv = _b3_parent(self._stack.pop(), cv).chaining_value()
            total >>= 1
        self._stack.append(cv)

    def update(self, data):
        view = memoryview(bytes(data))
        while view:
            if len(self._chunk) == _B3_CHUNK:
                cv = self._chunk.output().chaining_value()
                total = self._chunk.counter + 1
                self._push(cv, total)
                self._chunk = _B3Chunk(_B3_IV, total)
            take = min(_B3_CHUNK - len(self._chunk), len(view))
            self._chunk.update(view[:take])
            view = view[take:]

    def finish(self) -> bytes:
        output = self._chunk.output()
        for cv in reversed(self._stack):
            output = _b3_parent(cv, output.chaining_value())
        return output.root_bytes(self._size)

    def output_size(self) -> int:
        return self._size


# ---------------------------------------------------------------- QuickXorHash

_QX_WIDTH = 160
_QX_SHIFT = 11
_QX_MASK = (1 << _QX_WIDTH) - 1


class _QuickXorContext(HashContext):
    def __init__(self) -> None:
        self._acc = 0
        self._length = 0

    def update(self, data):
        data = bytes(data)
        if not data:
            return
        pos = self._length % _QX_WIDTH
        aligned = bytes(pos) + data
        aligned += bytes(-len(aligned) % _QX_WIDTH)
        acc = self._acc
        for start in range(0, len(aligned), _QX_WIDTH):
            acc ^= int.from_bytes(aligned[start:start + _QX_WIDTH], "little")
        self._acc = acc
        self._length += len(data)

    def finish(self) -> bytes:
        per_position = self._acc.to_bytes(_QX_WIDTH, "little")
        value = 0
        for position, byte in enumerate(per_position):
            if byte:
                shift = position * _QX_SHIFT % _QX_WIDTH
                value ^= ((byte << shift) | (byte >> (_QX_WIDTH - shift))) & _QX_MASK
        out = bytearray(value.to_bytes(_QX_WIDTH // 8, "little"))
        for i, byte in enumerate(self._length.to_bytes(8, "little")):
            out[_QX_WIDTH // 8 - 8 + i] ^= byte
        return bytes(out)

    def output_size(self) -> int:
        return _QX_WIDTH // 8


# ---------------------------------------------------------------- registry

def _keccak_check(params: Sequence[int]) -> int:
    if any(p < 0 or p > _UINT_MAX for p in params):
        return 0
    rate, capacity, bits, suffix = params
    return bits // 8 if _keccak_valid(rate, capacity, suffix) else 0


def _bits_check(params: Sequence[int]) -> int:
    (bits,) = params
    if bits < 0 or bits % 8 or bits > _SIZE_MAX:
        return 0
    return bits // 8


def _ph_check(security: int) -> Callable[[Sequence[int]], int]:
    def check(params: Sequence[int]) -> int:
        block_size, bits = params
        if not (0 <= block_size <= _SIZE_MAX and 0 <= bits <= _SIZE_MAX):
            return 0
        if security == 256 and bits % 8:
            return 0
        if block_size < 8:
            return 0
        return bits // 8

    return check


@dataclass(frozen=True)
class HashAlgorithm:
    """A named hash algorithm that produces contexts from integer parameters."""

    name: str
    is_secure: bool
    params: tuple[str, ...]
    _factory: Callable[..., HashContext] = field(repr=False)
    _check: Callable[[Sequence[int]], int] = field(repr=False)

    def param_check(self, params: Sequence[int] = ()) -> int:
        """Return the output length for ``params``, or 0 if they are invalid."""
        params = tuple(params)
        if len(params) != len(self.params):
            return 0
        return self._check(params)

    def make_context(self, params: Sequence[int] = ()) -> HashContext:
        """Start a new computation; raise InvalidParametersError on bad parameters."""
        params = tuple(params)
        if not self.param_check(params):
            raise InvalidParametersError(f"invalid parameters for {self.name}: {params!r}")
        return self._factory(*params)


def _fixed(name: str, is_secure: bool, factory: Callable[[], HashContext]) -> HashAlgorithm:
    size = factory().output_size()
    return HashAlgorithm(name, is_secure, (), factory, lambda _params: size)


def _lib(new: Callable[[], object], size: int) -> Callable[[], HashContext]:
    return lambda: _LibContext(new(), size)


_ALGORITHMS: tuple[HashAlgorithm, ...] = (
    _fixed("CRC32", False, _Crc32Context),
    _fixed("CRC64", False, _Crc64Context),
    _fixed("XXH32", False, _XXH32Context),
    _fixed("XXH64", False, _XXH64Context),
    _fixed("MD4", False, _lib(MD4.new, 16)),
    _fixed("MD5", False, _lib(hashlib.md5, 16)),
    _fixed("RipeMD160", True, _lib(RIPEMD160.new, 20)),
    _fixed("SHA-1", True, _lib(hashlib.sha1, 20)),
    _fixed("SHA-224", True, _lib(hashlib.sha224, 28)),
    _fixed("SHA-256", True, _lib(hashlib.sha256, 32)),
    _fixed("SHA-384", True, _lib(hashlib.sha384, 48)),
    _fixed("SHA-512", True, _lib(hashlib.sha512, 64)),
    _fixed("BLAKE2sp", True, _lib(Blake2sp, 32)),
    HashAlgorithm("Keccak", True, ("Rate", "Capacity", "Bits", "Delimited suffix"),
                  _KeccakContext, _keccak_check),
    HashAlgorithm("K12", True, ("Bits",), lambda bits: _K12BufferedContext(bits // 8), _bits_check),
    HashAlgorithm("PH128", True, ("Block length", "Bits"),
                  lambda block, bits: _ParallelHashContext(block, bits, 128), _ph_check(128)),
    HashAlgorithm("PH256", True, ("Block length", "Bits"),
                  lambda block, bits: _ParallelHashContext(block, bits, 256), _ph_check(256)),
    HashAlgorithm("BLAKE3", True, ("Bits",), lambda bits: _Blake3Context(bits // 8), _bits_check),
    _fixed("eD2k", False, lambda: _Ed2kContext(False)),
    _fixed("eD2k (Old)", False, lambda: _Ed2kContext(True)),
    _fixed("QuickXorHash", False, _QuickXorContext),
)


def algorithms() -> tuple[HashAlgorithm, ...]:
    """Return all registered algorithms in display order."""
    return _ALGORITHMS


def by_name(name: str) -> HashAlgorithm:
    """Return the algorithm called ``name``; raise KeyError if there is none."""
    for algorithm in _ALGORITHMS:
        if algorithm.name == name:
            return algorithm
    raise KeyError(name)