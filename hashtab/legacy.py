"""Fixed catalogue of named hash presets built on the algorithm registry.

Each preset binds a registry algorithm to fixed parameters, an expected
output size and the file extensions used for checksum files.
"""

from __future__ import annotations

from dataclasses import dataclass

from .algorithms import HashAlgorithm, HashContext
from .algorithms import by_name as _algorithm_by_name

MAX_SIZE = 66


@dataclass(frozen=True, eq=False)
class LegacyHashAlgorithm:
    """A named preset: a registry algorithm with fixed parameters."""

    name: str
    extensions: tuple[str, ...]
    algorithm: HashAlgorithm
    params: tuple[int, ...]
    size: int
    is_secure: bool

    def make_context(self) -> HashContext:
        """Start a new computation with this preset's parameters."""
        return self.algorithm.make_context(self.params)

    def index(self) -> int:
        """Return the position of this preset in :func:`legacy_algorithms`."""
        for position, preset in enumerate(_LEGACY):
            if preset is self:
                return position
        raise KeyError(self.name)


_NO_EXTS: tuple[str, ...] = ()

# (name, expected size, extensions, registry name, parameters)
_SPECS: tuple[tuple[str, int, tuple[str, ...], str, tuple[int, ...]], ...] = (
    ("CRC32", 4, _NO_EXTS, "CRC32", ()),
    ("CRC64", 8, _NO_EXTS, "CRC64", ()),
    ("XXH32", 4, ("xxh32",), "XXH32", ()),
    ("XXH64", 8, ("xxh64",), "XXH64", ()),
    ("XXH3-64", 8, ("xxh3-64",), "XXH3-64", ()),
    ("XXH3-128", 16, ("xxh3-128",), "XXH3-128", ()),
    ("MD4", 16, ("md4",), "MD4", ()),
    ("MD5", 16, ("md5", "md5sum", "md5sums"), "MD5", ()),
    ("RipeMD160", 20, ("ripemd160",), "RipeMD160", ()),
    ("SHA-1", 20, ("sha1", "sha1sum", "sha1sums"), "SHA-1", ()),
    ("SHA-224", 28, ("sha224", "sha224sum"), "SHA-224", ()),
    ("SHA-256", 32, ("sha256", "sha256sum", "sha256sums"), "SHA-256", ()),
    ("SHA-384", 48, ("sha384",), "SHA-384", ()),
    ("SHA-512", 64, ("sha512", "sha512sum", "sha512sums"), "SHA-512", ()),
    ("Blake2sp", 32, ("blake2sp",), "BLAKE2sp", ()),
    ("SHA3-224", 28, ("sha3-224",), "Keccak", (1152, 448, 224, 0x06)),
    ("SHA3-256", 32, ("sha3-256",), "Keccak", (1088, 512, 256, 0x06)),
    ("SHA3-384", 48, ("sha3-384",), "Keccak", (832, 768, 384, 0x06)),
    ("SHA3-512", 64, ("sha3", "sha3-512"), "Keccak", (576, 1024, 512, 0x06)),
    ("K12-264", 33, ("k12-264",), "K12", (264,)),
    ("K12-256", 32, _NO_EXTS, "K12", (256,)),
    ("K12-512", 64, _NO_EXTS, "K12", (512,)),
    ("PH128-264", 33, ("ph128-264",), "PH128", (8192, 264)),
    ("PH256-528", 66, ("ph256-528",), "PH256", (8192, 528)),
    ("BLAKE3", 32, ("blake3",), "BLAKE3", (256,)),
    ("BLAKE3-512", 64, _NO_EXTS, "BLAKE3", (512,)),
    ("GOST 2012 (256)", 32, _NO_EXTS, "GOST 2012 (256)", ()),
    ("GOST 2012 (512)", 64, _NO_EXTS, "GOST 2012 (512)", ()),
    ("eD2k", 16, _NO_EXTS, "eD2k", ()),
    ("eD2k (Old)", 16, _NO_EXTS, "eD2k (Old)", ()),
    ("QuickXorHash", 20, _NO_EXTS, "QuickXorHash", ()),
)


def _build() -> tuple[LegacyHashAlgorithm, ...]:
    presets = []
    for name, expected, extensions, algorithm_name, params in _SPECS:
        try:
            algorithm = _algorithm_by_name(algorithm_name)
        except KeyError:
            # Presets whose backing algorithm is not registered are left out.
            continue
        size = algorithm.param_check(params)
        if not size or size != expected:
            raise ValueError(
                f"preset {name!r} yields {size} bytes, expected {expected}"
            )
        presets.append(
            LegacyHashAlgorithm(
                name=name,
                extensions=extensions,
                algorithm=algorithm,
                params=params,
                size=size,
                is_secure=algorithm.is_secure,
            )
        )
    return tuple(presets)


_LEGACY: tuple[LegacyHashAlgorithm, ...] = _build()


def legacy_algorithms() -> tuple[LegacyHashAlgorithm, ...]:
    """Return all presets in display order."""
    return _LEGACY


def by_name(name: str) -> LegacyHashAlgorithm:
    """Return the preset called ``name``; raise KeyError if there is none."""
    for preset in _LEGACY:
        if preset.name == name:
            return preset
    raise KeyError(name)


def index_by_name(name: str) -> int:
    """Return the position of the preset called ``name``; raise KeyError if absent."""
    return by_name(name).index()