# hashtab

Hash files and byte streams with a broad set of checksum and cryptographic
algorithms, compare the results against expected values, and write them out as
checksum files (`*sum` style, corz `.hash`, or SFV).

## Installation

```
pip install hashtab
```

Tests use pytest:

```
pip install "hashtab[test]"
pytest
```

## Algorithms

The core registry in `hashtab.algorithms` holds these algorithms, in this
order:

CRC32, CRC64, XXH32, XXH64, MD4, MD5, RipeMD160, SHA-1, SHA-224, SHA-256,
SHA-384, SHA-512, BLAKE2sp, Keccak, K12, PH128, PH256, BLAKE3, eD2k,
eD2k (Old), QuickXorHash.

`algorithms()` returns them all; `by_name(name)` returns one and raises
`KeyError` for an unknown name. Each is a `HashAlgorithm` with a `name`, an
`is_secure` flag and the names of the numeric `params` it takes:

- Keccak: rate, capacity, bits and delimited suffix
- K12 and BLAKE3: output length in bits
- PH128 and PH256: block length and output length in bits
- all others: none

`param_check(params)` returns the output size in bytes for a set of
parameters, or 0 if they are not usable. `make_context(params)` returns a
`HashContext` that you feed with `update(data)` and read with `finish()`;
`output_size()` gives the digest length. Unusable parameters raise
`InvalidParametersError` (a `ValueError`).

```python
from hashtab.algorithms import by_name

sha3 = by_name("Keccak")
ctx = sha3.make_context([1088, 512, 256, 0x06])   # SHA3-256
ctx.update(b"hello ")
ctx.update(b"world")
print(ctx.output_size(), ctx.finish().hex())
```

The integer checksums (CRC32, CRC64, XXH32, XXH64) come out big-endian, the
way they are usually printed.

`parallel_hash(data, block_size, bits, security)` computes a ParallelHash128
(`security=128`) or ParallelHash256 (`security=256`) digest with an empty
customization string in one call.

### Named presets

`hashtab.legacy` gives the fixed list of presets that file hashing and the
exporters work with. Each `LegacyHashAlgorithm` binds one core algorithm to
fixed parameters and carries `name`, `extensions` (the file extensions
commonly used for its checksum files), `params`, `size` and `is_secure`.
Besides the plain algorithms above (the BLAKE2sp preset is named `Blake2sp`)
there are `SHA3-224`, `SHA3-256`, `SHA3-384`, `SHA3-512`, `K12-264`,
`K12-256`, `K12-512`, `PH128-264`, `PH256-528`, `BLAKE3` (256 bits) and
`BLAKE3-512`.

```python
from hashtab.legacy import by_name, index_by_name, legacy_algorithms

algo = by_name("SHA3-256")
ctx = algo.make_context()
ctx.update(b"data")
print(ctx.finish().hex())

print(index_by_name("CRC32"), algo.index(), len(legacy_algorithms()))
```

`by_name` and `index_by_name` raise `KeyError` for an unknown name.

### Standalone building blocks

```python
from hashtab.crc64 import crc64
from hashtab.blake2sp import Blake2sp, blake2sp
from hashtab.ed2k import Ed2kHash

crc = crc64(b"first part", 0)
crc = crc64(b" and the rest", crc)        # continue a running CRC-64

h = Blake2sp(b"abc")
h.update(b"def")
print(h.hexdigest(), blake2sp(b"abcdef").hex())

ed = Ed2kHash(extra_null=False)            # True gives the old eD2k variant
ed.update(b"file contents")
print(ed.digest().hex())
```

## Hashing files

`hashtab.filetask.FileHashTask(path, file_info, enabled, progress)` reads one
file in 2 MiB blocks and feeds every enabled preset with each block.
`enabled` is one flag per preset (all on when omitted) and `progress`, if
given, is called with the size of each block read. `FileInfo` carries the
`relative_path` shown for the file and any `expected_hashes`.

After `run()`, `results` holds one digest per preset (empty for disabled
ones) and `match_state` is `MATCH_NONE` (-1) when no hashes were expected,
`MATCH_MISMATCH` (-2) when none matched, or the index of the matching preset,
preferring a secure algorithm over an insecure one. Failures are not raised:
the exception is kept in `error`. `cancel()` stops the task at the next block
boundary.

`hashtab.coordinator.Coordinator(files, base_path, settings, sumfile_type,
on_progress, on_finished)` takes `(path, FileInfo)` pairs. `add_files()`
creates the tasks, `process_files()` runs them on a thread pool, and
`cancel()` stops them and waits. Overall progress is reported in steps of
1/256 of the total size through `on_progress`, and `on_finished` is called
once every file is done. When the input came from a checksum file, pass
`sumfile_type` as -1 (algorithm unknown) or the preset index it was made
with; the latter turns that preset on, and with `sumfile_algorithm_only` set
turns every other one off. `sumfile_default_save_path_and_base_name()`
returns the base path and either the single file's name or `checksums`.

## Exporting

`hashtab.exporter.exporters()` returns one `SumfileExporter` per preset, then
a `DotHashExporter` and an `SFVExporter`. Each has a `name`, an `extension`,
`is_enabled(settings)` and `export(settings, for_clipboard, files)`, which
returns the file text. Files are sorted by display name and failed files are
skipped.

`ExportSettings` holds one enable flag per preset (MD5, SHA-1, SHA-256 and
SHA-512 by default) and controls upper-case hex, Unix line endings, forward
slashes, a double-space separator, corz `.hash` compatible comment lines, and
a banner with an optional UTC timestamp. The banner is never written when
exporting for the clipboard, and `.hash` output always uses CRLF.

## Benchmark

```
hashtab-benchmark
hashtab-benchmark --size 1048576 --passes 10
```

Hashes a buffer of fixed pseudo-random data (4 MiB by default) with every
preset over a number of passes (20 by default), drops the fastest and slowest
fifth of the timings, and prints the remaining timings in nanoseconds and the
throughput in MB/s for each preset. From Python, `run_benchmark(size,
passes)` returns `BenchmarkResult` values and `format_result(result)` renders
one line.

## What is not included

- XXH3-64, XXH3-128 and the GOST 2012 (256 and 512) hashes are not
  available; there are no registry entries or presets for them.
- Checksum files are written but not read: the package does not parse
  existing checksum files. Expected hashes and `sumfile_type` have to be
  supplied by the caller.
- There is no graphical interface and no command for hashing files; file
  hashing is used from Python through `FileHashTask` and `Coordinator`.