"""Throughput benchmark of every hash preset over a random buffer."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass

from .legacy import legacy_algorithms

DEFAULT_SIZE = 4 << 20
DEFAULT_PASSES = 20
_TRIM_FRACTION = 0.2


@dataclass(frozen=True)
class BenchmarkResult:
    """Trimmed timings (nanoseconds, sorted) and throughput for one preset."""

    name: str
    timings: tuple[int, ...]
    mbps: float


def run_benchmark(size: int = DEFAULT_SIZE, passes: int = DEFAULT_PASSES) -> list[BenchmarkResult]:
    """Hash ``size`` random bytes ``passes`` times with every preset."""
    if passes < 1:
        raise ValueError("passes must be at least 1")
    if size < 0:
        raise ValueError("size must not be negative")

    data = random.Random(0).randbytes(size)
    presets = legacy_algorithms()
    measurements: list[list[int]] = [[] for _ in presets]

    for _ in range(passes):
        for preset, samples in zip(presets, measurements):
            ctx = preset.make_context()
            begin = time.perf_counter_ns()
            ctx.update(data)
            digest = ctx.finish()
            end = time.perf_counter_ns()
            if len(digest) != preset.size or ctx.output_size() != preset.size:
                raise RuntimeError(f"{preset.name} produced a digest of the wrong size")
            samples.append(end - begin)

    skip = int(_TRIM_FRACTION * passes)
    results = []
    for preset, samples in zip(presets, measurements):
        trimmed = tuple(sorted(samples)[skip:passes - skip])
        average = sum(trimmed) / len(trimmed)
        mbps = size * 1e9 / average / (1 << 20) if average else float("inf")
        results.append(BenchmarkResult(preset.name, trimmed, mbps))
    return results


def format_result(result: BenchmarkResult) -> str:
    """Render one result as a tab-separated report line."""
    timings = "".join(f"{value}\t" for value in result.timings)
    return f"{result.name:<16}\t{timings}{result.mbps:.7f} MB/s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark all hash presets.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="buffer size in bytes")
    parser.add_argument("--passes", type=int, default=DEFAULT_PASSES, help="number of passes")
    args = parser.parse_args(argv)
    try:
        results = run_benchmark(args.size, args.passes)
    except ValueError as exc:
        parser.error(str(exc))
    for result in results:
        print(format_result(result))
    return 0