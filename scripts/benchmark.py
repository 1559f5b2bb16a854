"""Micro-benchmarks for decoding and comparing sample order codes."""

from __future__ import annotations

import time

from orderkey.compare import compare
from orderkey.config import DecoderConfig
from orderkey.decoder import decode_code

SAMPLES = [
    "DSX-2-Z-S0-9010-L9005-B-N-01000-VM-ES-B0",
    "DSX2Z",
    "ASK-21-2-N-01000-VM-SV-DK2-GD1-I0-KHS-KVS-S1-SDS-E0",
    "EW-21-2-S0-ELOX-B9005-090-000-000",
]


def benchmark_decode(
    iterations: int = 10_000, runs: int = 3, config: DecoderConfig | None = None
) -> dict[str, float]:
    best = None
    for _ in range(runs):
        start = time.perf_counter()
        for i in range(iterations):
            decode_code(SAMPLES[i % len(SAMPLES)], config)
        elapsed = time.perf_counter() - start
        best = elapsed if best is None or elapsed < best else best
    per_second = iterations / best if best else 0.0
    return {"iterations": iterations, "best_seconds": best or 0.0, "codes_per_second": per_second}


def benchmark_compare(iterations: int = 10_000) -> dict[str, float]:
    start = time.perf_counter()
    for i in range(iterations):
        compare(SAMPLES[i % len(SAMPLES)], SAMPLES[(i + 1) % len(SAMPLES)])
    elapsed = time.perf_counter() - start
    return {"iterations": iterations, "seconds": elapsed}


if __name__ == "__main__":
    print(benchmark_decode())
    print(benchmark_decode(config=DecoderConfig(validation="strict")))
    print(benchmark_compare())
