#!/usr/bin/env python3
"""
Benchmark puzzle generation and completion checking.

Times the three stages of building a puzzle (scatter + synthesis,
scrambling, solving through the completion check) for each point count.

Usage:
    python scripts/benchmark_generation.py [--sizes N,...] [--seeds COUNT]

Examples:
    python scripts/benchmark_generation.py
    python scripts/benchmark_generation.py --sizes 10,25,40 --seeds 20
    python scripts/benchmark_generation.py --output results.json
"""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Any

from untangle import (
    PRESETS,
    PuzzleParams,
    coord_limit,
    generate_planar_graph,
    new_game,
    scramble,
    solve,
)
from untangle.codec import encode_description, encode_solution
from untangle.game import SCRAMBLE_ATTEMPTS


def benchmark_size(n: int, seed: int) -> dict[str, Any]:
    """
    Benchmark one puzzle of n points.

    Returns:
        Dict with per-stage timings and graph size
    """
    rng = random.Random(seed)

    start = time.perf_counter()
    points, graph = generate_planar_graph(n, rng)
    synth_time = time.perf_counter() - start

    start = time.perf_counter()
    result = scramble(points, graph, coord_limit(n), rng, max_attempts=SCRAMBLE_ATTEMPTS)
    scramble_time = time.perf_counter() - start

    params = PuzzleParams(n)
    state = new_game(params, encode_description(result.graph))
    start = time.perf_counter()
    solved = solve(state, encode_solution(result.solution))
    check_time = time.perf_counter() - start

    return {
        "n": n,
        "seed": seed,
        "num_edges": len(graph),
        "attempts": result.attempts,
        "completed": solved.completed,
        "synthesis_seconds": synth_time,
        "scramble_seconds": scramble_time,
        "check_seconds": check_time,
    }


def run_benchmarks(sizes: list[int], seeds: int = 5) -> list[dict]:
    """Run benchmarks for every size and seed."""
    results = []

    print(f"\nBenchmarking {len(sizes)} sizes, {seeds} seeds each")
    print("=" * 72)

    for n in sizes:
        print(f"\n{n} points")
        print("-" * 60)
        for seed in range(seeds):
            result = benchmark_size(n, seed)
            print(
                f"  seed {seed:3d}: {result['num_edges']:3d} edges, "
                f"synth {result['synthesis_seconds']:.4f}s, "
                f"scramble {result['scramble_seconds']:.4f}s "
                f"({result['attempts']} tries), "
                f"check {result['check_seconds']:.4f}s"
            )
            results.append(result)

    # Summary
    print("\n" + "=" * 72)
    print("SUMMARY (mean times in seconds)")
    print("=" * 72)
    print(f"{'Points':<10s}{'Edges':>10s}{'Synth':>12s}{'Scramble':>12s}{'Check':>12s}")
    print("-" * 56)

    for n in sizes:
        rows = [r for r in results if r["n"] == n]
        count = len(rows)
        print(
            f"{n:<10d}"
            f"{sum(r['num_edges'] for r in rows) / count:>10.1f}"
            f"{sum(r['synthesis_seconds'] for r in rows) / count:>12.4f}"
            f"{sum(r['scramble_seconds'] for r in rows) / count:>12.4f}"
            f"{sum(r['check_seconds'] for r in rows) / count:>12.4f}"
        )

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark puzzle generation")
    parser.add_argument("--sizes", help="Comma-separated point counts (default: the presets)")
    parser.add_argument("--seeds", type=int, default=5, help="Puzzles generated per size")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    if args.sizes:
        sizes = [int(s) for s in args.sizes.split(",")]
    else:
        sizes = [p.n for p in PRESETS]

    results = run_benchmarks(sizes, seeds=args.seeds)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
