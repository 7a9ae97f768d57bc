"""
Performance Benchmark
=====================

Measures headless CoreGame.advance throughput for performance tuning.

The paddle target wanders randomly so runs end naturally; every game over is
followed by a fresh run.

Usage:
    python -m tools.benchmark_speed [--ticks N] [--fps F F ...]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List

import numpy as np

from square_dodger.dodger_core.config_loader import load_config
from square_dodger.dodger_core.game import CoreGame


def benchmark_core_game(
    num_ticks: int = 10000,
    fps: float = 60.0,
    seed: int = 42
) -> dict:
    """
    Benchmark raw CoreGame ticks at a fixed frame rate.

    Args:
        num_ticks: Number of advance() calls.
        fps: Simulated frame rate (dt = 1 / fps).
        seed: Random seed for both the game and the input target.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    game = CoreGame(config=config, seed=seed)
    game.initialize(config.world.default_width, config.world.default_height)
    rng = np.random.default_rng(seed)
    dt = 1.0 / fps
    width = config.world.default_width

    # Pre-draw input targets so RNG cost stays out of the timed loop
    targets = rng.uniform(0.0, width, size=num_ticks)

    # Warmup
    game.start_run()
    for i in range(100):
        game.set_input_target(float(targets[i % num_ticks]))
        game.advance(dt)
        if game.is_over:
            game.start_run()

    # Benchmark
    game.start_run(seed=seed)
    runs = 1
    max_obstacles = 0
    start = time.perf_counter()

    for i in range(num_ticks):
        game.set_input_target(float(targets[i]))
        game.advance(dt)
        max_obstacles = max(max_obstacles, game.obstacle_count)
        if game.is_over:
            game.start_run()
            runs += 1

    elapsed = time.perf_counter() - start

    return {
        "mode": "core_game",
        "fps": fps,
        "num_ticks": num_ticks,
        "runs": runs,
        "best": game.best,
        "max_obstacles": max_obstacles,
        "elapsed_seconds": elapsed,
        "ticks_per_second": num_ticks / elapsed,
        "us_per_tick": (elapsed * 1e6) / num_ticks
    }


def benchmark_snapshot(
    num_snapshots: int = 10000,
    sim_seconds: float = 20.0,
    seed: int = 42
) -> dict:
    """
    Benchmark snapshot() + to_arrays() on a populated board.

    Args:
        num_snapshots: Number of snapshots to build.
        sim_seconds: Simulated time before measuring (more obstacles).
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    game = CoreGame(config=config, seed=seed)
    game.initialize(config.world.default_width, config.world.default_height)
    game.start_run()

    # Park the paddle in a corner and fill the board; restart on collision
    dt = 1.0 / 60.0
    for _ in range(int(sim_seconds / dt)):
        game.set_input_target(0.0)
        game.advance(dt)
        if game.is_over:
            game.start_run()

    start = time.perf_counter()
    for _ in range(num_snapshots):
        game.snapshot().to_arrays()
    elapsed = time.perf_counter() - start

    return {
        "mode": "snapshot",
        "obstacles": game.obstacle_count,
        "num_snapshots": num_snapshots,
        "elapsed_seconds": elapsed,
        "snapshots_per_second": num_snapshots / elapsed,
        "us_per_snapshot": (elapsed * 1e6) / num_snapshots
    }


def run_all_benchmarks(
    frame_rates: List[float],
    ticks: int = 10000
) -> list:
    """Run comprehensive benchmarks."""
    results = []

    print("=" * 60)
    print("SQUARE DODGER SIMULATION BENCHMARK")
    print("=" * 60)
    print()

    for fps in frame_rates:
        print(f"Benchmarking CoreGame.advance (fps={fps:g})...")
        result = benchmark_core_game(num_ticks=ticks, fps=fps)
        results.append(result)
        print(f"  Ticks/sec:     {result['ticks_per_second']:.1f}")
        print(f"  us/tick:       {result['us_per_tick']:.2f}")
        print(f"  Runs:          {result['runs']}")
        print(f"  Max obstacles: {result['max_obstacles']}")
        print()

    print("Benchmarking snapshot().to_arrays()...")
    snap_result = benchmark_snapshot(num_snapshots=ticks)
    print(f"  Snapshots/sec: {snap_result['snapshots_per_second']:.1f}")
    print(f"  us/snapshot:   {snap_result['us_per_snapshot']:.2f}")
    print(f"  Obstacles:     {snap_result['obstacles']}")
    print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print()
    print(f"{'FPS':>6} {'Ticks/s':>12} {'us/tick':>10} {'Best':>8}")
    print("-" * 40)

    for r in results:
        print(f"{r['fps']:>6g} {r['ticks_per_second']:>12.1f} {r['us_per_tick']:>10.2f} {r['best']:>8}")

    results.append(snap_result)
    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark Square Dodger simulation performance")
    parser.add_argument("--ticks", type=int, default=10000, help="Ticks per benchmark")
    parser.add_argument("--fps", type=float, nargs="+", default=[30.0, 60.0, 144.0],
                        help="Frame rates to simulate")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer ticks)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    ticks = 1000 if args.quick else args.ticks

    run_all_benchmarks(
        frame_rates=args.fps,
        ticks=ticks
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
