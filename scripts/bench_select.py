#!/usr/bin/env python3
"""
Compare quickselect pivot strategies on generated inputs.

Every answer is cross-checked against numpy.partition.

Usage:
    python -m scripts.bench_select --size 2000 --seed 42
    python -m scripts.bench_select --json
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from typing import Any

import numpy as np

from ordstat.config import SelectorConfig
from ordstat.core import PivotStrategy
from ordstat.selection import select_with_stats

SHAPES = ("random", "sorted", "reversed", "dupes")


def generate_input(shape: str, size: int, seed: int) -> list[int]:
    """Generate an input of the given shape."""
    rng = np.random.default_rng(seed)
    if shape == "random":
        data = rng.integers(0, 1_000_000, size=size)
    elif shape == "sorted":
        data = np.arange(size)
    elif shape == "reversed":
        data = np.arange(size)[::-1]
    elif shape == "dupes":
        data = rng.integers(0, 8, size=size)
    else:
        raise ValueError(f"unknown shape: {shape}")
    return data.tolist()


def run_bench(size: int, seed: int) -> list[dict[str, Any]]:
    """Run every strategy on every shape at the median rank."""
    rows: list[dict[str, Any]] = []
    k = (size + 1) // 2
    for shape in SHAPES:
        data = generate_input(shape, size, seed)
        expected = int(np.partition(np.asarray(data), k - 1)[k - 1])
        for strategy in PivotStrategy:
            work = list(data)
            config = SelectorConfig(pivot=strategy, seed=seed)
            start = time.perf_counter()
            result = select_with_stats(k, work, config=config)
            elapsed_ms = (time.perf_counter() - start) * 1000
            rows.append(
                {
                    "shape": shape,
                    "pivot": strategy.value,
                    "size": size,
                    "k": k,
                    "value": result.value,
                    "ok": result.value == expected,
                    "partitions": result.stats.partitions,
                    "comparisons": result.stats.comparisons,
                    "swaps": result.stats.swaps,
                    "elapsed_ms": round(elapsed_ms, 3),
                }
            )
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare quickselect pivot strategies")
    parser.add_argument("--size", type=int, default=2000, help="Input length")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    args = parser.parse_args()

    if args.size < 1:
        print(f"--size must be >= 1, got {args.size}", file=sys.stderr)
        sys.exit(2)

    rows = run_bench(args.size, args.seed)

    if args.json:
        print(json.dumps(rows, indent=2))
    else:
        print(f"{'shape':<10}{'pivot':<18}{'comparisons':>12}{'partitions':>12}{'ms':>10}  ok")
        for row in rows:
            print(
                f"{row['shape']:<10}{row['pivot']:<18}{row['comparisons']:>12}"
                f"{row['partitions']:>12}{row['elapsed_ms']:>10.3f}  {row['ok']}"
            )

    sys.exit(0 if all(row["ok"] for row in rows) else 1)


if __name__ == "__main__":
    main()
