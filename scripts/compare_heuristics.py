#!/usr/bin/env python3
"""
Compare the construction heuristics on random point sets.

Every strategy runs on the same instances with the same start index, and the
summary reports cost relative to the best heuristic on each instance.
"""
from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Iterable

import numpy as np
import pandas as pd

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourEngine import STRATEGY_FAMILIES, STRATEGY_REGISTRY, EngineConfig, TourEngine


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare tour construction heuristics on random point sets.")
    parser.add_argument(
        "--counts",
        nargs="+",
        type=int,
        default=[10, 20, 50, 100],
        help="Point counts to generate.",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=5,
        help="How many point sets to generate per count.",
    )
    parser.add_argument(
        "--strategies",
        nargs="+",
        choices=sorted(STRATEGY_REGISTRY.keys()),
        help="Subset of strategies to run (default: all).",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42).")
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=None,
        help="Optional CSV file for the per-run records.",
    )
    return parser.parse_args(raw_args)


def run_instances(
    counts: Iterable[int], per_count: int, strategies: list[str], seed: int
) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    engine = TourEngine(EngineConfig(seed=seed), rng=rng)
    rows: list[dict] = []
    instance_id = 0
    for count in counts:
        for _ in range(per_count):
            points = engine.randomize(count)
            start_index = int(rng.integers(len(points)))
            for name in strategies:
                result = engine.solve(name, start_index=start_index)
                rows.append(
                    {
                        "instance": instance_id,
                        "num_points": count,
                        "strategy": name,
                        "family": STRATEGY_FAMILIES[name].value,
                        "cost": result.final_cost,
                        "steps": result.steps,
                        "elapsed": result.elapsed,
                        "status": result.status,
                    }
                )
            instance_id += 1
    return pd.DataFrame(rows)


def normalise_cost(df: pd.DataFrame) -> pd.DataFrame:
    best_cost = df.groupby("instance")["cost"].transform("min")
    out = df.copy()
    out["norm_cost"] = out["cost"] / best_cost
    return out


def summarise(df: pd.DataFrame) -> pd.DataFrame:
    summary = df.groupby(["num_points", "strategy"]).agg(
        mean_cost=("cost", "mean"),
        mean_norm_cost=("norm_cost", "mean"),
        median_norm_cost=("norm_cost", "median"),
        best_share=("norm_cost", lambda s: float((s <= 1.0 + 1e-9).mean())),
        mean_elapsed=("elapsed", "mean"),
    )
    return summary.sort_values(["num_points", "mean_norm_cost"])


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    strategies = args.strategies or list(STRATEGY_REGISTRY.keys())
    df = normalise_cost(run_instances(args.counts, args.instances_per_count, strategies, args.seed))
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
        print(f"Wrote {len(df)} runs to {args.output}")
    with pd.option_context("display.width", 120, "display.float_format", "{:.3f}".format):
        print(summarise(df))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
