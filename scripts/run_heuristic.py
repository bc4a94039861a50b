#!/usr/bin/env python3
"""Run one tour construction heuristic and stream its steps as JSON lines.

Ctrl+C stops the run cooperatively; the partial result is still written.
"""
from __future__ import annotations

import argparse
import json
import logging
import pathlib
import signal
import sys
import time
from typing import Iterable, TextIO

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from TourEngine import STRATEGY_REGISTRY, EngineConfig, RunResult, Step, TourEngine, format_large_number


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a Euclidean tour step by step with a construction heuristic.")
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGY_REGISTRY.keys()),
        default="nearest-neighbor",
        help="Construction heuristic to run.",
    )
    parser.add_argument("--points", type=int, default=20, help="Number of random points (default: 20).")
    parser.add_argument(
        "--coordinates",
        type=pathlib.Path,
        help="JSON file with a list of [x, y] pairs to use instead of random points.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for points and start selection.")
    parser.add_argument("--start-index", type=int, default=None, help="Fix the start point (default: random).")
    parser.add_argument(
        "--speed",
        type=int,
        default=None,
        help="Animation speed 1-100; waits (1000 - 10*speed) ms after each step.",
    )
    parser.add_argument("--delay", type=float, default=None, help="Seconds to wait after each step (overrides --speed).")
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=None,
        help="Destination JSONL file (default: stdout).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log engine progress to stderr.")
    return parser.parse_args(raw_args)


def step_delay(speed: int | None, delay: float | None) -> float:
    if delay is not None:
        return max(0.0, delay)
    if speed is None:
        return 0.0
    speed = min(100, max(1, speed))
    return (1000 - speed * 10) / 1000.0


def serialize_step(step: Step) -> dict:
    return {
        "type": "step",
        "index": step.index,
        "tour": [list(p) for p in step.tour],
        "closed": step.closed,
        "cost": round(step.cost, 6),
        "elapsed": round(step.elapsed_seconds, 6),
    }


def serialize_result(result: RunResult) -> dict:
    return {
        "type": "result",
        "strategy": result.name,
        "status": result.status,
        "tour": [list(p) for p in result.final_tour],
        "cost": round(result.final_cost, 6),
        "steps": result.steps,
        "remaining": [list(p) for p in result.remaining],
        "elapsed": round(result.elapsed, 6),
    }


def write_record(out: TextIO, record: dict) -> None:
    out.write(json.dumps(record))
    out.write("\n")
    out.flush()


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    pause = step_delay(args.speed, args.delay)
    config = EngineConfig(
        default_strategy=args.strategy,
        point_count=args.points,
        seed=args.seed,
        tick=(lambda _step: time.sleep(pause)) if pause > 0 else None,
    )
    engine = TourEngine(config)
    if args.coordinates is not None:
        if not args.coordinates.exists():
            raise SystemExit(f"Coordinate file not found: {args.coordinates}")
        engine.set_points(json.loads(args.coordinates.read_text(encoding="utf-8")))
    else:
        engine.randomize()

    metrics = engine.metrics
    print(
        f"{args.strategy} on {len(engine.points)} points "
        f"({format_large_number(metrics.possible_tours)} possible tours)",
        file=sys.stderr,
    )

    previous = signal.signal(signal.SIGINT, lambda _signum, _frame: engine.stop())
    out = args.output.open("w", encoding="utf-8") if args.output else sys.stdout
    try:
        run = engine.run(start_index=args.start_index)
        for step in run:
            write_record(out, serialize_step(step))
        write_record(out, serialize_result(run.result))
    finally:
        signal.signal(signal.SIGINT, previous)
        if out is not sys.stdout:
            out.close()

    metrics = engine.metrics
    print(
        f"{run.result.status}: distance={metrics.current_distance:.2f} "
        f"best={metrics.min_distance:.2f} elapsed={metrics.elapsed_seconds:.2f}s",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
