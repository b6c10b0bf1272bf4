from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from pathlib import Path
from typing import Optional

from ..config import SimulationConfig
from ..sim.core.world import World
from ..sim.types.metrics import TickMetrics
from ..sim.types.snapshot import flock_to_dict

logger = logging.getLogger(__name__)


_BASIC_HEADER = [
    "tick",
    "population",
    "avg_speed",
    "max_speed",
    "polarization",
    "tick_ms",
]

_DETAILED_HEADER = [
    "tick",
    "population",
    "avg_speed",
    "max_speed",
    "polarization",
    "tick_ms",
    "tick_ms_per_boid",
    "speed_ratio",
    "centroid_x",
    "centroid_y",
    "centroid_z",
    "target_distance",
]


def _format_basic_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        f"{metrics.average_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        f"{metrics.polarization:.4f}",
        f"{tick_ms:.3f}",
    ]


def _format_detailed_row(world: World, metrics: TickMetrics, tick_ms: float) -> list[object]:
    population = metrics.population
    speed_limit = world._config.boids.max_speed
    if population <= 0:
        tick_ms_per_boid = 0.0
    else:
        tick_ms_per_boid = tick_ms / population
    speed_ratio = 0.0 if speed_limit <= 0 else metrics.average_speed / speed_limit

    target = world.flock.target
    if target is None or population <= 0:
        target_distance = ""
    else:
        target_distance = f"{math.dist((metrics.centroid_x, metrics.centroid_y, metrics.centroid_z), tuple(target)):.4f}"

    return [
        metrics.tick,
        population,
        f"{metrics.average_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        f"{metrics.polarization:.4f}",
        f"{tick_ms:.3f}",
        f"{tick_ms_per_boid:.4f}",
        f"{speed_ratio:.4f}",
        f"{metrics.centroid_x:.4f}",
        f"{metrics.centroid_y:.4f}",
        f"{metrics.centroid_z:.4f}",
        target_distance,
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p95": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    total = sum(values)
    count = len(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(total / count),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p95": _percentile(sorted_values, 0.95),
        "p99": _percentile(sorted_values, 0.99),
    }


def _correlation(xs: list[float], ys: list[float]) -> float:
    if len(xs) != len(ys) or len(xs) < 2:
        return 0.0
    mean_x = sum(xs) / len(xs)
    mean_y = sum(ys) / len(ys)
    num = 0.0
    denom_x = 0.0
    denom_y = 0.0
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        num += dx * dy
        denom_x += dx * dx
        denom_y += dy * dy
    denom = math.sqrt(denom_x * denom_y)
    if denom == 0.0:
        return 0.0
    return float(num / denom)


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    log_format: str = "detailed",
    summary_path: Optional[Path] = None,
    summary_window: int = 5000,
    config: Optional[SimulationConfig] = None,
    parallel: Optional[bool] = None,
    workers: Optional[int] = None,
    state_path: Optional[Path] = None,
) -> World:
    config = config if config is not None else SimulationConfig()
    if seed is not None:
        config.seed = seed
    if parallel is not None:
        config.flock.parallel = parallel
    if workers is not None:
        config.flock.workers = workers

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")

    world = World(config)
    logger.info(
        "Running %d steps with %d boids (%dD, seed=%d, parallel=%s)",
        steps,
        len(world.boids),
        config.boids.dimensions,
        config.seed,
        config.flock.parallel,
    )

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if log_mode == "detailed" else _BASIC_HEADER)

    tick_ms_series: list[float] = []
    speed_series: list[float] = []
    polarization_series: list[float] = []
    max_tick_ms = (-1.0, -1)
    max_polarization = (-1.0, -1)

    try:
        for tick in range(steps):
            metrics = world.step(tick)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms

            if summary_path:
                tick_ms_series.append(tick_ms)
                speed_series.append(metrics.average_speed)
                polarization_series.append(metrics.polarization)
                if tick_ms > max_tick_ms[0]:
                    max_tick_ms = (tick_ms, tick)
                if metrics.polarization > max_polarization[0]:
                    max_polarization = (metrics.polarization, tick)

            if writer:
                if log_mode == "detailed":
                    writer.writerow(_format_detailed_row(world, metrics, tick_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        window = max(1, int(summary_window))
        tail_slice = slice(max(0, len(tick_ms_series) - window), len(tick_ms_series))
        summary = {
            "steps": steps,
            "seed": config.seed,
            "population": len(world.boids),
            "dimensions": config.boids.dimensions,
            "parallel": config.flock.parallel,
            "log_format": log_mode,
            "deterministic_log": deterministic_log,
            "tick_ms": _summary_stats(tick_ms_series),
            "average_speed": _summary_stats(speed_series),
            "polarization": _summary_stats(polarization_series),
            "correlations": {
                "polarization_vs_average_speed": _correlation(polarization_series, speed_series),
            },
            "over_threshold": {
                "tick_ms_gt_20": sum(1 for value in tick_ms_series if value > 20.0),
                "tick_ms_gt_30": sum(1 for value in tick_ms_series if value > 30.0),
                "tick_ms_gt_40": sum(1 for value in tick_ms_series if value > 40.0),
            },
            "peaks": {
                "tick_ms": {"value": float(max_tick_ms[0]), "tick": max_tick_ms[1]},
                "polarization": {"value": float(max_polarization[0]), "tick": max_polarization[1]},
            },
            "tail_window": {
                "window": window,
                "tick_ms": _summary_stats(tick_ms_series[tail_slice]),
                "average_speed": _summary_stats(speed_series[tail_slice]),
                "polarization": _summary_stats(polarization_series[tail_slice]),
            },
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))

    if state_path:
        Path(state_path).write_text(json.dumps(flock_to_dict(world.flock)))

    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless flocking simulation")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file with simulation settings")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--log-format",
        choices=["basic", "detailed"],
        default="detailed",
        help="CSV format to write when --log is provided.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--summary-window",
        type=int,
        default=5000,
        help="Tail window size (ticks) for summary stats.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument(
        "--parallel",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Update boids across a thread pool (overrides the config file).",
    )
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size for --parallel")
    parser.add_argument("--dump-state", type=Path, default=None, help="JSON file to write the final flock state")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SimulationConfig.from_yaml(args.config) if args.config else None
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        log_format=args.log_format,
        summary_path=args.summary,
        summary_window=args.summary_window,
        config=config,
        parallel=args.parallel,
        workers=args.workers,
        state_path=args.dump_state,
    )


if __name__ == "__main__":
    main()
