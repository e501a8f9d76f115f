#!/usr/bin/env python3
"""Run the bicycle model headless and record telemetry.

Plays the configured command schedule through the vehicle at a fixed
time step and writes per-frame pose to CSV.

Usage:
    # Default schedule from the config
    python scripts/simulate.py --config configs/bicycle.yaml

    # Longer run, telemetry to a directory
    python scripts/simulate.py --config configs/bicycle.yaml --duration 30 --output runs/demo
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from carsim.analysis import TelemetryRecorder, compute_trajectory_metrics, setup_logging
from carsim.config import ConfigError, load_config
from carsim.env import SimulationRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the bicycle model headless")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/bicycle.yaml"),
        help="Path to configuration file",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Simulated seconds (overrides config)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory for telemetry.csv and summary.json",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides config)",
    )
    return parser


def main():
    args = build_parser().parse_args()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print("Configuration error:")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    level = args.log_level or (config.get("logging") or {}).get("level", "INFO")
    log_file = args.output / "simulate.log" if args.output is not None else None
    logger = setup_logging(level=level, log_file=log_file)

    simulation = config.get("simulation") or {}
    duration = args.duration if args.duration is not None else simulation.get("duration")

    recorder = TelemetryRecorder(args.output)
    runner = SimulationRunner.from_config(config, recorder=recorder)
    runner.run(duration)

    metrics = compute_trajectory_metrics(recorder.records)
    recorder.save_summary({"vehicle": runner.vehicle.name, **metrics})

    for key, value in metrics.items():
        logger.info(f"  {key}: {value:.3f}")


if __name__ == "__main__":
    main()
