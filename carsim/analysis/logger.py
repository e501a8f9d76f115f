# Logging utilities

import logging
import json
import csv
from pathlib import Path
from typing import Dict, List, Any, Optional
from datetime import datetime


TELEMETRY_FIELDS = [
    "t",
    "x",
    "y",
    "heading",
    "steering_angle",
    "speed",
    "force",
    "torque",
]


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger("carsim")
    logger.setLevel(getattr(logging, level.upper()))

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def pose_record(t: float, vehicle) -> Dict[str, float]:
    """Snapshot of the vehicle pose and input at time `t`."""
    return {
        "t": float(t),
        "x": vehicle.x,
        "y": vehicle.y,
        "heading": vehicle.psi,
        "steering_angle": vehicle.theta,
        "speed": vehicle.speed,
        "force": vehicle.force,
        "torque": vehicle.torque,
    }


class TelemetryRecorder:
    """Per-frame telemetry kept in memory, exportable as CSV and JSON."""

    def __init__(self, log_dir: Optional[Path] = None):
        """Initialize telemetry recorder.

        Args:
            log_dir: Directory for output files; None keeps records in memory only
        """
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.records: List[Dict[str, float]] = []

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.csv_path = self.log_dir / "telemetry.csv"
            self.json_path = self.log_dir / "summary.json"
            with open(self.csv_path, "w", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=TELEMETRY_FIELDS)
                writer.writeheader()

    def record(self, t: float, vehicle) -> Dict[str, float]:
        """Append one frame.

        Args:
            t: Simulated time
            vehicle: Model exposing pose and input accessors

        Returns:
            The recorded row
        """
        row = pose_record(t, vehicle)
        self.records.append(row)

        if self.log_dir is not None:
            with open(self.csv_path, "a", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=TELEMETRY_FIELDS, extrasaction="ignore")
                writer.writerow(row)

        return row

    def save_summary(self, summary: Dict[str, Any]) -> None:
        """Save run summary as JSON."""
        if self.log_dir is None:
            return
        payload = {
            "timestamp": datetime.now().isoformat(),
            "num_frames": len(self.records),
            **summary,
        }
        with open(self.json_path, "w") as f:
            json.dump(payload, f, indent=2)

    def get_series(self, field_name: str) -> List[float]:
        """Time series of one telemetry field."""
        return [r[field_name] for r in self.records if field_name in r]

    def get_latest(self) -> Optional[Dict[str, float]]:
        return self.records[-1] if self.records else None
