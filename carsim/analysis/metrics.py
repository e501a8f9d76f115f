# Metrics computation

import numpy as np
from typing import Dict, List


def compute_trajectory_metrics(records: List[Dict[str, float]]) -> Dict[str, float]:
    """Compute summary metrics from telemetry rows.

    Args:
        records: Rows with t, x, y, speed, heading and steering_angle

    Returns:
        Dict of computed metrics
    """
    metrics = {}

    if not records:
        return metrics

    t = np.array([r["t"] for r in records])
    xy = np.array([[r["x"], r["y"]] for r in records])
    speed = np.array([r["speed"] for r in records])
    steering = np.array([r["steering_angle"] for r in records])

    metrics["duration"] = float(t[-1] - t[0])
    metrics["distance"] = float(np.sum(np.linalg.norm(np.diff(xy, axis=0), axis=1)))
    metrics["displacement"] = float(np.linalg.norm(xy[-1] - xy[0]))
    metrics["mean_speed"] = float(np.mean(speed))
    metrics["max_speed"] = float(np.max(np.abs(speed)))
    metrics["max_steering_angle"] = float(np.max(np.abs(steering)))

    # Final pose
    metrics["final_x"] = float(xy[-1, 0])
    metrics["final_y"] = float(xy[-1, 1])
    metrics["final_heading"] = float(records[-1]["heading"])

    return metrics
