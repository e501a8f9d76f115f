# Analysis module - Logging, telemetry, metrics
# IMPURE - Has side effects (file I/O, logging)

from .logger import setup_logging, TelemetryRecorder
from .metrics import compute_trajectory_metrics
