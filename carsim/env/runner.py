# Headless simulation loop

import logging
import time
from typing import Any, Dict, Optional

import numpy as np

from .controls import InputMapper, ScriptedDriver
from .vehicle import BicycleModel
from ..analysis.logger import TelemetryRecorder

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Drive a vehicle frame by frame at a fixed time step.

    Each frame zeroes the input, applies the driver's command, propagates
    the model to the frame time, records the pose and advances the clock.
    The clock starts at zero, so the first frame only primes the model.
    """

    def __init__(
        self,
        vehicle: BicycleModel,
        driver: ScriptedDriver,
        dt: float = 0.01,
        recorder: Optional[TelemetryRecorder] = None,
    ):
        assert dt > 0, f"dt must be positive, got {dt}"
        self.vehicle = vehicle
        self.driver = driver
        self.dt = dt
        self.recorder = recorder if recorder is not None else TelemetryRecorder()
        self.mapper = InputMapper(vehicle.max_force, vehicle.max_torque)
        self.t = 0.0
        self.frame = 0

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        recorder: Optional[TelemetryRecorder] = None,
    ) -> "SimulationRunner":
        simulation = config.get("simulation") or {}
        return cls(
            vehicle=BicycleModel.from_config(config),
            driver=ScriptedDriver.from_config(simulation.get("schedule", [])),
            dt=float(simulation.get("dt", 0.01)),
            recorder=recorder,
        )

    def step(self) -> Dict[str, float]:
        """Run one frame and return its telemetry row."""
        command = self.driver.command_at(self.t)
        self.mapper.apply(self.vehicle, command)
        self.vehicle.propagate(self.t)
        row = self.recorder.record(self.t, self.vehicle)

        self.frame += 1
        # Step count avoids accumulating float error in t
        self.t = self.frame * self.dt
        return row

    def run(self, duration: Optional[float] = None) -> Dict[str, float]:
        """Run `duration` more seconds of simulated time.

        Args:
            duration: Simulated seconds; defaults to the schedule length

        Returns:
            Final telemetry row
        """
        if duration is None:
            duration = self.driver.total_duration
        num_frames = int(np.floor(duration / self.dt + 1e-9))
        # The t=0 frame only primes the model
        if self.frame == 0:
            num_frames += 1

        logger.info(f"Running '{self.vehicle.name}' for {duration:.2f}s ({num_frames} frames)")
        start_time = time.time()

        row = {}
        for _ in range(num_frames):
            row = self.step()

        logger.info(
            f"Finished at t={row.get('t', 0.0):.2f}s: x={self.vehicle.x:.2f}, "
            f"y={self.vehicle.y:.2f}, heading={self.vehicle.psi:.3f} "
            f"({time.time() - start_time:.2f}s wall)"
        )
        return row
