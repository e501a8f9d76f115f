# Driver inputs: command mapping and scripted schedules

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Command:
    """Held driver command, both components in [-1, 1]."""
    throttle: float = 0.0
    steer: float = 0.0


class InputMapper:
    """Map driver commands to force and torque within the vehicle limits."""

    def __init__(self, max_force: float, max_torque: float):
        self.max_force = max_force
        self.max_torque = max_torque

    def map(self, command: Optional[Command]) -> Tuple[float, float]:
        """Convert a command to (force, torque).

        No command means no input, as when no key is held.
        """
        if command is None:
            return 0.0, 0.0
        force = float(np.clip(command.throttle * self.max_force, -self.max_force, self.max_force))
        torque = float(np.clip(command.steer * self.max_torque, -self.max_torque, self.max_torque))
        return force, torque

    def apply(self, vehicle, command: Optional[Command]) -> None:
        """Reset the vehicle input, then set it from the command."""
        vehicle.controls.zero()
        vehicle.force, vehicle.torque = self.map(command)


class ScriptedDriver:
    """Play back a timed list of commands.

    Each entry holds its command for `duration` seconds; after the last
    entry the driver releases all input.
    """

    def __init__(self, schedule: List[Tuple[float, Command]]):
        self.schedule = list(schedule)
        self._ends = np.cumsum([duration for duration, _ in self.schedule])

    @classmethod
    def from_config(cls, entries: List[Dict[str, Any]]) -> "ScriptedDriver":
        return cls([
            (
                float(entry["duration"]),
                Command(
                    throttle=float(entry.get("throttle", 0.0)),
                    steer=float(entry.get("steer", 0.0)),
                ),
            )
            for entry in entries
        ])

    @property
    def total_duration(self) -> float:
        return float(self._ends[-1]) if len(self._ends) else 0.0

    def command_at(self, t: float) -> Optional[Command]:
        """Command held at time `t`, or None outside the schedule."""
        if t < 0 or not len(self._ends):
            return None
        index = int(np.searchsorted(self._ends, t, side="right"))
        if index >= len(self.schedule):
            return None
        return self.schedule[index][1]
