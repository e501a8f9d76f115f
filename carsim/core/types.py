# Core type definitions
# FORBIDDEN: logging, any I/O

from dataclasses import dataclass, field
from typing import Tuple
import numpy as np


# State indices
PX, PY, PZ, VEL, PSI, THETA = range(6)
NUM_STATES = 6

# Input indices
FORCE, TORQUE = range(2)
COMMAND_SIZE = 2


@dataclass
class VehicleState:
    """Kinematic bicycle state.

    Position is [north, east, up]; up is carried but never driven.
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    v: float = 0.0       # forward speed, m/s
    psi: float = 0.0     # heading, rad
    theta: float = 0.0   # steering angle, rad

    def __add__(self, delta: np.ndarray) -> "VehicleState":
        """Component-wise sum with a state delta. No normalization."""
        delta = np.asarray(delta, dtype=np.float64)
        assert delta.shape == (NUM_STATES,), f"Expected shape ({NUM_STATES},), got {delta.shape}"
        return VehicleState(
            position=self.position + delta[PX:PZ + 1],
            v=self.v + float(delta[VEL]),
            psi=self.psi + float(delta[PSI]),
            theta=self.theta + float(delta[THETA]),
        )

    @property
    def north(self) -> float:
        return float(self.position[0])

    @property
    def east(self) -> float:
        return float(self.position[1])

    def to_array(self) -> np.ndarray:
        """Flatten to [px, py, pz, v, psi, theta]."""
        return np.concatenate([
            self.position,
            np.array([self.v, self.psi, self.theta]),
        ]).astype(np.float64)

    @classmethod
    def from_array(cls, arr) -> "VehicleState":
        """Reconstruct from a 6-vector."""
        arr = np.asarray(arr, dtype=np.float64)
        assert arr.shape == (NUM_STATES,), f"Expected shape ({NUM_STATES},), got {arr.shape}"
        return cls(
            position=arr[PX:PZ + 1].copy(),
            v=float(arr[VEL]),
            psi=float(arr[PSI]),
            theta=float(arr[THETA]),
        )

    def copy(self) -> "VehicleState":
        return VehicleState.from_array(self.to_array())


@dataclass
class ControlInput:
    """Applied force and torque, written by the driver each frame."""
    force: float = 0.0
    torque: float = 0.0

    def to_array(self) -> np.ndarray:
        return np.array([self.force, self.torque], dtype=np.float64)

    def zero(self) -> None:
        self.force = 0.0
        self.torque = 0.0


@dataclass(frozen=True)
class VehicleParams:
    """Immutable per-run vehicle configuration."""
    name: str = "car"
    mass: float = 1.0                 # kg
    inertia: float = 1.0              # steering inertia
    length: float = 1.0               # wheelbase, m
    drag: float = 0.1                 # 1/s
    max_force: float = 1.0            # N
    max_torque: float = 1.0
    max_steering_angle: float = 0.5   # rad, must stay below pi/2
    x0: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def __post_init__(self):
        assert self.mass > 0, f"mass must be positive, got {self.mass}"
        assert self.inertia > 0, f"inertia must be positive, got {self.inertia}"
        assert self.length > 0, f"length must be positive, got {self.length}"
        # tan(theta) diverges at pi/2
        assert 0 < self.max_steering_angle < np.pi / 2, (
            f"max_steering_angle must be in (0, pi/2), got {self.max_steering_angle}"
        )
        assert len(self.x0) == NUM_STATES, f"x0 must have {NUM_STATES} components, got {len(self.x0)}"

    @property
    def initial_state(self) -> VehicleState:
        return VehicleState.from_array(self.x0)
