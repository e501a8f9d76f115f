# Kinematic bicycle vehicle model

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np

from ..config import load_config, params_from_config
from ..core.integrators import rk4
from ..core.math_utils import clamp, wrap_angle
from ..core.types import (
    FORCE,
    NUM_STATES,
    PSI,
    PX,
    PY,
    PZ,
    THETA,
    TORQUE,
    VEL,
    ControlInput,
    VehicleParams,
    VehicleState,
)

logger = logging.getLogger(__name__)


class BicycleModel:
    """Rear-axle kinematic bicycle driven by force and steering torque.

    Speed responds to force with linear drag; steering angle responds to
    torque through the steering inertia. Heading is wrapped to (-pi, pi]
    and steering angle saturated after every step.

    The driver writes `force` and `torque` before calling `propagate(t)`
    once per frame, then reads the pose back.
    """

    def __init__(self, params: Optional[VehicleParams] = None):
        self.params = params if params is not None else VehicleParams()
        self._u = ControlInput()
        self._x = self.params.initial_state
        self._t_prev: Optional[float] = None

        logger.info(
            f"Loaded vehicle '{self.params.name}': mass={self.params.mass}, "
            f"length={self.params.length}, max_steering_angle={self.params.max_steering_angle:.3f}"
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "BicycleModel":
        """Create from a configuration dict (flat or with a `vehicle` section)."""
        return cls(params_from_config(config))

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "BicycleModel":
        """Create from a YAML configuration file."""
        return cls.from_config(load_config(config_path))

    def propagate(self, t: float) -> None:
        """Advance the state to absolute time `t`.

        The first call, `t <= 0` and non-increasing `t` only record the
        time; the state is left untouched.

        Args:
            t: Simulated time in seconds
        """
        t_prev = self._t_prev
        self._t_prev = t

        if t_prev is None or t <= 0:
            logger.debug(f"Skipping step at t={t}: clock not started")
            return

        dt = t - t_prev
        if dt <= 0:
            logger.debug(f"Skipping step at t={t}: dt={dt}")
            return

        dx = rk4(self.f, dt, self._x, self._u.to_array())
        x = self._x + dx

        x.psi = wrap_angle(x.psi)
        x.theta = clamp(
            x.theta,
            -self.params.max_steering_angle,
            self.params.max_steering_angle,
        )
        self._x = x

    def f(self, x: VehicleState, u: np.ndarray) -> np.ndarray:
        """Continuous-time state derivative.

        Args:
            x: State
            u: Input [force, torque]

        Returns:
            Derivative ordered [px, py, pz, v, psi, theta]
        """
        p = self.params
        dx = np.zeros(NUM_STATES)
        dx[PX] = x.v * np.cos(x.psi)
        dx[PY] = x.v * np.sin(x.psi)
        dx[PZ] = 0.0
        dx[PSI] = x.v * np.tan(x.theta) / p.length
        dx[VEL] = u[FORCE] / p.mass - p.drag * x.v
        dx[THETA] = u[TORQUE] / p.inertia
        return dx

    def reset(self, state: Optional[VehicleState] = None) -> None:
        """Restore the initial (or given) state and restart the clock."""
        self._x = state.copy() if state is not None else self.params.initial_state
        self._u.zero()
        self._t_prev = None

    @property
    def name(self) -> str:
        return self.params.name

    @property
    def state(self) -> VehicleState:
        """Copy of the state; edits do not reach the model."""
        return self._x.copy()

    @property
    def controls(self) -> ControlInput:
        return self._u

    @property
    def t_prev(self) -> Optional[float]:
        return self._t_prev

    @property
    def x(self) -> float:
        """North position."""
        return self._x.north

    @property
    def y(self) -> float:
        """East position."""
        return self._x.east

    @property
    def psi(self) -> float:
        """Heading in (-pi, pi]."""
        return self._x.psi

    @property
    def theta(self) -> float:
        """Steering angle."""
        return self._x.theta

    @property
    def speed(self) -> float:
        return self._x.v

    @property
    def force(self) -> float:
        return self._u.force

    @force.setter
    def force(self, value: float) -> None:
        self._u.force = float(value)

    @property
    def torque(self) -> float:
        return self._u.torque

    @torque.setter
    def torque(self, value: float) -> None:
        self._u.torque = float(value)

    @property
    def max_force(self) -> float:
        return self.params.max_force

    @property
    def max_torque(self) -> float:
        return self.params.max_torque
