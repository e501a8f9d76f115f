# Core module - Pure functions, no side effects
# FORBIDDEN: logging, pathlib, any I/O

from .types import VehicleState, ControlInput, VehicleParams
from .math_utils import wrap_angle, clamp, rotate_2d, car_outline
from .integrators import rk4
