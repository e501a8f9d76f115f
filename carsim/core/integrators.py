# Fixed-step integrators
# FORBIDDEN: logging, any I/O

from typing import Any, Callable
import numpy as np


# f(state, u) -> delta, where `state + delta * h` is a valid state
DerivativeFn = Callable[[Any, np.ndarray], np.ndarray]


def rk4(f: DerivativeFn, dt: float, x: Any, u: np.ndarray) -> np.ndarray:
    """Classical 4th-order Runge-Kutta step.

    The input `u` is held constant over all four stages. No clamping
    or normalization is applied to intermediate states. Works with any
    state type supporting `state + delta`.

    Args:
        f: Derivative function
        dt: Step size in seconds
        x: Current state
        u: Control input

    Returns:
        State delta to add to `x`
    """
    k1 = np.asarray(f(x, u), dtype=np.float64)
    k2 = np.asarray(f(x + k1 * dt / 2, u), dtype=np.float64)
    k3 = np.asarray(f(x + k2 * dt / 2, u), dtype=np.float64)
    k4 = np.asarray(f(x + k3 * dt, u), dtype=np.float64)
    return (k1 + 2 * k2 + 2 * k3 + k4) * dt / 6.0
