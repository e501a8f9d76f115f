# Mathematical utilities
# FORBIDDEN: logging, any I/O

import numpy as np
from typing import Tuple


def wrap_angle(angle: float) -> float:
    """Wrap angle to (-pi, pi] range.

    Args:
        angle: Angle in radians, any magnitude

    Returns:
        Equivalent angle in (-pi, pi]
    """
    two_pi = 2.0 * np.pi
    wrapped = angle - two_pi * np.ceil((angle - np.pi) / two_pi)
    # Guard the open end against rounding
    if wrapped <= -np.pi:
        wrapped += two_pi
    elif wrapped > np.pi:
        wrapped -= two_pi
    return float(wrapped)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def rotate_2d(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Rotate 2D point by angle.

    Args:
        x, y: Point coordinates
        angle: Rotation angle in radians

    Returns:
        Rotated (x, y) coordinates
    """
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return (
        x * cos_a - y * sin_a,
        x * sin_a + y * cos_a,
    )


def car_outline(
    x: float,
    y: float,
    heading: float,
    length: float,
    width: float,
) -> np.ndarray:
    """Corners of a car-shaped polygon at a pose.

    The rear axle sits at (x, y); the body extends `length` forward
    and tapers to a pointed nose.

    Returns:
        Array of shape (5, 2), counter-clockwise
    """
    half_w = width / 2.0
    body = [
        (0.0, -half_w),
        (0.8 * length, -half_w),
        (length, 0.0),
        (0.8 * length, half_w),
        (0.0, half_w),
    ]
    corners = np.empty((len(body), 2))
    for i, (bx, by) in enumerate(body):
        rx, ry = rotate_2d(bx, by, heading)
        corners[i] = (x + rx, y + ry)
    return corners
