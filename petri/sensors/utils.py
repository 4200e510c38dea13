"""Angle and coordinate wrapping helpers."""
import math

import numpy as np

TAU = 2.0 * math.pi


def wrap(value, low: float, high: float):
    """
    Map `value` into the half-open interval [low, high).

    Works on scalars and numpy arrays alike. Uses modular arithmetic,
    so it terminates in constant time for any finite input.
    """
    if not low < high:
        raise ValueError(f"Invalid bounds: [{low}, {high})")
    result = low + np.mod(np.subtract(value, low), high - low)
    # np.mod rounds tiny negative offsets up to the full width.
    return np.where(result >= high, low, result)[()]


def wrap_angle(angle):
    """
    Reduce an angle in radians into (-pi, pi].

    Works on scalars and numpy arrays alike.
    """
    result = math.pi - np.mod(math.pi - np.asarray(angle, dtype=np.float64), TAU)
    return np.where(result <= -math.pi, result + TAU, result)[()]
