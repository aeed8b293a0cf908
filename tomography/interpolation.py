"""
Interpolation Primitives

Bilinear (2D) and linear (1D) resampling shared by the forward projector
and the backprojector. Both interpolators accept scalar or array
coordinates.
"""

import math
import numpy as np

from core.errors import DimensionMismatchError, OutOfRangeError


def floor(d: float) -> int:
    """Largest integer not greater than ``d`` (rounds toward -inf)."""
    return int(math.floor(d))


def ceil(d: float) -> int:
    """Smallest integer not less than ``d``."""
    return -floor(-d)


def round_half_up(d: float) -> int:
    """Closest integer to ``d``, halves rounded up."""
    return floor(d + 0.5)


def bilinear_2d(array: np.ndarray, x, y):
    """
    Bilinear interpolation of ``array[y, x]`` at fractional positions.

    Args:
        array: 2D array indexed (row=y, col=x)
        x: Column coordinate(s)
        y: Row coordinate(s), same shape as ``x``

    Returns:
        Interpolated value(s)

    Raises:
        OutOfRangeError: if floor(x) is outside [0, width-2] or floor(y)
            outside [0, height-2]. Coordinates are never wrapped or clamped.
    """
    height, width = array.shape
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    i = np.floor(x).astype(np.intp)
    j = np.floor(y).astype(np.intp)

    if np.any((i < 0) | (i > width - 2) | (j < 0) | (j > height - 2)):
        raise OutOfRangeError(
            f"Bilinear sample outside lattice of size {width}x{height}"
        )

    dx = x - i
    dy = y - j
    v00 = array[j, i]
    v10 = array[j, i + 1]
    v01 = array[j + 1, i]
    v11 = array[j + 1, i + 1]

    v = (
        v00 * (1.0 - dx) * (1.0 - dy) +
        v10 * dx * (1.0 - dy) +
        v01 * (1.0 - dx) * dy +
        v11 * dx * dy
    )
    return v if np.ndim(v) else float(v)


def linear_1d(vector: np.ndarray, t):
    """
    Linear interpolation of a 1D vector at fractional position(s) ``t``.

    Positions whose floor falls before the first sample return ``vector[0]``;
    positions whose floor is at or past the last sample return
    ``vector[-1]``.
    """
    vector = np.asarray(vector, dtype=np.float64)
    if vector.ndim != 1 or vector.size == 0:
        raise DimensionMismatchError(
            f"Expected a non-empty 1D vector, got shape {vector.shape}"
        )
    n = vector.size
    t = np.asarray(t, dtype=np.float64)
    i = np.floor(t).astype(np.intp)

    if n < 2:
        v = np.full(t.shape, vector[0])
    else:
        dx = t - i
        inside = (i >= 0) & (i <= n - 2)
        ic = np.clip(i, 0, n - 2)
        blended = vector[ic] * (1.0 - dx) + vector[ic + 1] * dx
        clamped = np.where(i < 0, vector[0], vector[n - 1])
        v = np.where(inside, blended, clamped)
    return v if np.ndim(v) else float(v)
