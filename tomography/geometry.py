"""
Parallel-beam Geometry

Angle grid and inscribed-circle field of view shared by the projector and
the backprojector.
"""

from typing import List, Tuple
import numpy as np


def projection_angles(num_angles: int) -> np.ndarray:
    """
    Projection angles in radians over a half turn.

    angle_k = k * pi / A - pi / 2 for k in [0, A), spanning [-pi/2, pi/2).
    """
    step = np.pi / num_angles
    return np.arange(num_angles, dtype=np.float64) * step - np.pi / 2


def center_of(size: int) -> float:
    """Rotation center of a grid of the given size."""
    return (size - 1) / 2.0


def field_of_view(size: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Centered index offsets and the inscribed-circle mask.

    Returns:
        (row_offsets, col_offsets, mask): arrays of shape (size, size) where
        ``row_offsets[r, c] = r - center``, ``col_offsets[r, c] = c - center``
        and ``mask`` is True where the squared radius is strictly below
        center**2.
    """
    center = center_of(size)
    offsets = np.arange(size, dtype=np.float64) - center
    row_offsets, col_offsets = np.meshgrid(offsets, offsets, indexing='ij')
    mask = row_offsets ** 2 + col_offsets ** 2 < center * center
    return row_offsets, col_offsets, mask


def field_of_view_mask(size: int) -> np.ndarray:
    """Boolean (size, size) mask of the inscribed circle."""
    return field_of_view(size)[2]


def angle_chunks(num_angles: int, workers: int) -> List[np.ndarray]:
    """Split angle indices into at most ``workers`` contiguous chunks."""
    workers = max(1, min(workers, num_angles))
    return [c for c in np.array_split(np.arange(num_angles), workers) if c.size]
