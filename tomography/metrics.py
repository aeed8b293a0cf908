"""
Image comparison metrics restricted to the reconstruction field of view.
"""

import numpy as np

from core.base import as_grid
from core.errors import InvalidDimensionError
from .geometry import field_of_view_mask


def field_of_view_mae(image, reference) -> float:
    """Mean absolute error between two square images inside the inscribed circle."""
    a = as_grid(image)
    b = as_grid(reference)
    if a.shape != b.shape or not a.is_square:
        raise InvalidDimensionError(
            f"Cannot compare images of shape {a.shape} and {b.shape}"
        )
    mask = field_of_view_mask(a.width)
    if not mask.any():
        return 0.0
    return float(np.mean(np.abs(a.data[mask] - b.data[mask])))


def normalized_correlation(image, reference) -> float:
    """Pearson correlation of two images inside the inscribed circle."""
    a = as_grid(image)
    b = as_grid(reference)
    if a.shape != b.shape or not a.is_square:
        raise InvalidDimensionError(
            f"Cannot compare images of shape {a.shape} and {b.shape}"
        )
    mask = field_of_view_mask(a.width)
    return float(np.corrcoef(a.data[mask], b.data[mask])[0, 1])
