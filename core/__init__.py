"""
Core Package

Contains the grid containers and error types shared by the tomography core.
"""

from .base import (
    PixelGrid,
    Sinogram,
    as_grid,
    as_sinogram,
)
from .errors import (
    TomographyError,
    InvalidDimensionError,
    InvalidArgumentError,
    DimensionMismatchError,
    OutOfRangeError,
)

__all__ = [
    'PixelGrid',
    'Sinogram',
    'as_grid',
    'as_sinogram',
    'TomographyError',
    'InvalidDimensionError',
    'InvalidArgumentError',
    'DimensionMismatchError',
    'OutOfRangeError',
]
