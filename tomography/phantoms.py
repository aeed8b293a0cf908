"""
Synthetic Phantoms

Test images for projection and reconstruction, built with scikit-image.
"""

from typing import Optional, Tuple
import numpy as np
from skimage.data import shepp_logan_phantom as _shepp_logan
from skimage.draw import disk
from skimage.transform import resize

from core.base import PixelGrid
from core.errors import InvalidArgumentError, InvalidDimensionError


def disc_phantom(
    size: int,
    radius: Optional[float] = None,
    value: float = 1.0,
    center: Optional[Tuple[float, float]] = None
) -> PixelGrid:
    """
    Uniform disc on a zero background.

    Args:
        size: Image size (size x size)
        radius: Disc radius in pixels (default: a quarter of the size)
        value: Sample value inside the disc
        center: (row, col) of the disc (default: grid center)

    Returns:
        PixelGrid with the disc
    """
    if size < 1:
        raise InvalidDimensionError(f"Phantom size must be >= 1, got {size}")
    if radius is None:
        radius = size / 4.0
    if radius <= 0:
        raise InvalidArgumentError(f"Disc radius must be positive, got {radius}")
    if center is None:
        c = (size - 1) / 2.0
        center = (c, c)

    data = np.zeros((size, size), dtype=np.float64)
    rr, cc = disk(center, radius, shape=data.shape)
    data[rr, cc] = value
    return PixelGrid(data)


def point_phantom(size: int, row: int, col: int, value: float = 1.0) -> PixelGrid:
    """Single impulse at (row, col) on a zero background."""
    grid = PixelGrid.zeros(size, size)
    grid.put_pixel(col, row, value)
    return grid


def shepp_logan_phantom(size: int) -> PixelGrid:
    """Shepp-Logan head phantom resampled to size x size."""
    if size < 1:
        raise InvalidDimensionError(f"Phantom size must be >= 1, got {size}")
    phantom = _shepp_logan()
    if phantom.shape != (size, size):
        phantom = resize(phantom, (size, size), anti_aliasing=True)
    return PixelGrid(phantom.astype(np.float64))
