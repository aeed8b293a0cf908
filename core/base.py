"""
Core Base Classes

Shape-carrying containers for images and sinograms.

Arrays are stored row-major as ``data[y, x]``: ``width`` is the number of
columns (x) and ``height`` the number of rows (y). A sinogram is a grid whose
columns are angles and whose rows are detector bins.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .errors import DimensionMismatchError, InvalidDimensionError, OutOfRangeError


@dataclass
class PixelGrid:
    """
    2D grid of real samples with bounds-checked accessors.

    Attributes:
        data: 2D float64 array (height, width)
    """
    data: np.ndarray

    def __post_init__(self):
        self.data = np.asarray(self.data, dtype=np.float64)
        if self.data.ndim != 2:
            raise InvalidDimensionError(
                f"Expected a 2D grid, got array with shape {self.data.shape}"
            )

    @classmethod
    def zeros(cls, width: int, height: int) -> "PixelGrid":
        """Create a zero-filled grid."""
        return cls(np.zeros((height, width), dtype=np.float64))

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def _check_x(self, x: int) -> None:
        if not 0 <= x < self.width:
            raise OutOfRangeError(f"x={x} outside [0, {self.width})")

    def _check_y(self, y: int) -> None:
        if not 0 <= y < self.height:
            raise OutOfRangeError(f"y={y} outside [0, {self.height})")

    def get_pixel(self, x: int, y: int) -> float:
        self._check_x(x)
        self._check_y(y)
        return float(self.data[y, x])

    def put_pixel(self, x: int, y: int, value: float) -> None:
        self._check_x(x)
        self._check_y(y)
        self.data[y, x] = value

    def get_row(self, y: int) -> np.ndarray:
        """Return a copy of row ``y`` (length ``width``)."""
        self._check_y(y)
        return self.data[y, :].copy()

    def put_row(self, y: int, values) -> None:
        self._check_y(y)
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (self.width,):
            raise DimensionMismatchError(
                f"Row needs {self.width} values, got shape {values.shape}"
            )
        self.data[y, :] = values

    def get_column(self, x: int) -> np.ndarray:
        """Return a copy of column ``x`` (length ``height``)."""
        self._check_x(x)
        return self.data[:, x].copy()

    def put_column(self, x: int, values) -> None:
        self._check_x(x)
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (self.height,):
            raise DimensionMismatchError(
                f"Column needs {self.height} values, got shape {values.shape}"
            )
        self.data[:, x] = values

    def mean(self) -> float:
        """Arithmetic mean of all samples."""
        return float(self.data.mean())

    def subtract(self, value: float) -> "PixelGrid":
        """Return a new grid with ``value`` subtracted from every sample."""
        return type(self)(self.data - value)

    def copy(self) -> "PixelGrid":
        return type(self)(self.data.copy())


class Sinogram(PixelGrid):
    """
    Sinogram of shape (detector bins, angles).

    Column k holds the projection acquired at angle k.
    """

    @classmethod
    def zeros(cls, num_angles: int, num_detectors: int) -> "Sinogram":
        return cls(np.zeros((num_detectors, num_angles), dtype=np.float64))

    @property
    def num_angles(self) -> int:
        return self.width

    @property
    def num_detectors(self) -> int:
        return self.height


def as_grid(image) -> PixelGrid:
    """Wrap an array-like as a PixelGrid; grids are returned unchanged."""
    if isinstance(image, PixelGrid):
        return image
    return PixelGrid(image)


def as_sinogram(sinogram) -> Sinogram:
    """Wrap an array-like (detector bins, angles) as a Sinogram."""
    if isinstance(sinogram, Sinogram):
        return sinogram
    if isinstance(sinogram, PixelGrid):
        return Sinogram(sinogram.data)
    return Sinogram(sinogram)
