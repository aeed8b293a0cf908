"""
Error Types

Exceptions raised by the tomography core. All failures are deterministic,
so callers should propagate them rather than retry.
"""


class TomographyError(Exception):
    """Base class for all tomography core errors."""


class InvalidDimensionError(TomographyError, ValueError):
    """Image is not square, or its size does not match a sinogram."""


class InvalidArgumentError(TomographyError, ValueError):
    """Scalar argument out of its valid domain (e.g. angle count <= 0)."""


class DimensionMismatchError(TomographyError, ValueError):
    """Vector length does not match the axis it is applied to."""


class OutOfRangeError(TomographyError, IndexError):
    """Sample coordinate or index outside the valid lattice."""
