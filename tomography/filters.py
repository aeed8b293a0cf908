"""
Filter Generators

Zero-phase spectral weights for filtered backprojection. Index 0 is the DC
component; weights are laid out in the same order as the output of the
forward spectral transform.
"""

from enum import Enum
import numpy as np

from core.errors import InvalidArgumentError


class FilterType(Enum):
    """Sinogram filters available to the reconstruction pipeline."""
    NONE = "none"
    RAM_LAK = "ram_lak"
    COSINE = "cosine"
    LAPLACIAN = "laplacian"

    @property
    def is_spectral(self) -> bool:
        return self in (FilterType.RAM_LAK, FilterType.COSINE)


def _check_size(size: int) -> None:
    if size < 1:
        raise InvalidArgumentError(f"Filter size must be >= 1, got {size}")


def generate_ram_lak(size: int) -> np.ndarray:
    """
    Ram-Lak (ramp) filter of length ``size``.

    Triangular ramp starting at 0, climbing by 0.5 / (size // 2) up to index
    size // 2 and descending after it.
    """
    _check_size(size)
    filt = np.zeros(size, dtype=np.float64)
    if size == 1:
        return filt

    step = 0.5 / (size // 2)
    index = np.arange(1, size)
    increments = np.where(index <= size // 2, step, -step)
    filt[1:] = np.cumsum(increments)
    return filt


def generate_cosine(size: int) -> np.ndarray:
    """
    Raised-cosine filter of length ``size``.

    filter[i] = w * cos(pi * w) with w = i / size for i in [1, size // 2),
    mirrored onto filter[size - i]. The Nyquist bin stays at zero.
    """
    _check_size(size)
    filt = np.zeros(size, dtype=np.float64)
    index = np.arange(1, size // 2)
    w = index / size
    filt[index] = w * np.cos(np.pi * w)
    filt[size - index] = filt[index]
    return filt


def generate_filter(filter_type: FilterType, size: int) -> np.ndarray:
    """Generate the weight vector for a spectral filter type."""
    if filter_type is FilterType.RAM_LAK:
        return generate_ram_lak(size)
    if filter_type is FilterType.COSINE:
        return generate_cosine(size)
    raise InvalidArgumentError(f"{filter_type} is not a spectral filter")
