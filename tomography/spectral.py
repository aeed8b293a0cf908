"""
Spectral Filter Bank

Applies zero-phase frequency-domain filters to every projection of a
sinogram through a fixed-length 1D discrete Fourier transform.

Normalization: ``SpectralTransform.forward`` is unscaled and
``SpectralTransform.inverse`` scales by 1/N (the numpy.fft convention), so
``inverse(forward(x)) == x``. Filter weights from ``filters`` are applied
on top of that pair and are not rescaled.
"""

import logging
import numpy as np

from core.base import Sinogram, as_sinogram
from core.errors import DimensionMismatchError, InvalidArgumentError
from .filters import generate_cosine, generate_ram_lak


class SpectralTransform:
    """
    In-place 1D DFT of fixed length backed by numpy.fft.

    Operates along axis 0, so a single column of length ``size`` or a stack
    of columns of shape (size, k) can be transformed in one call.
    """

    def __init__(self, size: int):
        if size < 1:
            raise InvalidArgumentError(f"Transform size must be >= 1, got {size}")
        self.size = size

    def _check(self, real: np.ndarray, imaginary: np.ndarray) -> None:
        if real.shape != imaginary.shape:
            raise DimensionMismatchError(
                f"Real {real.shape} and imaginary {imaginary.shape} parts differ"
            )
        if real.shape[0] != self.size:
            raise DimensionMismatchError(
                f"Transform of length {self.size} got {real.shape[0]} samples"
            )

    def forward(self, real: np.ndarray, imaginary: np.ndarray) -> None:
        """Forward transform, unscaled, in place."""
        self._check(real, imaginary)
        spectrum = np.fft.fft(real + 1j * imaginary, axis=0)
        real[...] = spectrum.real
        imaginary[...] = spectrum.imag

    def inverse(self, real: np.ndarray, imaginary: np.ndarray) -> None:
        """Inverse transform, scaled by 1/N, in place."""
        self._check(real, imaginary)
        signal = np.fft.ifft(real + 1j * imaginary, axis=0)
        real[...] = signal.real
        imaginary[...] = signal.imag


def apply_filter(sinogram, filter_vector) -> Sinogram:
    """
    Filter every projection of a sinogram with a zero-phase weight vector.

    Each column is transformed, its real and imaginary spectra are multiplied
    by the same weights, and the real part of the inverse transform is kept.
    Columns are processed independently.

    Args:
        sinogram: Sinogram or array of shape (detector bins, angles)
        filter_vector: Weights of length equal to the detector bins

    Returns:
        New filtered Sinogram

    Raises:
        DimensionMismatchError: if the filter length differs from the
            detector axis length
    """
    sino = as_sinogram(sinogram)
    weights = np.asarray(filter_vector, dtype=np.float64)
    size = sino.num_detectors
    if weights.shape != (size,):
        raise DimensionMismatchError(
            f"Filter of length {weights.shape[0] if weights.ndim else 0} "
            f"cannot filter a sinogram with {size} detector bins"
        )

    real = sino.data.copy()
    imaginary = np.zeros_like(real)
    fft = SpectralTransform(size)

    fft.forward(real, imaginary)
    real *= weights[:, np.newaxis]
    imaginary *= weights[:, np.newaxis]
    fft.inverse(real, imaginary)

    logging.debug(f"Spectral filter applied to {sino.num_angles} projections of {size} bins")
    return Sinogram(real)


def apply_ram_lak_filter(sinogram) -> Sinogram:
    """Apply the Ram-Lak ramp filter to a sinogram."""
    sino = as_sinogram(sinogram)
    return apply_filter(sino, generate_ram_lak(sino.num_detectors))


def apply_cosine_filter(sinogram) -> Sinogram:
    """Apply the raised-cosine filter to a sinogram."""
    sino = as_sinogram(sinogram)
    return apply_filter(sino, generate_cosine(sino.num_detectors))
