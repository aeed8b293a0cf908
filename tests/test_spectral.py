"""
Tests for the spectral transform and the spectral filter bank.
"""

import numpy as np
import pytest

from core.base import Sinogram
from core.errors import DimensionMismatchError, InvalidArgumentError
from tomography.filters import generate_cosine, generate_ram_lak
from tomography.spectral import (
    SpectralTransform,
    apply_cosine_filter,
    apply_filter,
    apply_ram_lak_filter,
)


def test_transform_round_trip(rng):
    signal = rng.normal(size=16)
    real = signal.copy()
    imaginary = np.zeros(16)
    fft = SpectralTransform(16)

    fft.forward(real, imaginary)
    fft.inverse(real, imaginary)

    np.testing.assert_allclose(real, signal, atol=1e-12)
    np.testing.assert_allclose(imaginary, 0.0, atol=1e-12)


def test_forward_is_unscaled():
    real = np.ones(8)
    imaginary = np.zeros(8)
    SpectralTransform(8).forward(real, imaginary)
    assert real[0] == pytest.approx(8.0)
    np.testing.assert_allclose(real[1:], 0.0, atol=1e-12)
    np.testing.assert_allclose(imaginary, 0.0, atol=1e-12)


def test_transform_rejects_wrong_length():
    fft = SpectralTransform(8)
    with pytest.raises(DimensionMismatchError):
        fft.forward(np.zeros(7), np.zeros(7))
    with pytest.raises(DimensionMismatchError):
        fft.inverse(np.zeros(8), np.zeros(4))
    with pytest.raises(InvalidArgumentError):
        SpectralTransform(0)


def test_unit_filter_is_identity(rng):
    data = rng.normal(size=(16, 5))
    sino = Sinogram(data.copy())
    filtered = apply_filter(sino, np.ones(16))

    assert isinstance(filtered, Sinogram)
    assert filtered is not sino
    np.testing.assert_allclose(filtered.data, data, atol=1e-12)
    np.testing.assert_array_equal(sino.data, data)


def test_ram_lak_scales_sinusoid():
    size = 16
    n = np.arange(size)
    column = np.cos(2 * np.pi * 2 * n / size)
    sino = Sinogram(np.stack([column, 3.0 * column], axis=1))

    filtered = apply_ram_lak_filter(sino)

    # Ram-Lak weight at bins 2 and 14 is 2 / 16
    np.testing.assert_allclose(filtered.get_column(0), 0.125 * column, atol=1e-12)
    np.testing.assert_allclose(filtered.get_column(1), 0.375 * column, atol=1e-12)


def test_ram_lak_removes_constant_projection():
    sino = Sinogram(np.full((12, 3), 4.2))
    np.testing.assert_allclose(apply_ram_lak_filter(sino).data, 0.0, atol=1e-12)


def test_columns_are_filtered_independently(rng):
    data = rng.normal(size=(10, 4))
    weights = generate_cosine(10)
    together = apply_filter(data, weights)
    for k in range(4):
        alone = apply_filter(data[:, k:k + 1], weights)
        np.testing.assert_allclose(together.get_column(k), alone.get_column(0), atol=1e-12)


def test_wrappers_match_generated_filters(rng):
    sino = Sinogram(rng.normal(size=(20, 6)))
    np.testing.assert_allclose(
        apply_ram_lak_filter(sino).data,
        apply_filter(sino, generate_ram_lak(20)).data,
    )
    np.testing.assert_allclose(
        apply_cosine_filter(sino).data,
        apply_filter(sino, generate_cosine(20)).data,
    )


def test_filter_length_mismatch():
    sino = Sinogram(np.zeros((16, 4)))
    with pytest.raises(DimensionMismatchError):
        apply_filter(sino, np.ones(15))
    with pytest.raises(DimensionMismatchError):
        apply_filter(sino, generate_ram_lak(4))
