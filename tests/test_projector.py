"""
Tests for the forward projector.
"""

import math

import numpy as np
import pytest

from core.base import PixelGrid, Sinogram
from core.errors import InvalidArgumentError, InvalidDimensionError
from tomography.interpolation import bilinear_2d
from tomography.phantoms import point_phantom
from tomography.projector import transform_radon


def reference_radon(image: np.ndarray, num_angles: int) -> np.ndarray:
    """Per-sample loop over bins and rays."""
    size = image.shape[0]
    work = image - image.mean()
    center = (size - 1) / 2.0
    radius2 = center * center
    sino = np.zeros((size, num_angles))
    for k in range(num_angles):
        angle = k * math.pi / num_angles - math.pi / 2
        cos, sin = math.cos(angle), math.sin(angle)
        for m in range(size):
            for n in range(size):
                mc, nc = m - center, n - center
                if mc * mc + nc * nc < radius2:
                    x = center + mc * cos - nc * sin
                    y = center + mc * sin + nc * cos
                    sino[m, k] += bilinear_2d(work, x, y)
    return sino


def test_output_shape():
    sino = transform_radon(np.zeros((12, 12)), 7)
    assert isinstance(sino, Sinogram)
    assert sino.shape == (12, 7)
    assert sino.num_angles == 7


def test_matches_per_sample_loop(rng):
    image = rng.normal(size=(7, 7))
    sino = transform_radon(image, 5)
    np.testing.assert_allclose(sino.data, reference_radon(image, 5), atol=1e-10)


def test_caller_image_is_not_modified(rng):
    data = rng.uniform(size=(10, 10)) + 3.0
    original = data.copy()
    grid = PixelGrid(data)

    transform_radon(grid, 6)
    transform_radon(data, 6)

    np.testing.assert_array_equal(grid.data, original)
    np.testing.assert_array_equal(data, original)


def test_mean_is_removed(rng):
    image = rng.uniform(size=(9, 9))
    np.testing.assert_allclose(
        transform_radon(image, 4).data,
        transform_radon(image + 5.0, 4).data,
        atol=1e-10,
    )
    np.testing.assert_allclose(transform_radon(np.ones((9, 9)), 4).data, 0.0, atol=1e-12)


@pytest.mark.parametrize("size", [5, 9, 15])
def test_center_impulse_is_rotationally_symmetric(size):
    c = size // 2
    image = point_phantom(size, c, c)
    sino = transform_radon(image, 2)
    np.testing.assert_allclose(sino.get_column(0), sino.get_column(1), atol=1e-12)


def test_center_impulse_axis_aligned_columns_agree():
    image = point_phantom(9, 4, 4)
    sino = transform_radon(image, 4)
    # columns 0 and 2 are the -pi/2 and 0 projections
    np.testing.assert_allclose(sino.get_column(0), sino.get_column(2), atol=1e-12)


def test_four_pixel_scenario():
    image = point_phantom(4, row=2, col=1)
    sino = transform_radon(image, 2)
    expected = [0.0, 7.0 / 8.0, -1.0 / 8.0, 0.0]
    np.testing.assert_allclose(sino.get_column(0), expected, atol=1e-12)
    np.testing.assert_allclose(sino.get_column(1), expected, atol=1e-12)


def test_bins_outside_field_of_view_are_zero(rng):
    image = rng.normal(size=(8, 8))
    sino = transform_radon(image, 9)
    # bins 0 and 7 sit at |mc| = radius, so no ray sample is inside the circle
    assert np.all(sino.get_row(0) == 0.0)
    assert np.all(sino.get_row(7) == 0.0)


def test_workers_do_not_change_result(rng):
    image = rng.normal(size=(16, 16))
    serial = transform_radon(image, 11, workers=1)
    threaded = transform_radon(image, 11, workers=4)
    np.testing.assert_allclose(threaded.data, serial.data, atol=1e-12)


def test_rejects_non_square_image():
    with pytest.raises(InvalidDimensionError):
        transform_radon(np.zeros((4, 5)), 3)


@pytest.mark.parametrize("num_angles", [0, -3, 2.5])
def test_rejects_bad_angle_count(num_angles):
    with pytest.raises(InvalidArgumentError):
        transform_radon(np.zeros((4, 4)), num_angles)
