"""
Forward Projector

Parallel-beam Radon transform of a square image into a sinogram, using
bilinear interpolation of the image along each ray.
"""

import concurrent.futures
import logging
import numpy as np

from core.base import Sinogram, as_grid
from core.errors import InvalidArgumentError, InvalidDimensionError
from .geometry import angle_chunks, center_of, field_of_view, projection_angles
from .interpolation import bilinear_2d


def _check_angle_count(num_angles) -> int:
    if isinstance(num_angles, bool) or int(num_angles) != num_angles or num_angles < 1:
        raise InvalidArgumentError(f"Number of angles must be >= 1, got {num_angles}")
    return int(num_angles)


def transform_radon(image, num_angles: int, workers: int = 1) -> Sinogram:
    """
    Apply a Radon transform to a square image.

    The image mean is removed on a private copy before projection, so the
    caller's image is left untouched. Each detector bin holds the raw sum of
    the bilinear samples taken along its ray inside the inscribed circle.

    Args:
        image: Square PixelGrid or 2D array (size, size)
        num_angles: Number of projection angles over a half turn
        workers: Number of threads; angles are split between them

    Returns:
        Sinogram of shape (size, num_angles)

    Raises:
        InvalidDimensionError: if the image is not square
        InvalidArgumentError: if num_angles < 1
    """
    grid = as_grid(image)
    if not grid.is_square:
        raise InvalidDimensionError(
            f"Radon transform needs a square image, got {grid.width}x{grid.height}"
        )
    if grid.width < 1:
        raise InvalidDimensionError("Radon transform needs a non-empty image")
    num_angles = _check_angle_count(num_angles)

    size = grid.width
    work = grid.data - grid.mean()

    center = center_of(size)
    det_offsets, ray_offsets, mask = field_of_view(size)
    bins = np.nonzero(mask)[0]
    mc = det_offsets[mask]
    nc = ray_offsets[mask]
    angles = projection_angles(num_angles)

    logging.debug(f"Radon transform: size={size}, angles={num_angles}, workers={workers}")

    def project(indices: np.ndarray) -> np.ndarray:
        columns = np.zeros((size, indices.size), dtype=np.float64)
        for col, k in enumerate(indices):
            cos = np.cos(angles[k])
            sin = np.sin(angles[k])
            x = center + mc * cos - nc * sin
            y = center + mc * sin + nc * cos
            values = bilinear_2d(work, x, y)
            columns[:, col] = np.bincount(bins, weights=values, minlength=size)
        return columns

    sinogram = Sinogram.zeros(num_angles, size)
    chunks = angle_chunks(num_angles, workers)
    if len(chunks) == 1:
        sinogram.data[:, chunks[0]] = project(chunks[0])
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            future_to_chunk = {
                executor.submit(project, chunk): i
                for i, chunk in enumerate(chunks)
            }
            for future in concurrent.futures.as_completed(future_to_chunk):
                chunk = chunks[future_to_chunk[future]]
                sinogram.data[:, chunk] = future.result()

    return sinogram
