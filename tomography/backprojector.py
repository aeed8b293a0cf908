"""
Back Projector

Smears every projection of a sinogram back across the image plane and sums
over angles. Applied to a filtered sinogram this is filtered backprojection.
"""

import concurrent.futures
import logging
from typing import Optional
import numpy as np

from core.base import PixelGrid, as_sinogram
from core.errors import InvalidArgumentError, InvalidDimensionError
from .geometry import angle_chunks, center_of, field_of_view, projection_angles
from .interpolation import linear_1d


def inverse_radon(sinogram, size: Optional[int] = None, workers: int = 1) -> PixelGrid:
    """
    Backproject a sinogram into a square image.

    For every pixel inside the inscribed circle and every angle, the
    projection is sampled by linear interpolation at the pixel's detector
    position and accumulated with weight pi / num_angles. Pixels outside the
    circle stay at zero.

    Args:
        sinogram: Sinogram or array of shape (detector bins, angles)
        size: Expected image size; must equal the detector bin count
        workers: Number of threads. Each one accumulates a private partial
            image over its own angles; partials are summed at the end.

    Returns:
        Reconstructed PixelGrid (size, size)

    Raises:
        InvalidDimensionError: if ``size`` does not match the detector axis
        InvalidArgumentError: if the sinogram holds no angles
    """
    sino = as_sinogram(sinogram)
    num_angles = sino.num_angles
    n_det = sino.num_detectors
    if size is not None and size != n_det:
        raise InvalidDimensionError(
            f"Image size {size} does not match {n_det} detector bins"
        )
    if num_angles < 1:
        raise InvalidArgumentError("Sinogram contains no projections")
    if n_det < 1:
        raise InvalidDimensionError("Sinogram contains no detector bins")

    center = center_of(n_det)
    step_angle = np.pi / num_angles
    angles = projection_angles(num_angles)
    row_offsets, col_offsets, mask = field_of_view(n_det)
    mc = col_offsets[mask]
    nc = row_offsets[mask]

    logging.debug(f"Backprojection: size={n_det}, angles={num_angles}, workers={workers}")

    def backproject(indices: np.ndarray) -> np.ndarray:
        partial = np.zeros(mc.shape, dtype=np.float64)
        for i in indices:
            cos = np.cos(angles[i])
            sin = np.sin(angles[i])
            m = center + mc * cos + nc * sin
            partial += step_angle * linear_1d(sino.data[:, i], m)
        return partial

    chunks = angle_chunks(num_angles, workers)
    if len(chunks) == 1:
        accumulated = backproject(chunks[0])
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            partials = list(executor.map(backproject, chunks))
        accumulated = np.sum(partials, axis=0)

    reconstructed = PixelGrid.zeros(n_det, n_det)
    reconstructed.data[mask] = accumulated
    return reconstructed
