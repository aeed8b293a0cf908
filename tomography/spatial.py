"""
Spatial Laplacian filter along the detector axis of a sinogram.
"""

import numpy as np

from core.base import Sinogram, as_sinogram
from core.errors import InvalidDimensionError


def apply_laplacian_filter(sinogram) -> Sinogram:
    """
    Second-difference filter applied to each projection.

    Interior bins use [1, -2, 1]; the first and last bins use the one-sided
    stencil -2 * s[edge] + 2 * s[neighbor].
    """
    sino = as_sinogram(sinogram)
    s = sino.data
    size = sino.num_detectors
    if size < 2:
        raise InvalidDimensionError(
            f"Laplacian filter needs at least 2 detector bins, got {size}"
        )

    out = np.empty_like(s)
    out[1:-1] = s[:-2] - 2.0 * s[1:-1] + s[2:]
    out[0] = -2.0 * s[0] + 2.0 * s[1]
    out[-1] = -2.0 * s[-1] + 2.0 * s[-2]
    return Sinogram(out)
