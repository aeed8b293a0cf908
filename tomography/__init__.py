"""
Tomography package for parallel-beam projection and reconstruction.

Contains the Radon transform, sinogram filters, backprojection and the
interpolation primitives they share.
"""

from .interpolation import floor, ceil, round_half_up, bilinear_2d, linear_1d
from .geometry import projection_angles, field_of_view_mask
from .filters import FilterType, generate_ram_lak, generate_cosine, generate_filter
from .spectral import (
    SpectralTransform,
    apply_filter,
    apply_ram_lak_filter,
    apply_cosine_filter,
)
from .spatial import apply_laplacian_filter
from .projector import transform_radon
from .backprojector import inverse_radon
from .pipeline import FilteredBackProjection, ReconstructionResult

__all__ = [
    # Primitives
    "floor",
    "ceil",
    "round_half_up",
    "bilinear_2d",
    "linear_1d",
    "projection_angles",
    "field_of_view_mask",
    # Filters
    "FilterType",
    "generate_ram_lak",
    "generate_cosine",
    "generate_filter",
    "SpectralTransform",
    "apply_filter",
    "apply_ram_lak_filter",
    "apply_cosine_filter",
    "apply_laplacian_filter",
    # Projection
    "transform_radon",
    "inverse_radon",
    "FilteredBackProjection",
    "ReconstructionResult",
]
