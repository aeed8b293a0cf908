"""
Tomography Configuration

Contains constants and default settings for projection and reconstruction.
"""

from dataclasses import dataclass

# Import FilterType from the canonical location
from tomography.filters import FilterType


@dataclass
class ReconstructionConfig:
    """Configuration for projection and reconstruction."""
    num_angles: int = 180  # Projection angles over a half turn
    filter_type: FilterType = FilterType.RAM_LAK  # Sinogram filter before backprojection
    workers: int = 1  # Threads for projection and backprojection


@dataclass
class PhantomConfig:
    """Configuration for the synthetic input image."""
    size: int = 128  # Image edge length in pixels
    kind: str = "shepp_logan"  # "shepp_logan" or "disc"
    disc_radius_fraction: float = 0.25  # Disc radius as a fraction of size


# Default configurations
DEFAULT_RECONSTRUCTION = ReconstructionConfig()
DEFAULT_PHANTOM = PhantomConfig()
