"""
Filtered Backprojection Pipeline

Runs image -> sinogram -> optional filter -> backprojection with stage
timings and progress reporting.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
import logging
import time

from core.base import PixelGrid, Sinogram
from .backprojector import inverse_radon
from .filters import FilterType, generate_filter
from .projector import transform_radon
from .spatial import apply_laplacian_filter
from .spectral import apply_filter


@dataclass
class ReconstructionResult:
    """
    Outputs of a pipeline run.

    Attributes:
        sinogram: Raw forward projection
        filtered: Sinogram after the configured filter
        image: Backprojected image
        timings: Seconds spent per stage
    """
    sinogram: Sinogram
    filtered: Sinogram
    image: PixelGrid
    timings: Dict[str, float] = field(default_factory=dict)


class FilteredBackProjection:
    """
    Forward projection followed by (filtered) backprojection.

    With ``FilterType.NONE`` this is plain backprojection; the spectral
    filters give filtered backprojection.
    """

    def __init__(
        self,
        num_angles: int = 180,
        filter_type: FilterType = FilterType.RAM_LAK,
        workers: int = 1
    ):
        """
        Initialize the pipeline.

        Args:
            num_angles: Number of projection angles over a half turn
            filter_type: Sinogram filter applied before backprojection
            workers: Threads used by the projector and backprojector
        """
        self.num_angles = num_angles
        self.filter_type = FilterType(filter_type)
        self.workers = workers

    def project(self, image) -> Sinogram:
        return transform_radon(image, self.num_angles, workers=self.workers)

    def filter(self, sinogram: Sinogram) -> Sinogram:
        """Apply the configured filter, returning a new sinogram."""
        if self.filter_type is FilterType.NONE:
            return sinogram.copy()
        if self.filter_type is FilterType.LAPLACIAN:
            return apply_laplacian_filter(sinogram)
        weights = generate_filter(self.filter_type, sinogram.num_detectors)
        return apply_filter(sinogram, weights)

    def backproject(self, sinogram: Sinogram) -> PixelGrid:
        return inverse_radon(sinogram, workers=self.workers)

    def reconstruct(
        self,
        image,
        progress_callback: Optional[Callable[[float], None]] = None
    ) -> ReconstructionResult:
        """
        Run the full pipeline on one image.

        Args:
            image: Square PixelGrid or 2D array
            progress_callback: Progress callback (0.0 to 1.0)

        Returns:
            ReconstructionResult with every intermediate
        """
        timings = {}

        start = time.perf_counter()
        sinogram = self.project(image)
        timings['project'] = time.perf_counter() - start
        if progress_callback:
            progress_callback(1 / 3)

        start = time.perf_counter()
        filtered = self.filter(sinogram)
        timings['filter'] = time.perf_counter() - start
        if progress_callback:
            progress_callback(2 / 3)

        start = time.perf_counter()
        reconstructed = self.backproject(filtered)
        timings['backproject'] = time.perf_counter() - start
        if progress_callback:
            progress_callback(1.0)

        logging.info(
            f"Reconstruction ({self.filter_type.value}, {self.num_angles} angles) "
            f"completed in {sum(timings.values()):.2f}s: "
            f"project {timings['project']:.2f}s, "
            f"filter {timings['filter']:.2f}s, "
            f"backproject {timings['backproject']:.2f}s"
        )

        return ReconstructionResult(
            sinogram=sinogram,
            filtered=filtered,
            image=reconstructed,
            timings=timings
        )
