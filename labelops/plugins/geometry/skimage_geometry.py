"""
Geometry backend built on scikit-image and scipy.

Centroids are the center of mass of the region mask. Contours are traced with
marching squares (``skimage.measure.find_contours``) at the half-level between
region and background, so vertices lie on pixel edges.
"""

from __future__ import annotations

import numpy as np
from scipy.ndimage import center_of_mass
from skimage.measure import approximate_polygon, find_contours

from labelops.labeling import LabelRegion
from labelops.logging import get_logger

from .base import GeometryPlugin, hookimpl

logger = get_logger(__name__)


def polygon_area(vertices: np.ndarray) -> float:
    """Absolute area enclosed by a polygon (shoelace formula)."""
    if len(vertices) < 3:
        return 0.0
    x = vertices[:, 0]
    y = vertices[:, 1]
    return 0.5 * abs(float(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1))))


class SkimageGeometry(GeometryPlugin):
    """
    Default geometry backend.

    When several contours are found for a region (holes, or disconnected parts
    sharing a label) the one enclosing the largest area is taken as the outer
    boundary.

    Parameters:
        level: Iso-value at which contours are traced (default: 0.5)
        tolerance: Maximum distance for polygon simplification with
            ``approximate_polygon``. 0 keeps every vertex (default: 0.0)
    """

    def __init__(self, level: float = 0.5, tolerance: float = 0.0, **kwargs):
        """
        Initialize the scikit-image geometry backend.

        Args:
            level: Iso-value at which contours are traced
            tolerance: Polygon simplification tolerance, 0 disables simplification
            **kwargs: Additional parameters passed to parent class
        """
        super().__init__(level=level, tolerance=tolerance, **kwargs)
        if not 0.0 < level < 1.0:
            raise ValueError(f"level must lie strictly between 0 and 1, got {level}")
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        self.level = level
        self.tolerance = tolerance

    @hookimpl
    def compute_centroid(self, region: LabelRegion) -> np.ndarray:
        """
        Center of mass of the region's cells.

        Args:
            region: Region of a 2D slice

        Returns:
            Array of shape (2,); NaN for an empty region
        """
        if region.size == 0:
            return np.full(2, np.nan)
        return np.asarray(center_of_mass(region.mask), dtype=np.float64)

    @hookimpl
    def compute_contour(self, region: LabelRegion, closed: bool) -> np.ndarray:
        """
        Outer contour of the region as an ordered vertex array.

        With ``closed=True`` the mask is padded with background so contours
        touching the slice border still close; the repeated closing vertex is
        dropped from the result.

        Args:
            region: Region of a 2D slice
            closed: Whether the region is treated as a closed contour

        Returns:
            Array of shape (N, 2) in slice coordinates; (0, 2) for an empty region
        """
        mask = np.asarray(region.mask, dtype=np.float64)
        if not mask.any():
            return np.empty((0, 2), dtype=np.float64)

        offset = 0
        if closed:
            mask = np.pad(mask, 1)
            offset = 1

        contours = find_contours(mask, level=self.level)
        if not contours:
            return np.empty((0, 2), dtype=np.float64)

        outer = max(contours, key=polygon_area) - offset
        if self.tolerance > 0:
            outer = approximate_polygon(outer, tolerance=self.tolerance)

        if len(outer) > 1 and np.array_equal(outer[0], outer[-1]):
            outer = outer[:-1]

        logger.debug(
            "Region %r: %d contour(s), outer contour has %d vertices",
            region.label,
            len(contours),
            len(outer),
        )
        return np.ascontiguousarray(outer, dtype=np.float64)

    @hookimpl
    def geometry_plugin_name(self) -> str:
        """Return the name of the geometry backend."""
        return "scikit-image Geometry"

    @hookimpl
    def geometry_plugin_description(self) -> str:
        """Return a description of the geometry backend."""
        return (
            "Centroid as the center of mass of the region mask and outer contour "
            f"traced by marching squares at level {self.level}"
            + (
                f", simplified with tolerance {self.tolerance}."
                if self.tolerance > 0
                else "."
            )
        )
