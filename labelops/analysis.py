"""
Region radius analysis for label maps.

This module computes, for every labeled region of every two-dimensional slice
of a label map, the minimum and maximum Euclidean distance from the region's
centroid to the vertices of its boundary polygon.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .labeling import LabelMap, LabelRegion, normalize_selected_dims
from .logging import get_logger
from .plugins.geometry import GeometryPlugin, SkimageGeometry
from .plugins.plugin_manager import get_plugin_manager

logger = get_logger(__name__)


class RegionRadiusAnalyzer:
    """
    Computes min/max centroid-to-contour radii per region.

    The geometry backend is registered with a pluggy plugin manager the first
    time a region is measured; the resolved centroid and contour hooks are then
    reused for every following region.

    Attributes:
        geometry: Geometry backend supplying centroids and contours
    """

    def __init__(self, geometry: Optional[GeometryPlugin] = None):
        """
        Initialize the analyzer.

        Args:
            geometry: Geometry backend. Defaults to SkimageGeometry.
        """
        self.geometry = geometry if geometry is not None else SkimageGeometry()
        self._centroid = None
        self._contour = None

    def _init_helpers(self, region: LabelRegion) -> None:
        pm = get_plugin_manager()
        pm.register(self.geometry)
        self._centroid = pm.hook.compute_centroid
        self._contour = pm.hook.compute_contour
        logger.debug(
            "Initialized geometry helpers from %s on region %r at slice %s",
            self.geometry,
            region.label,
            region.position,
        )

    def compute(self, labels: Any, selected_dims: Sequence[int]) -> np.ndarray:
        """
        Compute min and max radius for every region of every 2D slice.

        Args:
            labels: LabelMap, or an integer label image (numpy or dask array)
                where 0 is background
            selected_dims: Exactly two axis indices spanning each slice

        Returns:
            Flat float64 array ``[min_1, max_1, min_2, max_2, ...]`` in slice
            order, then region order within each slice

        Raises:
            InvalidArgumentError: If the selected dimensions do not yield
                two-dimensional slices. Raised before any region is measured.
        """
        if isinstance(labels, LabelMap):
            dims = normalize_selected_dims(selected_dims, labels.ndim)
            label_map = labels
        else:
            dims = normalize_selected_dims(selected_dims, np.ndim(labels))
            label_map = LabelMap.from_label_image(labels)

        radii: List[float] = []
        n_slices = 0
        for label_slice in label_map.iter_slices(dims):
            n_slices += 1
            for region in label_slice.regions():
                if self._centroid is None or self._contour is None:
                    self._init_helpers(region)
                radii.extend(self.compute_min_max_radius(region))

        logger.info(
            "Computed min/max radii for %d regions across %d slices",
            len(radii) // 2,
            n_slices,
        )
        return np.asarray(radii, dtype=np.float64)

    def compute_min_max_radius(self, region: LabelRegion) -> Tuple[float, float]:
        """
        Compute the min and max radius for one region.

        A contour without vertices yields ``(sys.float_info.max, 0.0)``.

        Args:
            region: Region of a 2D slice

        Returns:
            Tuple of (min_radius, max_radius)
        """
        if self._centroid is None or self._contour is None:
            self._init_helpers(region)

        centroid = np.asarray(self._centroid(region=region), dtype=np.float64)
        polygon = self._contour(region=region, closed=True)
        vertices = np.asarray(polygon, dtype=np.float64).reshape(-1, 2)

        min_dist = sys.float_info.max
        max_dist = 0.0
        if len(vertices) == 0:
            logger.debug(
                "Region %r at slice %s has no contour vertices", region.label, region.position
            )
            return min_dist, max_dist

        dists = np.hypot(centroid[0] - vertices[:, 0], centroid[1] - vertices[:, 1])
        min_dist = min(min_dist, float(dists.min()))
        max_dist = max(max_dist, float(dists.max()))
        return min_dist, max_dist


def compute_min_max_radii(
    labels: Any,
    selected_dims: Sequence[int],
    geometry: Optional[GeometryPlugin] = None,
) -> np.ndarray:
    """
    Compute per-region min/max centroid-to-contour radii of a label map.

    The label map is sliced into two-dimensional slices over ``selected_dims``;
    every other axis is iterated over. Each region of each slice contributes
    two values to the result.

    Args:
        labels: LabelMap, or an integer label image (numpy or dask array)
            where 0 is background
        selected_dims: Exactly two axis indices spanning each slice
        geometry: Optional geometry backend (default: SkimageGeometry)

    Returns:
        Flat float64 array ``[min_1, max_1, min_2, max_2, ...]``

    Raises:
        InvalidArgumentError: If ``selected_dims`` does not name exactly two
            distinct axes of the label map

    Examples:
        >>> import numpy as np
        >>> from labelops import compute_min_max_radii
        >>>
        >>> labels = np.zeros((2, 64, 64), dtype=np.uint16)
        >>> labels[:, 10:30, 10:30] = 1
        >>> radii = compute_min_max_radii(labels, [1, 2])
        >>> radii.reshape(-1, 2)  # one (min, max) row per region and slice
    """
    return RegionRadiusAnalyzer(geometry=geometry).compute(labels, selected_dims)
