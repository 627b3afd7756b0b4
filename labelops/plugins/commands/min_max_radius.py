"""
Min/max radius command.

Slices a label map into two-dimensional slices and computes, for every region
of every slice, the minimum and maximum distance from its centroid to the
vertices of its contour.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import numpy as np

from labelops.labeling import parse_dim_indices

from ..geometry import GeometryPlugin
from .base import CommandPlugin, hookimpl


class MinMaxRadius(CommandPlugin):
    """
    Computes the min and max radius from centroid to contour.

    Parameters:
        selected_dims: The two axes spanning each slice, as a list of integers
            or a comma-separated string such as "0,1"
        geometry: Geometry backend for centroid and contour computation
            (default: SkimageGeometry)
    """

    def __init__(
        self,
        selected_dims: Union[str, Sequence[int]] = "0,1",
        geometry: Optional[GeometryPlugin] = None,
        **kwargs,
    ):
        """
        Initialize the min/max radius command.

        Args:
            selected_dims: Slice axes as integers or comma-separated text
            geometry: Optional geometry backend
            **kwargs: Additional parameters passed to parent class

        Raises:
            InvalidArgumentError: If ``selected_dims`` text cannot be parsed
        """
        super().__init__(selected_dims=selected_dims, **kwargs)
        self.selected_dims: List[int] = parse_dim_indices(selected_dims)
        self.geometry = geometry

    def run(self, labels: Any) -> np.ndarray:
        """
        Compute min/max radii for every region of every slice.

        Args:
            labels: LabelMap, or integer label image (numpy or dask)

        Returns:
            Flat float64 array ``[min_1, max_1, min_2, max_2, ...]``

        Raises:
            InvalidArgumentError: If the selected dimensions do not yield
                two-dimensional slices
        """
        from labelops.analysis import RegionRadiusAnalyzer

        analyzer = RegionRadiusAnalyzer(geometry=self.geometry)
        return analyzer.compute(labels, self.selected_dims)

    @hookimpl
    def command_name(self) -> str:
        """Return the name of the command."""
        return "Min Max"

    @hookimpl
    def command_description(self) -> str:
        """Return a description of the command."""
        return "Computes the min and max radius from centroid to contour."

    @hookimpl
    def command_menu_path(self) -> str:
        """Return the menu path of the command."""
        return "DeveloperPlugins>Min Max"
