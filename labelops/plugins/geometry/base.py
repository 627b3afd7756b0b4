"""
Base class for geometry backends.

A geometry backend supplies the two region measurements the radius analysis
depends on: the centroid of a region and the polygon along its outer contour.
Backends are pluggy plugins and are called through the hooks defined in
:mod:`labelops.plugins.hookspecs`.
"""

from __future__ import annotations

import numpy as np
import pluggy

from labelops.labeling import LabelRegion

hookimpl = pluggy.HookimplMarker("labelops")


class GeometryPlugin:
    """
    Base class for geometry backends using pluggy.

    Subclasses implement the centroid and contour hooks and decorate their
    implementations with ``@hookimpl``. Both measurements are expected to be
    pure functions of the region, so a backend instance can be shared.
    """

    def __init__(self, **kwargs):
        """
        Initialize the geometry backend.

        Args:
            **kwargs: Backend-specific parameters
        """
        self.params = kwargs

    @hookimpl
    def compute_centroid(self, region: LabelRegion) -> np.ndarray:
        """
        Compute the representative 2D point of a region.

        Args:
            region: Region of a 2D slice

        Returns:
            Array of shape (2,) in slice axis order

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement compute_centroid method"
        )

    @hookimpl
    def compute_contour(self, region: LabelRegion, closed: bool) -> np.ndarray:
        """
        Compute the ordered vertices of a region's outer contour.

        Args:
            region: Region of a 2D slice
            closed: Whether the region is treated as a closed contour

        Returns:
            Array of shape (N, 2) in slice axis order

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement compute_contour method"
        )

    @hookimpl
    def geometry_plugin_name(self) -> str:
        """
        Return the name of the geometry backend.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement geometry_plugin_name method"
        )

    @hookimpl
    def geometry_plugin_description(self) -> str:
        """
        Return a description of the geometry backend.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement geometry_plugin_description method"
        )

    @property
    def name(self) -> str:
        """Return the name of the geometry backend."""
        return self.geometry_plugin_name()

    @property
    def description(self) -> str:
        """Return a description of the geometry backend."""
        return self.geometry_plugin_description()

    def __repr__(self) -> str:
        """Return string representation of the plugin."""
        return f"{self.__class__.__name__}({', '.join(f'{k}={v}' for k, v in self.params.items())})"
