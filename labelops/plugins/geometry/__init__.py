"""
Geometry backends for labelops.

This module provides the plugin architecture for the centroid and contour
measurements used by the region radius analysis.
"""

from .base import GeometryPlugin
from .skimage_geometry import SkimageGeometry

__all__ = [
    "GeometryPlugin",
    "SkimageGeometry",
]
