"""
Plugin hook specifications for labelops plugins.

This module defines the hook specifications that plugins must implement
using the pluggy framework.
"""

from __future__ import annotations

import numpy as np
import pluggy

hookspec = pluggy.HookspecMarker("labelops")


@hookspec
def geometry_plugin_name() -> str:
    """
    Return the name of the geometry backend.

    Returns:
        String name of the backend
    """


@hookspec
def geometry_plugin_description() -> str:
    """
    Return a description of the geometry backend.

    Returns:
        String description of the backend
    """


@hookspec(firstresult=True)
def compute_centroid(region) -> np.ndarray:
    """
    Compute the representative 2D point of a region.

    Args:
        region: LabelRegion of a 2D slice

    Returns:
        Array of shape (2,) in slice axis order
    """


@hookspec(firstresult=True)
def compute_contour(region, closed: bool) -> np.ndarray:
    """
    Compute the ordered boundary vertices of a region's outer contour.

    Args:
        region: LabelRegion of a 2D slice
        closed: Whether the region is treated as a closed contour

    Returns:
        Array of shape (N, 2) in slice axis order. N may be 0.
    """


@hookspec
def command_name() -> str:
    """
    Return the name of the command.

    Returns:
        String name of the command
    """


@hookspec
def command_description() -> str:
    """
    Return a description of the command.

    Returns:
        String description of the command
    """


@hookspec
def command_menu_path() -> str:
    """
    Return the menu path the command is registered under.

    Returns:
        Menu path with levels separated by '>', e.g. "DeveloperPlugins>Min Max"
    """
