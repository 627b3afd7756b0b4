"""
labelops plugins package.

This package provides the pluggy-based plugin architecture for geometry
backends and image commands.
"""

from .hookspecs import hookspec
from .plugin_manager import find_command, get_global_plugin_manager, get_plugin_manager
from .geometry import *
from .commands import *

__all__ = [
    "GeometryPlugin",
    "SkimageGeometry",
    "CommandPlugin",
    "CopyImage",
    "MinMaxRadius",
    "hookspec",
    "find_command",
    "get_plugin_manager",
    "get_global_plugin_manager",
]
