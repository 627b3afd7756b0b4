"""
Command plugins for labelops.

Each command takes an image or label map and produces a derived output.
"""

from .base import CommandPlugin
from .copy_image import CopyImage
from .min_max_radius import MinMaxRadius

__all__ = [
    "CommandPlugin",
    "CopyImage",
    "MinMaxRadius",
]
