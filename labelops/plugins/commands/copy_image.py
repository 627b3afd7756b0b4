"""
Pixel-wise image copy command.
"""

from __future__ import annotations

from typing import Any

import dask.array as da
import numpy as np

from labelops.logging import get_logger

from .base import CommandPlugin, hookimpl

logger = get_logger(__name__)


class CopyImage(CommandPlugin):
    """
    Creates a pixel-wise copy of an image.

    The copy has the shape and dtype of the input and shares no memory with
    it. Dask input stays lazy: every block is copied when computed.
    """

    def run(self, image: Any) -> Any:
        """
        Copy an image.

        Args:
            image: numpy or dask array

        Returns:
            New array of the same kind, shape and dtype as the input
        """
        logger.debug("Copying image with shape %s and dtype %s", image.shape, image.dtype)
        if isinstance(image, da.Array):
            return image.map_blocks(np.copy, dtype=image.dtype)
        return np.array(image, copy=True)

    @hookimpl
    def command_name(self) -> str:
        """Return the name of the command."""
        return "Copy Image"

    @hookimpl
    def command_description(self) -> str:
        """Return a description of the command."""
        return "Copies an image pixel-wise"

    @hookimpl
    def command_menu_path(self) -> str:
        """Return the menu path of the command."""
        return "DeveloperPlugins>Copy Image"
