"""
Base class for command plugins.

A command turns an input image into an output, and announces its name,
description and menu path through pluggy hooks so that registered commands
can be listed and looked up.
"""

from __future__ import annotations

import pluggy

hookimpl = pluggy.HookimplMarker("labelops")


class CommandPlugin:
    """
    Base class for command plugins using pluggy.

    Subclasses implement ``run`` along with the metadata hooks. Command
    parameters are passed as keyword arguments to the constructor and kept in
    ``params``.
    """

    def __init__(self, **kwargs):
        """
        Initialize the command plugin.

        Args:
            **kwargs: Command-specific parameters
        """
        self.params = kwargs

    def run(self, *args, **kwargs):
        """
        Execute the command.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement run method")

    @hookimpl
    def command_name(self) -> str:
        """
        Return the name of the command.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement command_name method"
        )

    @hookimpl
    def command_description(self) -> str:
        """
        Return a description of the command.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement command_description method"
        )

    @hookimpl
    def command_menu_path(self) -> str:
        """
        Return the menu path of the command.

        Raises:
            NotImplementedError: If the method is not implemented by the subclass
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement command_menu_path method"
        )

    @property
    def name(self) -> str:
        """Return the name of the command."""
        return self.command_name()

    @property
    def description(self) -> str:
        """Return a description of the command."""
        return self.command_description()

    @property
    def menu_path(self) -> str:
        """Return the menu path of the command."""
        return self.command_menu_path()

    def __repr__(self) -> str:
        """Return string representation of the plugin."""
        return f"{self.__class__.__name__}({', '.join(f'{k}={v}' for k, v in self.params.items())})"
