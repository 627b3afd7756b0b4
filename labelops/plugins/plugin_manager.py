"""
Plugin manager for labelops plugins.

This module provides the plugin manager that discovers and manages plugins
using the pluggy framework.
"""

from __future__ import annotations

import pluggy

from . import hookspecs


def get_plugin_manager() -> pluggy.PluginManager:
    """
    Create a plugin manager configured with the labelops hook specifications.

    Returns:
        PluginManager instance configured for labelops plugins
    """
    pm = pluggy.PluginManager("labelops")
    pm.add_hookspecs(hookspecs)
    return pm


# Global plugin manager instance
_plugin_manager = None


def get_global_plugin_manager() -> pluggy.PluginManager:
    """
    Get the global plugin manager instance.

    Returns:
        Global PluginManager instance
    """
    global _plugin_manager
    if _plugin_manager is None:
        _plugin_manager = get_plugin_manager()
    return _plugin_manager


def find_command(pm: pluggy.PluginManager, menu_path: str):
    """
    Look up a registered command plugin by its menu path.

    Args:
        pm: Plugin manager the command was registered with
        menu_path: Menu path of the command, e.g. "DeveloperPlugins>Copy Image"

    Returns:
        The registered command plugin

    Raises:
        KeyError: If no registered command uses the menu path
    """
    for impl in pm.hook.command_menu_path.get_hookimpls():
        if impl.function() == menu_path:
            return impl.plugin
    raise KeyError(f"No command registered under menu path '{menu_path}'")
