"""
Plugins Package

This package contains plugins that add commands to the server.
"""

from .sample_plugin import SamplePlugin, SampleCommands, WarpCommands

__all__ = [
    "SamplePlugin",
    "SampleCommands",
    "WarpCommands",
]
