"""
Plugin Base Class

Provides the owning unit for commands. A plugin is attached to a
CommandManager, registers its command sets in on_load(), and has every
command it owns removed again when it is unloaded.

Usage:
    class WarpPlugin(Plugin):
        async def on_load(self) -> None:
            self.register_commands(WarpCommands())

        async def on_unload(self) -> None:
            pass  # cleanup if needed

    plugin = WarpPlugin("warp")
    plugin.attach(manager)
    await plugin.load()
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .descriptor import CommandSet

if TYPE_CHECKING:
    from .manager import CommandManager

logger = logging.getLogger(__name__)


@dataclass
class PluginInfo:
    """Metadata about a plugin."""

    name: str
    version: str = "1.0.0"
    author: str = ""
    description: str = ""


class Plugin(ABC):
    """
    Base class for plugins that contribute commands.

    The plugin id (lowercased name) is the token used for its plugin
    prefixed command names.
    """

    def __init__(self, name: str, version: str = "1.0.0", author: str = "", description: str = ""):
        if not name or name.split() != [name]:
            raise ValueError(f"Invalid plugin name: {name!r}")

        self.info = PluginInfo(
            name=name,
            version=version,
            author=author,
            description=description,
        )
        self._manager: Optional["CommandManager"] = None
        self._loaded = False

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def id(self) -> str:
        return self.info.name.lower()

    @property
    def is_attached(self) -> bool:
        return self._manager is not None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def manager(self) -> "CommandManager":
        if self._manager is None:
            raise RuntimeError(f"Plugin {self.name} is not attached to a command manager")
        return self._manager

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def attach(self, manager: "CommandManager") -> None:
        """Attach the plugin to the manager its commands will live in."""
        if self._manager is manager:
            logger.warning(f"Plugin {self.name} already attached")
            return
        if self._manager is not None:
            raise RuntimeError(f"Plugin {self.name} is attached to another command manager")

        self._manager = manager
        logger.info(f"Plugin {self.name} attached")

    def detach(self) -> None:
        """Detach from the manager. The plugin must be unloaded first."""
        if self._loaded:
            raise RuntimeError(f"Plugin {self.name} must be unloaded before detaching")

        self._manager = None
        logger.info(f"Plugin {self.name} detached")

    async def load(self) -> None:
        """Load the plugin, calling on_load()."""
        if self._manager is None:
            raise RuntimeError(f"Plugin {self.name} must be attached first")

        if self._loaded:
            logger.warning(f"Plugin {self.name} already loaded")
            return

        await self.on_load()
        self._loaded = True
        logger.info(f"Plugin {self.name} loaded")

    async def unload(self) -> None:
        """Unload the plugin, calling on_unload() and dropping its commands."""
        if not self._loaded:
            return

        await self.on_unload()
        removed = self.manager.unregister_plugin(self)
        self._loaded = False
        logger.info(f"Plugin {self.name} unloaded ({removed} command names removed)")

    @abstractmethod
    async def on_load(self) -> None:
        """
        Called when the plugin is loaded.

        Override this to register your commands:
            self.register_commands(MyCommands())
        """
        pass

    async def on_unload(self) -> None:
        """
        Called when the plugin is unloaded, before its commands are removed.

        Override this to clean up if needed.
        """
        pass

    # =========================================================================
    # Command Registration
    # =========================================================================

    def register_commands(self, command_set: CommandSet, *name: str) -> int:
        """
        Register commands from a command set.

        Args:
            command_set: Provider of the commands
            name: If given, only the command with exactly this name

        Returns:
            Number of commands registered
        """
        if name:
            count = 1 if self.manager.register_set(self, command_set, *name) else 0
        else:
            count = self.manager.register_all(self, command_set)

        logger.info(f"Plugin {self.name} registered {count} commands")
        return count

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self.info.version}>"
