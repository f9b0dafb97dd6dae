"""
Sample Plugin

Demonstrates how to create a plugin that registers commands with the
command manager.

This plugin can be:
1. Loaded into a local CommandManager by the server
2. Registered with the distributed CommandManagerActor from a separate process

Usage (as separate process):
    python -m plugins.sample_plugin

Usage (loaded by server):
    from plugins.sample_plugin import SamplePlugin
    plugin = SamplePlugin()
    plugin.attach(manager)
    await plugin.load()
"""

import asyncio
import logging
from typing import Dict

import ray

from commands import (
    CommandOutcome,
    CommandSender,
    CommandSet,
    PlayerSender,
    Plugin,
    command,
    get_command_manager_actor,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Sample Commands
# =============================================================================


class SampleCommands(CommandSet):
    """Simple commands with no state."""

    @command("sample", aliases=["samp"], help_text="A sample command from a plugin.")
    def sample(self, sender: CommandSender) -> CommandOutcome:
        sender.send_message("This is a sample command added by a plugin!")
        return CommandOutcome.SUCCESS

    @command("ping", help_text="Simple ping/pong command.")
    async def ping(self, sender: CommandSender) -> CommandOutcome:
        sender.send_message("Pong!")
        return CommandOutcome.SUCCESS

    @command("echo", usage="<text...>")
    def echo(self, sender: CommandSender, first: str, *rest: str) -> CommandOutcome:
        sender.send_message(" ".join((first,) + rest))
        return CommandOutcome.SUCCESS


class WarpCommands(CommandSet):
    """
    Named warp points, one set per player.

    "warp" handles its own sub-token for anything without a dedicated
    command, e.g. "warp home" jumps to the point called home.
    """

    def __init__(self):
        self._points: Dict[object, Dict[str, str]] = {}

    def _player_points(self, sender: PlayerSender) -> Dict[str, str]:
        return self._points.setdefault(sender.player_id, {})

    @command("warp", usage="<label>")
    def warp(self, sender: PlayerSender, label: str) -> CommandOutcome:
        points = self._player_points(sender)
        if label.lower() not in points:
            sender.send_message(f"No warp point called '{label}'.")
            return CommandOutcome.WRONG_USAGE

        sender.send_message(f"You warp to {points[label.lower()]}.")
        return CommandOutcome.SUCCESS

    @command("warp", "set", aliases=["ws"], usage="<label> <location...>")
    def warp_set(self, sender: PlayerSender, label: str, *location: str) -> CommandOutcome:
        if not location:
            return CommandOutcome.WRONG_USAGE

        self._player_points(sender)[label.lower()] = " ".join(location)
        sender.send_message(f"Warp point '{label.lower()}' set.")
        return CommandOutcome.SUCCESS

    @command("warp", "list", aliases=["wl"])
    def warp_list(self, sender: PlayerSender) -> CommandOutcome:
        points = self._player_points(sender)
        if not points:
            sender.send_message("You have no warp points.")
        for label in sorted(points):
            sender.send_message(f"  {label}: {points[label]}")
        return CommandOutcome.SUCCESS

    @command("warp", "clear")
    def warp_clear(self, sender: PlayerSender) -> CommandOutcome:
        self._points.pop(sender.player_id, None)
        sender.send_message("Warp points cleared.")
        return CommandOutcome.SUCCESS


# =============================================================================
# Sample Plugin
# =============================================================================


class SamplePlugin(Plugin):
    """
    A sample plugin that adds a few commands.

    This demonstrates the Plugin API for:
    - Registering every command of a set
    - Registering a single command of a set by name
    """

    def __init__(self):
        super().__init__(
            name="sample",
            version="1.0.0",
            author="Command System Team",
            description="A sample plugin demonstrating the Plugin API",
        )
        self.warps = WarpCommands()

    async def on_load(self) -> None:
        """Registers all commands with the command manager."""
        logger.info(f"Loading {self.name}...")
        self.register_commands(SampleCommands())
        self.register_commands(self.warps)
        logger.info(f"{self.name} loaded successfully!")

    async def on_unload(self) -> None:
        """Called when the plugin is unloaded."""
        logger.info(f"Unloading {self.name}...")


# =============================================================================
# Standalone Execution
# =============================================================================


async def main():
    """Register the sample commands with the distributed command manager."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Connect to existing Ray cluster
    if not ray.is_initialized():
        ray.init(address="auto")

    actor = get_command_manager_actor()
    count = await actor.register_command_set.remote(
        "sample", "plugins.sample_plugin", "SampleCommands"
    )
    stats = await actor.get_stats.remote()
    print(f"Registered {count} commands. Command manager stats: {stats}")

    result = await actor.execute_line.remote("console", "ping")
    print(f"ping -> {result.outcome.value}: {result.messages}")


if __name__ == "__main__":
    asyncio.run(main())
