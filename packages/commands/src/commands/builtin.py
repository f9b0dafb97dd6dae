"""
Built-in Commands

Commands every server gets, owned by the "server" plugin.
"""

from typing import List

from .descriptor import CommandSet, command
from .outcome import CommandOutcome
from .plugin import Plugin
from .sender import CommandSender


class HelpCommands(CommandSet):
    """The /help command the invalid-command message points at."""

    def __init__(self, manager):
        self._manager = manager

    @command("help", usage="[command...]", help_text="List commands or show usage for one")
    def help(self, sender: CommandSender, *topic: str) -> CommandOutcome:
        for line in self._help_lines(list(topic)):
            sender.send_message(line)
        return CommandOutcome.SUCCESS

    def _help_lines(self, topic: List[str]) -> List[str]:
        if not topic:
            lines = ["Available commands:"]
            for info in self._manager.list_commands():
                if info.is_alias or info.is_prefixed:
                    continue
                lines.append(f"  /{info.name} {info.usage}".rstrip())
            lines.append("Type '/help <command>' for details on a specific command.")
            return lines

        match = self._manager.resolve(topic)
        if match is None:
            return [f"No help available for: {' '.join(topic)}"]

        name, cmd = match
        lines = [f"Usage: /{name} {cmd.usage}".rstrip()]
        aliases = []
        for other in self._manager.names():
            entry = self._manager.get(other)
            if entry is not None and entry.is_alias and entry.executor is cmd.executor:
                aliases.append(str(other))
        if aliases:
            lines.append(f"Aliases: {', '.join(sorted(aliases))}")
        return lines


class ServerPlugin(Plugin):
    """Owner of the built-in commands."""

    def __init__(self):
        super().__init__(
            name="server",
            author="Command System",
            description="Built-in server commands",
        )

    async def on_load(self) -> None:
        self.register_commands(HelpCommands(self.manager))
