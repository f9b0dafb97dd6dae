"""
Command Manager

Central registry and dispatcher for plugin commands.

Every accepted command is reachable under three kinds of name:
- the plugin prefixed name ("myplugin warp set"), always won by the
  latest registration so a plugin can always reach its own commands;
- the bare name ("warp set");
- one name per alias ("warp ws"), which never evicts a bare name.

Dispatch walks from the longest candidate name to its parents, so
"warp set home north" reaches "warp set" with ["home", "north"] as
arguments when no deeper command is registered.
"""

import inspect
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import CommandConfig, get_command_config
from .descriptor import CommandDescriptor, CommandSet, validate_descriptor
from .executor import CommandExecutor, MethodCommandExecutor
from .models import CommandInfo
from .name import CommandName, plugin_id_of
from .outcome import CommandOutcome
from .parser import tokenize
from .sender import CommandSender

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredCommand:
    """A registry entry. Replaced, never mutated."""

    plugin: Any
    executor: CommandExecutor
    plugin_id: str = ""
    is_alias: bool = False
    is_prefixed: bool = False
    usage: str = ""


class CommandManager:
    """
    Registry of commands keyed by CommandName.

    The table is guarded by a lock: registrations and lookups may come
    from different threads. Handlers run outside the lock.
    """

    def __init__(self, config: Optional[CommandConfig] = None):
        self._config = config or get_command_config()
        self._commands: Dict[CommandName, RegisteredCommand] = {}
        self._lock = threading.RLock()

    @property
    def config(self) -> CommandConfig:
        return self._config

    # =========================================================================
    # Registration
    # =========================================================================

    def register_set(self, plugin: Any, command_set: CommandSet, *name: str) -> bool:
        """
        Register the single command of a set whose name matches exactly.

        Returns True if a matching valid command was registered.
        """
        wanted = tuple(token.lower() for token in name)
        for descriptor in command_set.command_descriptors():
            if not self._validate(descriptor):
                continue
            if tuple(token.lower() for token in descriptor.name) == wanted:
                return self._register_descriptor(plugin, descriptor)
        return False

    def register_all(self, plugin: Any, command_set: CommandSet) -> int:
        """Register every valid command of a set. Returns the count accepted."""
        count = 0
        for descriptor in command_set.command_descriptors():
            if self._validate(descriptor) and self._register_descriptor(plugin, descriptor):
                count += 1
        return count

    def register(
        self, plugin: Any, name: CommandName, executor: CommandExecutor, *aliases: str
    ) -> List[CommandName]:
        """
        Register an executor under its prefixed name, bare name and aliases.

        The plugin may be a Plugin or a plain plugin id. Raises ValueError,
        leaving the table untouched, if a derived name is malformed.

        Returns the names that were actually inserted.
        """
        owner = plugin_id_of(plugin)
        prefixed = name.plugin_prefixed(owner)
        alias_names = [name.alias(alias_part) for alias_part in aliases]

        registered = []
        with self._lock:
            if self._register_name(plugin, owner, prefixed, executor, is_prefixed=True):
                registered.append(prefixed)

            if self._register_name(plugin, owner, name, executor):
                registered.append(name)

            for alias in alias_names:
                if self._register_name(plugin, owner, alias, executor, is_alias=True):
                    registered.append(alias)

        return registered

    def _validate(self, descriptor: CommandDescriptor) -> bool:
        problem = validate_descriptor(descriptor)
        if problem is not None:
            logger.warning(f"Command method `{descriptor.handler_name}` {problem}, skipping")
            return False
        return True

    def _register_descriptor(self, plugin: Any, descriptor: CommandDescriptor) -> bool:
        executor = MethodCommandExecutor(descriptor)
        try:
            name = CommandName(descriptor.name)
            self.register(plugin, name, executor, *descriptor.aliases)
        except ValueError as e:
            logger.warning(
                f"Command method `{descriptor.handler_name}` has an invalid name ({e}), skipping"
            )
            return False
        return True

    def _register_name(
        self,
        plugin: Any,
        owner: str,
        name: CommandName,
        executor: CommandExecutor,
        is_prefixed: bool = False,
        is_alias: bool = False,
    ) -> bool:
        existing = self._commands.get(name)
        if existing is not None:
            if is_prefixed:
                logger.warning(f"Overriding existing command `{name}` with plugin prefixed one")
            elif is_alias or not existing.is_alias:
                logger.warning(f"Tried to register command `{name}` which is already registered")
                return False
            else:
                logger.warning(f"Replacing aliased command with main command `{name}`")

        self._commands[name] = RegisteredCommand(
            plugin=plugin,
            executor=executor,
            plugin_id=owner,
            is_alias=is_alias,
            is_prefixed=is_prefixed,
            usage=executor.usage,
        )
        logger.debug(f"Registered command: {name}")
        return True

    def unregister(self, name: CommandName) -> bool:
        """Remove a single name. Returns True if found."""
        with self._lock:
            return self._commands.pop(name, None) is not None

    def unregister_plugin(self, plugin: Any) -> int:
        """Remove every name owned by a plugin or plugin id. Returns the count removed."""
        owner = plugin_id_of(plugin)
        with self._lock:
            owned = [name for name, cmd in self._commands.items() if cmd.plugin_id == owner]
            for name in owned:
                del self._commands[name]

        if owned:
            logger.info(f"Unregistered {len(owned)} commands of plugin {owner}")
        return len(owned)

    def clear(self) -> None:
        """Remove all commands."""
        with self._lock:
            self._commands.clear()

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, name: CommandName) -> Optional[RegisteredCommand]:
        with self._lock:
            return self._commands.get(name)

    def resolve(self, tokens: Sequence[str]) -> Optional[Tuple[CommandName, RegisteredCommand]]:
        """Find the longest registered name that prefixes the tokens."""
        if not tokens:
            return None

        name = CommandName(tokens)
        while True:
            cmd = self.get(name)
            if cmd is not None:
                return name, cmd

            if not name.has_parent():
                return None
            name = name.parent()

    def names(self) -> List[CommandName]:
        with self._lock:
            return list(self._commands)

    def list_commands(self) -> List[CommandInfo]:
        """Describe every registered name, sorted by name."""
        with self._lock:
            entries = list(self._commands.items())

        return sorted(
            (
                CommandInfo(
                    name=str(name),
                    plugin=cmd.plugin_id,
                    is_alias=cmd.is_alias,
                    is_prefixed=cmd.is_prefixed,
                    usage=cmd.usage,
                )
                for name, cmd in entries
            ),
            key=lambda info: info.name,
        )

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._commands

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def execute_line(self, sender: CommandSender, line: str) -> CommandOutcome:
        """Dispatch a raw command line."""
        return await self.execute(sender, *tokenize(line))

    async def execute(self, sender: CommandSender, *tokens: str) -> CommandOutcome:
        """Dispatch tokens, falling back to shorter registered names."""
        match = self.resolve(tokens)
        if match is None:
            sender.send_message(self._config.invalid_message)
            return CommandOutcome.NOT_HANDLED

        name, cmd = match
        return await self._do_execute(sender, name, cmd, tokens[name.size():])

    async def execute_name(
        self, sender: CommandSender, name: CommandName, *args: str
    ) -> CommandOutcome:
        """Dispatch to an exact name. Arguments must be non-empty strings."""
        for arg in args:
            if arg is None:
                raise TypeError(f"Null argument passed to command `{name}`")
            if not arg:
                raise ValueError(f"Empty argument passed to command `{name}`")

        cmd = self.get(name)
        if cmd is None:
            sender.send_message(self._config.invalid_message)
            return CommandOutcome.NOT_HANDLED

        return await self._do_execute(sender, name, cmd, tuple(args))

    async def _do_execute(
        self,
        sender: CommandSender,
        name: CommandName,
        cmd: RegisteredCommand,
        args: Sequence[str],
    ) -> CommandOutcome:
        logger.info(f"Handling command `{name}` from {sender.name}")
        try:
            outcome = cmd.executor.execute(sender, args)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:
            outcome = CommandOutcome.ERROR
            logger.warning(
                f"Exception thrown by command `{name}` of plugin {cmd.plugin_id}: {e}",
                exc_info=True,
            )

        if not isinstance(outcome, CommandOutcome):
            if outcome is not None:
                logger.warning(f"Command `{name}` returned {outcome!r}, not a CommandOutcome")
            outcome = CommandOutcome.FAILURE_OTHER

        # Commands shouldn't report NOT_HANDLED once dispatched to
        if outcome is CommandOutcome.NOT_HANDLED:
            outcome = CommandOutcome.FAILURE_OTHER

        message = self._outcome_message(outcome, name, cmd)
        if message is not None:
            sender.send_message(message)

        return outcome

    def _outcome_message(
        self, outcome: CommandOutcome, name: CommandName, cmd: RegisteredCommand
    ) -> Optional[str]:
        if outcome is CommandOutcome.SUCCESS:
            return None
        if outcome is CommandOutcome.NO_PERMISSION:
            return self._config.permission_message
        if outcome is CommandOutcome.WRONG_USAGE:
            return f"/{name} {cmd.usage}"
        if outcome is CommandOutcome.UNSUPPORTED_SENDER:
            return self._config.unsupported_sender_message
        return self._config.error_message
