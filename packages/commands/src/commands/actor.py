"""
Distributed Command Manager Actor

A Ray actor that hosts a CommandManager so that processes connected to
the cluster can register and dispatch commands through one registry.

Key Design Decision:
    Command sets are registered by reference (module + class name) instead
    of by instance. The actor imports and instantiates them itself, so
    nothing unpicklable crosses the process boundary. Replies to senders
    are buffered and returned as a DispatchResult.
"""

import importlib
import logging
from typing import Any, Dict, List, Optional, Type

import ray
from ray.actor import ActorHandle

from .constants import COMMAND_MANAGER_ACTOR, NAMESPACE
from .descriptor import CommandSet
from .manager import CommandManager
from .models import CommandInfo, DispatchResult
from .parser import tokenize
from .plugin import Plugin
from .sender import BufferedSender

logger = logging.getLogger(__name__)


class RemotePlugin(Plugin):
    """Stand-in owner for commands registered from another process."""

    async def on_load(self) -> None:
        pass


class CommandManagerService:
    """
    Serializable front-end to a CommandManager.

    Wrapped by ray.remote as CommandManagerActor; usable directly in a
    single process.
    """

    def __init__(self, manager: Optional[CommandManager] = None):
        self._manager = manager or CommandManager()
        self._plugins: Dict[str, RemotePlugin] = {}
        self._set_cache: Dict[str, Type[CommandSet]] = {}

        logger.info("CommandManagerService initialized")

    @property
    def manager(self) -> CommandManager:
        return self._manager

    def _resolve_set(self, set_module: str, set_class: str) -> Type[CommandSet]:
        """
        Resolve a command set reference to its class.

        Uses importlib to dynamically import the module and get the class.
        Results are cached to avoid repeated imports.
        """
        cache_key = f"{set_module}:{set_class}"

        if cache_key in self._set_cache:
            return self._set_cache[cache_key]

        try:
            module = importlib.import_module(set_module)
            klass = getattr(module, set_class)
        except (ImportError, AttributeError) as e:
            logger.error(f"Failed to resolve command set {cache_key}: {e}")
            raise

        if not (isinstance(klass, type) and issubclass(klass, CommandSet)):
            raise TypeError(f"{cache_key} is not a CommandSet")

        self._set_cache[cache_key] = klass
        return klass

    def _plugin(self, plugin_name: str) -> RemotePlugin:
        plugin = self._plugins.get(plugin_name.lower())
        if plugin is None:
            plugin = RemotePlugin(plugin_name)
            self._plugins[plugin.id] = plugin
        return plugin

    # =========================================================================
    # Registration
    # =========================================================================

    def register_command_set(
        self,
        plugin_name: str,
        set_module: str,
        set_class: str,
        names: Optional[List[str]] = None,
    ) -> int:
        """
        Register commands from a command set class. Returns the count accepted.

        Args:
            plugin_name: Owning plugin
            set_module: Module containing the set (e.g., "plugins.sample_plugin")
            set_class: CommandSet subclass name, constructed without arguments
            names: If given, only the command with exactly these name tokens
        """
        command_set = self._resolve_set(set_module, set_class)()
        plugin = self._plugin(plugin_name)

        if names:
            count = 1 if self._manager.register_set(plugin, command_set, *names) else 0
        else:
            count = self._manager.register_all(plugin, command_set)

        logger.info(f"Registered {count} commands from {set_module}:{set_class} for {plugin.id}")
        return count

    def unregister_plugin(self, plugin_name: str) -> int:
        """Remove every command owned by a plugin."""
        plugin = self._plugins.pop(plugin_name.lower(), None)
        if plugin is None:
            return 0
        return self._manager.unregister_plugin(plugin)

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def execute_line(self, sender_name: str, line: str) -> DispatchResult:
        """Dispatch a raw command line on behalf of a named sender."""
        return await self.execute(sender_name, tokenize(line))

    async def execute(self, sender_name: str, tokens: List[str]) -> DispatchResult:
        """Dispatch tokens on behalf of a named sender."""
        sender = BufferedSender(sender_name)
        outcome = await self._manager.execute(sender, *tokens)
        return DispatchResult(outcome=outcome, messages=sender.drain())

    # =========================================================================
    # Queries
    # =========================================================================

    def list_commands(self) -> List[CommandInfo]:
        return self._manager.list_commands()

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        commands = self._manager.list_commands()
        return {
            "names": len(commands),
            "aliases": sum(1 for info in commands if info.is_alias),
            "plugins": len(self._plugins),
        }


CommandManagerActor = ray.remote(CommandManagerService)


# =============================================================================
# Actor Lifecycle Functions
# =============================================================================


def start_command_manager() -> ActorHandle:
    """
    Start the command manager actor.

    Should be called once during server initialization.
    Returns the actor handle.
    """
    actor: ActorHandle = CommandManagerActor.options(
        name=COMMAND_MANAGER_ACTOR,
        namespace=NAMESPACE,
        lifetime="detached",
    ).remote()  # type: ignore[assignment]
    logger.info(f"Started CommandManagerActor as {NAMESPACE}/{COMMAND_MANAGER_ACTOR}")
    return actor


def _lookup_command_manager() -> Optional[ActorHandle]:
    try:
        return ray.get_actor(COMMAND_MANAGER_ACTOR, namespace=NAMESPACE)
    except ValueError:
        return None


def get_command_manager_actor() -> ActorHandle:
    """
    Get the command manager actor.

    Raises ValueError if the actor doesn't exist.
    """
    actor = _lookup_command_manager()
    if actor is None:
        raise ValueError(
            f"No actor {NAMESPACE}/{COMMAND_MANAGER_ACTOR}. Call start_command_manager() first."
        )
    return actor


def command_manager_exists() -> bool:
    return _lookup_command_manager() is not None


def stop_command_manager() -> bool:
    """Kill the command manager actor. Returns False if it wasn't running."""
    actor = _lookup_command_manager()
    if actor is None:
        logger.warning(f"No actor {NAMESPACE}/{COMMAND_MANAGER_ACTOR} to stop")
        return False

    ray.kill(actor)
    logger.info(f"Stopped CommandManagerActor {NAMESPACE}/{COMMAND_MANAGER_ACTOR}")
    return True
