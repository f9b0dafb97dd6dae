"""
Command System Package

Hierarchical command registry and dispatcher for a multi-plugin server.

Key concepts:
- CommandName: hierarchical token-sequence identifier ("warp set")
- CommandSet: provider of @command decorated handlers
- Plugin: owning unit; commands are also reachable under its id
- CommandManager: registration with conflict resolution, dispatch with
  fallback to parent names, outcome to message translation

Architecture:
    Plugin ──register──► CommandManager ◄──execute── CommandSender
                              │
                 ┌────────────┼─────────────┐
                 ▼            ▼             ▼
           "plugin warp"   "warp"    "warp" aliases
             (prefixed)    (bare)      (alias)
"""

import logging

from .config import CommandConfig, get_command_config, get_log_level

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

from .constants import (  # noqa: E402
    NAMESPACE,
    COMMAND_MANAGER_ACTOR,
    PERMISSION_ERROR,
    INVALID_COMMAND,
    ERROR_OCCURRED,
    UNSUPPORTED_SENDER_ERROR,
    COMMAND_PREFIX,
)
from .name import CommandName  # noqa: E402
from .outcome import CommandOutcome  # noqa: E402
from .sender import CommandSender, BufferedSender, ConsoleSender, PlayerSender  # noqa: E402
from .descriptor import (  # noqa: E402
    CommandDescriptor,
    CommandSet,
    ParameterSpec,
    command,
    validate_descriptor,
)
from .executor import CommandExecutor, FunctionCommandExecutor, MethodCommandExecutor  # noqa: E402
from .models import CommandInfo, DispatchResult  # noqa: E402
from .parser import tokenize, split_command_line  # noqa: E402
from .manager import CommandManager, RegisteredCommand  # noqa: E402
from .plugin import Plugin, PluginInfo  # noqa: E402
from .builtin import HelpCommands, ServerPlugin  # noqa: E402
from .actor import (  # noqa: E402
    CommandManagerActor,
    CommandManagerService,
    start_command_manager,
    get_command_manager_actor,
    command_manager_exists,
    stop_command_manager,
)

__all__ = [
    "CommandConfig",
    "get_command_config",
    "NAMESPACE",
    "COMMAND_MANAGER_ACTOR",
    "PERMISSION_ERROR",
    "INVALID_COMMAND",
    "ERROR_OCCURRED",
    "UNSUPPORTED_SENDER_ERROR",
    "COMMAND_PREFIX",
    "CommandName",
    "CommandOutcome",
    "CommandSender",
    "BufferedSender",
    "ConsoleSender",
    "PlayerSender",
    "CommandDescriptor",
    "CommandSet",
    "ParameterSpec",
    "command",
    "validate_descriptor",
    "CommandExecutor",
    "FunctionCommandExecutor",
    "MethodCommandExecutor",
    "CommandInfo",
    "DispatchResult",
    "tokenize",
    "split_command_line",
    "CommandManager",
    "RegisteredCommand",
    "Plugin",
    "PluginInfo",
    "HelpCommands",
    "ServerPlugin",
    "CommandManagerActor",
    "CommandManagerService",
    "start_command_manager",
    "get_command_manager_actor",
    "command_manager_exists",
    "stop_command_manager",
]
