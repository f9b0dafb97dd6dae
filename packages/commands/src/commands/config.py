"""
Command System Configuration

Builds the sender-visible message texts from environment variables.
Unset variables fall back to the defaults in constants.py.
"""

import logging
import os
from dataclasses import dataclass

from .constants import (
    PERMISSION_ERROR,
    INVALID_COMMAND,
    ERROR_OCCURRED,
    UNSUPPORTED_SENDER_ERROR,
)


@dataclass(frozen=True)
class CommandConfig:
    """Texts the manager sends for non-successful outcomes."""

    permission_message: str = PERMISSION_ERROR
    invalid_message: str = INVALID_COMMAND
    error_message: str = ERROR_OCCURRED
    unsupported_sender_message: str = UNSUPPORTED_SENDER_ERROR


def get_command_config() -> CommandConfig:
    """Build command config from environment variables."""
    return CommandConfig(
        permission_message=os.environ.get("COMMANDS_PERMISSION_MESSAGE", PERMISSION_ERROR),
        invalid_message=os.environ.get("COMMANDS_INVALID_MESSAGE", INVALID_COMMAND),
        error_message=os.environ.get("COMMANDS_ERROR_MESSAGE", ERROR_OCCURRED),
        unsupported_sender_message=os.environ.get(
            "COMMANDS_UNSUPPORTED_SENDER_MESSAGE", UNSUPPORTED_SENDER_ERROR
        ),
    )


def get_log_level() -> int:
    """Log level for the command system, from COMMANDS_LOG_LEVEL (default INFO)."""
    level = logging.getLevelName(os.environ.get("COMMANDS_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
