"""
Command Outcome

Closed set of results a command handler can report back to the manager.
"""

from enum import Enum


class CommandOutcome(str, Enum):
    """Result of executing a command."""

    SUCCESS = "success"
    NO_PERMISSION = "no_permission"
    WRONG_USAGE = "wrong_usage"
    UNSUPPORTED_SENDER = "unsupported_sender"
    ERROR = "error"
    NOT_HANDLED = "not_handled"  # Only the manager may report this
    FAILURE_OTHER = "failure_other"

    @property
    def is_success(self) -> bool:
        return self is CommandOutcome.SUCCESS
