"""
Command Senders

Anything that can issue a command and receive the manager's replies.

Delivery is fire-and-forget: the manager never waits for, or learns
about, the fate of a message once it has been handed over.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


class CommandSender(ABC):
    """Base class for command initiators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the sender."""
        pass

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Deliver a text message to the sender."""
        pass


class BufferedSender(CommandSender):
    """
    Sender that keeps every message it receives.

    Used by the distributed front-end, where replies have to travel back
    to the caller as data, and in tests.
    """

    def __init__(self, name: str = "buffer"):
        self._name = name
        self.messages: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    def send_message(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> List[str]:
        """Return and forget the collected messages."""
        messages, self.messages = self.messages, []
        return messages


class ConsoleSender(CommandSender):
    """The server console. Replies go to the log."""

    @property
    def name(self) -> str:
        return "console"

    def send_message(self, message: str) -> None:
        logger.info(f"[console] {message}")


class PlayerSender(CommandSender):
    """
    A connected player.

    Messages are handed to a delivery callback (typically the session's
    output queue). Commands that only make sense for players declare this
    type as their sender parameter.
    """

    def __init__(self, player_id: Any, name: str, deliver: Callable[[str], None]):
        self.player_id = player_id
        self._name = name
        self._deliver = deliver

    @property
    def name(self) -> str:
        return self._name

    def send_message(self, message: str) -> None:
        try:
            self._deliver(message)
        except Exception as e:
            logger.warning(f"Failed to deliver message to {self._name}: {e}")
