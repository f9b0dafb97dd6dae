"""
Configuration tests.
"""

import logging

from commands import INVALID_COMMAND, get_command_config
from commands.config import get_log_level


class TestCommandConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COMMANDS_INVALID_MESSAGE", raising=False)
        assert get_command_config().invalid_message == INVALID_COMMAND

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("COMMANDS_INVALID_MESSAGE", "Unknown command.")
        monkeypatch.setenv("COMMANDS_UNSUPPORTED_SENDER_MESSAGE", "Players only.")

        config = get_command_config()

        assert config.invalid_message == "Unknown command."
        assert config.unsupported_sender_message == "Players only."

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("COMMANDS_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

        monkeypatch.setenv("COMMANDS_LOG_LEVEL", "nonsense")
        assert get_log_level() == logging.INFO
