"""
Pytest fixtures for unit tests.
"""

import pytest

from commands import BufferedSender, CommandConfig, CommandManager

from .utils import StubPlugin


@pytest.fixture
def manager() -> CommandManager:
    """A fresh manager with the default message texts."""
    return CommandManager(CommandConfig())


@pytest.fixture
def sender() -> BufferedSender:
    return BufferedSender("tester")


@pytest.fixture
def alpha() -> StubPlugin:
    return StubPlugin("alpha")


@pytest.fixture
def beta() -> StubPlugin:
    return StubPlugin("beta")
