"""
Command Executors

The invokable side of a registered command. The manager only ever sees
CommandExecutor; MethodCommandExecutor adapts a validated descriptor.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Sequence, Union

from .descriptor import CommandDescriptor
from .outcome import CommandOutcome
from .sender import CommandSender

ExecutorResult = Union[CommandOutcome, None, Awaitable[CommandOutcome]]


class CommandExecutor(ABC):
    """Something the manager can invoke with a sender and argument tokens."""

    @property
    def usage(self) -> str:
        """Usage hint shown after the command name on WRONG_USAGE."""
        return ""

    @abstractmethod
    def execute(self, sender: CommandSender, args: Sequence[str]) -> ExecutorResult:
        """Run the command. May return a coroutine."""
        pass


class FunctionCommandExecutor(CommandExecutor):
    """Executor backed by a plain callable taking (sender, args)."""

    def __init__(self, func: Callable[[CommandSender, Sequence[str]], ExecutorResult], usage: str = ""):
        self._func = func
        self._usage = usage

    @property
    def usage(self) -> str:
        return self._usage

    def execute(self, sender: CommandSender, args: Sequence[str]) -> ExecutorResult:
        return self._func(sender, args)

    def __repr__(self) -> str:
        return f"FunctionCommandExecutor({getattr(self._func, '__qualname__', self._func)!r})"


class MethodCommandExecutor(CommandExecutor):
    """
    Executor for a handler described by a CommandDescriptor.

    Binds argument tokens onto the handler's string parameters. The
    descriptor must already have passed validate_descriptor().
    """

    def __init__(self, descriptor: CommandDescriptor):
        self._descriptor = descriptor
        self._sender_type = descriptor.parameters[0].annotation

        arg_params = descriptor.parameters[1:]
        self._variadic = bool(arg_params) and arg_params[-1].variadic
        self._fixed = len(arg_params) - (1 if self._variadic else 0)
        self._usage = descriptor.usage or self._derive_usage(arg_params)

    @staticmethod
    def _derive_usage(arg_params) -> str:
        parts = []
        for param in arg_params:
            if param.variadic:
                parts.append(f"[{param.name}...]")
            else:
                parts.append(f"<{param.name}>")
        return " ".join(parts)

    @property
    def descriptor(self) -> CommandDescriptor:
        return self._descriptor

    @property
    def usage(self) -> str:
        return self._usage

    def execute(self, sender: CommandSender, args: Sequence[str]) -> ExecutorResult:
        if not isinstance(sender, self._sender_type):
            return CommandOutcome.UNSUPPORTED_SENDER

        if len(args) < self._fixed or (not self._variadic and len(args) != self._fixed):
            return CommandOutcome.WRONG_USAGE

        return self._descriptor.handler(sender, *args)

    def __repr__(self) -> str:
        return f"MethodCommandExecutor({self._descriptor.handler_name})"
