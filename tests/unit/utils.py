"""
Utility classes for unit tests.
"""

from typing import List, Sequence

from commands import CommandExecutor, CommandOutcome, CommandSender, Plugin


class StubPlugin(Plugin):
    """Plugin with no content of its own."""

    async def on_load(self) -> None:
        pass


class RecordingExecutor(CommandExecutor):
    """Executor that records its calls and returns a fixed result."""

    def __init__(self, result=CommandOutcome.SUCCESS, usage: str = "<arg>", error: Exception = None):
        self.result = result
        self.error = error
        self._usage = usage
        self.calls: List[List[str]] = []

    @property
    def usage(self) -> str:
        return self._usage

    def execute(self, sender: CommandSender, args: Sequence[str]):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.result


class AsyncRecordingExecutor(RecordingExecutor):
    """RecordingExecutor whose execute() is a coroutine."""

    async def execute(self, sender: CommandSender, args: Sequence[str]):
        return super().execute(sender, args)
