"""
Descriptor discovery and validation tests.
"""

import logging

import pytest

from commands import (
    CommandDescriptor,
    CommandName,
    CommandOutcome,
    CommandSender,
    CommandSet,
    ParameterSpec,
    PlayerSender,
    command,
    validate_descriptor,
)


class ValidCommands(CommandSet):
    @command("plain")
    def plain(self, sender: CommandSender) -> CommandOutcome:
        return CommandOutcome.SUCCESS

    @command("player", "only", aliases=["po"])
    def player_only(self, sender: PlayerSender, first: str, second: str) -> CommandOutcome:
        return CommandOutcome.SUCCESS

    @command("rest")
    def rest(self, sender: CommandSender, first: str, *others: str) -> CommandOutcome:
        return CommandOutcome.SUCCESS

    def not_a_command(self, sender: CommandSender) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class StaticCommand(CommandSet):
    @command("bad")
    @staticmethod
    def bad(sender: CommandSender) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class ClassLevelCommand(CommandSet):
    @command("bad")
    @classmethod
    def bad(cls, sender: CommandSender) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class PrivateCommand(CommandSet):
    @command("bad")
    def _bad(self, sender: CommandSender) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class WrongReturnCommand(CommandSet):
    @command("bad")
    def bad(self, sender: CommandSender) -> str:
        return "done"


class MissingReturnCommand(CommandSet):
    @command("bad")
    def bad(self, sender: CommandSender):
        return CommandOutcome.SUCCESS


class NoParameterCommand(CommandSet):
    @command("bad")
    def bad(self) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class NoSenderCommand(CommandSet):
    @command("bad")
    def bad(self, who: str) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class MiddleParameterCommand(CommandSet):
    @command("bad")
    def bad(self, sender: CommandSender, count: int, label: str) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class LastParameterCommand(CommandSet):
    @command("bad")
    def bad(self, sender: CommandSender, count: int) -> CommandOutcome:
        return CommandOutcome.SUCCESS


class RestParameterCommand(CommandSet):
    @command("bad")
    def bad(self, sender: CommandSender, *counts: int) -> CommandOutcome:
        return CommandOutcome.SUCCESS


INVALID_SETS = [
    (StaticCommand, "is static"),
    (ClassLevelCommand, "is static"),
    (PrivateCommand, "is not public"),
    (WrongReturnCommand, "does not return 'CommandOutcome'"),
    (MissingReturnCommand, "does not return 'CommandOutcome'"),
    (NoParameterCommand, "does not have the required (more than 0) parameters number"),
    (NoSenderCommand, "does not have a subclass of 'CommandSender' as it's first parameter"),
    (MiddleParameterCommand, "does not have 'str' as a mandatory parameter at index 1"),
    (LastParameterCommand, "does not have 'str' or '*str' as it's last parameter"),
    (RestParameterCommand, "does not have 'str' or '*str' as it's last parameter"),
]


class TestDiscovery:
    """Descriptors built from @command methods."""

    def test_only_decorated_methods_are_found(self):
        names = sorted(d.name for d in ValidCommands().command_descriptors())
        assert names == [("plain",), ("player", "only"), ("rest",)]

    def test_descriptor_metadata(self):
        descriptors = {d.name: d for d in ValidCommands().command_descriptors()}
        player_only = descriptors[("player", "only")]

        assert player_only.aliases == ["po"]
        assert player_only.returns is CommandOutcome
        assert [p.annotation for p in player_only.parameters] == [PlayerSender, str, str]
        assert [p.name for p in player_only.parameters] == ["sender", "first", "second"]

    def test_variadic_tail_is_marked(self):
        descriptors = {d.name: d for d in ValidCommands().command_descriptors()}
        rest = descriptors[("rest",)]
        assert [p.variadic for p in rest.parameters] == [False, False, True]

    def test_handler_is_bound(self):
        command_set = ValidCommands()
        descriptor = command_set.command_descriptors()[0]
        assert descriptor.handler.__self__ is command_set

    def test_command_requires_name(self):
        with pytest.raises(ValueError):
            command()


class TestValidation:
    """validate_descriptor() rules."""

    def test_valid_descriptors_pass(self):
        for descriptor in ValidCommands().command_descriptors():
            assert validate_descriptor(descriptor) is None

    @pytest.mark.parametrize("command_set, problem", INVALID_SETS)
    def test_each_rule(self, command_set, problem):
        (descriptor,) = command_set().command_descriptors()
        assert validate_descriptor(descriptor) == problem

    def test_hand_built_descriptor(self):
        descriptor = CommandDescriptor(
            name=("hand", "built"),
            handler=lambda sender, label: CommandOutcome.SUCCESS,
            parameters=[ParameterSpec(CommandSender, "sender"), ParameterSpec(str, "label")],
        )
        assert validate_descriptor(descriptor) is None

    def test_variadic_sender_rejected(self):
        descriptor = CommandDescriptor(
            name=("odd",),
            handler=lambda *senders: CommandOutcome.SUCCESS,
            parameters=[ParameterSpec(CommandSender, "senders", variadic=True)],
        )
        assert "first parameter" in validate_descriptor(descriptor)


class TestRegistrationSkipsInvalid:
    """Invalid descriptors are skipped with a warning, never registered."""

    @pytest.mark.parametrize("command_set, problem", INVALID_SETS)
    def test_skipped_with_warning(self, manager, alpha, caplog, command_set, problem):
        with caplog.at_level(logging.WARNING):
            count = manager.register_all(alpha, command_set())

        assert count == 0
        assert len(manager) == 0
        assert CommandName.of("bad") not in manager
        assert CommandName.of("alpha", "bad") not in manager
        assert any(problem in record.getMessage() for record in caplog.records)

    def test_valid_siblings_still_registered(self, manager, alpha):
        class Mixed(ValidCommands):
            @command("bad")
            def bad(self, sender: CommandSender) -> str:
                return ""

        assert manager.register_all(alpha, Mixed()) == 3
        assert CommandName.of("bad") not in manager
        assert CommandName.of("plain") in manager
