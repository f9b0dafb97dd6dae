"""
Command Names

Hierarchical, immutable command identifiers.

A name is an ordered sequence of lowercase tokens, e.g. ("warp", "set").
The same value is used as the registry key and as the candidate built from
raw input during dispatch, so equality and hashing are purely structural.
"""

from typing import Iterable, Tuple, Union


def plugin_id_of(plugin: Union[str, object]) -> str:
    """Owner id of a plugin object or of a plain id string."""
    return (plugin if isinstance(plugin, str) else plugin.id).lower()


class CommandName:
    """Hierarchical command name built from one or more tokens."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str]):
        parts = tuple(token.lower() for token in tokens)
        if not parts:
            raise ValueError("CommandName requires at least one token")
        for token in parts:
            if not token or token.split() != [token]:
                raise ValueError(f"Invalid command name token: {token!r}")
        self._tokens: Tuple[str, ...] = parts

    @classmethod
    def of(cls, *tokens: str) -> "CommandName":
        """Build a name from tokens, e.g. CommandName.of("warp", "set")."""
        return cls(tokens)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def size(self) -> int:
        return len(self._tokens)

    def has_parent(self) -> bool:
        return len(self._tokens) > 1

    def parent(self) -> "CommandName":
        """Get the name with the trailing token removed."""
        if not self.has_parent():
            raise ValueError(f"Command name '{self}' has no parent")
        return CommandName(self._tokens[:-1])

    def alias(self, token: str) -> "CommandName":
        """Get the name with its leaf token replaced by an alias."""
        return CommandName(self._tokens[:-1] + (token,))

    def plugin_prefixed(self, plugin: Union[str, object]) -> "CommandName":
        """Get the name namespaced under a plugin id."""
        return CommandName((plugin_id_of(plugin),) + self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandName):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"CommandName({', '.join(repr(t) for t in self._tokens)})"
