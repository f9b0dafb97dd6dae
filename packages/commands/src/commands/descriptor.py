"""
Command Descriptors

Static description of a command handler: its name, aliases and calling
shape. Command providers (CommandSet subclasses) hand these to the
CommandManager, which validates the declared shape before registering.

Usage:
    class WarpCommands(CommandSet):
        @command("warp", "set", aliases=["ws"], usage="<label>")
        def warp_set(self, sender: PlayerSender, label: str) -> CommandOutcome:
            ...
"""

import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from .outcome import CommandOutcome
from .sender import CommandSender


COMMAND_ATTR = "__command_meta__"


@dataclass(frozen=True)
class CommandMeta:
    """Metadata attached to a handler by the @command decorator."""

    name: Tuple[str, ...]
    aliases: Tuple[str, ...] = ()
    usage: str = ""
    help_text: str = ""


@dataclass(frozen=True)
class ParameterSpec:
    """Declared type of one handler parameter."""

    annotation: Any
    name: str = ""
    variadic: bool = False  # *args tail


@dataclass
class CommandDescriptor:
    """A handler plus the metadata needed to register it."""

    name: Tuple[str, ...]
    handler: Callable
    parameters: List[ParameterSpec] = field(default_factory=list)
    returns: Any = CommandOutcome
    aliases: List[str] = field(default_factory=list)
    usage: str = ""
    help_text: str = ""
    is_static: bool = False
    is_public: bool = True

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, "__qualname__", repr(self.handler))


def _is_sender_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, CommandSender)


def validate_descriptor(descriptor: CommandDescriptor) -> Optional[str]:
    """
    Check a descriptor against the handler calling contract.

    Returns a description of the first violated rule, or None if the
    descriptor can be registered.
    """
    if descriptor.is_static:
        return "is static"

    if not descriptor.is_public:
        return "is not public"

    if descriptor.returns is not CommandOutcome:
        return "does not return 'CommandOutcome'"

    params = descriptor.parameters
    if not params:
        return "does not have the required (more than 0) parameters number"

    if params[0].variadic or not _is_sender_type(params[0].annotation):
        return "does not have a subclass of 'CommandSender' as it's first parameter"

    # Mandatory argument parameters
    for index in range(1, len(params) - 1):
        if params[index].variadic or params[index].annotation is not str:
            return f"does not have 'str' as a mandatory parameter at index {index}"

    # Last parameter, mandatory or rest
    if len(params) > 1 and params[-1].annotation is not str:
        return "does not have 'str' or '*str' as it's last parameter"

    return None


def command(
    *name: str,
    aliases: Optional[List[str]] = None,
    usage: str = "",
    help_text: str = "",
):
    """
    Decorator to mark a CommandSet method as a command handler.

    Usage:
        @command("warp", "set", aliases=["ws"])
        def warp_set(self, sender: CommandSender, label: str) -> CommandOutcome:
            ...
    """
    if not name:
        raise ValueError("@command requires at least one name token")

    def decorator(func):
        target = func.__func__ if isinstance(func, (staticmethod, classmethod)) else func
        meta = CommandMeta(
            name=tuple(token.lower() for token in name),
            aliases=tuple(aliases or ()),
            usage=usage,
            help_text=help_text or (target.__doc__ or "").strip(),
        )
        setattr(target, COMMAND_ATTR, meta)
        return func

    return decorator


def _describe_parameters(func: Callable, skip_first: bool) -> Tuple[List[ParameterSpec], Any]:
    """Build the declared shape of a function from its signature."""
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        hints = dict(getattr(func, "__annotations__", {}))

    signature = inspect.signature(func)
    params = list(signature.parameters.values())
    if skip_first and params:
        params = params[1:]

    specs = []
    for param in params:
        if param.kind in (param.KEYWORD_ONLY, param.VAR_KEYWORD):
            continue
        specs.append(
            ParameterSpec(
                annotation=hints.get(param.name, param.annotation),
                name=param.name,
                variadic=param.kind == param.VAR_POSITIONAL,
            )
        )

    returns = hints.get("return", signature.return_annotation)
    return specs, returns


class CommandSet:
    """
    Base class for command providers.

    By default the descriptors are collected from methods decorated with
    @command. Providers that want to declare their commands explicitly can
    override command_descriptors() and return hand-built descriptors.
    """

    def command_descriptors(self) -> List[CommandDescriptor]:
        descriptors = []
        seen = set()

        for klass in type(self).__mro__:
            if klass in (CommandSet, object):
                continue

            for attr_name, raw in vars(klass).items():
                if attr_name in seen:
                    continue

                is_static = isinstance(raw, (staticmethod, classmethod))
                func = raw.__func__ if is_static else raw
                meta = getattr(func, COMMAND_ATTR, None)
                if meta is None or not callable(func):
                    continue
                seen.add(attr_name)

                parameters, returns = _describe_parameters(
                    func, skip_first=not isinstance(raw, staticmethod)
                )
                descriptors.append(
                    CommandDescriptor(
                        name=meta.name,
                        handler=getattr(self, attr_name),
                        parameters=parameters,
                        returns=returns,
                        aliases=list(meta.aliases),
                        usage=meta.usage,
                        help_text=meta.help_text,
                        is_static=is_static,
                        is_public=not attr_name.startswith("_"),
                    )
                )

        return descriptors
