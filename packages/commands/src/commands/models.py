"""
Command Result Models

Pydantic models for data that leaves the manager: dispatch results sent
back through the Ray actor and rows of the command listing.
"""

from typing import List

from pydantic import BaseModel, Field

from .outcome import CommandOutcome


class DispatchResult(BaseModel):
    """Outcome of one dispatch plus the messages the sender received."""

    outcome: CommandOutcome
    messages: List[str] = Field(default_factory=list)

    @property
    def handled(self) -> bool:
        return self.outcome is not CommandOutcome.NOT_HANDLED


class CommandInfo(BaseModel):
    """One registered name, as shown in listings."""

    name: str = Field(description="Space separated command name")
    plugin: str = Field(description="Id of the owning plugin")
    is_alias: bool = False
    is_prefixed: bool = False
    usage: str = ""
