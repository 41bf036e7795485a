"""Pydantic models for chat interactions."""

from enum import IntEnum

from pydantic import BaseModel, Field

EPHEMERAL_FLAG = 1 << 6


class InteractionType(IntEnum):
    """Incoming interaction types."""

    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    """Outgoing interaction response types."""

    PONG = 1
    CHANNEL_MESSAGE = 4


class CommandOption(BaseModel):
    """A single slash-command option, e.g. the ``roll`` text."""

    name: str
    value: str


class CommandData(BaseModel):
    """Slash-command invocation data."""

    name: str = ""
    options: list[CommandOption] = Field(default_factory=list)


class Interaction(BaseModel):
    """Verified interaction delivered to the bot endpoint."""

    type: int
    data: CommandData | None = None
    token: str | None = None
    application_id: str | None = None


class ChatMessage(BaseModel):
    """Message content posted back to the chat.

    A nonzero ``flags`` marks an error reply only the invoking user sees.
    """

    content: str = Field(..., min_length=1)
    flags: int | None = None

    @property
    def is_ephemeral(self) -> bool:
        """Check whether this is an error-only reply."""
        return bool(self.flags)
