"""Chat slash-command integration for dice rolls."""

from .models import EPHEMERAL_FLAG, ChatMessage, Interaction
from .service import roll_from_text

__all__ = [
    "EPHEMERAL_FLAG",
    "ChatMessage",
    "Interaction",
    "roll_from_text",
]
