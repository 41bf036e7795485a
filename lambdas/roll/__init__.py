"""Roll API for structured and notation dice rolls."""

from .models import DicePayload, NotationRequest, RollPayload
from .service import RollService

__all__ = [
    "DicePayload",
    "NotationRequest",
    "RollPayload",
    "RollService",
]
