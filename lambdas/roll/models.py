"""Pydantic models for roll API request validation."""

from pydantic import BaseModel, Field

from shared.limits import DICE_COUNT, DICE_MODIFIER, DICE_SIDES, REPEAT_COUNT
from shared.models import DiceGroup, DiceSpecification


class DicePayload(BaseModel):
    """One dice group in a structured roll request."""

    count: int = Field(default=1, ge=DICE_COUNT.lower, le=DICE_COUNT.upper)
    sides: int = Field(..., ge=DICE_SIDES.lower, le=DICE_SIDES.upper)
    modifier: int = Field(default=0, ge=DICE_MODIFIER.lower, le=DICE_MODIFIER.upper)


class RollPayload(BaseModel):
    """Request body for POST /roll."""

    count: int = Field(default=1, ge=REPEAT_COUNT.lower, le=REPEAT_COUNT.upper)
    """How many independent times to roll the whole set of dice."""

    dice: list[DicePayload] = Field(..., min_length=1)

    def to_specification(self) -> DiceSpecification:
        """Convert to a DiceSpecification with ``repeat_count = count``."""
        return DiceSpecification(
            groups=tuple(
                DiceGroup(count=d.count, sides=d.sides, modifier=d.modifier)
                for d in self.dice
            ),
            repeat_count=self.count,
        )


class NotationRequest(BaseModel):
    """Request body for POST /roll/notation."""

    expression: str = Field(..., min_length=1, max_length=200)
