"""Pydantic models for dice specifications and their resolutions."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiceGroup(BaseModel):
    """One group of identical dice, e.g. the ``2d6+3`` in ``2d6+3+1d4``."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=1, ge=1)
    sides: int = Field(..., ge=1)
    modifier: int = 0
    """Added once to the group total, not per die."""


class DiceSpecification(BaseModel):
    """Parsed dice expression or structured roll request."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[DiceGroup, ...] = Field(..., min_length=1)
    repeat_count: int = Field(default=1, ge=1)
    """Number of independent steps to resolve."""


class RolledGroup(BaseModel):
    """Resolution of a single dice group."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1)
    sides: int = Field(..., ge=1)
    modifier: int = 0
    rolls: tuple[int, ...]
    total: int

    @model_validator(mode="after")
    def check_rolls(self) -> "RolledGroup":
        """Ensure rolls match the group and the total is their exact sum."""
        if len(self.rolls) != self.count:
            raise ValueError(f"Expected {self.count} rolls, got {len(self.rolls)}")
        for value in self.rolls:
            if not 1 <= value <= self.sides:
                raise ValueError(f"Roll {value} is outside 1..{self.sides}")
        if self.total != sum(self.rolls) + self.modifier:
            raise ValueError("Group total must equal the sum of rolls plus modifier")
        return self


class Step(BaseModel):
    """One full resolution of every group in a specification."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[RolledGroup, ...] = Field(..., serialization_alias="rolls")
    total: int

    @model_validator(mode="after")
    def check_total(self) -> "Step":
        """Ensure the step total is the sum of its group totals."""
        if self.total != sum(group.total for group in self.groups):
            raise ValueError("Step total must equal the sum of group totals")
        return self


class Resolution(BaseModel):
    """Complete outcome of resolving a specification.

    Serializes (``by_alias=True``) to the public roll response shape::

        {"step": [{"rolls": [{"count", "sides", "modifier", "rolls", "total"}], "total"}]}
    """

    model_config = ConfigDict(frozen=True)

    steps: tuple[Step, ...] = Field(..., min_length=1, serialization_alias="step")

    def to_response(self) -> dict:
        """Serialize to the roll response dict."""
        return self.model_dump(by_alias=True, mode="json")
