"""Bounds applied to dice specifications at the input boundaries."""

from dataclasses import dataclass

from .exceptions import InvalidSpecificationError
from .models import DiceSpecification


@dataclass(frozen=True)
class Bound:
    """Inclusive range for one dice field."""

    label: str
    lower: int
    upper: int

    def check(self, value: int, field: str) -> None:
        """Raise if value lies outside the bound.

        Args:
            value: Value to check
            field: Field name reported on failure

        Raises:
            InvalidSpecificationError: If value is out of range
        """
        if not self.lower <= value <= self.upper:
            raise InvalidSpecificationError(
                f"{self.label} must be between {self.lower} and {self.upper}, "
                f"{value} provided",
                field=field,
            )


DICE_COUNT = Bound("Dice count", 1, 99)
DICE_SIDES = Bound("Dice sides", 1, 999)
DICE_MODIFIER = Bound("Dice modifier", -100, 100)
REPEAT_COUNT = Bound("Roll count", 1, 99)


def check_limits(spec: DiceSpecification) -> DiceSpecification:
    """Validate a specification against the service bounds.

    Args:
        spec: Specification to validate

    Returns:
        The same specification, for chaining

    Raises:
        InvalidSpecificationError: On the first out-of-range value
    """
    REPEAT_COUNT.check(spec.repeat_count, "repeat_count")
    for group in spec.groups:
        DICE_SIDES.check(group.sides, "sides")
        DICE_MODIFIER.check(group.modifier, "modifier")
        DICE_COUNT.check(group.count, "count")
    return spec
