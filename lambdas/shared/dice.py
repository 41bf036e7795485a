"""Dice rolling engine.

Resolves a DiceSpecification into a Resolution by drawing every die from a
random source. The source is any callable taking the number of sides and
returning an integer in ``[1, sides]``, so tests can pass a fixed sequence.
"""

import random
from collections.abc import Callable
from functools import partial

from aws_lambda_powertools import Logger

from .exceptions import InvalidSpecificationError, ResolutionError
from .models import DiceGroup, DiceSpecification, Resolution, RolledGroup, Step
from .notation import parse

logger = Logger(child=True)

RandomSource = Callable[[int], int]


def system_random_source() -> RandomSource:
    """Create a source backed by its own, unshared ``random.Random``."""
    return partial(random.Random().randint, 1)


def resolve(spec: DiceSpecification, random_source: RandomSource | None = None) -> Resolution:
    """Roll every group of a specification ``repeat_count`` times.

    Args:
        spec: Specification to resolve
        random_source: Callable returning a value in ``[1, sides]``;
            a fresh system source is used when omitted

    Returns:
        Resolution with one Step per repeat

    Raises:
        InvalidSpecificationError: If a group has count or sides below 1
        ResolutionError: If the random source fails or misbehaves
    """
    for group in spec.groups:
        if group.count < 1 or group.sides < 1:
            raise InvalidSpecificationError(
                f"Invalid dice group {group.count}d{group.sides}",
                field="count" if group.count < 1 else "sides",
            )

    source = random_source or system_random_source()
    steps = tuple(
        _resolve_step(spec.groups, source) for _ in range(spec.repeat_count)
    )
    return Resolution(steps=steps)


def roll(notation: str, random_source: RandomSource | None = None) -> Resolution:
    """Parse dice notation and resolve it.

    Args:
        notation: Dice notation string (e.g., "2d6+3")
        random_source: Optional random source, see ``resolve``

    Returns:
        Resolution with a single Step

    Raises:
        ParseError: If notation is invalid
    """
    return resolve(parse(notation), random_source)


def _resolve_step(groups: tuple[DiceGroup, ...], source: RandomSource) -> Step:
    rolled = tuple(_resolve_group(group, source) for group in groups)
    return Step(groups=rolled, total=sum(group.total for group in rolled))


def _resolve_group(group: DiceGroup, source: RandomSource) -> RolledGroup:
    rolls = tuple(_draw(group.sides, source) for _ in range(group.count))
    return RolledGroup(
        count=group.count,
        sides=group.sides,
        modifier=group.modifier,
        rolls=rolls,
        total=sum(rolls) + group.modifier,
    )


def _draw(sides: int, source: RandomSource) -> int:
    try:
        value = source(sides)
    except Exception as e:
        logger.exception("Random source failed", extra={"sides": sides})
        raise ResolutionError(f"Failed to roll a d{sides}") from e

    if type(value) is not int or not 1 <= value <= sides:
        raise ResolutionError(f"Rolled {value!r} on a d{sides}")
    return value
