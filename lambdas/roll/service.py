"""Roll service - business logic for the roll API."""

from aws_lambda_powertools import Logger

from roll.models import RollPayload
from shared.dice import RandomSource, resolve
from shared.limits import check_limits
from shared.models import Resolution
from shared.notation import parse

logger = Logger()


class RollService:
    """Service layer for resolving roll requests."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """Initialize roll service.

        Args:
            random_source: Optional fixed random source; each roll gets a
                fresh system source when omitted
        """
        self.random_source = random_source

    def roll_payload(self, payload: RollPayload) -> Resolution:
        """Resolve a validated structured payload.

        Args:
            payload: Structured roll request

        Returns:
            Resolution with ``payload.count`` steps

        Raises:
            ResolutionError: If rolling fails unexpectedly
        """
        spec = payload.to_specification()
        resolution = resolve(spec, self.random_source)
        logger.info(
            "Resolved roll payload",
            extra={"groups": len(spec.groups), "steps": spec.repeat_count},
        )
        return resolution

    def roll_notation(self, expression: str) -> Resolution:
        """Parse, bound-check and resolve a dice expression.

        Args:
            expression: Dice notation (e.g., "2d6+3")

        Returns:
            Resolution with a single step

        Raises:
            ParseError: If the expression is invalid
            InvalidSpecificationError: If a value exceeds the service bounds
            ResolutionError: If rolling fails unexpectedly
        """
        spec = check_limits(parse(expression))
        resolution = resolve(spec, self.random_source)
        logger.info("Resolved dice expression", extra={"expression": expression})
        return resolution
