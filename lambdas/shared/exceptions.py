"""Custom exceptions for the dice roll service."""


class DiceRollError(Exception):
    """Base exception for all dice roll errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        """Initialize exception with message.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class ParseError(DiceRollError):
    """Dice expression could not be parsed."""

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message
            expression: The expression being parsed (whitespace stripped)
            position: Offset of the offending character in the expression
        """
        self.expression = expression
        self.position = position
        super().__init__(message)


class MalformedExpressionError(ParseError):
    """Expression does not match the dice grammar."""


class DanglingModifierError(ParseError):
    """Modifier has no preceding dice group to attach to."""


class UnrecognizedTokenError(ParseError):
    """Token is neither a dice group nor a number."""


class InvalidSpecificationError(DiceRollError):
    """Dice specification has out-of-range values."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize invalid specification error.

        Args:
            message: Validation error message
            field: Optional field name that failed validation
        """
        self.field = field
        super().__init__(message)


class ResolutionError(DiceRollError):
    """Resolving an otherwise valid specification failed."""


class ConfigurationError(DiceRollError):
    """Configuration or environment error."""

    def __init__(self, message: str, config_key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
        """
        self.config_key = config_key
        super().__init__(message)
