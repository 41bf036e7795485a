"""Shared dice notation, rolling and formatting for the dice roll Lambdas."""

from .config import Config
from .dice import RandomSource, resolve, roll
from .exceptions import (
    ConfigurationError,
    DanglingModifierError,
    DiceRollError,
    InvalidSpecificationError,
    MalformedExpressionError,
    ParseError,
    ResolutionError,
    UnrecognizedTokenError,
)
from .formatting import format_step
from .models import (
    DiceGroup,
    DiceSpecification,
    Resolution,
    RolledGroup,
    Step,
)
from .notation import parse

__all__ = [
    # Config
    "Config",
    # Engine
    "RandomSource",
    "format_step",
    "parse",
    "resolve",
    "roll",
    # Exceptions
    "ConfigurationError",
    "DanglingModifierError",
    "DiceRollError",
    "InvalidSpecificationError",
    "MalformedExpressionError",
    "ParseError",
    "ResolutionError",
    "UnrecognizedTokenError",
    # Models
    "DiceGroup",
    "DiceSpecification",
    "Resolution",
    "RolledGroup",
    "Step",
]
