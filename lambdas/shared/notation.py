"""Parser for dice notation such as ``2d6+3`` or ``1d20-1+1d4``.

Grammar (whitespace is ignored, the ``d`` is case-insensitive)::

    expr     := group ('+' group)*
    group    := count 'd' sides modifier?
    modifier := ('+' | '-') number

Counts, sides and modifiers are ASCII positive integers of at most six
digits, without leading zeros. Longer digit runs are malformed.
Each dice group takes at most one modifier, which must directly follow it.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .exceptions import (
    DanglingModifierError,
    MalformedExpressionError,
    UnrecognizedTokenError,
)
from .models import DiceGroup, DiceSpecification

TOKEN_PATTERN = re.compile(
    r"(?P<sign>[+-])"
    r"|(?P<dice>[1-9][0-9]{0,5}d[1-9][0-9]{0,5}(?![0-9]))"
    r"|(?P<number>[1-9][0-9]{0,5}(?![0-9]))"
)


class TokenKind(str, Enum):
    """Kinds of token in a dice expression."""

    SIGN = "sign"
    DICE = "dice"
    NUMBER = "number"


@dataclass(frozen=True)
class Token:
    """A lexical token and its offset in the normalized expression."""

    kind: TokenKind
    text: str
    position: int


def normalize(text: str) -> str:
    """Strip all whitespace and lowercase the expression."""
    return "".join(text.split()).lower()


def tokenize(expression: str) -> list[Token]:
    """Split a normalized expression into tokens.

    Args:
        expression: Expression with whitespace already removed

    Returns:
        Tokens in source order

    Raises:
        MalformedExpressionError: If a character starts no valid token
    """
    tokens: list[Token] = []
    position = 0
    while position < len(expression):
        match = TOKEN_PATTERN.match(expression, position)
        if not match:
            raise MalformedExpressionError(
                f"Unexpected '{expression[position]}' at position {position}",
                expression=expression,
                position=position,
            )
        tokens.append(Token(TokenKind(match.lastgroup), match.group(), position))
        position = match.end()
    return tokens


def parse(text: str) -> DiceSpecification:
    """Parse dice notation into a specification.

    Args:
        text: Dice expression (e.g., "2d6+3", "1d4 + 1d6 - 2")

    Returns:
        DiceSpecification with one group per ``NdS`` term, in source order

    Raises:
        MalformedExpressionError: If the text does not match the grammar
        DanglingModifierError: If a modifier precedes every dice group
        UnrecognizedTokenError: If the tokenizer yields an unknown token kind

    Examples:
        >>> parse("1d4+1d6-2").groups
        (DiceGroup(count=1, sides=4, modifier=0), DiceGroup(count=1, sides=6, modifier=-2))
    """
    expression = normalize(text)
    if not expression:
        raise MalformedExpressionError("Empty dice expression", expression=expression, position=0)

    groups: tuple[DiceGroup, ...] = ()
    sign: Token | None = None
    has_modifier = False

    for token in tokenize(expression):
        if token.kind is TokenKind.SIGN:
            if sign is not None:
                raise MalformedExpressionError(
                    f"Expected a number or dice after '{sign.text}' at position {sign.position}",
                    expression=expression,
                    position=token.position,
                )
            sign = token
        elif token.kind is TokenKind.DICE:
            if not groups and sign is not None:
                raise MalformedExpressionError(
                    "Expression must start with a dice roll",
                    expression=expression,
                    position=sign.position,
                )
            if groups and (sign is None or sign.text != "+"):
                raise MalformedExpressionError(
                    f"Dice can only be added, '{token.text}' at position {token.position}",
                    expression=expression,
                    position=token.position,
                )
            count, sides = token.text.split("d")
            groups += (DiceGroup(count=int(count), sides=int(sides)),)
            sign = None
            has_modifier = False
        elif token.kind is TokenKind.NUMBER:
            if not groups:
                raise DanglingModifierError(
                    'No dice roll provided. Dice roll is in the form "1d4"',
                    expression=expression,
                    position=token.position,
                )
            if sign is None or has_modifier:
                raise MalformedExpressionError(
                    f"Only one modifier is allowed per dice roll, '{token.text}' "
                    f"at position {token.position}",
                    expression=expression,
                    position=token.position,
                )
            last = groups[-1]
            modifier = int(sign.text + token.text)
            groups = groups[:-1] + (
                DiceGroup(count=last.count, sides=last.sides, modifier=modifier),
            )
            sign = None
            has_modifier = True
        else:
            raise UnrecognizedTokenError(
                f"Unrecognized token '{token.text}' at position {token.position}",
                expression=expression,
                position=token.position,
            )

    if sign is not None:
        raise MalformedExpressionError(
            f"Expression ends with '{sign.text}'",
            expression=expression,
            position=sign.position,
        )

    return DiceSpecification(groups=groups)
