"""Chat roll service - turns slash-command text into a reply message."""

from aws_lambda_powertools import Logger

from interaction.models import EPHEMERAL_FLAG, ChatMessage
from shared.dice import RandomSource, resolve
from shared.exceptions import (
    DanglingModifierError,
    InvalidSpecificationError,
    ParseError,
    ResolutionError,
)
from shared.formatting import format_step
from shared.limits import check_limits
from shared.notation import parse

logger = Logger()

UNKNOWN_ROLL_MESSAGE = "Sorry bud, I don't know how to roll that..."
MISPLACED_MODIFIER_MESSAGE = "Failed to build roll, make sure modifiers are at the end of the roll"
FAILED_ROLL_MESSAGE = "That roll is messed up..."


def error_message(content: str) -> ChatMessage:
    """Build an ephemeral error reply."""
    return ChatMessage(content=content, flags=EPHEMERAL_FLAG)


def roll_from_text(text: str, random_source: RandomSource | None = None) -> ChatMessage:
    """Roll a dice expression and render the first step for chat.

    Never raises for bad input; every failure becomes an ephemeral reply.

    Args:
        text: Dice expression typed by the user
        random_source: Optional random source, see ``shared.dice.resolve``

    Returns:
        ChatMessage with the rendered roll, or an ephemeral error sentinel
    """
    try:
        spec = check_limits(parse(text))
    except DanglingModifierError as e:
        logger.info("Rejected dice expression", extra={"text": text, "reason": e.message})
        return error_message(MISPLACED_MODIFIER_MESSAGE)
    except ParseError as e:
        logger.info("Rejected dice expression", extra={"text": text, "reason": e.message})
        return error_message(UNKNOWN_ROLL_MESSAGE)
    except InvalidSpecificationError as e:
        logger.info("Dice expression out of bounds", extra={"text": text, "reason": e.message})
        return error_message(e.message)

    try:
        resolution = resolve(spec, random_source)
    except ResolutionError:
        logger.exception("Failed to resolve dice expression", extra={"text": text})
        return error_message(FAILED_ROLL_MESSAGE)

    return ChatMessage(content=format_step(resolution.steps[0]))
