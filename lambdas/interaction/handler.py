"""Interaction Lambda handler for the ``/roll`` slash command."""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.event_handler.exceptions import BadRequestError
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from interaction.models import (
    Interaction,
    InteractionResponseType,
    InteractionType,
)
from interaction.service import UNKNOWN_ROLL_MESSAGE, error_message, roll_from_text

logger = Logger()
tracer = Tracer()
metrics = Metrics(namespace="DiceRoll")
app = APIGatewayRestResolver()


@app.post("/interactions")
@tracer.capture_method
def post_interaction() -> dict[str, Any]:
    """Answer a chat interaction.

    Pings are acknowledged; slash commands are rolled and answered with a
    channel message.

    Returns:
        200 response with the interaction reply
    """
    if not app.current_event.body:
        raise BadRequestError("Empty interaction payload")
    try:
        interaction = Interaction.model_validate(app.current_event.json_body)
    except (ValidationError, json.JSONDecodeError) as e:
        raise BadRequestError(f"Invalid interaction: {e}") from None

    if interaction.type == InteractionType.PING:
        return {"type": InteractionResponseType.PONG.value}
    if interaction.type != InteractionType.APPLICATION_COMMAND:
        raise BadRequestError(f"Unsupported interaction type {interaction.type}")

    options = interaction.data.options if interaction.data else []
    if options:
        message = roll_from_text(options[0].value)
    else:
        message = error_message(UNKNOWN_ROLL_MESSAGE)

    metric = "RejectedExpressions" if message.is_ephemeral else "RollsResolved"
    metrics.add_metric(name=metric, unit=MetricUnit.Count, value=1)
    logger.info(
        "Answered roll command",
        extra={"application_id": interaction.application_id, "ephemeral": message.is_ephemeral},
    )

    return {
        "type": InteractionResponseType.CHANNEL_MESSAGE.value,
        "data": message.model_dump(exclude_none=True),
    }


@logger.inject_lambda_context
@tracer.capture_lambda_handler
@metrics.log_metrics
def lambda_handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Main Lambda entry point."""
    return app.resolve(event, context)
