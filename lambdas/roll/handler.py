"""Roll Lambda handler for the structured and notation roll endpoints."""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.event_handler.exceptions import (
    BadRequestError,
    InternalServerError,
)
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from roll.models import NotationRequest, RollPayload
from roll.service import RollService
from shared.config import get_config
from shared.exceptions import InvalidSpecificationError, ParseError, ResolutionError
from shared.formatting import format_step

logger = Logger()
tracer = Tracer()
metrics = Metrics(namespace="DiceRoll")

config = get_config()
cors_config = CORSConfig(allow_origin=config.allowed_origin, allow_headers=["Content-Type"])
app = APIGatewayRestResolver(cors=cors_config)

_service: RollService | None = None


def get_service() -> RollService:
    """Get or create the roll service singleton."""
    global _service
    if _service is None:
        _service = RollService()
    return _service


def reset_service() -> None:
    """Reset the service instance (for testing)."""
    global _service
    _service = None


def get_body() -> Any:
    """Decode the JSON request body.

    Raises:
        BadRequestError: If the body is empty or not valid JSON
    """
    if not app.current_event.body:
        raise BadRequestError("Empty dice roll payload")
    try:
        return app.current_event.json_body
    except json.JSONDecodeError:
        raise BadRequestError("Malformed JSON payload provided") from None


@app.post("/roll")
@tracer.capture_method
def roll_payload() -> dict[str, Any]:
    """Roll a structured payload.

    Returns:
        200 response with every resolved step
    """
    try:
        payload = RollPayload.model_validate(get_body())
    except ValidationError as e:
        logger.warning("Invalid roll payload", extra={"errors": e.errors(include_url=False)})
        raise BadRequestError(f"Invalid JSON payload provided: {e}") from None

    try:
        resolution = get_service().roll_payload(payload)
    except ResolutionError:
        logger.exception("Failed to process roll payload")
        raise InternalServerError("Failed to process roll payload") from None

    metrics.add_metric(name="RollsResolved", unit=MetricUnit.Count, value=len(resolution.steps))
    return resolution.to_response()


@app.post("/roll/notation")
@tracer.capture_method
def roll_notation() -> dict[str, Any]:
    """Roll a dice expression such as ``2d6+3``.

    Returns:
        200 response with the resolved step and its display string
    """
    try:
        request = NotationRequest.model_validate(get_body())
    except ValidationError as e:
        raise BadRequestError(f"Invalid JSON payload provided: {e}") from None

    try:
        resolution = get_service().roll_notation(request.expression)
    except (ParseError, InvalidSpecificationError) as e:
        logger.info("Rejected dice expression", extra={"expression": request.expression})
        metrics.add_metric(name="RejectedExpressions", unit=MetricUnit.Count, value=1)
        raise BadRequestError(e.message) from None
    except ResolutionError:
        logger.exception("Failed to process dice expression")
        raise InternalServerError("Failed to process roll payload") from None

    metrics.add_metric(name="RollsResolved", unit=MetricUnit.Count, value=1)
    return {**resolution.to_response(), "display": format_step(resolution.steps[0])}


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@tracer.capture_lambda_handler
@metrics.log_metrics
def lambda_handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Main Lambda entry point."""
    return app.resolve(event, context)
