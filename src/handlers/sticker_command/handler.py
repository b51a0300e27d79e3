"""
Lambda handler for the `/sticker` slash command.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, parse_json_body, validate_request

from .models import StickerCommandRequest
from .service import CommandService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Execute a slash command.

    Expected body:
    {
        "command": "/sticker party",
        "channel_id": "town-square"
    }

    The invoking user comes from the user header, or from `user_id` in
    the body when the platform sends it there.
    """
    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return ResponseBuilder.bad_request(message=str(exc))

    is_valid, result = validate_request(StickerCommandRequest, body)
    if not is_valid:
        return result

    request: StickerCommandRequest = result

    user_id = get_user_id(event) or request.user_id
    if not user_id:
        return ResponseBuilder.unauthorized()

    response = CommandService().execute(
        request.command,
        user_id=user_id,
        channel_id=request.channel_id,
    )
    return ResponseBuilder.ok(response.model_dump())
