"""
Lambda handler that posts a sticker to a channel.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError, PermissionDeniedError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, parse_json_body, validate_request

from .models import SendStickerRequest
from .service import SendService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle send sticker requests.

    Expected body:
    {
        "channel_id": "town-square",
        "sticker_id": "<id>",
        "root_id": "optional"
    }
    """
    user_id = get_user_id(event)
    if not user_id:
        return ResponseBuilder.unauthorized()

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return ResponseBuilder.bad_request(message=str(exc))

    is_valid, result = validate_request(SendStickerRequest, body)
    if not is_valid:
        return result

    request: SendStickerRequest = result

    try:
        post = SendService().send_sticker(
            request.sticker_id,
            channel_id=request.channel_id,
            user_id=user_id,
            root_id=request.root_id,
        )
    except NotFoundError:
        return ResponseBuilder.not_found("Sticker not found")
    except PermissionDeniedError as exc:
        logger.info(
            "Send refused",
            extra={"channel_id": request.channel_id, "user_id": user_id},
        )
        return ResponseBuilder.forbidden(exc.message)

    return ResponseBuilder.created(post)
