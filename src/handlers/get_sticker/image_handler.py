"""
Lambda handler serving sticker image bytes.

The route is public so that rendered posts can load images without
credentials.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError
from core.utils.constants import IMAGE_CACHE_CONTROL
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetStickerRequest
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return the sticker image as a base64-encoded binary response."""
    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        GetStickerRequest,
        {"sticker_id": path_params.get("sticker_id")},
    )
    if not is_valid:
        return result

    request: GetStickerRequest = result

    try:
        data, content_type = GetService().get_image(request.sticker_id)
    except NotFoundError as exc:
        logger.info(
            "Sticker image not found",
            extra={"sticker_id": request.sticker_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.not_found(exc.message)

    return ResponseBuilder.binary_response(
        data,
        content_type=content_type,
        headers={"Cache-Control": IMAGE_CACHE_CONTROL},
    )
