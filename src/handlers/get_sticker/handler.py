"""
Lambda handler responsible for sticker metadata lookup.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, validate_request

from .models import GetStickerRequest
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return a sticker by id, including a URL serving its image."""
    if not get_user_id(event):
        return ResponseBuilder.unauthorized()

    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        GetStickerRequest,
        {"sticker_id": path_params.get("sticker_id")},
    )
    if not is_valid:
        return result

    request: GetStickerRequest = result

    try:
        view = GetService().get_sticker(request.sticker_id)
    except NotFoundError:
        logger.info("Sticker not found", extra={"sticker_id": request.sticker_id})
        return ResponseBuilder.not_found(f"Sticker not found: {request.sticker_id}")

    return ResponseBuilder.ok(view.model_dump())
