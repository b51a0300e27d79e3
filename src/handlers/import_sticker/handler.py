"""
Lambda handler that imports a sticker from an image URL.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NameConflictError, ValidationError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, parse_json_body, validate_request

from .models import ImportStickerRequest
from .service import ImportService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle sticker import requests.

    Expected body:
    {
        "name": "party",
        "url": "https://example.com/party.gif"
    }
    """
    user_id = get_user_id(event)
    if not user_id:
        return ResponseBuilder.unauthorized()

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return ResponseBuilder.bad_request(message=str(exc))

    is_valid, result = validate_request(ImportStickerRequest, body)
    if not is_valid:
        return result

    request: ImportStickerRequest = result
    service = ImportService()

    try:
        sticker = service.import_sticker(
            name=request.name,
            url=str(request.url),
            user_id=user_id,
            location=request.channel_id,
        )

    except NameConflictError as exc:
        return ResponseBuilder.conflict(exc.message, error=exc.error_code)

    except ValidationError as exc:
        logger.warning(
            "Sticker import rejected",
            extra={"sticker_name": request.name, "error_code": exc.error_code},
        )
        return ResponseBuilder.bad_request(
            exc.message, error=exc.error_code, details=exc.details
        )

    return ResponseBuilder.created(service.upload_service.to_view(sticker).model_dump())
