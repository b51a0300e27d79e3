"""
Lambda handler responsible for sticker upload and catalog registration.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NameConflictError, ValidationError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, parse_json_body, validate_request

from .models import UploadStickerRequest
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle sticker upload requests.

    Expected body:
    {
        "name": "party",
        "filename": "party.gif",
        "file": "<base64>",
        "channel_id": "optional"
    }

    Returns:
        201 with the created sticker, 401 without a user, 409 on a name
        conflict, 400 on invalid format or size.
    """
    logger.info(
        "Received sticker upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    user_id = get_user_id(event)
    if not user_id:
        return ResponseBuilder.unauthorized()

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        logger.warning("Invalid JSON body received", extra={"error": str(exc)})
        return ResponseBuilder.bad_request(message=str(exc))

    is_valid, result = validate_request(UploadStickerRequest, body)
    if not is_valid:
        return result

    request: UploadStickerRequest = result
    service = UploadService()

    try:
        sticker = service.upload_sticker(
            name=request.name,
            filename=request.filename,
            file_data=service.decode_file(request.file),
            user_id=user_id,
            location=request.channel_id,
        )

    except NameConflictError as exc:
        logger.info("Sticker name conflict", extra={"sticker_name": request.name})
        return ResponseBuilder.conflict(exc.message, error=exc.error_code)

    except ValidationError as exc:
        logger.warning(
            "Sticker upload rejected",
            extra={"sticker_name": request.name, "error_code": exc.error_code},
        )
        return ResponseBuilder.bad_request(
            exc.message, error=exc.error_code, details=exc.details
        )

    return ResponseBuilder.created(service.to_view(sticker).model_dump())
