"""
Lambda handler for bulk sticker uploads.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, parse_json_body, validate_request

from .models import BulkUploadRequest
from .service import BulkUploadService, status_for_result

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle bulk upload requests.

    Expected body:
    {
        "files": [{"filename": "party.gif", "file": "<base64>"}, ...]
    }

    Returns:
        201 when all files were added, 206 when some failed, 400 when none
        were added. The body lists created names and per-file failures.
    """
    user_id = get_user_id(event)
    if not user_id:
        return ResponseBuilder.unauthorized()

    try:
        body = parse_json_body(event)
    except ValueError as exc:
        return ResponseBuilder.bad_request(message=str(exc))

    is_valid, result = validate_request(BulkUploadRequest, body)
    if not is_valid:
        return result

    request: BulkUploadRequest = result
    outcome = BulkUploadService().upload_files(request.files, user_id=user_id)

    return ResponseBuilder.with_status(status_for_result(outcome), outcome.model_dump())
