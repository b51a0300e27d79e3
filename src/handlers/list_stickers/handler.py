"""
Lambda handler responsible for listing and searching stickers.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, validate_request

from .models import ListStickersRequest, ListStickersResponse
from .service import ListService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list stickers.

    Supports:
    - `q` query parameter for case-insensitive name search
    """
    if not get_user_id(event):
        return ResponseBuilder.unauthorized()

    params = event.get("queryStringParameters") or {}

    is_valid, result = validate_request(ListStickersRequest, params)
    if not is_valid:
        return result

    request: ListStickersRequest = result
    stickers, total = ListService().list_stickers(request.q)

    response = ListStickersResponse(stickers=stickers, total=total)
    return ResponseBuilder.ok(response.model_dump())
