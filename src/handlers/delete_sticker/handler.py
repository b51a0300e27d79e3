"""
Lambda handler responsible for sticker deletion.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError, PermissionDeniedError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import get_user_id, validate_request

from .models import DeleteStickerRequest
from .service import DeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Delete a sticker.

    Returns:
        204 when the sticker and its image are gone, 200 with
        `image_cleanup: "failed"` when only the catalog record was removed,
        403 when the caller is neither the creator nor an admin, 404 when
        the sticker does not exist.
    """
    user_id = get_user_id(event)
    if not user_id:
        return ResponseBuilder.unauthorized()

    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        DeleteStickerRequest,
        {"sticker_id": path_params.get("sticker_id")},
    )
    if not is_valid:
        return result

    request: DeleteStickerRequest = result

    try:
        outcome = DeleteService().delete_sticker(request.sticker_id, actor_id=user_id)

    except NotFoundError as exc:
        return ResponseBuilder.not_found(exc.message)

    except PermissionDeniedError as exc:
        return ResponseBuilder.forbidden(exc.message)

    if not outcome.image_cleaned:
        return ResponseBuilder.ok(
            {
                "sticker_id": outcome.sticker_id,
                "deleted": True,
                "image_cleanup": "failed",
            }
        )

    return ResponseBuilder.no_content()
