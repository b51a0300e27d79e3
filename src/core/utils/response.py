"""
API Gateway proxy responses for the sticker handlers.

JSON bodies carry an optional `request_id`; error bodies always carry
`error`, `message` and `timestamp`. Image bytes go out base64-encoded
with `isBase64Encoded` set so API Gateway decodes them for the client.
"""

from __future__ import annotations

import base64
import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
    EXPOSE_HEADERS,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    CORS: dict[str, str] = {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }

    @staticmethod
    def headers(
        content_type: str = DEFAULT_CONTENT_TYPE,
        cors_origin: str | None = None,
    ) -> dict[str, str]:
        headers = {"Content-Type": content_type, **ResponseBuilder.CORS}
        if cors_origin:
            headers["Access-Control-Allow-Origin"] = cors_origin
        return headers

    # ------------------------------------------------------------------
    # Success
    # ------------------------------------------------------------------

    @staticmethod
    def with_status(
        status: HTTPStatus,
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """JSON response with any status; bulk uploads use 206 for partial success."""
        payload = dict(body)
        if request_id:
            payload["request_id"] = request_id

        return {
            "statusCode": status.value,
            "headers": ResponseBuilder.headers(cors_origin=cors_origin),
            "body": json.dumps(payload),
        }

    @staticmethod
    def ok(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.with_status(HTTPStatus.OK, body, **kwargs)

    @staticmethod
    def created(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.with_status(HTTPStatus.CREATED, body, **kwargs)

    @staticmethod
    def no_content(*, cors_origin: str | None = None) -> JsonDict:
        """Empty 204, also used to answer CORS preflight requests."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": ResponseBuilder.headers(cors_origin=cors_origin),
            "body": "",
        }

    @staticmethod
    def binary_response(
        content: bytes,
        *,
        content_type: str,
        headers: dict[str, str] | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        response_headers = ResponseBuilder.headers(content_type, cors_origin)
        response_headers["Content-Length"] = str(len(content))
        response_headers.update(headers or {})

        return {
            "statusCode": HTTPStatus.OK.value,
            "headers": response_headers,
            "body": base64.b64encode(content).decode("utf-8"),
            "isBase64Encoded": True,
        }

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Error body; `error` falls back to the status name, e.g. NOT_FOUND."""
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return ResponseBuilder.with_status(
            status, payload, request_id=request_id, cors_origin=cors_origin
        )

    @staticmethod
    def bad_request(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.BAD_REQUEST, message=message, **kwargs)

    @staticmethod
    def validation_error(
        *,
        message: str,
        details: JsonDict | list[Any] | None = None,
        **kwargs: Any,
    ) -> JsonDict:
        """422 for request bodies that fail model validation."""
        return ResponseBuilder.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            error=ERROR_CODE_VALIDATION_FAILED,
            message=message,
            details={"errors": details} if isinstance(details, list) else details,
            **kwargs,
        )

    @staticmethod
    def unauthorized(message: str = "Unauthorized", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.UNAUTHORIZED, message=message, **kwargs)

    @staticmethod
    def forbidden(message: str = "Forbidden", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.FORBIDDEN, message=message, **kwargs)

    @staticmethod
    def not_found(message: str = "Resource not found", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.NOT_FOUND, message=message, **kwargs)

    @staticmethod
    def conflict(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(status=HTTPStatus.CONFLICT, message=message, **kwargs)

    @staticmethod
    def internal_error(message: str = "Internal server error", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR, message=message, **kwargs
        )
