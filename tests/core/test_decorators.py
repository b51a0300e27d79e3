import json
from http import HTTPStatus
from types import SimpleNamespace
from typing import Any, cast

import pytest

from core.models.errors import (
    BackendError,
    ConfigError,
    NameConflictError,
    NotFoundError,
    PermissionDeniedError,
    StickerServiceError,
    UnsupportedFormatError,
    ValidationError,
)
from core.utils.decorators import api_gateway_handler, status_for_error
from core.utils.response import JsonDict, ResponseBuilder


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    """Parse JSON body from API Gateway response."""
    body = resp.get("body")
    if not body:
        return {}
    return cast(dict[str, Any], json.loads(body))


def raising(exc: Exception):
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise exc

    return handler


def test_api_handler_success() -> None:
    """Successful handler execution returns response unchanged."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok(
            {"msg": "ok"},
            request_id=context.aws_request_id,
        )

    resp = handler({}, SimpleNamespace(aws_request_id="req-ok"))

    parsed = parse_body(resp)
    assert resp["statusCode"] == HTTPStatus.OK
    assert parsed["msg"] == "ok"
    assert parsed["request_id"] == "req-ok"


def test_api_handler_options_preflight() -> None:
    """OPTIONS request returns 204 with CORS headers."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:  # pragma: no cover
        raise AssertionError("Should not be called")

    resp = handler({"httpMethod": "OPTIONS"}, SimpleNamespace())

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert resp["body"] == ""
    assert "Access-Control-Allow-Origin" in resp["headers"]


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (NotFoundError(message="Sticker not found"), HTTPStatus.NOT_FOUND),
        (NameConflictError(message="Sticker name already exists"), HTTPStatus.CONFLICT),
        (PermissionDeniedError(message="denied"), HTTPStatus.FORBIDDEN),
        (ValidationError(message="bad"), HTTPStatus.BAD_REQUEST),
        (UnsupportedFormatError(message="bad format"), HTTPStatus.BAD_REQUEST),
        (ConfigError(message="unset"), HTTPStatus.INTERNAL_SERVER_ERROR),
        (BackendError(message="down"), HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_domain_errors_map_to_status(exc: StickerServiceError, status: HTTPStatus) -> None:
    resp = raising(exc)({}, SimpleNamespace(aws_request_id="req-domain"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == status
    assert parsed["error"] == exc.error_code
    assert parsed["message"] == exc.message
    assert parsed["request_id"] == "req-domain"


def test_unknown_domain_error_is_500() -> None:
    exc = StickerServiceError(message="odd", error_code="ODD")

    assert status_for_error(exc) == HTTPStatus.INTERNAL_SERVER_ERROR


def test_value_error_returns_400() -> None:
    """ValueError returns 400 with user-friendly message."""
    resp = raising(ValueError("Invalid input data"))({}, SimpleNamespace(aws_request_id="req-400"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["message"] == "Invalid input data"
    assert parsed["request_id"] == "req-400"


def test_type_error_returns_400() -> None:
    resp = raising(TypeError("wrong type"))({}, SimpleNamespace())

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST


def test_permission_error_returns_403() -> None:
    resp = raising(PermissionError("no access"))({}, SimpleNamespace(aws_request_id="req-403"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.FORBIDDEN
    assert parsed["message"] == "You don't have permission to perform this action."


def test_connection_error_returns_503() -> None:
    resp = raising(ConnectionError("db down"))({}, SimpleNamespace())
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.SERVICE_UNAVAILABLE
    assert "unable to connect" in parsed["message"].lower()


def test_unexpected_exception_returns_500() -> None:
    resp = raising(RuntimeError("boom"))({}, SimpleNamespace(aws_request_id="req-500"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert parsed["message"] == (
        "We're experiencing technical difficulties. Please try again in a few moments."
    )
    assert parsed["error"] == "INTERNAL_ERROR"
    assert parsed["request_id"] == "req-500"
