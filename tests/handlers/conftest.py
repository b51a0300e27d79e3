import base64
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from core.catalog.sticker_catalog import StickerCatalog
from core.infrastructure.storage.local_image_storage import LocalImageStorage
from core.models.sticker import Sticker


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def catalog(dynamodb_table) -> StickerCatalog:
    """Catalog on the mocked DynamoDB key-value table."""
    return StickerCatalog()


@pytest.fixture
def create_sticker(
    catalog, local_storage_settings, sample_image_binary
) -> Callable[..., Sticker]:
    """
    Helper to register a sticker with an image on local storage.

    Usage:
        sticker = create_sticker("party", creator_id="u1")
    """
    storage = LocalImageStorage()

    def _create(name: str, *, creator_id: str = "u1") -> Sticker:
        stored = storage.store_image(file_data=sample_image_binary, filename=f"{name}.png")
        return catalog.create_sticker(
            name=name, creator_id=creator_id, filename=stored.filename
        )

    return _create


@pytest.fixture
def api_event() -> Callable[..., dict[str, Any]]:
    """
    Helper to build API Gateway proxy events.

    Usage:
        event = api_event(body={"name": "x"}, user_id="u1")
    """

    def _event(
        *,
        body: dict[str, Any] | None = None,
        user_id: str | None = "u1",
        path_params: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if user_id:
            headers["X-User-Id"] = user_id

        return {
            "httpMethod": "POST" if body is not None else "GET",
            "headers": headers,
            "body": json.dumps(body) if body is not None else None,
            "pathParameters": path_params,
            "queryStringParameters": query,
        }

    return _event


@pytest.fixture
def encoded_png(sample_image_binary) -> str:
    return base64.b64encode(sample_image_binary).decode("utf-8")
