"""
Pytest configuration and fixtures for sticker service tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup,
plus an in-memory key-value store and settings helpers.
"""

import logging
import os
from collections.abc import Callable, Iterator
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("STICKER_KV_TABLE_NAME", "sticker-kv-test")
os.environ.setdefault("STICKER_ATTACHMENT_BUCKET_NAME", "sticker-attachments-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "StickerServiceTests")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "sticker-service")
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "DEBUG")

from core.config.settings import StickerSettings, get_settings_store  # noqa: E402
from core.repositories.kv_store import KeyValueStore  # noqa: E402


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store used to exercise the catalog."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Restore default settings after every test."""
    store = get_settings_store()
    store.replace(StickerSettings())
    yield
    store.replace(StickerSettings())


@pytest.fixture
def configure_settings() -> Callable[..., StickerSettings]:
    """
    Helper to swap the process-wide settings.

    Usage:
        configure_settings(storage_path=str(tmp_path), server_url="https://x")
    """

    def _configure(**overrides: Any) -> StickerSettings:
        settings = StickerSettings(**overrides)
        get_settings_store().replace(settings)
        return settings

    return _configure


@pytest.fixture
def local_storage_settings(tmp_path, configure_settings) -> StickerSettings:
    """Local backend writing under tmp_path and served from a base URL."""
    return configure_settings(
        storage_backend="local",
        storage_path=str(tmp_path / "stickers"),
        server_url="https://cdn.example.com/stickers/",
        webhook_url="https://chat.example.com/hooks/abc",
        platform_api_url="https://chat.example.com/api/v4",
    )


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the key-value table for testing.

    moto discards the table when the mock context exits.
    """
    table_name = os.getenv("STICKER_KV_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = dynamodb_resource.create_table(
            TableName=table_name,
            BillingMode="PAY_PER_REQUEST",
            KeySchema=[{"AttributeName": "kv_key", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "kv_key", "AttributeType": "S"}],
        )
        table.wait_until_exists()

    yield table


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the attachment bucket for testing."""
    bucket_name = os.getenv("STICKER_ATTACHMENT_BUCKET_NAME")

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], dict[str, Any]]:
    """
    Helper to get an object from S3.

    Usage:
        obj = s3_get_object("attachments/abc")
    """

    def _get(key: str) -> dict[str, Any]:
        bucket_name = os.getenv("STICKER_ATTACHMENT_BUCKET_NAME")
        response: dict[str, Any] = s3_client.get_object(Bucket=bucket_name, Key=key)
        return response

    return _get


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_gif_binary() -> bytes:
    """Sample binary GIF data (1x1 transparent GIF)."""
    return (
        b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04"
        b"\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
    )


@pytest.fixture
def log_records() -> Iterator[list[logging.LogRecord]]:
    """
    Collect records emitted through the service logger.

    Usage:
        assert any(r.getMessage() == "Sticker deleted" for r in log_records)
    """
    records: list[logging.LogRecord] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    collector = _Collector(level=logging.DEBUG)
    service_logger = logging.getLogger(os.environ["POWERTOOLS_SERVICE_NAME"])
    service_logger.addHandler(collector)
    yield records
    service_logger.removeHandler(collector)
