"""DynamoDB-backed implementation of KeyValueStore."""

from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.types import Binary
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.models.errors import BackendError
from core.repositories.kv_store import KeyValueStore
from core.utils.constants import (
    ERROR_CODE_KV_DELETE_FAILED,
    ERROR_CODE_KV_GET_FAILED,
    ERROR_CODE_KV_SET_FAILED,
)

KEY_ATTRIBUTE = "kv_key"
VALUE_ATTRIBUTE = "kv_value"

logger = Logger(UTC=True)


class DynamoDBKeyValueStore(KeyValueStore):
    """Opaque key-value storage on a single DynamoDB table.

    Each key is one item: partition key `kv_key`, binary attribute
    `kv_value`. All boto3 errors are translated into BackendError.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def get(self, key: str) -> bytes | None:
        logger.debug("Reading key", extra={"key": key})

        try:
            response = self._db.get_item(key={KEY_ATTRIBUTE: key})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"key": key})
            raise BackendError(
                message="Unable to read from the sticker store",
                error_code=ERROR_CODE_KV_GET_FAILED,
                details={"key": key},
            ) from exc

        item: dict[str, Any] | None = response.get("Item")
        if item is None or VALUE_ATTRIBUTE not in item:
            return None

        value = item[VALUE_ATTRIBUTE]
        if isinstance(value, Binary):
            return bytes(value.value)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode("utf-8")

        raise BackendError(
            message="Stored value has an unexpected type",
            error_code=ERROR_CODE_KV_GET_FAILED,
            details={"key": key, "type": type(value).__name__},
        )

    def set(self, key: str, value: bytes) -> None:
        logger.debug("Writing key", extra={"key": key, "size": len(value)})

        try:
            self._db.put_item(item={KEY_ATTRIBUTE: key, VALUE_ATTRIBUTE: Binary(value)})
        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"key": key})
            raise BackendError(
                message="Unable to write to the sticker store",
                error_code=ERROR_CODE_KV_SET_FAILED,
                details={"key": key},
            ) from exc

    def delete(self, key: str) -> None:
        logger.debug("Deleting key", extra={"key": key})

        try:
            self._db.delete_item(key={KEY_ATTRIBUTE: key})
        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra={"key": key})
            raise BackendError(
                message="Unable to delete from the sticker store",
                error_code=ERROR_CODE_KV_DELETE_FAILED,
                details={"key": key},
            ) from exc
