"""Platform-attachment implementation of StickerImageStorage.

Image bytes are handed to a file-storage capability that returns an
opaque file id. The catalog keeps only that id; serving and cleaning up
the file is the platform's job. `S3FileUploader` provides the capability
on top of an S3 bucket.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote, unquote
import uuid

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import BackendError, NotFoundError
from core.repositories.storage_repository import StickerImageStorage, StoredImage
from core.utils.constants import (
    ERROR_CODE_IMAGE_FETCH_FAILED,
    ERROR_CODE_IMAGE_STORE_FAILED,
)
from core.utils.mime import content_type_for_filename

logger = Logger(UTC=True)


@dataclass(frozen=True)
class FileInfo:
    """Description of an uploaded attachment."""

    id: str
    name: str
    location: str
    mime_type: str
    size: int


class FileUploader(Protocol):
    """File-storage capability of the hosting platform."""

    def upload(self, *, data: bytes, location: str, filename: str) -> FileInfo: ...

    def download(self, file_id: str) -> tuple[bytes, str]: ...


class S3FileUploader:
    """Attachment storage on an S3 bucket, one object per file id."""

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    @staticmethod
    def object_key(file_id: str) -> str:
        return f"attachments/{file_id}"

    def upload(self, *, data: bytes, location: str, filename: str) -> FileInfo:
        file_id = uuid.uuid4().hex
        mime_type = content_type_for_filename(filename)

        self._s3.put_object(
            key=self.object_key(file_id),
            body=data,
            content_type=mime_type,
            metadata={
                "location": quote(location, safe=""),
                "filename": quote(filename, safe=""),
            },
        )

        return FileInfo(
            id=file_id,
            name=filename,
            location=location,
            mime_type=mime_type,
            size=len(data),
        )

    def download(self, file_id: str) -> tuple[bytes, str]:
        response: Mapping = self._s3.get_object(key=self.object_key(file_id))
        body: bytes = response["Body"].read()
        content_type = response.get("ContentType") or content_type_for_filename(
            unquote(response.get("Metadata", {}).get("filename", ""))
        )
        return body, content_type


class AttachmentImageStorage(StickerImageStorage):
    """Sticker images delegated to platform attachment storage."""

    def __init__(self, uploader: FileUploader | None = None) -> None:
        self._uploader: FileUploader = uploader if uploader is not None else S3FileUploader()

    def store_image(
        self,
        *,
        file_data: bytes,
        filename: str,
        owner_id: str = "",
        location: str = "",
    ) -> StoredImage:
        logger.debug(
            "Uploading sticker attachment",
            extra={"owner_id": owner_id, "location": location, "size": len(file_data)},
        )

        try:
            info = self._uploader.upload(data=file_data, location=location, filename=filename)
        except ClientError as exc:
            logger.error("Attachment upload failed", extra={"location": location})
            raise BackendError(
                message="Failed to upload file",
                error_code=ERROR_CODE_IMAGE_STORE_FAILED,
                details={"filename": filename},
            ) from exc

        logger.info("Sticker attachment uploaded", extra={"file_id": info.id})
        return StoredImage(file_id=info.id)

    def fetch_image(self, handle: str) -> tuple[bytes, str]:
        if not handle:
            raise NotFoundError(message="Sticker image not found", details={"file_id": handle})

        try:
            return self._uploader.download(handle)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code")
            if code in {"NoSuchKey", "404"}:
                raise NotFoundError(
                    message="Sticker image not found",
                    details={"file_id": handle},
                ) from exc

            logger.error("Attachment download failed", extra={"file_id": handle})
            raise BackendError(
                message="Failed to get file",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"file_id": handle},
            ) from exc

    def remove_image(self, handle: str) -> None:
        """Attachments are owned by the platform; nothing is deleted here."""
        logger.debug("Leaving attachment cleanup to the platform", extra={"file_id": handle})
