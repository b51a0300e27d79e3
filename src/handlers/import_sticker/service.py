"""
Business logic for importing stickers from remote URLs.

The image is downloaded with `requests`, then handed to the regular
upload workflow so that format, size, and name rules stay in one place.
"""

import requests
from aws_lambda_powertools import Logger

from core.models.errors import ImageDownloadError
from core.models.sticker import Sticker
from core.utils.constants import (
    CONTENT_TYPE_EXTENSION_MAP,
    IMPORT_TIMEOUT_SECONDS,
)
from core.utils.mime import detect_mime_type, extension_for_content_type
from handlers.upload_sticker.service import UploadService

logger = Logger(UTC=True)

DOWNLOAD_CHUNK_SIZE = 64 * 1024


class ImportService:
    """Application service that creates stickers from image URLs."""

    def __init__(
        self,
        *,
        upload_service: UploadService | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.upload_service = upload_service or UploadService()
        self.session = session or requests.Session()

    def download_image(self, url: str, *, max_bytes: int) -> tuple[bytes, str]:
        """Download an image, reading at most `max_bytes + 1` bytes.

        The extra byte lets the size check tell "exactly at the limit"
        apart from "over the limit" without buffering the whole body.

        Raises:
            ImageDownloadError: On transport errors, non-200 responses, or
                a content type that is not an image
        """
        try:
            response = self.session.get(url, stream=True, timeout=IMPORT_TIMEOUT_SECONDS)
        except requests.RequestException as exc:
            logger.warning("Image download failed", extra={"url": url, "error": str(exc)})
            raise ImageDownloadError(
                message=f"Failed to download image: {exc}",
                details={"url": url},
            ) from exc

        with response:
            if response.status_code != 200:
                raise ImageDownloadError(
                    message=f"Failed to download image: status {response.status_code}",
                    details={"url": url, "status": response.status_code},
                )

            content_type = response.headers.get("Content-Type", "")
            if not content_type.lower().startswith("image/"):
                raise ImageDownloadError(
                    message="URL does not point to an image",
                    details={"url": url, "content_type": content_type},
                )

            data = bytearray()
            try:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    data.extend(chunk)
                    if len(data) > max_bytes:
                        break
            except requests.RequestException as exc:
                raise ImageDownloadError(
                    message=f"Failed to read image: {exc}",
                    details={"url": url},
                ) from exc

        return bytes(data[: max_bytes + 1]), content_type

    @staticmethod
    def pick_extension(content_type: str, data: bytes) -> str:
        """Choose a file extension from the content type, then the image bytes."""
        base_type = content_type.split(";", 1)[0].strip().lower()
        if base_type in CONTENT_TYPE_EXTENSION_MAP:
            return CONTENT_TYPE_EXTENSION_MAP[base_type]

        return extension_for_content_type(detect_mime_type(data) or base_type)

    def import_sticker(
        self,
        *,
        name: str,
        url: str,
        user_id: str,
        location: str = "",
    ) -> Sticker:
        """Download an image and register it as a sticker.

        Raises:
            NameConflictError: If the name is taken
            ImageDownloadError: If the image cannot be downloaded
            ValidationError: If the downloaded image is rejected
        """
        self.upload_service.ensure_name_available(name)

        settings = self.upload_service.settings_store.current()
        data, content_type = self.download_image(
            url, max_bytes=settings.max_sticker_size_bytes
        )

        extension = self.pick_extension(content_type, data)
        logger.info(
            "Image downloaded for import",
            extra={"url": url, "size": len(data), "content_type": content_type},
        )

        return self.upload_service.upload_sticker(
            name=name,
            filename=f"sticker_{name}{extension}",
            file_data=data,
            user_id=user_id,
            location=location,
        )
