"""Business logic for sticker uploads.

This module coordinates validation, image storage, and catalog
registration for new stickers. The import and bulk upload handlers
reuse the same workflow.
"""

import base64
import binascii

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.config.settings import SettingsStore, get_settings_store
from core.infrastructure.storage.factory import build_image_storage
from core.models.errors import (
    FileSizeError,
    NameConflictError,
    UnsupportedFormatError,
    ValidationError,
)
from core.models.sticker import Sticker, StickerView
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.storage_repository import StickerImageStorage
from core.utils.constants import format_file_size
from core.utils.mime import file_extension

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for sticker uploads.

    This service orchestrates:
    - Name and file validation
    - Storing image bytes in the configured backend
    - Registering the sticker in the catalog
    """

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        storage: StickerImageStorage | None = None,
        settings_store: SettingsStore | None = None,
    ) -> None:
        """Initialize the upload service with required infrastructure dependencies."""
        self.settings_store = settings_store or get_settings_store()
        self.catalog = catalog or StickerCatalog()
        self.storage = storage or build_image_storage(self.settings_store)

    @staticmethod
    def decode_file(encoded: str) -> bytes:
        """Decode base64-encoded image data.

        Raises:
            ValidationError: If decoding fails
        """
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(
                message="Invalid image data",
                details={"encoding": "base64"},
            ) from exc

    def validate_image(self, *, filename: str, size: int) -> None:
        """Check the extension allow-list and size limit.

        Raises:
            UnsupportedFormatError: If the extension is not allowed
            FileSizeError: If the image is larger than the limit
        """
        settings = self.settings_store.current()

        extension = file_extension(filename)
        if extension not in settings.allowed_extensions:
            raise UnsupportedFormatError(
                message="File format not allowed",
                details={
                    "extension": extension,
                    "allowed_formats": settings.allowed_formats,
                },
            )

        if size > settings.max_sticker_size_bytes:
            raise FileSizeError(
                message="File size exceeds limit",
                details={
                    "size": size,
                    "max_size": settings.max_sticker_size_bytes,
                    "limit": format_file_size(settings.max_sticker_size_bytes),
                },
            )

    def ensure_name_available(self, name: str) -> None:
        """Raise NameConflictError if the name is used by a live sticker."""
        if self.catalog.is_name_taken(name):
            raise NameConflictError(
                message="Sticker name already exists",
                details={"name": name},
            )

    def upload_sticker(
        self,
        *,
        name: str,
        filename: str,
        file_data: bytes,
        user_id: str,
        location: str = "",
    ) -> Sticker:
        """Validate, store, and register a new sticker.

        The upload flow is:
        1. Reject blank or taken names
        2. Validate extension and size
        3. Store the image bytes
        4. Create the catalog record
        5. Remove the stored image if the record cannot be created

        Raises:
            ValidationError: If the name, format, or size is invalid
            NameConflictError: If the name is taken
            ConfigError: If the storage backend is not configured
            BackendError: If storage or persistence fails
        """
        name = name.strip()
        if not name:
            raise ValidationError(message="Name is required", details={"field": "name"})

        logger.debug("Starting sticker upload", extra={"user_id": user_id, "sticker_name": name})

        self.ensure_name_available(name)
        self.validate_image(filename=filename, size=len(file_data))

        stored = self.storage.store_image(
            file_data=file_data,
            filename=filename,
            owner_id=user_id,
            location=location,
        )

        try:
            sticker = self.catalog.create_sticker(
                name=name,
                creator_id=user_id,
                file_id=stored.file_id,
                filename=stored.filename,
            )
        except Exception:
            logger.exception("Failed to register sticker", extra={"sticker_name": name})

            # Best-effort cleanup to avoid orphaned images
            try:
                self.storage.remove_image(stored.handle)
            except Exception:
                logger.warning(
                    "Failed to clean up stored image after catalog failure",
                    extra={"handle": stored.handle},
                )
            raise

        logger.info(
            "Sticker uploaded successfully",
            extra={"sticker_id": sticker.id, "user_id": user_id},
        )
        return sticker

    def to_view(self, sticker: Sticker) -> StickerView:
        return StickerView.from_sticker(
            sticker,
            public_url=self.storage.public_url(sticker.filename),
        )
