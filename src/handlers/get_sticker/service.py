"""
Business logic for sticker retrieval.

Looks up sticker metadata and resolves image bytes through whichever
storage backend holds them.
"""

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.infrastructure.storage.factory import build_image_storage
from core.models.errors import NotFoundError
from core.models.sticker import StickerView
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.storage_repository import StickerImageStorage

logger = Logger(UTC=True)


class GetService:
    """Application service responsible for reading a single sticker."""

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        storage: StickerImageStorage | None = None,
    ) -> None:
        self.catalog = catalog or StickerCatalog()
        self.storage = storage or build_image_storage()

    def get_sticker(self, sticker_id: str) -> StickerView:
        """Return sticker metadata with its image URL.

        Raises:
            NotFoundError: If the sticker does not exist
        """
        sticker = self.catalog.get_sticker(sticker_id)
        return StickerView.from_sticker(
            sticker, public_url=self.storage.public_url(sticker.filename)
        )

    def get_image(self, sticker_id: str) -> tuple[bytes, str]:
        """Return the sticker's image bytes and content type.

        Raises:
            NotFoundError: If the sticker or its image does not exist
            BackendError: If the image cannot be read
        """
        sticker = self.catalog.get_sticker(sticker_id)

        handle = sticker.file_id or sticker.filename
        if not handle:
            logger.warning("Sticker has no image handle", extra={"sticker_id": sticker_id})
            raise NotFoundError(
                message="Sticker image not found",
                details={"sticker_id": sticker_id},
            )

        data, content_type = self.storage.fetch_image(handle)
        logger.debug(
            "Sticker image fetched",
            extra={"sticker_id": sticker_id, "size": len(data)},
        )
        return data, content_type
