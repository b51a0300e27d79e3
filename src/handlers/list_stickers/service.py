"""
Business logic for sticker listing and search.
"""

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.infrastructure.storage.factory import build_image_storage
from core.models.sticker import StickerView
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.storage_repository import StickerImageStorage

logger = Logger(UTC=True)


class ListService:
    """Application service responsible for listing stickers."""

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        storage: StickerImageStorage | None = None,
    ) -> None:
        self.catalog = catalog or StickerCatalog()
        self.storage = storage or build_image_storage()

    def list_stickers(self, query: str = "") -> tuple[list[StickerView], int]:
        """Return stickers matching the query (all stickers when blank)."""
        listing = self.catalog.search_stickers(query)

        views = [
            StickerView.from_sticker(
                sticker, public_url=self.storage.public_url(sticker.filename)
            )
            for sticker in listing.stickers
        ]

        logger.info(
            "Stickers listed",
            extra={"query": query, "count": listing.total},
        )
        return views, listing.total
