"""
Business logic for sticker deletion.

Deletion order:
1. Resolve the sticker (404 if missing)
2. Check the access policy (403 if denied)
3. Remove the catalog record
4. Remove the image (best-effort)

A failed image cleanup never rolls back the catalog delete; it is logged
and reported to the caller instead.
"""

from aws_lambda_powertools import Logger

from core.catalog.sticker_catalog import StickerCatalog
from core.infrastructure.storage.factory import build_image_storage
from core.models.errors import (
    NotFoundError,
    PermissionDeniedError,
    StickerServiceError,
)
from core.models.sticker import Sticker
from core.policies.access_policy import StickerAccessPolicy
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.storage_repository import StickerImageStorage

from .models import DeleteStickerResult

logger = Logger(UTC=True)


class DeleteService:
    """Application service responsible for sticker deletion."""

    def __init__(
        self,
        *,
        catalog: StickerCatalogRepository | None = None,
        storage: StickerImageStorage | None = None,
        policy: StickerAccessPolicy | None = None,
    ) -> None:
        self.catalog = catalog or StickerCatalog()
        self.storage = storage or build_image_storage()
        self.policy = policy or StickerAccessPolicy()

    def delete_sticker(self, sticker_id: str, *, actor_id: str) -> DeleteStickerResult:
        """Delete a sticker by id on behalf of `actor_id`.

        Raises:
            NotFoundError: If the sticker or the actor does not exist
            PermissionDeniedError: If the actor may not delete it
            BackendError: If the catalog cannot be updated
        """
        return self._delete(self.catalog.get_sticker(sticker_id), actor_id=actor_id)

    def delete_sticker_by_name(self, name: str, *, actor_id: str) -> DeleteStickerResult:
        """Delete a sticker by (normalized) name on behalf of `actor_id`."""
        return self._delete(self.catalog.get_sticker_by_name(name), actor_id=actor_id)

    def _delete(self, sticker: Sticker, *, actor_id: str) -> DeleteStickerResult:
        if not self.policy.can_delete(actor_id, sticker):
            logger.warning(
                "Sticker delete denied",
                extra={"sticker_id": sticker.id, "actor_id": actor_id},
            )
            raise PermissionDeniedError(
                message="You can only delete stickers that you created",
                details={"sticker_id": sticker.id},
            )

        self.catalog.delete_sticker(sticker.id)

        return DeleteStickerResult(
            sticker_id=sticker.id,
            name=sticker.name,
            image_cleaned=self._remove_image(sticker),
        )

    def _remove_image(self, sticker: Sticker) -> bool:
        handle = sticker.file_id or sticker.filename
        if not handle:
            return True

        try:
            self.storage.remove_image(handle)
        except NotFoundError:
            # Already gone
            return True
        except StickerServiceError as exc:
            logger.error(
                "Image cleanup failed after sticker delete",
                extra={
                    "sticker_id": sticker.id,
                    "handle": handle,
                    "error_code": exc.error_code,
                },
            )
            return False

        return True
