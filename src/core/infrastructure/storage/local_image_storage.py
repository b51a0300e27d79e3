"""Local-filesystem implementation of StickerImageStorage.

Images are written under the configured storage path and served by an
external web server at the configured base URL. Settings are read on
every call so a reloaded configuration takes effect immediately.
"""

from pathlib import Path, PurePosixPath

from aws_lambda_powertools import Logger

from core.config.settings import SettingsStore, get_settings_store
from core.models.errors import BackendError, ConfigError, NotFoundError
from core.models.sticker import generate_sticker_id
from core.repositories.storage_repository import StickerImageStorage, StoredImage
from core.utils.constants import (
    ERROR_CODE_IMAGE_DELETE_FAILED,
    ERROR_CODE_IMAGE_FETCH_FAILED,
    ERROR_CODE_IMAGE_STORE_FAILED,
    ERROR_CODE_STORAGE_NOT_CONFIGURED,
    LOCAL_STORAGE_DIR_MODE,
)
from core.utils.mime import content_type_for_filename

logger = Logger(UTC=True)


class LocalImageStorage(StickerImageStorage):
    """Sticker images stored as files in a local directory."""

    def __init__(self, settings_store: SettingsStore | None = None) -> None:
        self._settings_store = settings_store or get_settings_store()

    def _root(self) -> Path | None:
        storage_path = self._settings_store.current().storage_path
        return Path(storage_path) if storage_path else None

    @staticmethod
    def _is_plain_filename(filename: str) -> bool:
        return PurePosixPath(filename).name == filename and filename not in {".", ".."}

    def store_image(
        self,
        *,
        file_data: bytes,
        filename: str,
        owner_id: str = "",
        location: str = "",
    ) -> StoredImage:
        """Write bytes under a freshly generated filename.

        Raises:
            ConfigError: If no storage path is configured
            BackendError: If the directory or file cannot be written
        """
        root = self._root()
        if root is None:
            raise ConfigError(
                message="Sticker storage path not configured",
                error_code=ERROR_CODE_STORAGE_NOT_CONFIGURED,
            )

        stored_name = generate_sticker_id() + PurePosixPath(filename).suffix
        full_path = root / stored_name

        logger.debug(
            "Writing sticker image",
            extra={"path": str(full_path), "size": len(file_data), "owner_id": owner_id},
        )

        try:
            root.mkdir(mode=LOCAL_STORAGE_DIR_MODE, parents=True, exist_ok=True)
            full_path.write_bytes(file_data)
        except OSError as exc:
            logger.error("Failed to write sticker image", extra={"path": str(full_path)})
            raise BackendError(
                message="Failed to write sticker file",
                error_code=ERROR_CODE_IMAGE_STORE_FAILED,
                details={"filename": stored_name},
            ) from exc

        logger.info("Sticker image stored", extra={"stored_filename": stored_name})
        return StoredImage(filename=stored_name)

    def fetch_image(self, handle: str) -> tuple[bytes, str]:
        root = self._root()
        if root is None:
            raise ConfigError(
                message="Sticker storage path not configured",
                error_code=ERROR_CODE_STORAGE_NOT_CONFIGURED,
            )

        if not handle or not self._is_plain_filename(handle):
            raise NotFoundError(
                message="Sticker image not found",
                details={"filename": handle},
            )

        try:
            data = (root / handle).read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(
                message="Sticker image not found",
                details={"filename": handle},
            ) from exc
        except OSError as exc:
            logger.error("Failed to read sticker image", extra={"stored_filename": handle})
            raise BackendError(
                message="Failed to read sticker file",
                error_code=ERROR_CODE_IMAGE_FETCH_FAILED,
                details={"filename": handle},
            ) from exc

        return data, content_type_for_filename(handle)

    def remove_image(self, handle: str) -> None:
        """Delete a stored file; a no-op when unconfigured or given no filename.

        Raises:
            NotFoundError: If the file does not exist
            BackendError: If the filesystem refuses the delete
        """
        root = self._root()
        if root is None or not handle:
            return

        if not self._is_plain_filename(handle):
            raise NotFoundError(
                message="Sticker image not found",
                details={"filename": handle},
            )

        try:
            (root / handle).unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(
                message="Sticker image not found",
                details={"filename": handle},
            ) from exc
        except OSError as exc:
            logger.error("Failed to delete sticker image", extra={"stored_filename": handle})
            raise BackendError(
                message="Failed to delete sticker file",
                error_code=ERROR_CODE_IMAGE_DELETE_FAILED,
                details={"filename": handle},
            ) from exc

        logger.info("Sticker image deleted", extra={"stored_filename": handle})

    def public_url(self, handle: str) -> str:
        server_url = self._settings_store.current().server_url
        if not server_url or not handle:
            return ""

        return server_url.rstrip("/") + "/" + handle
