"""Selects the image storage backend from configuration."""

from core.config.settings import SettingsStore, get_settings_store
from core.infrastructure.aws.attachment_image_storage import AttachmentImageStorage
from core.infrastructure.storage.local_image_storage import LocalImageStorage
from core.models.errors import ConfigError
from core.repositories.storage_repository import StickerImageStorage
from core.utils.constants import STORAGE_BACKEND_ATTACHMENT, STORAGE_BACKEND_LOCAL


def build_image_storage(settings_store: SettingsStore | None = None) -> StickerImageStorage:
    """Return the backend named by `storage_backend`.

    Raises:
        ConfigError: If the backend name is unknown
    """
    store = settings_store or get_settings_store()
    backend = store.current().storage_backend

    if backend == STORAGE_BACKEND_LOCAL:
        return LocalImageStorage(store)
    if backend == STORAGE_BACKEND_ATTACHMENT:
        return AttachmentImageStorage()

    raise ConfigError(
        message=f"Unknown storage backend '{backend}'",
        details={"storage_backend": backend},
    )
