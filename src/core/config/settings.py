"""Runtime configuration for the sticker service.

Settings are an immutable snapshot. The process-wide `SettingsStore`
swaps the whole snapshot on change, so readers always see a complete
configuration.
"""

import os
import threading

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    DEFAULT_ALLOWED_FORMATS,
    DEFAULT_MAX_STICKER_SIZE_KB,
    ENV_STICKER_ADMIN_USER_IDS,
    ENV_STICKER_ALLOWED_FORMATS,
    ENV_STICKER_MAX_SIZE_KB,
    ENV_STICKER_PLATFORM_API_TOKEN,
    ENV_STICKER_PLATFORM_API_URL,
    ENV_STICKER_SERVER_URL,
    ENV_STICKER_STORAGE_BACKEND,
    ENV_STICKER_STORAGE_PATH,
    ENV_STICKER_WEBHOOK_URL,
    STORAGE_BACKEND_LOCAL,
    STORAGE_BACKENDS,
)

logger = Logger(UTC=True)


class StickerSettings(BaseModel):
    """Immutable configuration snapshot."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    max_sticker_size_kb: int = Field(DEFAULT_MAX_STICKER_SIZE_KB, gt=0)
    allowed_formats: str = DEFAULT_ALLOWED_FORMATS
    storage_backend: str = STORAGE_BACKEND_LOCAL
    storage_path: str = ""
    server_url: str = ""
    admin_user_ids: frozenset[str] = frozenset()
    webhook_url: str = ""
    platform_api_url: str = ""
    platform_api_token: str = ""

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        backend = value.lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend '{value}'. "
                f"Allowed: {', '.join(sorted(STORAGE_BACKENDS))}"
            )
        return backend

    @property
    def allowed_extensions(self) -> frozenset[str]:
        """Dot-prefixed, lower-case extensions accepted for upload."""
        return frozenset(
            "." + fmt.strip().lower().lstrip(".")
            for fmt in self.allowed_formats.split(",")
            if fmt.strip()
        )

    @property
    def max_sticker_size_bytes(self) -> int:
        return self.max_sticker_size_kb * 1024


def _split_ids(raw: str) -> frozenset[str]:
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def load_settings_from_env() -> StickerSettings:
    """Build a settings snapshot from `STICKER_*` environment variables."""
    values: dict[str, object] = {}

    max_size = os.getenv(ENV_STICKER_MAX_SIZE_KB)
    if max_size:
        values["max_sticker_size_kb"] = int(max_size)

    env_fields = {
        "allowed_formats": ENV_STICKER_ALLOWED_FORMATS,
        "storage_backend": ENV_STICKER_STORAGE_BACKEND,
        "storage_path": ENV_STICKER_STORAGE_PATH,
        "server_url": ENV_STICKER_SERVER_URL,
        "webhook_url": ENV_STICKER_WEBHOOK_URL,
        "platform_api_url": ENV_STICKER_PLATFORM_API_URL,
        "platform_api_token": ENV_STICKER_PLATFORM_API_TOKEN,
    }
    for field_name, env_name in env_fields.items():
        raw = os.getenv(env_name)
        if raw:
            values[field_name] = raw

    admins = os.getenv(ENV_STICKER_ADMIN_USER_IDS)
    if admins:
        values["admin_user_ids"] = _split_ids(admins)

    return StickerSettings.model_validate(values)


class SettingsStore:
    """Holds the current settings snapshot behind a lock."""

    def __init__(self, settings: StickerSettings | None = None) -> None:
        self._lock = threading.RLock()
        self._settings = settings

    def current(self) -> StickerSettings:
        """Return the active snapshot, loading it from the environment once."""
        with self._lock:
            if self._settings is None:
                self._settings = load_settings_from_env()
            return self._settings

    def replace(self, settings: StickerSettings) -> None:
        """Swap in a new snapshot."""
        with self._lock:
            self._settings = settings

        logger.info(
            "Settings replaced",
            extra={
                "storage_backend": settings.storage_backend,
                "max_sticker_size_kb": settings.max_sticker_size_kb,
            },
        )

    def reload(self) -> StickerSettings:
        """Re-read the environment and swap the snapshot."""
        settings = load_settings_from_env()
        self.replace(settings)
        return settings


_settings_store = SettingsStore()


def get_settings_store() -> SettingsStore:
    """Return the process-wide settings store."""
    return _settings_store
