"""Custom exception classes for the sticker service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_BACKEND,
    ERROR_CODE_CONFIG,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_IMAGE_DOWNLOAD_FAILED,
    ERROR_CODE_NAME_CONFLICT,
    ERROR_CODE_PERMISSION_DENIED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_UNSUPPORTED_FORMAT,
    ERROR_CODE_VALIDATION_FAILED,
)


class StickerServiceError(Exception):
    """
    Base exception for all sticker service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(StickerServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(StickerServiceError):
    """Raised when a sticker, user, or stored file does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NameConflictError(StickerServiceError):
    """Raised when a sticker name is already used by a live sticker."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_NAME_CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConfigError(StickerServiceError):
    """Raised when required storage or delivery configuration is missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIG,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PermissionDeniedError(StickerServiceError):
    """Raised when the access policy rejects an actor."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PERMISSION_DENIED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class BackendError(StickerServiceError):
    """Raised when the key-value store, image storage, or filesystem fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_BACKEND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnsupportedFormatError(ValidationError):
    """Raised when an image extension is not in the allow-list."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_FORMAT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileSizeError(ValidationError):
    """Raised when file size exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ImageDownloadError(ValidationError):
    """Raised when a remote image cannot be fetched for import."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_IMAGE_DOWNLOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
