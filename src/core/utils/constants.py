"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_STICKER_NOT_FOUND = "STICKER_NOT_FOUND"
ERROR_CODE_USER_NOT_FOUND = "USER_NOT_FOUND"

# Catalog Errors
ERROR_CODE_NAME_CONFLICT = "NAME_CONFLICT"
ERROR_CODE_PERMISSION_DENIED = "PERMISSION_DENIED"

# Configuration Errors
ERROR_CODE_CONFIG = "CONFIG_ERROR"
ERROR_CODE_STORAGE_NOT_CONFIGURED = "STORAGE_NOT_CONFIGURED"
ERROR_CODE_SERVER_URL_NOT_CONFIGURED = "SERVER_URL_NOT_CONFIGURED"
ERROR_CODE_WEBHOOK_NOT_CONFIGURED = "WEBHOOK_NOT_CONFIGURED"
ERROR_CODE_PLATFORM_API_NOT_CONFIGURED = "PLATFORM_API_NOT_CONFIGURED"

# Backend Errors
ERROR_CODE_BACKEND = "BACKEND_ERROR"
ERROR_CODE_KV_GET_FAILED = "KV_GET_FAILED"
ERROR_CODE_KV_SET_FAILED = "KV_SET_FAILED"
ERROR_CODE_KV_DELETE_FAILED = "KV_DELETE_FAILED"
ERROR_CODE_INDEX_CORRUPTED = "INDEX_CORRUPTED"
ERROR_CODE_IMAGE_STORE_FAILED = "IMAGE_STORE_FAILED"
ERROR_CODE_IMAGE_FETCH_FAILED = "IMAGE_FETCH_FAILED"
ERROR_CODE_IMAGE_DELETE_FAILED = "IMAGE_DELETE_FAILED"
ERROR_CODE_IMAGE_DOWNLOAD_FAILED = "IMAGE_DOWNLOAD_FAILED"
ERROR_CODE_POST_FAILED = "POST_FAILED"
ERROR_CODE_MEMBERSHIP_CHECK_FAILED = "MEMBERSHIP_CHECK_FAILED"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Catalog Key Layout
# ============================================================================

STICKER_INDEX_KEY: Final[str] = "stickers"
STICKER_KEY_PREFIX: Final[str] = "sticker_"

# ============================================================================
# Sticker Constraints
# ============================================================================

DEFAULT_MAX_STICKER_SIZE_KB = 1024
DEFAULT_ALLOWED_FORMATS = "png,gif,jpg,jpeg,webp"
MAX_STICKER_NAME_LENGTH = 64

# Bulk uploads are bounded separately from a single sticker
MAX_BULK_FILES = 50

CONTENT_TYPE_EXTENSION_MAP: Final[dict[str, str]] = {
    "image/png": ".png",
    "image/gif": ".gif",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
}

EXTENSION_CONTENT_TYPE_MAP: Final[dict[str, str]] = {
    ".png": "image/png",
    ".gif": "image/gif",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}

DEFAULT_IMAGE_EXTENSION = ".png"

# ============================================================================
# Storage Backends
# ============================================================================

STORAGE_BACKEND_LOCAL = "local"
STORAGE_BACKEND_ATTACHMENT = "attachment"
STORAGE_BACKENDS: Final[frozenset[str]] = frozenset(
    {STORAGE_BACKEND_LOCAL, STORAGE_BACKEND_ATTACHMENT}
)

LOCAL_STORAGE_DIR_MODE = 0o755

# ============================================================================
# Posts
# ============================================================================

STICKER_POST_TYPE = "custom_sticker"
WEBHOOK_TIMEOUT_SECONDS = 10
PLATFORM_API_TIMEOUT_SECONDS = 10
IMPORT_TIMEOUT_SECONDS = 15
IMAGE_CACHE_CONTROL = "public, max-age=31536000"
STICKER_IMAGE_PATH = "/v1/stickers/{sticker_id}/image"

# ============================================================================
# API Gateway Configuration
# ============================================================================

USER_ID_HEADER = "X-User-Id"
CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key,X-User-Id"
EXPOSE_HEADERS = "Content-Type,Content-Length,Cache-Control"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
DEFAULT_AWS_REGION = "us-east-1"

ENV_STICKER_KV_TABLE_NAME = "STICKER_KV_TABLE_NAME"
ENV_STICKER_ATTACHMENT_BUCKET_NAME = "STICKER_ATTACHMENT_BUCKET_NAME"
ENV_STICKER_MAX_SIZE_KB = "STICKER_MAX_SIZE_KB"
ENV_STICKER_ALLOWED_FORMATS = "STICKER_ALLOWED_FORMATS"
ENV_STICKER_STORAGE_BACKEND = "STICKER_STORAGE_BACKEND"
ENV_STICKER_STORAGE_PATH = "STICKER_STORAGE_PATH"
ENV_STICKER_SERVER_URL = "STICKER_SERVER_URL"
ENV_STICKER_ADMIN_USER_IDS = "STICKER_ADMIN_USER_IDS"
ENV_STICKER_WEBHOOK_URL = "STICKER_WEBHOOK_URL"
ENV_STICKER_PLATFORM_API_URL = "STICKER_PLATFORM_API_URL"
ENV_STICKER_PLATFORM_API_TOKEN = "STICKER_PLATFORM_API_TOKEN"

# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
