from collections.abc import Mapping
from pathlib import PurePosixPath

from core.utils.constants import (
    CONTENT_TYPE_EXTENSION_MAP,
    DEFAULT_IMAGE_EXTENSION,
    EXTENSION_CONTENT_TYPE_MAP,
)

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
}


def detect_mime_type(file_data: bytes) -> str | None:
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    if file_data[:4] == b"RIFF" and file_data[8:12] == b"WEBP":
        return "image/webp"

    return None


def file_extension(filename: str) -> str:
    """Return the lower-case, dot-prefixed extension of a filename."""
    return PurePosixPath(filename).suffix.lower()


def extension_for_content_type(content_type: str) -> str:
    """Pick a file extension for an image content type."""
    base_type = content_type.split(";", 1)[0].strip().lower()
    return CONTENT_TYPE_EXTENSION_MAP.get(base_type, DEFAULT_IMAGE_EXTENSION)


def content_type_for_filename(filename: str) -> str:
    return EXTENSION_CONTENT_TYPE_MAP.get(
        file_extension(filename), "application/octet-stream"
    )
