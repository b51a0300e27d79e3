"""Abstract contract for sticker image storage."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredImage:
    """Handle returned by an image backend.

    Exactly one of the fields is populated, depending on the backend.
    """

    file_id: str = ""
    filename: str = ""

    @property
    def handle(self) -> str:
        return self.file_id or self.filename


class StickerImageStorage(ABC):
    """Contract for storing and retrieving sticker image bytes.

    Implementations could be local disk, platform attachments, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def store_image(
        self,
        *,
        file_data: bytes,
        filename: str,
        owner_id: str = "",
        location: str = "",
    ) -> StoredImage:
        """Store image bytes and return a handle.

        Args:
            file_data: Binary image content
            filename: Original filename, used for its extension
            owner_id: User uploading the image
            location: Channel or other context the upload belongs to

        Returns:
            Handle for later retrieval

        Raises:
            ConfigError: If the backend is not configured
            BackendError: If the write fails
        """

    @abstractmethod
    def fetch_image(self, handle: str) -> tuple[bytes, str]:
        """Return image bytes and content type for a handle.

        Raises:
            NotFoundError: If nothing is stored under the handle
            BackendError: If the read fails
        """

    @abstractmethod
    def remove_image(self, handle: str) -> None:
        """Delete stored image content.

        Raises:
            BackendError: If deletion fails
        """

    def public_url(self, handle: str) -> str:
        """Return a URL serving the image, or "" when not published."""
        return ""
