"""Abstract contract for the sticker catalog."""

from abc import ABC, abstractmethod

from core.models.sticker import Sticker, StickerList


class StickerCatalogRepository(ABC):
    """Contract for creating, reading, searching, and deleting stickers.

    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def create_sticker(
        self,
        *,
        name: str,
        creator_id: str,
        file_id: str = "",
        filename: str = "",
    ) -> Sticker:
        """Create and persist a new sticker.

        Args:
            name: Sticker name, unique after normalization
            creator_id: User creating the sticker
            file_id: Platform attachment handle, if any
            filename: Local image filename, if any

        Returns:
            The persisted sticker

        Raises:
            NameConflictError: If a live sticker already uses the name
            BackendError: If persistence fails
        """

    @abstractmethod
    def get_sticker(self, sticker_id: str) -> Sticker:
        """Fetch a sticker by id.

        Raises:
            NotFoundError: If no decodable record exists
            BackendError: If the read fails
        """

    @abstractmethod
    def get_sticker_by_name(self, name: str) -> Sticker:
        """Fetch a sticker by case-insensitive, trimmed name.

        Raises:
            NotFoundError: If no sticker matches
        """

    @abstractmethod
    def list_stickers(self) -> StickerList:
        """List all resolvable stickers in index order."""

    @abstractmethod
    def search_stickers(self, query: str) -> StickerList:
        """List stickers whose name contains the query."""

    @abstractmethod
    def delete_sticker(self, sticker_id: str) -> None:
        """Delete a sticker record and its index entry.

        Image content is left to the caller.

        Raises:
            NotFoundError: If the sticker does not exist
            BackendError: If persistence fails
        """

    @abstractmethod
    def is_name_taken(self, name: str) -> bool:
        """Return True if a live sticker uses the name."""
