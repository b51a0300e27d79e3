"""Abstract contract for opaque key-value persistence."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Contract for storing raw bytes under string keys.

    No listing and no multi-key transactions are offered.
    Implementations could be DynamoDB, Redis, a plugin KV API, etc.
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the stored value, or None if the key is absent.

        Raises:
            BackendError: If the read fails
        """

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store a value, replacing any previous one.

        Raises:
            BackendError: If the write fails
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key is not an error.

        Raises:
            BackendError: If the delete fails
        """
