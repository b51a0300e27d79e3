"""Sticker catalog layered on an opaque key-value store.

Layout in the store:
- `stickers` holds a JSON array of live sticker ids in insertion order
- `sticker_<id>` holds the JSON-encoded sticker record

The store has no unique index and no cross-key transactions. Name
uniqueness is a check-then-act over the full listing, and the index is a
read-modify-write of a single key. Mutations are serialized per catalog
instance; writers in other processes can still race.
"""

from collections.abc import Iterable, Iterator
import json
import threading

from aws_lambda_powertools import Logger

from core.filters.name_contains_filter import NameContainsFilter
from core.infrastructure.aws.dynamodb_kv_store import DynamoDBKeyValueStore
from core.models.errors import BackendError, NameConflictError, NotFoundError
from core.models.sticker import Sticker, StickerList, normalize_name
from core.repositories.catalog_repository import StickerCatalogRepository
from core.repositories.kv_store import KeyValueStore
from core.utils.constants import (
    ERROR_CODE_INDEX_CORRUPTED,
    ERROR_CODE_STICKER_NOT_FOUND,
    STICKER_INDEX_KEY,
    STICKER_KEY_PREFIX,
)

logger = Logger(UTC=True)


def sticker_key(sticker_id: str) -> str:
    """Return the store key holding a sticker record."""
    return STICKER_KEY_PREFIX + sticker_id


class StickerCatalog(StickerCatalogRepository):
    """Name-unique, creator-attributed sticker index."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        """Initialize with a key-value store (DynamoDB by default)."""
        self._store: KeyValueStore = store or DynamoDBKeyValueStore()
        self._write_lock = threading.Lock()
        self._name_filter = NameContainsFilter()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_sticker(self, sticker_id: str) -> Sticker:
        data = self._store.get(sticker_key(sticker_id))

        if data is None:
            raise NotFoundError(
                message="Sticker not found",
                error_code=ERROR_CODE_STICKER_NOT_FOUND,
                details={"sticker_id": sticker_id},
            )

        try:
            return Sticker.from_json(data)
        except ValueError as exc:
            logger.warning(
                "Undecodable sticker record",
                extra={"sticker_id": sticker_id},
            )
            raise NotFoundError(
                message="Sticker not found",
                error_code=ERROR_CODE_STICKER_NOT_FOUND,
                details={"sticker_id": sticker_id},
            ) from exc

    def list_stickers(self) -> StickerList:
        ids = self._read_index()
        stickers = list(self._resolve_all(ids))

        logger.debug(
            "Stickers listed",
            extra={"indexed": len(ids), "resolved": len(stickers)},
        )
        return StickerList.of(stickers)

    def search_stickers(self, query: str) -> StickerList:
        listing = self.list_stickers()

        if not self._name_filter.validate(query):
            return listing

        return StickerList.of(self._name_filter.apply(listing.stickers, query))

    def get_sticker_by_name(self, name: str) -> Sticker:
        wanted = normalize_name(name)

        for sticker in self.list_stickers().stickers:
            if sticker.normalized_name == wanted:
                return sticker

        raise NotFoundError(
            message=f"Sticker '{name}' not found",
            error_code=ERROR_CODE_STICKER_NOT_FOUND,
            details={"name": name},
        )

    def is_name_taken(self, name: str) -> bool:
        try:
            self.get_sticker_by_name(name)
        except NotFoundError:
            return False
        return True

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_sticker(
        self,
        *,
        name: str,
        creator_id: str,
        file_id: str = "",
        filename: str = "",
    ) -> Sticker:
        with self._write_lock:
            if self.is_name_taken(name):
                logger.info("Sticker name already taken", extra={"sticker_name": name})
                raise NameConflictError(
                    message="Sticker name already exists",
                    details={"name": name},
                )

            sticker = Sticker.new(
                name=name,
                creator_id=creator_id,
                file_id=file_id,
                filename=filename,
            )

            self._store.set(sticker_key(sticker.id), sticker.to_json())
            self._add_to_index(sticker.id)

        logger.info(
            "Sticker created",
            extra={"sticker_id": sticker.id, "creator_id": creator_id},
        )
        return sticker

    def delete_sticker(self, sticker_id: str) -> None:
        with self._write_lock:
            # Raw bytes only, so undecodable records can still be purged
            if self._store.get(sticker_key(sticker_id)) is None:
                raise NotFoundError(
                    message="Sticker not found",
                    error_code=ERROR_CODE_STICKER_NOT_FOUND,
                    details={"sticker_id": sticker_id},
                )

            self._store.delete(sticker_key(sticker_id))
            self._remove_from_index(sticker_id)

        logger.info("Sticker deleted", extra={"sticker_id": sticker_id})

    # ------------------------------------------------------------------
    # Index maintenance
    # ------------------------------------------------------------------

    def _resolve(self, sticker_id: str) -> Sticker | None:
        """Resolve an indexed id, or None when the record is unusable."""
        try:
            return self.get_sticker(sticker_id)
        except (NotFoundError, BackendError):
            logger.warning(
                "Skipping unresolvable sticker",
                extra={"sticker_id": sticker_id},
            )
            return None

    def _resolve_all(self, ids: Iterable[str]) -> Iterator[Sticker]:
        for sticker_id in ids:
            sticker = self._resolve(sticker_id)
            if sticker is not None:
                yield sticker

    def _read_index(self) -> list[str]:
        data = self._store.get(STICKER_INDEX_KEY)
        if data is None:
            return []

        try:
            ids = json.loads(data)
        except ValueError as exc:
            raise BackendError(
                message="Sticker index is corrupted",
                error_code=ERROR_CODE_INDEX_CORRUPTED,
            ) from exc

        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise BackendError(
                message="Sticker index is corrupted",
                error_code=ERROR_CODE_INDEX_CORRUPTED,
            )

        return ids

    def _write_index(self, ids: list[str]) -> None:
        self._store.set(STICKER_INDEX_KEY, json.dumps(ids).encode("utf-8"))

    def _add_to_index(self, sticker_id: str) -> None:
        ids = self._read_index()
        if sticker_id in ids:
            return

        ids.append(sticker_id)
        self._write_index(ids)

    def _remove_from_index(self, sticker_id: str) -> None:
        ids = self._read_index()
        if sticker_id not in ids:
            return

        self._write_index([i for i in ids if i != sticker_id])
