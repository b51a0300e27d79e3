"""Sticker record model and its byte codec."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from core.utils.constants import STICKER_IMAGE_PATH
from core.utils.time import utc_now_millis


def normalize_name(name: str) -> str:
    """Return the comparison form of a sticker name."""
    return name.strip().lower()


def generate_sticker_id() -> str:
    """Generate a unique sticker identifier."""
    return uuid.uuid4().hex


class Sticker(BaseModel):
    """Sticker metadata persisted in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(..., description="Unique sticker identifier")
    name: StrictStr = Field(..., description="Human-chosen sticker name")
    file_id: StrictStr = Field("", description="Platform attachment handle")
    filename: StrictStr = Field("", description="Locally stored image filename")
    creator_id: StrictStr = Field(..., description="User who created the sticker")
    created_at: StrictInt = Field(..., description="Creation time in epoch milliseconds")

    @classmethod
    def new(
        cls,
        *,
        name: str,
        creator_id: str,
        file_id: str = "",
        filename: str = "",
    ) -> "Sticker":
        """Build a fresh record with a generated id and timestamp."""
        return cls(
            id=generate_sticker_id(),
            name=name,
            file_id=file_id,
            filename=filename,
            creator_id=creator_id,
            created_at=utc_now_millis(),
        )

    @property
    def normalized_name(self) -> str:
        return normalize_name(self.name)

    def to_json(self) -> bytes:
        """Encode the record for the key-value store."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes) -> "Sticker":
        """Decode a record previously produced by `to_json`.

        Raises:
            ValueError: If the bytes are not a valid sticker record
        """
        return cls.model_validate_json(data)


class StickerList(BaseModel):
    """Ordered stickers together with their count."""

    stickers: list[Sticker] = Field(default_factory=list)
    total: StrictInt = 0

    @classmethod
    def of(cls, stickers: list[Sticker]) -> "StickerList":
        return cls(stickers=stickers, total=len(stickers))


class StickerView(BaseModel):
    """Sticker as returned by the API."""

    id: StrictStr = Field(..., description="Unique sticker identifier")
    name: StrictStr = Field(..., description="Sticker name")
    file_id: StrictStr = Field("", description="Platform attachment handle")
    filename: StrictStr = Field("", description="Locally stored image filename")
    creator_id: StrictStr = Field(..., description="User who created the sticker")
    created_at: StrictInt = Field(..., description="Creation time in epoch milliseconds")
    image_url: StrictStr = Field(..., description="URL serving the sticker image")

    @classmethod
    def from_sticker(cls, sticker: Sticker, *, public_url: str = "") -> "StickerView":
        """Build the view, falling back to the image route when no public URL exists."""
        return cls(
            **sticker.model_dump(),
            image_url=public_url or STICKER_IMAGE_PATH.format(sticker_id=sticker.id),
        )
