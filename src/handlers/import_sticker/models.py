"""Pydantic models for importing a sticker from a remote URL."""

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from core.utils.constants import MAX_STICKER_NAME_LENGTH


class ImportStickerRequest(BaseModel):
    """Validation model for sticker import request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_STICKER_NAME_LENGTH,
        description="Sticker name",
    )
    url: HttpUrl = Field(..., description="HTTP(S) URL of the image to import")
    channel_id: str = Field("", description="Channel the import belongs to")
