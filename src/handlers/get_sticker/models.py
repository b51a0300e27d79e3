"""Pydantic models for get sticker requests."""

from pydantic import BaseModel, ConfigDict, Field


class GetStickerRequest(BaseModel):
    """Validation model for sticker lookup by id."""

    model_config = ConfigDict(str_strip_whitespace=True)

    sticker_id: str = Field(..., min_length=1, description="Sticker ID")
