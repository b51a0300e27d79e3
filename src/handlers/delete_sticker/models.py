"""Pydantic models for sticker deletion."""

from pydantic import BaseModel, ConfigDict, Field


class DeleteStickerRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    sticker_id: str = Field(..., min_length=1, description="Sticker ID")


class DeleteStickerResult(BaseModel):
    """Outcome of a delete whose metadata removal succeeded."""

    sticker_id: str
    name: str
    image_cleaned: bool = True
