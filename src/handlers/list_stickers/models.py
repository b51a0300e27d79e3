"""
Pydantic models for list stickers request and response.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from core.models.sticker import StickerView


class ListStickersRequest(BaseModel):
    """Validation model for the list/search stickers API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    q: str = Field("", max_length=100, description="Substring match on sticker name")


class ListStickersResponse(BaseModel):
    """Stickers in catalog order."""

    stickers: list[StickerView] = Field(..., description="Matching stickers")
    total: StrictInt = Field(..., description="Number of matching stickers")
