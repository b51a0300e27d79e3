"""Pydantic models for posting a sticker to a channel."""

from pydantic import BaseModel, ConfigDict, Field


class SendStickerRequest(BaseModel):
    """Validation model for send sticker request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    channel_id: str = Field(..., min_length=1, description="Target channel")
    sticker_id: str = Field(..., min_length=1, description="Sticker to post")
    root_id: str = Field("", description="Thread root post, if replying")
