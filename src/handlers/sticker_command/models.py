"""Pydantic models for the /sticker slash command."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StickerCommandRequest(BaseModel):
    """Slash command invocation as delivered by the chat platform."""

    model_config = ConfigDict(str_strip_whitespace=True)

    command: str = Field(..., min_length=1, description="Full command text")
    channel_id: str = Field("", description="Channel the command was typed in")
    user_id: str = Field("", description="Invoking user, if not sent as a header")


class CommandResponse(BaseModel):
    """Slash command reply; an empty text means nothing is shown."""

    response_type: Literal["ephemeral", "in_channel"] = "ephemeral"
    text: str = ""
