"""Pydantic models for sticker upload request."""

import base64
import binascii

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import MAX_STICKER_NAME_LENGTH


class UploadStickerRequest(BaseModel):
    """Validation model for sticker upload request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_STICKER_NAME_LENGTH,
        description="Sticker name",
    )
    filename: str = Field(
        ..., min_length=1, max_length=255, description="Original image filename"
    )
    file: str = Field(..., description="Base64 encoded image file")
    channel_id: str = Field("", description="Channel the upload belongs to")

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        """
        Validate base64 file:
        - must not be empty
        - must decode correctly
        - must have non-zero size

        Size limits depend on runtime settings and are checked by the service.
        """
        if not value:
            raise ValueError("file must not be empty")

        try:
            file_data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("Invalid base64 encoded file") from exc

        if not file_data:
            raise ValueError("Decoded file is empty")

        return value
