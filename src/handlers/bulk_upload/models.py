"""Pydantic models for bulk sticker upload."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import MAX_BULK_FILES


class BulkFile(BaseModel):
    """One image in a bulk upload; the sticker name is the filename stem."""

    model_config = ConfigDict(str_strip_whitespace=True)

    filename: str = Field(..., min_length=1, max_length=255)
    file: str = Field(..., min_length=1, description="Base64 encoded image file")


class BulkUploadRequest(BaseModel):
    files: list[BulkFile] = Field(..., min_length=1, max_length=MAX_BULK_FILES)


class BulkUploadResult(BaseModel):
    """Per-file outcome: created sticker names and failure reasons by filename."""

    success: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)
