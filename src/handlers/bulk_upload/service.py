"""
Business logic for uploading many stickers in one request.

Each file goes through the regular upload workflow; one failing file
never stops the rest of the batch.
"""

from http import HTTPStatus

from aws_lambda_powertools import Logger

from core.models.errors import StickerServiceError
from core.utils.mime import file_extension
from handlers.upload_sticker.service import UploadService

from .models import BulkFile, BulkUploadResult

logger = Logger(UTC=True)


def sticker_name_for(filename: str) -> str:
    """Return the filename without its extension."""
    extension = file_extension(filename)
    return filename[: -len(extension)] if extension else filename


def status_for_result(result: BulkUploadResult) -> HTTPStatus:
    """201 when every file succeeded, 206 on partial success, 400 otherwise."""
    if result.failed and not result.success:
        return HTTPStatus.BAD_REQUEST
    if result.failed:
        return HTTPStatus.PARTIAL_CONTENT
    return HTTPStatus.CREATED


class BulkUploadService:
    """Application service that uploads a batch of stickers."""

    def __init__(self, *, upload_service: UploadService | None = None) -> None:
        self.upload_service = upload_service or UploadService()

    def upload_files(self, files: list[BulkFile], *, user_id: str) -> BulkUploadResult:
        result = BulkUploadResult()

        for item in files:
            name = sticker_name_for(item.filename)

            try:
                file_data = self.upload_service.decode_file(item.file)
                sticker = self.upload_service.upload_sticker(
                    name=name,
                    filename=item.filename,
                    file_data=file_data,
                    user_id=user_id,
                )
            except StickerServiceError as exc:
                logger.info(
                    "Bulk item rejected",
                    extra={"upload_filename": item.filename, "error_code": exc.error_code},
                )
                result.failed[item.filename] = exc.message
                continue

            result.success.append(sticker.name)

        logger.info(
            "Bulk upload finished",
            extra={
                "user_id": user_id,
                "succeeded": len(result.success),
                "failed": len(result.failed),
            },
        )
        return result
