"""
Unit tests for core.models.errors
"""

from typing import cast

from core.models.errors import (
    BackendError,
    ConfigError,
    FileSizeError,
    ImageDownloadError,
    NameConflictError,
    NotFoundError,
    PermissionDeniedError,
    StickerServiceError,
    UnsupportedFormatError,
    ValidationError,
)


class TestStickerServiceError:
    def test_base_error(self) -> None:
        err = StickerServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"

    def test_details_default_to_empty_dict(self) -> None:
        err = StickerServiceError(message="x", error_code="X")

        assert err.details == {}


class TestValidationError:
    def test_validation_error_defaults(self) -> None:
        err = ValidationError(message="Invalid input")

        assert err.error_code == "VALIDATION_FAILED"
        assert err.details == {}

    def test_validation_subclasses(self) -> None:
        for err in (
            UnsupportedFormatError(message="bad format"),
            FileSizeError(message="too big"),
            ImageDownloadError(message="no download"),
        ):
            assert isinstance(err, ValidationError)

    def test_subclass_error_codes(self) -> None:
        assert UnsupportedFormatError(message="x").error_code == "UNSUPPORTED_FORMAT"
        assert FileSizeError(message="x").error_code == "FILE_SIZE_EXCEEDED"
        assert ImageDownloadError(message="x").error_code == "IMAGE_DOWNLOAD_FAILED"


class TestNotFoundError:
    def test_not_found_error(self) -> None:
        err = NotFoundError(
            message="Sticker not found",
            details={"sticker_id": "abc"},
        )
        typed = cast(NotFoundError, err)

        assert typed.error_code == "NOT_FOUND"
        assert typed.details == {"sticker_id": "abc"}

    def test_custom_error_code(self) -> None:
        err = NotFoundError(message="User not found", error_code="USER_NOT_FOUND")

        assert err.error_code == "USER_NOT_FOUND"


class TestCatalogErrors:
    def test_name_conflict_error(self) -> None:
        err = NameConflictError(message="taken", details={"name": "party"})

        assert err.error_code == "NAME_CONFLICT"
        assert err.details["name"] == "party"

    def test_permission_denied_error(self) -> None:
        assert PermissionDeniedError(message="no").error_code == "PERMISSION_DENIED"

    def test_config_error(self) -> None:
        assert ConfigError(message="unset").error_code == "CONFIG_ERROR"

    def test_backend_error(self) -> None:
        assert BackendError(message="down").error_code == "BACKEND_ERROR"

    def test_all_are_service_errors(self) -> None:
        for cls in (
            NameConflictError,
            PermissionDeniedError,
            ConfigError,
            BackendError,
            NotFoundError,
        ):
            assert issubclass(cls, StickerServiceError)
