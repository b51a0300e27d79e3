import base64
from unittest.mock import MagicMock

import pytest

from core.config.settings import SettingsStore, StickerSettings
from core.models.errors import (
    BackendError,
    FileSizeError,
    NameConflictError,
    UnsupportedFormatError,
    ValidationError,
)
from core.models.sticker import Sticker
from core.repositories.storage_repository import StoredImage
from handlers.upload_sticker.service import UploadService


def fake_image_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\nfake-image-data"


@pytest.fixture
def catalog() -> MagicMock:
    catalog = MagicMock()
    catalog.is_name_taken.return_value = False
    catalog.create_sticker.side_effect = lambda **kw: Sticker(
        id="s1", created_at=1, **kw
    )
    return catalog


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.store_image.return_value = StoredImage(filename="generated.png")
    storage.public_url.return_value = ""
    return storage


@pytest.fixture
def service(catalog, storage) -> UploadService:
    settings = SettingsStore(StickerSettings(max_sticker_size_kb=1, allowed_formats="png,gif"))
    return UploadService(catalog=catalog, storage=storage, settings_store=settings)


class TestUploadService:
    def test_decode_file_valid(self) -> None:
        raw = b"image-bytes"

        assert UploadService.decode_file(base64.b64encode(raw).decode()) == raw

    def test_decode_file_invalid(self) -> None:
        with pytest.raises(ValidationError):
            UploadService.decode_file("not-base64!!!")

    def test_upload_success(self, service, catalog, storage) -> None:
        sticker = service.upload_sticker(
            name=" party ",
            filename="party.png",
            file_data=fake_image_bytes(),
            user_id="u1",
            location="c1",
        )

        assert sticker.name == "party"
        assert sticker.filename == "generated.png"
        storage.store_image.assert_called_once_with(
            file_data=fake_image_bytes(),
            filename="party.png",
            owner_id="u1",
            location="c1",
        )
        catalog.create_sticker.assert_called_once_with(
            name="party", creator_id="u1", file_id="", filename="generated.png"
        )

    def test_blank_name_rejected(self, service, storage) -> None:
        with pytest.raises(ValidationError):
            service.upload_sticker(
                name="  ", filename="a.png", file_data=b"x", user_id="u1"
            )

        storage.store_image.assert_not_called()

    def test_taken_name_rejected_before_storing(self, service, catalog, storage) -> None:
        catalog.is_name_taken.return_value = True

        with pytest.raises(NameConflictError):
            service.upload_sticker(
                name="party", filename="a.png", file_data=b"x", user_id="u1"
            )

        storage.store_image.assert_not_called()

    def test_disallowed_extension_rejected(self, service, storage) -> None:
        with pytest.raises(UnsupportedFormatError) as exc:
            service.upload_sticker(
                name="party", filename="party.webp", file_data=b"x", user_id="u1"
            )

        assert exc.value.details["allowed_formats"] == "png,gif"
        storage.store_image.assert_not_called()

    def test_size_limit_is_inclusive(self, service) -> None:
        service.validate_image(filename="a.png", size=1024)

        with pytest.raises(FileSizeError):
            service.validate_image(filename="a.png", size=1025)

    def test_catalog_failure_removes_stored_image(self, service, catalog, storage) -> None:
        catalog.create_sticker.side_effect = BackendError(message="down")

        with pytest.raises(BackendError):
            service.upload_sticker(
                name="party", filename="a.png", file_data=b"x", user_id="u1"
            )

        storage.remove_image.assert_called_once_with("generated.png")

    def test_cleanup_failure_does_not_mask_catalog_error(
        self, service, catalog, storage
    ) -> None:
        catalog.create_sticker.side_effect = NameConflictError(message="raced")
        storage.remove_image.side_effect = BackendError(message="disk gone")

        with pytest.raises(NameConflictError):
            service.upload_sticker(
                name="party", filename="a.png", file_data=b"x", user_id="u1"
            )

    def test_to_view_falls_back_to_image_route(self, service) -> None:
        sticker = Sticker(id="s1", name="party", creator_id="u1", created_at=1)

        assert service.to_view(sticker).image_url == "/v1/stickers/s1/image"
