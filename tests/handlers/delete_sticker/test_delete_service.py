from unittest.mock import MagicMock

import pytest

from core.models.errors import BackendError, NotFoundError, PermissionDeniedError
from core.models.sticker import Sticker
from handlers.delete_sticker.service import DeleteService


def make_sticker(**overrides) -> Sticker:
    values = {"id": "s1", "name": "party", "filename": "s1.png", "creator_id": "U1", "created_at": 1}
    values.update(overrides)
    return Sticker(**values)


@pytest.fixture
def catalog() -> MagicMock:
    catalog = MagicMock()
    catalog.get_sticker.return_value = make_sticker()
    catalog.get_sticker_by_name.return_value = make_sticker()
    return catalog


@pytest.fixture
def policy() -> MagicMock:
    policy = MagicMock()
    policy.can_delete.return_value = True
    return policy


@pytest.fixture
def storage() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(catalog, storage, policy) -> DeleteService:
    return DeleteService(catalog=catalog, storage=storage, policy=policy)


class TestDeleteService:
    def test_delete_success(self, service, catalog, storage, policy) -> None:
        result = service.delete_sticker("s1", actor_id="U1")

        policy.can_delete.assert_called_once_with("U1", make_sticker())
        catalog.delete_sticker.assert_called_once_with("s1")
        storage.remove_image.assert_called_once_with("s1.png")
        assert result.image_cleaned is True
        assert result.name == "party"

    def test_denied_leaves_catalog_untouched(self, service, catalog, storage, policy) -> None:
        policy.can_delete.return_value = False

        with pytest.raises(PermissionDeniedError):
            service.delete_sticker("s1", actor_id="U2")

        catalog.delete_sticker.assert_not_called()
        storage.remove_image.assert_not_called()

    def test_missing_sticker(self, service, catalog) -> None:
        catalog.get_sticker.side_effect = NotFoundError(message="Sticker not found")

        with pytest.raises(NotFoundError):
            service.delete_sticker("nope", actor_id="U1")

        catalog.delete_sticker.assert_not_called()

    def test_cleanup_failure_is_reported_not_raised(self, service, catalog, storage) -> None:
        storage.remove_image.side_effect = BackendError(message="disk")

        result = service.delete_sticker("s1", actor_id="U1")

        catalog.delete_sticker.assert_called_once_with("s1")
        assert result.image_cleaned is False

    def test_already_missing_image_counts_as_cleaned(self, service, storage) -> None:
        storage.remove_image.side_effect = NotFoundError(message="gone")

        assert service.delete_sticker("s1", actor_id="U1").image_cleaned is True

    def test_attachment_handle_is_used(self, service, catalog, storage) -> None:
        catalog.get_sticker.return_value = make_sticker(filename="", file_id="f1")

        service.delete_sticker("s1", actor_id="U1")

        storage.remove_image.assert_called_once_with("f1")

    def test_no_handle_skips_cleanup(self, service, catalog, storage) -> None:
        catalog.get_sticker.return_value = make_sticker(filename="")

        assert service.delete_sticker("s1", actor_id="U1").image_cleaned is True
        storage.remove_image.assert_not_called()

    def test_delete_by_name(self, service, catalog) -> None:
        service.delete_sticker_by_name("PARTY", actor_id="U1")

        catalog.get_sticker_by_name.assert_called_once_with("PARTY")
        catalog.delete_sticker.assert_called_once_with("s1")
