"""
Unit tests for the sticker record model and codec.
"""

import json

import pytest

from core.models.sticker import (
    Sticker,
    StickerList,
    StickerView,
    generate_sticker_id,
    normalize_name,
)


def make_sticker(**overrides) -> Sticker:
    values = {
        "id": "abc123",
        "name": "Party",
        "file_id": "",
        "filename": "abc123.gif",
        "creator_id": "user_1",
        "created_at": 1_700_000_000_000,
    }
    values.update(overrides)
    return Sticker(**values)


class TestNormalizeName:
    def test_trims_and_lowercases(self) -> None:
        assert normalize_name("  PaRty ") == "party"

    def test_inner_whitespace_is_kept(self) -> None:
        assert normalize_name("Happy  Cat") == "happy  cat"


class TestGenerateStickerId:
    def test_ids_are_unique_hex(self) -> None:
        ids = {generate_sticker_id() for _ in range(100)}

        assert len(ids) == 100
        for sticker_id in ids:
            assert len(sticker_id) == 32
            int(sticker_id, 16)


class TestSticker:
    def test_new_generates_id_and_timestamp(self) -> None:
        sticker = Sticker.new(name="party", creator_id="user_1", filename="x.png")

        assert sticker.id
        assert sticker.created_at > 0
        assert sticker.file_id == ""
        assert sticker.filename == "x.png"

    def test_normalized_name(self) -> None:
        assert make_sticker(name=" PARTY ").normalized_name == "party"

    def test_record_is_immutable(self) -> None:
        sticker = make_sticker()

        with pytest.raises(ValueError):
            sticker.name = "other"

    def test_to_json_uses_field_names(self) -> None:
        payload = json.loads(make_sticker().to_json())

        assert payload == {
            "id": "abc123",
            "name": "Party",
            "file_id": "",
            "filename": "abc123.gif",
            "creator_id": "user_1",
            "created_at": 1_700_000_000_000,
        }

    def test_round_trip_is_exact(self) -> None:
        original = make_sticker(name="Ünïcode 🎉", file_id="f1", filename="")

        assert Sticker.from_json(original.to_json()) == original

    def test_round_trip_with_both_handles_empty(self) -> None:
        legacy = make_sticker(file_id="", filename="")

        assert Sticker.from_json(legacy.to_json()) == legacy

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"[]",
            b'{"id": "x"}',
            b'{"id": 1, "name": "a", "creator_id": "u", "created_at": 1}',
        ],
    )
    def test_from_json_rejects_malformed_data(self, data: bytes) -> None:
        with pytest.raises(ValueError):
            Sticker.from_json(data)


class TestStickerList:
    def test_of_sets_total(self) -> None:
        listing = StickerList.of([make_sticker(), make_sticker(id="def")])

        assert listing.total == 2

    def test_empty_list(self) -> None:
        assert StickerList().total == 0


class TestStickerView:
    def test_uses_public_url_when_present(self) -> None:
        view = StickerView.from_sticker(make_sticker(), public_url="https://cdn/x.gif")

        assert view.image_url == "https://cdn/x.gif"

    def test_falls_back_to_image_route(self) -> None:
        view = StickerView.from_sticker(make_sticker())

        assert view.image_url == "/v1/stickers/abc123/image"
        assert view.name == "Party"
