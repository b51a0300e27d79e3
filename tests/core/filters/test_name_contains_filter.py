from core.filters.name_contains_filter import NameContainsFilter
from core.models.sticker import Sticker


def make(name: str, sticker_id: str) -> Sticker:
    return Sticker(id=sticker_id, name=name, creator_id="u", created_at=1)


STICKERS = [
    make("Happy Cat", "1"),
    make("sad dog", "2"),
    make("CATERPILLAR", "3"),
]


class TestNameContainsFilter:
    def test_case_insensitive_substring(self) -> None:
        result = NameContainsFilter.apply(STICKERS, "CAT")

        assert [s.id for s in result] == ["1", "3"]

    def test_query_is_trimmed(self) -> None:
        result = NameContainsFilter.apply(STICKERS, "  dog ")

        assert [s.id for s in result] == ["2"]

    def test_blank_query_returns_everything(self) -> None:
        assert NameContainsFilter.apply(STICKERS, "   ") == STICKERS
        assert NameContainsFilter.apply(STICKERS, None) == STICKERS

    def test_no_match(self) -> None:
        assert NameContainsFilter.apply(STICKERS, "zebra") == []

    def test_validate(self) -> None:
        assert NameContainsFilter.validate("cat") is True
        assert NameContainsFilter.validate(" ") is False
        assert NameContainsFilter.validate(None) is False
