"""Name-based filtering for stickers."""

from core.models.sticker import Sticker, normalize_name


class NameContainsFilter:
    """Filter stickers by name using case-insensitive substring search.

    Both the query and sticker names are trimmed and lower-cased before
    comparison. The relative order of the input is preserved.
    """

    @staticmethod
    def apply(stickers: list[Sticker], search_term: str | None) -> list[Sticker]:
        """Return stickers whose normalized name contains the normalized term.

        An empty or blank term matches everything.
        """
        if not NameContainsFilter.validate(search_term):
            return stickers

        query = normalize_name(search_term or "")
        return [sticker for sticker in stickers if query in sticker.normalized_name]

    @staticmethod
    def validate(search_term: str | None) -> bool:
        """Validate name filter search term."""
        return bool(search_term and search_term.strip())
