# src/models/search_query.py

"""Search request passed from the frontend to the proxy."""

from dataclasses import dataclass
from enum import Enum


class SortKey(str, Enum):
    """Sort keys understood by the frontend and the proxy."""

    RELEVANCE = ""
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"
    RATING_ASC = "rating-asc"

    @classmethod
    def parse(cls, value: str | None) -> "SortKey":
        """Map a raw query value to a key; unknown values mean relevance."""
        try:
            return cls(value or "")
        except ValueError:
            return cls.RELEVANCE

    @property
    def upstream_sort(self) -> str:
        """Translate to the external API's ``sort_by`` vocabulary.

        The external API has a single reviews ordering, so both rating
        directions map to it and the direction is applied locally.
        """
        return _UPSTREAM_SORTS.get(self, "RELEVANCE")

    @property
    def is_rating(self) -> bool:
        return self in (SortKey.RATING_ASC, SortKey.RATING_DESC)


_UPSTREAM_SORTS: dict[SortKey, str] = {
    SortKey.PRICE_ASC: "PRICE_LOW_TO_HIGH",
    SortKey.PRICE_DESC: "PRICE_HIGH_TO_LOW",
    SortKey.RATING_DESC: "AVERAGE_CUSTOMER_REVIEWS",
    SortKey.RATING_ASC: "AVERAGE_CUSTOMER_REVIEWS",
}


def parse_page(value: str | int | None) -> int:
    """Return a 1-based page number, defaulting to 1."""
    try:
        page = int(value) if value is not None else 1
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


@dataclass(frozen=True)
class SearchQuery:
    """Free-text term plus optional bounds, sort key and page.

    Bounds stay as the strings the user typed; the proxy decides how to
    interpret them when filtering.
    """

    term: str
    min_price: str = ""
    max_price: str = ""
    min_rating: str = ""
    sort: str = ""
    page: int = 1

    @classmethod
    def from_params(
        cls,
        q: str | None,
        min_price: str | None = None,
        max_price: str | None = None,
        min_rating: str | None = None,
        sort: str | None = None,
        page: str | int | None = None,
    ) -> "SearchQuery":
        """Build a query from raw request parameters."""
        return cls(
            term=(q or "").strip(),
            min_price=(min_price or "").strip(),
            max_price=(max_price or "").strip(),
            min_rating=(min_rating or "").strip(),
            sort=(sort or "").strip(),
            page=parse_page(page),
        )

    @property
    def sort_key(self) -> SortKey:
        return SortKey.parse(self.sort)

    def to_params(self, include_page: bool = False) -> dict[str, str]:
        """Render the non-empty fields as proxy query parameters.

        ``page`` is sent whenever it is not 1, or always with
        *include_page*.
        """
        params: dict[str, str] = {"q": self.term}
        if self.min_price:
            params["minPrice"] = self.min_price
        if self.max_price:
            params["maxPrice"] = self.max_price
        if self.min_rating:
            params["minRating"] = self.min_rating
        if self.sort:
            params["sort"] = self.sort
        if include_page or self.page != 1:
            params["page"] = str(self.page)
        return params
