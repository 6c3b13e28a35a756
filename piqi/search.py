"""Parameters of an illustration search and their query-string form."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from piqi.media import Tag


class SearchTarget(enum.IntEnum):
    """Which part of a work the search words are matched against."""

    PARTIAL_TAGS_MATCH = 0
    EXACT_TAGS_MATCH = 1
    TITLE_AND_DESCRIPTION = 2

    @property
    def query_value(self) -> str:
        """The value the API expects for ``search_target``."""
        return _TARGET_VALUES[self]


_TARGET_VALUES = {
    SearchTarget.PARTIAL_TAGS_MATCH: "partial_match_for_tags",
    SearchTarget.EXACT_TAGS_MATCH: "exact_match_for_tags",
    SearchTarget.TITLE_AND_DESCRIPTION: "title_and_caption",
}


@dataclass
class SearchRequest:
    """A search: tags, match target, sort order and an optional date range.

    The date range is only sent when ``end_date`` is set; a missing
    ``start_date`` then stands for today.
    """

    tags: list[Tag] = field(default_factory=list)
    search_target: SearchTarget = SearchTarget.PARTIAL_TAGS_MATCH
    sort_ascending: bool = False
    start_date: date | None = None
    end_date: date | None = None

    def set_tags(self, tags: Iterable[Tag]) -> None:
        """Add the given tags to the request."""
        self.tags.extend(tags)

    def query_items(self, include_sort: bool = False) -> list[tuple[str, str]]:
        """Return the query parameters for this search, in order.

        Raises ValueError when the request has no tags.
        """
        if not self.tags:
            raise ValueError("a search request needs at least one tag")
        items = [
            ("word", " ".join(tag.name for tag in self.tags)),
            ("search_target", SearchTarget(self.search_target).query_value),
        ]
        if self.end_date is not None:
            start = self.start_date if self.start_date is not None else date.today()
            items.append(("start_date", start.isoformat()))
            items.append(("end_date", self.end_date.isoformat()))
        if include_sort:
            items.append(("sort", "date_asc" if self.sort_ascending else "date_desc"))
        return items