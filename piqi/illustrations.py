"""Illustrations and the paged feeds that carry them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from piqi.media import (
    ImageUrls,
    PrivacyPolicy,
    Series,
    Tag,
    _as_object,
    _json_array,
    _json_bool,
    _json_int,
    _json_object,
    _json_str,
)
from piqi.users import User


def _parse_datetime(text: str) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None when it is not valid."""
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Illustration:
    """A single illustration or manga work.

    ``is_bookmarked`` is 0 when not bookmarked, 1 when bookmarked publicly
    and 2 when bookmarked privately.
    """

    id: int = 0
    title: str = ""
    type: str = ""
    image_urls: ImageUrls = field(default_factory=ImageUrls)
    caption: str = ""
    restricted: int = 0
    user: User = field(default_factory=User)
    tags: list[Tag] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)
    create_date: datetime | None = None
    page_count: int = 0
    width: int = 0
    height: int = 0
    sanity_level: int = 0
    x_restrict: int = 0
    series: Series | None = None
    meta_single_page: str = ""
    meta_pages: list[ImageUrls] = field(default_factory=list)
    total_view: int = 0
    total_bookmarks: int = 0
    is_bookmarked: int = 0
    visible: bool = False
    is_muted: bool = False
    illust_ai_type: int = 0
    illust_book_type: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Illustration:
        series = Series.from_json(_json_object(data, "series")) if "series" in data else None
        return cls(
            id=_json_int(data, "id"),
            title=_json_str(data, "title"),
            image_urls=ImageUrls.from_json(_json_object(data, "image_urls")),
            caption=_json_str(data, "caption"),
            restricted=_json_int(data, "restrict"),
            user=User.from_json(_json_object(data, "user")),
            tags=[Tag.from_json(_as_object(tag)) for tag in _json_array(data, "tags")],
            tools=[tool if isinstance(tool, str) else "" for tool in _json_array(data, "tools")],
            create_date=_parse_datetime(_json_str(data, "create_date")),
            page_count=_json_int(data, "page_count"),
            width=_json_int(data, "width"),
            height=_json_int(data, "height"),
            sanity_level=_json_int(data, "sanity_level"),
            x_restrict=_json_int(data, "x_restrict"),
            series=series,
            meta_single_page=_json_str(
                _json_object(data, "meta_single_page"), "original_image_url"
            ),
            meta_pages=[
                ImageUrls.from_json(_json_object(_as_object(page), "image_urls"))
                for page in _json_array(data, "meta_pages")
            ],
            total_view=_json_int(data, "total_view"),
            total_bookmarks=_json_int(data, "total_bookmarks"),
            is_bookmarked=int(_json_bool(data, "is_bookmarked")),
            visible=_json_bool(data, "visible"),
            is_muted=_json_bool(data, "is_muted"),
            illust_ai_type=_json_int(data, "illust_ai_type"),
            illust_book_type=_json_int(data, "illust_book_type"),
        )


def _illusts_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "illusts": [
            Illustration.from_json(_as_object(item)) for item in _json_array(data, "illusts")
        ],
        "next_url": _json_str(data, "next_url"),
    }


@dataclass
class Illusts:
    """A page of illustrations, with the link to the next page if any."""

    illusts: list[Illustration] = field(default_factory=list)
    next_url: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Illusts:
        return cls(**_illusts_fields(data))

    def extend(self, next_feed: Illusts) -> None:
        """Append the illustrations of the following page and take over its link."""
        self.next_url = next_feed.next_url
        self.illusts.extend(next_feed.illusts)

    def __len__(self) -> int:
        return len(self.illusts)

    def __getitem__(self, index):
        return self.illusts[index]

    def __iter__(self) -> Iterator[Illustration]:
        return iter(self.illusts)


@dataclass
class Recommended(Illusts):
    """The recommended feed, optionally with ranking works and a policy notice."""

    privacy_policy: PrivacyPolicy = field(default_factory=PrivacyPolicy)
    ranking_illusts: list[Illustration] = field(default_factory=list)
    contest_exists: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Recommended:
        return cls(
            **_illusts_fields(data),
            privacy_policy=PrivacyPolicy.from_json(_json_object(data, "privacy_policy")),
            ranking_illusts=[
                Illustration.from_json(_as_object(item))
                for item in _json_array(data, "ranking_illusts")
            ],
            contest_exists=_json_bool(data, "contest_exists"),
        )


@dataclass
class SearchResults(Illusts):
    """A page of search results."""

    show_ai: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SearchResults:
        return cls(**_illusts_fields(data), show_ai=_json_bool(data, "show_ai"))