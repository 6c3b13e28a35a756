"""Bookmark state of an illustration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from piqi.media import BookmarkTag, _as_object, _json_array, _json_bool, _json_str


@dataclass
class BookmarkDetails:
    """Whether an illustration is bookmarked, with its tags and restriction."""

    is_bookmarked: bool = False
    tags: list[BookmarkTag] = field(default_factory=list)
    restriction: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BookmarkDetails:
        return cls(
            is_bookmarked=_json_bool(data, "is_bookmarked"),
            tags=[BookmarkTag.from_json(_as_object(tag)) for tag in _json_array(data, "tags")],
            restriction=_json_str(data, "restrict"),
        )