"""Comments on illustrations and their replies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from piqi.illustrations import _parse_datetime
from piqi.media import (
    Stamp,
    _as_object,
    _json_array,
    _json_bool,
    _json_int,
    _json_object,
    _json_str,
)
from piqi.users import User


@dataclass
class Comment:
    """A single comment, possibly carrying a stamp instead of text."""

    id: int = 0
    comment: str = ""
    date: datetime | None = None
    user: User = field(default_factory=User)
    has_replies: bool = False
    stamp: Stamp | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Comment:
        stamp_data = _json_object(data, "stamp")
        return cls(
            id=_json_int(data, "id"),
            comment=_json_str(data, "comment"),
            date=_parse_datetime(_json_str(data, "date")),
            user=User.from_json(_json_object(data, "user")),
            has_replies=_json_bool(data, "has_replies"),
            stamp=Stamp.from_json(stamp_data) if stamp_data else None,
        )


@dataclass
class Comments:
    """A page of comments with the link to the next page."""

    comments: list[Comment] = field(default_factory=list)
    next_url: str = ""
    comment_access_control: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Comments:
        return cls(
            comments=[Comment.from_json(_as_object(c)) for c in _json_array(data, "comments")],
            next_url=_json_str(data, "next"),
            comment_access_control=_json_int(data, "comment_access_control"),
        )