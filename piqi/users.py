"""User accounts, profiles, workspaces and follow state parsed from API JSON."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from piqi.media import (
    ImageUrls,
    _json_bool,
    _json_int,
    _json_object,
    _json_str,
)

_INT_TEXT = re.compile(r"[+-]?\d+")


def _user_id(data: Mapping[str, Any]) -> int:
    value = data.get("id")
    if isinstance(value, str):
        text = value.strip()
        if _INT_TEXT.fullmatch(text):
            number = int(text)
            if -(2**31) <= number <= 2**31 - 1:
                return number
        return 0
    return _json_int(data, "id")


def _user_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "id": _user_id(data),
        "name": _json_str(data, "name"),
        "account": _json_str(data, "account"),
        "profile_image_urls": ImageUrls.from_json(_json_object(data, "profile_image_urls")),
        "is_followed": int(_json_bool(data, "is_followed")),
        "is_accept_request": _json_bool(data, "is_accept_request"),
    }


@dataclass
class User:
    """A user as it appears in illustrations, comments and searches.

    ``is_followed`` is 0 when not followed, 1 when followed publicly and
    2 when followed privately.
    """

    id: int = 0
    name: str = ""
    account: str = ""
    profile_image_urls: ImageUrls = field(default_factory=ImageUrls)
    is_followed: int = 0
    is_accept_request: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        return cls(**_user_fields(data))


@dataclass
class Account(User):
    """The logged-in user, with the extra fields the login answer carries."""

    is_mail_authorized: bool = False
    is_premium: bool = False
    mail_address: str = ""
    require_policy_agreement: bool = False
    x_restrict: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Account:
        return cls(
            **_user_fields(data),
            is_mail_authorized=bool(_json_int(data, "is_mail_authorized")),
            is_premium=_json_bool(data, "is_premium"),
            mail_address=_json_str(data, "mail_address"),
            require_policy_agreement=_json_bool(data, "require_policy_agreement"),
            x_restrict=int(_json_bool(data, "x_restrict")),
        )


@dataclass
class Profile:
    """Public profile statistics and settings of a user."""

    webpage: str = ""
    region: str = ""
    address_id: int = 0
    country_code: str = ""
    total_follow_users: int = 0
    total_my_pixiv_users: int = 0
    total_illusts: int = 0
    total_manga: int = 0
    total_novels: int = 0
    total_illust_series: int = 0
    total_novel_series: int = 0
    background_image_url: str = ""
    is_premium: bool = False
    is_using_custom_profile_image: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Profile:
        return cls(
            webpage=_json_str(data, "webpage"),
            region=_json_str(data, "region"),
            address_id=_json_int(data, "address_id"),
            country_code=_json_str(data, "country_code"),
            total_follow_users=_json_int(data, "total_follow_users"),
            total_my_pixiv_users=_json_int(data, "total_my_pixiv_users"),
            total_illusts=_json_int(data, "total_illusts"),
            total_manga=_json_int(data, "total_manga"),
            total_novels=_json_int(data, "total_novels"),
            total_illust_series=_json_int(data, "total_illust_series"),
            total_novel_series=_json_int(data, "total_novel_series"),
            background_image_url=_json_str(data, "background_image_url"),
            is_premium=_json_bool(data, "is_premium"),
            is_using_custom_profile_image=_json_bool(data, "is_using_custom_profile_image"),
        )


_WORKSPACE_KEYS = (
    "pc",
    "monitor",
    "tool",
    "scanner",
    "tablet",
    "mouse",
    "printer",
    "desktop",
    "music",
    "desk",
    "chair",
    "comment",
)


@dataclass
class Workspace:
    """The equipment a user lists on their profile."""

    pc: str = ""
    monitor: str = ""
    tool: str = ""
    scanner: str = ""
    tablet: str = ""
    mouse: str = ""
    printer: str = ""
    desktop: str = ""
    music: str = ""
    desk: str = ""
    chair: str = ""
    comment: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Workspace:
        return cls(**{key: _json_str(data, key) for key in _WORKSPACE_KEYS})


@dataclass
class UserDetails:
    """A user together with their profile and workspace."""

    user: User = field(default_factory=User)
    profile: Profile = field(default_factory=Profile)
    workspace: Workspace = field(default_factory=Workspace)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> UserDetails:
        return cls(
            user=User.from_json(_json_object(data, "user")),
            profile=Profile.from_json(_json_object(data, "profile")),
            workspace=Workspace.from_json(_json_object(data, "workspace")),
        )


@dataclass
class FollowDetails:
    """Whether a user is followed, and with which restriction."""

    is_followed: bool = False
    restriction: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> FollowDetails:
        return cls(
            is_followed=_json_bool(data, "is_followed"),
            restriction=_json_str(data, "restrict"),
        )