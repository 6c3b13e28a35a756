"""Small value objects parsed from API JSON: image links, tags, series, stamps, policies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _json_str(data: Mapping[str, Any], key: str) -> str:
    """Return the string stored under ``key``, or an empty string."""
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _json_bool(data: Mapping[str, Any], key: str) -> bool:
    """Return the boolean stored under ``key``, or False for anything else."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _json_int(data: Mapping[str, Any], key: str) -> int:
    """Return the whole number under ``key`` if it fits a 32-bit int, else 0."""
    value = data.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, float):
        if not value.is_integer():
            return 0
        value = int(value)
    if isinstance(value, int) and _INT_MIN <= value <= _INT_MAX:
        return value
    return 0


def _json_object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return the object stored under ``key``, or an empty mapping."""
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _json_array(data: Mapping[str, Any], key: str) -> list[Any]:
    """Return the array stored under ``key``, or an empty list."""
    value = data.get(key)
    return value if isinstance(value, list) else []


def _as_object(value: Any) -> Mapping[str, Any]:
    """Treat ``value`` as a JSON object, falling back to an empty one."""
    return value if isinstance(value, Mapping) else {}


@dataclass
class ImageUrls:
    """The set of image links the API gives for a picture or avatar."""

    square_medium: str = ""
    medium: str = ""
    large: str = ""
    original: str = ""
    px16: str = ""
    px50: str = ""
    px170: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ImageUrls:
        return cls(
            square_medium=_json_str(data, "square_medium"),
            medium=_json_str(data, "medium"),
            large=_json_str(data, "large"),
            original=_json_str(data, "original"),
            px16=_json_str(data, "px_16x16"),
            px50=_json_str(data, "px_50x50"),
            px170=_json_str(data, "px_170x170"),
        )


@dataclass
class Tag:
    """A tag with its optional translation."""

    name: str = ""
    translated_name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Tag:
        return cls(
            name=_json_str(data, "name"),
            translated_name=_json_str(data, "translated_name"),
        )


@dataclass
class BookmarkTag:
    """A tag as attached to a bookmark."""

    name: str = ""
    is_registered: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BookmarkTag:
        return cls(
            name=_json_str(data, "name"),
            is_registered=_json_bool(data, "is_registered"),
        )


@dataclass
class Series:
    """A series an illustration belongs to."""

    id: int = 0
    title: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Series:
        return cls(id=_json_int(data, "id"), title=_json_str(data, "title"))


@dataclass
class Stamp:
    """A stamp image attached to a comment."""

    id: int = 0
    url: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Stamp:
        return cls(id=_json_int(data, "stamp_id"), url=_json_str(data, "stamp_url"))


@dataclass
class PrivacyPolicy:
    """The privacy policy notice that may accompany a feed."""

    version: str = ""
    message: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PrivacyPolicy:
        return cls(version=_json_str(data, "version"), message=_json_str(data, "message"))