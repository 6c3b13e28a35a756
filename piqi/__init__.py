"""Asynchronous client and dataclass models for the pixiv mobile app API."""

__version__ = "0.1.0"

__all__ = ["bookmarks", "client", "comments", "illustrations", "media", "search", "users"]