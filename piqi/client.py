"""Asynchronous client for the illustration API: login, feeds, bookmarks, follows and search."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol, TypeVar

import httpx

from piqi.bookmarks import BookmarkDetails
from piqi.comments import Comment, Comments
from piqi.illustrations import Illustration, Illusts, Recommended, SearchResults
from piqi.media import Tag, _as_object, _json_array, _json_object
from piqi.search import SearchRequest
from piqi.users import Account, FollowDetails, User, UserDetails

AUTH_URL = "https://oauth.secure.pixiv.net/auth/token"
API_URL = "https://app-api.pixiv.net"
TOKEN_LIFETIME = timedelta(seconds=3600)


class _FromJson(Protocol):
    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Any: ...


_T = TypeVar("_T")


def _json_body(response: httpx.Response) -> Mapping[str, Any]:
    """Decode a response body as a JSON object, or an empty one if it is not."""
    try:
        value = json.loads(response.content)
    except (ValueError, UnicodeDecodeError):
        return {}
    return value if isinstance(value, dict) else {}


class Piqi:
    """A logged-in session against the API.

    Feeds and lookups that need authentication return None when no valid
    login can be obtained.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient()
        self._access_token = ""
        self._refresh_token = ""
        self._expiration: datetime | None = None
        self.user: Account | None = None
        self.other_users: list[Account] = []

    async def __aenter__(self) -> Piqi:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this session created it."""
        if self._owns_http:
            await self._http.aclose()

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token}"}

    def _renew_expiration(self) -> None:
        self._expiration = datetime.now(timezone.utc) + TOKEN_LIFETIME

    def set_login(self, access_token: str, refresh_token: str) -> None:
        """Use the given tokens, treating the access token as valid for an hour."""
        self._access_token = access_token
        self._refresh_token = refresh_token
        self._renew_expiration()

    async def is_logged_in(self) -> bool:
        """Report whether the access token is usable, refreshing it if needed."""
        expired = self._expiration is None or self._expiration < datetime.now(timezone.utc)
        if self._access_token and not expired:
            return True
        return await self.login(self._refresh_token)

    async def login(self, refresh_token: str) -> bool:
        """Exchange a refresh token for an access token; True on HTTP 200."""
        form = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        response = await self._http.post(AUTH_URL, data=form)
        data = _json_body(response)
        access = data.get("access_token")
        renewed = data.get("refresh_token")
        self._access_token = access if isinstance(access, str) else ""
        self._refresh_token = renewed if isinstance(renewed, str) and renewed else refresh_token
        self._renew_expiration()
        self.user = Account.from_json(_json_object(data, "user"))
        return response.status_code == 200

    async def _get(
        self,
        url: str,
        model: type[_T],
        params: list[tuple[str, str]] | None = None,
        authenticated: bool = True,
    ) -> _T | None:
        if authenticated and not await self.is_logged_in():
            return None
        headers = self._auth_headers() if authenticated else {}
        response = await self._http.get(url, params=params, headers=headers)
        return model.from_json(_json_body(response))  # type: ignore[attr-defined]

    async def _post_form(self, url: str, form: list[tuple[str, str]]) -> None:
        await self._http.post(url, data=dict(form), headers=self._auth_headers())

    async def walkthrough(self) -> Illusts | None:
        """Fetch the public walkthrough feed, which needs no login."""
        return await self._get(f"{API_URL}/v1/walkthrough/illusts", Illusts, authenticated=False)

    async def fetch_next_feed(self, feed: Illusts) -> Illusts | None:
        """Fetch the page that follows ``feed``."""
        if not feed.next_url:
            raise ValueError("the feed has no next page")
        return await self._get(feed.next_url, Illusts)

    async def recommended_feed(
        self, type: str, include_ranking: bool = False, include_privacy_policy: bool = False
    ) -> Recommended | None:
        """Fetch the recommended feed for ``type`` ("illust", "manga" or "novel")."""
        params = None
        if type != "novel":
            params = [
                ("include_ranking_illusts", "true" if include_ranking else "false"),
                ("include_privacy_policy", "true" if include_privacy_policy else "false"),
            ]
        return await self._get(f"{API_URL}/v1/{type}/recommended", Recommended, params)

    async def following_feed(self, type: str, restriction: str) -> Illusts | None:
        """Fetch new works of followed users."""
        return await self._get(
            f"{API_URL}/v2/{type}/follow", Illusts, [("restrict", restriction)]
        )

    async def add_bookmark(self, illust: Illustration, is_private: bool = False) -> None:
        """Bookmark ``illust`` and update its local bookmark state."""
        restrict = "private" if is_private else "public"
        form = [("illust_id", str(illust.id)), ("restrict", restrict)]
        if illust.is_bookmarked == 0:
            illust.total_bookmarks += 1
        illust.is_bookmarked = 2 if is_private else 1
        await self._post_form(f"{API_URL}/v2/illust/bookmark/add", form)

    async def remove_bookmark(self, illust: Illustration) -> None:
        """Remove the bookmark of ``illust`` and update its local state."""
        illust.is_bookmarked = 0
        illust.total_bookmarks -= 1
        await self._post_form(
            f"{API_URL}/v1/illust/bookmark/delete", [("illust_id", str(illust.id))]
        )

    async def user_illusts(self, user: User, type: str) -> list[Illustration]:
        """Fetch works of ``user`` of the given type."""
        illusts = await self._get(
            f"{API_URL}/v1/user/illusts",
            Illusts,
            [("user_id", str(user.id)), ("type", type)],
        )
        return illusts.illusts if illusts is not None else []

    async def illust_comments(self, illust: Illustration) -> Comments | None:
        """Fetch the comments on ``illust``."""
        return await self._get(
            f"{API_URL}/v3/illust/comments", Comments, [("illust_id", str(illust.id))]
        )

    async def comment_replies(self, comment: Comment) -> Comments | None:
        """Fetch the replies to ``comment``."""
        return await self._get(
            f"{API_URL}/v2/illust/comment/replies",
            Comments,
            [("comment_id", str(comment.id))],
        )

    async def bookmark_detail(self, illust: Illustration) -> BookmarkDetails | None:
        """Fetch the bookmark details of ``illust``."""
        return await self._get(
            f"{API_URL}/v2/illust/bookmark/detail",
            BookmarkDetails,
            [("illust_id", str(illust.id))],
        )

    async def follow(self, user: User, private_follow: bool = False) -> None:
        """Follow ``user`` and update its local follow state."""
        restrict = "private" if private_follow else "public"
        form = [("user_id", str(user.id)), ("restrict", restrict)]
        user.is_followed = 2 if private_follow else 1
        await self._post_form(f"{API_URL}/v1/user/follow/add", form)

    async def remove_follow(self, user: User) -> None:
        """Stop following ``user`` and update its local follow state."""
        user.is_followed = 0
        await self._post_form(f"{API_URL}/v1/user/follow/delete", [("user_id", str(user.id))])

    async def follow_detail(self, user: User) -> FollowDetails:
        """Fetch whether and how ``user`` is followed."""
        response = await self._http.get(
            f"{API_URL}/v1/user/follow/detail",
            params=[("user_id", str(user.id))],
            headers=self._auth_headers(),
        )
        return FollowDetails.from_json(_json_object(_json_body(response), "follow_detail"))

    async def related_illusts(self, illust: Illustration) -> Illusts | None:
        """Fetch works related to ``illust``."""
        return await self._get(
            f"{API_URL}/v2/illust/related", Illusts, [("illust_id", str(illust.id))]
        )

    async def search_autocomplete(self, query: str) -> list[Tag]:
        """Fetch tag suggestions for a partial search word."""
        response = await self._http.get(
            f"{API_URL}/v2/search/autocomplete",
            params=[("merge_plain_keyword_results", "true"), ("word", query)],
            headers=self._auth_headers(),
        )
        return [Tag.from_json(_as_object(item)) for item in _json_array(_json_body(response), "tags")]

    async def search_popular_preview(self, params: SearchRequest) -> Illusts | None:
        """Fetch the popular preview for a search."""
        return await self._get(
            f"{API_URL}/v1/search/popular-preview/illust",
            Illusts,
            params.query_items(include_sort=False),
        )

    async def search(self, params: SearchRequest) -> SearchResults | None:
        """Run a search for illustrations."""
        return await self._get(
            f"{API_URL}/v1/search/illust",
            SearchResults,
            params.query_items(include_sort=True),
        )

    async def latest_global(self, type: str) -> Illusts | None:
        """Fetch the newest works of a type; novels are not supported."""
        if type == "novel":
            return None
        return await self._get(
            f"{API_URL}/v1/illust/new",
            Illusts,
            [("filter", "for_android"), ("content_type", type)],
        )

    async def bookmarks_feed(self, type: str, restriction: str) -> Illusts | None:
        """Fetch the logged-in user's bookmarks; novels are not supported."""
        if type == "novel":
            return None
        if self.user is None:
            raise RuntimeError("no logged-in user to read bookmarks of")
        return await self._get(
            f"{API_URL}/v1/user/bookmarks/{type}",
            Illusts,
            [("user_id", str(self.user.id)), ("restrict", restriction)],
        )

    async def details(self, user: User) -> UserDetails | None:
        """Fetch the profile and workspace of ``user``."""
        return await self._get(
            f"{API_URL}/v2/user/detail", UserDetails, [("user_id", str(user.id))]
        )