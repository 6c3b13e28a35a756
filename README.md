# piqi

An asynchronous client for the pixiv mobile app API, built on `httpx`, with
plain dataclass models for what it returns: illustrations, feeds, users,
profiles, comments, bookmarks and search results.

## Installation

```
pip install piqi
```

For the test suite:

```
pip install "piqi[test]"
pytest
```

## Modules

- `piqi.client` – `Piqi`, the API session
- `piqi.illustrations` – `Illustration`, `Illusts`, `Recommended`, `SearchResults`
- `piqi.users` – `User`, `Account`, `Profile`, `Workspace`, `UserDetails`, `FollowDetails`
- `piqi.comments` – `Comment`, `Comments`
- `piqi.bookmarks` – `BookmarkDetails`
- `piqi.media` – `ImageUrls`, `Tag`, `BookmarkTag`, `Series`, `Stamp`, `PrivacyPolicy`
- `piqi.search` – `SearchRequest`, `SearchTarget`

## Logging in

`Piqi(client_id, client_secret, http_client=None)` takes the OAuth client
identifier and client secret of the app it acts as. Pass your own
`httpx.AsyncClient` to share a connection pool; if you pass none, `Piqi`
creates one and closes it in `close()`. It is an async context manager,
and leaving the `async with` block calls `close()`.

```python
import asyncio

from piqi.client import Piqi


async def main():
    async with Piqi("placeholder", "secret") as piqi:
        if not await piqi.login("token"):
            raise SystemExit("login failed")

        feed = await piqi.recommended_feed("illust", True, False)
        if feed is not None:
            for illust in feed:
                print(illust.id, illust.title)


asyncio.run(main())
```

- `login(refresh_token)` exchanges a refresh token for an access token and
  returns `True` when the server answers with HTTP 200. The access token is
  treated as valid for one hour. If the answer carries a new refresh token it
  is kept, otherwise the one given is. The account from the answer is stored
  in `piqi.user` as an `Account`.
- `set_login(access_token, refresh_token)` stores tokens you already hold,
  without a request, and treats the access token as valid for one hour.
- `is_logged_in()` returns `True` while the access token is set and not
  expired; otherwise it logs in again with the stored refresh token and
  returns the outcome.

Calls that fetch authenticated data log in again first when the token has
expired, and return `None` if that fails (`user_illusts` returns an empty
list instead). `follow_detail` and `search_autocomplete` send the current
token as it is, without that check.

## Feeds

Feed calls return an `Illusts` object (or `Recommended` / `SearchResults`,
which extend it). It behaves like a sequence of `Illustration` objects:
`len()`, indexing and iteration all work. `next_url` holds the link to the
following page, or an empty string. To load more, fetch the next page and
append it:

```python
next_page = await piqi.fetch_next_feed(feed)
if next_page is not None:
    feed.extend(next_page)
```

`fetch_next_feed` raises `ValueError` when the feed has no next page.

Available feeds:

- `walkthrough()` – the feed shown before logging in; sends no token
- `recommended_feed(type, include_ranking=False, include_privacy_policy=False)` –
  for `"novel"` the two flags are not sent
- `following_feed(type, restriction)` – `restriction` is `"public"` or `"private"`
- `latest_global(type)`
- `bookmarks_feed(type, restriction)` – bookmarks of the logged-in account;
  raises `RuntimeError` if no account has logged in yet
- `related_illusts(illust)`
- `user_illusts(user, type)` – returns a list of `Illustration`

For `latest_global` and `bookmarks_feed` the type `"novel"` is not
supported and gives `None`.

## Bookmarks and follows

```python
await piqi.add_bookmark(illust, False)   # public bookmark
await piqi.remove_bookmark(illust)
details = await piqi.bookmark_detail(illust)

await piqi.follow(user, True)            # private follow
await piqi.remove_follow(user)
follow_state = await piqi.follow_detail(user)
```

`add_bookmark` sets `illust.is_bookmarked` to 1 (public) or 2 (private)
and, if it was not bookmarked before, raises `total_bookmarks` by one;
`remove_bookmark` sets it to 0 and lowers `total_bookmarks` by one.
`follow` sets `user.is_followed` to 1 or 2 and `remove_follow` sets it to 0.
These local changes happen before the request is sent.

## Users and comments

- `details(user)` returns `UserDetails` with the `user`, their `profile`
  and their `workspace`.
- `illust_comments(illust)` and `comment_replies(comment)` return
  `Comments`, whose `comments` are `Comment` objects; a comment made with a
  stamp carries a `Stamp`, others have `stamp` set to `None`.

## Search

```python
from datetime import date

from piqi.media import Tag
from piqi.search import SearchRequest, SearchTarget

request = SearchRequest(search_target=SearchTarget.EXACT_TAGS_MATCH)
request.set_tags([Tag(name="landscape"), Tag(name="sky")])
request.end_date = date(2024, 12, 31)

results = await piqi.search(request)
preview = await piqi.search_popular_preview(request)
suggestions = await piqi.search_autocomplete("lands")
```

A `SearchRequest` holds the tags to search for, a `SearchTarget`
(`PARTIAL_TAGS_MATCH` by default, `EXACT_TAGS_MATCH` or
`TITLE_AND_DESCRIPTION`), `sort_ascending` (newest first by default) and an
optional date range. The range is sent only when `end_date` is set; a
missing `start_date` then stands for today. `query_items(include_sort)`
gives the query parameters in order, and raises `ValueError` when the
request has no tags. `search` sends the sort order; the popular preview
does not. `search_autocomplete` returns a list of `Tag`.

## Data models

Every model is a dataclass built from the JSON the API returns with
`from_json`. Missing or mistyped fields fall back to empty strings, zero,
`False` or empty lists, so saved responses load without a connection:

```python
import json

from piqi.illustrations import Illusts

with open("feed.json", encoding="utf-8") as fh:
    feed = Illusts.from_json(json.load(fh))
```

Dates (`Illustration.create_date`, `Comment.date`) are `datetime` objects,
or `None` when absent or not valid ISO 8601.

## What it does not do

`piqi` is a library only. It has no command-line program and no user
interface, it does not download images, and it does not store tokens or
responses anywhere: keeping the refresh token between runs is up to you.