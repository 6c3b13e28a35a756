from piqi.illustrations import Illustration, Illusts, Recommended, SearchResults
from piqi.media import ImageUrls, PrivacyPolicy


def _illust(illust_id, **extra):
    data = {
        "id": illust_id,
        "title": f"title {illust_id}",
        "image_urls": {"medium": "https://img.example.com/m.jpg"},
        "caption": "a caption",
        "restrict": 0,
        "user": {"id": 77, "name": "artist", "account": "artist_acc"},
        "tags": [{"name": "cat", "translated_name": "neko"}, {"name": "dog"}],
        "tools": ["Krita", "GIMP"],
        "create_date": "2024-05-06T07:08:09+09:00",
        "page_count": 2,
        "width": 800,
        "height": 600,
        "sanity_level": 2,
        "x_restrict": 0,
        "meta_single_page": {"original_image_url": "https://img.example.com/o.png"},
        "meta_pages": [
            {"image_urls": {"original": "https://img.example.com/p0.png"}},
            {"image_urls": {"original": "https://img.example.com/p1.png"}},
        ],
        "total_view": 1234,
        "total_bookmarks": 56,
        "is_bookmarked": True,
        "visible": True,
        "is_muted": False,
        "illust_ai_type": 1,
        "illust_book_type": 0,
    }
    data.update(extra)
    return data


def test_illustration_fields():
    ill = Illustration.from_json(_illust(42))
    assert ill.id == 42
    assert ill.title == "title 42"
    assert ill.image_urls.medium == "https://img.example.com/m.jpg"
    assert ill.caption == "a caption"
    assert ill.user.id == 77
    assert ill.user.name == "artist"
    assert [t.name for t in ill.tags] == ["cat", "dog"]
    assert ill.tags[0].translated_name == "neko"
    assert ill.tools == ["Krita", "GIMP"]
    assert ill.page_count == 2
    assert (ill.width, ill.height) == (800, 600)
    assert ill.meta_single_page == "https://img.example.com/o.png"
    assert [p.original for p in ill.meta_pages] == [
        "https://img.example.com/p0.png",
        "https://img.example.com/p1.png",
    ]
    assert ill.total_view == 1234
    assert ill.total_bookmarks == 56
    assert ill.is_bookmarked == 1
    assert ill.visible is True
    assert ill.illust_ai_type == 1


def test_create_date_round_trip():
    ill = Illustration.from_json(_illust(1))
    assert ill.create_date.isoformat() == "2024-05-06T07:08:09+09:00"


def test_invalid_create_date_is_none():
    ill = Illustration.from_json(_illust(1, create_date="not a date"))
    assert ill.create_date is None


def test_series_only_when_present():
    assert Illustration.from_json(_illust(1)).series is None
    ill = Illustration.from_json(_illust(1, series={"id": 9, "title": "saga"}))
    assert (ill.series.id, ill.series.title) == (9, "saga")


def test_empty_json_gives_defaults():
    ill = Illustration.from_json({})
    assert ill == Illustration()
    assert ill.image_urls == ImageUrls()


def test_illusts_parse_and_sequence_protocol():
    feed = Illusts.from_json(
        {"illusts": [_illust(1), _illust(2)], "next_url": "https://api.example.com/next"}
    )
    assert len(feed) == 2
    assert feed[1].id == 2
    assert [i.id for i in feed] == [1, 2]
    assert feed.next_url == "https://api.example.com/next"


def test_illusts_missing_next_url():
    feed = Illusts.from_json({"illusts": [_illust(1)]})
    assert feed.next_url == ""


def test_extend_appends_and_takes_next_url():
    first = Illusts.from_json({"illusts": [_illust(1)], "next_url": "https://a.example.com/1"})
    second = Illusts.from_json(
        {"illusts": [_illust(2), _illust(3)], "next_url": "https://a.example.com/2"}
    )
    first.extend(second)
    assert [i.id for i in first] == [1, 2, 3]
    assert first.next_url == "https://a.example.com/2"


def test_recommended():
    rec = Recommended.from_json(
        {
            "illusts": [_illust(1)],
            "ranking_illusts": [_illust(5), _illust(6)],
            "privacy_policy": {"version": "v2", "message": "please read"},
            "contest_exists": True,
            "next_url": "https://a.example.com/n",
        }
    )
    assert [i.id for i in rec] == [1]
    assert [i.id for i in rec.ranking_illusts] == [5, 6]
    assert rec.privacy_policy == PrivacyPolicy(version="v2", message="please read")
    assert rec.contest_exists is True
    assert rec.next_url == "https://a.example.com/n"


def test_search_results():
    res = SearchResults.from_json({"illusts": [_illust(3)], "show_ai": True})
    assert res.show_ai is True
    assert res[0].id == 3
    assert res.next_url == ""