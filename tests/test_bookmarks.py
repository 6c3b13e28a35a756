from piqi.bookmarks import BookmarkDetails
from piqi.media import BookmarkTag


def test_bookmark_details_parses_fields():
    data = {
        "is_bookmarked": True,
        "tags": [
            {"name": "cat", "is_registered": True},
            {"name": "dog", "is_registered": False},
        ],
        "restrict": "public",
    }
    details = BookmarkDetails.from_json(data)
    assert details.is_bookmarked is True
    assert details.restriction == "public"
    assert details.tags == [
        BookmarkTag(name="cat", is_registered=True),
        BookmarkTag(name="dog", is_registered=False),
    ]


def test_bookmark_details_keeps_tag_order():
    names = ["c", "a", "b"]
    details = BookmarkDetails.from_json({"tags": [{"name": n} for n in names]})
    assert [tag.name for tag in details.tags] == names


def test_bookmark_details_empty():
    assert BookmarkDetails.from_json({}) == BookmarkDetails()


def test_bookmark_details_non_list_tags():
    assert BookmarkDetails.from_json({"tags": {"name": "cat"}}).tags == []


def test_bookmark_details_non_object_tag_gives_default_tag():
    details = BookmarkDetails.from_json({"tags": ["cat"]})
    assert details.tags == [BookmarkTag()]


def test_default_instances_do_not_share_tags():
    first = BookmarkDetails()
    first.tags.append(BookmarkTag(name="cat"))
    assert BookmarkDetails().tags == []