import pytest

from piqi.media import ImageUrls
from piqi.users import Account, FollowDetails, Profile, User, UserDetails, Workspace

USER_JSON = {
    "id": 11,
    "name": "Sample Artist",
    "account": "sample_artist",
    "profile_image_urls": {"medium": "https://img.example.com/avatar.jpg"},
    "is_followed": True,
    "is_accept_request": True,
}


def test_user_parses_fields():
    user = User.from_json(USER_JSON)
    assert user.id == USER_JSON["id"]
    assert user.name == USER_JSON["name"]
    assert user.account == USER_JSON["account"]
    assert user.profile_image_urls == ImageUrls(medium="https://img.example.com/avatar.jpg")
    assert user.is_accept_request is True


def test_user_followed_flag_becomes_int():
    assert User.from_json(USER_JSON).is_followed == int(True)
    assert User.from_json({**USER_JSON, "is_followed": False}).is_followed == User().is_followed


def test_user_string_id_is_converted():
    assert User.from_json({"id": "12345"}).id == int("12345")


@pytest.mark.parametrize("raw", ["abc", "", "12x", None])
def test_user_bad_id_gives_default(raw):
    assert User.from_json({"id": raw}).id == User().id


def test_user_empty_json_equals_default():
    assert User.from_json({}) == User()


def test_account_extends_user():
    data = {
        **USER_JSON,
        "is_mail_authorized": 1,
        "is_premium": True,
        "mail_address": "user@example.com",
        "require_policy_agreement": True,
        "x_restrict": True,
    }
    account = Account.from_json(data)
    assert isinstance(account, User)
    assert account.id == USER_JSON["id"]
    assert account.name == USER_JSON["name"]
    assert account.is_mail_authorized is True
    assert account.is_premium is True
    assert account.mail_address == "user@example.com"
    assert account.require_policy_agreement is True
    assert account.x_restrict == int(True)


def test_account_mail_authorized_needs_number():
    assert Account.from_json({"is_mail_authorized": True}).is_mail_authorized is False


def test_account_defaults():
    assert Account.from_json({}) == Account()


def test_profile_parses_fields():
    data = {
        "webpage": "https://www.example.com",
        "region": "Somewhere",
        "address_id": 13,
        "country_code": "XX",
        "total_follow_users": 5,
        "total_my_pixiv_users": 6,
        "total_illusts": 7,
        "total_manga": 8,
        "total_novels": 9,
        "total_illust_series": 10,
        "total_novel_series": 11,
        "background_image_url": "https://img.example.com/banner.jpg",
        "is_premium": True,
        "is_using_custom_profile_image": True,
        "gender": "unknown",
    }
    profile = Profile.from_json(data)
    assert profile.webpage == data["webpage"]
    assert profile.region == data["region"]
    assert profile.address_id == data["address_id"]
    assert profile.country_code == data["country_code"]
    assert profile.total_follow_users == data["total_follow_users"]
    assert profile.total_my_pixiv_users == data["total_my_pixiv_users"]
    assert profile.total_illusts == data["total_illusts"]
    assert profile.total_manga == data["total_manga"]
    assert profile.total_novels == data["total_novels"]
    assert profile.total_illust_series == data["total_illust_series"]
    assert profile.total_novel_series == data["total_novel_series"]
    assert profile.background_image_url == data["background_image_url"]
    assert profile.is_premium is True
    assert profile.is_using_custom_profile_image is True


def test_profile_null_webpage():
    assert Profile.from_json({"webpage": None}).webpage == Profile().webpage


def test_workspace_reads_every_key():
    keys = ["pc", "monitor", "tool", "scanner", "tablet", "mouse",
            "printer", "desktop", "music", "desk", "chair", "comment"]
    data = {key: f"my {key}" for key in keys}
    workspace = Workspace.from_json(data)
    for key in keys:
        assert getattr(workspace, key) == f"my {key}"


def test_workspace_empty():
    assert Workspace.from_json({}) == Workspace()


def test_user_details_builds_nested_objects():
    data = {
        "user": USER_JSON,
        "profile": {"total_illusts": 3},
        "workspace": {"pc": "desktop tower"},
        "profile_publicity": {},
    }
    details = UserDetails.from_json(data)
    assert details.user == User.from_json(USER_JSON)
    assert details.profile.total_illusts == data["profile"]["total_illusts"]
    assert details.workspace.pc == "desktop tower"


def test_user_details_missing_parts_default():
    assert UserDetails.from_json({}) == UserDetails()


def test_follow_details():
    details = FollowDetails.from_json({"is_followed": True, "restrict": "private"})
    assert details == FollowDetails(is_followed=True, restriction="private")


def test_follow_details_empty():
    assert FollowDetails.from_json({}) == FollowDetails()