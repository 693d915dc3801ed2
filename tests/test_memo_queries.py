import os

os.environ.setdefault("DB_BACKEND", "sqlite")

from core.models import RowStatus, Visibility
from core.services import memo_queries


def test_public_feed_filters_and_orders(seed):
    user = seed.user()
    older = seed.memo(user, "older")
    newer = seed.memo(user, "newer")
    pinned = seed.memo(user, "pinned", pinned=True)
    seed.memo(user, "private", visibility=Visibility.PRIVATE.value)
    seed.memo(user, "archived", row_status=RowStatus.ARCHIVED.value)

    memos = memo_queries.list_public_memos(seed.session, limit=20)

    assert [m.id for m in memos] == [pinned.id, newer.id, older.id]
    assert memo_queries.count_public_memos(seed.session) == 3
    assert memos[0].creator_name == "Alice"
    assert memos[0].creator_email == "alice@example.com"


def test_public_feed_limit_offset(seed):
    user = seed.user()
    created = [seed.memo(user, f"memo {i}") for i in range(5)]

    page = memo_queries.list_public_memos(seed.session, limit=2, offset=2)

    assert [m.id for m in page] == [created[2].id, created[1].id]


def test_memo_without_creator_row(seed):
    memo = seed.memo(None, "orphan")

    view = memo_queries.get_memo(seed.session, memo.id)

    assert view.creator_name is None
    assert view.display_name == "匿名"


def test_resources_are_normalized_and_tags_attached(seed):
    user = seed.user()
    memo = seed.memo(user)
    stored = seed.resource(memo, "a.png", filepath="uploads/a.png")
    seed.resource(memo, "b.png", filepath="https://cdn.example.com/b.png")
    seed.tag(memo, "travel")

    [view] = memo_queries.list_public_memos(seed.session, limit=20)
    memo_queries.attach_memo_relations(seed.session, [view])

    assert [r.filepath for r in view.resource_list] == [
        f"/api/v1/resource/{stored.id}/file",
        "https://cdn.example.com/b.png",
    ]
    assert [t.name for t in view.tag_list] == ["travel"]


def test_memos_by_tag_and_user_are_public_only(seed):
    alice = seed.user()
    bob = seed.user("bob", "Bob", "bob@example.com")
    shared = seed.memo(alice, "a1")
    seed.tag(shared, "life")
    hidden = seed.memo(alice, "a2", visibility=Visibility.PRIVATE.value)
    seed.tag(hidden, "life")
    seed.memo(bob, "b1")

    tag = memo_queries.get_tag_by_name(seed.session, "life")
    assert [m.id for m in memo_queries.list_memos_by_tag(seed.session, tag.id)] == [shared.id]
    assert [m.content for m in memo_queries.list_memos_by_user(seed.session, alice.id)] == ["a1"]
    assert memo_queries.get_tag_by_name(seed.session, "missing") is None
    assert memo_queries.get_user(seed.session, 9999) is None


def test_site_settings_prefer_stored_title(seed):
    assert memo_queries.get_site_settings(seed.session, "Memos") == {"site_title": "Memos"}

    seed.setting("site_title", "我的小站")
    assert memo_queries.get_site_settings(seed.session, "Memos") == {"site_title": "我的小站"}
