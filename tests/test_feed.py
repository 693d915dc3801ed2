from core.context import PageSettings
from core.records import MemoView, ResourceView, TagView
from core.rendering.feed import (
    PINNED_BADGE,
    render_feed,
    render_memo_item,
    tag_href,
)

SETTINGS = PageSettings()


def _memo(memo_id=1, **overrides) -> MemoView:
    values = dict(
        id=memo_id,
        creator_id=10,
        content="hello **world**",
        visibility="PUBLIC",
        pinned=False,
        row_status="NORMAL",
        created_ts=1704450600,  # 2024-01-05T10:30:00Z
        updated_ts=1704450600,
        display_ts=1704450600,
        creator_name="Alice",
        creator_username="alice",
        creator_email="alice@example.com",
    )
    values.update(overrides)
    return MemoView(**values)


def test_pinned_memo_has_badge():
    html = render_memo_item(_memo(pinned=True), SETTINGS)
    assert PINNED_BADGE in html
    assert "置顶" in html


def test_unpinned_memo_has_no_badge():
    html = render_memo_item(_memo(pinned=False), SETTINGS)
    assert "pinned-badge" not in html
    assert "置顶" not in html


def test_memo_item_links_author_detail_and_date():
    html = render_memo_item(_memo(memo_id=42), SETTINGS)

    assert 'data-memo-id="42"' in html
    assert 'href="/user/10"' in html
    assert 'href="/m/42"' in html
    assert "2024年1月5日" in html
    assert '<span class="memo-author"' in html
    assert ">Alice</span>" in html


def test_display_name_falls_back_to_username_then_anonymous():
    html = render_memo_item(_memo(creator_name=None), SETTINGS)
    assert ">alice</span>" in html

    html = render_memo_item(_memo(creator_name=None, creator_username=None), SETTINGS)
    assert ">匿名</span>" in html


def test_content_is_escaped_for_client_markdown():
    html = render_memo_item(_memo(content="<script>alert(1)</script>"), SETTINGS)

    assert '<div class="memo-content markdown-content" id="memo-1">' in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "<script>" not in html


def test_tags_render_as_links():
    memo = _memo(tag_list=[TagView(id=1, name="读书"), TagView(id=2, name="a b")])
    html = render_memo_item(memo, SETTINGS)

    assert f'href="{tag_href("读书")}"' in html
    assert "/tag/%E8%AF%BB%E4%B9%A6" in html
    assert "/tag/a%20b" in html
    assert "#读书" in html


def test_resources_split_into_grid_and_links():
    memo = _memo(
        resource_list=[
            ResourceView(id=1, filename="a.png", filepath="/api/v1/resource/1/file", type="image/png"),
            ResourceView(id=2, filename="b.jpg", filepath="https://cdn.example.com/b.jpg", type="image/jpeg"),
            ResourceView(id=3, filename="c.zip", filepath="/api/v1/resource/3/file", type="application/zip"),
        ]
    )
    html = render_memo_item(memo, SETTINGS)

    assert 'data-columns="2"' in html
    assert 'src="https://cdn.example.com/b.jpg"' in html
    assert "📎 c.zip" in html


def test_empty_feed_renders_empty_state_without_items():
    html = render_feed([], SETTINGS, empty_title="暂无备忘录", empty_message="广场上还很空，快来创建第一条备忘录吧")

    assert 'class="empty-state"' in html
    assert "暂无备忘录" in html
    assert "广场上还很空，快来创建第一条备忘录吧" in html
    assert 'class="items"' not in html


def test_feed_renders_items_and_optional_load_more():
    memos = [_memo(1), _memo(2)]

    html = render_feed(memos, SETTINGS, empty_title="x", empty_message="y")
    assert '<div class="items" id="memoList">' in html
    assert html.count('class="item"') == 2
    assert "loadMoreBtn" not in html

    html = render_feed(memos, SETTINGS, empty_title="x", empty_message="y", has_more=True)
    assert 'id="loadMoreBtn"' in html
    assert "加载更多" in html
