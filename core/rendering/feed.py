"""
Feed assembly shared by the home, explore and tag pages.

A feed is a list of memo items (avatar, author, date, pinned badge, tags,
markdown body, image grid, attachments) or, when there are no memos, a
single empty-state block.  Markdown is left as escaped text inside a
``markdown-content`` container; the client script parses it with marked.js.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Optional
from urllib.parse import quote

from core.context import PageSettings
from core.records import MemoView, TagView
from core.rendering.avatar import gravatar_url
from core.rendering.dates import format_date
from core.rendering.resources import (
    render_attachment_links,
    render_image_grid,
    split_resources,
)

PINNED_BADGE = (
    '<span class="pinned-badge" style="display: inline-block; background: var(--highlight-color); color: #fff; '
    'padding: 2px 8px; border-radius: 10px; font-size: 11px; font-weight: bold; margin-left: 4px;">置顶</span>'
)

PINNED_BLOCK_BADGE = (
    '<div class="pinned-badge" style="display: inline-block; background: var(--highlight-color); color: #fff; '
    'padding: 0.25rem 0.75rem; border-radius: 12px; font-size: 0.75rem; font-weight: bold; margin-bottom: 12px;">'
    "📌 置顶</div><br>"
)


def tag_href(name: str) -> str:
    return f"/tag/{quote(name, safe='')}"


def render_tag_links(tags: Optional[Iterable[TagView]]) -> str:
    return "".join(
        f'<a href="{escape(tag_href(tag.name))}" class="memo-tag" style="display: inline-block; margin-left: 2px; '
        'padding: 2px 2px; background: var(--cell-background-color); border: 1px solid var(--border-color); '
        'border-radius: 2px; font-size: 12px; text-decoration: none; color: #C0C0C0;">'
        f"#{escape(tag.name)}</a>"
        for tag in tags or ()
    )


def render_pinned_badge(pinned: bool) -> str:
    return PINNED_BADGE if pinned else ""


def render_markdown_body(memo: MemoView, *, css_class: str = "memo-content", element_id: Optional[str] = None) -> str:
    element_id = element_id or f"memo-{memo.id}"
    return (
        f'<div class="{css_class} markdown-content" id="{escape(element_id)}">'
        f"{escape(memo.content)}</div>"
    )


def render_memo_item(memo: MemoView, settings: PageSettings) -> str:
    avatar = gravatar_url(
        memo.creator_email,
        40,
        base_url=settings.gravatar_base_url,
        default=settings.gravatar_default,
    )
    date_str = format_date(settings.local_datetime(memo.created_ts))
    images, others = split_resources(memo.resource_list)

    return f"""
<div class="item" data-memo-id="{memo.id}">
    <div class="time-box">
        <div class="dot"></div>
        <div class="time" style="display: flex; align-items: center; gap: 12px; flex-wrap: wrap;">
            <img src="{escape(avatar)}" alt="头像" style="width: 30px; height: 30px; border-radius: 100%; border: 2px solid #fff; box-shadow: var(--shadows);">
            <div style="display: flex; align-items: center; gap: 6px;">
                <a href="/user/{memo.creator_id}" style="display: flex; align-items: center; gap: 8px; text-decoration: none;"><span class="memo-author" style="color: var(--foreground-color); font-weight: 500; font-size: 14px;">{escape(memo.display_name)}</span></a>
            </div>
            <span style="color: var(--secondary-color);">·</span>
            <a href="/m/{memo.id}" class="time" style="color: var(--highlight-color);">{date_str}</a>
            {render_pinned_badge(memo.pinned)}
            {render_tag_links(memo.tag_list)}
        </div>
    </div>
    <div class="memo-box">
        {render_markdown_body(memo)}
        {render_image_grid(images)}
        {render_attachment_links(others)}
    </div>
</div>"""


def render_empty_state(title: str, message: str, *, icon: str = "") -> str:
    icon_html = f'<div style="font-size: 48px; margin-bottom: 16px; opacity: 0.3;">{icon}</div>' if icon else ""
    return f"""
<div class="empty-state">
    {icon_html}<h3>{escape(title)}</h3>
    <p>{escape(message)}</p>
</div>"""


LOAD_MORE_HTML = """
<div class="pages-container">
    <button id="loadMoreBtn" class="btn-outline" onclick="loadMoreMemos()">
        加载更多
    </button>
</div>
<div id="loadingIndicator" style="display: none; text-align: center; color: var(--secondary-color); margin-top: 16px;">
    加载中...
</div>"""


def render_feed(
    memos: list[MemoView],
    settings: PageSettings,
    *,
    empty_title: str,
    empty_message: str,
    has_more: bool = False,
) -> str:
    if not memos:
        return render_empty_state(empty_title, empty_message)

    items = "".join(render_memo_item(memo, settings) for memo in memos)
    html = f'<div class="items" id="memoList">{items}</div>'
    if has_more:
        html += LOAD_MORE_HTML
    return html


__all__ = [
    "PINNED_BADGE",
    "PINNED_BLOCK_BADGE",
    "LOAD_MORE_HTML",
    "tag_href",
    "render_tag_links",
    "render_pinned_badge",
    "render_markdown_body",
    "render_memo_item",
    "render_empty_state",
    "render_feed",
]
