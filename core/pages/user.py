"""
User profile page: profile card plus the user's public memos as a timeline.
"""

from __future__ import annotations

from html import escape

import core.config as config
from core.context import PageEnv, PageSettings
from core.errors import EntityNotFound
from core.records import MemoView, ResourceView, UserView
from core.rendering.avatar import gravatar_url
from core.rendering.dates import format_datetime_short, format_timestamp_title
from core.rendering.feed import PINNED_BLOCK_BADGE, render_empty_state, render_markdown_body
from core.rendering.layout import (
    IMAGE_MODAL_HTML,
    generate_container,
    generate_error_page,
    generate_footer,
    generate_page,
)
from core.rendering.resources import render_image_grid, split_resources
from core.rendering.scripts import (
    AUTH_JS,
    IMAGE_MODAL_JS,
    MARKED_SETUP_JS,
    build_scripts,
)
from core.services.memo_queries import (
    attach_memo_relations,
    get_site_settings,
    get_user,
    list_memos_by_user,
)

ADMIN_BADGE = (
    '<span style="display: inline-block; background: var(--highlight-color); color: #fff; padding: 0.15rem 0.5rem; '
    'border-radius: 10px; font-size: 0.65rem; font-weight: bold; margin-left: 0.5rem;">ADMIN</span>'
)


def _profile_card(user: UserView, memo_count: int, settings: PageSettings) -> str:
    avatar = gravatar_url(user.email, 80, base_url=settings.gravatar_base_url, default=settings.gravatar_default)
    name = escape(user.display_name)
    return f"""
<div style="padding: 20px; margin-bottom: 24px; display: flex; align-items: center; background: var(--cell-background-color); border-radius: var(--box-border-radius); box-shadow: var(--shadows);">
    <img src="{escape(avatar)}" alt="{name}" style="width: 80px; height: 80px; border-radius: 100%; border: 3px solid #fff; box-shadow: var(--shadows); display: block;">
    <div style="flex: 1; margin-left: 16px; padding-right: 16px;">
        <div class="user-nickname" style="font-size: 24px; font-weight: 600; color: var(--foreground-color);">{name}{ADMIN_BADGE if user.is_admin else ""}</div>
        <div style="font-size: 14px; color: var(--secondary-color); margin-top: 4px;">@{escape(user.username)}</div>
    </div>
    <div style="text-align: right;">
        <div class="memo-count" style="font-size: 32px; font-weight: bold; color: var(--highlight-color); line-height: 1;">{memo_count}</div>
        <div style="font-size: 12px; color: var(--secondary-color); margin-top: 4px;">公开备忘录</div>
    </div>
</div>
<div style="padding: 10px 0; margin-bottom: 24px; display: flex; align-items: center; font-size: 14px; border-bottom: 1px solid var(--border-color); padding-bottom: 16px;">
    <a href="/" style="color: var(--secondary-color); text-decoration: none;">← 返回首页</a>
</div>"""


def _timeline_attachments(others: list[ResourceView]) -> str:
    if not others:
        return ""
    links = "".join(
        f'<a href="{escape(resource.filepath)}" class="memo-resource" style="color: var(--secondary-color); '
        'border: 1px solid var(--border-color); border-radius: 4px; padding: 4px 10px; text-decoration: none; '
        'display: inline-block; background: var(--code-background-color);" target="_blank" rel="noopener noreferrer">'
        f"{escape(resource.filename)}</a>"
        for resource in others
    )
    return (
        '<div style="border-left: 2px solid var(--border-color); padding: 0 0 0 30px; font-size: 14px; line-height: 1.6; '
        'margin-left: 3px; display: flex; gap: 8px; align-items: center; flex-wrap: wrap; margin-top: 16px;">'
        f'<div style="width: 16px; height: 16px; opacity: 0.25; display: inline-block;">📎</div>{links}</div>'
    )


def render_timeline_item(memo: MemoView, settings: PageSettings) -> str:
    created = settings.local_datetime(memo.created_ts)
    images, others = split_resources(memo.resource_list)
    accent = "var(--highlight-color)" if memo.pinned else "var(--link-color)"
    dot_style = "background-color: var(--highlight-color);" if memo.pinned else ""
    return f"""
<div class="item" data-memo-id="{memo.id}" style="margin-bottom: 48px;">
    <div class="time-box">
        <div class="dot" style="{dot_style}"></div>
        <div class="time">
            <a href="/m/{memo.id}" style="color: {accent}; text-decoration: none;">
                <time datetime="{created.isoformat()}" title="{format_timestamp_title(created)}">{format_datetime_short(created)}</time>
            </a>
        </div>
    </div>
    <div class="memo-box">
        {PINNED_BLOCK_BADGE if memo.pinned else ""}
        {render_markdown_body(memo, css_class="memo-text")}
    </div>
    {render_image_grid(images, extra_style=" border-left: 2px solid var(--border-color); padding-left: 30px; margin-left: 3px;")}
    {_timeline_attachments(others)}
</div>"""


def render_user_page(request, env: PageEnv, user_id: str) -> str:
    settings = env.settings
    try:
        db = env.db
        user = get_user(db, int(user_id)) if str(user_id).isdigit() else None
        if user is None:
            raise EntityNotFound("用户未找到")

        site = get_site_settings(db, settings.site_title)
        memos = list_memos_by_user(db, user.id)
        attach_memo_relations(db, memos, include_tags=False)

        if memos:
            timeline = '<div class="items">' + "".join(render_timeline_item(memo, settings) for memo in memos) + "</div>"
        else:
            timeline = render_empty_state(
                "暂无公开备忘录",
                f"{user.display_name} 还没有创建任何公开备忘录",
                icon="📝",
            )

        body = (
            generate_container(_profile_card(user, len(memos), settings) + timeline, site_title=site["site_title"])
            + IMAGE_MODAL_HTML
            + generate_footer()
        )
        scripts = build_scripts(AUTH_JS, MARKED_SETUP_JS, IMAGE_MODAL_JS)
        return generate_page(f"{user.display_name} 的备忘录", body, scripts, site["site_title"])
    except Exception as exc:
        config.logger.error(f"Error generating user page ({request.url.path}): {exc}")
        return generate_error_page(
            f"无法加载用户页面: {exc}",
            heading="加载失败",
            site_title=settings.site_title,
            home_link=True,
        )
