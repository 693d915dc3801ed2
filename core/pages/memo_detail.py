"""
Memo detail page.

Only public, non-archived memos are rendered; anything else reads as missing
since the page has no viewer identity server-side. Edit and delete controls
are revealed client-side once ``GET /api/v1/user`` confirms the viewer may
change the memo.
"""

from __future__ import annotations

from html import escape

import core.config as config
from core.context import PageEnv
from core.errors import EntityNotFound
from core.models import RowStatus, Visibility
from core.records import MemoView
from core.rendering.avatar import gravatar_url
from core.rendering.dates import (
    format_datetime_long,
    format_month_day_time,
    format_timestamp_title,
)
from core.rendering.feed import PINNED_BLOCK_BADGE, render_markdown_body, render_tag_links
from core.rendering.layout import (
    IMAGE_MODAL_HTML,
    MESSAGE_MODAL_HTML,
    generate_container,
    generate_error_page,
    generate_footer,
    generate_page,
)
from core.rendering.resources import render_attachment_panel, render_image_grid, split_resources
from core.rendering.scripts import (
    AUTH_JS,
    IMAGE_MODAL_JS,
    MARKED_SETUP_JS,
    MEMO_DETAIL_JS,
    MESSAGE_MODAL_JS,
    build_scripts,
)
from core.services.memo_queries import (
    get_memo,
    get_site_settings,
    list_memo_resources,
    list_memo_tags,
)

DELETE_MODAL_HTML = """
<div id="deleteModal" style="display: none; position: fixed; z-index: 1000; left: 0; top: 0; width: 100%; height: 100%; background-color: rgba(61, 61, 61, 0.8);">
    <div style="background-color: var(--cell-background-color); margin: 10% auto; padding: 24px; border-radius: var(--box-border-radius); width: 90%; max-width: 400px; text-align: center; box-shadow: 0 4px 20px rgba(0,0,0,0.3); border: 1px solid var(--border-color);">
        <div style="font-size: 48px; margin-bottom: 16px;">⚠️</div>
        <h3 style="color: var(--foreground-color); margin-bottom: 12px;">确认删除</h3>
        <p style="color: var(--secondary-color); margin-bottom: 24px;">
            您确定要删除这条备忘录吗？<br>
            <strong style="color: #c82333;">此操作无法撤销！</strong>
        </p>
        <div style="display: flex; gap: 10px; justify-content: center;">
            <button class="btn-outline" onclick="hideDeleteConfirm()">取消</button>
            <button class="btn-outline" style="color: #c82333; border-color: #c82333;" onclick="confirmDelete()">删除</button>
        </div>
    </div>
</div>"""

ACTIONS_HTML = """
<div style="border-left: 2px solid var(--border-color); padding: 30px 0 10px 30px; margin-left: 3px;">
    <div id="guestActions" style="display: none; text-align: center;">
        <p style="color: var(--secondary-color); margin-bottom: 12px; font-size: 14px;">请登录后编辑此备忘录</p>
        <a href="/login" class="btn">登录</a>
    </div>
    <div id="userActions" style="display: none; gap: 10px; justify-content: flex-start;">
        <button class="btn-outline" onclick="toggleEditForm()">✏️ 编辑</button>
        <button class="btn-outline" onclick="showDeleteConfirm()">🗑️ 删除</button>
    </div>
    <div id="noPermissionActions" style="display: none;">
        <p style="color: var(--secondary-color); font-style: italic; font-size: 14px;">只有创建者或管理员可以编辑此备忘录</p>
    </div>
</div>"""


def _is_viewable(memo: MemoView) -> bool:
    return memo.row_status == RowStatus.NORMAL.value and memo.visibility == Visibility.PUBLIC.value


def _breadcrumb(memo: MemoView, avatar: str) -> str:
    name = escape(memo.display_name)
    return f"""
<div style="padding: 10px 0; margin-bottom: 24px; display: flex; align-items: center; border-bottom: 1px solid var(--border-color); padding-bottom: 16px;">
    <img src="{escape(avatar)}" alt="{name}" style="width: 24px; height: 24px; border-radius: 100%; border: 2px solid #fff; box-shadow: var(--shadows); display: block;">
    <div style="flex: 1; font-size: 14px; margin-left: 10px; color: var(--secondary-color);">
        <a href="/explore" style="color: var(--secondary-color); text-decoration: none;">广场</a>
        <span style="margin: 0 0.5rem;">/</span>
        <a href="/user/{memo.creator_id}" style="color: var(--secondary-color); text-decoration: none;">{name}</a>
        <span style="margin: 0 0.5rem;">/</span>
        <span style="color: var(--foreground-color);">备忘录详情</span>
    </div>
</div>"""


def _edit_form(memo: MemoView) -> str:
    return f"""
<div id="editForm" style="display: none; border-left: 2px solid var(--border-color); padding: 30px 0 30px 30px; margin-left: 3px; margin-top: 20px;">
    <h3 style="margin-bottom: 16px; color: var(--highlight-color); font-size: 18px;">✏️ 编辑备忘录</h3>
    <form id="updateMemoForm">
        <div class="form-group">
            <label class="form-label" for="editContent">内容</label>
            <textarea id="editContent" name="content" class="form-textarea" required>{escape(memo.content)}</textarea>
        </div>
        <div style="display: flex; gap: 10px;">
            <button type="submit" class="btn">保存修改</button>
            <button type="button" class="btn btn-secondary" onclick="toggleEditForm()">取消</button>
        </div>
    </form>
</div>"""


def render_memo_detail_page(request, env: PageEnv, memo_id: str) -> str:
    settings = env.settings
    try:
        db = env.db
        site = get_site_settings(db, settings.site_title)

        memo = get_memo(db, int(memo_id)) if str(memo_id).isdigit() else None
        if memo is None or not _is_viewable(memo):
            raise EntityNotFound("备忘录不存在")
        memo.resource_list = list_memo_resources(db, memo.id)
        memo.tag_list = list_memo_tags(db, memo.id)

        avatar = gravatar_url(
            memo.creator_email,
            40,
            base_url=settings.gravatar_base_url,
            default=settings.gravatar_default,
        )
        created = settings.local_datetime(memo.created_ts)
        updated_html = ""
        if memo.updated_ts != memo.created_ts:
            updated = format_month_day_time(settings.local_datetime(memo.updated_ts))
            updated_html = (
                f'<span style="color: var(--secondary-color); font-size: 12px; margin-left: 8px;">(已更新 {updated})</span>'
            )
        tags_html = render_tag_links(memo.tag_list)
        if tags_html:
            tags_html = f'<div class="memo-tags" style="margin-top: 12px;">{tags_html}</div>'

        images, others = split_resources(memo.resource_list)
        main_html = f"""
{_breadcrumb(memo, avatar)}
<div class="items">
    <div class="item" data-memo-id="{memo.id}">
        <div class="time-box">
            <div class="dot"></div>
            <div class="time">
                <time datetime="{created.isoformat()}" title="{format_timestamp_title(created)}">{format_datetime_long(created)}</time>
                {updated_html}
            </div>
        </div>
        <div class="memo-box">
            {PINNED_BLOCK_BADGE if memo.pinned else ""}
            {render_markdown_body(memo, css_class="memo-text", element_id="memoContent")}
            {tags_html}
        </div>
        {render_image_grid(images, extra_style=" border-left: 2px solid var(--border-color); padding-left: 30px; margin-left: 3px;")}
        {render_attachment_panel(others)}
        {_edit_form(memo)}
        {ACTIONS_HTML}
    </div>
</div>"""

        body = (
            generate_container(main_html, site_title=site["site_title"])
            + DELETE_MODAL_HTML
            + MESSAGE_MODAL_HTML
            + IMAGE_MODAL_HTML
            + generate_footer()
        )
        scripts = build_scripts(
            AUTH_JS,
            MARKED_SETUP_JS,
            IMAGE_MODAL_JS,
            MESSAGE_MODAL_JS,
            MEMO_DETAIL_JS,
            page_config={"memoId": memo.id, "creatorId": memo.creator_id},
            highlight=True,
        )
        return generate_page("备忘录详情", body, scripts, site["site_title"])
    except Exception as exc:
        config.logger.error(f"Error generating memo detail page ({request.url.path}): {exc}")
        return generate_error_page(str(exc), site_title=settings.site_title)
