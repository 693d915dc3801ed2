"""
Tag page: every public memo carrying one tag, unpaginated.
"""

from __future__ import annotations

from html import escape

import core.config as config
from core.context import PageEnv
from core.errors import EntityNotFound
from core.rendering.feed import render_feed
from core.rendering.layout import (
    IMAGE_MODAL_HTML,
    generate_container,
    generate_error_page,
    generate_footer,
    generate_page,
)
from core.rendering.scripts import (
    AUTH_JS,
    IMAGE_MODAL_JS,
    MARKED_SETUP_JS,
    build_scripts,
)
from core.services.memo_queries import (
    attach_memo_relations,
    get_site_settings,
    get_tag_by_name,
    list_memos_by_tag,
)


def _tag_header(name: str, count: int) -> str:
    return f"""
<div style="padding: 20px; margin-bottom: 24px; background: var(--cell-background-color); border-radius: var(--box-border-radius); box-shadow: var(--shadows); border: 1px solid var(--border-color);">
    <div style="font-size: 28px; font-weight: 600; color: var(--foreground-color); margin-bottom: 8px;">#{escape(name)}</div>
    <div style="color: var(--secondary-color); font-size: 14px;">共 {count} 条备忘录</div>
</div>
<div style="padding: 10px 0; margin-bottom: 24px; display: flex; align-items: center; font-size: 14px; border-bottom: 1px solid var(--border-color); padding-bottom: 16px;">
    <a href="/" style="color: var(--secondary-color); text-decoration: none;">← 返回首页</a>
</div>"""


def render_tag_page(request, env: PageEnv, tag_name: str) -> str:
    settings = env.settings
    try:
        db = env.db
        tag = get_tag_by_name(db, tag_name)
        if tag is None:
            raise EntityNotFound("Tag not found")

        site = get_site_settings(db, settings.site_title)
        memos = list_memos_by_tag(db, tag.id)
        attach_memo_relations(db, memos)

        feed_html = render_feed(
            memos,
            settings,
            empty_title="暂无相关备忘录",
            empty_message=f"还没有带有 #{tag_name} 标签的备忘录",
        )
        body = (
            generate_container(_tag_header(tag_name, len(memos)) + feed_html, site_title=site["site_title"])
            + IMAGE_MODAL_HTML
            + generate_footer()
        )
        scripts = build_scripts(AUTH_JS, MARKED_SETUP_JS, IMAGE_MODAL_JS)
        return generate_page(f"#{tag_name}", body, scripts, site["site_title"])
    except Exception as exc:
        config.logger.error(f"Error generating tag page ({request.url.path}): {exc}")
        return generate_error_page(str(exc), heading="标签不存在", site_title=settings.site_title, home_link=True)
