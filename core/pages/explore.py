"""
Explore page: the public feed from every user.
"""

from __future__ import annotations

import core.config as config
from core.context import PageEnv
from core.rendering.feed import render_feed
from core.rendering.heatmap import HEATMAP_TOOLTIP_HTML, render_heatmap
from core.rendering.layout import (
    IMAGE_MODAL_HTML,
    generate_container,
    generate_error_page,
    generate_footer,
    generate_intro_card,
    generate_page,
)
from core.rendering.scripts import (
    AUTH_JS,
    FEED_ITEM_JS,
    HEATMAP_JS,
    IMAGE_MODAL_JS,
    LOAD_MORE_JS,
    MARKED_SETUP_JS,
    build_scripts,
)
from core.services.heatmap import build_heatmap_cells, memo_heatmap_counts
from core.services.memo_queries import (
    attach_memo_relations,
    count_public_memos,
    get_site_settings,
    list_public_memos,
)


def render_explore_page(request, env: PageEnv) -> str:
    settings = env.settings
    try:
        db = env.db
        site = get_site_settings(db, settings.site_title)

        total = count_public_memos(db)
        memos = list_public_memos(db, settings.feed_page_size, 0)
        attach_memo_relations(db, memos)

        feed_html = render_feed(
            memos,
            settings,
            empty_title="暂无备忘录",
            empty_message="广场上还很空，快来创建第一条备忘录吧",
            has_more=total > settings.feed_page_size,
        )

        today = env.current_date()
        counts = memo_heatmap_counts(db, today, settings.heatmap_days, settings.tz)
        heatmap_html = render_heatmap(
            build_heatmap_cells(counts, today, settings.heatmap_days),
            days=settings.heatmap_days,
        )

        main_html = generate_intro_card("🌍 广场", "发现来自所有人的公开备忘录") + feed_html
        body = (
            generate_container(main_html, site_title=site["site_title"], active_path="/explore", sidebar=heatmap_html)
            + HEATMAP_TOOLTIP_HTML
            + IMAGE_MODAL_HTML
            + generate_footer()
        )
        scripts = build_scripts(
            AUTH_JS,
            MARKED_SETUP_JS,
            IMAGE_MODAL_JS,
            HEATMAP_JS,
            FEED_ITEM_JS,
            LOAD_MORE_JS,
            page_config={
                "offset": len(memos),
                "pageSize": settings.feed_page_size,
                "heatmapDays": settings.heatmap_days,
                "gravatarBaseUrl": settings.gravatar_base_url,
                "gravatarDefault": settings.gravatar_default,
            },
            highlight=True,
            md5=True,
        )
        return generate_page("广场", body, scripts, site["site_title"])
    except Exception as exc:
        config.logger.error(f"Error generating explore page ({request.url.path}): {exc}")
        return generate_error_page(str(exc), site_title=settings.site_title)
