"""
Home page: the personal space.

Guests get the public feed server-side and are redirected to /explore by the
client script; a logged-in user's own memos replace the feed client-side.
"""

from __future__ import annotations

import core.config as config
from core.context import PageEnv
from core.rendering.feed import render_feed
from core.rendering.heatmap import HEATMAP_TOOLTIP_HTML, render_heatmap
from core.rendering.layout import (
    IMAGE_MODAL_HTML,
    MESSAGE_MODAL_HTML,
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
    HOME_EDITOR_JS,
    IMAGE_MODAL_JS,
    LOAD_MORE_JS,
    MARKED_SETUP_JS,
    MESSAGE_MODAL_JS,
    build_scripts,
)
from core.services.heatmap import build_heatmap_cells, memo_heatmap_counts
from core.services.memo_queries import (
    attach_memo_relations,
    count_public_memos,
    get_site_settings,
    list_public_memos,
)

CREATE_FORM_HTML = """
<div class="form-card" id="createForm" style="display: none;">
    <h3 class="form-title">创建新备忘录</h3>
    <form id="createMemoForm">
        <div class="form-group">
            <label class="form-label" for="content">内容 <span style="color: var(--secondary-color); font-size: 0.85rem; font-weight: normal;">(支持 Markdown 语法)</span></label>
            <div style="display: flex; gap: 8px; margin-bottom: 8px; padding: 8px; background: var(--code-background-color); border: 1px solid var(--border-color); border-radius: 4px 4px 0 0;">
                <button type="button" class="editor-btn" onclick="insertMarkdown('**', '**')" title="粗体"><strong>B</strong></button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('*', '*')" title="斜体"><em>I</em></button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('~~', '~~')" title="删除线"><s>S</s></button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('\\n# ', '')" title="标题">H</button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('[', '](url)')" title="链接">🔗</button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('\\n- ', '')" title="列表">≡</button>
                <button type="button" class="editor-btn" onclick="insertMarkdown('\\n```\\n', '\\n```')" title="代码块">&lt;/&gt;</button>
                <div style="flex: 1;"></div>
                <label class="editor-btn" style="cursor: pointer; margin: 0;" title="上传文件（支持多选）">
                    📎
                    <input type="file" id="imageUpload" accept="image/*,video/*,audio/*,.pdf,.zip,.rar,.7z,.doc,.docx,.xls,.xlsx,.ppt,.pptx,.txt,.md" multiple style="display: none;" onchange="uploadFiles(this)">
                </label>
                <button type="button" class="editor-btn" onclick="togglePreview()" title="预览">👁️</button>
            </div>
            <textarea id="content" name="content" class="form-textarea" placeholder="支持 Markdown 语法，例如：&#10;# 标题&#10;**粗体** *斜体*&#10;- 列表项&#10;[链接](url)" required style="border-radius: 0 0 4px 4px; min-height: 150px; font-family: var(--font-mono);"></textarea>
            <div id="preview" style="display: none; padding: 16px; background: var(--code-background-color); border: 1px solid var(--border-color); border-radius: 4px; margin-top: 8px; min-height: 150px;">
                <div style="color: var(--secondary-color); font-size: 14px; margin-bottom: 8px;">预览：</div>
                <div id="previewContent" class="markdown-content rendered"></div>
            </div>
            <div id="imagePreviewContainer" style="display: none; margin-top: 12px; padding: 12px; background: var(--code-background-color); border: 1px solid var(--border-color); border-radius: 4px;">
                <div style="color: var(--secondary-color); font-size: 14px; margin-bottom: 8px;">已上传的文件：</div>
                <div id="imagePreviews" style="display: grid; grid-template-columns: repeat(auto-fill, minmax(120px, 1fr)); gap: 12px;"></div>
            </div>
        </div>
        <div class="form-group">
            <label class="form-label" for="visibility">可见性</label>
            <select id="visibility" name="visibility" class="form-input">
                <option value="PUBLIC">公开 - 所有人可见</option>
                <option value="PRIVATE">私密 - 仅自己可见</option>
            </select>
        </div>
        <div style="display: flex; gap: 8px; align-items: center;">
            <button type="submit" class="btn">发布备忘录</button>
            <span id="uploadStatus" style="color: var(--secondary-color); font-size: 14px;"></span>
        </div>
    </form>
</div>"""

LOGIN_PROMPT_HTML = """
<div class="empty-state" id="loginPrompt">
    <h3>请先登录</h3>
    <p>需要登录后才能创建备忘录</p>
    <a href="/login" class="btn" style="display: inline-block; margin-top: 16px;">立即登录</a>
</div>"""


def render_home_page(request, env: PageEnv) -> str:
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
            empty_message="这里还很空，快来创建第一条备忘录吧",
            has_more=total > settings.feed_page_size,
        )

        today = env.current_date()
        counts = memo_heatmap_counts(db, today, settings.heatmap_days, settings.tz)
        heatmap_html = render_heatmap(
            build_heatmap_cells(counts, today, settings.heatmap_days),
            days=settings.heatmap_days,
        )

        main_html = (
            generate_intro_card("🏠 我的空间", "在这里管理你的所有备忘录（公开 + 私密）")
            + CREATE_FORM_HTML
            + LOGIN_PROMPT_HTML
            + feed_html
        )
        body = (
            generate_container(main_html, site_title=site["site_title"], active_path="/", sidebar=heatmap_html)
            + HEATMAP_TOOLTIP_HTML
            + IMAGE_MODAL_HTML
            + MESSAGE_MODAL_HTML
            + generate_footer()
        )
        scripts = build_scripts(
            AUTH_JS,
            MARKED_SETUP_JS,
            IMAGE_MODAL_JS,
            MESSAGE_MODAL_JS,
            HEATMAP_JS,
            FEED_ITEM_JS,
            LOAD_MORE_JS,
            HOME_EDITOR_JS,
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
        return generate_page("我的空间", body, scripts, site["site_title"])
    except Exception as exc:
        config.logger.error(f"Error generating home page ({request.url.path}): {exc}")
        return generate_error_page(str(exc), site_title=settings.site_title)
