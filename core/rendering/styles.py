"""
Inline stylesheet shared by every page.
"""

BASE_CSS = """
:root {
    --background-color: #f4f1ea;
    --foreground-color: #3d3d3d;
    --secondary-color: #8a8a8a;
    --highlight-color: #b5651d;
    --link-color: #5a5a5a;
    --border-color: #e0dcd0;
    --cell-background-color: #fffdf8;
    --code-background-color: #f0ece2;
    --box-border-radius: 8px;
    --shadows: 0 1px 3px rgba(0, 0, 0, 0.08);
    --font-mono: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, monospace;
}
* { box-sizing: border-box; }
body {
    margin: 0;
    background: var(--background-color);
    color: var(--foreground-color);
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", "PingFang SC", "Microsoft YaHei", sans-serif;
    line-height: 1.6;
}
a { color: var(--link-color); }
.container { display: flex; gap: 32px; max-width: 1200px; margin: 0 auto; padding: 32px 16px; }
.aside-container { width: 200px; flex-shrink: 0; }
.main-container { flex: 1; min-width: 0; }
.site-header h1 { font-size: 22px; margin: 0 0 16px 0; }
.site-header a { color: var(--foreground-color); text-decoration: none; }
.nav { display: flex; flex-direction: column; gap: 8px; }
.nav a { padding: 6px 12px; border-radius: var(--box-border-radius); text-decoration: none; color: var(--secondary-color); }
.nav a.active { background: var(--cell-background-color); color: var(--highlight-color); box-shadow: var(--shadows); }
.items { display: flex; flex-direction: column; }
.item { margin-bottom: 32px; }
.time-box { display: flex; align-items: center; gap: 12px; }
.dot { width: 8px; height: 8px; border-radius: 50%; background: var(--border-color); flex-shrink: 0; }
.time { font-size: 14px; color: var(--secondary-color); text-decoration: none; }
.memo-box { border-left: 2px solid var(--border-color); margin-left: 3px; padding: 12px 0 0 30px; }
.markdown-content { white-space: pre-wrap; word-break: break-word; }
.markdown-content.rendered { white-space: normal; }
.markdown-content pre { background: #1e1e1e; color: #eee; padding: 12px; border-radius: 6px; overflow-x: auto; }
.markdown-content code { font-family: var(--font-mono); }
.empty-state { text-align: center; padding: 48px 16px; color: var(--secondary-color); }
.btn, .btn-outline, .btn-secondary {
    display: inline-block; padding: 8px 18px; border-radius: var(--box-border-radius);
    font-size: 14px; cursor: pointer; text-decoration: none;
}
.btn { background: var(--highlight-color); color: #fff; border: 1px solid var(--highlight-color); }
.btn-outline { background: transparent; color: var(--foreground-color); border: 1px solid var(--border-color); }
.btn-secondary { background: var(--code-background-color); color: var(--foreground-color); border: 1px solid var(--border-color); }
.pages-container { text-align: center; margin-top: 24px; }
.form-card { background: var(--cell-background-color); border: 1px solid var(--border-color); border-radius: var(--box-border-radius); padding: 20px; margin-bottom: 24px; box-shadow: var(--shadows); }
.form-title { margin: 0 0 16px 0; }
.form-group { margin-bottom: 16px; }
.form-label { display: block; margin-bottom: 6px; font-weight: 500; }
.form-input, .form-textarea { width: 100%; padding: 8px 10px; border: 1px solid var(--border-color); border-radius: 4px; font-size: 14px; background: #fff; }
.form-textarea { min-height: 120px; resize: vertical; }
.editor-btn { padding: 4px 10px; border: 1px solid var(--border-color); background: #fff; border-radius: 4px; cursor: pointer; }
.heatmap-container { width: 220px; flex-shrink: 0; align-self: flex-start; background: var(--cell-background-color); border: 1px solid var(--border-color); border-radius: var(--box-border-radius); padding: 16px; box-shadow: var(--shadows); }
.heatmap-title { font-size: 14px; margin: 0 0 12px 0; }
.heatmap-grid { display: grid; grid-template-columns: repeat(7, 1fr); gap: 4px; }
.heatmap-cell { width: 100%; padding-bottom: 100%; border-radius: 3px; background: #ebedf0; cursor: pointer; }
.heatmap-cell[data-level="1"] { background: #c6e48b; }
.heatmap-cell[data-level="2"] { background: #7bc96f; }
.heatmap-cell[data-level="3"] { background: #239a3b; }
.heatmap-cell[data-level="4"] { background: #196127; }
.heatmap-legend { display: flex; gap: 4px; justify-content: flex-end; margin-top: 12px; }
.heatmap-legend-item { width: 12px; height: 12px; border-radius: 2px; }
.heatmap-tooltip { display: none; position: fixed; z-index: 2000; background: #333; color: #fff; padding: 4px 8px; border-radius: 4px; font-size: 12px; pointer-events: none; }
.site-footer { text-align: center; font-size: 12px; color: var(--secondary-color); padding: 24px 0 32px; }
@media (max-width: 900px) {
    .container { flex-direction: column; }
    .aside-container, .heatmap-container { width: 100%; }
}
"""
