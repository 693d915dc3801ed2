"""
Client-side script snippets shared by the memo pages.

Pages assemble the snippets they need with ``build_scripts``; page-specific
values (current offset, memo id, avatar mirror, ...) are passed in once as
``window.MEMO_PAGE`` instead of being interpolated into the JS source.
"""

from __future__ import annotations

import json
from typing import Optional

import core.config as config


def library_tags(*, highlight: bool = False, md5: bool = False) -> str:
    tags = [f'<script src="{config.MARKED_JS_URL}"></script>']
    if md5:
        tags.append(f'<script src="{config.MD5_JS_URL}"></script>')
    if highlight:
        tags.append(f'<link rel="stylesheet" href="{config.HIGHLIGHT_CSS_URL}">')
        tags.append(f'<script src="{config.HIGHLIGHT_JS_URL}"></script>')
    return "\n".join(tags)


AUTH_JS = """
    function getToken() {
        return localStorage.getItem('accessToken');
    }

    async function checkLoginStatus() {
        const token = getToken();
        const username = localStorage.getItem('username');
        if (!token || !username) {
            return false;
        }
        try {
            const response = await fetch('/api/v1/user', {
                headers: { 'Authorization': 'Bearer ' + token }
            });
            if (!response.ok) {
                return false;
            }
            const users = await response.json();
            const list = Array.isArray(users) ? users : [users];
            window.currentUser = list.find(u => u && u.username === username) || null;
            return Boolean(window.currentUser);
        } catch (error) {
            console.error('Error checking login status:', error);
            return false;
        }
    }

    function logout() {
        localStorage.removeItem('accessToken');
        localStorage.removeItem('username');
        window.location.href = '/explore';
    }

    document.addEventListener('DOMContentLoaded', async function() {
        const loginLink = document.getElementById('navLogin');
        const logoutLink = document.getElementById('navLogout');
        const loggedIn = await checkLoginStatus();
        if (loginLink) loginLink.style.display = loggedIn ? 'none' : '';
        if (logoutLink) logoutLink.style.display = loggedIn ? '' : 'none';
    });
"""

MARKED_SETUP_JS = """
    if (typeof marked !== 'undefined') {
        marked.setOptions({ breaks: true, gfm: true });
    }

    function waitForMarked() {
        return new Promise((resolve) => {
            if (typeof marked !== 'undefined') {
                resolve();
                return;
            }
            const checkInterval = setInterval(() => {
                if (typeof marked !== 'undefined') {
                    clearInterval(checkInterval);
                    resolve();
                }
            }, 50);
        });
    }

    function processMarkdownImages(container) {
        container.querySelectorAll('img').forEach(img => {
            img.style.maxWidth = '100%';
            img.style.height = 'auto';
            img.style.borderRadius = '8px';
            img.style.cursor = 'pointer';
            img.style.marginTop = '8px';
            const imgSrc = img.src;
            img.onclick = () => openImageModal(imgSrc);
        });
    }

    function addCopyButtonToCodeBlocks() {
        document.querySelectorAll('pre code').forEach((codeBlock) => {
            const pre = codeBlock.parentElement;
            if (pre.querySelector('.copy-code-btn')) {
                return;
            }
            const button = document.createElement('button');
            button.className = 'copy-code-btn';
            button.textContent = '📋 复制';
            button.style.cssText = 'position: absolute; top: 8px; right: 8px; padding: 4px 8px; background: rgba(255,255,255,0.1); border: 1px solid rgba(255,255,255,0.2); border-radius: 4px; color: #fff; cursor: pointer; font-size: 12px;';
            button.onclick = async () => {
                try {
                    await navigator.clipboard.writeText(codeBlock.textContent);
                    button.textContent = '✓ 已复制';
                } catch (err) {
                    console.error('Failed to copy:', err);
                    button.textContent = '✗ 失败';
                }
                setTimeout(() => { button.textContent = '📋 复制'; }, 2000);
            };
            pre.style.position = 'relative';
            pre.appendChild(button);
        });
    }

    function renderMarkdownElement(el) {
        if (typeof marked === 'undefined' || el.classList.contains('rendered')) return;
        try {
            el.innerHTML = marked.parse(el.textContent);
            el.classList.add('rendered');
            if (typeof hljs !== 'undefined') {
                el.querySelectorAll('pre code').forEach(block => hljs.highlightElement(block));
            }
            processMarkdownImages(el);
        } catch (error) {
            console.error('Error rendering markdown:', error);
        }
    }

    function renderMarkdown(root) {
        (root || document).querySelectorAll('.markdown-content').forEach(renderMarkdownElement);
        addCopyButtonToCodeBlocks();
    }

    document.addEventListener('DOMContentLoaded', async function() {
        await waitForMarked();
        renderMarkdown();
    });
"""

IMAGE_MODAL_JS = """
    function openImageModal(imageSrc) {
        const modal = document.getElementById('imageModal');
        const modalImg = document.getElementById('modalImage');
        if (!modal || !modalImg) return;
        modal.style.display = 'flex';
        modal.style.alignItems = 'center';
        modal.style.justifyContent = 'center';
        modalImg.src = imageSrc;
        document.body.style.overflow = 'hidden';
    }

    function closeImageModal() {
        const modal = document.getElementById('imageModal');
        if (!modal) return;
        modal.style.display = 'none';
        document.body.style.overflow = 'auto';
    }

    document.addEventListener('keydown', function(e) {
        if (e.key === 'Escape') {
            closeImageModal();
        }
    });
"""

MESSAGE_MODAL_JS = """
    function showMessage(type, title, text, callback) {
        const modal = document.getElementById('messageModal');
        if (!modal) {
            console.error('Modal element not found');
            return;
        }
        const icon = document.getElementById('messageIcon');
        icon.style.color = type === 'success' ? '#28a745' : type === 'error' ? '#dc3545' : 'var(--highlight-color)';
        icon.textContent = type === 'success' ? '✓' : type === 'error' ? '⚠️' : 'ℹ️';
        document.getElementById('messageTitle').textContent = title;
        document.getElementById('messageText').textContent = text;
        modal.style.display = 'block';
        modal.callback = callback;
    }

    function hideMessage() {
        const modal = document.getElementById('messageModal');
        if (!modal) return;
        modal.style.display = 'none';
        if (modal.callback) {
            const callback = modal.callback;
            modal.callback = null;
            callback();
        }
    }

    document.addEventListener('DOMContentLoaded', function() {
        const messageModal = document.getElementById('messageModal');
        if (messageModal) {
            messageModal.addEventListener('click', function(e) {
                if (e.target === this) {
                    hideMessage();
                }
            });
        }
    });
"""

HEATMAP_JS = """
    function heatmapLevel(count, maxCount) {
        if (count <= 0) return 0;
        return Math.min(4, Math.ceil((count / Math.max(maxCount, 1)) * 4));
    }

    function formatIsoDate(date) {
        const month = String(date.getMonth() + 1).padStart(2, '0');
        const day = String(date.getDate()).padStart(2, '0');
        return date.getFullYear() + '-' + month + '-' + day;
    }

    function bindHeatmapTooltips() {
        const tooltip = document.getElementById('heatmapTooltip');
        if (!tooltip) return;
        document.querySelectorAll('.heatmap-cell').forEach(cell => {
            cell.addEventListener('mouseenter', function() {
                tooltip.textContent = this.getAttribute('data-date') + ': ' + this.getAttribute('data-count') + ' 条备忘录';
                tooltip.style.display = 'block';
                const rect = this.getBoundingClientRect();
                tooltip.style.left = rect.left + (rect.width / 2) + 'px';
                tooltip.style.top = (rect.top - 35) + 'px';
                tooltip.style.transform = 'translateX(-50%)';
            });
            cell.addEventListener('mouseleave', function() {
                tooltip.style.display = 'none';
            });
        });
    }

    function renderHeatmap(data) {
        const grid = document.getElementById('heatmapGrid');
        if (!grid) return;
        const days = (window.MEMO_PAGE && window.MEMO_PAGE.heatmapDays) || 30;
        const maxCount = Math.max(...Object.values(data), 1);
        const today = new Date();
        grid.innerHTML = '';
        for (let i = days - 1; i >= 0; i--) {
            const date = new Date(today);
            date.setDate(date.getDate() - i);
            const dateStr = formatIsoDate(date);
            const count = data[dateStr] || 0;
            const cell = document.createElement('div');
            cell.className = 'heatmap-cell';
            cell.setAttribute('data-level', heatmapLevel(count, maxCount));
            cell.setAttribute('data-date', dateStr);
            cell.setAttribute('data-count', count);
            grid.appendChild(cell);
        }
        bindHeatmapTooltips();
    }

    async function loadHeatmap() {
        bindHeatmapTooltips();
        try {
            const response = await fetch('/api/v1/memo/stats/heatmap');
            if (!response.ok) {
                console.error('Failed to load heatmap data');
                return;
            }
            renderHeatmap(await response.json());
        } catch (error) {
            console.error('Error loading heatmap:', error);
        }
    }

    document.addEventListener('DOMContentLoaded', loadHeatmap);
"""

FEED_ITEM_JS = """
    function escapeHtml(text) {
        const div = document.createElement('div');
        div.textContent = text == null ? '' : String(text);
        return div.innerHTML;
    }

    function gridColumns(imageCount) {
        return ({1: 1, 2: 2, 3: 3, 4: 2})[imageCount] || 3;
    }

    function resourceUrl(resource) {
        const path = resource.externalLink || resource.filepath || '';
        if (path.startsWith('http') || path.startsWith('/api/')) {
            return path;
        }
        return '/api/v1/resource/' + resource.id + '/file';
    }

    function formatMemoDate(ts) {
        const date = new Date(ts * 1000);
        return date.toLocaleDateString('zh-CN', { year: 'numeric', month: 'long', day: 'numeric' });
    }

    function avatarUrl(memo) {
        const page = window.MEMO_PAGE || {};
        const hash = memo.creatorEmailHash
            || (typeof md5 !== 'undefined' && memo.creatorEmail ? md5(memo.creatorEmail.trim().toLowerCase()) : 'default');
        return (page.gravatarBaseUrl || 'https://www.gravatar.com/avatar') + '/' + hash + '?s=40&d=' + (page.gravatarDefault || 'identicon');
    }

    function renderMemoItem(memo, options) {
        options = options || {};
        const resources = memo.resourceList || [];
        const images = resources.filter(r => r.type && r.type.startsWith('image/'));
        const others = resources.filter(r => !r.type || !r.type.startsWith('image/'));

        let imagesHTML = '';
        if (images.length > 0) {
            const columns = gridColumns(images.length);
            imagesHTML = '<div class="image-grid" data-columns="' + columns + '" style="display: grid; grid-template-columns: repeat(' + columns + ', 1fr); max-width: 100%; gap: 10px; margin-top: 16px;">'
                + images.map(resource => {
                    const url = escapeHtml(resourceUrl(resource));
                    return '<div class="image-item" style="width: 100%; padding-bottom: 100%; position: relative; overflow: hidden; border-radius: 8px; border: 1px solid var(--border-color); cursor: pointer;" data-src="' + url + '" onclick="openImageModal(this.dataset.src)">'
                        + '<img src="' + url + '" alt="' + escapeHtml(resource.filename) + '" loading="lazy" style="position: absolute; top: 0; left: 0; width: 100%; height: 100%; object-fit: cover;"></div>';
                }).join('')
                + '</div>';
        }

        const othersHTML = others.length > 0
            ? '<div class="memo-resources" style="margin-top: 16px;">' + others.map(resource =>
                '<a href="' + escapeHtml(resourceUrl(resource)) + '" class="memo-resource" target="_blank" rel="noopener noreferrer" style="display: inline-block; margin-right: 12px; margin-bottom: 8px; padding: 6px 12px; border: 1px solid var(--border-color); border-radius: 4px; text-decoration: none; color: var(--foreground-color);">📎 ' + escapeHtml(resource.filename) + '</a>'
            ).join('') + '</div>'
            : '';

        const tagsHTML = (memo.tagList || []).map(tag =>
            '<a href="/tag/' + encodeURIComponent(tag.name) + '" class="memo-tag" style="display: inline-block; margin-left: 2px; padding: 2px 2px; background: var(--cell-background-color); border: 1px solid var(--border-color); border-radius: 2px; font-size: 12px; text-decoration: none; color: #C0C0C0;">#' + escapeHtml(tag.name) + '</a>'
        ).join('');

        const pinnedHTML = memo.pinned
            ? '<span class="pinned-badge" style="display: inline-block; background: var(--highlight-color); color: #fff; padding: 2px 8px; border-radius: 10px; font-size: 11px; font-weight: bold; margin-left: 4px;">置顶</span>'
            : '';
        const privateHTML = options.showVisibility && memo.visibility === 'PRIVATE'
            ? '<span style="display: inline-block; background: #6c757d; color: #fff; padding: 2px 8px; border-radius: 10px; font-size: 11px; font-weight: bold; margin-left: 4px;">🔒 私密</span>'
            : '';
        const name = memo.creatorName || memo.creatorUsername || '匿名';

        return '<div class="item" data-memo-id="' + memo.id + '">'
            + '<div class="time-box"><div class="dot"></div>'
            + '<div class="time" style="display: flex; align-items: center; gap: 12px; flex-wrap: wrap;">'
            + '<img src="' + escapeHtml(avatarUrl(memo)) + '" alt="头像" style="width: 30px; height: 30px; border-radius: 100%; border: 2px solid #fff; box-shadow: var(--shadows);">'
            + '<div style="display: flex; align-items: center; gap: 6px;"><a href="/user/' + memo.creatorId + '" style="display: flex; align-items: center; gap: 8px; text-decoration: none;"><span class="memo-author" style="color: var(--foreground-color); font-weight: 500; font-size: 14px;">' + escapeHtml(name) + '</span></a></div>'
            + '<span style="color: var(--secondary-color);">·</span>'
            + '<a href="/m/' + memo.id + '" class="time" style="color: var(--highlight-color);">' + formatMemoDate(memo.createdTs) + '</a>'
            + pinnedHTML + privateHTML + tagsHTML
            + '</div></div>'
            + '<div class="memo-box">'
            + '<div class="memo-content markdown-content" id="memo-' + memo.id + '">' + escapeHtml(memo.content || '') + '</div>'
            + imagesHTML + othersHTML
            + '</div></div>';
    }

    function appendMemos(container, memos, options) {
        const existing = new Set(Array.from(container.querySelectorAll('.item')).map(el => el.getAttribute('data-memo-id')));
        for (const memo of memos) {
            if (existing.has(String(memo.id))) continue;
            container.insertAdjacentHTML('beforeend', renderMemoItem(memo, options));
            const el = document.getElementById('memo-' + memo.id);
            if (el) renderMarkdownElement(el);
        }
        addCopyButtonToCodeBlocks();
    }
"""

LOAD_MORE_JS = """
    let currentOffset = (window.MEMO_PAGE && window.MEMO_PAGE.offset) || 0;

    function memoListUrl(offset) {
        const page = window.MEMO_PAGE || {};
        const params = new URLSearchParams(page.query || {});
        params.set('limit', page.pageSize || 20);
        params.set('offset', offset);
        return '/api/v1/memo?' + params.toString();
    }

    async function loadMoreMemos() {
        const page = window.MEMO_PAGE || {};
        const pageSize = page.pageSize || 20;
        const loadMoreBtn = document.getElementById('loadMoreBtn');
        const loadingIndicator = document.getElementById('loadingIndicator');
        const itemsContainer = document.querySelector('.items');
        if (!itemsContainer || !loadMoreBtn || !loadingIndicator) return;

        loadMoreBtn.style.display = 'none';
        loadingIndicator.textContent = '加载中...';
        loadingIndicator.style.display = 'block';

        try {
            const headers = {};
            const token = getToken();
            if (page.authenticated && token) {
                headers['Authorization'] = 'Bearer ' + token;
            }
            const response = await fetch(memoListUrl(currentOffset), { headers: headers });
            if (!response.ok) {
                throw new Error('Failed to load memos');
            }
            const memos = await response.json();
            if (!Array.isArray(memos) || memos.length === 0) {
                loadingIndicator.textContent = '没有更多内容了';
                return;
            }
            appendMemos(itemsContainer, memos, { showVisibility: page.authenticated });
            currentOffset += memos.length;
            if (memos.length < pageSize) {
                loadingIndicator.textContent = '没有更多内容了';
            } else {
                loadMoreBtn.style.display = 'inline-block';
                loadingIndicator.style.display = 'none';
            }
        } catch (error) {
            console.error('Error loading more memos:', error);
            loadingIndicator.textContent = '加载失败，请重试';
            setTimeout(() => {
                loadMoreBtn.style.display = 'inline-block';
                loadingIndicator.style.display = 'none';
            }, 3000);
        }
    }

    window.loadMoreMemos = loadMoreMemos;
"""

HOME_EDITOR_JS = """
    let uploadedFiles = [];

    function insertMarkdown(before, after) {
        const textarea = document.getElementById('content');
        const start = textarea.selectionStart;
        const end = textarea.selectionEnd;
        const selected = textarea.value.substring(start, end);
        textarea.value = textarea.value.substring(0, start) + before + selected + after + textarea.value.substring(end);
        textarea.focus();
        const newPos = start + before.length + selected.length;
        textarea.setSelectionRange(newPos, newPos);
    }

    function togglePreview() {
        const textarea = document.getElementById('content');
        const preview = document.getElementById('preview');
        const previewContent = document.getElementById('previewContent');
        if (preview.style.display === 'none') {
            if (typeof marked !== 'undefined') {
                previewContent.innerHTML = marked.parse(textarea.value || '*没有内容*');
            } else {
                previewContent.textContent = textarea.value || '没有内容';
            }
            preview.style.display = 'block';
        } else {
            preview.style.display = 'none';
        }
    }

    function getFileIcon(type, filename) {
        type = type || '';
        filename = (filename || '').toLowerCase();
        if (type.includes('pdf')) return '📄';
        if (['zip', 'rar', '7z', 'tar', 'gzip'].some(t => type.includes(t))) return '📦';
        if (type.includes('word') || type.includes('document') || filename.endsWith('.doc') || filename.endsWith('.docx')) return '📝';
        if (type.includes('excel') || type.includes('spreadsheet') || filename.endsWith('.xls') || filename.endsWith('.xlsx')) return '📊';
        if (type.includes('powerpoint') || type.includes('presentation') || filename.endsWith('.ppt') || filename.endsWith('.pptx')) return '📊';
        if (type.includes('text') || filename.endsWith('.txt') || filename.endsWith('.md')) return '📃';
        if (type.includes('json') || type.includes('xml')) return '🗂️';
        return '📎';
    }

    function showFilePreviews() {
        const container = document.getElementById('imagePreviewContainer');
        const previews = document.getElementById('imagePreviews');
        if (uploadedFiles.length === 0) {
            container.style.display = 'none';
            previews.innerHTML = '';
            return;
        }
        container.style.display = 'block';
        previews.innerHTML = uploadedFiles.map((file, index) => {
            const body = file.type && file.type.startsWith('image/')
                ? '<img src="' + escapeHtml(resourceUrl(file)) + '" style="width: 100%; height: 100px; object-fit: cover; border-radius: 4px;">'
                : '<div style="height: 100px; display: flex; align-items: center; justify-content: center; font-size: 36px;">' + getFileIcon(file.type, file.filename) + '</div>';
            return '<div style="position: relative;">' + body
                + '<div style="font-size: 12px; overflow: hidden; text-overflow: ellipsis; white-space: nowrap;">' + escapeHtml(file.filename) + '</div>'
                + '<button type="button" class="editor-btn" style="position: absolute; top: 4px; right: 4px;" onclick="removeFile(' + index + ')">&times;</button></div>';
        }).join('');
    }

    function removeFile(index) {
        uploadedFiles.splice(index, 1);
        showFilePreviews();
    }

    async function uploadFiles(input) {
        const status = document.getElementById('uploadStatus');
        const token = getToken();
        if (!token) {
            showMessage('error', '登录已过期', '请先登录', () => { window.location.href = '/login'; });
            return;
        }
        const files = Array.from(input.files || []);
        for (let i = 0; i < files.length; i++) {
            status.textContent = '上传中 (' + (i + 1) + '/' + files.length + ')...';
            const formData = new FormData();
            formData.append('file', files[i]);
            try {
                const response = await fetch('/api/v1/resource', {
                    method: 'POST',
                    headers: { 'Authorization': 'Bearer ' + token },
                    body: formData
                });
                if (!response.ok) {
                    throw new Error('HTTP ' + response.status);
                }
                uploadedFiles.push(await response.json());
            } catch (error) {
                console.error('Upload failed:', error);
                showMessage('error', '上传失败', files[i].name + ': ' + error.message);
            }
        }
        status.textContent = '';
        input.value = '';
        showFilePreviews();
    }

    async function loadUserMemos() {
        const token = getToken();
        const user = window.currentUser;
        if (!token || !user) return;
        const page = window.MEMO_PAGE = window.MEMO_PAGE || {};
        page.query = { creatorId: user.id, rowStatus: 'NORMAL' };
        page.authenticated = true;
        try {
            const response = await fetch(memoListUrl(0), {
                headers: { 'Authorization': 'Bearer ' + token }
            });
            if (!response.ok) return;
            const memos = await response.json();
            let itemsContainer = document.querySelector('.items');
            if (!itemsContainer) {
                const emptyState = document.querySelector('.main-container > .empty-state:not(#loginPrompt)');
                if (emptyState) emptyState.remove();
                itemsContainer = document.createElement('div');
                itemsContainer.className = 'items';
                itemsContainer.id = 'memoList';
                document.querySelector('.main-container').appendChild(itemsContainer);
            }
            itemsContainer.innerHTML = '';
            const pager = document.querySelector('.pages-container');
            const loadingIndicator = document.getElementById('loadingIndicator');
            if (loadingIndicator) loadingIndicator.style.display = 'none';
            if (!Array.isArray(memos) || memos.length === 0) {
                if (pager) pager.style.display = 'none';
                itemsContainer.innerHTML = '<div class="empty-state"><p>还没有任何备忘录</p></div>';
                return;
            }
            await waitForMarked();
            appendMemos(itemsContainer, memos, { showVisibility: true });
            currentOffset = memos.length;
            if (pager) pager.style.display = memos.length < (page.pageSize || 20) ? 'none' : '';
        } catch (error) {
            console.error('Error loading user memos:', error);
        }
    }

    async function initHome() {
        const isLoggedIn = await checkLoginStatus();
        if (!isLoggedIn) {
            window.location.href = '/explore';
            return;
        }
        const loginPrompt = document.getElementById('loginPrompt');
        const createForm = document.getElementById('createForm');
        if (loginPrompt) loginPrompt.style.display = 'none';
        if (createForm) createForm.style.display = 'block';
        await loadUserMemos();
    }

    document.addEventListener('DOMContentLoaded', function() {
        const form = document.getElementById('createMemoForm');
        if (form) {
            form.addEventListener('submit', async function(e) {
                e.preventDefault();
                const content = document.getElementById('content').value.trim();
                const visibility = document.getElementById('visibility').value;
                if (!content) {
                    showMessage('error', '内容为空', '请输入备忘录内容');
                    return;
                }
                const token = getToken();
                if (!token) {
                    showMessage('error', '登录已过期', '请先登录', () => { window.location.href = '/login'; });
                    return;
                }
                const requestData = { content: content, visibility: visibility };
                if (uploadedFiles.length > 0) {
                    requestData.resourceIdList = uploadedFiles.map(f => f.id);
                }
                try {
                    const response = await fetch('/api/v1/memo', {
                        method: 'POST',
                        headers: { 'Content-Type': 'application/json', 'Authorization': 'Bearer ' + token },
                        body: JSON.stringify(requestData)
                    });
                    if (response.ok) {
                        uploadedFiles = [];
                        location.reload();
                    } else {
                        const error = await response.json();
                        showMessage('error', '发布失败', error.message || error.error || '未知错误');
                    }
                } catch (error) {
                    showMessage('error', '发布失败', error.message);
                }
            });
        }
        initHome();
    });
"""

MEMO_DETAIL_JS = """
    function canEdit(user) {
        const page = window.MEMO_PAGE || {};
        return Boolean(user) && (user.id === page.creatorId || user.isAdmin || user.is_admin || user.role === 'ADMIN');
    }

    async function checkEditPermission() {
        const guestActions = document.getElementById('guestActions');
        const userActions = document.getElementById('userActions');
        const noPermissionActions = document.getElementById('noPermissionActions');
        const loggedIn = await checkLoginStatus();
        if (!loggedIn) {
            guestActions.style.display = 'block';
            return;
        }
        if (canEdit(window.currentUser)) {
            userActions.style.display = 'flex';
        } else {
            noPermissionActions.style.display = 'block';
        }
    }

    function toggleEditForm() {
        const editForm = document.getElementById('editForm');
        editForm.style.display = editForm.style.display === 'none' ? 'block' : 'none';
    }

    function showDeleteConfirm() {
        document.getElementById('deleteModal').style.display = 'block';
    }

    function hideDeleteConfirm() {
        document.getElementById('deleteModal').style.display = 'none';
    }

    async function confirmDelete() {
        hideDeleteConfirm();
        await deleteMemo();
    }

    async function deleteMemo() {
        const page = window.MEMO_PAGE || {};
        const token = getToken();
        if (!token) {
            showMessage('error', '登录已过期', '请先登录', () => { window.location.href = '/login'; });
            return;
        }
        try {
            const response = await fetch('/api/v1/memo/' + page.memoId, {
                method: 'DELETE',
                headers: { 'Authorization': 'Bearer ' + token }
            });
            if (response.ok) {
                showMessage('success', '删除成功', '备忘录已删除', () => { window.location.href = '/'; });
            } else {
                const error = await response.json();
                showMessage('error', '删除失败', error.message || error.error || '未知错误');
            }
        } catch (error) {
            showMessage('error', '删除失败', error.message);
        }
    }

    document.addEventListener('DOMContentLoaded', function() {
        const page = window.MEMO_PAGE || {};
        const form = document.getElementById('updateMemoForm');
        const deleteModal = document.getElementById('deleteModal');
        if (deleteModal) {
            deleteModal.addEventListener('click', function(e) {
                if (e.target === this) hideDeleteConfirm();
            });
        }
        if (form) {
            form.addEventListener('submit', async function(e) {
                e.preventDefault();
                const token = getToken();
                const content = document.getElementById('editContent').value;
                try {
                    const response = await fetch('/api/v1/memo/' + page.memoId, {
                        method: 'PUT',
                        headers: { 'Content-Type': 'application/json', 'Authorization': 'Bearer ' + token },
                        body: JSON.stringify({ content: content })
                    });
                    if (response.ok) {
                        showMessage('success', '保存成功', '备忘录已更新', () => { location.reload(); });
                    } else {
                        const error = await response.json();
                        showMessage('error', '保存失败', error.message || error.error || '未知错误');
                    }
                } catch (error) {
                    showMessage('error', '保存失败', error.message);
                }
            });
        }
        checkEditPermission();
    });
"""


def page_config_script(values: dict) -> str:
    payload = json.dumps(values, ensure_ascii=False).replace("</", "<\\/")
    return f"    window.MEMO_PAGE = {payload};\n"


def build_scripts(*snippets: str, page_config: Optional[dict] = None, highlight: bool = False, md5: bool = False) -> str:
    """Assemble library tags and the chosen snippets into one inline <script>."""
    body = page_config_script(page_config or {}) + "".join(snippets)
    return f"{library_tags(highlight=highlight, md5=md5)}\n<script>\n{body}</script>\n"


def generate_auth_script() -> str:
    return f"<script>\n{AUTH_JS}</script>\n"


__all__ = [
    "AUTH_JS",
    "MARKED_SETUP_JS",
    "IMAGE_MODAL_JS",
    "MESSAGE_MODAL_JS",
    "HEATMAP_JS",
    "FEED_ITEM_JS",
    "LOAD_MORE_JS",
    "HOME_EDITOR_JS",
    "MEMO_DETAIL_JS",
    "library_tags",
    "page_config_script",
    "build_scripts",
    "generate_auth_script",
]
