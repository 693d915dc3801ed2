"""
Shared configuration for the memo pages core.
"""

from __future__ import annotations

import logging
import os


def _get_bool(env_name: str, default: bool) -> bool:
    value = os.environ.get(env_name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(env_name: str, default: int) -> int:
    value = os.environ.get(env_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str(env_name: str, default: str) -> str:
    value = os.environ.get(env_name)
    if value is None or not value.strip():
        return default
    return value.strip()


LOG_LEVEL = _get_str("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("memopages")

# Database settings
DB_BACKEND = os.environ.get("DB_BACKEND", "sqlite").strip().lower()
SQLITE_PATH = os.environ.get("SQLITE_PATH", "/data/memos.db")
DATABASE_URL = os.environ.get("DATABASE_URL")
AUTO_CREATE_TABLES = _get_bool("AUTO_CREATE_TABLES", True)

# Presentation
SITE_TITLE = _get_str("SITE_TITLE", "Memos")
FEED_PAGE_SIZE = _get_int("FEED_PAGE_SIZE", 20)
HEATMAP_DAYS = _get_int("HEATMAP_DAYS", 30)
DISPLAY_TIMEZONE = _get_str("DISPLAY_TIMEZONE", "UTC")

# Avatars
GRAVATAR_BASE_URL = _get_str("GRAVATAR_BASE_URL", "https://www.gravatar.com/avatar").rstrip("/")
GRAVATAR_DEFAULT = _get_str("GRAVATAR_DEFAULT", "identicon")

# Client-side libraries pulled from the CDN
MARKED_JS_URL = "https://cdnjs.cloudflare.com/ajax/libs/marked/11.1.1/marked.min.js"
MD5_JS_URL = "https://cdnjs.cloudflare.com/ajax/libs/blueimp-md5/2.19.0/js/md5.min.js"
HIGHLIGHT_JS_URL = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/highlight.min.js"
HIGHLIGHT_CSS_URL = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/styles/github-dark.min.css"

# HTTP surface
CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "")
TRUSTED_HOSTS = os.environ.get("TRUSTED_HOSTS", "")
HOST = _get_str("HOST", "0.0.0.0")
PORT = _get_int("PORT", 8080)


def validate_and_prepare_config() -> None:
    """Validate configuration and apply derived settings at startup."""
    global DATABASE_URL

    errors = []
    if DB_BACKEND not in {"postgres", "sqlite"}:
        errors.append("DB_BACKEND must be 'postgres' or 'sqlite'")

    if not DATABASE_URL:
        if DB_BACKEND == "sqlite":
            if not SQLITE_PATH:
                errors.append("SQLITE_PATH environment variable is required for sqlite")
            else:
                DATABASE_URL = f"sqlite:///{SQLITE_PATH}"
        else:
            errors.append("DATABASE_URL environment variable is required")
    else:
        is_sqlite_url = DATABASE_URL.lower().startswith("sqlite")
        if DB_BACKEND == "sqlite" and not is_sqlite_url:
            errors.append("DATABASE_URL must be a sqlite URL when DB_BACKEND=sqlite")
        if DB_BACKEND == "postgres" and is_sqlite_url:
            errors.append("DATABASE_URL must be a postgres URL when DB_BACKEND=postgres")

    if FEED_PAGE_SIZE <= 0:
        errors.append("FEED_PAGE_SIZE must be positive")
    if HEATMAP_DAYS <= 0:
        errors.append("HEATMAP_DAYS must be positive")

    try:
        from zoneinfo import ZoneInfo

        ZoneInfo(DISPLAY_TIMEZONE)
    except Exception:
        errors.append(f"DISPLAY_TIMEZONE '{DISPLAY_TIMEZONE}' is not a known zone")

    if errors:
        raise RuntimeError("Configuration invalid: " + "; ".join(errors))
