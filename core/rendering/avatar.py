"""
Avatar URL derivation.
"""

from __future__ import annotations

import hashlib
from typing import Optional
from urllib.parse import urlencode

DEFAULT_GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"


def gravatar_url(
    email: Optional[str],
    size: int = 40,
    *,
    base_url: str = DEFAULT_GRAVATAR_BASE_URL,
    default: str = "identicon",
) -> str:
    digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "d": default})
    return f"{base_url.rstrip('/')}/{digest}?{query}"
