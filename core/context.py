"""
Execution environment handed to page generators.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

import core.config as config


@dataclass(frozen=True)
class PageSettings:
    site_title: str = "Memos"
    feed_page_size: int = 20
    heatmap_days: int = 30
    display_timezone: str = "UTC"
    gravatar_base_url: str = "https://www.gravatar.com/avatar"
    gravatar_default: str = "identicon"

    @staticmethod
    def from_config() -> "PageSettings":
        return PageSettings(
            site_title=config.SITE_TITLE,
            feed_page_size=config.FEED_PAGE_SIZE,
            heatmap_days=config.HEATMAP_DAYS,
            display_timezone=config.DISPLAY_TIMEZONE,
            gravatar_base_url=config.GRAVATAR_BASE_URL,
            gravatar_default=config.GRAVATAR_DEFAULT,
        )

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.display_timezone)

    def local_datetime(self, ts: int) -> datetime:
        return datetime.fromtimestamp(ts, tz=timezone.utc).astimezone(self.tz)

    def today(self) -> date:
        return datetime.now(tz=self.tz).date()


@dataclass(frozen=True)
class PageEnv:
    db: Session
    settings: PageSettings
    today: Optional[date] = None

    def current_date(self) -> date:
        return self.today or self.settings.today()


__all__ = [
    "PageSettings",
    "PageEnv",
]
