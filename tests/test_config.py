import os

os.environ.setdefault("DB_BACKEND", "sqlite")

import pytest

import core.config as config
from core.context import PageSettings


def test_sqlite_url_derived_from_path(monkeypatch):
    monkeypatch.setattr(config, "DB_BACKEND", "sqlite")
    monkeypatch.setattr(config, "DATABASE_URL", None)
    monkeypatch.setattr(config, "SQLITE_PATH", "/tmp/memos-test.db")

    config.validate_and_prepare_config()

    assert config.DATABASE_URL == "sqlite:////tmp/memos-test.db"


def test_invalid_settings_are_reported_together(monkeypatch):
    monkeypatch.setattr(config, "DB_BACKEND", "postgres")
    monkeypatch.setattr(config, "DATABASE_URL", "sqlite:///x.db")
    monkeypatch.setattr(config, "FEED_PAGE_SIZE", 0)
    monkeypatch.setattr(config, "DISPLAY_TIMEZONE", "Mars/Olympus")

    with pytest.raises(RuntimeError) as excinfo:
        config.validate_and_prepare_config()

    message = str(excinfo.value)
    assert message.startswith("Configuration invalid: ")
    assert "postgres URL" in message
    assert "FEED_PAGE_SIZE" in message
    assert "DISPLAY_TIMEZONE" in message


def test_page_settings_snapshot_config(monkeypatch):
    monkeypatch.setattr(config, "SITE_TITLE", "Notes")
    monkeypatch.setattr(config, "FEED_PAGE_SIZE", 5)
    monkeypatch.setattr(config, "DISPLAY_TIMEZONE", "Asia/Shanghai")

    settings = PageSettings.from_config()

    assert settings.site_title == "Notes"
    assert settings.feed_page_size == 5
    assert settings.local_datetime(1704067200).hour == 8
