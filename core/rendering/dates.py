"""
zh-CN date formatting for memo timestamps.
"""

from __future__ import annotations

from datetime import datetime

WEEKDAYS = ("周一", "周二", "周三", "周四", "周五", "周六", "周日")


def format_date(dt: datetime) -> str:
    """2024年1月5日"""
    return f"{dt.year}年{dt.month}月{dt.day}日"


def format_datetime_long(dt: datetime) -> str:
    """2024年1月5日周五 09:30"""
    return f"{format_date(dt)}{WEEKDAYS[dt.weekday()]} {dt:%H:%M}"


def format_datetime_short(dt: datetime) -> str:
    """1月5日周五 09:30"""
    return f"{dt.month}月{dt.day}日{WEEKDAYS[dt.weekday()]} {dt:%H:%M}"


def format_month_day_time(dt: datetime) -> str:
    """1月5日 09:30"""
    return f"{dt.month}月{dt.day}日 {dt:%H:%M}"


def format_timestamp_title(dt: datetime) -> str:
    """2024/1/5 09:30:00"""
    return f"{dt.year}/{dt.month}/{dt.day} {dt:%H:%M:%S}"
