"""工具函数模块

包含一些常用的工具函数
"""

from datetime import date, timedelta
from typing import Optional, Tuple

from ..config.settings import settings


def default_date_range(today: Optional[date] = None, days: Optional[int] = None) -> Tuple[str, str]:
    """默认查询范围：从 days 天前到今天（ISO 字符串）"""
    today = today or date.today()
    days = settings.REPORT_WINDOW_DAYS if days is None else days
    return (today - timedelta(days=days)).isoformat(), today.isoformat()


def resolve_date_range(start_date: Optional[str], end_date: Optional[str], today: Optional[date] = None) -> Tuple[str, str]:
    """未指定的起止日期用默认范围补齐"""
    default_start, default_end = default_date_range(today)
    return start_date or default_start, end_date or default_end
