"""
日期规范化

写库前统一为 "YYYY-MM-DD HH:MM:SS"（或仅日期 "YYYY-MM-DD"），读库后还原为 datetime/date。
带时区的输入直接去掉时区标识，不做换算，保证用户填写的日历日期不变。
"""

from datetime import date, datetime
from typing import Any, Optional

DB_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DB_DATE_FORMAT = "%Y-%m-%d"


def parse_datetime(value: Any) -> Optional[datetime]:
    """把字符串 / date / datetime 解析为 datetime；空值返回 None"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise ValueError(f"无法解析的日期: {value!r}")


def normalize_timestamp(value: Any) -> Optional[datetime]:
    """去掉时区和微秒"""
    dt = parse_datetime(value)
    if dt is None:
        return None
    return dt.replace(tzinfo=None, microsecond=0)


def normalize_date(value: Any) -> Optional[date]:
    dt = parse_datetime(value)
    return dt.date() if dt is not None else None


def format_db_timestamp(value: Any) -> Optional[str]:
    dt = normalize_timestamp(value)
    return dt.strftime(DB_TIMESTAMP_FORMAT) if dt is not None else None


def format_db_date(value: Any) -> Optional[str]:
    d = normalize_date(value)
    return d.strftime(DB_DATE_FORMAT) if d is not None else None
