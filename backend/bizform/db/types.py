"""
自定义列类型

- DbTimestamp: 以 "YYYY-MM-DD HH:MM:SS" 文本存储，读出为 datetime
- DbDate: 以 "YYYY-MM-DD" 文本存储，读出为 date
- LineItems: 明细列表，以带版本号的 JSON 文本存储
"""
from datetime import datetime
from sqlalchemy import String, Text
from sqlalchemy.types import TypeDecorator

from bizform.core.codec import decode_line_items, encode_line_items
from bizform.core.dates import (
    DB_DATE_FORMAT, DB_TIMESTAMP_FORMAT, format_db_date, format_db_timestamp
)


class DbTimestamp(TypeDecorator):
    impl = String(19)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return format_db_timestamp(value)

    def process_result_value(self, value, dialect):
        if not value:
            return None
        return datetime.strptime(value[:19], DB_TIMESTAMP_FORMAT)


class DbDate(TypeDecorator):
    impl = String(10)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return format_db_date(value)

    def process_result_value(self, value, dialect):
        if not value:
            return None
        return datetime.strptime(value[:10], DB_DATE_FORMAT).date()


class LineItems(TypeDecorator):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_line_items(value)

    def process_result_value(self, value, dialect):
        return decode_line_items(value)
