import json
from datetime import date, datetime

import pytest

from bizform.core.codec import decode_line_items, encode_line_items
from bizform.core.dates import format_db_date, format_db_timestamp, normalize_timestamp, parse_datetime


def test_encoded_items_carry_version():
    items = [{"productId": "1", "boxes": 10}, {"productId": "2", "boxes": 5, "remark": "Ф"}]
    raw = encode_line_items(items)
    assert json.loads(raw) == {"version": 1, "items": items}
    assert decode_line_items(raw) == items


def test_none_encodes_as_empty_list():
    assert json.loads(encode_line_items(None)) == {"version": 1, "items": []}


@pytest.mark.parametrize("raw,expected", [
    (None, []),
    ("", []),
    ("[1, 2]", [1, 2]),
    ("{broken", []),
    ('{"version": 9, "items": [1]}', []),
    ('{"version": 1, "items": "nope"}', []),
    ('"text"', []),
])
def test_decode_tolerates_legacy_and_bad_data(raw, expected):
    assert decode_line_items(raw) == expected


@pytest.mark.parametrize("value,expected", [
    ("2024-05-01T10:30:00.000Z", "2024-05-01 10:30:00"),
    ("2024-05-01T23:59:59.999+05:30", "2024-05-01 23:59:59"),
    ("2024-05-01", "2024-05-01 00:00:00"),
    (date(2024, 5, 1), "2024-05-01 00:00:00"),
    (datetime(2024, 5, 1, 8, 0, 0, 500), "2024-05-01 08:00:00"),
    (None, None),
    ("", None),
])
def test_format_db_timestamp(value, expected):
    assert format_db_timestamp(value) == expected


def test_format_db_date_keeps_calendar_day():
    assert format_db_date("2024-03-15T23:30:00.000Z") == "2024-03-15"
    assert format_db_date(None) is None


def test_normalized_timestamp_is_naive():
    value = normalize_timestamp("2024-01-02T03:04:05+02:00")
    assert value == datetime(2024, 1, 2, 3, 4, 5)
    assert value.tzinfo is None


def test_unparseable_dates_raise():
    with pytest.raises(ValueError):
        parse_datetime("next tuesday")
    with pytest.raises(ValueError):
        parse_datetime(12345)
