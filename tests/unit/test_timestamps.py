from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from chat_dashboard.services.timestamps import format_timestamp, to_iso


def test_format_empty_returns_empty():
    assert format_timestamp("") == ""


def test_format_unparseable_returns_input():
    assert format_timestamp("not-a-date") == "not-a-date"


def test_format_already_formatted_value_is_kept():
    assert format_timestamp("10:30") == "10:30"


def test_format_iso_in_given_zone():
    assert format_timestamp("2024-05-01T09:05:00Z", timezone.utc) == "09:05"
    plus_two = timezone(timedelta(hours=2))
    assert format_timestamp("2024-05-01T09:05:00.123Z", plus_two) == "11:05"


def test_format_defaults_to_local_zone():
    # Root conftest pins TZ=UTC.
    assert format_timestamp("2024-05-01T23:59:00+00:00") == "23:59"


def test_to_iso_is_utc_with_milliseconds():
    moment = datetime(2024, 5, 1, 11, 15, 30, 250999, tzinfo=timezone(timedelta(hours=2)))
    assert to_iso(moment) == "2024-05-01T09:15:30.250Z"


@pytest.mark.parametrize(
    "value",
    ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:00-05:00"],
)
def test_format_out_of_range_shift_returns_input(value):
    assert format_timestamp(value, timezone.utc) == value
    assert format_timestamp(value) == value
