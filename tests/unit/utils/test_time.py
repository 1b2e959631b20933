from datetime import datetime, timedelta, timezone

import pytest

from datastats.utils.time import parse_rfc3339


def test_parses_utc_with_nanoseconds_truncated_to_micros():
    ts = parse_rfc3339("2023-01-15T10:30:00.123456789Z")
    assert ts == datetime(2023, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)


def test_short_fraction_is_scaled():
    assert parse_rfc3339("2023-01-15T10:30:00.5Z").microsecond == 500000


def test_keeps_offset_as_written():
    ts = parse_rfc3339("2023-01-15T10:30:00+05:30")
    assert ts.utcoffset() == timedelta(hours=5, minutes=30)
    assert ts.hour == 10

    neg = parse_rfc3339("2023-01-15T10:30:00-08:00")
    assert neg.utcoffset() == timedelta(hours=-8)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2023-01-15",
        "2023-01-15T10:30:00",  # no offset
        "2023-01-15 10:30:00Z",
        "2023-01-15t10:30:00z",
        " 2023-01-15T10:30:00Z",
        "2023-01-15T10:30:00Z ",
        "2023-02-30T00:00:00Z",
        "2023-01-15T24:00:00Z",
        "2023-01-15T10:60:00Z",
        "2023-01-15T10:30:60Z",
        "2023-01-15T10:30:00.Z",
        "2023-01-15T10:30:00+24:00",
        "2023-01-15T10:30:00+05:60",
        "2023-01-15T10:30:00+0530",
        "not a time",
    ],
)
def test_rejects_invalid_timestamps(text):
    with pytest.raises(ValueError):
        parse_rfc3339(text)


def test_fraction_longer_than_nanoseconds_is_truncated():
    ts = parse_rfc3339("2023-01-15T10:30:00.123456789012Z")
    assert ts == datetime(2023, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)
