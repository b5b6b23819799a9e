from datetime import datetime

import pytest

from betterinfo.timeutils import (
    iso_time_to_string,
    platformer_time,
    time_to_string,
    timestamp_to_human_readable,
    working_time,
)


@pytest.mark.parametrize("timestamp", [0, 1_000_000_000, 1_700_000_123])
def test_time_to_string_round_trip(timestamp):
    text = time_to_string(timestamp)
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M")
    expected = datetime.fromtimestamp(timestamp).replace(second=0, microsecond=0)
    assert parsed == expected


def test_iso_time_to_string_keeps_date():
    assert iso_time_to_string("2023-04-05T12:34:56Z") == "2023-04-05"


def test_iso_time_to_string_pads():
    assert iso_time_to_string("2023-4-5T00:00:00") == "2023-04-05"


def test_iso_time_to_string_empty():
    assert iso_time_to_string("") == "NA"


def test_iso_time_to_string_invalid():
    with pytest.raises(ValueError):
        iso_time_to_string("yesterday")


@pytest.mark.parametrize("value", [0, -5])
def test_working_time_non_positive(value):
    assert working_time(value) == "NA"


def test_working_time_full():
    assert working_time(3661) == "1h 1m 1s"


@pytest.mark.parametrize(
    "hours,minutes,seconds", [(2, 5, 7), (10, 59, 0), (1, 0, 30)]
)
def test_working_time_components(hours, minutes, seconds):
    result = working_time(hours * 3600 + minutes * 60 + seconds)
    expected_parts = [f"{hours}h"]
    if minutes:
        expected_parts.append(f"{minutes}m")
    expected_parts.append(f"{seconds}s")
    assert result.split() == expected_parts


def test_working_time_seconds_only():
    assert working_time(42) == "42s"


def test_platformer_time_hours():
    value = 3 * 3600000 + 4 * 60000 + 5 * 1000 + 6
    assert platformer_time(value) == "3:4:5.6"


def test_platformer_time_minutes():
    value = 7 * 60000 + 8 * 1000 + 90
    assert platformer_time(value) == "7:8.90"


def test_platformer_time_seconds():
    assert platformer_time(12 * 1000 + 345) == "12.345"


def test_human_readable_less_than_minute():
    assert timestamp_to_human_readable(1000, now=1030) == "Less than 1 minute"


@pytest.mark.parametrize(
    "unit,length",
    [("minute", 60), ("hour", 3600), ("day", 86400), ("month", 2592000), ("year", 31536000)],
)
def test_human_readable_units(unit, length):
    now = 2_000_000_000
    assert timestamp_to_human_readable(now - length, now=now) == f"1 {unit}"
    assert timestamp_to_human_readable(now - 2 * length, now=now) == f"2 {unit}s"