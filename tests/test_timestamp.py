from datetime import datetime, timedelta, timezone

import pytest

from v_utils.trades.timestamp import guess_timestamp_unsafe


def test_iso_with_z():
    assert guess_timestamp_unsafe("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_iso_with_offset_is_converted_to_utc():
    dt = guess_timestamp_unsafe("2024-01-01T02:00:00+02:00")
    assert dt == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


def test_seconds():
    assert guess_timestamp_unsafe("1700000000") == datetime.fromtimestamp(1700000000, timezone.utc)


@pytest.mark.parametrize("suffix", ["000", "000000", "000000000"])
def test_finer_units_agree_with_seconds(suffix):
    assert guess_timestamp_unsafe("1700000000" + suffix) == guess_timestamp_unsafe("1700000000")


def test_milliseconds_keep_fraction():
    a = guess_timestamp_unsafe("1700000000123")
    b = guess_timestamp_unsafe("1700000000")
    assert a - b == timedelta(milliseconds=123)


def test_invalid_length():
    with pytest.raises(ValueError, match="Invalid timestamp length"):
        guess_timestamp_unsafe("12345")


@pytest.mark.parametrize("text", ["not a time", "", "-1700000000", "2024-01-01T00:00:00"])
def test_unparseable(text):
    with pytest.raises(ValueError):
        guess_timestamp_unsafe(text)