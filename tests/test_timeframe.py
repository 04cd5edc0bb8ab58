import json
from datetime import timedelta

import pytest

from v_utils.trades.timeframe import Timeframe, TimeframeDesignator, parse_timeframe


def test_to_str():
    tf = Timeframe(designator=TimeframeDesignator.SECONDS, n=5)
    assert tf.display() == "5s"
    assert str(tf) == "5s"


def test_deserialize():
    tf = Timeframe.parse(json.loads('"5s"'))
    assert tf.designator is TimeframeDesignator.SECONDS
    assert tf.n == 5


def test_deser_quarters():
    tf = Timeframe.parse(json.loads('"3Q"'))
    assert tf.designator is TimeframeDesignator.QUARTERS
    assert tf.n == 3


def test_missing_count_means_one():
    assert parse_timeframe("m") == Timeframe(TimeframeDesignator.MINUTES, 1)


def test_case_sensitivity():
    assert parse_timeframe("1M").designator is TimeframeDesignator.MONTHS
    assert parse_timeframe("1m").designator is TimeframeDesignator.MINUTES
    assert parse_timeframe("2H").designator is TimeframeDesignator.HOURS


@pytest.mark.parametrize("bad", ["", "xs", "5x", "5S"])
def test_parse_errors(bad):
    with pytest.raises(ValueError):
        parse_timeframe(bad)


def test_seconds_and_duration():
    tf = Timeframe(TimeframeDesignator.MINUTES, 5)
    assert tf.as_seconds() == 300
    assert tf.duration() == timedelta(minutes=5)
    assert TimeframeDesignator.WEEKS.as_seconds() == 604800


def test_format_binance():
    assert Timeframe(TimeframeDesignator.MINUTES, 5).format_binance() == "5m"
    with pytest.raises(ValueError):
        Timeframe(TimeframeDesignator.MINUTES, 2).format_binance()


def test_format_bybit():
    assert Timeframe(TimeframeDesignator.MINUTES, 1).format_bybit() == "1"
    assert Timeframe(TimeframeDesignator.MINUTES, 60).format_bybit() == "60"
    assert Timeframe(TimeframeDesignator.DAYS, 1).format_bybit() == "D"
    with pytest.raises(ValueError):
        Timeframe(TimeframeDesignator.HOURS, 4).format_bybit()


def test_designator_bybit_invalid():
    with pytest.raises(ValueError):
        TimeframeDesignator.SECONDS.as_str_bybit()