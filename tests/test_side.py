import pytest

from v_utils.trades.side import Side


def test_side_from_str():
    assert Side.parse("BUY") is Side.BUY
    assert Side.parse("Sell") is Side.SELL


def test_side_from_str_invalid():
    with pytest.raises(ValueError, match="Invalid side: foo"):
        Side.parse("foo")


def test_side_to_str():
    assert Side.BUY.to_str() == "BUY"
    assert Side.SELL.to_str() == "SELL"


def test_side_not():
    assert ~Side.parse("buy") is Side.SELL
    assert ~Side.parse("sell") is Side.BUY


def test_side_display():
    assert str(Side.parse("sell")) == "SELL"
    assert f"{Side.parse('buy'):>5}" == "  BUY"