import pytest

from v_utils.trades.pair import Asset, InvalidPairError, Pair


@pytest.mark.parametrize(
    "text, base, quote",
    [
        ("BTC-USD", "BTC", "USD"),
        ("ETH,USD", "ETH", "USD"),
        ("SOL_USDT", "SOL", "USDT"),
        ("XRP/USDC", "XRP", "USDC"),
        ("btc - usd", "BTC", "USD"),
        ("DOGEUSDT", "DOGE", "USDT"),
    ],
)
def test_parse_pairs(text, base, quote):
    assert Pair.parse(text) == Pair(base, quote)


@pytest.mark.parametrize("text", ["something", "", "BTC", "BTC-", "-USD"])
def test_parse_pairs_invalid(text):
    with pytest.raises(InvalidPairError):
        Pair.parse(text)


def test_display_pairs():
    assert str(Pair("BTC", "USDT")) == "BTCUSDT"


def test_error_message():
    with pytest.raises(InvalidPairError) as info:
        Pair.parse("BTC")
    assert str(info.value) == (
        "Invalid pair format 'BTC'. Expected two assets separated by one of: [, - _ /]"
    )


def test_exchange_formats():
    pair = Pair("btc", "usdt")
    assert pair.fmt_binance() == "BTCUSDT"
    assert pair.fmt_bybit() == "BTCUSDT"
    assert pair.fmt_mexc() == "BTC_USDT"


def test_is_usdt():
    assert Pair("ETH", "USDT").is_usdt()
    assert not Pair("BTCST", "USDT").is_usdt()
    assert not Pair("ETH", "USDC").is_usdt()


def test_asset_uppercase_and_str_equality():
    asset = Asset("eth")
    assert str(asset) == "ETH"
    assert asset == "ETH"
    assert asset == Asset("ETH")


def test_asset_too_long():
    with pytest.raises(ValueError):
        Asset("A" * 17)


def test_pair_equals_string():
    assert Pair("BTC", "USDT") == "BTCUSDT"


def test_pair_ordering():
    assert sorted([Pair("ETH", "USD"), Pair("BTC", "USD")]) == [Pair("BTC", "USD"), Pair("ETH", "USD")]