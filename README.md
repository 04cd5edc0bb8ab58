# v_utils

A collection of small helpers that come up again and again when writing
trading tools and the scripts around them.

## What is inside

**Values with meaning**

- `v_utils.percent.Percent`: a percentage stored as a fraction.
  `Percent.parse` reads `"50%"`, `"-50"` and `"50"` as 0.5, `"0.5"` as 0.5 and
  `"0.5%"` as 0.005. `Percent.from_json` also accepts floats, non-negative
  integers (taken as percent points) and `"1.5x"` strings. It compares with
  plain floats, supports `+`, `-`, `*`, `/` and negation, and honours format
  specs such as `f"{p:.2}"`, `f"{p:+}"` or `f"{p:^15.4}"`.
- `v_utils.now_then.NowThen`: a current value and a previous one, shown
  compactly with the change (`NowThen(69420.0, 67000.0)` prints `69+2.42K`);
  `format_number_compactly` does the rounding and picks the K/M/B/T/Q suffix.
- `v_utils.timelike.Timelike`: a count of seconds written as `SS`, `MM:SS` or
  `H:MM:SS`; `time_to_units("12:34")` gives `754`.

**Trading primitives** (`v_utils.trades`)

- `pair`: `Asset` and `Pair`, e.g. `Pair.parse("btc - usd")` or
  `Pair.parse("DOGEUSDT")`, with `fmt_binance`, `fmt_bybit`, `fmt_mexc` and
  `is_usdt`. Unreadable input raises `InvalidPairError`.
- `side`: `Side.BUY` / `Side.SELL`; `Side.parse` ignores case and `~side`
  gives the opposite side.
- `timeframe`: `Timeframe` and `TimeframeDesignator`, e.g.
  `Timeframe.parse("5m")`, with `as_seconds()`, `duration()`, `display()` and
  validated `format_binance()` / `format_bybit()`.
- `usd`: `Usd`, a dollar amount with arithmetic and tidy formatting.
- `timestamp`: `guess_timestamp_unsafe` reads ISO 8601 timestamps with an
  offset, or epoch timestamps in seconds, milliseconds, microseconds or
  nanoseconds, guessed from the digit count.
- `klines`: `Ohlc`, `Kline`, `p_to_ohlc` and `mock_p_to_ohlc` turn price
  series into candles.

**Data and plotting**

- `v_utils.distributions`: seeded `laplace_random_walk` and
  `normal_random_walk`, and the `ReimanZeta` sampler.
- `v_utils.snapshots.SnapshotP`: draws a price series as block characters,
  handy in snapshot tests, with an optional secondary pane;
  `snapshot_plot_orders` fills that pane with order prices.

**Compact text format**

- `v_utils.compact.compact_format`: a class decorator for dataclasses that
  adds a `parse` classmethod and a `__str__` in a compact form such as
  `ts:p-0.5:s42`; the name may be any of those `graphemics` lists for the class.

**Everyday helpers**

- `v_utils.paths.ExpandedPath`: a path with a leading `~` expanded.
- `v_utils.cli.confirm` and `v_utils.progress.ProgressBar` for the terminal.
- `v_utils.files`: `open_path`, `open_with_mode` (editor, pager or read-only
  nvim) and `sync_file_with_git`, which pulls, optionally opens the file, then
  commits and pushes.
- `v_utils.logsetup`: `init_subscriber` installs JSON logging to stdout, a
  file, or a `.log` file in the user's state directory, chosen with
  `LogDestination`; the level comes from `LOG_LEVEL`.
- `v_utils.errors`, `v_utils.formatting` and `v_utils.jsonutils` for error
  chains and size-capped messages, number formatting and width handling, and
  stripping nulls from decoded JSON.
- `v_utils.llm`: `Conversation`, `Message`, `Role`, `Model` and `Response`,
  with code block and tag extraction from response text.

## A short tour

```python
from v_utils.percent import Percent
from v_utils.trades.pair import Pair
from v_utils.trades.timeframe import Timeframe
from v_utils.compact import graphemics

p = Percent.parse("50%")
assert p == 0.5
print(p)                           # 50%

pair = Pair.parse("DOGEUSDT")
print(pair.fmt_mexc())             # DOGE_USDT

tf = Timeframe.parse("5m")
print(tf.as_seconds())             # 300

print(sorted(graphemics("SAR")))   # ['SAR', 's_a_r', 'sar']
```

## What it does not do

- `v_utils.llm` only holds conversation and response types; it does not send
  anything to a model.
- There are no helpers for building data frames from rows, for reading
  enum values from upper-case strings, or for loading configuration values
  from the environment.
- The package installs no command; it is used as a library.

## Requirements

Python 3.11 or later. The package depends on `platformdirs`.