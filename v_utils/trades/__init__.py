"""Trading primitives: pairs, sides, timeframes, timestamps, USD amounts and candles."""