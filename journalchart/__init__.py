"""JournalChart - synthetic candle back-fill for trading journal charts."""

__version__ = "0.1.0"
