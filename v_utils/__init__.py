"""Utilities for trading tools: typed values, parsers, compact formats, random walks and plots."""

__version__ = "0.1.0"