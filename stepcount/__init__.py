"""Searching, sorting, heap and amortized-analysis algorithms that count their steps."""

__version__ = "0.1.0"