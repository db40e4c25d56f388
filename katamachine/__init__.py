"""Daily kata generator and test runner for data structures and algorithms."""

__version__ = "0.1.0"