"""Hint Report - Aggregates analysis problems into a category/rule report."""

__version__ = "1.0.0"
