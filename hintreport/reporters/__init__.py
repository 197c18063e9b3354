"""Report generation module for the hint report aggregator."""

from .base_reporter import BaseReporter
from .json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "JSONReporter",
]
