"""Core modules for the hint report aggregator."""

from .problem import Problem, ProblemLocation, Severity
from .rule import RuleAggregate
from .category import CategoryAggregate
from .analysis import AnalysisAggregate, AnalysisOptions, format_scan_time

__all__ = [
    "Problem",
    "ProblemLocation",
    "Severity",
    "RuleAggregate",
    "CategoryAggregate",
    "AnalysisAggregate",
    "AnalysisOptions",
    "format_scan_time",
]
