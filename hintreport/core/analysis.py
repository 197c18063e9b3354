"""Analysis Aggregate Module - Root of the aggregated report."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .cache import NameCache
from .category import STATUS_FINISHED, CategoryAggregate
from .problem import Problem, Severity

logger = logging.getLogger(__name__)

STATUS_ERROR = "error"
COMPLETED_STATUSES = (STATUS_FINISHED, STATUS_ERROR)

# Severities counted towards the analysis total.
COUNTED_SEVERITIES = (Severity.ERROR, Severity.WARNING)


@dataclass
class AnalysisOptions:
    """Metadata of an analysis run."""
    status: str = STATUS_FINISHED
    scan_time: int = 0  # milliseconds
    date: Optional[str] = None
    version: Optional[str] = None
    is_scanner: bool = False


def _pad(value: int) -> str:
    return f"{value:02d}"


def format_scan_time(scan_time: float) -> str:
    """Format a duration as ``[hh:]mm:ss``.

    Hours are omitted when zero and are not bounded by 24.

    Args:
        scan_time: Duration in milliseconds

    Returns:
        Formatted duration
    """
    seconds = math.floor((scan_time / 1000) % 60)
    minutes = math.floor((scan_time / 1000 / 60) % 60)
    hours = math.floor(scan_time / 1000 / 3600)

    display = f"{_pad(minutes)}:{_pad(seconds)}"

    if hours > 0:
        display = f"{_pad(hours)}:{display}"

    return display


class AnalysisAggregate:
    """Aggregated result of one analysis run."""

    def __init__(self, target_url: str, options: Optional[AnalysisOptions] = None):
        """Initialize the analysis aggregate.

        Args:
            target_url: URL analyzed
            options: Run metadata (default: a finished run with no timing)
        """
        options = options or AnalysisOptions()

        self.target_url = target_url
        self.finding_count = 0
        self._run_status = options.status or STATUS_FINISHED
        self.is_complete = self._run_status in COMPLETED_STATUSES
        self.show_error_banner = self._run_status == STATUS_ERROR
        self.elapsed_display = format_scan_time(options.scan_time or 0)
        self.start_date = options.date
        self.tool_version = options.version
        self.permalink = ""
        self.analysis_id = ""
        self.is_scanner_mode = bool(options.is_scanner)
        self.completion_percentage = 0

        self.categories: List[CategoryAggregate] = []
        self._cache: NameCache[CategoryAggregate] = NameCache(lambda c: c.name)

    @property
    def run_status(self) -> str:
        return self._run_status

    def get_category_by_name(self, name: str) -> Optional[CategoryAggregate]:
        """Return a category given its name, or None if it is unknown.

        Args:
            name: Category name (case-insensitive)
        """
        return self._cache.lookup(name, self.categories)

    def find_or_create_category(
        self,
        name: str,
        language: Optional[str] = None,
    ) -> Tuple[CategoryAggregate, bool]:
        """Return the category with this name, creating it if needed.

        Args:
            name: Category name
            language: Language for the localized name of a new category

        Returns:
            Tuple of (category, created)
        """
        category = self.get_category_by_name(name)
        if category is not None:
            return category, False

        category = CategoryAggregate(name, self.target_url, self.is_scanner_mode, language)
        self.categories.append(category)

        logger.debug("Created category %s", category.name)
        return category, True

    def add_problem(self, problem: Problem, language: Optional[str] = None) -> None:
        """Add a problem to the result.

        Only ``error`` and ``warning`` problems count towards the total; every
        problem is forwarded to its category.

        Args:
            problem: Problem to add
            language: Language used if the category has to be created
        """
        category, _ = self.find_or_create_category(problem.category, language)

        if problem.severity in COUNTED_SEVERITIES:
            self.finding_count += 1

        category.add_problem(problem)

    def add_problems(self, problems: Iterable[Problem], language: Optional[str] = None) -> None:
        for problem in problems:
            self.add_problem(problem, language)

    def add_category(self, name: str, language: Optional[str] = None) -> None:
        """Add a new category to the result. Does nothing if it exists."""
        self.find_or_create_category(name, language)

    def remove_category(self, name: str) -> None:
        """Remove a category from the result.

        Its finding count is subtracted from the total. Unknown names are
        ignored.

        Args:
            name: Category name (case-insensitive)
        """
        category = self.get_category_by_name(name)

        if category is None:
            return

        self.finding_count -= category.finding_count
        self.categories.remove(category)
        self._cache.evict(name)

        logger.debug("Removed category %s (%d findings)", category.name, category.finding_count)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "url": self.target_url,
            "hintsCount": self.finding_count,
            "scanTime": self.elapsed_display,
            "date": self.start_date,
            "version": self.tool_version,
            "permalink": self.permalink,
            "categories": [c.to_dict() for c in self.categories],
            "status": self.run_status,
            "isFinish": self.is_complete,
            "showError": self.show_error_banner,
            "percentage": self.completion_percentage,
            "isScanner": self.is_scanner_mode,
            "id": self.analysis_id,
        }

    def __repr__(self) -> str:
        return (
            f"AnalysisAggregate(url={self.target_url!r}, status={self.run_status!r}, "
            f"finding_count={self.finding_count}, categories={len(self.categories)})"
        )
