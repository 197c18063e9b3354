"""JSON Reporter Module - Generate JSON format reports."""

import json
from typing import Any, Dict, Optional

from .base_reporter import BaseReporter
from ..core.analysis import AnalysisAggregate


class JSONReporter(BaseReporter):
    """Generate reports in JSON format."""

    def __init__(
        self,
        output_dir: Optional[str] = None,
        indent: Optional[int] = 2,
        include_problems: bool = True,
    ):
        """Initialize the JSON reporter.

        Args:
            output_dir: Directory to save reports
            indent: JSON indentation level (None for compact output)
            include_problems: Include each rule's problems in the report
        """
        super().__init__(output_dir)
        self.indent = indent
        self.include_problems = include_problems

    @property
    def format(self) -> str:
        return "json"

    @property
    def extension(self) -> str:
        return "json"

    def generate(self, result: AnalysisAggregate) -> bytes:
        """Generate JSON report.

        Args:
            result: Aggregated analysis to report

        Returns:
            JSON content as bytes
        """
        report_dict = self._build_report_structure(result)
        json_str = json.dumps(report_dict, indent=self.indent, ensure_ascii=False, default=str)
        return json_str.encode("utf-8")

    def _build_report_structure(self, result: AnalysisAggregate) -> Dict[str, Any]:
        """Build the JSON document.

        The document mirrors ``AnalysisAggregate.to_dict()``; when problems are
        excluded only each rule's ``count`` is kept.
        """
        report = result.to_dict()

        if not self.include_problems:
            for category in report["categories"]:
                for rule in category["passed"] + category["hints"]:
                    rule.pop("problems", None)

        return report
