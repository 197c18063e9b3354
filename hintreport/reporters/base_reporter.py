"""Base Reporter Module - Abstract base class for report generators."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from ..core.analysis import AnalysisAggregate


class BaseReporter(ABC):
    """Abstract base class for report generators."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize the reporter.

        Args:
            output_dir: Directory to save reports (default: current directory)
        """
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()

    @property
    @abstractmethod
    def format(self) -> str:
        """Report format identifier (e.g., 'json')."""
        pass

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension for the report format."""
        pass

    @abstractmethod
    def generate(self, result: AnalysisAggregate) -> bytes:
        """Generate the report content.

        Args:
            result: Aggregated analysis to report

        Returns:
            Report content as bytes
        """
        pass

    def generate_filename(
        self,
        target_url: str,
        timestamp: Optional[datetime] = None,
    ) -> str:
        """Generate a filename for the report.

        Args:
            target_url: URL analyzed
            timestamp: Timestamp for the report (default: now)

        Returns:
            Generated filename
        """
        ts = timestamp or datetime.now()
        ts_str = ts.strftime("%Y%m%d_%H%M%S")
        host = urlparse(target_url).netloc or target_url or "report"
        safe_name = "".join(c if c.isalnum() else "_" for c in host)
        return f"hint_report_{safe_name}_{ts_str}.{self.extension}"

    def save(
        self,
        result: AnalysisAggregate,
        filename: Optional[str] = None,
    ) -> str:
        """Generate and save the report to a file.

        Args:
            result: Aggregated analysis to report
            filename: Custom filename (default: auto-generated)

        Returns:
            Path to the saved report
        """
        content = self.generate(result)

        if not filename:
            filename = self.generate_filename(result.target_url)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename

        with open(output_path, "wb") as f:
            f.write(content)

        return str(output_path)
