"""Problem Module - Defines the records consumed by the aggregation engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class Severity(Enum):
    """Severity levels a rule can report a problem with."""
    OFF = 0
    WARNING = 1
    ERROR = 2
    DEFAULT = 5

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_reported(self) -> bool:
        """Whether the severity reports something (not `off` nor `default`)."""
        return self not in (Severity.OFF, Severity.DEFAULT)

    @classmethod
    def parse(cls, value: Union[str, int, "Severity"]) -> "Severity":
        """Parse a severity from its name, numeric value or itself.

        Args:
            value: Severity name (case-insensitive), numeric value or member

        Returns:
            Matching Severity

        Raises:
            ValueError: If the value does not name a severity
        """
        if isinstance(value, cls):
            return value
        # YAML 1.1 loads a bare `off` as False.
        if value is False:
            return cls.OFF
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown severity: {value!r}") from None


@dataclass(frozen=True)
class ProblemLocation:
    """Position of a problem inside a resource."""
    line: int = -1
    column: int = -1

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class Problem:
    """A single problem reported by a rule while analysing a target."""
    rule_id: str
    category: str
    severity: Severity
    message: str = ""
    resource: str = ""
    location: ProblemLocation = field(default_factory=ProblemLocation)
    source_code: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert problem to dictionary."""
        return {
            "hintId": self.rule_id,
            "category": self.category,
            "severity": str(self.severity),
            "message": self.message,
            "resource": self.resource,
            "location": self.location.to_dict(),
            "sourceCode": self.source_code,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Problem":
        """Create problem from dictionary.

        Accepts both ``rule_id`` and ``hintId`` for the rule identifier.
        """
        rule_id: Optional[str] = data.get("rule_id", data.get("hintId"))
        if rule_id is None:
            raise KeyError("rule_id")
        if not isinstance(rule_id, str):
            raise ValueError(f"rule_id must be a string, got {rule_id!r}")

        category = data["category"]
        if not isinstance(category, str):
            raise ValueError(f"category must be a string, got {category!r}")

        location = data.get("location") or {}

        return cls(
            rule_id=rule_id,
            category=category,
            severity=Severity.parse(data.get("severity", Severity.DEFAULT)),
            message=data.get("message", ""),
            resource=data.get("resource", ""),
            location=ProblemLocation(
                line=location.get("line", -1),
                column=location.get("column", -1),
            ),
            source_code=data.get("source_code", data.get("sourceCode", "")),
            metadata=data.get("metadata", {}),
        )
