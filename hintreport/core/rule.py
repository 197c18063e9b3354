"""Rule Aggregate Module - Collects the problems reported by a single rule."""

from typing import Any, Dict, FrozenSet, List, Optional

from .metadata import ThirdPartyInfo, get_third_party_info
from .problem import Problem

# Rules that have no documentation page.
RULES_WITHOUT_DOCS: FrozenSet[str] = frozenset({"optimize-image"})

URL_PLACEHOLDER = "%URL%"


class RuleAggregate:
    """Problems reported for one rule, with a running count."""

    def __init__(
        self,
        name: str,
        status: str,
        target_url: str,
        is_scanner_mode: bool = False,
    ):
        """Initialize the rule aggregate.

        Args:
            name: Rule identifier, possibly compound (e.g. ``axe/aria``)
            status: Initial status label (``pass``, ``error``, ...)
            target_url: URL analyzed, substituted into third-party links
            is_scanner_mode: Keep root-relative asset paths as they are
        """
        self.name = name.lower()
        self.status = status
        self.problems: List[Problem] = []
        self.count = 0
        self.third_party_info = self._build_third_party_info(
            target_url, is_scanner_mode
        )
        self.has_documentation = self.name not in RULES_WITHOUT_DOCS

    @property
    def base_name(self) -> str:
        """Name before the first ``/`` so ``axe/aria`` maps to ``axe``."""
        return self.name.split("/", 1)[0]

    def _build_third_party_info(
        self,
        target_url: str,
        is_scanner_mode: bool,
    ) -> Optional[ThirdPartyInfo]:
        data = get_third_party_info(self.base_name)
        if data is None:
            return None

        info = ThirdPartyInfo.from_dict(data)
        info.link = info.link.replace(URL_PLACEHOLDER, target_url, 1)

        if not is_scanner_mode:
            info.logo.url = info.logo.url[1:]

        return info

    def add_problem(self, problem: Problem) -> None:
        """Add a problem reported by this rule.

        Args:
            problem: Problem to record
        """
        self.problems.append(problem)
        self.count += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "status": self.status,
            "count": self.count,
            "problems": [p.to_dict() for p in self.problems],
            "thirdPartyInfo": self.third_party_info.to_dict() if self.third_party_info else None,
            "hasDoc": self.has_documentation,
        }

    def __repr__(self) -> str:
        return f"RuleAggregate(name={self.name!r}, status={self.status!r}, count={self.count})"
