"""Category Aggregate Module - Groups rule aggregates under a category."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .cache import NameCache
from .i18n import get_category_name
from .metadata import get_category_image
from .problem import Problem
from .rule import RuleAggregate

logger = logging.getLogger(__name__)

STATUS_PASS = "pass"
STATUS_FINISHED = "finished"


class CategoryAggregate:
    """Rules of a category split into passed rules and rules with findings."""

    def __init__(
        self,
        name: str,
        target_url: str,
        is_scanner_mode: bool = False,
        language: Optional[str] = None,
    ):
        """Initialize the category aggregate.

        Args:
            name: Category name (stored lower-cased)
            target_url: URL analyzed
            is_scanner_mode: Keep root-relative asset paths as they are
            language: Language for the localized name (default: unlocalized)
        """
        self.name = name.lower()
        self.localized_name = get_category_name(self.name, language)
        self.image = get_category_image(self.name)

        if self.image and not is_scanner_mode:
            self.image = self.image[1:]

        self.status = STATUS_FINISHED
        self.target_url = target_url
        self.is_scanner_mode = is_scanner_mode

        self.passed_rules: List[RuleAggregate] = []
        self.finding_rules: List[RuleAggregate] = []
        self.finding_count = 0

        self._cache: NameCache[RuleAggregate] = NameCache(lambda r: r.name)

    @property
    def rules(self) -> List[RuleAggregate]:
        """All rules, findings first."""
        return self.finding_rules + self.passed_rules

    def get_rule_by_name(self, name: str) -> Optional[RuleAggregate]:
        """Return a rule given its name, or None if it is unknown.

        Args:
            name: Rule name (case-insensitive)
        """
        return self._cache.lookup(name, self.finding_rules, self.passed_rules)

    def find_or_create_rule(
        self,
        name: str,
        status: str,
    ) -> Tuple[RuleAggregate, bool]:
        """Return the rule with this name, creating it if needed.

        Args:
            name: Rule name
            status: Status used only when the rule is created

        Returns:
            Tuple of (rule, created)
        """
        rule = self.get_rule_by_name(name)
        if rule is not None:
            return rule, False

        rule = RuleAggregate(name, status, self.target_url, self.is_scanner_mode)

        if status == STATUS_PASS:
            self.passed_rules.append(rule)
        else:
            self.finding_rules.append(rule)

        logger.debug("Created rule %s (%s) in category %s", rule.name, status, self.name)
        return rule, True

    def add_rule(self, name: str, status: str) -> RuleAggregate:
        """Add a rule given a name and a status.

        An existing rule is returned unchanged; its status is not overwritten.
        """
        rule, _ = self.find_or_create_rule(name, status)
        return rule

    def add_problem(self, problem: Problem) -> None:
        """Add a problem to the rule that reported it.

        Problems with severity ``off`` or ``default`` are recorded but not
        counted. A passed rule that receives a problem moves to the rules with
        findings and takes the problem's severity as its status.

        Args:
            problem: Problem to add
        """
        rule = self.get_rule_by_name(problem.rule_id)

        if rule is None:
            # Never filed as passed, whatever the severity name is.
            rule = RuleAggregate(
                problem.rule_id,
                str(problem.severity),
                self.target_url,
                self.is_scanner_mode,
            )
            self.finding_rules.append(rule)
            logger.debug("Created rule %s from problem in category %s", rule.name, self.name)
        elif rule in self.passed_rules:
            # A rule with problems no longer passes; the cached instance is kept.
            self.passed_rules.remove(rule)
            self.finding_rules.append(rule)
            rule.status = str(problem.severity)
            logger.debug("Rule %s in category %s no longer passes", rule.name, self.name)

        if problem.severity.is_reported:
            self.finding_count += 1

        rule.add_problem(problem)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "localizedName": self.localized_name,
            "image": self.image,
            "status": self.status,
            "hintsCount": self.finding_count,
            "passed": [r.to_dict() for r in self.passed_rules],
            "hints": [r.to_dict() for r in self.finding_rules],
        }

    def __repr__(self) -> str:
        return (
            f"CategoryAggregate(name={self.name!r}, "
            f"finding_count={self.finding_count}, rules={len(self.rules)})"
        )
