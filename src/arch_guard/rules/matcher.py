"""
Rule Matcher

Applies regex rules to indexed diff lines (per-line mode) or to the
raw diff text (whole-diff mode) and collects the results.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..models.diff import DiffLine
from ..models.rule import Rule, RuleHit, Violation
from .builtin import BUILTIN_RULES, WHOLE_DIFF_RULES


logger = logging.getLogger(__name__)


def match(lines: Iterable[DiffLine], rules: Sequence[Rule]) -> List[Violation]:
    """
    Apply every rule to every line.

    Lines are visited in emission order and rules in declaration order;
    a line can produce any number of violations.

    Args:
        lines: Indexed added lines
        rules: Rules to apply

    Returns:
        Violations in (line, rule) order
    """
    violations = []

    for item in lines:
        for rule in rules:
            if rule.matches(item.content):
                violations.append(Violation(
                    rule=rule,
                    file=item.file,
                    line=item.line,
                    snippet=item.content.strip(),
                ))

    return violations


def match_whole(diff_text: str, rules: Sequence[Rule]) -> List[RuleHit]:
    """
    Test each rule once against the entire diff text.

    Args:
        diff_text: Raw unified diff
        rules: Rules to apply

    Returns:
        One RuleHit per rule, in declaration order
    """
    return [RuleHit(rule=rule, matched=rule.matches(diff_text)) for rule in rules]


class RuleMatcher:
    """
    Matcher bound to a fixed rule table.

    Line mode defaults to the per-line built-in rules, whole-diff mode
    to the extended table that also carries the upward import hint.
    """

    def __init__(
        self,
        line_rules: Optional[Sequence[Rule]] = None,
        whole_rules: Optional[Sequence[Rule]] = None
    ):
        """
        Initialize rule matcher.

        Args:
            line_rules: Rules for per-line matching (default: BUILTIN_RULES)
            whole_rules: Rules for whole-diff matching (default: WHOLE_DIFF_RULES)
        """
        self.line_rules = tuple(line_rules) if line_rules is not None else BUILTIN_RULES
        self.whole_rules = tuple(whole_rules) if whole_rules is not None else WHOLE_DIFF_RULES

    def match_lines(self, lines: Sequence[DiffLine]) -> List[Violation]:
        """Match indexed lines against the per-line rules."""
        violations = match(lines, self.line_rules)

        for violation in violations:
            logger.debug(f"{violation.rule.id} at {violation.location}: {violation.snippet[:80]}")

        logger.info(f"Checked {len(lines)} added lines, found {len(violations)} violations")
        return violations

    def match_diff(self, diff_text: str) -> List[RuleHit]:
        """Match the whole diff against the whole-diff rules."""
        hits = match_whole(diff_text, self.whole_rules)
        triggered = [hit.rule.id for hit in hits if hit.matched]

        logger.info(f"Whole-diff check triggered {len(triggered)} of {len(hits)} rules")
        if triggered:
            logger.debug(f"Triggered rules: {', '.join(triggered)}")
        return hits
