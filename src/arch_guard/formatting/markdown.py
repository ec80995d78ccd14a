"""
Markdown Report Builder

Renders violations as a Markdown table (per-line mode), triggered rules
as a sectioned list (whole-diff mode), and AI findings as a free-form
section. Every builder returns None when there is nothing to report.
"""

import logging
from typing import List, Optional, Sequence

from ..models.rule import RuleHit, Violation


logger = logging.getLogger(__name__)


CLEAN_SENTINEL = "CLEAN"


class ReportBuilder:
    """
    Builds the PR comment body.

    An empty result is always None so callers can tell the clean path
    apart from an empty string.
    """

    def __init__(self, title: str = "🛡️ Architecture Guard Detailed Report"):
        """
        Initialize report builder.

        Args:
            title: Heading used for builtin engine reports
        """
        self.title = title
        self.ai_title = "🤖 AI Architecture Review"
        self.max_comment_length = 65536  # GitHub's comment limit

    def build_table(self, violations: Sequence[Violation]) -> Optional[str]:
        """
        Render per-line violations as a table.

        Args:
            violations: Violations in matcher order

        Returns:
            Markdown report or None when there are no violations
        """
        if not violations:
            return None

        body_parts = [
            f"### {self.title}",
            "",
            "| File | Line | Rule | Violation | Guidance |",
            "| :--- | :--- | :--- | :--- | :--- |",
        ]

        for v in violations:
            body_parts.append(
                f"| `{_cell(v.file)}` | {v.line} | **{_cell(v.rule.name)}** "
                f"| {_cell(v.rule.message)} | {_cell(v.rule.guidance)} |"
            )

        logger.debug(f"Built table report with {len(violations)} rows")
        return '\n'.join(body_parts) + '\n'

    def build_sections(self, hits: Sequence[RuleHit]) -> Optional[str]:
        """
        Render triggered whole-diff rules, one block per rule.

        Args:
            hits: Whole-diff match results

        Returns:
            Markdown report or None when no rule matched
        """
        triggered = [hit.rule for hit in hits if hit.matched]
        if not triggered:
            return None

        body_parts = [f"### {self.title}", ""]

        for rule in triggered:
            body_parts.append(f"#### ❌ {rule.name}")
            body_parts.append("")
            body_parts.append(f"**Violation:** {rule.message}")
            body_parts.append("")
            body_parts.append(f"**Guidance:** {rule.guidance}")
            body_parts.append("")

        logger.debug(f"Built sectioned report with {len(triggered)} rules")
        return '\n'.join(body_parts)

    def build_ai_section(self, finding: str) -> Optional[str]:
        """
        Wrap an AI finding in its own section.

        Args:
            finding: Model response text

        Returns:
            Markdown section or None for the CLEAN sentinel
        """
        if is_clean(finding):
            return None

        return f"### {self.ai_title}\n\n{finding.strip()}\n"

    def merge(self, *parts: Optional[str]) -> Optional[str]:
        """
        Join non-empty report parts into one comment body.

        Returns:
            Combined Markdown or None when every part is empty
        """
        sections: List[str] = [part.rstrip('\n') for part in parts if part]
        if not sections:
            return None

        body = '\n\n---\n\n'.join(sections) + '\n'
        return self._truncate_comment(body)

    def _truncate_comment(self, comment: str) -> str:
        """Truncate comment to fit GitHub limits."""
        if len(comment) <= self.max_comment_length:
            return comment

        truncate_at = self.max_comment_length - 200  # Leave room for truncation message
        truncated = comment[:truncate_at]

        # Cut at the last complete line
        last_newline = truncated.rfind('\n')
        if last_newline > 0:
            truncated = truncated[:last_newline]

        logger.warning(f"Report truncated from {len(comment)} to {len(truncated)} characters")
        return truncated + "\n\n*… report truncated to fit GitHub's comment size limit.*\n"


def is_clean(finding: Optional[str]) -> bool:
    """Check whether an AI response is the CLEAN sentinel."""
    return finding is not None and finding.strip() == CLEAN_SENTINEL


def _cell(text: str) -> str:
    """Escape text for use inside a Markdown table cell."""
    return text.replace('|', '\\|').replace('\n', ' ')
