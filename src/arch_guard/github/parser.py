"""
Diff Line Indexer

Converts a unified diff (as returned by GitHub's diff media type) into
the ordered list of lines added in the new version of each file, each
tagged with its file path and new-file line number.
"""

import re
import logging
from typing import List

from ..models.diff import DiffLine


logger = logging.getLogger(__name__)


NEW_FILE_MARKER = '+++ b/'


class DiffLineIndexer:
    """
    Single-pass indexer for unified diff text.

    Tracks the current file (from ``+++ b/`` markers) and the current
    new-file line number (anchored by ``@@`` hunk headers). Context lines
    advance the counter, removed lines are ignored.
    """

    def __init__(self):
        """Initialize diff line indexer."""
        self.hunk_start_pattern = re.compile(r'\+([0-9]+)')

    def index(self, diff_text: str) -> List[DiffLine]:
        """
        Index every added line of a unified diff.

        Args:
            diff_text: Full diff text, one or more files concatenated

        Returns:
            DiffLine objects in emission order
        """
        lines = []
        current_file = ""
        current_line = 0
        anchored = False

        for raw_line in diff_text.split('\n'):
            if raw_line.startswith(NEW_FILE_MARKER):
                current_file = raw_line[len(NEW_FILE_MARKER):]
                anchored = False
            elif raw_line.startswith('@@'):
                match = self.hunk_start_pattern.search(raw_line)
                if match:
                    current_line = int(match.group(1)) - 1
                    anchored = True
                else:
                    logger.debug(f"Malformed hunk header ignored: {raw_line!r}")
            elif raw_line.startswith('+') and not raw_line.startswith('+++'):
                current_line += 1
                if anchored and current_line > 0:
                    lines.append(DiffLine(
                        file=current_file,
                        line=current_line,
                        content=raw_line[1:],  # Remove leading +
                    ))
            elif not raw_line.startswith('-'):
                current_line += 1

        logger.debug(f"Indexed {len(lines)} added lines")
        return lines


def index_diff(diff_text: str) -> List[DiffLine]:
    """Index the added lines of ``diff_text`` with a fresh indexer."""
    return DiffLineIndexer().index(diff_text)
