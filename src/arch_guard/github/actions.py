"""
GitHub Actions Signals

Workflow commands, step outputs and the run status line.
"""

import os
import sys
import logging
from typing import Mapping, Optional, TextIO


logger = logging.getLogger(__name__)


class ActionsReporter:
    """
    Emits run status the way the Actions runner expects it.

    ``::error::`` and ``::warning::`` annotations go to stdout,
    step outputs are appended to the file named by GITHUB_OUTPUT.
    """

    def __init__(self, stream: Optional[TextIO] = None, environ: Optional[Mapping[str, str]] = None):
        self.stream = stream or sys.stdout
        self.environ = os.environ if environ is None else environ

    def info(self, message: str) -> None:
        self._write(message)

    def warning(self, message: str) -> None:
        self._write(f"::warning::{_escape(message)}")

    def set_failed(self, message: str) -> None:
        """Emit an error annotation; the caller turns a failed run into exit code 1."""
        self._write(f"::error::{_escape(message)}")

    def set_output(self, name: str, value) -> None:
        """Append a step output, ignored outside of a runner."""
        output_path = self.environ.get('GITHUB_OUTPUT')
        if not output_path:
            logger.debug(f"GITHUB_OUTPUT not set, skipping output {name}")
            return

        with open(output_path, 'a', encoding='utf-8') as f:
            f.write(f"{name}={value}\n")

    def _write(self, line: str) -> None:
        self.stream.write(line + '\n')
        self.stream.flush()


def _escape(message: str) -> str:
    # Workflow command data encoding
    return message.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')
