"""
Architecture Guard entry point

Runs one check for the pull request that triggered the workflow and
turns the outcome into Actions annotations, outputs and an exit code.
"""

import os
import sys
import logging
from typing import Mapping, Optional

from .api import ArchitectureGuard
from .config import ConfigManager, GuardConfig
from .github.actions import ActionsReporter
from .github.context import PullRequestContext


logger = logging.getLogger(__name__)


def load_config(environ: Optional[Mapping[str, str]] = None) -> GuardConfig:
    """Load configuration from ARCH_GUARD_CONFIG when set, else from the environment."""
    environ = os.environ if environ is None else environ

    config_path = environ.get('ARCH_GUARD_CONFIG')
    if config_path:
        return GuardConfig.from_yaml(config_path, environ)
    return GuardConfig.from_env(environ)


def main(environ: Optional[Mapping[str, str]] = None, reporter: Optional[ActionsReporter] = None) -> int:
    """
    Run the check and report its status.

    Returns:
        Process exit code (1 when the run failed)
    """
    reporter = reporter or ActionsReporter(environ=environ)

    try:
        manager = ConfigManager(load_config(environ))
        guard = ArchitectureGuard(manager.config)
        outcome = guard.run(PullRequestContext.from_env(environ))
    except Exception as e:
        logger.error(f"Architecture check failed: {e}", exc_info=True)
        reporter.set_failed(str(e))
        reporter.set_output('status', 'failed')
        return 1

    reporter.set_output('status', outcome.status)
    reporter.set_output('violations', outcome.violation_count)
    reporter.set_output('comment-posted', str(outcome.comment_posted).lower())

    if outcome.status == 'failed':
        reporter.set_failed(outcome.message)
    elif outcome.status == 'warned':
        reporter.warning(outcome.message)
    else:
        reporter.info(outcome.message)

    return outcome.exit_code


if __name__ == '__main__':
    sys.exit(main())
