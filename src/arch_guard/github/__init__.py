"""
GitHub Integration Layer

This module provides GitHub API integration for PR diff retrieval,
comment posting, event context loading and Actions status signals.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded
from .parser import DiffLineIndexer, index_diff
from .context import PullRequestContext
from .actions import ActionsReporter

__all__ = [
    'GitHubClient',
    'GitHubAPIError',
    'RateLimitExceeded',
    'DiffLineIndexer',
    'index_diff',
    'PullRequestContext',
    'ActionsReporter',
]
