"""
Pull Request Event Context

Reads the pull request coordinates from the GitHub Actions runtime
environment (GITHUB_EVENT_PATH payload and GITHUB_REPOSITORY).
"""

import os
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.event import PullRequestEvent


logger = logging.getLogger(__name__)

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")


@dataclass(frozen=True)
class PullRequestContext:
    """Repository coordinates and number of the pull request under check."""
    owner: str
    repo: str
    pr_number: int

    @property
    def repository(self) -> str:
        """`owner/repo` form of the repository."""
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PullRequestContext":
        """
        Load the context of the current workflow run.

        Args:
            environ: Environment mapping (default: os.environ)

        Raises:
            ConfigurationError: If the run was not triggered by a pull request
        """
        environ = os.environ if environ is None else environ

        event_path = environ.get('GITHUB_EVENT_PATH')
        if not event_path:
            raise ConfigurationError("Must run on pull_request: GITHUB_EVENT_PATH is not set")

        event_name = environ.get('GITHUB_EVENT_NAME')
        if event_name and event_name not in PULL_REQUEST_EVENTS:
            raise ConfigurationError(f"Must run on pull_request or pull_request_target, got {event_name}")

        logger.debug(f"Loading {event_name or 'unknown'} event from {event_path}")
        return cls.from_event_file(event_path, repository=environ.get('GITHUB_REPOSITORY'))

    @classmethod
    def from_event_file(cls, event_path: str, repository: Optional[str] = None) -> "PullRequestContext":
        """
        Load the context from a webhook payload file.

        Args:
            event_path: Path to the event JSON written by the runner
            repository: `owner/repo` fallback when the payload has no repository

        Raises:
            ConfigurationError: If the file is unreadable or not a pull request event
        """
        event_file = Path(event_path)
        if not event_file.exists():
            raise ConfigurationError(f"Event payload not found: {event_path}")

        try:
            with open(event_file, 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read event payload {event_path}: {e}")

        return cls.from_payload(payload, repository=repository)

    @classmethod
    def from_payload(cls, payload: dict, repository: Optional[str] = None) -> "PullRequestContext":
        """
        Build the context from an already decoded webhook payload.

        Raises:
            ConfigurationError: If the payload is not a pull request event
        """
        try:
            event = PullRequestEvent.model_validate(payload)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid pull_request payload: {e}")

        if event.pull_request is None:
            raise ConfigurationError("Must run on pull_request")

        full_name = event.repository.full_name if event.repository else repository
        if not full_name or '/' not in full_name:
            raise ConfigurationError("Repository coordinates are missing (expected 'owner/repo')")

        owner, repo = full_name.split('/', 1)
        return cls(owner=owner, repo=repo, pr_number=event.pull_request.number)
