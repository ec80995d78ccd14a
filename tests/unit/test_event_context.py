"""
Unit tests for pull request event context loading.
"""

import json
import pytest
import tempfile
from pathlib import Path

from arch_guard.errors import ConfigurationError
from arch_guard.github.context import PullRequestContext


PULL_REQUEST_PAYLOAD = {
    "action": "synchronize",
    "number": 42,
    "pull_request": {"number": 42, "title": "Add controller", "state": "open"},
    "repository": {"full_name": "octo-org/shop-api", "name": "shop-api"},
}


class TestPullRequestContext:
    """Unit tests for PullRequestContext class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.event_path = Path(self.temp_dir.name) / "event.json"

    def teardown_method(self):
        """Clean up test fixtures."""
        self.temp_dir.cleanup()

    def write_event(self, payload):
        self.event_path.write_text(json.dumps(payload), encoding='utf-8')
        return str(self.event_path)

    def test_from_env(self):
        env = {
            "GITHUB_EVENT_NAME": "pull_request",
            "GITHUB_EVENT_PATH": self.write_event(PULL_REQUEST_PAYLOAD),
        }

        context = PullRequestContext.from_env(env)

        assert context == PullRequestContext(owner="octo-org", repo="shop-api", pr_number=42)
        assert context.repository == "octo-org/shop-api"

    def test_missing_event_path(self):
        with pytest.raises(ConfigurationError, match="Must run on pull_request"):
            PullRequestContext.from_env({})

    def test_push_event_is_rejected(self):
        payload = {"ref": "refs/heads/main", "repository": {"full_name": "octo-org/shop-api"}}

        with pytest.raises(ConfigurationError, match="Must run on pull_request"):
            PullRequestContext.from_event_file(self.write_event(payload))

    def test_repository_fallback(self):
        payload = {"pull_request": {"number": 7}}

        context = PullRequestContext.from_event_file(self.write_event(payload), repository="octo/app")

        assert (context.owner, context.repo, context.pr_number) == ("octo", "app", 7)

    def test_missing_repository(self):
        with pytest.raises(ConfigurationError, match="Repository coordinates"):
            PullRequestContext.from_payload({"pull_request": {"number": 7}})

    def test_invalid_pr_number(self):
        payload = {"pull_request": {"number": 0}, "repository": {"full_name": "octo/app"}}

        with pytest.raises(ConfigurationError, match="Invalid pull_request payload"):
            PullRequestContext.from_payload(payload)

    def test_unreadable_payload(self):
        self.event_path.write_text("{not json", encoding='utf-8')

        with pytest.raises(ConfigurationError, match="Cannot read event payload"):
            PullRequestContext.from_event_file(str(self.event_path))

    def test_missing_payload_file(self):
        with pytest.raises(ConfigurationError, match="Event payload not found"):
            PullRequestContext.from_event_file(str(Path(self.temp_dir.name) / "missing.json"))

    def test_review_event_is_rejected(self):
        """Test that review events carrying a pull_request key are not checked."""
        env = {
            "GITHUB_EVENT_NAME": "pull_request_review",
            "GITHUB_EVENT_PATH": self.write_event(PULL_REQUEST_PAYLOAD),
        }

        with pytest.raises(ConfigurationError, match="Must run on pull_request"):
            PullRequestContext.from_env(env)

    def test_pull_request_target_event(self):
        env = {
            "GITHUB_EVENT_NAME": "pull_request_target",
            "GITHUB_EVENT_PATH": self.write_event(PULL_REQUEST_PAYLOAD),
        }

        assert PullRequestContext.from_env(env).pr_number == 42
