"""
GitHub API Client

Handles GitHub API authentication, rate limiting, and communication.
Provides methods for PR diff retrieval and PR comment posting.
"""

import time
import logging
from typing import Dict, Optional
from datetime import datetime
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import ArchGuardError


logger = logging.getLogger(__name__)


DIFF_MEDIA_TYPE = 'application/vnd.github.v3.diff'


class GitHubAPIError(ArchGuardError):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class RateLimitExceeded(GitHubAPIError):
    """GitHub API rate limit exceeded"""
    def __init__(self, reset_time: datetime):
        super().__init__(f"Rate limit exceeded. Resets at {reset_time}", status_code=429)
        self.reset_time = reset_time


class GitHubClient:
    """
    GitHub API client with authentication, rate limiting, and error handling.

    Provides methods for:
    - PR diff retrieval in unified diff format
    - Posting the report as a PR (issue) comment
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        timeout: int = 30,
        max_retries: int = 0
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (the workflow's GITHUB_TOKEN or a PAT)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Per-request timeout in seconds
            max_retries: Retries for transient server errors (default: none)
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = self._create_session()
        self.rate_limit_remaining = 5000
        self.rate_limit_reset = datetime.now()

    def _create_session(self) -> requests.Session:
        """Create requests session with retry strategy and authentication."""
        session = requests.Session()

        if self.max_retries > 0:
            retry_strategy = Retry(
                total=self.max_retries,
                backoff_factor=1,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
        else:
            adapter = HTTPAdapter()
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        # Set authentication headers
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'Architecture-Guard/1.0'
        })

        return session

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers sent with every request."""
        return dict(self.session.headers)

    def _check_rate_limit(self) -> None:
        """Check and handle GitHub API rate limits."""
        if self.rate_limit_remaining <= 0 and datetime.now() < self.rate_limit_reset:
            wait_time = (self.rate_limit_reset - datetime.now()).total_seconds()
            logger.warning(f"Rate limit exhausted, resets in {wait_time:.1f}s")
            raise RateLimitExceeded(self.rate_limit_reset)

    def _update_rate_limit(self, response: requests.Response) -> None:
        """Update rate limit information from response headers."""
        if 'X-RateLimit-Remaining' in response.headers:
            self.rate_limit_remaining = int(response.headers['X-RateLimit-Remaining'])

        if 'X-RateLimit-Reset' in response.headers:
            reset_timestamp = int(response.headers['X-RateLimit-Reset'])
            self.rate_limit_reset = datetime.fromtimestamp(reset_timestamp)

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API with rate limiting.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API errors
            RateLimitExceeded: When rate limit is exceeded
        """
        self._check_rate_limit()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}")

        self._update_rate_limit(response)

        if response.status_code == 429:
            reset_time = datetime.fromtimestamp(int(response.headers.get('X-RateLimit-Reset', time.time() + 3600)))
            raise RateLimitExceeded(reset_time)

        if not response.ok:
            error_data = self._error_payload(response)
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def _error_payload(self, response: requests.Response) -> Dict:
        """Decode an error body, tolerating non-JSON responses."""
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {'message': response.text[:200]}

    def get_pull_request_diff(self, owner: str, repo: str, pr_number: int) -> str:
        """
        Get the unified diff of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Diff text covering every changed file
        """
        logger.info(f"Fetching diff for PR {owner}/{repo}#{pr_number}")

        response = self._make_request(
            'GET',
            f'/repos/{owner}/{repo}/pulls/{pr_number}',
            headers={'Accept': DIFF_MEDIA_TYPE}
        )
        diff_text = response.text

        logger.info(f"Fetched diff: {len(diff_text)} characters")
        return diff_text

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Dict:
        """
        Post a comment on a pull request's conversation tab.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Pull request (issue) number
            body: Markdown comment body

        Returns:
            Created comment data
        """
        if not body.strip():
            raise ValueError("Comment body cannot be empty")

        logger.info(f"Posting comment on {owner}/{repo}#{issue_number}")

        response = self._make_request(
            'POST',
            f'/repos/{owner}/{repo}/issues/{issue_number}/comments',
            json={'body': body}
        )
        comment = response.json()

        logger.info(f"Comment posted: {comment.get('html_url', comment.get('id'))}")
        return comment
