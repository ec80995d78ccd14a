"""
Main Architecture Guard API

Orchestrates one pull request check from diff retrieval to the
posted report and the final run status.
"""

import logging
from typing import List, Optional, Tuple

from .config import ConfigManager, Engine, GuardConfig, MatchMode
from .formatting.markdown import ReportBuilder
from .github.client import GitHubClient
from .github.context import PullRequestContext
from .github.parser import DiffLineIndexer
from .llm.reviewer import AIReviewer
from .models.review import GuardOutcome
from .rules.matcher import RuleMatcher


logger = logging.getLogger(__name__)


CLEAN_MESSAGE = "Clean architecture! Well done."


class ArchitectureGuard:
    """
    Main Architecture Guard interface.

    Runs the check strictly in sequence:
    1. Resolve the pull request context (fails before any network call)
    2. Fetch the PR diff
    3. Run the builtin rules and/or the AI reviewer
    4. Post one consolidated comment and decide pass, fail or warn
    """

    def __init__(
        self,
        config: Optional[GuardConfig] = None,
        github_client: Optional[GitHubClient] = None,
        ai_reviewer: Optional[AIReviewer] = None
    ):
        """
        Initialize Architecture Guard.

        Args:
            config: Validated configuration (default: loaded from the environment)
            github_client: GitHub client (default: built from config)
            ai_reviewer: AI reviewer (default: built from config when enabled)
        """
        self.config = config or ConfigManager().config

        self.indexer = DiffLineIndexer()
        self.matcher = RuleMatcher()
        self.report_builder = ReportBuilder()

        self.github_client = github_client or GitHubClient(
            token=self.config.github.token,
            base_url=self.config.github.api_base_url,
            timeout=self.config.github.timeout_seconds,
            max_retries=self.config.github.max_retries,
        )

        self.ai_reviewer = ai_reviewer
        if self.ai_reviewer is None and self.config.review.engine.runs_ai and self.config.ai.enabled:
            self.ai_reviewer = AIReviewer(
                api_key=self.config.ai.api_key,
                model_name=self.config.ai.model,
                temperature=self.config.ai.temperature,
            )

    @property
    def engine(self) -> Engine:
        return self.config.review.engine

    def run(self, context: Optional[PullRequestContext] = None) -> GuardOutcome:
        """
        Check one pull request.

        Args:
            context: Pull request coordinates (default: from the Actions environment)

        Returns:
            GuardOutcome describing status, report and whether a comment was posted
        """
        context = context or PullRequestContext.from_env()
        logger.info(f"Checking {context.repository}#{context.pr_number} with engine '{self.engine.value}'")

        diff_text = self.github_client.get_pull_request_diff(
            context.owner, context.repo, context.pr_number
        )

        engines_run: List[str] = []
        builtin_report, violation_count = None, 0
        ai_report = None

        if self.engine.runs_builtin:
            builtin_report, violation_count = self._run_builtin(diff_text)
            engines_run.append(Engine.BUILTIN.value)

        if self.engine.runs_ai:
            if self.ai_reviewer is None:
                logger.warning("AI engine selected but no AI API key configured; skipping AI review")
            else:
                ai_report = self._run_ai(diff_text)
                engines_run.append(Engine.AI.value)
                if ai_report:
                    violation_count += 1

        report = self.report_builder.merge(builtin_report, ai_report)

        if report is None:
            logger.info(CLEAN_MESSAGE)
            return GuardOutcome(status='passed', message=CLEAN_MESSAGE, engines_run=engines_run)

        comment_posted = self._post_report(context, report)
        return self._violation_outcome(report, violation_count, comment_posted, engines_run)

    def _run_builtin(self, diff_text: str) -> Tuple[Optional[str], int]:
        """Run the regex rules in the configured match mode."""
        if self.config.review.match_mode is MatchMode.WHOLE:
            hits = self.matcher.match_diff(diff_text)
            return self.report_builder.build_sections(hits), sum(1 for hit in hits if hit.matched)

        lines = self.indexer.index(diff_text)
        logger.info(f"Indexed {len(lines)} added lines")
        violations = self.matcher.match_lines(lines)
        return self.report_builder.build_table(violations), len(violations)

    def _run_ai(self, diff_text: str) -> Optional[str]:
        """Run the AI reviewer; errors propagate and abort the run."""
        finding = self.ai_reviewer.review(diff_text, self.config.ai.user_rules)
        return self.report_builder.build_ai_section(finding)

    def _post_report(self, context: PullRequestContext, report: str) -> bool:
        """Post the report unless running dry."""
        if self.config.review.dry_run:
            logger.info("Dry run: report not posted")
            logger.info(f"Report:\n{report}")
            return False

        self.github_client.create_issue_comment(
            context.owner, context.repo, context.pr_number, report
        )
        return True

    def _violation_outcome(
        self,
        report: str,
        violation_count: int,
        comment_posted: bool,
        engines_run: List[str]
    ) -> GuardOutcome:
        """Fail strict runs, warn when the AI engine is part of the check."""
        if self.engine.is_strict:
            status = 'failed'
            message = f"Detected {violation_count} architecture violations."
        else:
            status = 'warned'
            message = f"Architecture review found {violation_count} issue(s); see the PR comment."

        logger.info(message)
        return GuardOutcome(
            status=status,
            message=message,
            report=report,
            violation_count=violation_count,
            comment_posted=comment_posted,
            engines_run=engines_run,
        )
