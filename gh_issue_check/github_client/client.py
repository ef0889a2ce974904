"""GitHub API client using PyGitHub."""

import logging
import os
import time
from collections.abc import Callable
from typing import TypeVar

from github import Github
from github.CheckRun import CheckRun
from github.CheckSuite import CheckSuite
from github.Commit import Commit
from github.GithubException import (
    GithubException,
    RateLimitExceededException,
    UnknownObjectException,
)
from github.Repository import Repository
from requests.exceptions import RequestException

from ..errors import CollaboratorError
from .models import GitHubCheckRun, GitHubCheckSuite, GitHubCommit, GitHubLabel

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The pull request commits endpoint never returns more than this many commits.
PULL_REQUEST_COMMITS_LIMIT = 250


class GitHubClient:
    """GitHub API client with rate limiting and authentication."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub token. If None, reads from GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            core = getattr(rate_limit, "resources", rate_limit).core
            remaining = core.remaining
            logger.debug("GitHub API rate limit: %s requests remaining", remaining)

            if remaining < 10:
                sleep_time = core.reset.timestamp() - time.time() + 1
                logger.warning(
                    "Rate limit low, sleeping for %.1f seconds...", sleep_time
                )
                time.sleep(sleep_time)

        except Exception as e:
            # Not critical: the call itself still handles rate limit errors
            logger.debug("Rate limit check failed: %s", e)

    def _call(self, operation: str, func: Callable[[], T]) -> T:
        """Run an API call, translating PyGitHub and transport errors.

        A rate limit error is retried once after waiting a minute.
        """
        self._check_rate_limit()

        try:
            return func()
        except UnknownObjectException as e:
            raise ValueError(f"Not found while trying to {operation}") from e
        except RateLimitExceededException:
            logger.warning(
                "Rate limit exceeded while trying to %s, waiting...", operation
            )
            time.sleep(60)
            try:
                return func()
            except (GithubException, RequestException) as e:
                raise CollaboratorError(operation, e) from e
        except (GithubException, RequestException) as e:
            raise CollaboratorError(operation, e) from e

    def _convert_commit(self, github_commit: Commit) -> GitHubCommit:
        """Convert PyGitHub commit to our model."""
        return GitHubCommit(
            sha=github_commit.sha, message=github_commit.commit.message or ""
        )

    def _convert_check_suite(self, github_suite: CheckSuite) -> GitHubCheckSuite:
        """Convert PyGitHub check suite to our model."""
        app = github_suite.app
        return GitHubCheckSuite(
            id=github_suite.id,
            status=github_suite.status,
            conclusion=github_suite.conclusion,
            app_slug=app.slug if app else None,
        )

    def _convert_check_run(self, github_run: CheckRun) -> GitHubCheckRun:
        """Convert PyGitHub check run to our model."""
        return GitHubCheckRun(
            id=github_run.id,
            name=github_run.name,
            status=github_run.status,
            conclusion=github_run.conclusion,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {org}/{repo} not found")

    def get_pull_request_labels(
        self, org: str, repo: str, pr_number: int
    ) -> list[GitHubLabel]:
        """Get the current labels of a pull request.

        Raises:
            ValueError: If repository or pull request not found
            CollaboratorError: For other API errors
        """
        def fetch() -> list[GitHubLabel]:
            repository = self.get_repository(org, repo)
            pull = repository.get_pull(pr_number)
            return [GitHubLabel(name=label.name) for label in pull.labels]

        return self._call(f"get labels of pull request #{pr_number}", fetch)

    def list_pull_request_commits(
        self, org: str, repo: str, pr_number: int
    ) -> list[GitHubCommit]:
        """List every commit of a pull request in order.

        The pull request commits endpoint stops at 250 commits, so larger
        pull requests are listed through the compare API instead.

        Raises:
            ValueError: If repository or pull request not found
            CollaboratorError: For other API errors
        """
        def fetch() -> list[GitHubCommit]:
            repository = self.get_repository(org, repo)
            pull = repository.get_pull(pr_number)
            commits = list(pull.get_commits())
            if pull.commits > len(commits):
                logger.info(
                    "Pull request #%s has %s commits, listing them by comparison",
                    pr_number,
                    pull.commits,
                )
                comparison = repository.compare(pull.base.sha, pull.head.sha)
                commits = list(comparison.commits)
            return [self._convert_commit(commit) for commit in commits]

        return self._call(f"list commits of pull request #{pr_number}", fetch)

    def list_check_suites_for_ref(
        self, org: str, repo: str, ref: str
    ) -> list[GitHubCheckSuite]:
        """List the check suites of a commit.

        Raises:
            ValueError: If repository or commit not found
            CollaboratorError: For other API errors
        """
        def fetch() -> list[GitHubCheckSuite]:
            repository = self.get_repository(org, repo)
            suites = repository.get_commit(ref).get_check_suites()
            return [self._convert_check_suite(suite) for suite in suites]

        return self._call(f"list check suites for {ref}", fetch)

    def list_check_runs_for_suite(
        self, org: str, repo: str, suite_id: int
    ) -> list[GitHubCheckRun]:
        """List every check run of a check suite.

        Raises:
            ValueError: If repository or check suite not found
            CollaboratorError: For other API errors
        """
        def fetch() -> list[GitHubCheckRun]:
            repository = self.get_repository(org, repo)
            suite = repository.get_check_suite(suite_id)
            return [self._convert_check_run(run) for run in suite.get_check_runs()]

        return self._call(f"list check runs of suite {suite_id}", fetch)

    def update_check_run_conclusion(
        self, org: str, repo: str, run_id: int, conclusion: str
    ) -> bool:
        """Rewrite the conclusion of a check run.

        Raises:
            ValueError: If repository or check run not found
            CollaboratorError: For other API errors
        """
        def update() -> bool:
            repository = self.get_repository(org, repo)
            repository.get_check_run(run_id).edit(conclusion=conclusion)
            logger.info("Set conclusion of check run %s to %s", run_id, conclusion)
            return True

        return self._call(f"update check run {run_id}", update)

    def add_issue_comment(
        self, org: str, repo: str, issue_number: int, comment: str
    ) -> bool:
        """Add a comment to an issue or pull request.

        Returns:
            True if successful

        Raises:
            ValueError: If repository or issue not found
            CollaboratorError: For other API errors
        """
        def create() -> bool:
            repository = self.get_repository(org, repo)
            repository.get_issue(issue_number).create_comment(comment)
            logger.info("Added comment to #%s", issue_number)
            return True

        return self._call(f"comment on #{issue_number}", create)
