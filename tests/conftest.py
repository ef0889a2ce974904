"""Test configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from gh_issue_check.github_client.models import GitHubCommit, GitHubLabel
from gh_issue_check.validation.models import PullRequestContext


@pytest.fixture
def pr_context() -> PullRequestContext:
    """Pull request context for test-org/test-repo#42."""
    return PullRequestContext(
        owner="test-org",
        repo="test-repo",
        number=42,
        head_sha="abc123",
        title="Add retry support",
        body="Implements #12",
        action="synchronize",
    )


@pytest.fixture
def event_payload() -> dict:
    """Minimal pull_request webhook payload."""
    return {
        "action": "labeled",
        "repository": {"name": "test-repo", "owner": {"login": "test-org"}},
        "pull_request": {
            "number": 42,
            "title": "Fix parser for #7",
            "body": "Details",
            "head": {"sha": "abc123"},
            "labels": [{"name": "bug"}],
        },
    }


@pytest.fixture
def mock_client() -> MagicMock:
    """Client double with an unlabeled pull request and referencing commits."""
    client = MagicMock()
    client.get_pull_request_labels.return_value = [GitHubLabel(name="bug")]
    client.list_pull_request_commits.return_value = [
        GitHubCommit(sha="1111111", message="Fixes #12 and #7, see #12"),
        GitHubCommit(sha="2222222", message="Follow-up for #7"),
    ]
    client.list_check_suites_for_ref.return_value = []
    client.add_issue_comment.return_value = True
    return client
