"""Validation gate deciding whether a pull request references an issue."""

import logging
from collections.abc import Iterable
from typing import Protocol

from ..errors import CollaboratorError
from ..github_client.models import GitHubCommit, GitHubLabel
from .comment_composer import CommentComposer
from .models import (
    CommitReferences,
    GateResult,
    PolicyViolation,
    PullRequestContext,
    ReferenceSource,
    Satisfied,
    Skipped,
)
from .references import ReferenceSet, is_empty, merge_references, scan_references

logger = logging.getLogger(__name__)

SKIP_LABEL = "skip-issue"


class PullRequestReader(Protocol):
    def get_pull_request_labels(
        self, org: str, repo: str, pr_number: int
    ) -> list[GitHubLabel]: ...

    def list_pull_request_commits(
        self, org: str, repo: str, pr_number: int
    ) -> list[GitHubCommit]: ...

    def add_issue_comment(
        self, org: str, repo: str, issue_number: int, comment: str
    ) -> bool: ...


def has_skip_label(labels: Iterable[GitHubLabel], skip_label: str = SKIP_LABEL) -> bool:
    """Check whether any label name equals the skip label."""
    return any(label.name == skip_label for label in labels)


def scan_commits(commits: Iterable[GitHubCommit]) -> list[CommitReferences]:
    """Scan each commit message, keeping commit order."""
    return [
        CommitReferences(
            sha=commit.sha,
            message=commit.message,
            references=scan_references(commit.message),
        )
        for commit in commits
    ]


class ValidationGate:
    """Enforces that a pull request references at least one issue.

    The gate ends in one of three states: skipped by label, policy
    violation, or satisfied. Only the satisfied state produces a comment.
    """

    def __init__(
        self,
        client: PullRequestReader,
        source: ReferenceSource = ReferenceSource.COMMITS,
        skip_label: str = SKIP_LABEL,
        require_every_commit: bool = False,
        composer: CommentComposer | None = None,
    ) -> None:
        self.client = client
        self.source = source
        self.skip_label = skip_label
        self.require_every_commit = require_every_commit
        self.composer = composer or CommentComposer()

    def collect_references(
        self, context: PullRequestContext
    ) -> tuple[ReferenceSet, list[CommitReferences]]:
        """Gather references from the configured source.

        Returns:
            Tuple of (deduplicated references, commits lacking a reference).
            The second element is always empty for the pull request source.
        """
        if self.source is ReferenceSource.PULL_REQUEST:
            references = merge_references(
                scan_references(context.title), scan_references(context.body)
            )
            return references, []

        commits = self.client.list_pull_request_commits(
            context.owner, context.repo, context.number
        )
        scanned = scan_commits(commits)
        for item in scanned:
            if item.has_reference:
                logger.debug(
                    "Commit %s refers %s", item.sha, ", ".join(item.references)
                )
            else:
                logger.error(
                    'Commit %s with message "%s" does not refer any issue.',
                    item.sha,
                    item.message.strip(),
                )

        references = merge_references(*(item.references for item in scanned))
        missing = [item for item in scanned if not item.has_reference]
        return references, missing

    def evaluate(self, context: PullRequestContext) -> GateResult:
        """Decide the outcome for a pull request without posting anything."""
        labels = self.client.get_pull_request_labels(
            context.owner, context.repo, context.number
        )
        if has_skip_label(labels, self.skip_label):
            logger.info(
                "Issue reference validation skipped by label (%s)", self.skip_label
            )
            return Skipped(label=self.skip_label)

        references, missing = self.collect_references(context)

        if is_empty(references) or (self.require_every_commit and missing):
            return PolicyViolation(
                source=self.source, missing_commits=missing, references=references
            )

        return Satisfied(
            source=self.source,
            references=references,
            comment=self.composer.compose(references),
            missing_commits=missing,
        )

    def post_comment(self, context: PullRequestContext, result: Satisfied) -> None:
        """Post the success comment on the pull request.

        Raises:
            CollaboratorError: If GitHub does not accept the comment
        """
        posted = self.client.add_issue_comment(
            context.owner, context.repo, context.number, result.comment
        )
        if not posted:
            raise CollaboratorError(f"comment on pull request #{context.number}")

    def run(self, context: PullRequestContext, post_comment: bool = True) -> GateResult:
        """Evaluate the pull request and, on success, post the comment last."""
        result = self.evaluate(context)
        if isinstance(result, Satisfied) and post_comment:
            self.post_comment(context, result)
        return result
