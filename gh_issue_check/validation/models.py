"""Pydantic models for pull request validation state."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConfigurationError, NotAPullRequestError


class ReferenceSource(str, Enum):
    """Text the gate scans for issue references."""

    COMMITS = "commits"
    PULL_REQUEST = "pull-request"


class PullRequestContext(BaseModel):
    """Immutable pull request data for a single validation run."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Repository owner login")
    repo: str = Field(..., description="Repository name")
    number: int = Field(..., description="Pull request number")
    head_sha: str = Field(..., description="SHA of the pull request head commit")
    title: str | None = Field(None, description="Pull request title")
    body: str | None = Field(None, description="Pull request description")
    action: str | None = Field(None, description="Triggering event action verb")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def is_label_change(self) -> bool:
        """Whether the run was triggered by adding or removing a label."""
        return self.action in ("labeled", "unlabeled")

    @classmethod
    def from_event(cls, payload: dict[str, Any]) -> "PullRequestContext":
        """Build a context from a pull_request webhook payload.

        Raises:
            NotAPullRequestError: If the payload has no pull request
            ConfigurationError: If owner, repository or head SHA is missing
        """
        repository = payload.get("repository") or {}
        owner = _require((repository.get("owner") or {}).get("login"), "owner")
        repo = _require(repository.get("name"), "repository")

        pull_request = payload.get("pull_request")
        if not pull_request:
            raise NotAPullRequestError()

        number = pull_request.get("number")
        if number is None:
            raise ConfigurationError("Missing value for pull_request_number")
        head_sha = _require((pull_request.get("head") or {}).get("sha"), "pr_head_sha")

        return cls(
            owner=owner,
            repo=repo,
            number=int(number),
            head_sha=head_sha,
            title=pull_request.get("title"),
            body=pull_request.get("body"),
            action=payload.get("action"),
        )


def _require(value: str | None, hint: str) -> str:
    if not value:
        raise ConfigurationError(f"Missing value for {hint}")
    return value


class CommitReferences(BaseModel):
    """References found in one commit message."""

    sha: str
    message: str
    references: list[str] = Field(default_factory=list)

    @property
    def has_reference(self) -> bool:
        return bool(self.references)

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        lines = self.message.strip().splitlines()
        return lines[0] if lines else ""


class Skipped(BaseModel):
    """Validation skipped because the pull request carries the skip label."""

    kind: Literal["skipped"] = "skipped"
    label: str

    @property
    def passed(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Issue reference validation skipped by label ({self.label})"


class PolicyViolation(BaseModel):
    """The pull request does not satisfy the issue reference policy."""

    kind: Literal["violation"] = "violation"
    source: ReferenceSource
    missing_commits: list[CommitReferences] = Field(
        default_factory=list,
        description="Commits without a reference, in commits mode",
    )
    references: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if self.source is ReferenceSource.PULL_REQUEST:
            return "The pull request title and description don't refer any issue."
        if self.references:
            return "One or more commit messages don't refer any issue."
        return "None of the commit messages refer any issue."


class Satisfied(BaseModel):
    """The pull request references at least one issue."""

    kind: Literal["satisfied"] = "satisfied"
    source: ReferenceSource
    references: list[str]
    comment: str
    missing_commits: list[CommitReferences] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Issue references found: {', '.join(self.references)}"


GateResult = Skipped | PolicyViolation | Satisfied


class NeutralizationReport(BaseModel):
    """Outcome of neutralizing previous check runs on one commit."""

    neutralized: list[int] = Field(
        default_factory=list, description="IDs of check runs set to neutral"
    )
    failed: list[int] = Field(
        default_factory=list, description="IDs of check runs that could not be updated"
    )
    skipped_current: int | None = Field(
        None, description="ID of the current run left untouched"
    )
