"""Pydantic models for the GitHub data a pull request check consumes.

API Reference: https://docs.github.com/en/rest/checks
"""

from pydantic import BaseModel, Field


class GitHubLabel(BaseModel):
    """GitHub label attached to a pull request.

    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")


class GitHubCommit(BaseModel):
    """Commit listed on a pull request.

    API Reference: https://docs.github.com/en/rest/pulls/pulls#list-commits-on-a-pull-request
    """

    sha: str = Field(..., description="Commit SHA (string)")
    message: str = Field("", description="Full commit message (string)")


class GitHubCheckSuite(BaseModel):
    """Check suite produced for a commit.

    API Reference: https://docs.github.com/en/rest/checks/suites
    """

    id: int = Field(..., description="Unique check suite identifier (integer)")
    status: str | None = Field(
        None, description="queued, in_progress, completed (string)"
    )
    conclusion: str | None = Field(None, description="Suite conclusion (string)")
    app_slug: str | None = Field(
        None, description="Slug of the GitHub App that owns the suite"
    )


class GitHubCheckRun(BaseModel):
    """Single check run within a check suite.

    API Reference: https://docs.github.com/en/rest/checks/runs
    """

    id: int = Field(..., description="Unique check run identifier (integer)")
    name: str = Field(..., description="Name of the check (string)")
    status: str = Field(..., description="queued, in_progress, completed (string)")
    conclusion: str | None = Field(
        None,
        description="success, failure, neutral, cancelled, skipped, ... (string)",
    )

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"
