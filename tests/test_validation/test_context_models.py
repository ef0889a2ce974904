"""Tests for validation models."""

import pytest
from pydantic import ValidationError

from gh_issue_check.errors import ConfigurationError, NotAPullRequestError
from gh_issue_check.validation.models import (
    CommitReferences,
    PolicyViolation,
    PullRequestContext,
    ReferenceSource,
    Satisfied,
    Skipped,
)


class TestPullRequestContext:
    """Test PullRequestContext model."""

    def test_from_event(self, event_payload: dict) -> None:
        context = PullRequestContext.from_event(event_payload)

        assert context.owner == "test-org"
        assert context.repo == "test-repo"
        assert context.number == 42
        assert context.head_sha == "abc123"
        assert context.title == "Fix parser for #7"
        assert context.full_name == "test-org/test-repo"
        assert context.is_label_change

    def test_not_a_pull_request(self, event_payload: dict) -> None:
        del event_payload["pull_request"]
        with pytest.raises(NotAPullRequestError, match="must be used with a PR"):
            PullRequestContext.from_event(event_payload)

    @pytest.mark.parametrize(
        ("mutate", "hint"),
        [
            (lambda p: p["repository"]["owner"].pop("login"), "owner"),
            (lambda p: p["repository"].pop("name"), "repository"),
            (lambda p: p["pull_request"]["head"].pop("sha"), "pr_head_sha"),
            (lambda p: p["pull_request"].pop("number"), "pull_request_number"),
        ],
    )
    def test_missing_required_field(self, event_payload: dict, mutate, hint) -> None:
        mutate(event_payload)
        with pytest.raises(ConfigurationError, match=f"Missing value for {hint}"):
            PullRequestContext.from_event(event_payload)

    def test_optional_fields(self, event_payload: dict) -> None:
        event_payload["pull_request"].update(
            {"title": None, "body": None}
        )
        del event_payload["action"]

        context = PullRequestContext.from_event(event_payload)

        assert context.title is None
        assert context.body is None
        assert not context.is_label_change

    def test_frozen(self, pr_context: PullRequestContext) -> None:
        with pytest.raises(ValidationError):
            pr_context.title = "changed"


class TestResults:
    """Test gate result models."""

    def test_skipped(self) -> None:
        result = Skipped(label="skip-issue")
        assert result.passed
        assert "skip-issue" in result.message

    def test_satisfied(self) -> None:
        result = Satisfied(
            source=ReferenceSource.COMMITS, references=["#1", "#2"], comment="ok"
        )
        assert result.passed
        assert result.message == "Issue references found: #1, #2"

    def test_violation(self) -> None:
        result = PolicyViolation(source=ReferenceSource.PULL_REQUEST)
        assert not result.passed
        assert result.kind == "violation"

    def test_commit_summary(self) -> None:
        commit = CommitReferences(sha="a", message="\nFirst line\n\nBody #1\n")
        assert commit.summary == "First line"
        assert not commit.has_reference
