"""Tests for configuration loading."""

import os
from unittest.mock import patch

import pytest

from gh_issue_check.config import CheckConfig, parse_reference_source
from gh_issue_check.errors import ConfigurationError
from gh_issue_check.validation.models import ReferenceSource


@patch.dict(os.environ, {}, clear=True)
def test_defaults() -> None:
    config = CheckConfig.from_env()

    assert config.token is None
    assert config.reference_source is ReferenceSource.COMMITS
    assert config.check_name == "Check Commit Messages"
    assert config.skip_label == "skip-issue"
    assert config.app_slug == "github-actions"
    assert config.neutralize_previous
    assert not config.neutralize_current_run
    assert config.current_check_run_id is None
    assert config.post_comment
    assert not config.require_every_commit


@patch.dict(
    os.environ,
    {
        "INPUT_MYTOKEN": "input-token",
        "GITHUB_TOKEN": "env-token",
        "ISSUE_CHECK_SOURCE": "Pull-Request",
        "ISSUE_CHECK_NAME": "issue-check",
        "ISSUE_CHECK_REQUIRE_EVERY_COMMIT": "yes",
        "ISSUE_CHECK_NEUTRALIZE": "false",
        "ISSUE_CHECK_RUN_ID": "987",
        "ISSUE_CHECK_POST_COMMENT": "0",
    },
    clear=True,
)
def test_from_env() -> None:
    config = CheckConfig.from_env()

    assert config.token == "input-token"
    assert config.reference_source is ReferenceSource.PULL_REQUEST
    assert config.check_name == "issue-check"
    assert config.require_every_commit
    assert not config.neutralize_previous
    assert config.current_check_run_id == 987
    assert not config.post_comment


@patch.dict(os.environ, {"GITHUB_TOKEN": "env-token"}, clear=True)
def test_token_falls_back_to_github_token() -> None:
    assert CheckConfig.from_env().token == "env-token"


@patch.dict(os.environ, {"ISSUE_CHECK_NEUTRALIZE": "maybe"}, clear=True)
def test_invalid_flag() -> None:
    with pytest.raises(ConfigurationError, match="ISSUE_CHECK_NEUTRALIZE"):
        CheckConfig.from_env()


@patch.dict(os.environ, {"ISSUE_CHECK_RUN_ID": "abc"}, clear=True)
def test_invalid_run_id() -> None:
    with pytest.raises(ConfigurationError, match="ISSUE_CHECK_RUN_ID"):
        CheckConfig.from_env()


def test_parse_reference_source_invalid() -> None:
    with pytest.raises(ConfigurationError, match="Expected one of: commits"):
        parse_reference_source("title")


def test_validate_requires_token() -> None:
    with pytest.raises(ConfigurationError, match="GitHub token is required"):
        CheckConfig().validate_settings()
    CheckConfig(token="t").validate_settings()
