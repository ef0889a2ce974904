"""Configuration for issue reference checks."""

import os

from pydantic import BaseModel, Field

from .errors import ConfigurationError
from .validation.gate import SKIP_LABEL
from .validation.models import ReferenceSource
from .validation.neutralizer import DEFAULT_APP_SLUG, DEFAULT_CHECK_NAME

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for {name}: {raw!r}")


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid integer value for {name}: {raw!r}")


def parse_reference_source(value: str) -> ReferenceSource:
    """Parse a reference source name such as 'commits' or 'pull-request'."""
    try:
        return ReferenceSource(value.strip().lower())
    except ValueError:
        valid = ", ".join(source.value for source in ReferenceSource)
        raise ConfigurationError(
            f"Invalid reference source '{value}'. Expected one of: {valid}"
        )


class CheckConfig(BaseModel):
    """Settings for one issue reference check run.

    Values come from GitHub Actions inputs and environment variables.
    """

    token: str | None = Field(None, description="GitHub token")
    reference_source: ReferenceSource = Field(
        ReferenceSource.COMMITS, description="Text scanned for issue references"
    )
    check_name: str = Field(
        DEFAULT_CHECK_NAME, description="Name of the check runs to neutralize"
    )
    skip_label: str = Field(SKIP_LABEL, description="Label that skips validation")
    app_slug: str = Field(
        DEFAULT_APP_SLUG, description="GitHub App owning the neutralized check suites"
    )
    require_every_commit: bool = Field(
        False, description="Fail when any single commit lacks a reference"
    )
    neutralize_previous: bool = Field(
        True, description="Neutralize previous completed runs of this check"
    )
    neutralize_current_run: bool = Field(
        False, description="Also neutralize the run identified by current_check_run_id"
    )
    current_check_run_id: int | None = Field(
        None, description="Check run ID of the running check, if known"
    )
    post_comment: bool = Field(
        True, description="Post a comment listing the referenced issues"
    )

    @classmethod
    def from_env(cls) -> "CheckConfig":
        """Read configuration from environment variables."""
        source = os.getenv("ISSUE_CHECK_SOURCE")
        return cls(
            token=os.getenv("INPUT_MYTOKEN") or os.getenv("GITHUB_TOKEN"),
            reference_source=(
                parse_reference_source(source) if source else ReferenceSource.COMMITS
            ),
            check_name=os.getenv("ISSUE_CHECK_NAME", DEFAULT_CHECK_NAME),
            skip_label=os.getenv("ISSUE_CHECK_SKIP_LABEL", SKIP_LABEL),
            app_slug=os.getenv("ISSUE_CHECK_APP_SLUG", DEFAULT_APP_SLUG),
            require_every_commit=_env_flag("ISSUE_CHECK_REQUIRE_EVERY_COMMIT", False),
            neutralize_previous=_env_flag("ISSUE_CHECK_NEUTRALIZE", True),
            neutralize_current_run=_env_flag("ISSUE_CHECK_NEUTRALIZE_CURRENT", False),
            current_check_run_id=_env_int("ISSUE_CHECK_RUN_ID"),
            post_comment=_env_flag("ISSUE_CHECK_POST_COMMENT", True),
        )

    def validate_settings(self) -> None:
        """Raise ConfigurationError if the configuration cannot be used."""
        if not self.token:
            raise ConfigurationError(
                "GitHub token is required. Set the myToken input or GITHUB_TOKEN."
            )
        if not self.check_name:
            raise ConfigurationError("Check name must not be empty")
        if not self.skip_label:
            raise ConfigurationError("Skip label must not be empty")
