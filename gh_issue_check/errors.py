"""Error taxonomy for issue reference checks.

Policy failures are not exceptions; they are reported as a
``PolicyViolation`` result by the validation gate.
"""


class IssueCheckError(Exception):
    """Base class for all errors raised by gh_issue_check."""


class ConfigurationError(IssueCheckError, ValueError):
    """Required context or configuration is missing or invalid."""


class NotAPullRequestError(ConfigurationError):
    """The triggering event carries no pull request data."""

    def __init__(self) -> None:
        super().__init__(
            "Missing pull request data in the event payload. "
            "This action must be used with a PR."
        )


class CheckRunLimitExceeded(ConfigurationError):
    """A check suite holds more check runs than can be processed safely."""

    def __init__(self, suite_id: int, total: int, limit: int) -> None:
        self.suite_id = suite_id
        self.total = total
        self.limit = limit
        super().__init__(
            f"Check suite {suite_id} has {total} check runs; "
            f"at most {limit} are supported"
        )


class CollaboratorError(IssueCheckError):
    """A GitHub API call failed."""

    def __init__(self, operation: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.cause = cause
        message = f"GitHub API call failed while trying to {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
