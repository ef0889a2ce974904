"""Standardized CLI option definitions."""

import typer

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (defaults to the myToken input or GITHUB_TOKEN)",
)

EVENT_PATH_OPTION = typer.Option(
    None,
    "--event-path",
    "-e",
    help="Path to the event payload JSON (defaults to GITHUB_EVENT_PATH)",
)

SOURCE_OPTION = typer.Option(
    None,
    "--source",
    "-s",
    help="Text to scan for references: commits or pull-request",
)

CHECK_NAME_OPTION = typer.Option(
    None, "--check-name", help="Name of this check, used to find previous runs"
)

SKIP_LABEL_OPTION = typer.Option(
    None, "--skip-label", help="Label that exempts a pull request"
)

REQUIRE_EVERY_COMMIT_OPTION = typer.Option(
    None,
    "--require-every-commit/--any-commit",
    help="Fail when any commit lacks a reference",
)

NEUTRALIZE_OPTION = typer.Option(
    None,
    "--neutralize/--no-neutralize",
    help="Neutralize previous completed runs of this check",
)

POST_COMMENT_OPTION = typer.Option(
    None,
    "--post-comment/--no-post-comment",
    help="Comment on the pull request with the referenced issues",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
