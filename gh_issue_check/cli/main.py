"""Main CLI entry point."""

import logging
import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import CheckConfig, parse_reference_source
from ..errors import CollaboratorError, ConfigurationError
from ..event import load_pull_request_context
from ..github_client.client import GitHubClient
from ..runner import run_check
from ..validation.models import PolicyViolation, Skipped
from ..validation.references import is_empty, merge_references, scan_references
from .options import (
    CHECK_NAME_OPTION,
    EVENT_PATH_OPTION,
    NEUTRALIZE_OPTION,
    POST_COMMENT_OPTION,
    REQUIRE_EVERY_COMMIT_OPTION,
    SKIP_LABEL_OPTION,
    SOURCE_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

app = typer.Typer(
    name="gh-issue-check",
    help="Require pull requests to reference an issue",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _fail(message: str, exit_code: int = 1) -> NoReturn:
    """Report a failure reason to GitHub Actions and exit."""
    console.print(f"❌ [red]{escape(message)}[/red]")
    typer.echo(f"::error::{message}")
    raise typer.Exit(exit_code)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def check(
    token: str | None = TOKEN_OPTION,
    event_path: str | None = EVENT_PATH_OPTION,
    source: str | None = SOURCE_OPTION,
    check_name: str | None = CHECK_NAME_OPTION,
    skip_label: str | None = SKIP_LABEL_OPTION,
    require_every_commit: bool | None = REQUIRE_EVERY_COMMIT_OPTION,
    neutralize: bool | None = NEUTRALIZE_OPTION,
    post_comment: bool | None = POST_COMMENT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Check that the triggering pull request references an issue.

    Previous completed runs of this check on the head commit are first set
    to neutral. The pull request then passes when its commit messages (or
    its title and description, with --source pull-request) contain at
    least one #<number> reference, or when it carries the skip label.

    Examples:
        # Run inside a GitHub Actions pull_request workflow
        gh-issue-check check

        # Check a saved event payload against the PR title and description
        gh-issue-check check --event-path event.json --source pull-request
    """
    _configure_logging(verbose)

    try:
        config = CheckConfig.from_env()
        overrides = {
            "token": token,
            "reference_source": parse_reference_source(source) if source else None,
            "check_name": check_name,
            "skip_label": skip_label,
            "require_every_commit": require_every_commit,
            "neutralize_previous": neutralize,
            "post_comment": post_comment,
        }
        config = config.model_copy(
            update={key: value for key, value in overrides.items() if value is not None}
        )
        config.validate_settings()

        context = load_pull_request_context(event_path)
        client = GitHubClient(token=config.token)

        console.print(
            f"🔍 [blue]Checking {context.full_name}#{context.number} "
            f"({config.reference_source.value})[/blue]"
        )
        outcome = run_check(context, config, client)
    except ConfigurationError as e:
        _fail(str(e), exit_code=2)
    except (CollaboratorError, ValueError) as e:
        _fail(str(e))

    result = outcome.result
    if isinstance(result, Skipped):
        console.print(f"⏭️  [yellow]{result.message}[/yellow]")
        return

    for commit in result.missing_commits:
        console.print(
            f"⚠️  [yellow]Commit {commit.sha[:7]} does not refer any issue: "
            f"{escape(commit.summary)}[/yellow]"
        )

    if isinstance(result, PolicyViolation):
        _fail(result.message)

    console.print(f"✅ [green]{result.message}[/green]")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def scan(
    text: str | None = typer.Argument(
        None, help="Text to scan; reads standard input when omitted"
    ),
) -> None:
    """Print the distinct issue references found in text."""
    if text is None:
        text = sys.stdin.read()

    references = merge_references(scan_references(text))
    if is_empty(references):
        console.print("❌ [red]No issue references found[/red]")
        raise typer.Exit(1)

    for reference in references:
        typer.echo(reference)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_issue_check import __version__

    console.print(f"GitHub Issue Check v{__version__}")


if __name__ == "__main__":
    app()
