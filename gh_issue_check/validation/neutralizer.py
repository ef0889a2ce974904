"""Neutralization of stale check runs on a pull request head commit.

GitHub treats a check suite as in progress while any of its runs is not
completed, so re-requesting the suite cannot tell a fresh run of this
check apart from an old one. Completed runs with the same name are set to
``neutral`` instead, which removes them from pass/fail aggregation.
"""

import logging
from typing import Protocol

from ..errors import CheckRunLimitExceeded, CollaboratorError
from ..github_client.models import GitHubCheckRun, GitHubCheckSuite
from .models import NeutralizationReport, PullRequestContext

logger = logging.getLogger(__name__)

DEFAULT_CHECK_NAME = "Check Commit Messages"
DEFAULT_APP_SLUG = "github-actions"
NEUTRAL_CONCLUSION = "neutral"
MAX_CHECK_RUNS_PER_SUITE = 250


class CheckRunStore(Protocol):
    def list_check_suites_for_ref(
        self, org: str, repo: str, ref: str
    ) -> list[GitHubCheckSuite]: ...

    def list_check_runs_for_suite(
        self, org: str, repo: str, suite_id: int
    ) -> list[GitHubCheckRun]: ...

    def update_check_run_conclusion(
        self, org: str, repo: str, run_id: int, conclusion: str
    ) -> bool: ...


class CheckRunNeutralizer:
    """Downgrades previous completed runs of this check to neutral."""

    def __init__(
        self,
        client: CheckRunStore,
        check_name: str = DEFAULT_CHECK_NAME,
        app_slug: str = DEFAULT_APP_SLUG,
        current_run_id: int | None = None,
        neutralize_current_run: bool = False,
    ) -> None:
        self.client = client
        self.check_name = check_name
        self.app_slug = app_slug
        self.current_run_id = current_run_id
        self.neutralize_current_run = neutralize_current_run

    def find_stale_runs(self, context: PullRequestContext) -> list[GitHubCheckRun]:
        """Find completed runs of this check on the head commit.

        Every suite is listed before anything is returned, so an oversized
        suite aborts the step before any run has been changed.

        Raises:
            CheckRunLimitExceeded: If a suite has more than 250 runs
        """
        suites = self.client.list_check_suites_for_ref(
            context.owner, context.repo, context.head_sha
        )

        stale: list[GitHubCheckRun] = []
        for suite in suites:
            if suite.app_slug != self.app_slug:
                continue

            runs = self.client.list_check_runs_for_suite(
                context.owner, context.repo, suite.id
            )
            if len(runs) > MAX_CHECK_RUNS_PER_SUITE:
                raise CheckRunLimitExceeded(
                    suite.id, len(runs), MAX_CHECK_RUNS_PER_SUITE
                )

            stale.extend(
                run for run in runs if run.name == self.check_name and run.is_completed
            )
        return stale

    def neutralize(self, context: PullRequestContext) -> NeutralizationReport:
        """Set every stale run's conclusion to neutral, best effort.

        A run that fails to update is logged and skipped.
        """
        report = NeutralizationReport()

        for run in self.find_stale_runs(context):
            if run.id == self.current_run_id and not self.neutralize_current_run:
                report.skipped_current = run.id
                continue
            if run.conclusion == NEUTRAL_CONCLUSION:
                logger.debug("Check run %s is already neutral", run.id)
                report.neutralized.append(run.id)
                continue

            try:
                self.client.update_check_run_conclusion(
                    context.owner, context.repo, run.id, NEUTRAL_CONCLUSION
                )
            except (CollaboratorError, ValueError) as e:
                logger.warning("Failed to neutralize check run %s: %s", run.id, e)
                report.failed.append(run.id)
                continue
            report.neutralized.append(run.id)

        if report.neutralized:
            logger.info(
                "Neutralized %d previous '%s' check run(s)",
                len(report.neutralized),
                self.check_name,
            )
        return report
