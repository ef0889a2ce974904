"""A single issue reference check run."""

import logging

from pydantic import BaseModel, Field

from .config import CheckConfig
from .github_client.client import GitHubClient
from .validation.gate import ValidationGate
from .validation.models import GateResult, NeutralizationReport, PullRequestContext
from .validation.neutralizer import CheckRunNeutralizer

logger = logging.getLogger(__name__)


class RunOutcome(BaseModel):
    """Everything a run did."""

    result: GateResult = Field(..., discriminator="kind")
    neutralization: NeutralizationReport | None = None


def run_check(
    context: PullRequestContext, config: CheckConfig, client: GitHubClient
) -> RunOutcome:
    """Neutralize previous runs, evaluate the gate, then post the comment.

    Context and configuration are validated by the caller, so nothing here
    mutates GitHub state before both are known to be complete.
    """
    if context.is_label_change:
        logger.info(
            "Pull request #%s was %s, re-validating", context.number, context.action
        )

    neutralization = None
    if config.neutralize_previous:
        neutralizer = CheckRunNeutralizer(
            client,
            check_name=config.check_name,
            app_slug=config.app_slug,
            current_run_id=config.current_check_run_id,
            neutralize_current_run=config.neutralize_current_run,
        )
        neutralization = neutralizer.neutralize(context)

    gate = ValidationGate(
        client,
        source=config.reference_source,
        skip_label=config.skip_label,
        require_every_commit=config.require_every_commit,
    )
    result = gate.run(context, post_comment=config.post_comment)
    return RunOutcome(result=result, neutralization=neutralization)
