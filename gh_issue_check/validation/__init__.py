"""Issue reference validation core."""

from .comment_composer import CommentComposer
from .gate import SKIP_LABEL, ValidationGate
from .models import (
    GateResult,
    PolicyViolation,
    PullRequestContext,
    ReferenceSource,
    Satisfied,
    Skipped,
)
from .neutralizer import CheckRunNeutralizer
from .references import is_empty, merge_references, scan_references

__all__ = [
    "CheckRunNeutralizer",
    "CommentComposer",
    "GateResult",
    "PolicyViolation",
    "PullRequestContext",
    "ReferenceSource",
    "SKIP_LABEL",
    "Satisfied",
    "Skipped",
    "ValidationGate",
    "is_empty",
    "merge_references",
    "scan_references",
]
