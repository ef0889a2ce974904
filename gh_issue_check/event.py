"""Loading of the GitHub event that triggered a run."""

import json
import os
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .validation.models import PullRequestContext


def load_event(path: str | Path | None = None) -> dict[str, Any]:
    """Read the event payload JSON.

    Args:
        path: Payload file. If None, reads GITHUB_EVENT_PATH.

    Raises:
        ConfigurationError: If the payload cannot be located or parsed
    """
    event_path = path or os.getenv("GITHUB_EVENT_PATH")
    if not event_path:
        raise ConfigurationError(
            "GITHUB_EVENT_PATH is not set and no event path was provided"
        )

    try:
        with open(event_path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Event payload not found at: {event_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse event payload JSON: {e}")

    if not isinstance(payload, dict):
        raise ConfigurationError("Event payload must be a JSON object")
    return payload


def load_pull_request_context(path: str | Path | None = None) -> PullRequestContext:
    """Load the event payload and build the pull request context."""
    return PullRequestContext.from_event(load_event(path))
