"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubCheckRun, GitHubCheckSuite, GitHubCommit, GitHubLabel

__all__ = [
    "GitHubClient",
    "GitHubLabel",
    "GitHubCommit",
    "GitHubCheckSuite",
    "GitHubCheckRun",
]
