"""Pull request gatekeeper requiring issue references."""

__version__ = "0.1.0"
