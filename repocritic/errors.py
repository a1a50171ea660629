"""
Exception types raised inside the analysis pipeline.
"""

from typing import Optional


class RepoCriticError(Exception):
    """Base class for repocritic failures."""


class GitHubAPIError(RepoCriticError):
    """A GitHub API call failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code or 500


class InvalidRepoUrlError(RepoCriticError, ValueError):
    """The repository URL does not end in an owner/repo pair."""

    def __init__(self, message: str = "Invalid repository URL format"):
        super().__init__(message)


class ModelNotConfiguredError(RepoCriticError):
    """No generative model credential is configured."""

    def __init__(self, message: str = "Gemini API key is not configured"):
        super().__init__(message)


class TraversalLimitError(RepoCriticError):
    """The repository tree exceeded the walker's depth or file limit."""
