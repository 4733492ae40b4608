"""
Custom exceptions for Oscarbot.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/api/
  - runtime/agents/
  - runtime/api/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""

from typing import Any, Optional


class InvalidRepositoryNameError(Exception):
    """
    Raised when a repository name does not have the 'owner/name' shape.

    Example:
        'twbs/bootstrap'  ← expected
        'bootstrap'       ← raises this exception
    """

    def __init__(self, repository):
        self.repository = repository
        super().__init__(f"Invalid repository name: {repository!r}")


class RepositoryNotFoundError(Exception):
    """
    Raised when GitHub reports that a repository does not exist, or that
    the service account cannot see it.
    """

    def __init__(self, repository):
        self.repository = repository
        super().__init__(f"Repository not found: {repository}")


class GitHubApiError(Exception):
    """
    Raised for any non-2xx response from the GitHub API.

    The status code is kept so callers can tell a 404 (not found) apart
    from authentication failures, rate limiting and server errors.
    """

    def __init__(self, status_code: int, message: str, body: Optional[Any] = None):
        self.status_code = status_code
        self.body = body
        msg = f"GitHub API error {status_code}: {message}"
        super().__init__(msg)
