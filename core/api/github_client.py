"""
core.api.github_client

Thin wrapper around the GitHub REST API for Oscarbot.

Used by:
  - runtime/agents/session_validator.py (through GitHubRepositoryVerifier)
  - runtime/agents/intents/fork_project.py
  - cli/main.py
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from configs.settings import Settings
from exceptions.exceptions import GitHubApiError


logger = logging.getLogger(__name__)


@dataclass
class GitHubResponse:
    """A successful (2xx) GitHub API response."""

    status_code: int
    body: Any = None


# -------------------------------------------------------------------
# Internal helpers
# -------------------------------------------------------------------


def _basic_auth(username: str, password: str) -> str:
    raw = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


def _decode_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


# -------------------------------------------------------------------
# Client
# -------------------------------------------------------------------


class GitHubClient:
    """
    Minimal HTTP client for the handful of GitHub calls Oscarbot makes.

    Parameters
    ----------
    settings:
        Settings providing the API base URL, timeout and (optionally) a
        service token.
    session:
        Optional pre-configured requests.Session (tests pass a fake one).
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.base_url = settings.github_api_url
        self.timeout = settings.http_timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": "oscarbot",
            }
        )

    def login(self, username: str, password: str) -> str:
        """Authenticate and return the Authorization header value to use.

        Credentials are checked against ``GET /user`` so that a bad
        username/password surfaces as a 401 here, not on the next call.
        """
        if not username and self.settings.github_token:
            return f"token {self.settings.github_token}"

        token = _basic_auth(username, password)
        self.get(token, "/user")
        return token

    def get(self, token: str, path: str) -> GitHubResponse:
        return self._request("GET", token, path)

    def post(self, token: str, path: str, body: Optional[Dict[str, Any]] = None) -> GitHubResponse:
        return self._request("POST", token, path, body if body is not None else {})

    def _request(
        self,
        method: str,
        token: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> GitHubResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("[GITHUB] %s %s", method, url)

        # Transport errors (ConnectionError, Timeout, ...) propagate as-is.
        resp = self.session.request(
            method,
            url,
            headers={"Authorization": token},
            json=body,
            timeout=self.timeout,
        )

        payload = _decode_body(resp)
        if not 200 <= resp.status_code < 300:
            message = payload.get("message") if isinstance(payload, dict) else resp.reason
            logger.info("[GITHUB] %s %s -> %s", method, url, resp.status_code)
            raise GitHubApiError(resp.status_code, message or "request failed", payload)

        return GitHubResponse(status_code=resp.status_code, body=payload)


# -------------------------------------------------------------------
# Repository verifier
# -------------------------------------------------------------------


class GitHubRepositoryVerifier:
    """
    Answers "does this repository exist?" using the service credentials.

    A 404 means the repository does not exist (or the service account has
    no access to it). Every other failure is re-raised unchanged so the
    caller can tell "not found" apart from a broken turn.
    """

    def __init__(self, client: GitHubClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    def exists(self, repository: str) -> bool:
        if self.settings.github_token:
            token = self.client.login("", "")
        else:
            token = self.client.login(
                self.settings.github_username,
                self.settings.github_password,
            )

        try:
            self.client.get(token, f"/repos/{repository}")
        except GitHubApiError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True
