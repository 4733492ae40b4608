"""Tests for the GitHub REST wrapper and the repository verifier."""

from __future__ import annotations

import json
from typing import Any, List, Optional

import pytest
import requests

from configs.settings import Settings
from core.api.github_client import GitHubClient, GitHubRepositoryVerifier
from exceptions.exceptions import GitHubApiError


class FakeResponse:
    def __init__(self, status_code: int, payload: Optional[Any] = None, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self.content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.text = self.content.decode("utf-8")

    def json(self) -> Any:
        return json.loads(self.content)


class FakeSession:
    """Replays canned responses and records every request."""

    def __init__(self, *responses: Any) -> None:
        self.headers: dict = {}
        self.responses: List[Any] = list(responses)
        self.requests: List[dict] = []

    def request(self, method, url, headers=None, json=None, timeout=None):
        self.requests.append(
            {"method": method, "url": url, "headers": headers, "json": json, "timeout": timeout}
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("GITHUB_API_URL", "https://github.test/")
    monkeypatch.setenv("GITHUB_USERNAME", "oscar")
    monkeypatch.setenv("GITHUB_PASSWORD", "secret")
    monkeypatch.setenv("OSCARBOT_HTTP_TIMEOUT", "3")
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return Settings()


def _verifier(settings: Settings, session: FakeSession) -> GitHubRepositoryVerifier:
    return GitHubRepositoryVerifier(GitHubClient(settings, session=session), settings)


def test_exists_logs_in_then_looks_up_repository(settings: Settings) -> None:
    session = FakeSession(FakeResponse(200, {"login": "oscar"}), FakeResponse(200, {"id": 1}))

    assert _verifier(settings, session).exists("twbs/bootstrap") is True

    assert [r["url"] for r in session.requests] == [
        "https://github.test/user",
        "https://github.test/repos/twbs/bootstrap",
    ]
    assert session.requests[0]["headers"]["Authorization"].startswith("Basic ")
    assert session.requests[1]["timeout"] == 3.0


def test_exists_returns_false_on_404(settings: Settings) -> None:
    session = FakeSession(
        FakeResponse(200, {"login": "oscar"}),
        FakeResponse(404, {"message": "Not Found"}),
    )

    assert _verifier(settings, session).exists("nobody/nothing") is False


def test_bad_service_credentials_propagate(settings: Settings) -> None:
    session = FakeSession(FakeResponse(401, {"message": "Bad credentials"}))

    with pytest.raises(GitHubApiError) as excinfo:
        _verifier(settings, session).exists("twbs/bootstrap")

    assert excinfo.value.status_code == 401
    assert len(session.requests) == 1


def test_server_error_is_not_treated_as_missing(settings: Settings) -> None:
    session = FakeSession(
        FakeResponse(200, {"login": "oscar"}),
        FakeResponse(502, None, reason="Bad Gateway"),
    )

    with pytest.raises(GitHubApiError) as excinfo:
        _verifier(settings, session).exists("twbs/bootstrap")

    assert excinfo.value.status_code == 502
    assert "Bad Gateway" in str(excinfo.value)


def test_transport_errors_propagate_unchanged(settings: Settings) -> None:
    session = FakeSession(requests.Timeout("read timed out"))

    with pytest.raises(requests.Timeout):
        _verifier(settings, session).exists("twbs/bootstrap")


def test_service_token_skips_login_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_API_URL", "https://github.test")
    monkeypatch.delenv("GITHUB_USERNAME", raising=False)
    monkeypatch.delenv("GITHUB_PASSWORD", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "abc123")
    settings = Settings()
    session = FakeSession(FakeResponse(200, {"id": 1}))

    assert _verifier(settings, session).exists("twbs/bootstrap") is True

    assert len(session.requests) == 1
    assert session.requests[0]["headers"]["Authorization"] == "token abc123"


def test_missing_credentials_raise_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_USERNAME", "GITHUB_PASSWORD", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()

    with pytest.raises(RuntimeError):
        _verifier(settings, FakeSession()).exists("twbs/bootstrap")


def test_post_returns_response_body(settings: Settings) -> None:
    session = FakeSession(FakeResponse(202, {"full_name": "alice/bootstrap"}))
    client = GitHubClient(settings, session=session)

    result = client.post("Basic xyz", "/repos/twbs/bootstrap/forks")

    assert result.status_code == 202
    assert result.body["full_name"] == "alice/bootstrap"
    assert session.requests[0]["method"] == "POST"
    assert session.requests[0]["json"] == {}
