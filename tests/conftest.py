"""Shared fakes and builders for the Oscarbot test suite."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pytest

from core.api.github_client import GitHubResponse
from runtime.models.api_models import LexEvent


class FakeVerifier:
    """RepositoryVerifier that knows a fixed set of repositories."""

    def __init__(self, existing: Iterable[str] = (), error: Optional[Exception] = None) -> None:
        self.existing = set(existing)
        self.error = error
        self.calls: List[str] = []

    def exists(self, repository: str) -> bool:
        self.calls.append(repository)
        if self.error is not None:
            raise self.error
        return repository in self.existing


class FakeGitHubClient:
    """Stands in for GitHubClient in intent handler tests."""

    def __init__(self, fork_name: str = "alice/bootstrap", error: Optional[Exception] = None) -> None:
        self.fork_name = fork_name
        self.error = error
        self.calls: List[tuple] = []

    def login(self, username: str, password: str) -> str:
        self.calls.append(("login", username, password))
        if self.error is not None:
            raise self.error
        return "Basic dG9rZW4="

    def post(self, token: str, path: str, body=None) -> GitHubResponse:
        self.calls.append(("post", path))
        return GitHubResponse(status_code=202, body={"full_name": self.fork_name})


class RecordingLogStore:
    def __init__(self) -> None:
        self.events: List[tuple] = []

    def log_event(self, event_type: str, payload: dict) -> None:
        self.events.append((event_type, payload))


def make_event(
    repository: Optional[str] = None,
    attributes: Optional[Dict[str, str]] = None,
    intent: str = "ForkProject",
    confirmation: str = "None",
    **slots: Optional[str],
) -> LexEvent:
    all_slots = {"Repository": repository}
    all_slots.update(slots)
    return LexEvent(
        sessionAttributes=attributes,
        currentIntent={
            "name": intent,
            "slots": all_slots,
            "confirmationStatus": confirmation,
        },
    )


@pytest.fixture()
def verifier() -> FakeVerifier:
    return FakeVerifier(existing={"twbs/bootstrap", "pallets/flask"})
