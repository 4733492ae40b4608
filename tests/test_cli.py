"""Tests for the oscarbot command-line tools."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import cli.main as cli_main
from runtime.agents.conversation_agent import ConversationAgent
from runtime.agents.intents.fork_project import ForkProjectIntent
from runtime.agents.session_validator import SessionValidator

from conftest import FakeGitHubClient, FakeVerifier


@pytest.fixture()
def fake_agent(monkeypatch: pytest.MonkeyPatch, verifier: FakeVerifier) -> ConversationAgent:
    agent = ConversationAgent(
        validator=SessionValidator(verifier),
        handlers={"ForkProject": ForkProjectIntent(FakeGitHubClient()).handle},
    )
    monkeypatch.setattr(cli_main, "build_conversation_agent", lambda settings, log_store=None: agent)
    return agent


def test_turn_prints_dialog_response(
    tmp_path: Path, capsys: pytest.CaptureFixture, fake_agent: ConversationAgent, verifier: FakeVerifier
) -> None:
    event_path = tmp_path / "event.json"
    event_path.write_text(
        json.dumps(
            {
                "sessionAttributes": None,
                "currentIntent": {"name": "ForkProject", "slots": {"Repository": "twbs/bootstrap"}},
            }
        ),
        encoding="utf-8",
    )

    code = cli_main.cmd_turn(str(event_path), verbose=False)

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["dialogAction"]["slotToElicit"] == "GitHubUsername"
    assert output["sessionAttributes"]["Repository"] == "twbs/bootstrap"
    assert "fulfillmentState" not in output["dialogAction"]
    assert verifier.calls == ["twbs/bootstrap"]


def test_turn_with_missing_file(tmp_path: Path, fake_agent: ConversationAgent) -> None:
    with pytest.raises(FileNotFoundError):
        cli_main.cmd_turn(str(tmp_path / "missing.json"), verbose=False)


def test_check_repo_rejects_malformed_name(monkeypatch: pytest.MonkeyPatch) -> None:
    def _unexpected(*args, **kwargs):
        raise AssertionError("GitHub should not be contacted")

    monkeypatch.setattr(cli_main, "GitHubRepositoryVerifier", _unexpected)

    assert cli_main.cmd_check_repo("bootstrap") == 1


def test_check_repo_reports_existence(monkeypatch: pytest.MonkeyPatch, verifier: FakeVerifier) -> None:
    monkeypatch.setattr(cli_main, "GitHubRepositoryVerifier", lambda client, settings: verifier)

    assert cli_main.cmd_check_repo("twbs/bootstrap") == 0
    assert cli_main.cmd_check_repo("nobody/nothing") == 1
    assert verifier.calls == ["twbs/bootstrap", "nobody/nothing"]
