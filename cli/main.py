#!/usr/bin/env python3
"""
Oscarbot CLI

Small operator tools for the dialog runtime.

Commands:

1) check-repo
   - Ask GitHub (with the configured service credentials) whether a
     repository exists, exactly as the session validator would.

2) turn
   - Run one conversational turn from a platform event JSON file through
     the ConversationAgent and print the dialog response.

The HTTP runtime is started separately, e.g.:

    uvicorn runtime.api.server:app --reload
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import settings
from core.api.github_client import GitHubClient, GitHubRepositoryVerifier
from runtime.agents.conversation_agent import build_conversation_agent
from runtime.agents.session_validator import is_repository_name
from runtime.models.api_models import LexEvent
from runtime.store.log_store import ConsoleLogStore


def cmd_check_repo(repository: str) -> int:
    """Return 0 if the repository exists, 1 if not (or malformed)."""
    if not is_repository_name(repository):
        print(f"[Oscarbot] '{repository}' is not in the form owner/name")
        return 1

    verifier = GitHubRepositoryVerifier(GitHubClient(settings), settings)
    if verifier.exists(repository):
        print(f"[Oscarbot] ✓ {repository} exists")
        return 0
    print(f"[Oscarbot] ✗ {repository} was not found")
    return 1


def cmd_turn(event_path: str, verbose: bool) -> int:
    """Run a single turn from a JSON event file and print the response."""
    path = Path(event_path)
    if not path.is_file():
        raise FileNotFoundError(f"Event file not found: {event_path}")

    with path.open("r", encoding="utf-8") as f:
        event = LexEvent(**json.load(f))

    agent = build_conversation_agent(
        settings,
        log_store=ConsoleLogStore() if verbose else None,
    )
    response = asyncio.run(agent.handle_event(event))
    print(json.dumps(response.model_dump(exclude_none=True), indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oscarbot",
        description="Oscarbot dialog runtime tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check-repo
    p_check = subparsers.add_parser(
        "check-repo", help="Check whether a GitHub repository exists"
    )
    p_check.add_argument("repository", help="Repository name, e.g. twbs/bootstrap")

    # turn
    p_turn = subparsers.add_parser(
        "turn", help="Run one turn from a platform event JSON file"
    )
    p_turn.add_argument("event", help="Path to the event JSON file")
    p_turn.add_argument(
        "--verbose",
        action="store_true",
        help="Print runtime events to the console",
    )

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    command: str = args.command

    if command == "check-repo":
        code = cmd_check_repo(args.repository)
    elif command == "turn":
        code = cmd_turn(args.event, verbose=args.verbose)
    else:
        parser.error(f"Unknown command: {command}")
    sys.exit(code)


if __name__ == "__main__":
    main()
