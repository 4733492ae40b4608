"""
Intent handlers, keyed by the platform's intent name.

Each handler is an async callable taking a validated LexEvent and
returning the DialogResponse for the turn.
"""

from typing import Awaitable, Callable, Dict

from core.api.github_client import GitHubClient
from ...models.api_models import DialogResponse, LexEvent
from .fork_project import INTENT_NAME as FORK_PROJECT, ForkProjectIntent


IntentHandler = Callable[[LexEvent], Awaitable[DialogResponse]]


def build_intent_handlers(client: GitHubClient) -> Dict[str, IntentHandler]:
    return {
        FORK_PROJECT: ForkProjectIntent(client).handle,
    }
