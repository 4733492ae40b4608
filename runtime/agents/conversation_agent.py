"""ConversationAgent implementation.

Responsible for:
- running SessionValidator on every incoming turn
- returning the validator's elicitation when the session is not ready
- dispatching validated turns to the handler for the current intent
- turning GitHub failures during validation into a single apology

Current behavior:
- the validator's elicitation (if any) is returned as-is; the session is
  untouched on that path
- if the repository check fails for any reason other than "not found",
  the turn closes as Failed with a generic message and the session
  attributes are left as they were
- unknown intents close as Failed
- high-level events are written to the log store (optional)
"""

import logging
from typing import Dict, Optional

import requests

from configs.settings import Settings
from core.api.github_client import GitHubClient, GitHubRepositoryVerifier
from core.i18n.messages import translate
from exceptions.exceptions import GitHubApiError
from . import dialog_actions
from .intents import IntentHandler, build_intent_handlers
from .session_validator import SessionValidator, identity, strip_trailing_question_mark
from ..models.api_models import DialogResponse, LexEvent


logger = logging.getLogger(__name__)


class ConversationAgent:
    """Turn-level orchestration for Oscarbot.

    Parameters
    ----------
    validator:
        SessionValidator run before any intent handler.
    handlers:
        Mapping of intent name -> async handler.
    log_store:
        Store used to log high-level events (optional).
    """

    def __init__(
        self,
        validator: SessionValidator,
        handlers: Dict[str, IntentHandler],
        log_store: Optional[object] = None,
    ):
        self.validator = validator
        self.handlers = handlers
        self.log_store = log_store

    async def handle_event(self, event: LexEvent) -> DialogResponse:
        """Handle a single turn.

        Flow:
        - validate the session (may suspend on the GitHub lookup)
        - if not ready, return the elicitation
        - otherwise hand off to the intent handler
        """
        intent_name = event.currentIntent.name

        try:
            result = await self.validator.validate(event)
        except (GitHubApiError, requests.RequestException) as exc:
            logger.exception("[AGENT] Repository check failed for intent=%s", intent_name)
            self._log(
                "validation_failed",
                {"intent": intent_name, "error": str(exc)},
            )
            return dialog_actions.failed(event, translate("repositoryCheckFailed"))

        if not result.proceed:
            self._log(
                "slot_elicited",
                {"intent": intent_name, "state": result.state.value},
            )
            return result.response

        handler = self.handlers.get(intent_name)
        if handler is None:
            logger.warning("[AGENT] No handler registered for intent=%s", intent_name)
            self._log("intent_unknown", {"intent": intent_name})
            return dialog_actions.failed(event, translate("unknownIntent"))

        response = await handler(event)
        self._log(
            "intent_handled",
            {
                "intent": intent_name,
                "state": result.state.value,
                "dialog_action": response.dialogAction.type,
            },
        )
        return response

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log(self, event_type: str, payload: dict) -> None:
        if self.log_store is None:
            return
        try:
            self.log_store.log_event(event_type=event_type, payload=payload)
        except Exception:
            # Logging failures should not affect main flow.
            logger.debug("[AGENT] log_store failed for %s", event_type, exc_info=True)


def build_conversation_agent(settings: Settings, log_store: Optional[object] = None) -> ConversationAgent:
    """Wire a ConversationAgent against the real GitHub API."""
    client = GitHubClient(settings)
    validator = SessionValidator(
        verifier=GitHubRepositoryVerifier(client, settings),
        normalizer=strip_trailing_question_mark if settings.strip_question_mark else identity,
    )
    return ConversationAgent(
        validator=validator,
        handlers=build_intent_handlers(client),
        log_store=log_store,
    )
