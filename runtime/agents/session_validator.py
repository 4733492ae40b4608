"""Session validation for Oscarbot.

Every turn passes through SessionValidator before an intent handler runs.
It makes sure the session knows which repository the user is talking
about, asking for it (or for a corrected name) when it does not.

Decision order for the ``Repository`` slot:

1. No slot value:
     - no repository remembered in the session -> ask for one
     - otherwise copy the remembered repository into the slot -> proceed
2. Slot equals the remembered repository -> proceed
3. Slot was already verified earlier in this session
   (``validatedRepositories``) -> make it current -> proceed
4. Slot is not shaped like ``owner/name`` -> ask again
5. Ask GitHub whether it exists:
     - yes -> make it current, remember it as verified -> proceed
     - 404 -> ask again
     - anything else -> the error propagates to the caller

Session attributes are only written after the corresponding check has
succeeded. The GitHub lookup is the only step that suspends.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from core.i18n.messages import translate
from exceptions.exceptions import InvalidRepositoryNameError, RepositoryNotFoundError
from . import dialog_actions
from ..models.api_models import DialogResponse, LexEvent
from ..models.session_models import REPOSITORY_ATTRIBUTE, ValidatedRepositories


logger = logging.getLogger(__name__)

REPOSITORY_SLOT = "Repository"

_REPOSITORY_PATTERN = re.compile(r"(.+)/(.+)")


# ---------------------------------------------------------------------------
# Result + verifier interface
# ---------------------------------------------------------------------------


class ValidationState(str, Enum):
    NO_INPUT = "NO_INPUT"
    HAS_SESSION_VALUE = "HAS_SESSION_VALUE"
    MATCHES_SESSION = "MATCHES_SESSION"
    PREVIOUSLY_VALIDATED = "PREVIOUSLY_VALIDATED"
    SYNTAX_INVALID = "SYNTAX_INVALID"
    NOT_FOUND = "NOT_FOUND"
    VERIFIED = "VERIFIED"


@dataclass
class SessionValidationResult:
    """Outcome of validating one turn.

    Exactly one of the following holds:
    - proceed is True and response is None
    - proceed is False and response is the elicitation to send back
    """

    proceed: bool
    state: ValidationState
    response: Optional[DialogResponse] = None


class RepositoryVerifier(Protocol):
    """
    Anything that can tell whether a repository exists.

    ``exists`` returns False only for "not found"; any other failure must
    be raised.
    """

    def exists(self, repository: str) -> bool:
        ...


# ---------------------------------------------------------------------------
# Slot helpers
# ---------------------------------------------------------------------------


def identity(value: Optional[str]) -> Optional[str]:
    return value


def strip_trailing_question_mark(value: Optional[str]) -> Optional[str]:
    """Drop a single trailing '?' ("can you fork twbs/bootstrap?")."""
    if value and value.endswith("?"):
        return value[:-1]
    return value


def is_repository_name(value: Optional[str]) -> bool:
    """True if the value looks like 'owner/name'."""
    return bool(value) and _REPOSITORY_PATTERN.search(value) is not None


# ---------------------------------------------------------------------------
# SessionValidator
# ---------------------------------------------------------------------------


class SessionValidator:
    """
    Parameters
    ----------
    verifier:
        RepositoryVerifier used for the existence check. Its ``exists``
        is blocking and is run in a worker thread.
    normalizer:
        Callable applied to the raw slot value before any check.
        Defaults to ``identity``.
    """

    def __init__(
        self,
        verifier: RepositoryVerifier,
        normalizer: Optional[Callable[[Optional[str]], Optional[str]]] = None,
    ) -> None:
        self.verifier = verifier
        self.normalizer = normalizer or identity

    async def validate(self, event: LexEvent) -> SessionValidationResult:
        """Validate the session for this turn.

        Mutates ``event.sessionAttributes`` (and, when the repository is
        taken from the session, ``event.currentIntent.slots``) only on the
        branches that proceed.
        """
        if event is None or event.currentIntent is None:
            raise ValueError("validate() requires an event with a current intent")

        attributes = event.sessionAttributes
        slots = event.currentIntent.slots

        session_repository = attributes.get(REPOSITORY_ATTRIBUTE)
        slot_repository = self.normalizer(slots.get(REPOSITORY_SLOT))

        if not slot_repository:
            if not session_repository:
                return self._elicit(
                    event,
                    ValidationState.NO_INPUT,
                    translate("repositoryRequest"),
                )

            slots[REPOSITORY_SLOT] = session_repository
            return self._proceed(ValidationState.HAS_SESSION_VALUE, session_repository)

        if slot_repository == session_repository:
            return self._proceed(ValidationState.MATCHES_SESSION, slot_repository)

        validated = ValidatedRepositories.from_session(attributes)
        if slot_repository in validated:
            attributes[REPOSITORY_ATTRIBUTE] = slot_repository
            return self._proceed(ValidationState.PREVIOUSLY_VALIDATED, slot_repository)

        try:
            self._check_syntax(slot_repository)
            await self._check_exists(slot_repository)
        except InvalidRepositoryNameError as exc:
            return self._elicit(
                event,
                ValidationState.SYNTAX_INVALID,
                translate("repositoryInvalid", repository=exc.repository),
            )
        except RepositoryNotFoundError as exc:
            return self._elicit(
                event,
                ValidationState.NOT_FOUND,
                translate("repositoryNotFound", repository=exc.repository),
            )

        attributes[REPOSITORY_ATTRIBUTE] = slot_repository
        validated.add(slot_repository)
        validated.store(attributes)
        return self._proceed(ValidationState.VERIFIED, slot_repository)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_syntax(self, repository: str) -> None:
        if not is_repository_name(repository):
            raise InvalidRepositoryNameError(repository)

    async def _check_exists(self, repository: str) -> None:
        logger.info("[VALIDATE] Verifying repository %s", repository)
        exists = await run_in_threadpool(self.verifier.exists, repository)
        if not exists:
            raise RepositoryNotFoundError(repository)

    def _proceed(self, state: ValidationState, repository: str) -> SessionValidationResult:
        logger.debug("[VALIDATE] %s -> proceed with %s", state.value, repository)
        return SessionValidationResult(proceed=True, state=state)

    def _elicit(self, event: LexEvent, state: ValidationState, text: str) -> SessionValidationResult:
        logger.info("[VALIDATE] %s -> eliciting %s", state.value, REPOSITORY_SLOT)
        return SessionValidationResult(
            proceed=False,
            state=state,
            response=dialog_actions.elicit(event, REPOSITORY_SLOT, text),
        )
