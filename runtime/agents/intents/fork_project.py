"""ForkProject intent: fork the session's repository into the user's account.

Runs only after SessionValidator has confirmed the repository. The fork is
made with the USER's credentials (elicited as slots), not the service
account's.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from core.api.github_client import GitHubClient
from core.i18n.messages import translate
from .. import dialog_actions
from ...models.api_models import DialogResponse, LexEvent
from ...models.session_models import REPOSITORY_ATTRIBUTE


logger = logging.getLogger(__name__)

INTENT_NAME = "ForkProject"
USERNAME_SLOT = "GitHubUsername"
PASSWORD_SLOT = "GitHubPassword"


class ForkProjectIntent:
    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    async def handle(self, event: LexEvent) -> DialogResponse:
        repository = event.sessionAttributes[REPOSITORY_ATTRIBUTE]
        slots = event.currentIntent.slots
        username = slots.get(USERNAME_SLOT)
        password = slots.get(PASSWORD_SLOT)

        if not username:
            return dialog_actions.elicit(event, USERNAME_SLOT, translate("forkProjectRequestUsername"))
        if not password:
            return dialog_actions.elicit(event, PASSWORD_SLOT, translate("forkProjectRequestPassword"))

        status = event.currentIntent.confirmationStatus
        if status == "Denied":
            return dialog_actions.fulfilled(event, translate("forkProjectDenied"))
        if status == "None":
            card = dialog_actions.build_response_card(
                "Confirm",
                None,
                [{"text": "Yes", "value": "Yes"}, {"text": "No", "value": "No"}],
            )
            return dialog_actions.confirm(
                event,
                translate("forkProjectConfirm", repository=repository, username=username),
                card,
            )

        try:
            fork = await run_in_threadpool(self._fork, repository, username, password)
        except Exception:
            logger.exception("[FORK] Error forking %s for %s", repository, username)
            return dialog_actions.failed(event, translate("forkProjectFailed"))

        logger.info("[FORK] Forked %s to %s", repository, fork)
        return dialog_actions.fulfilled(
            event,
            translate("forkProjectSuccessResponse", repository=repository, fork=fork),
        )

    def _fork(self, repository: str, username: str, password: str) -> str:
        token = self.client.login(username, password)
        result = self.client.post(token, f"/repos/{repository}/forks", {})
        return result.body["full_name"]
