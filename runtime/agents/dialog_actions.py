"""Builders for the platform's dialog-action responses.

The low-level builders take explicit session attributes / intent / slots;
the ``elicit``, ``fulfilled`` and ``failed`` helpers take a whole LexEvent
and are what the validator and intent handlers normally use.

Every response carries copies of the session attributes and slots so that
later mutation of the event does not leak into an already-built response.
"""

from typing import Dict, List, Optional

from ..models.api_models import (
    Button,
    DialogAction,
    DialogResponse,
    GenericAttachment,
    LexEvent,
    Message,
    ResponseCard,
)


def _plain(text: str) -> Message:
    return Message(contentType="PlainText", content=text)


def elicit_slot(
    session_attributes: Dict[str, str],
    intent_name: str,
    slots: Dict[str, Optional[str]],
    slot_to_elicit: str,
    message: Message,
    response_card: Optional[ResponseCard] = None,
) -> DialogResponse:
    """Ask the user for one specific slot, keeping every other slot."""
    return DialogResponse(
        sessionAttributes=dict(session_attributes),
        dialogAction=DialogAction(
            type="ElicitSlot",
            intentName=intent_name,
            slots=dict(slots),
            slotToElicit=slot_to_elicit,
            message=message,
            responseCard=response_card,
        ),
    )


def confirm_intent(
    session_attributes: Dict[str, str],
    intent_name: str,
    slots: Dict[str, Optional[str]],
    message: Message,
    response_card: Optional[ResponseCard] = None,
) -> DialogResponse:
    return DialogResponse(
        sessionAttributes=dict(session_attributes),
        dialogAction=DialogAction(
            type="ConfirmIntent",
            intentName=intent_name,
            slots=dict(slots),
            message=message,
            responseCard=response_card,
        ),
    )


def close(
    session_attributes: Dict[str, str],
    fulfillment_state: str,
    message: Message,
) -> DialogResponse:
    return DialogResponse(
        sessionAttributes=dict(session_attributes),
        dialogAction=DialogAction(
            type="Close",
            fulfillmentState=fulfillment_state,
            message=message,
        ),
    )


def build_response_card(
    title: Optional[str],
    subtitle: Optional[str],
    options: Optional[List[Dict[str, str]]] = None,
) -> ResponseCard:
    """Build a single-attachment card; at most five buttons are shown."""
    buttons = [Button(**option) for option in (options or [])[:5]]
    return ResponseCard(
        genericAttachments=[
            GenericAttachment(title=title, subTitle=subtitle, buttons=buttons)
        ]
    )


# ---------------------------------------------------------------------------
# Event-level helpers
# ---------------------------------------------------------------------------


def elicit(event: LexEvent, slot_name: str, text: str) -> DialogResponse:
    return elicit_slot(
        event.sessionAttributes,
        event.currentIntent.name,
        event.currentIntent.slots,
        slot_name,
        _plain(text),
    )


def confirm(event: LexEvent, text: str, response_card: Optional[ResponseCard] = None) -> DialogResponse:
    return confirm_intent(
        event.sessionAttributes,
        event.currentIntent.name,
        event.currentIntent.slots,
        _plain(text),
        response_card,
    )


def fulfilled(event: LexEvent, text: str) -> DialogResponse:
    return close(event.sessionAttributes, "Fulfilled", _plain(text))


def failed(event: LexEvent, text: str) -> DialogResponse:
    return close(event.sessionAttributes, "Failed", _plain(text))
