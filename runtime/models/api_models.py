"""
HTTP request/response models for the Oscarbot runtime API.

The platform models (LexEvent, DialogResponse and friends) keep the
conversational platform's camelCase field names so that they serialize
to exactly the wire format the platform sends and expects.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Inbound: platform event
# ---------------------------------------------------------------------------


class CurrentIntent(BaseModel):
    name: str
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)
    confirmationStatus: str = "None"  # "None" | "Confirmed" | "Denied"

    @field_validator("slots", mode="before")
    @classmethod
    def _null_slots(cls, value):
        # Empty slots come in as null rather than an empty object.
        return {} if value is None else value


class LexEvent(BaseModel):
    """A single conversational turn as delivered by the platform."""

    currentIntent: CurrentIntent
    sessionAttributes: Dict[str, str] = Field(default_factory=dict)
    inputTranscript: Optional[str] = None
    userId: Optional[str] = None

    @field_validator("sessionAttributes", mode="before")
    @classmethod
    def _null_attributes(cls, value):
        return {} if value is None else value


# ---------------------------------------------------------------------------
# Outbound: dialog actions
# ---------------------------------------------------------------------------


class Message(BaseModel):
    contentType: str = "PlainText"
    content: str


class Button(BaseModel):
    text: str
    value: str


class GenericAttachment(BaseModel):
    title: Optional[str] = None
    subTitle: Optional[str] = None
    buttons: List[Button] = Field(default_factory=list)


class ResponseCard(BaseModel):
    version: int = 1
    contentType: str = "application/vnd.amazonaws.card.generic"
    genericAttachments: List[GenericAttachment] = Field(default_factory=list)


class DialogAction(BaseModel):
    """
    type:
      - "ElicitSlot": slotToElicit + message, intent stays open
      - "ConfirmIntent": yes/no question about the intent
      - "Close": fulfillmentState is "Fulfilled" or "Failed"
    """
    type: str
    fulfillmentState: Optional[str] = None
    intentName: Optional[str] = None
    slots: Optional[Dict[str, Optional[str]]] = None
    slotToElicit: Optional[str] = None
    message: Optional[Message] = None
    responseCard: Optional[ResponseCard] = None


class DialogResponse(BaseModel):
    sessionAttributes: Dict[str, str] = Field(default_factory=dict)
    dialogAction: DialogAction


# ---------------------------------------------------------------------------
# Session-backed HTTP API
# ---------------------------------------------------------------------------


class StartSessionResponse(BaseModel):
    session_id: str


class AgentRequest(BaseModel):
    session_id: str
    intent_name: str
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)
    confirmation_status: str = "None"
    message: Optional[str] = None
