"""HTTP routes for interacting with the Oscarbot runtime.

Exposes endpoints like:

- POST /agent/start_session           -> returns a new session_id
- POST /agent/request                 -> one turn against a stored session
- POST /agent/lex                     -> one turn from a raw platform event
                                         (session attributes travel in the event)
- POST /agent/end_session/{session_id} -> closes a stored session
"""

import logging

from fastapi import APIRouter, HTTPException
from typing import Optional

from ..models.api_models import (
    AgentRequest,
    CurrentIntent,
    DialogResponse,
    LexEvent,
    StartSessionResponse,
)
from ..models.session_models import SessionStatus
from ..store.session_store import SessionStore
from ..agents.conversation_agent import ConversationAgent


logger = logging.getLogger(__name__)

# Router for all agent-related endpoints
router = APIRouter()


# Module-level references, to be initialized by the server.
_SESSION_STORE: Optional[SessionStore] = None
_CONVERSATION_AGENT: Optional[ConversationAgent] = None


def init_routes(session_store: SessionStore, conversation_agent: ConversationAgent) -> None:
    """Initialize module-level references used by the route handlers."""
    global _SESSION_STORE, _CONVERSATION_AGENT
    _SESSION_STORE = session_store
    _CONVERSATION_AGENT = conversation_agent


def _require_session_store() -> SessionStore:
    if _SESSION_STORE is None:
        raise HTTPException(
            status_code=500,
            detail="SessionStore is not configured on the server.",
        )
    return _SESSION_STORE


def _require_conversation_agent() -> ConversationAgent:
    if _CONVERSATION_AGENT is None:
        raise HTTPException(
            status_code=500,
            detail="ConversationAgent is not configured on the server.",
        )
    return _CONVERSATION_AGENT


@router.post("/start_session", response_model=StartSessionResponse)
async def start_session() -> StartSessionResponse:
    """Create a new session with empty attributes and return its ID."""
    session_store = _require_session_store()
    session = session_store.create_session()
    return StartSessionResponse(session_id=session.session_id)


@router.post("/request", response_model=DialogResponse, response_model_exclude_none=True)
async def handle_request(request: AgentRequest) -> DialogResponse:
    """Handle a single turn within a stored session.

    The stored attributes are fed to the agent as the event's session
    attributes, and whatever the agent returns is saved back. Elicitations
    carry the attributes unchanged, so a paused turn never alters the
    stored session.
    """
    try:
        session_store = _require_session_store()
        agent = _require_conversation_agent()

        session = session_store.get_session(request.session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Session not found")
        if session.status == SessionStatus.CLOSED:
            raise HTTPException(status_code=400, detail="Session is closed")

        event = LexEvent(
            sessionAttributes=dict(session.attributes),
            currentIntent=CurrentIntent(
                name=request.intent_name,
                slots=dict(request.slots),
                confirmationStatus=request.confirmation_status,
            ),
            inputTranscript=request.message,
            userId=request.session_id,
        )

        response = await agent.handle_event(event)

        session.attributes = dict(response.sessionAttributes)
        session_store.save_session(session)
        return response

    except HTTPException as e:
        logger.warning(
            "[AGENT] HTTP %s for session_id=%s intent=%s reason=%r",
            e.status_code,
            request.session_id,
            request.intent_name,
            e.detail,
        )
        raise

    except Exception:
        logger.exception(
            "[AGENT] Unexpected error for session_id=%s intent=%s",
            request.session_id,
            request.intent_name,
        )
        raise


@router.post("/lex", response_model=DialogResponse, response_model_exclude_none=True)
async def handle_lex_event(event: LexEvent) -> DialogResponse:
    """Handle a raw platform event; the platform owns the session."""
    agent = _require_conversation_agent()
    try:
        return await agent.handle_event(event)
    except Exception:
        logger.exception(
            "[AGENT] Unexpected error for user_id=%s intent=%s",
            event.userId,
            event.currentIntent.name,
        )
        raise


@router.post("/end_session/{session_id}")
async def end_session(session_id: str):
    session_store = _require_session_store()
    session = session_store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    session_store.end_session(session)
    return {"session_id": session_id, "status": session.status.value}


# --------------------------------------------------------
# Endpoint: GET /healthz
# --------------------------------------------------------
@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
