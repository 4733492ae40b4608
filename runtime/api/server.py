"""
FastAPI application entry point for the Oscarbot runtime.

Responsibilities:
- create the FastAPI app
- construct shared singletons (SessionStore, LogStore, ConversationAgent)
- include session-related routes under /agent

Run locally with e.g.:

    uvicorn runtime.api.server:app --reload
"""

from fastapi import FastAPI

from configs.settings import settings
from runtime.agents.conversation_agent import build_conversation_agent
from runtime.store.log_store import LogStore
from runtime.store.session_store import SessionStore
from . import session_routes


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Session storage: in-memory with file backing under runtime/data.
session_store = SessionStore(data_dir=str(settings.runtime_data_dir))

# JSONL event log under runtime/data/logs.
log_store = LogStore(log_dir=str(settings.runtime_data_dir / "logs"))

# Main conversation agent used by the /agent routes.
conversation_agent = build_conversation_agent(settings, log_store=log_store)

# ---------------------------------------------------------------------------
# FastAPI app + route registration
# ---------------------------------------------------------------------------

app = FastAPI(title="Oscarbot Runtime")

# Initialize the router module with our shared objects, then include it.
session_routes.init_routes(
    session_store=session_store,
    conversation_agent=conversation_agent,
)
app.include_router(session_routes.router, prefix="/agent")
