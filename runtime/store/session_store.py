"""Minimal session storage for Oscarbot.

This is primarily an in-memory dict of session_id -> ConversationSession,
with optional JSON persistence under a data directory.

The design is intentionally simple:
- In-memory access is the primary source of truth during a run.
- If a data_dir is configured, sessions are also written to
  `data_dir/sessions/<session_id>.json` so that they survive a restart.
- Session attributes are a flat str -> str mapping, exactly what the
  conversational platform would carry between turns.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional
from uuid import uuid4

from ..models.session_models import ConversationSession, SessionStatus


logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory + optional file-backed session store.

    Parameters
    ----------
    data_dir:
        Base directory for storing session JSON files. If provided,
        sessions will be written to and read from
        `data_dir/sessions/<session_id>.json`. If not provided, sessions
        live in memory only.
    """

    def __init__(self, data_dir: Optional[str] = None) -> None:
        self._sessions: Dict[str, ConversationSession] = {}
        self._data_dir: Optional[Path] = Path(data_dir) if data_dir else None

        if self._data_dir is not None:
            self._sessions_dir.mkdir(parents=True, exist_ok=True)

    @property
    def _sessions_dir(self) -> Path:
        return self._data_dir / "sessions"

    def create_session(self) -> ConversationSession:
        """Create a new session with empty attributes and return it."""
        session = ConversationSession(session_id=str(uuid4()))
        self._sessions[session.session_id] = session
        self._persist_session(session)
        return session

    def get_session(self, session_id: str) -> Optional[ConversationSession]:
        """Retrieve an existing session by ID.

        Lookup order:
        1. Check the in-memory cache.
        2. If not found and a data_dir is configured, attempt to
           load the session from disk.
        3. If still not found, return None.
        """
        if session_id in self._sessions:
            return self._sessions[session_id]

        if self._data_dir is not None:
            path = self._sessions_dir / f"{session_id}.json"
            if path.is_file():
                try:
                    with path.open("r", encoding="utf-8") as f:
                        data = json.load(f)
                    session = ConversationSession(**data)
                except (OSError, ValueError):
                    logger.warning("[SESSION] Could not load %s, treating as missing", path)
                    return None

                self._sessions[session_id] = session
                return session

        return None

    def save_session(self, session: ConversationSession) -> None:
        """Persist the given session in memory and to disk (if enabled)."""
        self._sessions[session.session_id] = session
        self._persist_session(session)

    def end_session(self, session: ConversationSession) -> None:
        """Mark the conversation as over; its attributes are dropped."""
        session.status = SessionStatus.CLOSED
        session.attributes = {}
        self.save_session(session)

    def _persist_session(self, session: ConversationSession) -> None:
        if self._data_dir is None:
            return

        sessions_dir = self._sessions_dir
        sessions_dir.mkdir(parents=True, exist_ok=True)
        path = sessions_dir / f"{session.session_id}.json"

        with path.open("w", encoding="utf-8") as f:
            json.dump(session.model_dump(mode="json"), f, ensure_ascii=False, indent=2)
