"""
Session-related models for Oscarbot runtime.

These describe:
- a ConversationSession record (flat string attributes, as the platform keeps them)
- SessionStatus enum (OPEN, CLOSED)
- ValidatedRepositories, the per-session set of repositories known to exist
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field


REPOSITORY_ATTRIBUTE = "Repository"
VALIDATED_REPOSITORIES_ATTRIBUTE = "validatedRepositories"


class SessionStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class ConversationSession(BaseModel):
    session_id: str
    attributes: Dict[str, str] = Field(default_factory=dict)
    status: SessionStatus = SessionStatus.OPEN
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class ValidatedRepositories:
    """Ordered, de-duplicated set of repository names.

    On the wire (session attributes) the set is a comma-joined string with
    no escaping, so names containing commas are not supported.
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self._names: List[str] = []
        for name in names or ():
            self.add(name)

    @classmethod
    def from_attribute(cls, raw: Optional[str]) -> "ValidatedRepositories":
        if not raw:
            return cls()
        return cls(part for part in raw.split(",") if part)

    @classmethod
    def from_session(cls, attributes: Dict[str, str]) -> "ValidatedRepositories":
        return cls.from_attribute(attributes.get(VALIDATED_REPOSITORIES_ATTRIBUTE))

    def add(self, name: str) -> None:
        if name not in self._names:
            self._names.append(name)

    def to_attribute(self) -> str:
        return ",".join(self._names)

    def store(self, attributes: Dict[str, str]) -> None:
        attributes[VALIDATED_REPOSITORIES_ATTRIBUTE] = self.to_attribute()

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ValidatedRepositories({self._names!r})"
