"""
LogStore: append-only logging for Oscarbot runtime events.

Writes JSON lines to:

    <log_dir>/events_YYYY-MM-DD.jsonl

ConsoleLogStore prints the same events and is handy during local
development.
"""

import json
from datetime import datetime, timezone
from pathlib import Path


class LogStore:
    """Date-based JSONL event log."""

    def __init__(self, log_dir: str = "runtime/data/logs"):
        self.log_dir = Path(log_dir)

    def log_event(self, event_type: str, payload: dict) -> None:
        now = datetime.now(timezone.utc)
        record = {
            "timestamp": now.isoformat(),
            "event_type": event_type,
            "payload": payload,
        }
        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.log_dir / f"events_{now:%Y-%m-%d}.jsonl"
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")


class ConsoleLogStore:
    """Very small log sink that just prints events."""

    def log_event(self, event_type: str, payload: dict) -> None:
        print(f"[LOG] {event_type}: {payload}")
