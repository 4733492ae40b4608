"""
Storage abstractions for the Oscarbot runtime.

Includes:
- SessionStore: per-conversation attribute storage (in-memory + file-backed)
- LogStore: append-only JSONL event log for debugging / analysis
"""
