"""
Runtime package for the Oscarbot dialog server.

This package contains:
- API layer (FastAPI server + routes)
- Agents (session validation, conversation / intent logic)
- Stores (sessions, event logs)
- Models (Pydantic models for platform events, dialog actions and sessions)
"""
