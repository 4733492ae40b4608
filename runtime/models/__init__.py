"""
Pydantic / datamodels used by the Oscarbot runtime.

Split into:
- session_models: ConversationSession + SessionStatus + ValidatedRepositories
- api_models: platform event, dialog actions and HTTP request/response schemas
"""
