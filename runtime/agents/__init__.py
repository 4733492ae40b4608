"""
Agents used by the Oscarbot runtime.

- SessionValidator: makes sure a turn knows which repository it is about
- ConversationAgent: validates each turn, then hands it to the intent handler
- dialog_actions: builders for the platform's response shapes
- intents: per-intent business handlers (ForkProject, ...)
"""
