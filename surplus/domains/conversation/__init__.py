"""
Conversation Domain

Explicit conversation-flow state machines, session persistence and
per-user rate limiting for the bot layer. Independent of the marketplace
engine.
"""
