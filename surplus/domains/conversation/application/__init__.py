"""
Conversation Application Layer
"""

from surplus.domains.conversation.application.rate_limiter import RateLimiter, RateLimitResult
from surplus.domains.conversation.application.session_store import ConversationSessionStore

__all__ = [
    "ConversationSessionStore",
    "RateLimiter",
    "RateLimitResult",
]
