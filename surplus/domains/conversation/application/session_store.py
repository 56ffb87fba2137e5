"""
Conversation Session Store

Persists conversation sessions on an injected keyed TTL store.
"""

import logging
from typing import Any

from pydantic import ValidationError

from surplus.core.interfaces import IKeyValueStore
from surplus.domains.conversation.domain import ConversationSession, FlowDefinition, FlowEvent

logger = logging.getLogger(__name__)


class ConversationSessionStore:
    """
    Load, advance and save sessions.

    Each save refreshes the TTL, so idle conversations expire on their own.

    Usage:
        sessions = ConversationSessionStore(key_value_store, ttl_seconds=1800)
        session = await sessions.start(user_id, PURCHASE_FLOW)
        await sessions.advance(user_id, FlowEvent.START)
    """

    KEY_PREFIX = "conversation:session"

    def __init__(self, store: IKeyValueStore, ttl_seconds: int = 1800):
        self._store = store
        self.ttl_seconds = ttl_seconds

    def _key(self, user_id: int) -> str:
        return f"{self.KEY_PREFIX}:{user_id}"

    async def get(self, user_id: int) -> ConversationSession | None:
        raw = await self._store.get(self._key(user_id))
        if raw is None:
            return None
        try:
            return ConversationSession.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable session for user {user_id}: {e}")
            await self._store.delete(self._key(user_id))
            return None

    async def save(self, session: ConversationSession) -> None:
        await self._store.set(self._key(session.user_id), session.model_dump_json(), ttl=self.ttl_seconds)

    async def start(self, user_id: int, flow: FlowDefinition) -> ConversationSession:
        """Begin ``flow`` from its initial step, replacing any previous session."""
        session = ConversationSession.start(user_id, flow)
        await self.save(session)
        return session

    async def advance(self, user_id: int, event: FlowEvent, **data: Any) -> ConversationSession | None:
        """
        Apply an event to the user's session.

        Returns:
            The updated session, or None when the user has no active session

        Raises:
            InvalidOperationException: If the event is not allowed in the current step
        """
        session = await self.get(user_id)
        if session is None:
            return None
        session.apply(event, **data)
        await self.save(session)
        return session

    async def clear(self, user_id: int) -> bool:
        return await self._store.delete(self._key(user_id))


__all__ = ["ConversationSessionStore"]
