"""
Conversation Session Model

Per-user position in a conversation flow plus the answers collected so far.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from .flow import FLOWS, FlowDefinition, FlowEvent, FlowStep


class ConversationSession(BaseModel):
    """
    Serializable conversation state.

    Example:
        ```python
        session = ConversationSession.start(user_id=42, flow=PURCHASE_FLOW)
        session.apply(FlowEvent.START)
        session.apply(FlowEvent.LOCATION_SHARED, latitude=41.31, longitude=69.28)
        ```
    """

    user_id: int
    flow: str
    step: FlowStep = FlowStep.IDLE
    data: dict[str, Any] = Field(default_factory=dict)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def start(cls, user_id: int, flow: FlowDefinition) -> "ConversationSession":
        return cls(user_id=user_id, flow=flow.name, step=flow.initial)

    @property
    def definition(self) -> FlowDefinition:
        try:
            return FLOWS[self.flow]
        except KeyError as e:
            raise ValueError(f"Unknown conversation flow: {self.flow}") from e

    @property
    def is_finished(self) -> bool:
        return self.definition.is_terminal(self.step)

    def apply(self, event: FlowEvent, **data: Any) -> FlowStep:
        """
        Advance the flow and merge collected answers.

        Raises:
            InvalidOperationException: If the event is not allowed in the current step
        """
        self.step = self.definition.next_step(self.step, event)
        self.data.update(data)
        self.updated_at = datetime.now(UTC)
        return self.step


__all__ = ["ConversationSession"]
