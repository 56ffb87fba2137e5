"""
Conversation Domain Layer
"""

from surplus.domains.conversation.domain.flow import (
    FLOWS,
    PURCHASE_FLOW,
    SELLER_REGISTRATION_FLOW,
    FlowDefinition,
    FlowEvent,
    FlowStep,
    linear_flow,
)
from surplus.domains.conversation.domain.session import ConversationSession

__all__ = [
    "FLOWS",
    "PURCHASE_FLOW",
    "SELLER_REGISTRATION_FLOW",
    "FlowDefinition",
    "FlowEvent",
    "FlowStep",
    "linear_flow",
    "ConversationSession",
]
