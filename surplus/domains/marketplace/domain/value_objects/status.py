"""
Status Value Objects for the Marketplace Domain

Store approval states and the order lifecycle with its transition rules.
"""

from surplus.core.domain import StatusEnum


class StoreStatus(StatusEnum):
    """Store approval states. Only APPROVED stores take part in discovery."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    BLOCKED = "blocked"

    def is_discoverable(self) -> bool:
        return self is StoreStatus.APPROVED


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING -> CONFIRMED, CANCELLED
    - CONFIRMED, CANCELLED -> (terminal states)
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status in ORDER_TRANSITIONS[self]

    def get_valid_transitions(self) -> list["OrderStatus"]:
        """Get list of valid next statuses."""
        return sorted(ORDER_TRANSITIONS[self], key=lambda status: status.value)

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return not ORDER_TRANSITIONS[self]


# Transition rules: status -> valid next statuses
ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}
