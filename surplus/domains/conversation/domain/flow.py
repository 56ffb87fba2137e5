"""
Conversation Flow State Machine

Enumerated steps and events with a typed transition table, replacing
free-text "current step" fields in bot sessions.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from surplus.core.domain import InvalidOperationException, StatusEnum


class FlowStep(StatusEnum):
    """Every step any conversation flow can be in."""

    IDLE = "idle"

    # Buyer purchase
    AWAITING_LOCATION = "awaiting_location"
    CHOOSING_STORE = "choosing_store"
    CHOOSING_PRODUCT = "choosing_product"
    CHOOSING_QUANTITY = "choosing_quantity"
    AWAITING_CONFIRMATION = "awaiting_confirmation"

    # Seller registration
    AWAITING_BUSINESS_NAME = "awaiting_business_name"
    AWAITING_PHONE = "awaiting_phone"
    AWAITING_HOURS = "awaiting_hours"

    # Terminal
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class FlowEvent(StatusEnum):
    """User inputs that move a flow forward."""

    START = "start"
    LOCATION_SHARED = "location_shared"
    STORE_SELECTED = "store_selected"
    PRODUCT_SELECTED = "product_selected"
    QUANTITY_ENTERED = "quantity_entered"
    ORDER_CONFIRMED = "order_confirmed"
    BUSINESS_NAME_ENTERED = "business_name_entered"
    PHONE_SHARED = "phone_shared"
    HOURS_ENTERED = "hours_entered"
    BACK = "back"
    CANCEL = "cancel"


Transitions = Mapping[tuple[FlowStep, FlowEvent], FlowStep]


@dataclass(frozen=True)
class FlowDefinition:
    """
    A named conversation flow.

    Example:
        ```python
        step = PURCHASE_FLOW.next_step(FlowStep.IDLE, FlowEvent.START)
        # FlowStep.AWAITING_LOCATION
        ```
    """

    name: str
    initial: FlowStep
    transitions: Transitions
    terminal: frozenset[FlowStep] = field(default_factory=lambda: frozenset({FlowStep.COMPLETED, FlowStep.CANCELLED}))

    def next_step(self, step: FlowStep, event: FlowEvent) -> FlowStep:
        """
        Resolve a transition.

        Raises:
            InvalidOperationException: If ``event`` is not accepted in ``step``
        """
        target = self.transitions.get((step, event))
        if target is None:
            raise InvalidOperationException(
                operation=event.value,
                current_state=step.value,
                message=f"Event '{event.value}' is not allowed in step '{step.value}' of flow '{self.name}'",
            )
        return target

    def allowed_events(self, step: FlowStep) -> list[FlowEvent]:
        return [event for (source, event) in self.transitions if source == step]

    def is_terminal(self, step: FlowStep) -> bool:
        return step in self.terminal

    @property
    def steps(self) -> frozenset[FlowStep]:
        sources = {source for source, _ in self.transitions}
        return frozenset(sources | set(self.transitions.values()))


def linear_flow(
    name: str,
    path: Iterable[tuple[FlowStep, FlowEvent, FlowStep]],
    initial: FlowStep = FlowStep.IDLE,
) -> FlowDefinition:
    """
    Build a flow from forward edges.

    Adds CANCEL from every non-terminal step and BACK from every step that
    was reached from a step other than the initial one.
    """
    forward = list(path)
    transitions: dict[tuple[FlowStep, FlowEvent], FlowStep] = {}
    terminal = frozenset({FlowStep.COMPLETED, FlowStep.CANCELLED})

    for source, event, target in forward:
        transitions[(source, event)] = target
        if source != initial and target not in terminal:
            transitions[(target, FlowEvent.BACK)] = source

    for step in {source for source, _, _ in forward}:
        transitions[(step, FlowEvent.CANCEL)] = FlowStep.CANCELLED

    return FlowDefinition(name=name, initial=initial, transitions=transitions, terminal=terminal)


PURCHASE_FLOW = linear_flow(
    "purchase",
    [
        (FlowStep.IDLE, FlowEvent.START, FlowStep.AWAITING_LOCATION),
        (FlowStep.AWAITING_LOCATION, FlowEvent.LOCATION_SHARED, FlowStep.CHOOSING_STORE),
        (FlowStep.CHOOSING_STORE, FlowEvent.STORE_SELECTED, FlowStep.CHOOSING_PRODUCT),
        (FlowStep.CHOOSING_PRODUCT, FlowEvent.PRODUCT_SELECTED, FlowStep.CHOOSING_QUANTITY),
        (FlowStep.CHOOSING_QUANTITY, FlowEvent.QUANTITY_ENTERED, FlowStep.AWAITING_CONFIRMATION),
        (FlowStep.AWAITING_CONFIRMATION, FlowEvent.ORDER_CONFIRMED, FlowStep.COMPLETED),
    ],
)

SELLER_REGISTRATION_FLOW = linear_flow(
    "seller_registration",
    [
        (FlowStep.IDLE, FlowEvent.START, FlowStep.AWAITING_BUSINESS_NAME),
        (FlowStep.AWAITING_BUSINESS_NAME, FlowEvent.BUSINESS_NAME_ENTERED, FlowStep.AWAITING_PHONE),
        (FlowStep.AWAITING_PHONE, FlowEvent.PHONE_SHARED, FlowStep.AWAITING_LOCATION),
        (FlowStep.AWAITING_LOCATION, FlowEvent.LOCATION_SHARED, FlowStep.AWAITING_HOURS),
        (FlowStep.AWAITING_HOURS, FlowEvent.HOURS_ENTERED, FlowStep.COMPLETED),
    ],
)

FLOWS: dict[str, FlowDefinition] = {
    PURCHASE_FLOW.name: PURCHASE_FLOW,
    SELLER_REGISTRATION_FLOW.name: SELLER_REGISTRATION_FLOW,
}


__all__ = [
    "FlowStep",
    "FlowEvent",
    "FlowDefinition",
    "linear_flow",
    "PURCHASE_FLOW",
    "SELLER_REGISTRATION_FLOW",
    "FLOWS",
]
