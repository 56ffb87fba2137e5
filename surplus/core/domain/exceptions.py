"""
Domain Exceptions

Every failure the engine reports to its callers is a ``DomainException``
carrying a stable machine-readable ``code``. The bot and HTTP layers map
codes to user-facing text; the engine never formats UI copy.
"""

from typing import Any


class DomainException(Exception):
    """
    Base class of the engine's error taxonomy.

    Subclasses set ``default_code``; the base falls back to the upper-cased
    class name so ad-hoc subclasses still get a usable code.
    """

    default_code: str | None = None

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INSUFFICIENT_STOCK")
            details: Extra context, safe to serialize
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code or type(self).__name__.upper()
        self.details = details if details is not None else {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationException(DomainException):
    """Bad input: quantity, coordinates, limits, prices or hours."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        self.field = field
        payload = dict(details or {})
        if field:
            payload["field"] = field
        super().__init__(message, details=payload)


class InvalidCoordinateException(ValidationException):
    """Latitude or longitude is NaN or out of range."""

    def __init__(self, field: str, value: Any):
        self.value = value
        super().__init__(f"Invalid {field}: {value}", field=field, details={"value": str(value)})


class EntityNotFoundException(DomainException):
    default_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} with ID {entity_id} not found",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class AuthorizationException(DomainException):
    """The acting user does not own the store (or order) being acted on."""

    default_code = "AUTHORIZATION_ERROR"

    def __init__(self, operation: str, resource: str | None = None, user_id: Any = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        target = f" on '{resource}'" if resource else ""
        super().__init__(
            f"Not authorized to perform '{operation}'{target}",
            details={"operation": operation, "resource": resource},
        )


class ConflictException(DomainException):
    """Shared state changed underneath the caller."""

    default_code = "CONFLICT"


class InsufficientStockException(ConflictException):
    """Fewer units remain than the order asks for."""

    default_code = "INSUFFICIENT_STOCK"

    def __init__(self, product_id: Any, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product {product_id}: requested {requested}, available {available}",
            details={"product_id": str(product_id), "requested": requested, "available": available},
        )


class InvalidOperationException(DomainException):
    """Operation not allowed from the current state (order status or flow step)."""

    default_code = "INVALID_OPERATION"

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message or f"Cannot perform '{operation}' in state '{current_state}'",
            details={"operation": operation, "current_state": current_state},
        )


class OrderCodeGenerationException(DomainException):
    """Every generated code collided with an existing one."""

    default_code = "ORDER_CODE_GENERATION_FAILED"

    def __init__(self, attempts: int, kind: str = "order"):
        self.attempts = attempts
        self.kind = kind
        super().__init__(
            f"Could not generate a unique {kind} code after {attempts} attempts",
            details={"attempts": attempts, "kind": kind},
        )
