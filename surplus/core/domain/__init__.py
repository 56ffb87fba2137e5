"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from surplus.core.domain.entities import AggregateRoot, Entity
from surplus.core.domain.exceptions import (
    AuthorizationException,
    ConflictException,
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidCoordinateException,
    InvalidOperationException,
    OrderCodeGenerationException,
    ValidationException,
)
from surplus.core.domain.value_objects import Money, StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "Money",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "InvalidCoordinateException",
    "EntityNotFoundException",
    "AuthorizationException",
    "ConflictException",
    "InsufficientStockException",
    "InvalidOperationException",
    "OrderCodeGenerationException",
]
