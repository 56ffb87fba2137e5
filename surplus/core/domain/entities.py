"""
Identity-bearing domain objects.

Stores, products and orders are compared by their catalog id, not by the
values they currently hold. Objects created in memory have no id until the
catalog assigns one.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

TId = TypeVar("TId")


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class Entity(ABC, Generic[TId]):
    """
    Catalog object with a stable identity.

    Two unsaved objects (``id is None``) are never equal, even when all
    of their fields match.
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return False
        assert isinstance(other, Entity)
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return id(self) if self.id is None else hash((type(self).__name__, self.id))

    def is_new(self) -> bool:
        """True until the catalog has assigned an id."""
        return self.id is None

    def touch(self) -> None:
        self.updated_at = _utcnow()


@dataclass
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Entity that owns a consistency boundary.

    ``version`` counts committed state changes; order transitions bump it
    so readers can tell two snapshots of the same order apart.
    """

    version: int = field(default=0)

    def increment_version(self) -> None:
        self.version += 1
