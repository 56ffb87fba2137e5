"""
Marketplace Application DTOs
"""

from surplus.domains.marketplace.application.dto.catalog_results import (
    InsufficientStock,
    StatusChanged,
    StatusChangeResult,
    StatusConflict,
    StockDecremented,
    StockDecrementResult,
    StoreListing,
)
from surplus.domains.marketplace.application.dto.discovery import NearbyStore, NearbyStoresResult
from surplus.domains.marketplace.application.dto.notifications import (
    Notification,
    NotificationAction,
    NotificationKind,
)

__all__ = [
    "InsufficientStock",
    "StatusChanged",
    "StatusChangeResult",
    "StatusConflict",
    "StockDecremented",
    "StockDecrementResult",
    "StoreListing",
    "NearbyStore",
    "NearbyStoresResult",
    "Notification",
    "NotificationAction",
    "NotificationKind",
]
