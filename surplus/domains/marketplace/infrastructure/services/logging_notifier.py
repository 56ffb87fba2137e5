"""
Logging Notifier and Ratings

Collaborator adapters that write order events to the log instead of a
messaging transport. Used for local runs and as the container default.
"""

import logging

from surplus.domains.marketplace.application.dto import Notification

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """``INotifier`` that logs every message."""

    async def notify_buyer(self, buyer_id: int, message: Notification) -> None:
        logger.info(f"[buyer {buyer_id}] {message.kind.value}: order {message.order_code} ({message.to_dict()})")

    async def notify_seller(self, store_id: int, message: Notification) -> None:
        logger.info(f"[store {store_id}] {message.kind.value}: order {message.order_code} ({message.to_dict()})")


class LoggingRatings:
    """``IRatings`` that logs rating requests."""

    async def request_post_purchase_rating(self, buyer_id: int, product_id: int) -> None:
        logger.info(f"Rating requested from buyer {buyer_id} for product {product_id}")


__all__ = ["LoggingNotifier", "LoggingRatings"]
