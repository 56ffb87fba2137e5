"""
Marketplace Infrastructure Services
"""

from surplus.domains.marketplace.infrastructure.services.logging_notifier import LoggingNotifier, LoggingRatings

__all__ = ["LoggingNotifier", "LoggingRatings"]
