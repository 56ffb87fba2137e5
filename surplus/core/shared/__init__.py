"""
Shared utilities used across domains.
"""

from surplus.core.shared.logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    get_logger,
    get_service_logger,
)

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "JSONFormatter",
    "configure_logging",
    "get_logger",
    "get_service_logger",
]
