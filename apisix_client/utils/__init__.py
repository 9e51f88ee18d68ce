"""
Utility helpers for the APISIX client.
"""

from .logging import (
    LogContext,
    StructuredFormatter,
    setup_logging,
    get_logger,
    log_resource_operation
)

__all__ = [
    "LogContext",
    "StructuredFormatter",
    "setup_logging",
    "get_logger",
    "log_resource_operation"
]
