"""
Structured logging utilities for the APISIX client.

This module provides structured logging with operation timing and contextual
information (cluster, resource kind, operation) for debugging and monitoring.
"""

import json
import logging
import time
from datetime import datetime, timezone
from typing import Optional


_RESERVED_RECORD_KEYS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message', 'asctime'
])


class LogContext:
    """Context manager that logs the outcome and duration of an operation."""

    def __init__(self, operation: str, logger_name: Optional[str] = None,
                 level: int = logging.INFO, **kwargs):
        self.operation = operation
        self.logger_name = logger_name or __name__
        self.level = level
        self.context = kwargs
        self.start_time = None

    def __enter__(self):
        self.start_time = time.monotonic()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (time.monotonic() - self.start_time) * 1000

        if exc_type is None:
            self.log_success(duration_ms)
        else:
            self.log_error(exc_val, duration_ms)
        return False

    def log_success(self, duration_ms: float):
        """Log successful operation completion."""
        logger = get_logger(self.logger_name)
        logger.log(
            self.level,
            f"Operation completed: {self.operation}",
            extra={
                'operation': self.operation,
                'duration_ms': round(duration_ms, 2),
                'status': 'success',
                **self.context
            }
        )

    def log_error(self, error: BaseException, duration_ms: float):
        """Log operation failure.

        Cancellation is not a failure of the operation itself, so it is
        logged at debug level without a traceback.
        """
        logger = get_logger(self.logger_name)
        status = 'cancelled' if not isinstance(error, Exception) else 'error'
        logger.log(
            logging.DEBUG if status == 'cancelled' else logging.WARNING,
            f"Operation {status}: {self.operation} - {error!r}",
            extra={
                'operation': self.operation,
                'duration_ms': round(duration_ms, 2),
                'status': status,
                'error_type': type(error).__name__,
                **self.context
            }
        )


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add extra fields from log record
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_logging(log_level: Optional[str] = None, structured: Optional[bool] = None) -> None:
    """
    Set up logging for applications embedding the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Whether to use structured JSON logging
    """
    from ..config import get_settings

    settings = get_settings()

    if log_level is None:
        log_level = settings.logging.level.value
    if structured is None:
        structured = settings.logging.structured

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper()))

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(settings.logging.format)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    configure_logger_levels()


def configure_logger_levels():
    """Configure specific logger levels to reduce noise."""
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_resource_operation(cluster: str, kind: str, operation: str, **context) -> LogContext:
    """
    Build a LogContext for a single resource operation against a cluster.

    Args:
        cluster: Cluster name
        kind: Resource kind (route, upstream, service, ssl)
        operation: Operation name (list, create, update, delete)
        **context: Additional context
    """
    return LogContext(
        f"{kind}.{operation}",
        logger_name=f"apisix_client.resources.{kind}",
        level=logging.DEBUG,
        cluster=cluster,
        kind=kind,
        **context
    )
