"""
Custom exception classes for the APISIX client.

This module defines a hierarchy of custom exceptions that provide structured
error handling for cluster registration and resource operations.
"""

import logging
from typing import Optional, Dict, Any
from enum import Enum


logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for the client."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    TIMEOUT = "TIMEOUT"

    # Cluster registry errors
    DUPLICATED_CLUSTER = "DUPLICATED_CLUSTER"
    CLUSTER_NOT_FOUND = "CLUSTER_NOT_FOUND"
    CLUSTER_CONSTRUCTION_FAILED = "CLUSTER_CONSTRUCTION_FAILED"

    # Resource operation errors
    RESOURCE_OPERATION_FAILED = "RESOURCE_OPERATION_FAILED"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


class APISIXClientError(Exception):
    """Base exception class for all APISIX client errors.

    It carries structured error information including an error code, a
    message, and additional context details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Standardized error code
            details: Additional error context and details
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        logger.debug(f"Exception created: {error_code.value} - {message}", exc_info=cause)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        result = {
            "error": self.error_code.value,
            "message": self.message,
            "details": dict(self.details)
        }

        if self.cause:
            result["details"]["cause"] = str(self.cause)
            result["details"]["cause_type"] = type(self.cause).__name__

        return result


# Cluster Registry Exceptions

class ClusterRegistryError(APISIXClientError):
    """Base exception for cluster registry operations."""
    pass


class DuplicatedClusterError(ClusterRegistryError):
    """Raised when a cluster name is already taken in the registry."""

    def __init__(self, cluster_name: str):
        super().__init__(
            message=f"Duplicated cluster '{cluster_name}'",
            error_code=ErrorCode.DUPLICATED_CLUSTER,
            details={"cluster_name": cluster_name}
        )
        self.cluster_name = cluster_name


class ClusterNotFoundError(ClusterRegistryError):
    """Raised when a resource operation hits a cluster that was never registered."""

    def __init__(self, cluster_name: Optional[str] = None):
        message = "Cluster not found"
        if cluster_name:
            message = f"Cluster '{cluster_name}' not found"
        super().__init__(
            message=message,
            error_code=ErrorCode.CLUSTER_NOT_FOUND,
            details={"cluster_name": cluster_name}
        )
        self.cluster_name = cluster_name


class ClusterConstructionError(ClusterRegistryError):
    """Raised when a cluster cannot be built from its options."""

    def __init__(self, cluster_name: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Failed to construct cluster '{cluster_name}': {reason}",
            error_code=ErrorCode.CLUSTER_CONSTRUCTION_FAILED,
            details={"cluster_name": cluster_name, "reason": reason},
            cause=cause
        )
        self.cluster_name = cluster_name
        self.reason = reason


# Resource Operation Exceptions

class ResourceOperationError(APISIXClientError):
    """Raised when the Admin API rejects or fails a resource operation."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.RESOURCE_OPERATION_FAILED,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message=message, error_code=error_code, details=details, cause=cause)
        self.status_code = status_code


class ResourceNotFoundError(ResourceOperationError):
    """Raised when the target resource does not exist on the cluster."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=details
        )


class ResourceConflictError(ResourceOperationError):
    """Raised when the cluster reports a conflicting resource state."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFLICT,
            status_code=409,
            details=details
        )


class TransportError(ResourceOperationError):
    """Raised when the Admin API could not be reached."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.TRANSPORT_ERROR,
            details=details,
            cause=cause
        )


# Timeout Exceptions

class OperationTimeoutError(APISIXClientError):
    """Raised when a request to the Admin API exceeds the cluster timeout."""

    def __init__(self, operation: str, timeout_seconds: float, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Operation '{operation}' timed out after {timeout_seconds} seconds",
            error_code=ErrorCode.TIMEOUT,
            details={"operation": operation, "timeout_seconds": timeout_seconds},
            cause=cause
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds


# Validation Exceptions

class ValidationError(APISIXClientError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            message=f"Validation failed for field '{field}': {reason}",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"field": field, "value": str(value), "reason": reason},
            cause=cause
        )
