"""
APISIX client: a multi-cluster registry and resource clients for the
APISIX Admin API.
"""

from .cluster import Cluster, AdminAPICluster, NonExistentCluster, ClusterFactory, new_cluster
from .registry import ClusterRegistry
from .models import ClusterOptions, ResourceKind, Route, Upstream, UpstreamNode, Service, SSL
from .resources import ResourceClient, RouteClient, UpstreamClient, ServiceClient, SSLClient
from .exceptions import (
    APISIXClientError,
    ErrorCode,
    ClusterRegistryError,
    DuplicatedClusterError,
    ClusterNotFoundError,
    ClusterConstructionError,
    ResourceOperationError,
    ResourceNotFoundError,
    ResourceConflictError,
    TransportError,
    OperationTimeoutError,
    ValidationError
)

__version__ = "1.0.0"

__all__ = [
    # Registry and clusters
    "ClusterRegistry",
    "Cluster",
    "AdminAPICluster",
    "NonExistentCluster",
    "ClusterFactory",
    "new_cluster",

    # Models
    "ClusterOptions",
    "ResourceKind",
    "Route",
    "Upstream",
    "UpstreamNode",
    "Service",
    "SSL",

    # Resource contracts
    "ResourceClient",
    "RouteClient",
    "UpstreamClient",
    "ServiceClient",
    "SSLClient",

    # Exceptions
    "APISIXClientError",
    "ErrorCode",
    "ClusterRegistryError",
    "DuplicatedClusterError",
    "ClusterNotFoundError",
    "ClusterConstructionError",
    "ResourceOperationError",
    "ResourceNotFoundError",
    "ResourceConflictError",
    "TransportError",
    "OperationTimeoutError",
    "ValidationError"
]
