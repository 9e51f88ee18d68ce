"""
Resource clients: the per-cluster handlers for routes, upstreams, services
and SSL bindings.
"""

from .base import ResourceClient, RouteClient, UpstreamClient, ServiceClient, SSLClient
from .admin import (
    AdminResourceClient,
    AdminRouteClient,
    AdminUpstreamClient,
    AdminServiceClient,
    AdminSSLClient
)
from .nonexistent import (
    NonExistentResourceClient,
    NonExistentRouteClient,
    NonExistentUpstreamClient,
    NonExistentServiceClient,
    NonExistentSSLClient
)

__all__ = [
    "ResourceClient",
    "RouteClient",
    "UpstreamClient",
    "ServiceClient",
    "SSLClient",
    "AdminResourceClient",
    "AdminRouteClient",
    "AdminUpstreamClient",
    "AdminServiceClient",
    "AdminSSLClient",
    "NonExistentResourceClient",
    "NonExistentRouteClient",
    "NonExistentUpstreamClient",
    "NonExistentServiceClient",
    "NonExistentSSLClient"
]
