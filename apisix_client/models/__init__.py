"""Data models for the APISIX client."""

from .cluster import ClusterOptions
from .resources import (
    ResourceKind,
    Resource,
    Route,
    Upstream,
    UpstreamNode,
    Service,
    SSL
)

__all__ = [
    "ClusterOptions",
    "ResourceKind",
    "Resource",
    "Route",
    "Upstream",
    "UpstreamNode",
    "Service",
    "SSL"
]
