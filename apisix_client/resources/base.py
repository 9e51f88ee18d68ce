"""
Resource client contracts.

Each resource kind (route, upstream, service, ssl) is operated through a
client exposing the same four coroutines. A client is always bound to one
cluster and holds no state between calls, so it is safe to share between
concurrent tasks.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from ..models.resources import Resource, ResourceKind, Route, Upstream, Service, SSL


T = TypeVar("T", bound=Resource)


class ResourceClient(ABC, Generic[T]):
    """List/create/update/delete operations for one resource kind."""

    kind: ResourceKind

    @abstractmethod
    async def list(self) -> List[T]:
        """Return every object of this kind known to the cluster.

        Ordering is whatever the cluster returns.
        """

    @abstractmethod
    async def create(self, obj: T) -> T:
        """Create an object and return the stored representation."""

    @abstractmethod
    async def update(self, obj: T) -> T:
        """Replace the object identified by ``obj.id`` and return the result."""

    @abstractmethod
    async def delete(self, obj: T) -> None:
        """Delete the object identified by ``obj.id``."""


class RouteClient(ResourceClient[Route]):
    """Client for Route resources."""
    kind = ResourceKind.ROUTE


class UpstreamClient(ResourceClient[Upstream]):
    """Client for Upstream resources."""
    kind = ResourceKind.UPSTREAM


class ServiceClient(ResourceClient[Service]):
    """Client for Service resources."""
    kind = ResourceKind.SERVICE


class SSLClient(ResourceClient[SSL]):
    """Client for SSL resources."""
    kind = ResourceKind.SSL
