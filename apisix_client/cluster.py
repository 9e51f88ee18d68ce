"""
Cluster abstractions.

A cluster groups one client per resource kind, all bound to the same APISIX
control plane. Two implementations are provided: ``AdminAPICluster`` talks
to a live Admin API, and ``NonExistentCluster`` stands in for names the
registry does not know.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import httpx

from .exceptions import ClusterConstructionError
from .models.cluster import ClusterOptions
from .resources import (
    RouteClient,
    UpstreamClient,
    ServiceClient,
    SSLClient,
    AdminRouteClient,
    AdminUpstreamClient,
    AdminServiceClient,
    AdminSSLClient,
    NonExistentRouteClient,
    NonExistentUpstreamClient,
    NonExistentServiceClient,
    NonExistentSSLClient
)
from .transport import AdminAPIClient
from .utils.logging import get_logger

logger = get_logger(__name__)


class Cluster(ABC):
    """Operations that can be applied to one APISIX cluster."""

    name: Optional[str] = None

    @abstractmethod
    def route(self) -> RouteClient:
        """Client for Route resources."""

    @abstractmethod
    def upstream(self) -> UpstreamClient:
        """Client for Upstream resources."""

    @abstractmethod
    def service(self) -> ServiceClient:
        """Client for Service resources."""

    @abstractmethod
    def ssl(self) -> SSLClient:
        """Client for SSL resources."""

    async def aclose(self) -> None:
        """Release transport resources held by the cluster."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class AdminAPICluster(Cluster):
    """Cluster reached through the APISIX Admin API."""

    def __init__(self, options: ClusterOptions,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the cluster.

        Args:
            options: Validated cluster options
            transport: Optional httpx transport (used for testing)
        """
        self.name = options.name
        self.base_url = options.base_url
        self.admin = AdminAPIClient(
            base_url=options.base_url,
            admin_key=options.admin_key,
            timeout=options.timeout,
            cluster_name=options.name,
            transport=transport
        )
        self._route = AdminRouteClient(self.name, self.admin)
        self._upstream = AdminUpstreamClient(self.name, self.admin)
        self._service = AdminServiceClient(self.name, self.admin)
        self._ssl = AdminSSLClient(self.name, self.admin)

    def route(self) -> RouteClient:
        return self._route

    def upstream(self) -> UpstreamClient:
        return self._upstream

    def service(self) -> ServiceClient:
        return self._service

    def ssl(self) -> SSLClient:
        return self._ssl

    async def aclose(self) -> None:
        await self.admin.aclose()


class NonExistentCluster(Cluster):
    """Cluster whose every resource operation fails with ClusterNotFoundError."""

    def __init__(self):
        self._route = NonExistentRouteClient()
        self._upstream = NonExistentUpstreamClient()
        self._service = NonExistentServiceClient()
        self._ssl = NonExistentSSLClient()

    def route(self) -> RouteClient:
        return self._route

    def upstream(self) -> UpstreamClient:
        return self._upstream

    def service(self) -> ServiceClient:
        return self._service

    def ssl(self) -> SSLClient:
        return self._ssl


ClusterFactory = Callable[[ClusterOptions], Cluster]


def new_cluster(options: ClusterOptions,
                transport: Optional[httpx.AsyncBaseTransport] = None) -> Cluster:
    """Create an Admin API backed cluster from options.

    No network I/O is performed; connection problems surface on the first
    resource operation.

    Raises:
        ClusterConstructionError: If the options cannot describe a cluster
    """
    base_url = (options.base_url or "").strip()
    if not base_url:
        raise ClusterConstructionError(options.name, "empty base url")
    if not base_url.startswith(("http://", "https://")):
        raise ClusterConstructionError(options.name, f"unsupported base url scheme: {base_url}")

    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ClusterConstructionError(options.name, f"invalid base url: {e}", cause=e)
    if not url.host:
        raise ClusterConstructionError(options.name, f"missing host in base url: {base_url}")

    options = options.model_copy(update={"base_url": base_url.rstrip('/')})
    cluster = AdminAPICluster(options, transport=transport)
    logger.info(f"Created cluster '{options.name}' for {cluster.base_url}")
    return cluster
