"""Resource clients for clusters that are not registered."""

from typing import List, Optional

from ..exceptions import ClusterNotFoundError
from ..utils.logging import get_logger
from .base import ResourceClient, RouteClient, UpstreamClient, ServiceClient, SSLClient, T


logger = get_logger(__name__)


class NonExistentResourceClient(ResourceClient[T]):
    """Fails every operation with ClusterNotFoundError without any I/O."""

    def __init__(self, cluster_name: Optional[str] = None):
        self.cluster_name = cluster_name

    def _fail(self, operation: str) -> ClusterNotFoundError:
        logger.debug(f"Rejected {self.kind.value}.{operation}: cluster {self.cluster_name!r} not found")
        return ClusterNotFoundError(self.cluster_name)

    async def list(self) -> List[T]:
        raise self._fail("list")

    async def create(self, obj: T) -> T:
        raise self._fail("create")

    async def update(self, obj: T) -> T:
        raise self._fail("update")

    async def delete(self, obj: T) -> None:
        raise self._fail("delete")


class NonExistentRouteClient(NonExistentResourceClient, RouteClient):
    pass


class NonExistentUpstreamClient(NonExistentResourceClient, UpstreamClient):
    pass


class NonExistentServiceClient(NonExistentResourceClient, ServiceClient):
    pass


class NonExistentSSLClient(NonExistentResourceClient, SSLClient):
    pass
