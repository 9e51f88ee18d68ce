"""Resource clients backed by the APISIX Admin API."""

from typing import Any, List, Type

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ResourceOperationError, ValidationError
from ..models.resources import Resource, Route, Upstream, Service, SSL
from ..transport import AdminAPIClient
from ..utils.logging import log_resource_operation
from .base import ResourceClient, RouteClient, UpstreamClient, ServiceClient, SSLClient, T


class AdminResourceClient(ResourceClient[T]):
    """Translates resource operations into Admin API requests.

    Errors raised by the transport are propagated unchanged.
    """

    model: Type[Resource]

    def __init__(self, cluster_name: str, admin: AdminAPIClient):
        self.cluster_name = cluster_name
        self.admin = admin

    @property
    def collection(self) -> str:
        return self.kind.collection

    async def list(self) -> List[T]:
        with log_resource_operation(self.cluster_name, self.kind.value, "list"):
            items = await self.admin.list(self.collection)
            return [self._decode(item) for item in items]

    async def create(self, obj: T) -> T:
        with log_resource_operation(self.cluster_name, self.kind.value, "create", resource_id=obj.id):
            stored = await self.admin.create(self.collection, obj.to_payload())
            return self._decode(stored or obj.to_payload())

    async def update(self, obj: T) -> T:
        obj_id = self._require_id(obj)
        with log_resource_operation(self.cluster_name, self.kind.value, "update", resource_id=obj_id):
            stored = await self.admin.update(self.collection, obj_id, obj.to_payload())
            return self._decode(stored or obj.to_payload())

    async def delete(self, obj: T) -> None:
        obj_id = self._require_id(obj)
        with log_resource_operation(self.cluster_name, self.kind.value, "delete", resource_id=obj_id):
            await self.admin.delete(self.collection, obj_id)

    def _decode(self, item: Any) -> T:
        try:
            return self.model.model_validate(item)
        except PydanticValidationError as e:
            raise ResourceOperationError(
                f"Cannot decode {self.kind.value} returned by cluster {self.cluster_name}: {e.error_count()} errors",
                details={"cluster_name": self.cluster_name, "kind": self.kind.value},
                cause=e
            )

    def _require_id(self, obj: T) -> str:
        if not obj.id:
            raise ValidationError("id", obj.id, f"{self.kind.value} id is required")
        return obj.id


class AdminRouteClient(AdminResourceClient[Route], RouteClient):
    model = Route


class AdminUpstreamClient(AdminResourceClient[Upstream], UpstreamClient):
    model = Upstream


class AdminServiceClient(AdminResourceClient[Service], ServiceClient):
    model = Service


class AdminSSLClient(AdminResourceClient[SSL], SSLClient):
    model = SSL
