"""APISIX resource data models."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceKind(str, Enum):
    """Resource kinds managed through the Admin API."""
    ROUTE = "route"
    UPSTREAM = "upstream"
    SERVICE = "service"
    SSL = "ssl"

    @property
    def collection(self) -> str:
        """Admin API collection path for this kind."""
        return _COLLECTIONS[self]


_COLLECTIONS = {
    ResourceKind.ROUTE: "routes",
    ResourceKind.UPSTREAM: "upstreams",
    ResourceKind.SERVICE: "services",
    ResourceKind.SSL: "ssl",
}


def _id_to_str(v):
    # APISIX accepts integer IDs as well as strings
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


class Resource(BaseModel):
    """Common base for Admin API objects.

    Unknown fields are kept so that objects returned by the server round-trip
    without loss.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(None, description="Resource ID, required for update and delete")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return _id_to_str(v)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the Admin API, omitting unset values."""
        return self.model_dump(exclude_none=True)


class Route(Resource):
    """APISIX route."""
    name: Optional[str] = None
    uri: Optional[str] = None
    uris: Optional[List[str]] = None
    host: Optional[str] = None
    hosts: Optional[List[str]] = None
    methods: Optional[List[str]] = None
    priority: Optional[int] = None
    service_id: Optional[str] = None
    upstream_id: Optional[str] = None
    plugins: Optional[Dict[str, Any]] = None

    @field_validator("service_id", "upstream_id", mode="before")
    @classmethod
    def coerce_refs(cls, v):
        return _id_to_str(v)


class UpstreamNode(BaseModel):
    """Single backend node of an upstream."""
    model_config = ConfigDict(extra="allow")

    host: str
    port: int = Field(..., ge=1, le=65535)
    weight: int = Field(default=100, ge=0)


class Upstream(Resource):
    """APISIX upstream."""
    name: Optional[str] = None
    type: Optional[str] = None
    hash_on: Optional[str] = None
    key: Optional[str] = None
    # List form or the {"host:port": weight} mapping form
    nodes: Optional[Union[List[UpstreamNode], Dict[str, int]]] = None


class Service(Resource):
    """APISIX service."""
    name: Optional[str] = None
    upstream_id: Optional[str] = None
    plugins: Optional[Dict[str, Any]] = None

    @field_validator("upstream_id", mode="before")
    @classmethod
    def coerce_upstream_id(cls, v):
        return _id_to_str(v)


class SSL(Resource):
    """APISIX SSL certificate binding."""
    snis: Optional[List[str]] = None
    cert: Optional[str] = None
    key: Optional[str] = None
    status: Optional[int] = None
