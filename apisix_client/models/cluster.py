"""Cluster connection options."""

from pydantic import BaseModel, Field, field_validator


class ClusterOptions(BaseModel):
    """Options used to construct a cluster.

    Only ``name`` is retained by the registry; the rest is consumed by the
    cluster factory.
    """

    name: str = Field(..., description="Unique cluster name")
    base_url: str = Field(default="", description="APISIX Admin API prefix, e.g. http://127.0.0.1:9180/apisix/admin")
    admin_key: str = Field(default="", description="Admin API key sent as X-API-KEY")
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Cluster names must be non-empty."""
        v = v.strip()
        if not v:
            raise ValueError("Cluster name cannot be empty")
        return v
