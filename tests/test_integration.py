"""
Integration tests: registry, clusters and resource clients over a mocked Admin API.
"""

import json
from functools import partial

import httpx
import pytest

from apisix_client import (
    ClusterNotFoundError,
    ClusterOptions,
    ClusterRegistry,
    DuplicatedClusterError,
    Route,
    new_cluster
)


class MultiClusterAdminAPI:
    """Serves a separate route table per cluster host."""

    def __init__(self):
        self.routes = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        table = self.routes.setdefault(request.url.host, {})
        parts = request.url.path.rstrip('/').split('/')
        if request.method == "GET":
            return httpx.Response(200, json={
                "total": len(table),
                "list": [{"key": f"/apisix/routes/{k}", "value": v} for k, v in table.items()]
            })
        route_id = parts[-1]
        if request.method == "PUT":
            table[route_id] = json.loads(request.content)
            return httpx.Response(200, json={"key": f"/apisix/routes/{route_id}", "value": table[route_id]})
        if request.method == "DELETE":
            if route_id not in table:
                return httpx.Response(404, json={"message": "Key not found"})
            del table[route_id]
            return httpx.Response(200, json={"deleted": "1"})
        return httpx.Response(405)


@pytest.mark.integration
class TestMultiClusterFlow:
    """Test dispatching resource operations to the right cluster."""

    @pytest.mark.asyncio
    async def test_operations_are_routed_per_cluster(self):
        """Test each cluster only sees its own resources."""
        api = MultiClusterAdminAPI()
        factory = partial(new_cluster, transport=httpx.MockTransport(api))

        registry = ClusterRegistry(
            ClusterOptions(name="default", base_url="http://default-gw:9180/apisix/admin"),
            cluster_factory=factory
        )
        registry.add_cluster(ClusterOptions(name="prod", base_url="http://prod-gw:9180/apisix/admin"))

        with pytest.raises(DuplicatedClusterError):
            registry.add_cluster(ClusterOptions(name="prod", base_url="http://other-gw:9180/apisix/admin"))

        await registry.cluster("default").route().create(Route(id="1", uri="/default"))
        await registry.cluster("prod").route().create(Route(id="1", uri="/prod"))
        await registry.cluster("prod").route().create(Route(id="2", uri="/prod2"))

        default_routes = await registry.cluster("default").route().list()
        prod_routes = await registry.cluster("prod").route().list()

        assert [r.uri for r in default_routes] == ["/default"]
        assert sorted(r.uri for r in prod_routes) == ["/prod", "/prod2"]
        assert [c.name for c in registry.list_clusters()] == ["default", "prod"]

        await registry.cluster("prod").route().delete(Route(id="2"))
        assert len(await registry.cluster("prod").route().list()) == 1

        with pytest.raises(ClusterNotFoundError):
            await registry.cluster("staging").route().list()

        await registry.aclose()
