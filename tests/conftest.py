"""
Pytest configuration and shared fixtures
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio
from unittest.mock import Mock, AsyncMock

from apisix_client.cluster import Cluster, AdminAPICluster
from apisix_client.models import ClusterOptions
from apisix_client.resources import RouteClient, UpstreamClient, ServiceClient, SSLClient


class FakeCluster(Cluster):
    """Cluster with AsyncMock resource clients."""

    def __init__(self, options: ClusterOptions):
        self.name = options.name
        self.options = options
        self._route = AsyncMock(spec=RouteClient)
        self._upstream = AsyncMock(spec=UpstreamClient)
        self._service = AsyncMock(spec=ServiceClient)
        self._ssl = AsyncMock(spec=SSLClient)
        self.closed = False

    def route(self):
        return self._route

    def upstream(self):
        return self._upstream

    def service(self):
        return self._service

    def ssl(self):
        return self._ssl

    async def aclose(self):
        self.closed = True


class RecordingAdminAPI:
    """In-memory stand-in for the Admin API, served through httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[Tuple[str, str], Tuple[int, bytes]] = {}
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def respond(self, method: str, path: str, status_code: int = 200, body: Any = None):
        content = b"" if body is None else json.dumps(body).encode()
        self.responses[(method, path)] = (status_code, content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        canned = self.responses.get((request.method, request.url.path))
        if canned is None:
            return httpx.Response(404, json={"error_msg": "404 Route Not Found"})
        status_code, content = canned
        return httpx.Response(status_code, content=content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def default_options():
    """Options for the default cluster"""
    return ClusterOptions(name="default", base_url="http://127.0.0.1:9180/apisix/admin")


@pytest.fixture
def prod_options():
    """Options for an additional cluster"""
    return ClusterOptions(name="prod", base_url="http://10.0.0.1:9180/apisix/admin")


@pytest.fixture
def fake_factory():
    """Cluster factory producing FakeCluster instances"""
    return Mock(side_effect=FakeCluster)


@pytest.fixture
def admin_api():
    """Recording Admin API backend"""
    return RecordingAdminAPI()


@pytest_asyncio.fixture
async def admin_cluster(admin_api):
    """AdminAPICluster wired to the recording Admin API"""
    options = ClusterOptions(
        name="default",
        base_url="http://127.0.0.1:9180/apisix/admin",
        admin_key="edd1c9f034335f136f87ad84b625c8f1",
        timeout=2.0
    )
    cluster = AdminAPICluster(options, transport=httpx.MockTransport(admin_api))
    yield cluster
    await cluster.aclose()
