"""HTTP transport for the APISIX Admin API."""

from typing import Any, Dict, List, Optional

import httpx

from .exceptions import (
    OperationTimeoutError,
    ResourceConflictError,
    ResourceNotFoundError,
    ResourceOperationError,
    TransportError,
)
from .utils.logging import get_logger


logger = get_logger(__name__)


class AdminAPIClient:
    """Thin async client for one cluster's Admin API.

    Returns raw resource dicts extracted from the APISIX response envelope and
    maps failures onto the client exception hierarchy. Cancellation of the
    calling task is never intercepted.
    """

    def __init__(self, base_url: str, admin_key: str = "", timeout: float = 5.0,
                 cluster_name: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the Admin API client.

        Args:
            base_url: Admin API prefix, e.g. http://127.0.0.1:9180/apisix/admin
            admin_key: Value of the X-API-KEY header (omitted if empty)
            timeout: Request timeout in seconds
            cluster_name: Owning cluster name, used in logs and error details
            transport: Optional httpx transport (used for testing)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.cluster_name = cluster_name
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": "apisix-client/1.0"
        }
        if admin_key:
            self.headers["X-API-KEY"] = admin_key

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating it if necessary."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self.headers,
                transport=self._transport
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def list(self, collection: str) -> List[Dict[str, Any]]:
        """List every object in a collection."""
        body = await self._request("GET", f"/{collection}")
        return _extract_items(body)

    async def create(self, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create an object; PUT when an ID is given, POST otherwise."""
        obj_id = payload.get("id")
        if obj_id:
            body = await self._request("PUT", f"/{collection}/{obj_id}", json=payload)
        else:
            body = await self._request("POST", f"/{collection}", json=payload)
        return _extract_item(body)

    async def update(self, collection: str, obj_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Replace an existing object."""
        body = await self._request("PUT", f"/{collection}/{obj_id}", json=payload)
        return _extract_item(body)

    async def delete(self, collection: str, obj_id: str) -> None:
        """Delete an object."""
        await self._request("DELETE", f"/{collection}/{obj_id}")

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        operation = f"{method} {path}"
        try:
            response = await self.http_client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise OperationTimeoutError(operation, self.timeout, cause=e)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Admin API request {operation} failed: {e}",
                details=self._details(operation),
                cause=e
            )

        if response.is_success:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise ResourceOperationError(
                    f"Invalid response body for {operation}",
                    status_code=response.status_code,
                    details=self._details(operation),
                    cause=e
                )

        reason = _error_message(response)
        logger.debug(f"Admin API {operation} on cluster {self.cluster_name} returned "
                     f"{response.status_code}: {reason}")

        if response.status_code == 404:
            raise ResourceNotFoundError(f"{operation}: {reason}", details=self._details(operation))
        if response.status_code == 409:
            raise ResourceConflictError(f"{operation}: {reason}", details=self._details(operation))
        raise ResourceOperationError(
            f"{operation}: HTTP {response.status_code} - {reason}",
            status_code=response.status_code,
            details=self._details(operation)
        )

    def _details(self, operation: str) -> Dict[str, Any]:
        return {"cluster_name": self.cluster_name, "operation": operation}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return body.get("error_msg") or body.get("message") or response.reason_phrase
    return response.reason_phrase


def _extract_items(body: Any) -> List[Dict[str, Any]]:
    # APISIX 3.x: {"list": [...], "total": n}; 2.x: {"node": {"nodes": [...]}}
    if not isinstance(body, dict):
        return []
    if "list" in body:
        entries = body.get("list") or []
    else:
        node = body.get("node") or {}
        entries = node.get("nodes") or []
    if not isinstance(entries, list):
        # etcd v2 style empty directories are encoded as {}
        return []
    return [entry["value"] for entry in entries if isinstance(entry, dict) and entry.get("value")]


def _extract_item(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        return {}
    if "value" in body:
        return body["value"] or {}
    node = body.get("node")
    if isinstance(node, dict) and "value" in node:
        return node["value"] or {}
    return body
