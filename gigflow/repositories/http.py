# gigflow/repositories/http.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from ..errors import NotFound, TransportError, ValidationError
from .base import Backend, Row

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def _detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class HttpBackend(Backend):
    """Talks to the REST surface: ``GET/POST /{resource}``, ``GET/PATCH /{resource}/{id}``.

    Pass ``client`` to reuse an existing ``httpx.AsyncClient`` (its base_url
    is used as-is and it is left open on ``aclose``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        resource: str,
        record_id: Optional[int] = None,
        body: Optional[Row] = None,
    ) -> Any:
        try:
            resp = await self._client.request(method, path, json=body)
        except httpx.HTTPError as e:
            log.warning(f"{method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        if resp.status_code == 404 and record_id is not None:
            raise NotFound(resource, record_id)
        if resp.status_code in (400, 422):
            raise ValidationError(f"{method} {path} rejected: {_detail(resp)}")
        if not resp.is_success:
            log.warning(f"{method} {path} -> {resp.status_code}: {_detail(resp)}")
            raise TransportError(f"API Error: {resp.status_code}", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {path} returned non-JSON body", status_code=resp.status_code
            ) from e

    async def fetch_all(self, resource: str) -> List[Row]:
        data = await self._request("GET", f"/{resource}", resource=resource)
        if not isinstance(data, list):
            raise TransportError(f"GET /{resource} did not return a list")
        return data

    async def fetch_one(self, resource: str, record_id: int) -> Row:
        return await self._request(
            "GET", f"/{resource}/{record_id}", resource=resource, record_id=record_id
        )

    async def insert(self, resource: str, body: Row) -> Row:
        return await self._request("POST", f"/{resource}", resource=resource, body=body)

    async def patch(self, resource: str, record_id: int, changes: Row) -> Row:
        return await self._request(
            "PATCH",
            f"/{resource}/{record_id}",
            resource=resource,
            record_id=record_id,
            body=changes,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
