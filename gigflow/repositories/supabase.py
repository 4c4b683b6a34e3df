# gigflow/repositories/supabase.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ..errors import NotFound, TransportError
from .base import Backend, Row

log = logging.getLogger(__name__)


def get_supabase(url: Optional[str], key: Optional[str]) -> Client:
    if not url or not key:
        raise RuntimeError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE")
    return create_client(url, key)


class SupabaseBackend(Backend):
    """Rows live in Supabase tables named after the resource.

    The supabase client is synchronous; each query runs in a worker thread.
    Lists come back newest first, the order the dashboard's "recent" panels
    rely on.
    """

    def __init__(self, client: Client):
        self.sb = client

    async def _execute(self, what: str, build: Callable[[], Any]) -> List[Row]:
        try:
            resp = await asyncio.to_thread(lambda: build().execute())
        except APIError as e:
            log.error(f"supabase {what} error: {e.message}")
            raise TransportError(f"{what} error: {e.message}") from e
        except httpx.HTTPError as e:
            log.error(f"supabase {what} failed: {e}")
            raise TransportError(f"{what} failed: {e}") from e
        return resp.data or []

    async def fetch_all(self, resource: str) -> List[Row]:
        return await self._execute(
            f"{resource} select",
            lambda: self.sb.table(resource).select("*").order("created_at", desc=True),
        )

    async def fetch_one(self, resource: str, record_id: int) -> Row:
        rows = await self._execute(
            f"{resource} select",
            lambda: self.sb.table(resource).select("*").eq("id", record_id).limit(1),
        )
        if not rows:
            raise NotFound(resource, record_id)
        return rows[0]

    async def insert(self, resource: str, body: Row) -> Row:
        rows = await self._execute(
            f"{resource} insert", lambda: self.sb.table(resource).insert(body)
        )
        if not rows:
            raise TransportError(f"{resource} insert returned no row")
        return rows[0]

    async def patch(self, resource: str, record_id: int, changes: Row) -> Row:
        rows = await self._execute(
            f"{resource} update",
            lambda: self.sb.table(resource).update(changes).eq("id", record_id),
        )
        if not rows:
            raise NotFound(resource, record_id)
        return rows[0]
