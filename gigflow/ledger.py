# gigflow/ledger.py
from __future__ import annotations

import asyncio
from typing import Optional

from .aggregation import DashboardSummary, summarize
from .config import Settings
from .repositories import ClientRepository, GigRepository, HttpBackend, InvoiceRepository, MemoryBackend
from .repositories.base import Backend


class Ledger:
    """Clients, gigs and invoices over one backend."""

    def __init__(self, backend: Backend):
        self.backend = backend
        self.clients = ClientRepository(backend)
        self.gigs = GigRepository(backend, self.clients)
        self.invoices = InvoiceRepository(backend, self.gigs)

    @classmethod
    def in_memory(cls, seed=None) -> "Ledger":
        return cls(MemoryBackend(seed))

    @classmethod
    def over_http(cls, base_url: Optional[str] = None, timeout: Optional[float] = None) -> "Ledger":
        settings = Settings.from_env()
        return cls(
            HttpBackend(
                base_url or settings.api_url,
                timeout=timeout if timeout is not None else settings.http_timeout,
            )
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Ledger":
        if settings.backend == "supabase":
            from .repositories.supabase import SupabaseBackend, get_supabase

            client = get_supabase(settings.supabase_url, settings.supabase_service_role)
            return cls(SupabaseBackend(client))
        return cls.in_memory()

    async def dashboard(self, recent: int = 5) -> DashboardSummary:
        tasks = [
            asyncio.ensure_future(self.clients.list()),
            asyncio.ensure_future(self.gigs.list()),
            asyncio.ensure_future(self.invoices.list()),
        ]
        try:
            clients, gigs, invoices = await asyncio.gather(*tasks)
        except BaseException:
            # first failure wins; the other loads are cancelled and reaped
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return summarize(clients, gigs, invoices, recent)

    async def aclose(self) -> None:
        await self.backend.aclose()

    async def __aenter__(self) -> "Ledger":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
