"""
Pytest fixtures for the ledger test suite.

- Unit tests run against MemoryBackend.
- Integration tests drive HttpBackend against the FastAPI app in-process
  through httpx.ASGITransport (no network).
"""

import httpx
import pytest

from gigflow.api.main import create_app
from gigflow.ledger import Ledger
from gigflow.repositories import HttpBackend


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def seed():
    """The dashboard scenario: one client, one gig, one paid and one sent invoice."""
    return {
        "clients": [{"id": 1, "name": "Acme", "email": "ops@acme.test"}],
        "gigs": [{"id": 1, "client_id": 1, "title": "Logo", "status": "active"}],
        "invoices": [
            {"id": 1, "gig_id": 1, "client_id": 1, "amount": 500, "status": "paid"},
            {"id": 2, "gig_id": 1, "client_id": 1, "amount": 200, "status": "sent"},
        ],
    }


@pytest.fixture
def ledger():
    return Ledger.in_memory()


@pytest.fixture
def seeded_ledger(seed):
    return Ledger.in_memory(seed)


@pytest.fixture
def server_ledger(seed):
    """The ledger behind the in-process API."""
    return Ledger.in_memory(seed)


@pytest.fixture
def app(server_ledger):
    return create_app(server_ledger)


@pytest.fixture
async def http_ledger(app):
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://gigflow.test")
    ledger = Ledger(HttpBackend(client=client))
    yield ledger
    await client.aclose()
