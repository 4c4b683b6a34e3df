# gigflow/repositories/base.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import NotFound, TransportError, ValidationError
from ..models import (
    Client,
    ClientIn,
    ClientPatch,
    Gig,
    GigIn,
    GigPatch,
    Invoice,
    InvoiceIn,
    InvoicePatch,
    parse_payload,
)
from ..workflow import GIG_WORKFLOW, INVOICE_WORKFLOW, StatusWorkflow

log = logging.getLogger(__name__)

Row = Dict[str, Any]
R = TypeVar("R", bound=BaseModel)
C = TypeVar("C", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)


class Backend(ABC):
    """Raw row storage for the three resources (``clients``, ``gigs``, ``invoices``).

    Rows are JSON-compatible dicts. ``fetch_one`` and ``patch`` raise
    ``NotFound`` for a missing id; any other failure surfaces as
    ``TransportError`` (or ``ValidationError`` when the store rejects the body).
    """

    @abstractmethod
    async def fetch_all(self, resource: str) -> List[Row]: ...

    @abstractmethod
    async def fetch_one(self, resource: str, record_id: int) -> Row: ...

    @abstractmethod
    async def insert(self, resource: str, body: Row) -> Row: ...

    @abstractmethod
    async def patch(self, resource: str, record_id: int, changes: Row) -> Row: ...

    async def aclose(self) -> None:
        return None


class Repository(Generic[R, C, P]):
    """CRUD contract for one entity type, independent of the transport behind it."""

    resource: ClassVar[str]
    entity: ClassVar[str]
    record_model: ClassVar[Type[BaseModel]]
    create_model: ClassVar[Type[BaseModel]]
    patch_model: ClassVar[Type[BaseModel]]
    workflow: ClassVar[Optional[StatusWorkflow]] = None

    def __init__(self, backend: Backend):
        self.backend = backend

    def _to_record(self, row: Row) -> R:
        try:
            return self.record_model.model_validate(row)
        except PydanticValidationError as e:
            log.error(f"malformed {self.entity} row from store: {e}")
            raise TransportError(f"store returned a malformed {self.entity}") from e

    async def list(self) -> List[R]:
        rows = await self.backend.fetch_all(self.resource)
        return [self._to_record(r) for r in rows]

    async def get(self, record_id: int) -> R:
        return self._to_record(await self.backend.fetch_one(self.resource, record_id))

    async def create(self, fields: Union[C, Mapping[str, Any]]) -> R:
        payload = parse_payload(self.create_model, fields)
        body = await self._prepare_create(payload)
        record = self._to_record(await self.backend.insert(self.resource, body))
        log.info(f"created {self.entity} {record.id}")
        return record

    async def update(self, record_id: int, patch: Union[P, Mapping[str, Any]]) -> R:
        """Apply only the fields set on ``patch``; status changes pass the workflow first."""
        current = await self.get(record_id)
        patch = parse_payload(self.patch_model, patch)
        changes = patch.changes()
        if not changes:
            return current

        if self.workflow is not None and "status" in changes:
            self.workflow.check(current.status, changes["status"])

        changes = await self._prepare_update(current, changes)
        record = self._to_record(await self.backend.patch(self.resource, record_id, changes))
        log.info(f"updated {self.entity} {record_id}: {sorted(changes)}")
        await self._after_update(current, record)
        return record

    async def _prepare_create(self, payload: C) -> Row:
        return payload.model_dump(mode="json")

    async def _prepare_update(self, current: R, changes: Row) -> Row:
        return changes

    async def _after_update(self, previous: R, record: R) -> None:
        return None


class ClientRepository(Repository[Client, ClientIn, ClientPatch]):
    resource = "clients"
    entity = "client"
    record_model = Client
    create_model = ClientIn
    patch_model = ClientPatch

    async def archive(self, client_id: int) -> Client:
        return await self.update(client_id, ClientPatch(archived=True))

    async def unarchive(self, client_id: int) -> Client:
        return await self.update(client_id, ClientPatch(archived=False))

    async def toggle_archived(self, client_id: int) -> Client:
        client = await self.get(client_id)
        return await self.update(client_id, ClientPatch(archived=not client.archived))


class GigRepository(Repository[Gig, GigIn, GigPatch]):
    resource = "gigs"
    entity = "gig"
    record_model = Gig
    create_model = GigIn
    patch_model = GigPatch
    workflow = GIG_WORKFLOW

    def __init__(self, backend: Backend, clients: ClientRepository):
        super().__init__(backend)
        self.clients = clients

    async def _require_client(self, client_id: int) -> Client:
        try:
            return await self.clients.get(client_id)
        except NotFound:
            raise ValidationError(f"client {client_id} does not exist") from None

    async def _prepare_create(self, payload: GigIn) -> Row:
        await self._require_client(payload.client_id)
        return payload.model_dump(mode="json")

    async def _prepare_update(self, current: Gig, changes: Row) -> Row:
        if "client_id" in changes and changes["client_id"] != current.client_id:
            await self._require_client(changes["client_id"])
        return changes

    async def _after_update(self, previous: Gig, record: Gig) -> None:
        # invoices follow their gig to the new client
        if record.client_id == previous.client_id:
            return
        rows = await self.backend.fetch_all("invoices")
        for row in rows:
            if row.get("gig_id") == record.id and row.get("client_id") != record.client_id:
                await self.backend.patch("invoices", row["id"], {"client_id": record.client_id})
                log.info(f"moved invoice {row['id']} to client {record.client_id} with gig {record.id}")


class InvoiceRepository(Repository[Invoice, InvoiceIn, InvoicePatch]):
    resource = "invoices"
    entity = "invoice"
    record_model = Invoice
    create_model = InvoiceIn
    patch_model = InvoicePatch
    workflow = INVOICE_WORKFLOW

    def __init__(self, backend: Backend, gigs: GigRepository):
        super().__init__(backend)
        self.gigs = gigs

    async def _require_gig(self, gig_id: int) -> Gig:
        try:
            return await self.gigs.get(gig_id)
        except NotFound:
            raise ValidationError(f"gig {gig_id} does not exist") from None

    async def _prepare_create(self, payload: InvoiceIn) -> Row:
        gig = await self._require_gig(payload.gig_id)
        body = payload.model_dump(mode="json")
        body["client_id"] = gig.client_id
        return body

    async def _prepare_update(self, current: Invoice, changes: Row) -> Row:
        # client_id always mirrors the invoice's gig
        if "gig_id" in changes:
            gig = await self._require_gig(changes["gig_id"])
            changes = {**changes, "client_id": gig.client_id}
        return changes
