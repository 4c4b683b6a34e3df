# gigflow/api/invoices.py
from typing import List, Optional

from fastapi import APIRouter, Depends

from ..ledger import Ledger
from ..models import Invoice, InvoiceIn, InvoicePatch
from .deps import get_ledger

router = APIRouter(prefix="/invoices", tags=["invoices"])


# Callers may echo client_id on the wire; it is always recomputed from the gig.
class InvoiceBody(InvoiceIn):
    client_id: Optional[int] = None


class InvoicePatchBody(InvoicePatch):
    client_id: Optional[int] = None


@router.get("", response_model=List[Invoice])
async def list_invoices(ledger: Ledger = Depends(get_ledger)):
    return await ledger.invoices.list()


@router.get("/{invoice_id}", response_model=Invoice)
async def get_invoice(invoice_id: int, ledger: Ledger = Depends(get_ledger)):
    return await ledger.invoices.get(invoice_id)


@router.post("", response_model=Invoice, status_code=201)
async def create_invoice(payload: InvoiceBody, ledger: Ledger = Depends(get_ledger)):
    return await ledger.invoices.create(payload.model_dump(exclude={"client_id"}))


@router.patch("/{invoice_id}", response_model=Invoice)
async def update_invoice(
    invoice_id: int, payload: InvoicePatchBody, ledger: Ledger = Depends(get_ledger)
):
    changes = payload.model_dump(exclude_unset=True, exclude={"client_id"})
    return await ledger.invoices.update(invoice_id, changes)
