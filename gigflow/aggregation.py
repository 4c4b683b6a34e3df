# gigflow/aggregation.py
"""Dashboard metrics over already-loaded record lists.

Every function here is pure: it never mutates its input and returns the
same answer for the same sequence.
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Sequence

from pydantic import BaseModel

from .models import Client, Gig, GigStatus, Invoice, InvoiceStatus

PENDING_STATUSES = frozenset({InvoiceStatus.SENT, InvoiceStatus.OVERDUE})
RECENT_LIMIT = 5


def active_gigs(gigs: Sequence[Gig]) -> List[Gig]:
    return [g for g in gigs if g.status == GigStatus.ACTIVE]


def pending_invoices(invoices: Sequence[Invoice]) -> List[Invoice]:
    """Invoices awaiting payment (sent or overdue)."""
    return [i for i in invoices if i.status in PENDING_STATUSES]


def total_revenue(invoices: Sequence[Invoice]) -> Decimal:
    return sum((i.amount for i in invoices if i.status == InvoiceStatus.PAID), Decimal(0))


def active_clients(clients: Sequence[Client]) -> List[Client]:
    return [c for c in clients if not c.archived]


def recent_gigs(gigs: Sequence[Gig], n: int = RECENT_LIMIT) -> List[Gig]:
    # order is whatever the store handed us
    return list(gigs[: max(n, 0)])


def recent_invoices(invoices: Sequence[Invoice], n: int = RECENT_LIMIT) -> List[Invoice]:
    return list(invoices[: max(n, 0)])


def client_name(clients: Sequence[Client], client_id: int) -> str:
    return next((c.name for c in clients if c.id == client_id), "Unknown Client")


def gig_title(gigs: Sequence[Gig], gig_id: int) -> str:
    return next((g.title for g in gigs if g.id == gig_id), "Unknown Gig")


class DashboardSummary(BaseModel):
    total_clients: int
    active_gigs: int
    pending_invoices: int
    total_revenue: Decimal
    recent_gigs: List[Gig]
    recent_invoices: List[Invoice]


def summarize(
    clients: Sequence[Client],
    gigs: Sequence[Gig],
    invoices: Sequence[Invoice],
    recent: int = RECENT_LIMIT,
) -> DashboardSummary:
    # total_clients counts archived clients too; they are still on the books
    return DashboardSummary(
        total_clients=len(clients),
        active_gigs=len(active_gigs(gigs)),
        pending_invoices=len(pending_invoices(invoices)),
        total_revenue=total_revenue(invoices),
        recent_gigs=recent_gigs(gigs, recent),
        recent_invoices=recent_invoices(invoices, recent),
    )
