# gigflow/api/gigs.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..ledger import Ledger
from ..models import Gig, GigIn, GigPatch, GigStatus
from .deps import get_ledger

router = APIRouter(prefix="/gigs", tags=["gigs"])


@router.get("", response_model=List[Gig])
async def list_gigs(
    status: Optional[GigStatus] = Query(default=None),
    ledger: Ledger = Depends(get_ledger),
):
    gigs = await ledger.gigs.list()
    if status:
        gigs = [g for g in gigs if g.status == status]
    return gigs


@router.get("/{gig_id}", response_model=Gig)
async def get_gig(gig_id: int, ledger: Ledger = Depends(get_ledger)):
    return await ledger.gigs.get(gig_id)


@router.post("", response_model=Gig, status_code=201)
async def create_gig(payload: GigIn, ledger: Ledger = Depends(get_ledger)):
    return await ledger.gigs.create(payload)


@router.patch("/{gig_id}", response_model=Gig)
async def update_gig(gig_id: int, payload: GigPatch, ledger: Ledger = Depends(get_ledger)):
    return await ledger.gigs.update(gig_id, payload)
