# gigflow/api/dashboard.py
from fastapi import APIRouter, Depends, Query

from ..aggregation import DashboardSummary
from ..ledger import Ledger
from .deps import get_ledger

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def dashboard(
    recent: int = Query(default=5, ge=0),
    ledger: Ledger = Depends(get_ledger),
):
    return await ledger.dashboard(recent)
