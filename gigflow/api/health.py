# gigflow/api/health.py
from fastapi import APIRouter, Depends, HTTPException

from ..errors import TransportError
from ..ledger import Ledger
from .deps import get_ledger

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/health/db")
async def health_db(ledger: Ledger = Depends(get_ledger)):
    try:
        await ledger.backend.fetch_all("clients")
    except TransportError as e:
        raise HTTPException(status_code=503, detail=f"DB check failed: {e}")
    return {"ok": True, "db": "up"}
