# gigflow/api/clients.py
from typing import List

from fastapi import APIRouter, Depends

from ..ledger import Ledger
from ..models import Client, ClientIn, ClientPatch
from .deps import get_ledger

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=List[Client])
async def list_clients(ledger: Ledger = Depends(get_ledger)):
    return await ledger.clients.list()


@router.get("/{client_id}", response_model=Client)
async def get_client(client_id: int, ledger: Ledger = Depends(get_ledger)):
    return await ledger.clients.get(client_id)


@router.post("", response_model=Client, status_code=201)
async def create_client(payload: ClientIn, ledger: Ledger = Depends(get_ledger)):
    return await ledger.clients.create(payload)


@router.patch("/{client_id}", response_model=Client)
async def update_client(client_id: int, payload: ClientPatch, ledger: Ledger = Depends(get_ledger)):
    return await ledger.clients.update(client_id, payload)
