# gigflow/api/deps.py
from fastapi import Request

from ..ledger import Ledger


def get_ledger(request: Request) -> Ledger:
    return request.app.state.ledger
