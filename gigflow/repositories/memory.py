# gigflow/repositories/memory.py
from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from ..errors import NotFound
from .base import Backend, Row

RESOURCES = ("clients", "gigs", "invoices")


class MemoryBackend(Backend):
    """Dict-backed store. Assigns ids (from 1, per resource) and ``created_at``.

    Rows are deep-copied on the way in and out so no caller can reach into
    the store's state. Listing returns rows in insertion order.
    """

    def __init__(self, seed: Optional[Dict[str, Iterable[Row]]] = None):
        self._tables: Dict[str, Dict[int, Row]] = {name: {} for name in RESOURCES}
        self._next_id: Dict[str, int] = {name: 1 for name in RESOURCES}
        for resource, rows in (seed or {}).items():
            for row in rows:
                self._load(resource, row)

    def _table(self, resource: str) -> Dict[int, Row]:
        try:
            return self._tables[resource]
        except KeyError:
            raise ValueError(f"unknown resource {resource!r}") from None

    def _load(self, resource: str, row: Row) -> None:
        table = self._table(resource)
        row = copy.deepcopy(dict(row))
        record_id = int(row["id"])
        table[record_id] = row
        self._next_id[resource] = max(self._next_id[resource], record_id + 1)

    async def fetch_all(self, resource: str) -> List[Row]:
        return [copy.deepcopy(r) for r in self._table(resource).values()]

    async def fetch_one(self, resource: str, record_id: int) -> Row:
        row = self._table(resource).get(record_id)
        if row is None:
            raise NotFound(resource, record_id)
        return copy.deepcopy(row)

    async def insert(self, resource: str, body: Row) -> Row:
        table = self._table(resource)
        record_id = self._next_id[resource]
        self._next_id[resource] += 1
        row = copy.deepcopy(dict(body))
        row["id"] = record_id
        row["created_at"] = datetime.now(timezone.utc).isoformat()
        table[record_id] = row
        return copy.deepcopy(row)

    async def patch(self, resource: str, record_id: int, changes: Row) -> Row:
        table = self._table(resource)
        if record_id not in table:
            raise NotFound(resource, record_id)
        updated = {**table[record_id], **copy.deepcopy(dict(changes))}
        # identity and server timestamps are not patchable
        updated["id"] = record_id
        updated["created_at"] = table[record_id].get("created_at")
        table[record_id] = updated
        return copy.deepcopy(updated)
