# gigflow/errors.py
from __future__ import annotations

from typing import Optional


class GigflowError(Exception):
    """Base class for every error the ledger raises."""


class ValidationError(GigflowError, ValueError):
    """A required field is missing/empty, a reference is dangling, or a status is unknown."""


class InvalidTransition(ValidationError):
    def __init__(self, entity: str, current: str, target: str):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(f"{entity} cannot move from {current!r} to {target!r}")


class NotFound(GigflowError, LookupError):
    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


class TransportError(GigflowError):
    """The backing call failed. ``status_code`` is None when no response came back."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
