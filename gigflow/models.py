# gigflow/models.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

M = TypeVar("M", bound=BaseModel)


class GigStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


# ──────────────────────────────────────────────────────────────────────────────
# Records (what the store hands back; id and created_at are server-assigned)
# ──────────────────────────────────────────────────────────────────────────────
class _Record(BaseModel):
    # stores may return bookkeeping columns we don't model
    model_config = ConfigDict(extra="ignore")


class Client(_Record):
    # email is required on create; older rows may predate that
    id: int
    name: str
    email: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    archived: bool = False
    created_at: Optional[datetime] = None


class Gig(_Record):
    """A project/engagement for one client.

    ``end_date >= start_date`` is expected when both are set but is left to
    the store to enforce.
    """

    id: int
    title: str
    description: Optional[str] = None
    client_id: int
    status: GigStatus = GigStatus.ACTIVE
    rate: Optional[Decimal] = Field(default=None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None


class Invoice(_Record):
    id: int
    gig_id: int
    client_id: int
    amount: Decimal = Field(ge=0)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: Optional[date] = None
    issued_date: Optional[date] = None
    created_at: Optional[datetime] = None


# ──────────────────────────────────────────────────────────────────────────────
# Create payloads (never carry id / created_at)
# ──────────────────────────────────────────────────────────────────────────────
class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ClientIn(_Payload):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    company: Optional[str] = None
    phone: Optional[str] = None
    archived: bool = False


class GigIn(_Payload):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    client_id: int
    status: GigStatus = GigStatus.ACTIVE
    rate: Optional[Decimal] = Field(default=None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class InvoiceIn(_Payload):
    # client_id is derived from the gig at create time
    gig_id: int
    amount: Decimal = Field(..., ge=0)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: Optional[date] = None
    issued_date: Optional[date] = None


# ──────────────────────────────────────────────────────────────────────────────
# Field patches: only the fields a caller actually sets get applied
# ──────────────────────────────────────────────────────────────────────────────
class _Patch(_Payload):
    required: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def required_not_cleared(self):
        for name in self.required:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be cleared")
        return self

    def changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class ClientPatch(_Patch):
    required: ClassVar[Tuple[str, ...]] = ("name", "email", "archived")

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = None
    phone: Optional[str] = None
    archived: Optional[bool] = None


class GigPatch(_Patch):
    required: ClassVar[Tuple[str, ...]] = ("title", "client_id", "status")

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    client_id: Optional[int] = None
    status: Optional[GigStatus] = None
    rate: Optional[Decimal] = Field(default=None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class InvoicePatch(_Patch):
    required: ClassVar[Tuple[str, ...]] = ("gig_id", "amount", "status")

    gig_id: Optional[int] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    status: Optional[InvoiceStatus] = None
    due_date: Optional[date] = None
    issued_date: Optional[date] = None


def parse_payload(model: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    """Validate ``data`` into ``model``, raising our ValidationError on failure."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or model.__name__}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"invalid {model.__name__}: {problems}") from e
