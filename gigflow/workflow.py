# gigflow/workflow.py
"""Status workflows for gigs and invoices.

Both workflows are deliberately permissive: status changes are business
decisions taken by the freelancer (reopening a cancelled gig, marking an
invoice overdue by hand), so any enumerated state may follow any other.
What the workflow does enforce is membership: a target outside the enum is
rejected before it reaches the store.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Mapping, Type, Union

from .errors import InvalidTransition, ValidationError
from .models import GigStatus, InvoiceStatus


class StatusWorkflow:
    def __init__(
        self,
        name: str,
        states: Type[Enum],
        transitions: Mapping[Enum, Iterable[Enum]],
    ):
        self.name = name
        self.states = states
        self.transitions: Dict[Enum, FrozenSet[Enum]] = {
            state: frozenset(targets) for state, targets in transitions.items()
        }

    def parse(self, value: Union[str, Enum]) -> Enum:
        try:
            return self.states(value)
        except ValueError:
            allowed = ", ".join(s.value for s in self.states)
            raise ValidationError(
                f"{value!r} is not a valid {self.name} status (expected one of: {allowed})"
            ) from None

    def allows(self, current: Union[str, Enum], target: Union[str, Enum]) -> bool:
        return self.parse(target) in self.transitions.get(self.parse(current), frozenset())

    def check(self, current: Union[str, Enum], target: Union[str, Enum]) -> Enum:
        """Return the parsed target, or raise if the move is not allowed."""
        src, dst = self.parse(current), self.parse(target)
        if dst not in self.transitions.get(src, frozenset()):
            raise InvalidTransition(self.name, src.value, dst.value)
        return dst


def any_to_any(states: Type[Enum]) -> Dict[Enum, FrozenSet[Enum]]:
    return {state: frozenset(states) for state in states}


GIG_WORKFLOW = StatusWorkflow("gig", GigStatus, any_to_any(GigStatus))
INVOICE_WORKFLOW = StatusWorkflow("invoice", InvoiceStatus, any_to_any(InvoiceStatus))
