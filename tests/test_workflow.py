"""
Tests for gig and invoice status workflows.
"""

from itertools import product

import pytest

from gigflow.errors import InvalidTransition, ValidationError
from gigflow.models import GigIn, GigStatus, InvoiceIn, InvoiceStatus
from gigflow.workflow import GIG_WORKFLOW, INVOICE_WORKFLOW, StatusWorkflow


class TestGigWorkflow:
    def test_create_default_is_a_known_state(self):
        assert GIG_WORKFLOW.parse(GigIn.model_fields["status"].default) is GigStatus.ACTIVE

    @pytest.mark.parametrize(
        "current,target",
        [
            ("active", "completed"),
            ("active", "cancelled"),
            ("completed", "active"),
            ("cancelled", "active"),
            ("completed", "cancelled"),
        ],
    )
    def test_transitions_allowed(self, current, target):
        assert GIG_WORKFLOW.check(current, target) == GigStatus(target)

    def test_unknown_target_rejected(self):
        with pytest.raises(ValidationError, match="not a valid gig status"):
            GIG_WORKFLOW.check("active", "bogus")

    def test_parse_accepts_enum_members(self):
        assert GIG_WORKFLOW.parse(GigStatus.COMPLETED) is GigStatus.COMPLETED


class TestInvoiceWorkflow:
    def test_create_default_is_a_known_state(self):
        default = InvoiceIn.model_fields["status"].default
        assert INVOICE_WORKFLOW.parse(default) is InvoiceStatus.DRAFT

    def test_every_pair_allowed(self):
        for current, target in product(InvoiceStatus, InvoiceStatus):
            assert INVOICE_WORKFLOW.allows(current, target)

    def test_paid_back_to_draft_allowed(self):
        # no sequencing is imposed on operator-asserted statuses
        assert INVOICE_WORKFLOW.check("paid", "draft") == InvoiceStatus.DRAFT

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            INVOICE_WORKFLOW.allows("draft", "void")


class TestRestrictedWorkflow:
    """A narrower table still reports disallowed moves as InvalidTransition."""

    @pytest.fixture
    def one_way(self):
        return StatusWorkflow(
            "gig",
            GigStatus,
            {GigStatus.ACTIVE: {GigStatus.COMPLETED}},
        )

    def test_disallowed_move(self, one_way):
        with pytest.raises(InvalidTransition) as info:
            one_way.check("completed", "active")
        assert info.value.current == "completed"
        assert info.value.target == "active"

    def test_invalid_transition_is_a_validation_error(self, one_way):
        with pytest.raises(ValidationError):
            one_way.check("active", "cancelled")

    def test_allows(self, one_way):
        assert one_way.allows("active", "completed")
        assert not one_way.allows("completed", "active")
