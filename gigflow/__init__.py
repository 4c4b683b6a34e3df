from .errors import GigflowError, InvalidTransition, NotFound, TransportError, ValidationError
from .ledger import Ledger
from .models import (
    Client,
    ClientIn,
    ClientPatch,
    Gig,
    GigIn,
    GigPatch,
    GigStatus,
    Invoice,
    InvoiceIn,
    InvoicePatch,
    InvoiceStatus,
)

__version__ = "0.1.0"
