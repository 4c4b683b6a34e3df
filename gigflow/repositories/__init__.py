from .base import Backend, ClientRepository, GigRepository, InvoiceRepository, Repository
from .http import HttpBackend
from .memory import MemoryBackend

__all__ = [
    "Backend",
    "Repository",
    "ClientRepository",
    "GigRepository",
    "InvoiceRepository",
    "MemoryBackend",
    "HttpBackend",
]
