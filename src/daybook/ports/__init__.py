"""Ports - interfaces/protocols for external dependencies."""

from .clock import Clock
from .identity import IdentityProvider
from .journal_store import JournalStore

__all__ = [
    "Clock",
    "IdentityProvider",
    "JournalStore",
]
