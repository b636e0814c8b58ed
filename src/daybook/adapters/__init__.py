"""Adapters - I/O implementations of ports."""

from ..core.entries import Added
from .hostname import HostnameIdentity, IdentityResolutionError
from .system_clock import SystemClock
from .file_journal import REMOVE_ALL, FileJournal

__all__ = [
    "HostnameIdentity",
    "IdentityResolutionError",
    "SystemClock",
    "FileJournal",
    "Added",
    "REMOVE_ALL",
]
