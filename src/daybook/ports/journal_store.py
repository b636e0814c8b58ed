"""Journal storage interface."""

from datetime import date
from typing import Protocol, runtime_checkable

from ..core.entries import Added, DayView


@runtime_checkable
class JournalStore(Protocol):
    """Interface for one user's journal, bound to a single day."""

    user: str
    day: date

    def add_entry(self, text: str) -> Added | None:
        """Add an entry for right now. No-op if today is not the bound day."""
        ...

    def view(self, day: date, limit: int | None = None) -> DayView:
        """Read a day's entries from storage, oldest first."""
        ...

    def remove(self, limit: int) -> int:
        """Remove up to limit of the latest entries. Returns how many went."""
        ...

    def persist(self) -> None:
        """Save or delete the backing storage. Raises on failure."""
        ...

    def close(self) -> None:
        """Persist, logging instead of raising. Safe to call twice."""
        ...
