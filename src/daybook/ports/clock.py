"""Clock interface."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Interface for reading the current local time."""

    def now(self) -> datetime:
        """Current local moment, truncated to whole seconds."""
        ...
