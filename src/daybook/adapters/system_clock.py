"""Wall clock adapter."""

from datetime import datetime


class SystemClock:
    """Local wall clock. Implements Clock protocol."""

    def now(self) -> datetime:
        return datetime.now().replace(microsecond=0)
