"""Pure journal entry logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from itertools import islice
from typing import Iterable, Iterator

TIMESTAMP_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# Timestamp -> entry text. Kept sorted on every mutation.
DayEntries = dict[datetime, str]


@dataclass(frozen=True)
class Entry:
    """A single journal message, keyed by the moment it was recorded."""

    timestamp: datetime
    text: str

    def format_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_DISPLAY_FORMAT)


@dataclass
class Added:
    """Report of a successful add_entry call."""

    user: str
    day: date
    timestamp: datetime
    total: int


@dataclass
class DayView:
    """
    One day's entries as produced by a view.

    ``entries`` is consumed lazily and only once. ``omitted`` counts the
    entries cut off by the limit.
    """

    user: str
    day: date
    entries: Iterator[Entry]
    omitted: int = 0

    def __iter__(self) -> Iterator[Entry]:
        return self.entries


def sort_entries(entries: DayEntries) -> DayEntries:
    """Return a copy of the mapping ordered by ascending timestamp."""
    return dict(sorted(entries.items()))


def insert_entry(entries: DayEntries, timestamp: datetime, text: str) -> DayEntries:
    """Return a copy with the entry added, replacing any at the same timestamp."""
    updated = dict(entries)
    updated[timestamp] = text
    return sort_entries(updated)


def remove_latest(entries: DayEntries, limit: int) -> tuple[DayEntries, int]:
    """
    Drop up to ``limit`` of the most recent entries.

    Returns the remaining entries and how many were removed.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    ordered = list(sort_entries(entries).items())
    removed = min(limit, len(ordered))
    return dict(ordered[: len(ordered) - removed]), removed


def build_view(user: str, day: date, entries: DayEntries, limit: int | None = None) -> DayView:
    """Build a chronological, optionally truncated view of a day's entries."""
    ordered = sort_entries(entries)
    total = len(ordered)
    items: Iterable[tuple[datetime, str]] = ordered.items()
    omitted = 0
    if limit is not None:
        items = islice(items, limit)
        omitted = max(total - limit, 0)
    return DayView(
        user=user,
        day=day,
        entries=(Entry(timestamp, text) for timestamp, text in items),
        omitted=omitted,
    )


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end, inclusive. Empty if start > end."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def parse_dates(values: Iterable[str]) -> list[date]:
    """Parse YYYY-MM-DD strings. Raises ValueError on the first bad one."""
    return [date.fromisoformat(value.strip()) for value in values]


def resolve_range(dates: list[date], today: date) -> tuple[date, date]:
    """
    Turn one or two range bounds into an inclusive (start, end) pair.

    A single date means ``[date, today]``.
    """
    match len(dates):
        case 1:
            return dates[0], today
        case 2:
            return dates[0], dates[1]
        case _:
            raise ValueError(f"A range takes one or two dates, got {len(dates)}")
