"""Functional core - pure business logic with no I/O."""

from .entries import (
    Added,
    DayEntries,
    DayView,
    Entry,
    build_view,
    date_range,
    insert_entry,
    parse_dates,
    remove_latest,
    resolve_range,
    sort_entries,
)

__all__ = [
    # Entries
    "Added",
    "DayEntries",
    "DayView",
    "Entry",
    "build_view",
    "insert_entry",
    "remove_latest",
    "sort_entries",
    # Dates
    "date_range",
    "parse_dates",
    "resolve_range",
]
