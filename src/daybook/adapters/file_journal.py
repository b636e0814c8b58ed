"""File-based journal storage adapter."""

import json
import logging
import os
import sys
import tempfile
from datetime import date, datetime
from pathlib import Path

from ..config import JOURNALS_DIR
from ..core.entries import (
    Added,
    DayEntries,
    DayView,
    build_view,
    insert_entry,
    remove_latest,
    sort_entries,
)
from ..paths import resolve
from ..ports.clock import Clock
from ..ports.identity import IdentityProvider
from .hostname import HostnameIdentity
from .system_clock import SystemClock

logger = logging.getLogger(__name__)

# Pass to FileJournal.remove() to clear the whole day.
REMOVE_ALL = sys.maxsize


def encode_entries(entries: DayEntries) -> bytes:
    """
    Serialize entries as a pretty-printed JSON object of timestamp -> text.

    Non-ASCII text is written as UTF-8. Text that UTF-8 cannot hold, such as
    lone surrogates from undecodable command-line bytes, switches the whole
    file to \\u escapes so it still loads back unchanged.
    """
    data = {timestamp.isoformat(): text for timestamp, text in sort_entries(entries).items()}
    try:
        return json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError:
        return json.dumps(data, indent=2).encode("ascii")


def write_replacing(path: Path, data: bytes) -> None:
    """Write data to a temp file beside path, then move it over path."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def decode_entries(raw: str) -> DayEntries:
    """Parse a day file. Raises ValueError if the content is not a valid day."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    entries = {}
    for key, text in data.items():
        if not isinstance(text, str):
            raise ValueError(f"entry {key!r} is not a string")
        timestamp = datetime.fromisoformat(key)
        if timestamp.tzinfo is not None:
            raise ValueError(f"entry {key!r} has a timezone")
        entries[timestamp] = text
    return sort_entries(entries)


def load_entries(path: Path) -> DayEntries:
    """Load a day file. Missing, unreadable or corrupt files load as empty."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read journal file {path}: {e}")
        return {}

    try:
        return decode_entries(raw)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Treating corrupt journal file {path} as empty: {e}")
        return {}


def prune_empty_dirs(start: Path, root: Path) -> None:
    """Remove start and its ancestors up to root while they are empty."""
    directory = start
    while directory == root or root in directory.parents:
        try:
            directory.rmdir()
        except OSError as e:
            logger.debug(f"Stopped pruning at {directory}: {e}")
            return
        directory = directory.parent


class FileJournal:
    """
    One user's journal for one day, backed by a JSON file.

    Implements JournalStore protocol. Entries are loaded on open and
    written back (or the file deleted, when empty) on close. Use it as a
    context manager so close() runs on every exit path:

        with FileJournal.open(user="alice") as journal:
            journal.add_entry("Shipped the release")
    """

    def __init__(
        self,
        user: str,
        day: date,
        entries: DayEntries | None = None,
        clock: Clock | None = None,
        root: Path | str | None = None,
    ):
        self.user = user
        self.day = day
        self.entries = sort_entries(entries or {})
        self.clock = clock or SystemClock()
        self.root = Path(root) if root else JOURNALS_DIR
        self._closed = False

    @classmethod
    def open(
        cls,
        user: str | None = None,
        day: date | None = None,
        identity: IdentityProvider | None = None,
        clock: Clock | None = None,
        root: Path | str | None = None,
    ) -> "FileJournal":
        """
        Open the journal for (user, day), loading any saved entries.

        Without a user the identity provider (host name by default) is
        asked; its IdentityResolutionError propagates. Without a day,
        today according to the clock is used.
        """
        clock = clock or SystemClock()
        if user is None:
            user = (identity or HostnameIdentity()).current_user()
        if day is None:
            day = clock.now().date()

        journal = cls(user, day, clock=clock, root=root)
        journal.entries = load_entries(journal.path)
        return journal

    @property
    def path(self) -> Path:
        return resolve(self.user, self.day, root=self.root)

    @property
    def closed(self) -> bool:
        return self._closed

    def add_entry(self, text: str) -> Added | None:
        """
        Record text at the current moment.

        Returns None without changing anything when the clock's date is no
        longer the journal's day.
        """
        now = self.clock.now().replace(microsecond=0)
        if now.date() != self.day:
            logger.debug(f"Skipping entry for {self.user}: {now.date()} is not {self.day}")
            return None

        resolve(self.user, self.day, ensure_dir=True, root=self.root)
        self.entries = insert_entry(self.entries, now, text)
        return Added(user=self.user, day=self.day, timestamp=now, total=len(self.entries))

    def view(self, day: date, limit: int | None = None) -> DayView:
        """Read a day's entries from disk. Does not touch this journal's entries."""
        entries = load_entries(resolve(self.user, day, root=self.root))
        return build_view(self.user, day, entries, limit)

    def remove(self, limit: int) -> int:
        """Remove up to limit of the latest entries. Saved on close."""
        self.entries, removed = remove_latest(self.entries, limit)
        return removed

    def persist(self) -> None:
        """
        Write the entries to disk, or delete the day file if there are none.

        The new content replaces the day file in one step, so a failed write
        leaves the previous file intact. Raises OSError if the file cannot be
        written or deleted. Pruning empty directories after a delete never
        raises.
        """
        path = self.path
        if self.entries:
            write_replacing(path, encode_entries(self.entries))
            return

        path.unlink(missing_ok=True)
        prune_empty_dirs(path.parent, self.root)

    def close(self) -> None:
        """Persist once, logging failures instead of raising."""
        if self._closed:
            return
        self._closed = True
        try:
            self.persist()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to save journal {self.path}: {e}")

    def __enter__(self) -> "FileJournal":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
