"""daybook CLI - timestamped daily journal."""

import logging
import sys
from datetime import date

import click

from .adapters.file_journal import REMOVE_ALL, FileJournal
from .adapters.hostname import IdentityResolutionError
from .config import get_journals_root, load_config
from .core.entries import DayView, date_range, parse_dates, resolve_range

logger = logging.getLogger(__name__)


@click.group()
@click.version_option()
@click.option("--user", "-u", default=None,
              help="User whose entries will be managed. Defaults to the host computer's name.")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, user: str | None, debug: bool):
    """daybook - Personal journal CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.obj = {
        "config": config,
        "user": user or config.user or None,
        "root": get_journals_root(config),
    }


def _open_journal(obj: dict) -> FileJournal:
    """Open today's journal, aborting the command if there is no user."""
    try:
        return FileJournal.open(user=obj["user"], root=obj["root"])
    except IdentityResolutionError as e:
        logger.debug(f"Identity lookup failed: {e}")
        click.echo("Failed to open journal. Aborting...", err=True)
        sys.exit(1)


def _requested_days(dates: tuple[str, ...], range_dates: tuple[str, ...], today: date) -> list[date]:
    """Work out which days to show. Raises ValueError on a malformed date."""
    if range_dates:
        start, end = resolve_range(parse_dates(range_dates), today)
        return list(date_range(start, end))
    if dates:
        return parse_dates(dates)
    return [today]


def _show_day(day_view: DayView) -> None:
    for entry in day_view:
        click.echo(f"[{day_view.user} @ {entry.format_timestamp()}] > {entry.text}")
    if day_view.omitted:
        click.echo(f"... {day_view.omitted} entries omitted ...")


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def add(obj: dict, text: tuple[str, ...]):
    """Log a message in today's journal."""
    with _open_journal(obj) as journal:
        added = journal.add_entry(" ".join(text))

    if added:
        click.echo(f"Entry added to day {added.day} of {added.user}'s journal")


@main.command()
@click.argument("dates", nargs=-1)
@click.option("--range", "-r", "range_dates", multiple=True, metavar="DATE",
              help="Up to two dates forming an inclusive range. One date means [date, today].")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None,
              help="Limits the number of daily entries to be displayed.")
@click.pass_obj
def view(obj: dict, dates: tuple[str, ...], range_dates: tuple[str, ...], limit: int | None):
    """Display journal entries.

    Dates must be in the format YYYY-MM-DD. Defaults to today.
    """
    if dates and range_dates:
        raise click.UsageError("DATES and --range cannot be used together.")
    if len(range_dates) > 2:
        raise click.UsageError("--range takes at most two dates.")
    if limit is None:
        limit = obj["config"].view_limit

    with _open_journal(obj) as journal:
        try:
            days = _requested_days(dates, range_dates, journal.day)
        except ValueError as e:
            logger.info(f"Invalid date, nothing shown: {e}")
            sys.exit(1)

        for day in days:
            _show_day(journal.view(day, limit))


@main.command()
@click.option("-n", "count", type=click.IntRange(min=0), default=None,
              help="Amount of entries to be removed. Defaults to the latest.")
@click.option("--all", "remove_all", is_flag=True, help="Removes all entries.")
@click.pass_obj
def remove(obj: dict, count: int | None, remove_all: bool):
    """Remove today's entries, starting from the latest."""
    if remove_all and count is not None:
        raise click.UsageError("-n and --all cannot be used together.")
    limit = REMOVE_ALL if remove_all else (1 if count is None else count)

    with _open_journal(obj) as journal:
        removed = journal.remove(limit)

    noun = "entries" if removed > 1 else "entry"
    click.echo(f"Removed {removed} {noun} from day {journal.day} of {journal.user}'s journal")


if __name__ == "__main__":
    main()
