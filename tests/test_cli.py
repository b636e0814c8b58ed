"""Tests for the daybook command line."""

import json
from datetime import date, timedelta
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from daybook.cli import main
from daybook.config import Config
from daybook.paths import resolve


@pytest.fixture
def root(tmp_path):
    return tmp_path / ".journals"


@pytest.fixture
def config(root):
    return Config(journals_dir=str(root))


@pytest.fixture
def run(config):
    runner = CliRunner()

    def _run(*args):
        with patch("daybook.cli.load_config", return_value=config):
            return runner.invoke(main, list(args))

    return _run


def seed(root, user, day, entries):
    """Write a day file directly."""
    path = resolve(user, day, ensure_dir=True, root=root)
    path.write_text(json.dumps(entries))
    return path


class TestAdd:
    def test_adds_entry(self, run, root):
        result = run("-u", "alice", "add", "hello", "world")

        assert result.exit_code == 0
        assert result.output == f"Entry added to day {date.today()} of alice's journal\n"
        saved = json.loads(resolve("alice", date.today(), root=root).read_text())
        assert list(saved.values()) == ["hello world"]

    def test_requires_text(self, run):
        result = run("-u", "alice", "add")
        assert result.exit_code == 2

    def test_user_from_config(self, run, config):
        config.user = "bob"
        result = run("add", "hi")
        assert "of bob's journal" in result.output

    @patch("daybook.adapters.hostname.socket.gethostname")
    def test_user_from_host_name(self, mock_hostname, run):
        mock_hostname.return_value = "workstation"
        result = run("add", "hi")
        assert "of workstation's journal" in result.output

    @patch("daybook.adapters.hostname.socket.gethostname")
    def test_identity_failure_aborts(self, mock_hostname, run, root):
        mock_hostname.side_effect = OSError("no host name")
        result = run("add", "hi")

        assert result.exit_code == 1
        assert "Failed to open journal. Aborting..." in result.output
        assert not root.exists()


class TestView:
    def test_shows_entries(self, run, root):
        seed(root, "alice", date(2024, 3, 7), {
            "2024-03-07T12:00:00": "lunch",
            "2024-03-07T08:15:00": "coffee",
        })
        result = run("-u", "alice", "view", "2024-03-07")

        assert result.exit_code == 0
        assert result.output == (
            "[alice @ 2024-03-07 08:15:00] > coffee\n"
            "[alice @ 2024-03-07 12:00:00] > lunch\n"
        )

    def test_limit(self, run, root):
        seed(root, "alice", date(2024, 3, 7), {
            "2024-03-07T08:00:00": "one",
            "2024-03-07T09:00:00": "two",
            "2024-03-07T10:00:00": "three",
        })
        result = run("-u", "alice", "view", "2024-03-07", "-n", "2")

        assert result.output.splitlines() == [
            "[alice @ 2024-03-07 08:00:00] > one",
            "[alice @ 2024-03-07 09:00:00] > two",
            "... 1 entries omitted ...",
        ]

    def test_limit_from_config(self, run, root, config):
        config.view_limit = 1
        seed(root, "alice", date(2024, 3, 7), {
            "2024-03-07T08:00:00": "one",
            "2024-03-07T09:00:00": "two",
        })
        result = run("-u", "alice", "view", "2024-03-07")

        assert result.output.splitlines() == [
            "[alice @ 2024-03-07 08:00:00] > one",
            "... 1 entries omitted ...",
        ]

    def test_several_dates(self, run, root):
        seed(root, "alice", date(2024, 3, 9), {"2024-03-09T10:00:00": "later"})
        seed(root, "alice", date(2024, 3, 7), {"2024-03-07T10:00:00": "earlier"})
        result = run("-u", "alice", "view", "2024-03-09", "2024-03-07")

        assert result.output.splitlines() == [
            "[alice @ 2024-03-09 10:00:00] > later",
            "[alice @ 2024-03-07 10:00:00] > earlier",
        ]

    def test_range(self, run, root):
        seed(root, "alice", date(2024, 3, 7), {"2024-03-07T10:00:00": "thursday"})
        seed(root, "alice", date(2024, 3, 9), {"2024-03-09T10:00:00": "saturday"})
        seed(root, "alice", date(2024, 3, 12), {"2024-03-12T10:00:00": "outside"})
        result = run("-u", "alice", "view", "-r", "2024-03-06", "-r", "2024-03-10")

        assert result.output.splitlines() == [
            "[alice @ 2024-03-07 10:00:00] > thursday",
            "[alice @ 2024-03-09 10:00:00] > saturday",
        ]

    def test_open_range_ends_today(self, run, root):
        start = date.today() - timedelta(days=3)
        seed(root, "alice", date.today(), {f"{date.today()}T10:00:00": "today"})
        result = run("-u", "alice", "view", "-r", start.isoformat())
        assert "> today" in result.output

    def test_defaults_to_today(self, run):
        run("-u", "alice", "add", "just now")
        result = run("-u", "alice", "view")
        assert result.output.endswith("> just now\n")

    def test_invalid_date_aborts_silently(self, run, root):
        seed(root, "alice", date(2024, 3, 7), {"2024-03-07T10:00:00": "hidden"})
        result = run("-u", "alice", "view", "2024-03-07", "someday")

        assert result.exit_code == 1
        assert result.output == ""

    def test_dates_and_range_conflict(self, run):
        result = run("-u", "alice", "view", "2024-03-07", "-r", "2024-03-01")
        assert result.exit_code == 2

    def test_too_many_range_dates(self, run):
        result = run("-u", "alice", "view", "-r", "2024-03-01", "-r", "2024-03-02", "-r", "2024-03-03")
        assert result.exit_code == 2

    def test_view_leaves_no_files(self, run, root):
        run("-u", "alice", "view", "2024-03-07")
        assert not root.exists()


class TestRemove:
    def test_removes_latest_by_default(self, run, root):
        path = seed(root, "alice", date.today(), {
            f"{date.today()}T08:00:00": "keep",
            f"{date.today()}T09:00:00": "drop",
        })
        result = run("-u", "alice", "remove")

        assert result.output == f"Removed 1 entry from day {date.today()} of alice's journal\n"
        assert list(json.loads(path.read_text()).values()) == ["keep"]

    def test_removes_n(self, run, root):
        path = seed(root, "alice", date.today(), {
            f"{date.today()}T08:00:00": "a",
            f"{date.today()}T09:00:00": "b",
            f"{date.today()}T10:00:00": "c",
        })
        result = run("-u", "alice", "remove", "-n", "2")

        assert "Removed 2 entries" in result.output
        assert list(json.loads(path.read_text()).values()) == ["a"]

    def test_remove_all_deletes_file(self, run, root):
        path = seed(root, "alice", date.today(), {
            f"{date.today()}T08:00:00": "a",
            f"{date.today()}T09:00:00": "b",
        })
        result = run("-u", "alice", "remove", "--all")

        assert "Removed 2 entries" in result.output
        assert not path.exists()
        assert not root.exists()

    def test_remove_nothing(self, run):
        result = run("-u", "alice", "remove")
        assert result.output == f"Removed 0 entry from day {date.today()} of alice's journal\n"

    def test_count_and_all_conflict(self, run):
        result = run("-u", "alice", "remove", "-n", "2", "--all")
        assert result.exit_code == 2

    def test_rejects_negative_count(self, run):
        result = run("-u", "alice", "remove", "-n", "-1")
        assert result.exit_code == 2


class TestMain:
    def test_no_command_shows_help(self, run):
        result = run()
        assert "add" in result.output
        assert "view" in result.output
        assert "remove" in result.output
