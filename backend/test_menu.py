"""Tests for the interactive menu loop."""

import io

import pytest

import menu
from menu import Menu
from repositories import FileStore
from schemas.records import UserRecord


@pytest.fixture()
def store(tmp_path):
    return FileStore(tmp_path / "db")


def run(store, *lines):
    out = io.StringIO()
    Menu(store, "users", stdin=io.StringIO("\n".join(lines) + "\n"), stdout=out).run()
    return out.getvalue()


def test_add_and_read_user(store):
    output = run(store, "1", "Alice", "30", "Acme", "Main", "2", "Alice", "5")
    assert "User Alice added successfully." in output
    assert "Retrieved user Alice:" in output
    assert output.rstrip().endswith("Exiting program.")
    assert store.read("users", "Alice", model=UserRecord).Age == 30


def test_read_all_and_delete(store):
    store.write("users", "Bob", UserRecord(Name="Bob", Age=41))
    output = run(store, "3", "4", "Bob", "2", "Bob", "5")
    assert "All users retrieved:" in output
    assert "'Name': 'Bob'" in output
    assert "User Bob deleted successfully." in output
    assert "Error reading user Bob:" in output


def test_errors_do_not_stop_the_loop(store):
    output = run(store, "3", "4", "ghost", "1", "Carol", "old", "", "", "9", "5")
    assert "Error reading all users:" in output
    assert "Error deleting user ghost:" in output
    assert "Error writing user:" in output
    assert "Invalid choice, please try again." in output
    assert "Exiting program." in output


def test_end_of_input_exits(store):
    out = io.StringIO()
    Menu(store, "users", stdin=io.StringIO(""), stdout=out).run()
    assert "Exiting program." in out.getvalue()


def test_main_reports_initialization_failure(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("")
    monkeypatch.setenv("RECORDSTORE_DATA_DIR", str(blocker / "db"))
    assert menu.main() == 1
    assert "Error initializing database" in capsys.readouterr().out
