import io

import pytest

from phone_book.app.core import messages
from phone_book.app.models.contact import Contact
from phone_book.app.shell.interpreter import (
    CommandInterpreter,
    render_book,
    render_contact,
    render_matches,
)
from phone_book.app.shell.prompts import Console
from phone_book.app.storage.contact_store import ContactStore


def run_shell(store, text: str, capsys) -> tuple[str, str]:
    """Run a full shell session over text and return (stdout, stderr)."""
    CommandInterpreter(store, Console(io.StringIO(text))).run()
    captured = capsys.readouterr()
    return captured.out, captured.err


def run_command(store, command: str, answers: str, capsys) -> str:
    """Dispatch a single command with the given sub-prompt answers."""
    interpreter = CommandInterpreter(store, Console(io.StringIO(answers)))
    assert interpreter.dispatch(command) is True
    return capsys.readouterr().out


@pytest.fixture
def saved_store(store, data_path):
    """Fixture to provide a store with Alice and Bob already on disk."""
    data_path.write_text('Alice,"+1 555 0100, 555 0199"\nBob,"0044 20 7946"\n', encoding="utf-8")
    store.load()
    return store


class TestRendering:
    """Test cases for the rendering helpers."""

    def test_render_contact(self):
        contact = Contact(name="Alice", numbers=["123", "456"])
        assert render_contact(contact) == ["Alice", "123", "456"]

    def test_render_book_empty(self, store):
        assert render_book(store) == [messages.EMPTY_BOOK]

    def test_render_book(self, saved_store):
        assert render_book(saved_store) == [
            "Alice",
            "+1 555 0100",
            "555 0199",
            "",
            "Bob",
            "0044 20 7946",
            "",
        ]

    def test_render_matches(self):
        assert render_matches([]) == [messages.NOTHING_FOUND]
        assert render_matches([("Alice", "123"), ("Bob", "123")]) == [
            "Alice",
            "123",
            "Bob",
            "123",
        ]


class TestSession:
    """Test cases for the read-eval loop."""

    def test_banner_and_exit(self, store, capsys):
        out, err = run_shell(store, "exit\n", capsys)

        assert out.startswith(messages.APP_TITLE)
        assert "help - lists all valid commands" in out
        assert out.rstrip().endswith(messages.TERMINATED)
        assert messages.LOAD_FAILED in err

    def test_no_load_notice_when_file_exists(self, saved_store, capsys):
        _, err = run_shell(saved_store, "exit\n", capsys)
        assert messages.LOAD_FAILED not in err

    def test_malformed_record_is_silent(self, store, data_path, capsys):
        data_path.write_text('Alice,"123"\nBob,555-1234\n', encoding="utf-8")

        out, err = run_shell(store, "exit\n", capsys)

        assert err == ""
        assert "Skipped" not in out
        assert len(store) == 1

    def test_invalid_command_keeps_running(self, store, capsys):
        out, _ = run_shell(store, "LIST\nfoo\nlist\nexit\n", capsys)

        assert out.count(messages.INVALID_COMMAND) == 2
        assert messages.EMPTY_BOOK in out
        assert messages.TERMINATED in out

    def test_end_of_input_ends_session(self, store, capsys):
        out, _ = run_shell(store, "add\nAlice\n", capsys)
        assert out.rstrip().endswith(messages.TERMINATED)
        assert "Alice" not in store

    def test_commands_are_trimmed(self, saved_store, capsys):
        out, _ = run_shell(saved_store, "   list  \nexit\n", capsys)
        assert "0044 20 7946" in out

    def test_help(self, store, capsys):
        out = run_command(store, "help", "", capsys)
        assert out.splitlines() == messages.get_help_lines()

    def test_dispatch_exit(self, store):
        interpreter = CommandInterpreter(store, Console(io.StringIO("")))
        assert interpreter.dispatch("exit") is False


class TestListAndShow:
    """Test cases for list and show."""

    def test_list_sorted(self, store, capsys):
        run_shell(
            store,
            "add\nZed\n999\nadd\nAlice\n123\nadd\nMark\n555\nexit\n",
            capsys,
        )
        out = run_command(store, "list", "", capsys)

        lines = out.splitlines()
        assert lines.index("Alice") < lines.index("Mark") < lines.index("Zed")
        assert messages.NEXT_COMMAND_HINT in out

    def test_list_empty(self, store, capsys):
        out = run_command(store, "list", "", capsys)
        assert messages.EMPTY_BOOK in out

    def test_show_found(self, saved_store, capsys):
        out = run_command(saved_store, "show", "Alice\n", capsys)
        assert "Alice\n+1 555 0100\n555 0199\n" in out

    def test_show_is_exact(self, saved_store, capsys):
        out = run_command(saved_store, "show", "alice\n", capsys)
        assert messages.NOTHING_FOUND in out


class TestFind:
    """Test cases for find."""

    def test_find_reprompts_until_valid(self, saved_store, capsys):
        out = run_command(saved_store, "find", "555-0100\n0044 20 7946\n", capsys)

        assert messages.FIND_NUMBER_RULES in out
        assert "Enter number:" in out
        assert "Bob\n0044 20 7946\n" in out

    def test_find_exact_string_only(self, saved_store, capsys):
        out = run_command(saved_store, "find", "+15550100\n", capsys)
        assert messages.NOTHING_FOUND in out
        assert "Alice" not in out


class TestAdd:
    """Test cases for add."""

    def test_add_new_contact_is_saved(self, store, data_path, capsys):
        out = run_command(store, "add", "Alice\n+1 555 0100\n", capsys)

        assert "Successfully added contact 'Alice'!" in out
        assert data_path.read_text(encoding="utf-8") == 'Alice,"+1 555 0100"\n'

    def test_add_then_show(self, store, capsys):
        run_command(store, "add", "Mary Jane\n 0044 20 \n", capsys)
        out = run_command(store, "show", "Mary Jane\n", capsys)
        assert "0044 20" in out

    def test_add_reprompts_invalid_name_and_number(self, store, capsys):
        out = run_command(
            store,
            "add",
            "A\nDoe, John\nJohn Doe\n12\nabc\n123\n",
            capsys,
        )

        assert out.count(messages.NAME_RULES) == 2
        assert out.count(messages.NUMBER_RULES) == 2
        assert store.get("John Doe").numbers == ["123"]

    def test_add_number_to_existing(self, saved_store, data_path, capsys):
        out = run_command(saved_store, "add", "Bob\n555\n", capsys)

        assert "'Bob' already exists in the phone book!" in out
        assert "Successfully added number 555 for contact 'Bob'." in out
        assert 'Bob,"0044 20 7946, 555"' in data_path.read_text(encoding="utf-8")

    def test_add_duplicate_leaves_file_unchanged(self, saved_store, data_path, capsys):
        before = data_path.read_bytes()

        out = run_command(saved_store, "add", "Alice\n555 0199\n", capsys)

        assert "Number 555 0199 already available for contact 'Alice'." in out
        assert data_path.read_bytes() == before
        assert saved_store.get("Alice").numbers == ["+1 555 0100", "555 0199"]

    def test_add_save_failure_keeps_contact(self, tmp_path, capsys):
        store = ContactStore(tmp_path / "missing_dir" / "contacts.csv")
        interpreter = CommandInterpreter(store, Console(io.StringIO("Alice\n123\n")))
        interpreter.dispatch("add")

        captured = capsys.readouterr()
        assert "Could not save contacts to" in captured.err
        assert store.get("Alice").numbers == ["123"]


class TestEdit:
    """Test cases for edit."""

    def test_edit_unknown_name(self, saved_store, capsys):
        out = run_command(saved_store, "edit", "Nobody\n", capsys)
        assert messages.NAME_NOT_FOUND in out

    def test_edit_cancel(self, saved_store, data_path, capsys):
        before = data_path.read_bytes()

        out = run_command(saved_store, "edit", "Alice\nmaybe\ncancel\n", capsys)

        assert "Use 'add' to save a new number" in out
        assert "Contact was not modified!" in out
        assert data_path.read_bytes() == before

    def test_edit_add_number(self, saved_store, data_path, capsys):
        out = run_command(saved_store, "edit", "Bob\nADD\nxyz\n0044 20 7946\n777\n", capsys)

        assert messages.NUMBER_RULES in out
        assert "Number 0044 20 7946 already available for contact 'Bob'." in out
        assert "Number 777 was successfully added, record updated!" in out
        assert 'Bob,"0044 20 7946, 777"' in data_path.read_text(encoding="utf-8")

    def test_edit_delete_number(self, saved_store, data_path, capsys):
        out = run_command(saved_store, "edit", "Alice\ndelete\n999\n555 0199\n", capsys)

        assert "Number does not exist! Current number(s) for Alice:" in out
        assert "Number 555 0199 was removed from the record for 'Alice'" in out
        assert 'Alice,"+1 555 0100"' in data_path.read_text(encoding="utf-8")

    def test_edit_delete_number_stored_with_whitespace(self, store, data_path, capsys):
        data_path.write_text('Bob," 555 1234, 777"\n', encoding="utf-8")
        store.load()

        out = run_command(store, "edit", "Bob\ndelete\n555 1234\n", capsys)

        assert "Number does not exist!" not in out
        assert store.get("Bob").numbers == ["777"]
        assert data_path.read_text(encoding="utf-8") == 'Bob,"777"\n'

    def test_edit_delete_last_number_removes_contact(self, saved_store, data_path, capsys):
        run_command(saved_store, "edit", "Bob\ndelete\n0044 20 7946\n", capsys)

        assert "Bob" not in saved_store
        assert "Bob" not in data_path.read_text(encoding="utf-8")


class TestDelete:
    """Test cases for delete."""

    def test_delete_unknown_name(self, saved_store, capsys):
        out = run_command(saved_store, "delete", "Nobody\n", capsys)
        assert messages.NAME_NOT_FOUND in out

    def test_delete_confirmed(self, saved_store, data_path, capsys):
        out = run_command(saved_store, "delete", "Alice\nok\nY\n", capsys)

        assert "Delete contact? [Y/N]:" in out
        assert "Contact was deleted successfully!" in out
        assert data_path.read_text(encoding="utf-8") == 'Bob,"0044 20 7946"\n'

        out = run_command(saved_store, "show", "Alice\n", capsys)
        assert messages.NOTHING_FOUND in out

    def test_delete_declined(self, saved_store, data_path, capsys):
        before = data_path.read_bytes()

        run_command(saved_store, "delete", "Alice\nn\n", capsys)

        assert "Alice" in saved_store
        assert data_path.read_bytes() == before


def test_alice_scenario(store, data_path, capsys):
    """Add, list, duplicate add, then remove the only number through edit."""
    run_command(store, "add", "Alice\n+1 555 0100\n", capsys)

    out = run_command(store, "list", "", capsys)
    assert out.startswith("Alice\n+1 555 0100\n")

    saved = data_path.read_bytes()
    out = run_command(store, "add", "Alice\n+1 555 0100\n", capsys)
    assert "already available" in out
    assert data_path.read_bytes() == saved

    run_command(store, "edit", "Alice\ndelete\n+1 555 0100\n", capsys)
    assert len(store) == 0
    assert data_path.read_text(encoding="utf-8") == ""
