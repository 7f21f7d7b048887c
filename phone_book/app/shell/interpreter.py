import logging
from collections.abc import Callable

from phone_book.app.core import messages
from phone_book.app.models.contact import Contact, is_valid_name, is_valid_number
from phone_book.app.shell.prompts import Console, ask_until, choose
from phone_book.app.storage.contact_store import AddResult, ContactStore

log = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
EDIT_CHOICES = ("add", "delete", "cancel")
CONFIRM_CHOICES = ("y", "n")


def render_contact(contact: Contact) -> list[str]:
    """Return the name of a contact followed by one line per number."""
    return [contact.name, *contact.numbers]


def render_book(store: ContactStore) -> list[str]:
    """Render every contact of the store, separated by blank lines.

    Args:
        store (ContactStore): The store to render.

    Returns:
        list[str]: The output lines, or the empty-book notice when there are no contacts.

    """
    if not len(store):
        return [messages.EMPTY_BOOK]

    lines = []
    for contact in store.list_sorted():
        lines.extend(render_contact(contact))
        lines.append("")
    return lines


def render_matches(matches: list[tuple[str, str]]) -> list[str]:
    """Render (name, number) pairs found by a number lookup."""
    if not matches:
        return [messages.NOTHING_FOUND]

    lines = []
    for name, number in matches:
        lines.extend([name, number])
    return lines


class CommandInterpreter:
    """Read-eval loop over the phone book commands.

    Each top-level line is matched exactly against the command names. Commands
    run their own prompt loops and save the store after every change.

    Attributes:
        store (ContactStore): The contacts the commands act on.
        console (Console): Where prompts are printed and answers read.

    """

    def __init__(self, store: ContactStore, console: Console | None = None):
        self.store = store
        self.console = console if console is not None else Console()
        self._commands: dict[str, Callable[[], None]] = {
            "list": self.list_contacts,
            "show": self.show_contact,
            "find": self.find_contact,
            "add": self.add_contact,
            "edit": self.edit_contact,
            "delete": self.delete_contact,
            "help": self.show_help,
        }

    def run(self) -> None:
        """Run the shell until 'exit' or end of input.

        Args:
            None

        Returns:
            None

        Notes:
            1. Print the banner and the command list.
            2. Load the store; a failed load is reported and the session starts empty.
            3. Read a command, dispatch it, and repeat until 'exit'.
            4. End of input at any prompt ends the session like 'exit'.
            5. Print the termination line.

        """
        _msg = "run starting"
        log.debug(_msg)

        self.console.echo(messages.APP_TITLE)
        self.console.echo(messages.RULE)
        self.console.echo(messages.START_HINT)
        self.show_help()

        if not self.store.load():
            self.console.error(messages.LOAD_FAILED)

        try:
            while True:
                self.console.echo(messages.PROMPT, nl=False)
                line = self.console.read_line()
                if not self.dispatch(line):
                    break
                self.console.echo()
        except EOFError:
            log.debug("Input ended, leaving the shell")
            self.console.echo()

        self.console.echo(messages.TERMINATED)
        _msg = "run returning"
        log.debug(_msg)

    def dispatch(self, line: str) -> bool:
        """Run the command named by line.

        Args:
            line (str): The trimmed command line.

        Returns:
            bool: False if the line was the exit command, True otherwise.

        """
        if line == EXIT_COMMAND:
            return False

        handler = self._commands.get(line)
        if handler is None:
            self.console.echo(messages.INVALID_COMMAND)
            return True

        log.debug("Dispatching command %s", line)
        handler()
        return True

    def _echo_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.console.echo(line)

    def _finish(self) -> None:
        self.console.echo()
        self.console.echo(messages.NEXT_COMMAND_HINT)

    def _save(self) -> bool:
        saved = self.store.save()
        if not saved:
            self.console.error(messages.SAVE_FAILED.format(path=self.store.data_path))
        return saved

    def _echo_numbers(self, contact: Contact) -> None:
        self.console.echo(f"Current number(s) for {contact.name}:")
        self._echo_lines(contact.numbers)

    def show_help(self) -> None:
        self._echo_lines(messages.get_help_lines())

    def list_contacts(self) -> None:
        self._echo_lines(render_book(self.store))
        self._finish()

    def show_contact(self) -> None:
        name = self.console.ask("Enter the name you are looking for:")
        contact = self.store.get(name)
        if contact is None:
            self.console.echo(messages.NOTHING_FOUND)
        else:
            self._echo_lines(render_contact(contact))
        self._finish()

    def find_contact(self) -> None:
        """Look up which contacts own a number, re-prompting until the number is valid."""
        number = ask_until(
            self.console,
            "Enter a number to see to whom does it belong:",
            is_valid_number,
            messages.FIND_NUMBER_RULES,
            retry_prompt="Enter number:",
        )
        self._echo_lines(render_matches(self.store.find_by_number(number)))
        self._finish()

    def add_contact(self) -> None:
        """Add a number to a new or existing contact.

        Notes:
            1. Prompt for a valid name, then a valid number.
            2. An existing name gets the number appended unless it already has it.
            3. A new name becomes a contact holding only this number.
            4. The store is saved after every change.

        """
        self.console.echo("You are about to add a new contact to the phone book.")
        name = ask_until(
            self.console,
            "Enter contact name:",
            is_valid_name,
            messages.NAME_RULES,
        )
        number = ask_until(
            self.console,
            "Enter contact number:",
            is_valid_number,
            messages.NUMBER_RULES,
        )

        if name in self.store:
            self.console.echo(f"'{name}' already exists in the phone book!")

        result = self.store.add_number(name, number)
        if result is AddResult.DUPLICATE:
            self.console.echo(f"Number {number} already available for contact '{name}'.")
        elif result is AddResult.APPENDED:
            self._save()
            self.console.echo(f"Successfully added number {number} for contact '{name}'.")
        else:
            self._save()
            self.console.echo(f"Successfully added contact '{name}'!")
        self._finish()

    def edit_contact(self) -> None:
        """Add a number to, or delete a number from, an existing contact.

        Notes:
            1. An unknown name ends the command.
            2. Ask for add, delete or cancel until one of them is given.
            3. add: prompt until a valid number the contact does not already have.
            4. delete: prompt until one of the contact's numbers is given. Removing
               the last number removes the contact.
            5. cancel: leave the contact unchanged.

        """
        name = self.console.ask("Enter name of the contact you would like to modify:")
        contact = self.store.get(name)
        if contact is None:
            self.console.echo(messages.NAME_NOT_FOUND)
            self._finish()
            return

        self._echo_numbers(contact)
        self.console.echo()
        option = choose(
            self.console,
            "Would you like to add a new number or delete an existing number "
            "for this contact? [add/delete/cancel]",
            EDIT_CHOICES,
            "Use 'add' to save a new number, 'delete' to remove an existing number "
            "or 'cancel' to go back.",
        )

        if option == "add":
            self._edit_add_number(contact)
        elif option == "delete":
            self._edit_delete_number(contact)
        else:
            self.console.echo("Contact was not modified!")
        self._finish()

    def _edit_add_number(self, contact: Contact) -> None:
        while True:
            number = ask_until(
                self.console,
                "Enter new number:",
                is_valid_number,
                messages.NUMBER_RULES,
            )
            if not contact.has_number(number):
                break
            self.console.echo(
                f"Number {number} already available for contact '{contact.name}'.",
            )

        self.store.add_number(contact.name, number)
        self._save()
        self.console.echo(f"Number {number} was successfully added, record updated!")

    def _edit_delete_number(self, contact: Contact) -> None:
        number = contact.match_typed_number(
            self.console.ask("Enter the number you want to delete:"),
        )
        while number is None:
            self.console.echo(f"Number does not exist! Current number(s) for {contact.name}:")
            self._echo_lines(contact.numbers)
            number = contact.match_typed_number(
                self.console.ask("Enter the number you want to delete:"),
            )

        contact_removed = self.store.remove_number(contact.name, number)
        self._save()
        self.console.echo(f"Number {number} was removed from the record for '{contact.name}'")
        if contact_removed:
            self.console.echo(
                f"'{contact.name}' has no numbers left and was removed from the phone book.",
            )

    def delete_contact(self) -> None:
        name = self.console.ask("Enter name of the contact to be deleted:")
        if name not in self.store:
            self.console.echo(messages.NAME_NOT_FOUND)
            self._finish()
            return

        answer = choose(
            self.console,
            f"Contact '{name}' will be deleted. Are you sure? [Y/N]:",
            CONFIRM_CHOICES,
            "Delete contact? [Y/N]:",
        )
        if answer == "y":
            self.store.remove(name)
            self._save()
            self.console.echo("Contact was deleted successfully!")
        else:
            self.console.echo("Contact was not deleted.")
        self._finish()
