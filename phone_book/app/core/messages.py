"""This module stores the fixed text printed by the phone book shell."""
APP_TITLE = "PHONE BOOK (ver 0.2)"
RULE = "==========================="
SEPARATOR = "---------------------------"
TERMINATED = "'Phone Book 0.2' terminated."

PROMPT = "> "
NEXT_COMMAND_HINT = (
    "Type a command or 'exit' to quit. For a list of valid commands use 'help':"
)
START_HINT = "Type a command or 'exit' to quit:"
INVALID_COMMAND = "Invalid command!"

LOAD_FAILED = "Could not load contacts, phone book is empty!"
SAVE_FAILED = "Could not save contacts to {path}!"

EMPTY_BOOK = "No records found, the phone book is empty!"
NOTHING_FOUND = "Sorry, nothing found!"
NAME_NOT_FOUND = "Sorry, name not found!"

NAME_RULES = "Name must be in range 2 - 50 symbols and may not contain ',' or '\"'."
NUMBER_RULES = (
    "Number may contain only '+', spaces and digits. Min length 3, max length 25."
)
FIND_NUMBER_RULES = (
    "Invalid number! May contain only digits, spaces and '+'. "
    "Min length 3, max length 25."
)

COMMAND_HELP = {
    "list": "lists all saved contacts in alphabetical order",
    "show": "finds a contact by name",
    "find": "searches for a contact by number",
    "add": "saves a new contact entry into the phone book",
    "edit": "modifies an existing contact",
    "delete": "removes a contact from the phone book",
    "help": "lists all valid commands",
    "exit": "quits the phone book",
}


def get_help_lines() -> list[str]:
    """Build the help table printed by the help command.

    Args:
        None

    Returns:
        list[str]: One "command - description" line per command, then the separator.

    """
    lines = [f"{command} - {description}" for command, description in COMMAND_HELP.items()]
    lines.append(SEPARATOR)
    return lines
