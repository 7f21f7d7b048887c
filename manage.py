import logging
import sys
from pathlib import Path

import click

from phone_book.app.core import messages
from phone_book.app.core.config import get_settings
from phone_book.app.models.contact import is_valid_number
from phone_book.app.shell.interpreter import (
    CommandInterpreter,
    render_book,
    render_contact,
    render_matches,
)
from phone_book.app.storage.contact_store import ContactStore

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with the shell's stdout."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _load_store(store: ContactStore) -> None:
    if not store.load():
        click.echo(messages.LOAD_FAILED, err=True)


@click.group(invoke_without_command=True)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Contacts file to use instead of the configured PHONE_BOOK_DATA_PATH.",
)
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None):
    """Phone book: keep names and phone numbers in a plain text file.

    Without a sub-command the interactive shell is started.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    data_path = data_file if data_file is not None else settings.data_path
    _msg = f"cli starting with data file {data_path}"
    log.debug(_msg)
    ctx.obj = ContactStore(data_path)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command("run")
@click.pass_obj
def run(store: ContactStore):
    """
    Start the interactive phone book shell.

    Args:
        store (ContactStore): The store selected by the group options.

    Returns:
        None

    Notes:
        1. The shell loads the store itself and reports a failed load.
        2. Commands are read from stdin until 'exit' or end of input.

    """
    _msg = "run starting"
    log.debug(_msg)
    CommandInterpreter(store).run()
    _msg = "run returning"
    log.debug(_msg)


@cli.command("list")
@click.pass_obj
def list_command(store: ContactStore):
    """List every contact in alphabetical order."""
    _load_store(store)
    for line in render_book(store):
        click.echo(line)


@cli.command("show")
@click.argument("name")
@click.pass_obj
def show_command(store: ContactStore, name: str):
    """Show the numbers of the contact called NAME."""
    _load_store(store)
    contact = store.get(name.strip())
    if contact is None:
        click.echo(messages.NOTHING_FOUND)
        return
    for line in render_contact(contact):
        click.echo(line)


@cli.command("find")
@click.argument("number")
@click.pass_obj
def find_command(store: ContactStore, number: str):
    """Show which contacts own NUMBER (exact match)."""
    number = number.strip()
    if not is_valid_number(number):
        raise click.BadParameter(messages.FIND_NUMBER_RULES, param_hint="NUMBER")
    _load_store(store)
    for line in render_matches(store.find_by_number(number)):
        click.echo(line)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
