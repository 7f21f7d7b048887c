import logging
import sys
from collections.abc import Callable, Collection
from typing import TextIO

import click

log = logging.getLogger(__name__)


class Console:
    """Line-oriented terminal I/O for the shell.

    Output goes through `click.echo`; input is read one whole line at a time and
    trimmed of surrounding whitespace.

    Attributes:
        input_stream (TextIO): The stream answers are read from.

    """

    def __init__(self, input_stream: TextIO | None = None):
        self.input_stream = input_stream if input_stream is not None else sys.stdin

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, nl=nl)

    def error(self, message: str) -> None:
        click.echo(message, err=True)

    def read_line(self) -> str:
        """Read one line of input, trimmed.

        Raises:
            EOFError: If the input stream is exhausted.

        """
        line = self.input_stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.strip()

    def ask(self, prompt: str) -> str:
        """Print prompt on its own line and return the next trimmed line of input."""
        self.echo(prompt)
        return self.read_line()


def ask_until(
    console: Console,
    prompt: str,
    is_valid: Callable[[str], bool],
    error_message: str,
    retry_prompt: str | None = None,
) -> str:
    """Prompt repeatedly until the answer passes a check.

    Args:
        console (Console): The console to prompt on.
        prompt (str): The prompt printed before the first read.
        is_valid (Callable[[str], bool]): The check an answer must pass.
        error_message (str): Printed after each rejected answer.
        retry_prompt (str | None): Printed before each re-read. When None, the
            first prompt is repeated.

    Returns:
        str: The first answer that passes the check.

    Raises:
        EOFError: If input ends before a valid answer is given.

    """
    answer = console.ask(prompt)
    while not is_valid(answer):
        log.debug("Rejected answer for prompt %r", prompt)
        console.echo(error_message)
        answer = console.ask(retry_prompt if retry_prompt is not None else prompt)
    return answer


def choose(
    console: Console,
    prompt: str,
    choices: Collection[str],
    retry_message: str,
) -> str:
    """Prompt until the answer is one of a fixed set of tokens.

    Answers are compared case-insensitively.

    Args:
        console (Console): The console to prompt on.
        prompt (str): The question printed before the first read.
        choices (Collection[str]): The accepted lower-case tokens.
        retry_message (str): Printed before each re-read after an unknown token.

    Returns:
        str: The accepted token, lower-cased.

    Raises:
        EOFError: If input ends before an accepted token is given.

    """
    answer = console.ask(prompt).lower()
    while answer not in choices:
        answer = console.ask(retry_message).lower()
    return answer
