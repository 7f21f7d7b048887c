import logging
import re
from collections.abc import Iterable, Mapping

log = logging.getLogger(__name__)

RECORD_PATTERN = re.compile(r'^([^,"]{2,50}),"([0-9+, ]+)"$')
NUMBER_SPLIT_PATTERN = re.compile(r",\s*")
NUMBER_JOINER = ", "


def split_numbers(number_group: str) -> list[str]:
    """Split the quoted number group of a record line into numbers.

    Args:
        number_group (str): The text between the double quotes of a record line.

    Returns:
        list[str]: The numbers in file order, verbatim.

    Notes:
        1. Split on a comma followed by optional whitespace.
        2. Drop trailing empty pieces left by a trailing comma.

    """
    numbers = NUMBER_SPLIT_PATTERN.split(number_group)
    while numbers and not numbers[-1]:
        numbers.pop()
    return numbers


def decode_line(line: str) -> tuple[str, list[str]] | None:
    """Decode a single record line.

    Args:
        line (str): One line of the contacts file, with or without its line ending.

    Returns:
        tuple[str, list[str]] | None: The name and its numbers, or None if the line
            is not a valid record.

    Notes:
        1. Strip the line ending.
        2. Match the line against RECORD_PATTERN.
        3. Split the quoted group into numbers without validating them.
        4. A record whose quoted group holds no numbers is treated as invalid.

    """
    match = RECORD_PATTERN.match(line.rstrip("\r\n"))
    if not match:
        return None

    numbers = split_numbers(match.group(2))
    if not numbers:
        return None

    return match.group(1), numbers


def decode_records(lines: Iterable[str]) -> dict[str, list[str]]:
    """Decode record lines into a name to numbers mapping.

    Args:
        lines (Iterable[str]): The lines of a contacts file.

    Returns:
        dict[str, list[str]]: The decoded contacts in file order. A later record for
            the same name replaces an earlier one.

    Notes:
        1. Lines that do not decode are skipped.
        2. Blank lines are ignored without being counted as skipped.
        3. The number of skipped lines is logged at INFO level, never raised or shown.

    """
    _msg = "decode_records starting"
    log.debug(_msg)

    records: dict[str, list[str]] = {}
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        decoded = decode_line(line)
        if decoded is None:
            skipped += 1
            continue
        name, numbers = decoded
        records[name] = numbers

    if skipped:
        log.info("Skipped %d malformed contact record(s)", skipped)

    _msg = "decode_records returning"
    log.debug(_msg)
    return records


def encode_contact(name: str, numbers: Iterable[str]) -> str:
    """Encode a contact as a record line without a line ending.

    Args:
        name (str): The contact name, written unquoted.
        numbers (Iterable[str]): The contact numbers, joined by ", " inside double quotes.

    Returns:
        str: The record line.

    """
    return f'{name},"{NUMBER_JOINER.join(numbers)}"'


def encode_records(records: Mapping[str, Iterable[str]]) -> str:
    """Encode a name to numbers mapping as file content.

    Args:
        records (Mapping[str, Iterable[str]]): The contacts to encode.

    Returns:
        str: One newline-terminated record line per contact, ascending by name.

    """
    return "".join(
        encode_contact(name, records[name]) + "\n" for name in sorted(records)
    )
