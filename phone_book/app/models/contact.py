import logging
import re

from pydantic import BaseModel, field_validator

log = logging.getLogger(__name__)

# A name is stored unquoted on a single record line, so it may not carry the delimiters or line breaks.
NAME_PATTERN = re.compile(r'^[^,"\r\n]{2,50}$')
# Optional leading "+", then digits and spaces; 3-25 characters in total.
NUMBER_PATTERN = re.compile(r"^(?=.{3,25}$)\+?[0-9 ]+$")


def is_valid_name(text: str) -> bool:
    """Check whether text is acceptable as a contact name.

    Args:
        text (str): The candidate name, already trimmed by the caller.

    Returns:
        bool: True if the name is 2-50 characters and has no comma, double quote or line break.

    """
    return bool(NAME_PATTERN.fullmatch(text))


def is_valid_number(text: str) -> bool:
    """Check whether text is acceptable as a phone number.

    Args:
        text (str): The candidate number, already trimmed by the caller.

    Returns:
        bool: True if the number is an optional '+' followed by digits and spaces,
            3-25 characters in total.

    """
    return bool(NUMBER_PATTERN.fullmatch(text))


class Contact(BaseModel):
    """A named entry of the phone book owning one or more phone numbers.

    Numbers are kept in the order they were added. They are not checked against
    the number pattern here because records read from disk are taken verbatim;
    input paths call `is_valid_number` before a number reaches a contact.

    Attributes:
        name (str): The unique name of the contact.
        numbers (list[str]): The ordered phone numbers of the contact.

    """

    name: str
    numbers: list[str]

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        """Validate the name field.

        Args:
            v: The name value to validate.

        Returns:
            str: The validated name, unchanged.

        Raises:
            ValueError: If the name is not a string, is outside 2-50 characters,
                or contains a comma or double quote.

        Notes:
            1. Ensure name is a string.
            2. Ensure name matches NAME_PATTERN.
            3. Surrounding whitespace is preserved so loaded records re-encode byte for byte.

        """
        if not isinstance(v, str):
            raise ValueError("name must be a string")
        if not is_valid_name(v):
            raise ValueError(
                "name must be 2-50 characters and must not contain ',' or '\"'",
            )
        return v

    @field_validator("numbers", mode="before")
    @classmethod
    def validate_numbers(cls, v):
        """Validate the numbers field.

        Args:
            v: The numbers value to validate.

        Returns:
            list[str]: A new list holding the numbers in their original order.

        Raises:
            ValueError: If numbers is not a list of strings or is empty.

        """
        if not isinstance(v, (list, tuple)):
            raise ValueError("numbers must be a list")
        if not v:
            raise ValueError("numbers must not be empty")
        if not all(isinstance(number, str) for number in v):
            raise ValueError("numbers must be strings")
        return list(v)

    def has_number(self, number: str) -> bool:
        """Return True if number is one of this contact's numbers (exact string match)."""
        return number in self.numbers

    def match_typed_number(self, typed: str) -> str | None:
        """Return the stored number a trimmed answer refers to, or None.

        Args:
            typed (str): A number as read from the prompt, already trimmed.

        Returns:
            str | None: The exact stored number, preferring an exact match over one
                that only matches once its surrounding whitespace is trimmed.

        """
        if typed in self.numbers:
            return typed
        for number in self.numbers:
            if number.strip() == typed:
                return number
        return None
