"""
Data models for the phone book application.

Exposes the `Contact` model together with the name and number patterns that
input validation relies on, so callers can write:
    from phone_book.app.models import Contact, is_valid_number
"""

from phone_book.app.models.contact import (
    Contact,
    NAME_PATTERN,
    NUMBER_PATTERN,
    is_valid_name,
    is_valid_number,
)

__all__ = [
    "Contact",
    "NAME_PATTERN",
    "NUMBER_PATTERN",
    "is_valid_name",
    "is_valid_number",
]
