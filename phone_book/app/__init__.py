"""This module serves as the entry point for the phone book application.

It groups the packages that make up the contact manager: configuration and
fixed message text (core), the contact model (models), the persisted record
format and in-memory store (storage), and the interactive command loop (shell).

Notes:
    1. This module does not contain any functions or classes of its own.
    2. No disk access occurs in this module directly.

"""
