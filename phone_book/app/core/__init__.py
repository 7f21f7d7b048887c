"""This module serves as the initialization file for the core package of the phone book application.

Notes:
    1. This file is intentionally empty as it is used to initialize the package.
    2. Settings live in core.config, user-visible text lives in core.messages.

"""
