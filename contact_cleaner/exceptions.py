#!/usr/bin/env python3
"""
Exceptions raised while loading MeshCore contact exports
"""


class ContactCleanerError(Exception):
    """Base class for contact cleaner errors"""

    # Message shown to the user when the error ends a load
    user_message = "The contacts file could not be loaded."


class LoadIOError(ContactCleanerError):
    """The raw payload could not be read"""

    user_message = "Could not read the selected file."


class FormatError(ContactCleanerError):
    """Payload is not valid JSON or has no "contacts" array"""

    user_message = (
        "The selected file is not a supported Meshcore contacts JSON. "
        "Please export your contacts from Meshcore and try again."
    )
