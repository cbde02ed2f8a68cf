#!/usr/bin/env python3
"""
Check a contact cleaner config.ini without loading any contacts.

Usage: python validate_config.py [--config config.ini]
Prints one line per finding to stderr; the exit status is 1 only when a
finding is an error.
"""

import sys

from meshcore_contact_cleaner import main as cleaner_main


def main() -> int:
    return cleaner_main([*sys.argv[1:], "--validate-config"])


if __name__ == "__main__":
    sys.exit(main())
