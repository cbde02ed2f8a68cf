#!/usr/bin/env python3
"""
Exporter for cleaned contact lists
Writes the selected contacts back out in the MeshCore export format
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

DEFAULT_BASE_NAME = 'meshcore_contacts'
DEFAULT_SUFFIX = '_cleaned.json'

DISCLAIMER_TEXT = (
    "Importing the cleaned file replaces the contact list on your device. "
    "Contacts left out of the export are gone until they advertise again. "
    "Keep a copy of your original export before importing."
)


def build_export_document(raw_contacts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap raw contact records the way the MeshCore app expects them."""
    return {'contacts': list(raw_contacts)}


def serialize_export(raw_contacts: List[Dict[str, Any]]) -> str:
    return json.dumps(build_export_document(raw_contacts), indent=2, ensure_ascii=False, allow_nan=False)


def export_file_name(original_name: Optional[str], suffix: str = DEFAULT_SUFFIX) -> str:
    """Name for the exported file, derived from the input file's name.

    >>> export_file_name('contacts.JSON')
    'contacts_cleaned.json'
    """
    if original_name:
        base_name = re.sub(r'\.json$', '', Path(original_name).name, flags=re.IGNORECASE)
    else:
        base_name = DEFAULT_BASE_NAME
    return base_name + suffix


def write_export(raw_contacts: List[Dict[str, Any]], output_dir: Union[str, Path],
                 original_name: Optional[str], suffix: str = DEFAULT_SUFFIX) -> Path:
    """Serialize raw_contacts into output_dir and return the written path.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export_file_name(original_name, suffix)
    output_path.write_text(serialize_export(raw_contacts) + '\n', encoding='utf-8')
    return output_path


class DisclaimerGate:
    """One-time consent check before the first export of a session.

    Args:
        required: When False the gate is always open.
    """

    def __init__(self, required: bool = True):
        self.required = required
        self.accepted = False

    def check(self, confirm: Callable[[str], bool]) -> bool:
        """Ask for consent unless it was already given.

        Args:
            confirm: Called with the disclaimer text; returns True to accept.

        Returns:
            bool: True if exporting may proceed.
        """
        if not self.required or self.accepted:
            return True
        if confirm(DISCLAIMER_TEXT):
            self.accepted = True
            return True
        return False
