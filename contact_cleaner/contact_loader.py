#!/usr/bin/env python3
"""
Loader for MeshCore contact exports
Reads the JSON document written by the MeshCore app's contact export
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import FormatError, LoadIOError


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name}")


def parse_contacts_document(text: str) -> List[Dict[str, Any]]:
    """Parse an export and return its ``contacts`` array.

    Args:
        text: Raw file contents.

    Returns:
        List[Dict[str, Any]]: The raw contact records, unmodified.

    Raises:
        FormatError: If text is not JSON or has no ``contacts`` list.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        raise FormatError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('contacts'), list):
        raise FormatError('JSON does not contain a "contacts" array.')

    # Individual records are free-form; non-objects are kept but read as empty
    return data['contacts']


def _read_text(path: Path) -> str:
    return path.read_text(encoding='utf-8-sig')


async def read_contacts_file(path: Union[str, Path]) -> str:
    """Read an export file without blocking the event loop.

    Raises:
        LoadIOError: If the file cannot be opened or decoded.
    """
    path = Path(path)
    try:
        return await asyncio.to_thread(_read_text, path)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadIOError(f"Could not read {path}: {e}") from e
