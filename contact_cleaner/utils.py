#!/usr/bin/env python3
"""
Utility functions for the MeshCore contact cleaner
"""

from pathlib import Path
from typing import Optional, Union


def resolve_path(file_path: Union[str, Path], base_dir: Union[str, Path] = '.') -> str:
    """Resolve a path relative to base_dir, leaving absolute paths as-is.

    Args:
        file_path: Path from config or the command line.
        base_dir: Directory relative paths are resolved from (usually the config file's).

    Returns:
        str: Absolute, normalized path.
    """
    path = Path(file_path).expanduser()
    if path.is_absolute():
        return str(path.resolve())
    return str((Path(base_dir).resolve() / path).resolve())


def truncate_string(text: Optional[str], max_length: int, ellipsis: str = '...') -> Optional[str]:
    """Truncate text to max_length characters including the ellipsis.

    Empty and None values are returned unchanged.
    """
    if not text:
        return text
    if len(text) <= max_length:
        return text
    return text[:max(0, max_length - len(ellipsis))] + ellipsis


def short_public_key(public_key: str, length: int = 10) -> str:
    """First length characters of a public key, with an ellipsis if cut."""
    if len(public_key) > length:
        return public_key[:length] + '…'
    return public_key


def format_age(age_days: Optional[int]) -> str:
    """Human-readable age for the contact list."""
    if age_days is None:
        return 'never heard'
    if age_days <= 0:
        return 'today'
    if age_days == 1:
        return '1 day ago'
    return f'{age_days} days ago'


def get_non_negative_int(config, section: str, option: str, default: int, logger) -> int:
    """Read an int option, falling back to default (with a warning) if invalid or negative."""
    try:
        value = config.getint(section, option, fallback=default)
    except ValueError:
        logger.warning(f"[{section}] {option} is not an integer, using {default}")
        return default
    if value < 0:
        logger.warning(f"[{section}] {option} must not be negative (got {value}), using {default}")
        return default
    return value
