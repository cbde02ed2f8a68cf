#!/usr/bin/env python3
"""
Configuration validation for the MeshCore contact cleaner config.ini.

Checks section and option names against the known set, value types, the
timezone name, and whether output paths are writable. Can be run standalone
via validate_config.py or with meshcore_contact_cleaner.py --validate-config.
"""

import configparser
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytz

# Severity levels for validation results
SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"

# Known options per section and how they are read
KNOWN_OPTIONS: Dict[str, Dict[str, str]] = {
    "Cleaner": {
        "stale_after_days": "int",
        "prefix_length": "int",
        "timezone": "str",
    },
    "Export": {
        "output_dir": "str",
        "suffix": "str",
        "require_disclaimer": "bool",
    },
    "Logging": {
        "log_level": "level",
        "colored_output": "bool",
        "log_file": "str",
    },
}

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Non-standard section name -> suggested canonical name (exact match)
SECTION_TYPO_MAP = {
    "Cleanup": "Cleaner",
    "Contacts": "Cleaner",
    "Exporter": "Export",
    "Log": "Logging",
}


def _resolve_path(file_path: str, base_dir: Path) -> Path:
    """Resolve a path relative to base_dir (or as absolute)."""
    p = Path(file_path)
    if p.is_absolute():
        return p.resolve()
    return (base_dir.resolve() / p).resolve()


def _check_path_writable(
    file_path: str, base_dir: Path, description: str
) -> Optional[str]:
    """Check if a file or directory path can be written. Returns warning message if not."""
    if not file_path or not file_path.strip():
        return None
    try:
        resolved = _resolve_path(file_path.strip(), base_dir)
    except (OSError, RuntimeError):
        return f"{description}: cannot resolve path '{file_path}'"
    # Find first existing ancestor to check writability
    check_dir = resolved if resolved.is_dir() else resolved.parent
    while not check_dir.exists():
        check_dir = check_dir.parent
        if check_dir == check_dir.parent:  # reached root
            return f"{description} '{resolved}': parent directory does not exist"
    if not os.access(str(check_dir), os.W_OK):
        return f"{description} '{resolved}': directory {check_dir} is not writable"
    if resolved.is_file() and not os.access(str(resolved), os.W_OK):
        return f"{description} '{resolved}': file exists but is not writable"
    return None


def _check_value(config: configparser.ConfigParser, section: str, option: str,
                 kind: str) -> Optional[str]:
    """Return an error message if the option's value does not parse as kind."""
    try:
        if kind == "int":
            value = config.getint(section, option)
            if value < 0:
                return f"[{section}] {option} must not be negative (got {value})"
        elif kind == "bool":
            config.getboolean(section, option)
        elif kind == "level":
            value = config.get(section, option).strip().upper()
            if value not in LOG_LEVELS:
                return f"[{section}] {option} '{value}' is not a log level ({', '.join(sorted(LOG_LEVELS))})"
    except ValueError as e:
        return f"[{section}] {option}: {e}"
    return None


def validate_config(config_path: str) -> List[Tuple[str, str]]:
    """
    Validate a config file. Returns a list of (severity, message).

    Args:
        config_path: Path to config.ini (or other config file).

    Returns:
        List of (severity, message). severity is one of SEVERITY_*.
    """
    path = Path(config_path)
    if not path.exists():
        return [(SEVERITY_ERROR, f"Config file not found: {config_path}")]

    config = configparser.ConfigParser()
    try:
        config.read(config_path, encoding="utf-8")
    except configparser.Error as e:
        return [(SEVERITY_ERROR, f"Failed to parse config: {e}")]

    results: List[Tuple[str, str]] = []
    sections_present = frozenset(s.strip() for s in config.sections() if s.strip())

    # Every section is optional; note the defaults in effect
    if "Cleaner" not in sections_present:
        results.append((
            SEVERITY_INFO,
            "Section [Cleaner] absent; using defaults (stale_after_days=10, prefix_length=2, system timezone).",
        ))
    if "Logging" not in sections_present:
        results.append((
            SEVERITY_INFO,
            "Section [Logging] absent; logging to console only.",
        ))

    for section in config.sections():
        section_stripped = section.strip()
        if not section_stripped:
            continue

        known = KNOWN_OPTIONS.get(section_stripped)
        if known is None:
            if section_stripped in SECTION_TYPO_MAP:
                results.append((
                    SEVERITY_WARNING,
                    f"Non-standard section [{section_stripped}]; did you mean [{SECTION_TYPO_MAP[section_stripped]}]?",
                ))
            else:
                results.append((
                    SEVERITY_INFO,
                    f"Unknown section [{section_stripped}] (ignored).",
                ))
            continue

        for option in config.options(section):
            if option not in known:
                results.append((SEVERITY_WARNING, f"Unknown option '{option}' in [{section_stripped}] (ignored)."))
                continue
            msg = _check_value(config, section, option, known[option])
            if msg:
                results.append((SEVERITY_ERROR, msg))

    timezone_str = config.get("Cleaner", "timezone", fallback="").strip()
    if timezone_str:
        try:
            pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            results.append((
                SEVERITY_WARNING,
                f"Unknown timezone '{timezone_str}' in [Cleaner]; the system timezone will be used.",
            ))

    # Check writable paths (export directory, log file)
    config_root = path.resolve().parent
    output_dir = config.get("Export", "output_dir", fallback="").strip()
    if output_dir:
        msg = _check_path_writable(output_dir, config_root, "Export output_dir")
        if msg:
            results.append((SEVERITY_WARNING, msg))
    log_file = config.get("Logging", "log_file", fallback="").strip()
    if log_file:
        msg = _check_path_writable(log_file, config_root, "Log file path")
        if msg:
            results.append((SEVERITY_WARNING, msg))

    return results
