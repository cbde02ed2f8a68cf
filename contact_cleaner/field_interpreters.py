#!/usr/bin/env python3
"""
Field interpreters for raw MeshCore contact records
Turn untyped export fields into typed values. Every function here is total:
missing or malformed input degrades to a default instead of raising.
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional

from .enums import DeviceType

# out_path values that mean "no fixed route, flood the message"
FLOOD_PATH_MARKERS = frozenset({'flood', 'ff', '0'})

SECONDS_PER_DAY = 24 * 60 * 60


def _as_number(value: Any) -> Optional[float]:
    """Return value if it is a finite real number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def classify_type(code: Any) -> DeviceType:
    """Map the numeric ``type`` field to a device category.

    Args:
        code: Raw type code (1 companion, 2 repeater, 3 room, 4 sensor).

    Returns:
        DeviceType: Matching category, or ``DeviceType.Unknown`` for anything else.
    """
    return DeviceType.from_code(code)


def detect_favorite(flags: Any) -> bool:
    """Favorite contacts have bit 0 of ``flags`` set."""
    number = _as_number(flags)
    if number is None:
        return False
    return (int(number) & 1) == 1


def compute_last_seen(last_advert: Any, last_modified: Any) -> Optional[datetime]:
    """Return the later of two epoch-second timestamps as an aware UTC datetime.

    Either value may be missing or non-numeric; if both are, returns None.
    """
    candidates = [ts for ts in (_as_number(last_advert), _as_number(last_modified)) if ts is not None]
    if not candidates:
        return None
    try:
        return datetime.fromtimestamp(max(candidates), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        # Outside the platform's representable range
        return None


def compute_age_days(last_seen: Optional[datetime], now: datetime) -> Optional[int]:
    """Whole days elapsed between last_seen and now (floored), or None."""
    if last_seen is None:
        return None
    if now.tzinfo is None:
        now = now.astimezone()
    elapsed = (now - last_seen).total_seconds()
    return math.floor(elapsed / SECONDS_PER_DAY)


def has_custom_routing_path(out_path: Any) -> bool:
    """True when out_path holds a real route rather than a flood marker."""
    if not out_path:
        return False
    normalized = str(out_path).strip().lower()
    if not normalized:
        return False
    return normalized not in FLOOD_PATH_MARKERS


def display_name(raw: dict) -> str:
    """Name shown for a contact: custom name, advertised name, or a placeholder."""
    return str(raw.get('custom_name') or raw.get('name') or '(unnamed)')


def public_key_of(raw: dict) -> str:
    public_key = raw.get('public_key')
    return public_key if isinstance(public_key, str) else ''

