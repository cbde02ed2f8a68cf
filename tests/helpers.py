#!/usr/bin/env python3
"""
Test helper functions and factories for creating test data
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

# Fixed clock for every test that needs "now"
TEST_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def days_ago(days: float, now: datetime = TEST_NOW) -> int:
    """Epoch seconds for a moment the given number of days before now."""
    return int((now - timedelta(days=days)).timestamp())


def create_test_raw_contact(
    type_code: Any = 1,
    name: str = "Test Contact",
    public_key: Optional[str] = None,
    prefix: str = "01",
    flags: Any = 0,
    last_advert: Any = None,
    last_modified: Any = None,
    out_path: Any = "",
    custom_name: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Factory for raw contact records as found in a MeshCore export.

    Args:
        type_code: 1 companion, 2 repeater, 3 room, 4 sensor
        name: Advertised name
        public_key: Full public key (default: prefix repeated to 64 hex chars)
        prefix: Two-character hex prefix used when public_key is not given
        flags: Flag bitmask (bit 0 = favorite)
        last_advert: Epoch seconds of the last advert (None to omit)
        last_modified: Epoch seconds of the last modification (None to omit)
        out_path: Outbound path descriptor
        custom_name: Optional user-assigned name

    Returns:
        Dictionary shaped like one entry of the export's "contacts" array
    """
    if public_key is None:
        public_key = (prefix.lower() * 32)[:64]

    raw: Dict[str, Any] = {
        'type': type_code,
        'name': name,
        'public_key': public_key,
        'flags': flags,
        'out_path': out_path,
    }
    if last_advert is not None:
        raw['last_advert'] = last_advert
    if last_modified is not None:
        raw['last_modified'] = last_modified
    if custom_name is not None:
        raw['custom_name'] = custom_name
    raw.update(extra)
    return raw


def create_test_repeater(prefix: str = "7e", age_days: Optional[float] = 15,
                         favorite: bool = False, **kwargs: Any) -> Dict[str, Any]:
    """Raw repeater record last heard age_days ago (None = never heard)."""
    return create_test_raw_contact(
        type_code=2,
        name=kwargs.pop('name', f"Repeater {prefix}"),
        prefix=prefix,
        flags=1 if favorite else 0,
        last_advert=days_ago(age_days) if age_days is not None else None,
        **kwargs,
    )


def create_test_companion(prefix: str = "a1", age_days: Optional[float] = 1,
                          favorite: bool = False, out_path: Any = "", **kwargs: Any) -> Dict[str, Any]:
    """Raw companion record last heard age_days ago (None = never heard)."""
    return create_test_raw_contact(
        type_code=1,
        name=kwargs.pop('name', f"Companion {prefix}"),
        prefix=prefix,
        flags=1 if favorite else 0,
        last_advert=days_ago(age_days) if age_days is not None else None,
        out_path=out_path,
        **kwargs,
    )
