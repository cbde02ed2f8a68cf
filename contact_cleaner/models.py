#!/usr/bin/env python3
"""
Data models for the MeshCore contact cleaner
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .enums import DeviceType, Recommendation


@dataclass
class Contact:
    """One exported contact with its derived classification.

    Everything except ``recommendation``, ``reason`` and ``selected`` is
    derived once from the raw record when a file is loaded. ``contact_id``
    is the position in the loaded list and is only stable for that load.
    """
    contact_id: int
    raw: Dict[str, Any]
    device_type: DeviceType
    display_name: str
    public_key: str
    is_favorite: bool
    last_seen: Optional[datetime]
    age_days: Optional[int]
    has_custom_path: bool
    recommendation: Recommendation = Recommendation.Keep
    reason: str = ''
    selected: bool = True

    @property
    def out_path(self) -> Any:
        """Raw outbound routing path descriptor (may be missing or empty)"""
        if not isinstance(self.raw, dict):
            return None
        return self.raw.get('out_path')

    @property
    def is_repeater(self) -> bool:
        return self.device_type is DeviceType.Repeater

    @property
    def suggested_remove(self) -> bool:
        return self.recommendation is Recommendation.Remove


@dataclass
class ContactSummary:
    """Counts shown next to the contact list"""
    total: int = 0
    keep: int = 0
    remove: int = 0

    def as_tuple(self):
        return (self.total, self.keep, self.remove)
