#!/usr/bin/env python3
"""
Enumerations for MeshCore contact classification
"""

from enum import Enum
from typing import Any


class DeviceType(Enum):
    """MeshCore advertisement type codes mapped to contact categories"""
    Companion = 'companion'
    Repeater = 'repeater'
    Room = 'room'
    Sensor = 'sensor'
    Unknown = 'unknown'

    @classmethod
    def from_code(cls, code: Any) -> 'DeviceType':
        """Map a raw type code to a category. Never raises."""
        # bool is an int subclass; a JSON true is not a type code
        if isinstance(code, bool) or not isinstance(code, (int, float)):
            return cls.Unknown
        return _TYPE_CODES.get(code, cls.Unknown)


# Advert type codes as written by the MeshCore app export
_TYPE_CODES = {
    1: DeviceType.Companion,
    2: DeviceType.Repeater,
    3: DeviceType.Room,
    4: DeviceType.Sensor,
}


class Recommendation(Enum):
    """Suggested action for a contact"""
    Keep = 'keep'
    Remove = 'remove'
