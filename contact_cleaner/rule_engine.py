#!/usr/bin/env python3
"""
Rule engine for contact recommendations
Decides per device type whether a contact should be kept or removed
"""

from datetime import datetime
from typing import Any, Dict, Tuple

from .enums import DeviceType, Recommendation
from .field_interpreters import (
    classify_type,
    compute_age_days,
    compute_last_seen,
    detect_favorite,
    display_name,
    has_custom_routing_path,
    public_key_of,
)
from .models import Contact
from .utils import get_non_negative_int

DEFAULT_STALE_AFTER_DAYS = 10


def build_contact(raw: Dict[str, Any], index: int, now: datetime) -> Contact:
    """Derive a Contact from one raw export record.

    The recommendation is left at its default; RuleEngine.apply fills it in.
    """
    fields = raw if isinstance(raw, dict) else {}
    last_seen = compute_last_seen(fields.get('last_advert'), fields.get('last_modified'))
    return Contact(
        contact_id=index,
        raw=raw,
        device_type=classify_type(fields.get('type')),
        display_name=display_name(fields),
        public_key=public_key_of(fields),
        is_favorite=detect_favorite(fields.get('flags')),
        last_seen=last_seen,
        age_days=compute_age_days(last_seen, now),
        has_custom_path=has_custom_routing_path(fields.get('out_path')),
    )


class RuleEngine:
    """Per-type keep/remove heuristics.

    Repeaters and companions are removed once they go stale, unless favorited
    (companions are also kept while they have a custom route). Sensors are
    only kept when favorited. Rooms and unknown types are always kept.
    """

    def __init__(self, cleaner):
        self.cleaner = cleaner
        self.logger = cleaner.logger
        self.stale_after_days = get_non_negative_int(
            cleaner.config, 'Cleaner', 'stale_after_days', DEFAULT_STALE_AFTER_DAYS, self.logger
        )

    def _is_stale(self, contact: Contact) -> bool:
        # Contacts never heard from are not stale
        return contact.age_days is not None and contact.age_days > self.stale_after_days

    def evaluate(self, contact: Contact) -> Tuple[Recommendation, str]:
        """Return (recommendation, reason) for one contact.

        Only derived fields are read, never ``selected``, so evaluating the
        same contact twice gives the same answer.
        """
        device_type = contact.device_type

        if device_type is DeviceType.Repeater:
            if self._is_stale(contact) and not contact.is_favorite:
                return (Recommendation.Remove,
                        f"Repeater: not heard for {contact.age_days} days, not favorite.")
            return Recommendation.Keep, "Repeater: recently heard or favorite."

        if device_type is DeviceType.Companion:
            if self._is_stale(contact) and not contact.is_favorite and not contact.has_custom_path:
                return (Recommendation.Remove,
                        f"Companion: not heard for {contact.age_days} days, not favorite, no custom path.")
            return Recommendation.Keep, "Companion: recently heard, favorite, or has custom path."

        if device_type is DeviceType.Sensor:
            if not contact.is_favorite:
                return Recommendation.Remove, "Sensor: not marked as favorite."
            return Recommendation.Keep, "Sensor: favorite sensors are kept."

        if device_type is DeviceType.Room:
            return Recommendation.Keep, "Room: rooms are never suggested for removal."

        return Recommendation.Keep, "Unknown type: kept by default."

    def apply(self, contact: Contact) -> Contact:
        """Evaluate a contact and store the result on it."""
        contact.recommendation, contact.reason = self.evaluate(contact)
        contact.selected = contact.recommendation is Recommendation.Keep
        self.logger.debug(
            f"Contact {contact.contact_id} ({contact.display_name}): "
            f"{contact.recommendation.value} - {contact.reason}"
        )
        return contact
