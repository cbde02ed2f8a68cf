#!/usr/bin/env python3
"""
Selection state for loaded contacts
Tracks which contacts the user has chosen to keep in the export
"""

from typing import Any, Dict, List, Optional

from .enums import Recommendation
from .models import Contact, ContactSummary


class SelectionState:
    """User-adjustable keep flags, seeded from the final recommendations.

    Toggles only ever touch ``selected``; recommendation and reason stay as
    the classifier left them.
    """

    def __init__(self, contacts: Optional[List[Contact]] = None):
        self.contacts: List[Contact] = []
        self._by_id: Dict[int, Contact] = {}
        if contacts is not None:
            self.initialize(contacts)

    def initialize(self, contacts: List[Contact]) -> None:
        """Replace the collection and select every contact recommended for keeping."""
        self.contacts = list(contacts)
        self._by_id = {c.contact_id: c for c in self.contacts}
        for contact in self.contacts:
            contact.selected = contact.recommendation is Recommendation.Keep

    def clear(self) -> None:
        self.contacts = []
        self._by_id = {}

    def get(self, contact_id: int) -> Optional[Contact]:
        return self._by_id.get(contact_id)

    def toggle(self, contact_id: int, value: bool) -> bool:
        """Set one contact's selected flag.

        Returns:
            bool: False if the id is unknown (nothing changes), True otherwise.
        """
        contact = self._by_id.get(contact_id)
        if contact is None:
            return False
        contact.selected = bool(value)
        return True

    def set_all(self, value: bool) -> None:
        for contact in self.contacts:
            contact.selected = bool(value)

    def snapshot(self) -> List[Dict[str, Any]]:
        """Raw records of all selected contacts, in load order."""
        return [c.raw for c in self.contacts if c.selected]

    def summary(self) -> ContactSummary:
        total = len(self.contacts)
        keep = sum(1 for c in self.contacts if c.selected)
        return ContactSummary(total=total, keep=keep, remove=total - keep)

    def __len__(self) -> int:
        return len(self.contacts)
