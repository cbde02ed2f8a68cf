#!/usr/bin/env python3
"""
Path dependency resolver
Keeps repeaters that kept contacts still route through, so removing stale
repeaters does not cut off contacts the user wants to keep.
"""

from typing import Dict, List, Set

from .enums import Recommendation
from .models import Contact
from .utils import get_non_negative_int

OVERRIDE_NOTE = "Repeater is used in routing paths of kept contacts."
DEFAULT_PREFIX_LENGTH = 2


class PathDependencyResolver:
    """Reference graph from kept contacts' out_path strings to repeater prefixes.

    Matching is textual: a repeater counts as used when its public key prefix
    occurs anywhere in a kept contact's out_path. Two repeaters sharing a
    prefix are therefore protected together.

    The pass is not transitive. The used-prefix set is built from the keep
    set as the rule engine left it, before any override, so a repeater kept
    by this pass does not in turn protect the repeaters in its own path.
    """

    def __init__(self, cleaner):
        self.cleaner = cleaner
        self.logger = cleaner.logger
        self.prefix_length = get_non_negative_int(
            cleaner.config, 'Cleaner', 'prefix_length', DEFAULT_PREFIX_LENGTH, self.logger
        )

        # {prefix: {contact_id of each kept contact whose path mentions it}}
        self.references: Dict[str, Set[int]] = {}

    def _prefix(self, contact: Contact) -> str:
        return contact.public_key[:self.prefix_length]

    def collect_used_prefixes(self, contacts: List[Contact]) -> Set[str]:
        """Build the reference graph and return the set of referenced prefixes.

        Args:
            contacts: Full contact list with rule engine recommendations applied.

        Returns:
            Set[str]: Repeater prefixes found in the path of at least one kept contact.
        """
        self.references = {}
        repeater_prefixes = {self._prefix(c) for c in contacts if c.is_repeater}
        repeater_prefixes.discard('')

        for keeper in contacts:
            if keeper.recommendation is not Recommendation.Keep:
                continue
            if not keeper.out_path:
                continue
            path_text = str(keeper.out_path)
            for prefix in repeater_prefixes:
                if prefix in path_text:
                    self.references.setdefault(prefix, set()).add(keeper.contact_id)

        return set(self.references)

    def get_referencing_contacts(self, prefix: str) -> Set[int]:
        """IDs of kept contacts whose path mentions prefix (from the last run)."""
        return set(self.references.get(prefix, ()))

    def apply(self, contacts: List[Contact]) -> List[Contact]:
        """Promote referenced repeaters from remove to keep.

        Only repeaters currently recommended for removal are touched. Their
        reason gets the override note appended and they are selected again.

        Returns:
            List[Contact]: The contacts that were overridden.
        """
        used_prefixes = self.collect_used_prefixes(contacts)
        overridden = []

        for contact in contacts:
            if not contact.is_repeater or contact.recommendation is not Recommendation.Remove:
                continue
            prefix = self._prefix(contact)
            if prefix and prefix in used_prefixes:
                contact.recommendation = Recommendation.Keep
                contact.selected = True
                contact.reason = f"{contact.reason} {OVERRIDE_NOTE}"
                overridden.append(contact)
                self.logger.debug(
                    f"Keeping repeater {contact.display_name} ({prefix}): referenced by "
                    f"{len(self.references[prefix])} kept contact(s)"
                )

        if overridden:
            self.logger.info(f"Kept {len(overridden)} repeater(s) used in routing paths of kept contacts")
        return overridden
