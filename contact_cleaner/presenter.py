#!/usr/bin/env python3
"""
Plain-text presenter for the contact list
Formats contacts and summary counts for the command line
"""

from datetime import datetime
from typing import List, Optional

from .models import Contact, ContactSummary
from .utils import format_age, short_public_key, truncate_string

NAME_WIDTH = 24


def format_last_seen(contact: Contact, tz=None) -> str:
    if contact.last_seen is None:
        return '-'
    last_seen: datetime = contact.last_seen.astimezone(tz) if tz else contact.last_seen.astimezone()
    return last_seen.strftime('%Y-%m-%d %H:%M')


def format_contact_row(contact: Contact, tz=None) -> str:
    """One line per contact: checkbox, id, name, type, key, flags, reason."""
    checkbox = '[x]' if contact.selected else '[ ]'
    name = truncate_string(contact.display_name, NAME_WIDTH)
    badges = []
    if contact.is_favorite:
        badges.append('favorite')
    if contact.suggested_remove:
        badges.append('remove')
    badge_text = f" ({', '.join(badges)})" if badges else ''

    return (
        f"{checkbox} {contact.contact_id:>4}  {name:<{NAME_WIDTH}}  "
        f"{contact.device_type.value:<9} {short_public_key(contact.public_key):<11}  "
        f"{format_last_seen(contact, tz)} ({format_age(contact.age_days)}){badge_text}\n"
        f"{'':>10}{contact.reason}"
    )


def format_summary(summary: ContactSummary) -> str:
    return f"Total: {summary.total}  Keep: {summary.keep}  Remove: {summary.remove}"


def render_report(contacts: List[Contact], summary: ContactSummary, tz=None,
                  status: Optional[str] = None) -> str:
    """Full text report: status line, contact rows, then summary counts."""
    lines = []
    if status:
        lines.append(status)
    if not contacts:
        lines.append('No contacts loaded yet.')
    else:
        lines.extend(format_contact_row(c, tz) for c in contacts)
    lines.append(format_summary(summary))
    return '\n'.join(lines)
