"""Tests for contact_cleaner.presenter."""

import pytz

from contact_cleaner.models import ContactSummary
from contact_cleaner.path_resolver import OVERRIDE_NOTE
from contact_cleaner.presenter import format_contact_row, format_summary, render_report
from contact_cleaner.rule_engine import build_contact
from tests.helpers import TEST_NOW, create_test_companion, create_test_repeater


class TestFormatContactRow:
    """Tests for format_contact_row()."""

    def test_removed_repeater(self, rule_engine):
        contact = rule_engine.apply(build_contact(create_test_repeater(prefix='7e', age_days=15), 4, TEST_NOW))
        row = format_contact_row(contact, pytz.UTC)
        assert row.startswith('[ ]    4  Repeater 7e')
        assert 'repeater' in row
        assert '7e7e7e7e7e…' in row
        assert '2025-05-17 12:00' in row
        assert '(15 days ago)' in row
        assert '(remove)' in row
        assert contact.reason in row

    def test_kept_favorite(self, rule_engine):
        contact = rule_engine.apply(build_contact(create_test_companion(favorite=True, age_days=None), 0, TEST_NOW))
        row = format_contact_row(contact, pytz.UTC)
        assert row.startswith('[x]')
        assert '(favorite)' in row
        assert 'never heard' in row
        assert 'remove' not in row.splitlines()[0]

    def test_override_note_shown(self, rule_engine, path_resolver):
        contacts = [
            rule_engine.apply(build_contact(create_test_repeater(prefix='7e'), 0, TEST_NOW)),
            rule_engine.apply(build_contact(create_test_companion(out_path='7e'), 1, TEST_NOW)),
        ]
        path_resolver.apply(contacts)
        assert OVERRIDE_NOTE in format_contact_row(contacts[0])

    def test_long_name_truncated(self, rule_engine):
        raw = create_test_companion(custom_name='A very long contact name that keeps going')
        row = format_contact_row(rule_engine.apply(build_contact(raw, 0, TEST_NOW)))
        assert 'A very long contact n...' in row


class TestRenderReport:
    """Tests for render_report() and format_summary()."""

    def test_summary_line(self):
        assert format_summary(ContactSummary(total=5, keep=3, remove=2)) == "Total: 5  Keep: 3  Remove: 2"

    def test_empty_report(self):
        report = render_report([], ContactSummary(), status="nothing here")
        assert report.splitlines() == ["nothing here", "No contacts loaded yet.", "Total: 0  Keep: 0  Remove: 0"]

    def test_report_lists_contacts(self, rule_engine):
        contacts = [rule_engine.apply(build_contact(create_test_companion(), i, TEST_NOW)) for i in range(2)]
        report = render_report(contacts, ContactSummary(total=2, keep=2, remove=0))
        assert report.count('[x]') == 2
        assert report.endswith("Total: 2  Keep: 2  Remove: 0")
