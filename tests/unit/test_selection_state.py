#!/usr/bin/env python3
"""
Unit tests for SelectionState
"""

import pytest

from contact_cleaner.enums import Recommendation
from contact_cleaner.rule_engine import build_contact
from contact_cleaner.selection_state import SelectionState
from tests.helpers import (
    TEST_NOW,
    create_test_companion,
    create_test_raw_contact,
    create_test_repeater,
)


@pytest.fixture
def state(rule_engine):
    raws = [
        create_test_repeater(prefix='7e', age_days=15),            # remove
        create_test_companion(prefix='a1', age_days=1),            # keep
        create_test_raw_contact(type_code=3, prefix='b2'),         # keep
        create_test_raw_contact(type_code=4, prefix='c3'),         # remove
    ]
    contacts = [rule_engine.apply(build_contact(raw, i, TEST_NOW)) for i, raw in enumerate(raws)]
    return SelectionState(contacts)


@pytest.mark.unit
class TestSelectionState:
    """Test seeding, toggling and snapshots."""

    def test_initialize_from_recommendation(self, state):
        assert [c.selected for c in state.contacts] == [False, True, True, False]

    def test_initialize_resets_user_changes(self, state):
        state.set_all(True)
        state.initialize(state.contacts)
        assert [c.selected for c in state.contacts] == [False, True, True, False]

    def test_toggle_one(self, state):
        assert state.toggle(0, True) is True
        assert state.get(0).selected is True
        assert [c.selected for c in state.contacts[1:]] == [True, True, False]

    def test_toggle_does_not_touch_recommendation(self, state):
        reason = state.get(3).reason
        state.toggle(3, True)
        assert state.get(3).recommendation is Recommendation.Remove
        assert state.get(3).reason == reason

    def test_toggle_unknown_id_is_noop(self, state):
        before = [c.selected for c in state.contacts]
        assert state.toggle(99, True) is False
        assert state.toggle(-1, False) is False
        assert [c.selected for c in state.contacts] == before

    def test_set_all(self, state):
        state.set_all(False)
        assert not any(c.selected for c in state.contacts)
        state.set_all(True)
        assert all(c.selected for c in state.contacts)

    def test_snapshot_preserves_order(self, state):
        state.toggle(3, True)
        snapshot = state.snapshot()
        assert snapshot == [state.contacts[1].raw, state.contacts[2].raw, state.contacts[3].raw]
        assert snapshot[0] is state.contacts[1].raw

    def test_summary(self, state):
        summary = state.summary()
        assert summary.as_tuple() == (4, 2, 2)

    def test_empty_state(self):
        state = SelectionState()
        assert len(state) == 0
        assert state.snapshot() == []
        assert state.summary().as_tuple() == (0, 0, 0)

    def test_clear(self, state):
        state.clear()
        assert state.contacts == []
        assert state.get(0) is None
