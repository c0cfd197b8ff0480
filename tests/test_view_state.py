"""
Tests for ViewState navigation rules.
"""

from datetime import date, timedelta

import pytest

from services.view_state import ViewState
from utils.date_helpers import today


def test_defaults():
    state = ViewState()
    assert state.current_view == "counter"
    assert state.timeline_date == today()
    assert state.is_today()


def test_show_view():
    state = ViewState()
    state.show_view("timeline")
    assert state.current_view == "timeline"


def test_show_unknown_view_rejected():
    with pytest.raises(ValueError):
        ViewState().show_view("reports")


def test_next_day_blocked_on_today():
    state = ViewState()
    assert state.next_day() == today()


def test_prev_then_next():
    state = ViewState()
    state.prev_day()
    assert state.timeline_date == today() - timedelta(days=1)
    assert not state.is_today()
    state.next_day()
    assert state.is_today()


def test_go_to_future_day_clamped():
    state = ViewState()
    assert state.go_to_day(today() + timedelta(days=5)) == today()


def test_go_to_past_day():
    state = ViewState()
    assert state.go_to_day(date(2020, 1, 1)) == date(2020, 1, 1)


def test_edit_tracking_and_reset():
    state = ViewState()
    state.begin_edit("cat_1")
    assert state.editing_category_id == "cat_1"
    state.prev_day()
    state.reset()
    assert state.editing_category_id is None
    assert state.is_today()
