"""
Tests for UndoService (single-slot undo window).
"""

from utils.constants import UNDO_WINDOW_MS


def test_idle_initially(undo):
    assert undo.can_undo() is False
    assert undo.pending is None
    assert undo.undo() is None


def test_append_arms(undo, entries, clock):
    entry = entries.append("cat_1")
    assert undo.can_undo() is True
    assert undo.pending.entry_id == entry.id
    assert undo.pending.armed_at == clock.now


def test_undo_deletes_and_disarms(undo, entries):
    entry = entries.append("cat_1")
    assert undo.undo() == entry
    assert entries.get_all() == []
    assert undo.can_undo() is False


def test_supersession_only_latest_undoable(undo, entries, clock):
    a = entries.append("cat_1")
    clock.advance(1_000)
    b = entries.append("cat_2")

    assert undo.undo() == b
    assert undo.undo() is None
    assert entries.get_all() == [a]


def test_expiry_by_clock(undo, entries, clock):
    a = entries.append("cat_1")
    clock.advance(UNDO_WINDOW_MS)
    assert undo.can_undo() is False
    assert undo.undo() is None
    assert entries.get_all() == [a]
    assert undo.pending is None


def test_just_inside_window(undo, entries, clock):
    entries.append("cat_1")
    clock.advance(UNDO_WINDOW_MS - 1)
    assert undo.can_undo() is True
    assert undo.undo() is not None


def test_scheduled_expiry_disarms(undo, entries, scheduler):
    a = entries.append("cat_1")
    scheduler.fire_all()
    assert undo.can_undo() is False
    assert undo.undo() is None
    assert entries.get_all() == [a]


def test_rearm_cancels_previous_timer(undo, entries, scheduler):
    entries.append("cat_1")
    first_handle = next(iter(scheduler.pending))
    entries.append("cat_2")
    assert first_handle in scheduler.cancelled
    assert len(scheduler.pending) == 1


def test_stale_callback_ignored(undo, entries, scheduler, clock):
    entries.append("cat_1")
    stale = scheduler.pending[next(iter(scheduler.pending))]
    clock.advance(1_000)
    b = entries.append("cat_2")
    # a scheduler that failed to cancel still must not disarm the newer slot
    stale()
    assert undo.can_undo() is True
    assert undo.pending.entry_id == b.id


def test_undo_cancels_timer(undo, entries, scheduler):
    entries.append("cat_1")
    handle = next(iter(scheduler.pending))
    undo.undo()
    assert handle in scheduler.cancelled
    assert scheduler.pending == {}


def test_expiry_idempotent(undo, entries, scheduler):
    entries.append("cat_1")
    callback = scheduler.pending[next(iter(scheduler.pending))]
    callback()
    callback()
    assert undo.pending is None


def test_same_millisecond_deletes_last_stored_match(undo, entries):
    a = entries.append("cat_1")
    b = entries.append("cat_2")
    assert a.timestamp == b.timestamp
    assert undo.undo() == b
    assert entries.get_all() == [a]


def test_armed_entry_already_deleted(undo, entries, clock):
    clock.advance(10)
    a = entries.append("cat_1")
    entries.delete(a.id)
    assert undo.undo() is None
    assert undo.can_undo() is False


def test_reset_disarms_without_delete(undo, entries):
    a = entries.append("cat_1")
    undo.reset()
    assert undo.can_undo() is False
    assert entries.get_all() == [a]


def test_on_change_notified(undo, entries, scheduler):
    calls = []
    undo.on_change(lambda: calls.append(undo.can_undo()))
    entries.append("cat_1")
    scheduler.fire_all()
    assert calls == [True, False]


def test_works_without_scheduler(entries, clock):
    from services.undo_service import UndoService

    svc = UndoService(entries, clock=clock)
    entries.append("cat_1")
    assert svc.can_undo() is True
    clock.advance(UNDO_WINDOW_MS + 1)
    assert svc.can_undo() is False
