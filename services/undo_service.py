"""Single-slot undo for the most recent tap.

The slot is either idle or holds one PendingUndo. Every append re-arms it, so
only the latest entry can ever be undone, and only within UNDO_WINDOW_MS of
being armed. Expiry is driven two ways: can_undo()/undo() compare against the
clock directly, and an optional scheduler fires a callback to disarm the slot
(so a UI can grey out its button). Each arming bumps a generation counter and a
callback from an older generation is ignored.

The undo target is found by the armed entry's timestamp, taking the last entry
in stored order with that exact timestamp. Two taps in the same millisecond
share a timestamp, so the deleted entry is then the later-stored of the two.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable
from models.entry import Entry
from services.entry_service import EntryService
from utils.constants import UNDO_WINDOW_MS
from utils.date_helpers import now_ms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingUndo:
    entry_id: str
    timestamp: int
    armed_at: int


class UndoService:
    def __init__(
        self,
        entry_service: EntryService,
        clock: Callable[[], int] = now_ms,
        scheduler=None,     # object with schedule(delay_ms, callback) -> handle, cancel(handle)
        window_ms: int = UNDO_WINDOW_MS,
    ):
        self._entries = entry_service
        self._clock = clock
        self._scheduler = scheduler
        self._window_ms = window_ms
        self._pending: PendingUndo | None = None
        self._generation = 0
        self._handle: Any = None
        self._listeners: list[Callable[[], None]] = []
        entry_service.subscribe(self._arm)

    @property
    def pending(self) -> PendingUndo | None:
        return self._pending

    def on_change(self, listener: Callable[[], None]):
        """Register a callback invoked whenever the slot is armed or disarmed."""
        self._listeners.append(listener)

    def set_scheduler(self, scheduler):
        self._cancel_timer()
        self._scheduler = scheduler

    def can_undo(self) -> bool:
        return (
            self._pending is not None
            and self._clock() - self._pending.armed_at < self._window_ms
        )

    def undo(self) -> Entry | None:
        """Delete the armed entry. Returns it, or None when there is nothing to undo."""
        if not self.can_undo():
            if self._pending is not None:
                self._disarm()
            return None
        pending = self._pending
        matches = [e for e in self._entries.get_all() if e.timestamp == pending.timestamp]
        target = matches[-1] if matches else None
        if target is not None:
            self._entries.delete(target.id)
            logger.info("Undid entry %s", target.id)
        self._disarm()
        return target

    def reset(self):
        """Disarm without deleting anything."""
        if self._pending is not None:
            self._disarm()

    # ── Internals ────────────────────────────────────────────────────────────

    def _arm(self, entry: Entry):
        self._cancel_timer()
        self._generation += 1
        self._pending = PendingUndo(entry.id, entry.timestamp, self._clock())
        if self._scheduler is not None:
            generation = self._generation
            self._handle = self._scheduler.schedule(
                self._window_ms, lambda: self._expire(generation)
            )
        self._notify()

    def _expire(self, generation: int):
        if generation != self._generation or self._pending is None:
            return
        self._handle = None
        logger.debug("Undo window expired for %s", self._pending.entry_id)
        self._pending = None
        self._notify()

    def _disarm(self):
        self._cancel_timer()
        self._generation += 1
        self._pending = None
        self._notify()

    def _cancel_timer(self):
        if self._handle is not None and self._scheduler is not None:
            self._scheduler.cancel(self._handle)
        self._handle = None

    def _notify(self):
        for listener in list(self._listeners):
            listener()
