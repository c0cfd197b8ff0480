import logging
import uuid
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Callable
from database.entry_dao import EntryDAO
from models.category import Category
from models.entry import Entry
from services.category_service import CategoryService
from utils.date_helpers import day_bounds_ms, now_ms

logger = logging.getLogger(__name__)


@dataclass
class SummaryRow:
    category_id: str
    name: str
    color: str
    count: int


class EntryService:
    def __init__(self, entry_dao: EntryDAO, clock: Callable[[], int] = now_ms):
        self._dao = entry_dao
        self._clock = clock
        self._listeners: list[Callable[[Entry], None]] = []

    def subscribe(self, listener: Callable[[Entry], None]):
        """Register a callback invoked with every newly appended entry."""
        self._listeners.append(listener)

    def get_all(self) -> list[Entry]:
        return self._dao.get_all()

    def append(self, category_id: str) -> Entry:
        """Record one tap for category_id. The category is not checked for existence."""
        entries = self._dao.get_all()
        ts = self._clock()
        if entries and ts < entries[-1].timestamp:
            # wall clock stepped back; keep creation order non-decreasing
            ts = entries[-1].timestamp
        entry = Entry(id="ent_" + uuid.uuid4().hex, category_id=category_id, timestamp=ts)
        entries.append(entry)
        self._dao.save_all(entries)
        logger.debug("Appended entry %s for %s at %d", entry.id, category_id, ts)
        for listener in list(self._listeners):
            listener(entry)
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove the entry with entry_id. Returns False if nothing matched."""
        entries = self._dao.get_all()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self._dao.save_all(remaining)
        logger.debug("Deleted entry %s", entry_id)
        return True

    def query_day(self, day: date) -> list[Entry]:
        """All entries whose timestamp falls on the given local calendar day.

        Result order is not guaranteed; sort explicitly where it matters.
        """
        start, end = day_bounds_ms(day)
        return self._dao.get_between(start, end)

    @staticmethod
    def count_by_category(entries: list[Entry]) -> dict[str, int]:
        return dict(Counter(e.category_id for e in entries))

    @staticmethod
    def summarize(entries: list[Entry], category_map: dict[str, Category]) -> list[SummaryRow]:
        """Per-category counts in first-seen order, orphans resolved to the deleted label."""
        counts = EntryService.count_by_category(entries)
        return [
            SummaryRow(
                category_id=cat_id,
                name=CategoryService.resolve_name(cat_id, category_map),
                color=CategoryService.resolve_color(cat_id, category_map),
                count=count,
            )
            for cat_id, count in counts.items()
        ]
