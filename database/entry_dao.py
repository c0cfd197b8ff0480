import logging
from database.db_manager import DatabaseManager
from models.entry import Entry
from utils.constants import ENTRIES_KEY

logger = logging.getLogger(__name__)


class EntryDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Entry | None:
        try:
            return Entry.from_dict(row)
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Skipping unreadable entry record: %r", row)
            return None

    def get_all(self) -> list[Entry]:
        """Entries in creation (append) order."""
        rows = self._db.read_collection(ENTRIES_KEY)
        models = (self._row_to_model(r) for r in rows if isinstance(r, dict))
        return [e for e in models if e is not None]

    def get_between(self, start_ms: int, end_ms: int) -> list[Entry]:
        """Entries with start_ms <= timestamp <= end_ms (both bounds inclusive)."""
        return [e for e in self.get_all() if start_ms <= e.timestamp <= end_ms]

    def save_all(self, entries: list[Entry]):
        self._db.write_collection(ENTRIES_KEY, [e.to_dict() for e in entries])

    def clear(self):
        self._db.remove_collection(ENTRIES_KEY)
