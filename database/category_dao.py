import logging
from database.db_manager import DatabaseManager
from models.category import Category
from utils.constants import CATEGORIES_KEY

logger = logging.getLogger(__name__)


class CategoryDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Category | None:
        try:
            return Category.from_dict(row)
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Skipping unreadable category record: %r", row)
            return None

    def get_all(self) -> list[Category]:
        """Stored categories in stored order (not sorted)."""
        rows = self._db.read_collection(CATEGORIES_KEY)
        models = (self._row_to_model(r) for r in rows if isinstance(r, dict))
        return [c for c in models if c is not None]

    def get_by_id(self, category_id: str) -> Category | None:
        return next((c for c in self.get_all() if c.id == category_id), None)

    def save_all(self, categories: list[Category]):
        self._db.write_collection(CATEGORIES_KEY, [c.to_dict() for c in categories])

    def clear(self):
        self._db.remove_collection(CATEGORIES_KEY)
