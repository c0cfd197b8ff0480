import logging
import uuid
from database.category_dao import CategoryDAO
from models.category import Category
from services.errors import ValidationError
from utils.constants import (
    COLOR_PALETTE, DEFAULT_CATEGORIES, DELETED_CATEGORY_COLOR, DELETED_CATEGORY_LABEL,
)

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return "cat_" + uuid.uuid4().hex


class CategoryService:
    def __init__(self, category_dao: CategoryDAO):
        self._dao = category_dao

    def get_all(self) -> list[Category]:
        """Categories in display order (order ascending)."""
        return sorted(self._dao.get_all(), key=lambda c: c.order)

    def get_by_id(self, category_id: str) -> Category | None:
        return self._dao.get_by_id(category_id)

    def get_map(self) -> dict[str, Category]:
        return {c.id: c for c in self._dao.get_all()}

    def add(self, name: str, color: str) -> Category:
        name = self._validate(name, color)
        categories = self._dao.get_all()
        cat = Category(id=_new_id(), name=name, color=color, order=len(categories))
        categories.append(cat)
        self._dao.save_all(categories)
        logger.info("Added category %s (%s)", cat.id, cat.name)
        return cat

    def update(self, category_id: str, name: str, color: str) -> Category | None:
        """Overwrite name/color; order is kept. Unknown ids are ignored.

        Input is validated before the id is looked up, so a blank name raises
        ValidationError even when category_id is unknown.
        """
        name = self._validate(name, color)
        categories = self._dao.get_all()
        cat = next((c for c in categories if c.id == category_id), None)
        if cat is None:
            return None
        cat.name = name
        cat.color = color
        self._dao.save_all(categories)
        return cat

    def delete(self, category_id: str):
        """Remove the category. Entries that reference it are left untouched."""
        categories = self._dao.get_all()
        remaining = [c for c in categories if c.id != category_id]
        if len(remaining) == len(categories):
            return
        self._dao.save_all(remaining)
        logger.info("Deleted category %s", category_id)

    def seed_if_empty(self) -> bool:
        """Install DEFAULT_CATEGORIES when there are none. Returns True if seeded."""
        if self._dao.get_all():
            return False
        self._dao.save_all([
            Category(id=_new_id(), name=d["name"], color=d["color"], order=i)
            for i, d in enumerate(DEFAULT_CATEGORIES)
        ])
        logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))
        return True

    # ── Weak-reference resolution ────────────────────────────────────────────

    @staticmethod
    def resolve_name(category_id: str, category_map: dict[str, Category]) -> str:
        cat = category_map.get(category_id)
        return cat.name if cat else DELETED_CATEGORY_LABEL

    @staticmethod
    def resolve_color(category_id: str, category_map: dict[str, Category]) -> str:
        cat = category_map.get(category_id)
        return cat.color if cat else DELETED_CATEGORY_COLOR

    @staticmethod
    def _validate(name: str, color: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty.")
        if color not in COLOR_PALETTE:
            raise ValidationError(f"Color {color!r} is not in the palette.")
        return name
