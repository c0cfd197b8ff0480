"""Whole-dataset operations: CSV export to disk and full reset."""
import logging
from datetime import date
from database.category_dao import CategoryDAO
from database.entry_dao import EntryDAO
from services.category_service import CategoryService
from services.export_service import ExportService
from services.undo_service import UndoService
from utils.date_helpers import today

logger = logging.getLogger(__name__)


class DataService:
    def __init__(
        self,
        category_dao: CategoryDAO,
        entry_dao: EntryDAO,
        category_service: CategoryService,
        export_service: ExportService,
        undo_service: UndoService | None = None,
    ):
        self._category_dao = category_dao
        self._entry_dao = entry_dao
        self._cat_svc = category_service
        self._export_svc = export_service
        self._undo_svc = undo_service

    # ── Export ────────────────────────────────────────────────────────────────

    def has_entries(self) -> bool:
        return bool(self._entry_dao.get_all())

    def export_csv_text(self) -> str:
        """Serialize every entry; raises EmptyExportError when there are none."""
        return self._export_svc.export(self._entry_dao.get_all(), self._cat_svc.get_map())

    def export_csv(self, path: str) -> int:
        """Write the CSV document to path. Returns the number of entries written."""
        entries = self._entry_dao.get_all()
        text = self._export_svc.export(entries, self._cat_svc.get_map())
        # newline="" keeps the bare "\n" row separators on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info("Exported %d entries to %s", len(entries), path)
        return len(entries)

    def suggested_export_filename(self, on: date | None = None) -> str:
        return self._export_svc.suggested_filename(on or today())

    # ── Reset ─────────────────────────────────────────────────────────────────

    def clear_all(self):
        """Drop every category and entry, then reinstall the default categories."""
        if self._undo_svc is not None:
            self._undo_svc.reset()
        self._category_dao.clear()
        self._entry_dao.clear()
        self._cat_svc.seed_if_empty()
        logger.warning("All data cleared")
