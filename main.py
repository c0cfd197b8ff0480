import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.category_dao import CategoryDAO
from database.entry_dao import EntryDAO

from services.category_service import CategoryService
from services.entry_service import EntryService
from services.undo_service import UndoService
from services.export_service import ExportService
from services.data_service import DataService
from services.view_state import ViewState

from ui.app_window import AppWindow
from utils.app_config import get_db_folder, get_db_path_override


def main():
    logging.basicConfig(
        level=os.environ.get("FRONT_COUNTER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open_default(
        db_folder=get_db_folder(), db_path=get_db_path_override()
    )

    # ── DAOs ─────────────────────────────────────────────────────────────────
    category_dao = CategoryDAO(db)
    entry_dao = EntryDAO(db)

    # ── Services ─────────────────────────────────────────────────────────────
    category_svc = CategoryService(category_dao)
    entry_svc = EntryService(entry_dao)
    undo_svc = UndoService(entry_svc)
    export_svc = ExportService()
    data_svc = DataService(category_dao, entry_dao, category_svc, export_svc, undo_svc)

    # ── First run ────────────────────────────────────────────────────────────
    category_svc.seed_if_empty()

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(db.get_setting("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        category_service=category_svc,
        entry_service=entry_svc,
        undo_service=undo_svc,
        data_service=data_svc,
        view_state=ViewState(),
        db=db,
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
