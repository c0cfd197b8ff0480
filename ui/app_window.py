import customtkinter as ctk
from database.db_manager import DatabaseManager
from services.category_service import CategoryService
from services.data_service import DataService
from services.entry_service import EntryService
from services.undo_service import UndoService
from services.view_state import ViewState
from ui.tabs.counter_tab import CounterTab
from ui.tabs.timeline_tab import TimelineTab
from ui.tabs.settings_tab import SettingsTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT


_TAB_NAMES = {"counter": "Counter", "timeline": "Timeline", "settings": "Settings"}

_REFRESH_SCOPES: dict[str, set[str]] = {
    "entry":    {"counter", "timeline"},
    "category": {"counter", "timeline", "settings"},
    "full":     {"counter", "timeline", "settings"},
}


class TkScheduler:
    """Adapts Tk's after/after_cancel to the undo service's scheduler interface."""

    def __init__(self, widget):
        self._widget = widget

    def schedule(self, delay_ms: int, callback):
        return self._widget.after(delay_ms, callback)

    def cancel(self, handle):
        self._widget.after_cancel(handle)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        category_service: CategoryService,
        entry_service: EntryService,
        undo_service: UndoService,
        data_service: DataService,
        view_state: ViewState,
        db: DatabaseManager | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._cat_svc = category_service
        self._entry_svc = entry_service
        self._undo_svc = undo_service
        self._data_svc = data_service
        self._state = view_state
        self._db = db

        self._undo_svc.set_scheduler(TkScheduler(self))

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._build_tabs()
        self.show_view(self._state.current_view)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self, command=self._on_tab_changed)
        self._tabview.grid(row=0, column=0, sticky="nsew", padx=8, pady=(0, 8))

        for tab_name in _TAB_NAMES.values():
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._counter_tab = CounterTab(
            self._tabview.tab("Counter"),
            category_service=self._cat_svc,
            entry_service=self._entry_svc,
            undo_service=self._undo_svc,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._counter_tab.grid(row=0, column=0, sticky="nsew")

        self._timeline_tab = TimelineTab(
            self._tabview.tab("Timeline"),
            category_service=self._cat_svc,
            entry_service=self._entry_svc,
            view_state=self._state,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._timeline_tab.grid(row=0, column=0, sticky="nsew")

        self._settings_tab = SettingsTab(
            self._tabview.tab("Settings"),
            category_service=self._cat_svc,
            data_service=self._data_svc,
            view_state=self._state,
            db=self._db,
            notify_refresh=self.notify_tabs_refresh,
        )
        self._settings_tab.grid(row=0, column=0, sticky="nsew")

    # ── Navigation ───────────────────────────────────────────────────────────
    def show_view(self, name: str):
        self._state.show_view(name)
        self._tabview.set(_TAB_NAMES[name])
        self.notify_tabs_refresh("full")

    def _on_tab_changed(self):
        selected = self._tabview.get()
        name = next(k for k, v in _TAB_NAMES.items() if v == selected)
        self._state.show_view(name)
        self.notify_tabs_refresh("full")

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if "counter"  in tabs: self._counter_tab.refresh()
        if "timeline" in tabs: self._timeline_tab.refresh()
        if "settings" in tabs: self._settings_tab.refresh()
