import customtkinter as ctk
from tkinter import filedialog, messagebox

from database.db_manager import DatabaseManager
from services.category_service import CategoryService
from services.data_service import DataService
from services.errors import EmptyExportError
from services.view_state import ViewState
from ui.components.category_form import CategoryForm
from ui.components.confirm_dialog import ConfirmDialog
from utils.constants import DELETED_CATEGORY_LABEL


class SettingsTab(ctk.CTkFrame):
    """Settings tab: category management, CSV export, data reset, appearance."""

    def __init__(
        self,
        master,
        category_service: CategoryService,
        data_service: DataService,
        view_state: ViewState,
        notify_refresh,
        db: DatabaseManager | None = None,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._cat_svc = category_service
        self._data_svc = data_service
        self._state = view_state
        self._db = db
        self._notify_refresh = notify_refresh

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        scroll = ctk.CTkScrollableFrame(self, fg_color="transparent")
        scroll.grid(row=0, column=0, sticky="nsew")
        scroll.grid_columnconfigure(0, weight=1)

        self._build_category_section(scroll)
        self._build_data_section(scroll)
        if self._db:
            self._build_appearance_section(scroll)

    def refresh(self):
        self._load_categories()

    # ── Section 1: Categories ─────────────────────────────────────────────────

    def _build_category_section(self, parent):
        section = self._make_section(parent, "Categories", row=0)

        ctk.CTkButton(
            section, text="+ Add Category", command=self._open_add,
        ).grid(row=0, column=0, sticky="w", padx=8, pady=(0, 6))

        self._cat_list = ctk.CTkFrame(section, fg_color="transparent")
        self._cat_list.grid(row=1, column=0, sticky="ew", padx=4)
        self._cat_list.grid_columnconfigure(0, weight=1)
        self._load_categories()

    def _load_categories(self):
        for w in self._cat_list.winfo_children():
            w.destroy()

        categories = self._cat_svc.get_all()
        if not categories:
            ctk.CTkLabel(
                self._cat_list, text="No categories.", text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return
        for idx, cat in enumerate(categories):
            self._add_row(idx, cat)

    def _add_row(self, idx, cat):
        row = ctk.CTkFrame(self._cat_list, fg_color=("gray90", "gray20"), corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", padx=4, pady=3)
        row.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            row, text="", width=24, height=24, corner_radius=12, fg_color=cat.color,
        ).grid(row=0, column=0, padx=(10, 0), pady=8)
        ctk.CTkLabel(
            row, text=cat.name, font=ctk.CTkFont(size=13, weight="bold"), anchor="w",
        ).grid(row=0, column=1, padx=8, sticky="w")

        btn_frame = ctk.CTkFrame(row, fg_color="transparent")
        btn_frame.grid(row=0, column=2, padx=(4, 10), pady=6)
        ctk.CTkButton(
            btn_frame, text="Edit", width=60, height=26,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda c=cat: self._open_edit(c),
        ).pack(side="left", padx=(0, 4))
        ctk.CTkButton(
            btn_frame, text="Delete", width=65, height=26,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda c=cat: self._on_delete(c),
        ).pack(side="left")

    def _open_add(self):
        self._state.begin_edit(None)
        form = CategoryForm(self.winfo_toplevel(), self._cat_svc)
        self.wait_window(form)
        self._state.end_edit()
        if form.saved:
            self._notify_refresh("category")

    def _open_edit(self, cat):
        self._state.begin_edit(cat.id)
        form = CategoryForm(self.winfo_toplevel(), self._cat_svc, category=cat)
        self.wait_window(form)
        self._state.end_edit()
        if form.saved:
            self._notify_refresh("category")

    def _on_delete(self, cat):
        dlg = ConfirmDialog(
            self.winfo_toplevel(),
            title="Delete Category",
            message=(
                f"Delete '{cat.name}'?\n"
                f"Existing entries are kept and shown as {DELETED_CATEGORY_LABEL}."
            ),
        )
        if dlg.result:
            self._cat_svc.delete(cat.id)
            self._notify_refresh("category")

    # ── Section 2: Data ───────────────────────────────────────────────────────

    def _build_data_section(self, parent):
        section = self._make_section(parent, "Data", row=1)

        self._io_status_var = ctk.StringVar()

        btn_frame = ctk.CTkFrame(section, fg_color="transparent")
        btn_frame.grid(row=0, column=0, sticky="w", padx=8, pady=6)

        ctk.CTkButton(
            btn_frame, text="Export CSV", width=130,
            command=self._export_csv,
        ).pack(side="left", padx=4)

        ctk.CTkButton(
            btn_frame, text="Reset All Data", width=130,
            fg_color="#F44336", hover_color="#D32F2F",
            command=self._clear_all,
        ).pack(side="left", padx=4)

        ctk.CTkLabel(
            section,
            textvariable=self._io_status_var,
            text_color="#4CAF50",
            font=ctk.CTkFont(size=11),
            anchor="w",
        ).grid(row=1, column=0, sticky="w", padx=8, pady=(0, 6))

    def _export_csv(self):
        if not self._data_svc.has_entries():
            messagebox.showinfo("Export", "There is no data to export.")
            return
        path = filedialog.asksaveasfilename(
            title="Export CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
            initialfile=self._data_svc.suggested_export_filename(),
        )
        if not path:
            return
        try:
            rows = self._data_svc.export_csv(path)
            self._io_status_var.set(f"Exported {rows} entries to {path}")
        except (EmptyExportError, OSError) as e:
            messagebox.showerror("Export Failed", str(e))

    def _clear_all(self):
        confirmed = ConfirmDialog.ask_twice(
            self.winfo_toplevel(),
            title="Reset All Data",
            first="Delete all categories and entries? This cannot be undone.",
            second="Are you really sure?",
        )
        if not confirmed:
            return
        self._data_svc.clear_all()
        self._state.reset()
        self._io_status_var.set("All data was reset.")
        self._notify_refresh("full")

    # ── Section 3: Appearance ─────────────────────────────────────────────────

    def _build_appearance_section(self, parent):
        section = self._make_section(parent, "Appearance", row=2)

        appearance_raw = self._db.get_setting("appearance_mode", "system")
        self._appearance_var = ctk.StringVar(value=appearance_raw.title())
        ctk.CTkComboBox(
            section,
            values=["System", "Light", "Dark"],
            variable=self._appearance_var,
            width=180,
            state="readonly",
            command=self._save_appearance,
        ).grid(row=0, column=0, padx=8, pady=6, sticky="w")

    def _save_appearance(self, value: str):
        key = value.lower()
        self._db.set_setting("appearance_mode", key)
        ctk.set_appearance_mode(key)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _make_section(self, parent, title: str, row: int) -> ctk.CTkFrame:
        """Create a labelled card section and return its inner frame."""
        outer = ctk.CTkFrame(parent, corner_radius=8)
        outer.grid(row=row, column=0, sticky="ew", padx=12, pady=8)
        outer.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            outer,
            text=title,
            font=ctk.CTkFont(size=14, weight="bold"),
            anchor="w",
        ).grid(row=0, column=0, sticky="w", padx=12, pady=(10, 4))

        inner = ctk.CTkFrame(outer, fg_color="transparent")
        inner.grid(row=1, column=0, sticky="ew", padx=4, pady=(0, 8))
        inner.grid_columnconfigure(0, weight=1)
        return inner
