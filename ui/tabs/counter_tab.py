import customtkinter as ctk
from services.category_service import CategoryService
from services.entry_service import EntryService
from services.undo_service import UndoService
from utils.date_helpers import format_display_date, today

_COLUMNS = 2


class CounterTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        category_service: CategoryService,
        entry_service: EntryService,
        undo_service: UndoService,
        notify_refresh,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._cat_svc = category_service
        self._entry_svc = entry_service
        self._undo_svc = undo_service
        self._notify_refresh = notify_refresh

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_header()
        self._build_grid()
        self._undo_svc.on_change(self._update_undo_button)
        self._load()

    def refresh(self):
        self._load()

    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        self._header_var = ctk.StringVar()
        ctk.CTkLabel(
            bar, textvariable=self._header_var,
            font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(side="left", padx=12, pady=8)

        self._undo_btn = ctk.CTkButton(
            bar, text="↶ Undo", width=90,
            fg_color="#F44336", hover_color="#D32F2F",
            command=self._on_undo,
        )
        self._undo_btn.pack(side="right", padx=8, pady=6)

    def _build_grid(self):
        self._grid = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self._grid.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        for col in range(_COLUMNS):
            self._grid.grid_columnconfigure(col, weight=1, uniform="counter")

    def _load(self):
        for w in self._grid.winfo_children():
            w.destroy()

        categories = self._cat_svc.get_all()
        todays = self._entry_svc.query_day(today())
        counts = self._entry_svc.count_by_category(todays)
        self._header_var.set(f"{format_display_date(today())}  |  Total {len(todays)}")

        if not categories:
            ctk.CTkLabel(
                self._grid,
                text="No categories. Add one in Settings.",
                text_color="gray60",
            ).grid(row=0, column=0, columnspan=_COLUMNS, pady=40)

        for idx, cat in enumerate(categories):
            btn = ctk.CTkButton(
                self._grid,
                text=f"{cat.name}\n{counts.get(cat.id, 0)}",
                height=96, corner_radius=12,
                fg_color=cat.color, hover_color=cat.color,
                font=ctk.CTkFont(size=18, weight="bold"),
                command=lambda c=cat: self._on_tap(c.id),
            )
            btn.grid(row=idx // _COLUMNS, column=idx % _COLUMNS, sticky="ew", padx=6, pady=6)

        self._update_undo_button()

    def _on_tap(self, category_id: str):
        self._entry_svc.append(category_id)
        self._notify_refresh("entry")

    def _on_undo(self):
        if self._undo_svc.undo() is not None:
            self._notify_refresh("entry")
        else:
            self._update_undo_button()

    def _update_undo_button(self):
        state = "normal" if self._undo_svc.can_undo() else "disabled"
        self._undo_btn.configure(state=state)
