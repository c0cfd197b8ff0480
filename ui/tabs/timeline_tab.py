import customtkinter as ctk
import tkinter as tk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from services.category_service import CategoryService
from services.entry_service import EntryService, SummaryRow
from services.view_state import ViewState
from ui.components.confirm_dialog import ConfirmDialog
from ui.components.day_picker import DayPickerButton
from utils.date_helpers import format_display_date, format_time


class TimelineTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        category_service: CategoryService,
        entry_service: EntryService,
        view_state: ViewState,
        notify_refresh,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._cat_svc = category_service
        self._entry_svc = entry_service
        self._state = view_state
        self._notify_refresh = notify_refresh

        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(1, weight=1)

        self._build_day_nav()
        self._build_list()
        self._build_summary()
        self._load()

    def refresh(self):
        self._load()

    def _build_day_nav(self):
        nav = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        nav.grid(row=0, column=0, columnspan=2, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkButton(nav, text="◀", width=28, command=self._prev_day).pack(side="left", padx=(12, 0), pady=6)
        self._date_var = ctk.StringVar()
        ctk.CTkLabel(
            nav, textvariable=self._date_var,
            font=ctk.CTkFont(size=15, weight="bold"), width=170, anchor="center",
        ).pack(side="left", padx=8)
        self._next_btn = ctk.CTkButton(nav, text="▶", width=28, command=self._next_day)
        self._next_btn.pack(side="left")
        DayPickerButton(
            nav, get_day=lambda: self._state.timeline_date, on_pick=self._go_to_day,
        ).pack(side="left", padx=8)

    def _prev_day(self):
        self._state.prev_day()
        self._load()

    def _next_day(self):
        self._state.next_day()
        self._load()

    def _go_to_day(self, d):
        self._state.go_to_day(d)
        self._load()

    def _build_list(self):
        self._list = ctk.CTkScrollableFrame(self, label_text="Entries")
        self._list.grid(row=1, column=0, sticky="nsew", padx=(8, 4), pady=8)
        self._list.grid_columnconfigure(1, weight=1)

    def _build_summary(self):
        outer = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=8)
        outer.grid(row=1, column=1, sticky="nsew", padx=(4, 8), pady=8)
        ctk.CTkLabel(
            outer, text="Summary",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._summary_frame = ctk.CTkFrame(outer, fg_color="transparent")
        self._summary_frame.pack(fill="x", padx=8, pady=(4, 0))
        self._fig = Figure(figsize=(3, 3), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=outer)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 10))

    def _load(self):
        day = self._state.timeline_date
        self._date_var.set(format_display_date(day))
        self._next_btn.configure(state="disabled" if self._state.is_today() else "normal")

        entries = sorted(self._entry_svc.query_day(day), key=lambda e: e.timestamp, reverse=True)
        cat_map = self._cat_svc.get_map()

        for w in self._list.winfo_children():
            w.destroy()
        if not entries:
            ctk.CTkLabel(self._list, text="No entries.", text_color="gray60").grid(
                row=0, column=0, columnspan=3, pady=40
            )
        for idx, entry in enumerate(entries):
            tk.Label(
                self._list, bg=self._cat_svc.resolve_color(entry.category_id, cat_map), width=2,
            ).grid(row=idx, column=0, padx=(4, 6), pady=3, sticky="ns")
            ctk.CTkLabel(
                self._list,
                text=f"{format_time(entry.timestamp)}   {self._cat_svc.resolve_name(entry.category_id, cat_map)}",
                anchor="w",
            ).grid(row=idx, column=1, sticky="ew")
            ctk.CTkButton(
                self._list, text="Delete", width=60, height=24,
                fg_color="transparent", border_width=1,
                text_color=("gray10", "gray90"),
                command=lambda e=entry: self._on_delete(e.id),
            ).grid(row=idx, column=2, padx=4, pady=3)

        summary = self._entry_svc.summarize(entries, cat_map)
        for w in self._summary_frame.winfo_children():
            w.destroy()
        for row in summary:
            line = ctk.CTkFrame(self._summary_frame, fg_color="transparent")
            line.pack(fill="x", pady=1)
            tk.Label(line, bg=row.color, width=2).pack(side="left", padx=(0, 4))
            ctk.CTkLabel(
                line, text=f"{row.name}: {row.count}",
                anchor="w", font=ctk.CTkFont(size=11),
            ).pack(side="left")

        self.after(50, lambda s=summary: self._draw_chart(s))

    def _draw_chart(self, summary: list[SummaryRow]):
        ax = self._ax
        ax.clear()
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        fg = "#aaaaaa" if is_dark else "#444444"
        self._fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)
        ax.tick_params(colors=fg, labelsize=8)
        for spine in ax.spines.values():
            spine.set_edgecolor(fg)

        if not summary:
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            self._mpl.draw_idle()
            return

        x = list(range(len(summary)))
        ax.bar(x, [r.count for r in summary], color=[r.color for r in summary])
        ax.set_xticks(x)
        ax.set_xticklabels([r.name for r in summary], rotation=30, ha="right")
        ax.yaxis.get_major_locator().set_params(integer=True)
        self._mpl.draw_idle()

    def _on_delete(self, entry_id: str):
        dlg = ConfirmDialog(
            self.winfo_toplevel(),
            title="Delete Entry",
            message="Delete this entry?",
        )
        if dlg.result:
            self._entry_svc.delete(entry_id)
            self._notify_refresh("entry")
