import customtkinter as ctk
from tkcalendar import Calendar
from tkinter import ttk
from datetime import date
from utils.date_helpers import today


class DayPickerButton(ctk.CTkButton):
    """Calendar button that pops up a month view and reports the picked day.

    Days after today are not selectable.
    """

    def __init__(self, master, get_day, on_pick, **kwargs):
        super().__init__(master, text="📅", width=32, command=self._open_popup, **kwargs)
        self._get_day = get_day      # callable → date
        self._on_pick = on_pick      # callable(date)
        self._popup: ctk.CTkToplevel | None = None

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        # Theme the calendar to match CTk appearance
        if ctk.get_appearance_mode() == "Dark":
            bg, fg = "#2b2b2b", "#ffffff"
        else:
            bg, fg = "#ffffff", "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")

        current: date = self._get_day()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            maxdate=today(),
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_selected(cal, popup))

        # Position below the button
        self.update_idletasks()
        x = self.winfo_rootx()
        y = self.winfo_rooty() + self.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")
        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_selected(self, cal, popup):
        picked = cal.selection_get()
        popup.destroy()
        self._popup = None
        if picked:
            self._on_pick(picked)

    def _maybe_close(self, popup):
        focused = popup.focus_get()
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
