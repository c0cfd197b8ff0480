from dataclasses import dataclass, field
from datetime import date, timedelta
from utils.constants import VIEWS
from utils.date_helpers import clamp_to_today, today


@dataclass
class ViewState:
    """Presentation state shared by the tabs: active view and timeline day cursor.

    The timeline cursor never moves past today.
    """
    current_view: str = "counter"
    timeline_date: date = field(default_factory=today)
    editing_category_id: str | None = None

    def show_view(self, name: str):
        if name not in VIEWS:
            raise ValueError(f"Unknown view: {name}")
        self.current_view = name

    def prev_day(self) -> date:
        self.timeline_date -= timedelta(days=1)
        return self.timeline_date

    def next_day(self) -> date:
        if not self.is_today():
            self.timeline_date = clamp_to_today(self.timeline_date + timedelta(days=1))
        return self.timeline_date

    def go_to_day(self, d: date) -> date:
        self.timeline_date = clamp_to_today(d)
        return self.timeline_date

    def is_today(self) -> bool:
        return self.timeline_date >= today()

    def begin_edit(self, category_id: str | None):
        self.editing_category_id = category_id

    def end_edit(self):
        self.editing_category_id = None

    def reset(self):
        """Back to today's timeline; used after a full data reset."""
        self.timeline_date = today()
        self.editing_category_id = None
