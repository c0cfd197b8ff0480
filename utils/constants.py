APP_NAME = "Front Counter"
APP_WIDTH = 900
APP_HEIGHT = 680
DB_FILE = "front_counter.db"

CATEGORIES_KEY = "fc_categories"
ENTRIES_KEY = "fc_entries"

UNDO_WINDOW_MS = 30_000
DAY_MS = 86_400_000

DELETED_CATEGORY_LABEL = "(deleted)"
DELETED_CATEGORY_COLOR = "#CCCCCC"

COLOR_PALETTE = [
    "#4CAF50", "#2196F3", "#FF9800", "#E91E63",
    "#9C27B0", "#00BCD4", "#FF5722", "#607D8B",
    "#795548", "#3F51B5",
]

DEFAULT_CATEGORIES = [
    {"name": "Inquiry",     "color": "#4CAF50"},
    {"name": "Reservation", "color": "#2196F3"},
    {"name": "Complaint",   "color": "#FF9800"},
    {"name": "Other",       "color": "#607D8B"},
]

EXPORT_HEADER = ["timestamp_display", "category_name", "category_id"]
EXPORT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M"
EXPORT_FILENAME_PREFIX = "front_counter_"

VIEWS = ["counter", "timeline", "settings"]
