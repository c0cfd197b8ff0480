from datetime import date, datetime, time, timedelta
import time as _time
from utils.constants import DAY_MS, EXPORT_TIMESTAMP_FORMAT

# ── Display formats ───────────────────────────────────────────────────────────

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def today() -> date:
    return date.today()


def now_ms() -> int:
    """Wall-clock milliseconds since the epoch."""
    return _time.time_ns() // 1_000_000


def local_midnight_ms(d: date) -> int:
    """Epoch milliseconds of 00:00:00.000 local time on the given calendar day."""
    midnight = datetime.combine(d, time.min).astimezone()
    return int(midnight.timestamp() * 1000)


def day_bounds_ms(d: date) -> tuple[int, int]:
    """Return the closed interval (start_ms, end_ms) covering one local calendar day.

    The end bound is the last millisecond of the day. On days with a DST shift
    the next midnight is used instead of a fixed 24h, so the window never
    overlaps the following day.
    """
    start = local_midnight_ms(d)
    next_start = local_midnight_ms(d + timedelta(days=1))
    if next_start <= start:
        next_start = start + DAY_MS
    return start, next_start - 1


def from_ms(ts: int) -> datetime:
    """Local, timezone-aware datetime for an epoch-millisecond timestamp."""
    return datetime.fromtimestamp(ts / 1000).astimezone()


def format_time(ts: int) -> str:
    return from_ms(ts).strftime("%H:%M")


def format_export_timestamp(ts: int) -> str:
    return from_ms(ts).strftime(EXPORT_TIMESTAMP_FORMAT)


def format_display_date(d: date) -> str:
    """e.g. '2026/10/17 (Sat)'."""
    return f"{d.strftime('%Y/%m/%d')} ({WEEKDAY_NAMES[d.weekday()]})"


def format_file_date(d: date) -> str:
    return d.strftime("%Y%m%d")


def is_today(d: date) -> bool:
    return d == today()


def clamp_to_today(d: date) -> date:
    t = today()
    return t if d > t else d
