"""
core/dates.py
────────────────────────────────────────────────────────────────────────
Spanish-locale calendar helpers for the meal diary.

* display labels (`format_date`, `get_day_name`, …) never raise: bad input
  yields a fixed placeholder string
* weeks start on Monday
* patterns use date-fns / Unicode tokens, e.g. "dd MMM yyyy", "EEEE",
  "d MMM yyyy, HH:mm"; literal text goes in single quotes
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Union

from core.messages import INVALID_DATE, INVALID_DAY

_LOG = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

DEFAULT_PATTERN = "dd MMM yyyy"

# ─── locale tables (index 0 = January / Monday) ──────────────────────
MONTHS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
    "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)
MONTHS_ABBR = (
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sep", "oct", "nov", "dic",
)
WEEKDAYS = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")
WEEKDAYS_ABBR = ("lun", "mar", "mié", "jue", "vie", "sáb", "dom")

_TOKEN = re.compile(r"'(?:[^']|'')*'|yyyy|yy|MMMM|MMM|MM|M|dd|d|EEEE|EEE|HH|H|mm|m|ss|s")


class WeekRange(NamedTuple):
    start: datetime
    end: datetime


class DayBounds(NamedTuple):
    start: datetime
    end: datetime


# ──────────────────────────────────────────────────────────────────────
#  Parsing / formatting primitives
# ──────────────────────────────────────────────────────────────────────
def parse_date(value: object) -> date | datetime | None:
    """Date, datetime or ISO-8601 string → date/datetime; None if invalid."""
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        _LOG.debug("unparseable date %r", value)
        return None


def _render(d: date | datetime, pattern: str) -> str:
    hour = getattr(d, "hour", 0)
    minute = getattr(d, "minute", 0)
    second = getattr(d, "second", 0)

    def token(m: re.Match[str]) -> str:
        t = m.group(0)
        if t.startswith("'"):
            return t[1:-1].replace("''", "'")
        return {
            "yyyy": f"{d.year:04d}",
            "yy": f"{d.year % 100:02d}",
            "MMMM": MONTHS[d.month - 1],
            "MMM": MONTHS_ABBR[d.month - 1],
            "MM": f"{d.month:02d}",
            "M": str(d.month),
            "dd": f"{d.day:02d}",
            "d": str(d.day),
            "EEEE": WEEKDAYS[d.weekday()],
            "EEE": WEEKDAYS_ABBR[d.weekday()],
            "HH": f"{hour:02d}",
            "H": str(hour),
            "mm": f"{minute:02d}",
            "m": str(minute),
            "ss": f"{second:02d}",
            "s": str(second),
        }[t]

    return _TOKEN.sub(token, pattern)


def _require(value: DateLike) -> date | datetime:
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"invalid date: {value!r}")
    return parsed


def _calendar_day(d: date | datetime) -> date:
    return d.date() if isinstance(d, datetime) else d


# ──────────────────────────────────────────────────────────────────────
#  Labels
# ──────────────────────────────────────────────────────────────────────
def format_date(value: DateLike, pattern: str = DEFAULT_PATTERN) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return _render(parsed, pattern)


def get_day_name(value: DateLike, abbreviated: bool = False) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DAY
    return _render(parsed, "EEE" if abbreviated else "EEEE")


def get_month_and_year(value: DateLike) -> str:
    return format_date(value, "MMMM yyyy")


def get_week_range_text(value: DateLike) -> str:
    """e.g. 2024-03-06 → "4-10 mar, 2024"."""
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    try:
        start, end = get_week_range(parsed)
    except ValueError:
        return INVALID_DATE
    return f"{_render(start, 'd')}-{_render(end, 'd MMM, yyyy')}"


def format_date_to_iso(value: DateLike) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return _calendar_day(parsed).isoformat()


# ──────────────────────────────────────────────────────────────────────
#  Ranges (these raise ValueError on bad input: there is no sane
#  placeholder for a list of days)
# ──────────────────────────────────────────────────────────────────────
def get_day_bounds(value: DateLike) -> DayBounds:
    parsed = _require(value)
    tz = parsed.tzinfo if isinstance(parsed, datetime) else None
    day = _calendar_day(parsed)
    return DayBounds(
        start=datetime.combine(day, time.min, tzinfo=tz),
        end=datetime.combine(day, time.max, tzinfo=tz),
    )


def get_week_range(value: DateLike) -> WeekRange:
    parsed = _require(value)
    tz = parsed.tzinfo if isinstance(parsed, datetime) else None
    try:
        monday = _calendar_day(parsed) - timedelta(days=parsed.weekday())
        sunday = monday + timedelta(days=6)
    except OverflowError:
        raise ValueError(f"week of {value!r} is outside the calendar") from None
    return WeekRange(
        start=datetime.combine(monday, time.min, tzinfo=tz),
        end=datetime.combine(sunday, time.max, tzinfo=tz),
    )


def get_week_days(value: DateLike) -> list[date]:
    monday = get_week_range(value).start.date()
    return [monday + timedelta(days=i) for i in range(7)]


# ──────────────────────────────────────────────────────────────────────
#  Navigation
# ──────────────────────────────────────────────────────────────────────
class WeekNavigation(NamedTuple):
    go_to_previous_week: Callable[[], None]
    go_to_next_week: Callable[[], None]
    go_to_current_week: Callable[[], None]


class DayNavigation(NamedTuple):
    go_to_previous_day: Callable[[], None]
    go_to_next_day: Callable[[], None]
    go_to_today: Callable[[], None]


def week_navigation(
    current: date | datetime,
    set_week: Callable[[date | datetime], object],
    now: Callable[[], datetime] = datetime.now,
) -> WeekNavigation:
    step = timedelta(weeks=1)
    return WeekNavigation(
        go_to_previous_week=lambda: set_week(current - step),
        go_to_next_week=lambda: set_week(current + step),
        go_to_current_week=lambda: set_week(now()),
    )


def day_navigation(
    current: date | datetime,
    set_day: Callable[[date | datetime], object],
    now: Callable[[], datetime] = datetime.now,
) -> DayNavigation:
    step = timedelta(days=1)
    return DayNavigation(
        go_to_previous_day=lambda: set_day(current - step),
        go_to_next_day=lambda: set_day(current + step),
        go_to_today=lambda: set_day(now()),
    )
