# api/v1/calendar.py
from __future__ import annotations
from datetime import date, datetime, timedelta

from fastapi import APIRouter, HTTPException, Query, status

from core.dates import (
    format_date,
    format_date_to_iso,
    get_day_bounds,
    get_day_name,
    get_month_and_year,
    get_week_days,
    get_week_range,
    get_week_range_text,
    parse_date,
)
from api.v1.schemas.calendar import DayDetailOut, DayOut, WeekOut

router = APIRouter()


# ───────────────────────── helpers ──────────────────────────
def _reference(raw: str | None) -> date:
    if raw is None:
        return datetime.now().date()
    parsed = parse_date(raw)
    if parsed is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "invalid date")
    return parsed.date() if isinstance(parsed, datetime) else parsed


def _day(d: date) -> DayOut:
    return DayOut(
        iso=format_date_to_iso(d),
        day_name=get_day_name(d),
        day_abbr=get_day_name(d, abbreviated=True),
        label=format_date(d),
    )


# ───────────────────────── routes ───────────────────────────
@router.get("/week", response_model=WeekOut, summary="Monday-start week containing `date`")
def week(date_: str | None = Query(None, alias="date")) -> WeekOut:
    ref = _reference(date_)
    try:
        start, end = get_week_range(ref)
        previous, next_ = ref - timedelta(weeks=1), ref + timedelta(weeks=1)
    except (ValueError, OverflowError):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "date out of range") from None
    return WeekOut(
        label=get_week_range_text(ref),
        month=get_month_and_year(ref),
        start=start,
        end=end,
        previous=previous,
        next=next_,
        days=[_day(d) for d in get_week_days(ref)],
    )


@router.get("/day", response_model=DayDetailOut, summary="Labels and bounds for one day")
def day(date_: str | None = Query(None, alias="date")) -> DayDetailOut:
    ref = _reference(date_)
    bounds = get_day_bounds(ref)
    try:
        previous, next_ = ref - timedelta(days=1), ref + timedelta(days=1)
    except OverflowError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "date out of range") from None
    return DayDetailOut(
        **_day(ref).model_dump(),
        month=get_month_and_year(ref),
        start=bounds.start,
        end=bounds.end,
        previous=previous,
        next=next_,
    )
