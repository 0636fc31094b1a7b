from __future__ import annotations
from datetime import date, datetime

from pydantic import BaseModel


class DayOut(BaseModel):
    iso: str
    day_name: str
    day_abbr: str
    label: str


class WeekOut(BaseModel):
    label: str
    month: str
    start: datetime
    end: datetime
    previous: date
    next: date
    days: list[DayOut]


class DayDetailOut(DayOut):
    month: str
    start: datetime
    end: datetime
    previous: date
    next: date
