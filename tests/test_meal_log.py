# tests/test_meal_log.py
from __future__ import annotations

from datetime import datetime

from core.meal_log import WeekStatus, daily_calorie_total, group_daily, group_weekly, week_status
from core.models.meal import LoggedMeal, MealType


def _meal(id_: int, when: datetime, meal_type: MealType, kcal: int | None = None) -> LoggedMeal:
    return LoggedMeal(id=id_, user_id=1, date=when, type=meal_type, name=f"comida {id_}", calories=kcal)


MEALS = [
    _meal(1, datetime(2024, 3, 4, 8), MealType.BREAKFAST, 300),
    _meal(2, datetime(2024, 3, 4, 14), MealType.LUNCH, None),
    _meal(3, datetime(2024, 3, 4, 14, 30), MealType.LUNCH, 150),
    _meal(4, datetime(2024, 3, 10, 21), MealType.DINNER, 500),
    _meal(5, datetime(2024, 3, 11, 8), MealType.BREAKFAST, 250),   # next week
]


def test_group_daily_preserves_order():
    daily = group_daily(MEALS[:3])
    assert [m.id for m in daily[MealType.LUNCH]] == [2, 3]
    assert MealType.DINNER not in daily


def test_group_weekly_has_seven_days_and_drops_other_weeks():
    week = group_weekly(MEALS, "2024-03-06")
    assert list(week) == [f"2024-03-{d:02d}" for d in range(4, 11)]
    assert week["2024-03-05"] == {}
    assert [m.id for m in week["2024-03-10"][MealType.DINNER]] == [4]
    assert all(m.id != 5 for day in week.values() for ms in day.values() for m in ms)


def test_daily_calorie_total_treats_missing_as_zero():
    assert daily_calorie_total(MEALS[:3]) == 450
    assert daily_calorie_total([]) == 0


def test_week_status_thresholds():
    assert week_status(16) is WeekStatus.good
    assert week_status(15) is WeekStatus.fair
    assert week_status(8) is WeekStatus.fair
    assert week_status(7) is WeekStatus.poor
    assert week_status(3, good_above=2, fair_above=1).value == "Bien"
