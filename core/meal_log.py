"""
core/meal_log.py
────────────────────────────────────────────────────────────────────────
Read-side views over meals the caller already loaded:

* daily grouping by meal type
* Monday-start weekly grid keyed by ISO day
* daily calorie total (missing kcal counts as 0)
* the coarse weekly adherence label shown to nutritionists
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from config import settings
from core.dates import DateLike, format_date_to_iso, get_week_days
from core.models.meal import LoggedMeal, MealType

_LOG = logging.getLogger(__name__)

DailyMeals = dict[MealType, list[LoggedMeal]]


class WeekStatus(str, Enum):
    good = "Bien"
    fair = "Regular"
    poor = "Insuficiente"


def group_daily(meals: Iterable[LoggedMeal]) -> DailyMeals:
    daily: DailyMeals = {}
    for meal in meals:
        daily.setdefault(meal.type, []).append(meal)
    return daily


def group_weekly(meals: Iterable[LoggedMeal], reference: DateLike) -> dict[str, DailyMeals]:
    """Seven ISO-day keys (Mon→Sun); meals from other weeks are dropped."""
    week: dict[str, DailyMeals] = {day.isoformat(): {} for day in get_week_days(reference)}
    skipped = 0
    for meal in meals:
        bucket = week.get(format_date_to_iso(meal.date))
        if bucket is None:
            skipped += 1
            continue
        bucket.setdefault(meal.type, []).append(meal)
    if skipped:
        _LOG.debug("group_weekly: %d meal(s) outside week of %s", skipped, reference)
    return week


def daily_calorie_total(meals: Iterable[LoggedMeal]) -> int:
    return sum(meal.calories or 0 for meal in meals)


def week_status(
    meal_count: int,
    good_above: int | None = None,
    fair_above: int | None = None,
) -> WeekStatus:
    good_above = settings.week_good_threshold if good_above is None else good_above
    fair_above = settings.week_regular_threshold if fair_above is None else fair_above
    if meal_count > good_above:
        return WeekStatus.good
    if meal_count > fair_above:
        return WeekStatus.fair
    return WeekStatus.poor
