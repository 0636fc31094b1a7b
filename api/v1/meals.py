# api/v1/meals.py
from __future__ import annotations
from fastapi import APIRouter, HTTPException, status

from core.dates import get_week_range_text
from core.meal_log import daily_calorie_total, group_weekly, week_status
from core.meal_validation import validate_meal
from core.models.meal import MealEntry
from api.v1.schemas.meal import FieldErrorOut, MealSummaryIn, MealSummaryOut, MealValidateIn

router = APIRouter()


@router.post(
    "/validate",
    response_model=MealEntry,
    status_code=status.HTTP_200_OK,
    summary="Validate and normalize a raw meal form payload",
)
def validate(body: MealValidateIn) -> MealEntry:
    """
    Returns the normalized entry, or 422 with one item per failing field.
    """
    result = validate_meal(
        body.payload, existing=body.existing, locked_type=body.locked_type
    )
    if not result.ok:
        raise HTTPException(
            status_code=422,
            detail=[
                FieldErrorOut(field=e.field, kind=e.kind.value, message=e.message).model_dump()
                for e in result.errors
            ],
        )
    return result.entry  # type: ignore[return-value]


@router.post(
    "/summary",
    response_model=MealSummaryOut,
    status_code=status.HTTP_200_OK,
    summary="Group a week of logged meals by day and type",
)
def summary(body: MealSummaryIn) -> MealSummaryOut:
    week = group_weekly(body.meals, body.day)
    in_week = [m for day in week.values() for meals in day.values() for m in meals]

    return MealSummaryOut(
        week_label=get_week_range_text(body.day),
        meal_count=len(in_week),
        status=week_status(len(in_week)).value,
        daily_calories={
            iso: daily_calorie_total(m for meals in day.values() for m in meals)
            for iso, day in week.items()
        },
        week={
            iso: {meal_type.value: meals for meal_type, meals in day.items()}
            for iso, day in week.items()
        },
    )
