from __future__ import annotations
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from core.models.meal import LoggedMeal, MealEntry, MealType


class MealValidateIn(BaseModel):
    payload: dict[str, Any] = Field(default_factory=dict, description="raw form payload")
    existing: MealEntry | None = None          # set when editing
    locked_type: MealType | None = None        # category pre-selected by the caller


class FieldErrorOut(BaseModel):
    field: str
    kind: str
    message: str


class MealSummaryIn(BaseModel):
    meals: list[LoggedMeal]
    day: date                               # any day of the week to summarise


class MealSummaryOut(BaseModel):
    week_label: str
    meal_count: int
    status: str                             # Bien / Regular / Insuficiente
    daily_calories: dict[str, int]          # ISO day → kcal
    week: dict[str, dict[str, list[LoggedMeal]]]
