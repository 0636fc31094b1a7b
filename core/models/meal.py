from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MealType(str, Enum):
    BREAKFAST = "Desayuno"
    MORNING_SNACK = "Media Mañana"
    LUNCH = "Comida"
    AFTERNOON_SNACK = "Media Tarde"
    DINNER = "Cena"

    @classmethod
    def lookup(cls, value: object) -> MealType | None:
        """Match a label ("Cena") or a member name ("dinner"), else None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip()
        for member in cls:
            if key.casefold() == member.value.casefold():
                return member
        return cls.__members__.get(key.upper())


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealEntry(_CamelModel):
    """Normalized meal as produced by `core.meal_validation`."""

    type: MealType
    name: str
    description: str | None = None
    calories: int | None = None
    time: str | None = None
    duration: int | None = None      # minutes
    water_intake: float | None = None  # litres
    notes: str | None = None


class Comment(_CamelModel):
    id: int
    content: str
    created_at: datetime
    meal_id: int | None = None
    nutritionist_id: int | None = None


class LoggedMeal(MealEntry):
    """A stored meal handed in by the caller, with its comment thread."""

    id: int
    user_id: int
    date: datetime
    comments: list[Comment] = Field(default_factory=list)
