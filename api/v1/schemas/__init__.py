"""Re-export individual schema modules for easy imports."""

from .meal import FieldErrorOut, MealSummaryIn, MealSummaryOut, MealValidateIn
from .calendar import DayDetailOut, DayOut, WeekOut

__all__ = [
    "FieldErrorOut",
    "MealSummaryIn",
    "MealSummaryOut",
    "MealValidateIn",
    "DayDetailOut",
    "DayOut",
    "WeekOut",
]
