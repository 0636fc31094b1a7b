# api/v1/router.py
from fastapi import APIRouter

from . import calendar, meals

api_router = APIRouter()

api_router.include_router(meals.router, prefix="/meals", tags=["Meals"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["Calendar"])
