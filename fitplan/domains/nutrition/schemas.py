from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class NutritionTargets(BaseModel):
    bmr: float
    tdee: int
    daily_calories: int = Field(ge=0)
    protein_grams: int = Field(ge=0)
    carbs_grams: int = Field(ge=0)
    fat_grams: int = Field(ge=0)
    meals_per_day: int = Field(ge=1)


class MealDraft(BaseModel):
    day_number: int = Field(ge=1)
    meal_time: str
    percentage: int = Field(ge=0, le=100)
    name: str
    description: str
    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)
    fat: int = Field(ge=0)
    recipe: Optional[str] = None
