from typing import Literal

from pydantic import BaseModel, Field

from models import (
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MEAL_COUNTS,
    MIN_AGE,
    MIN_HEIGHT_CM,
    MIN_WEIGHT_KG,
)


class PlanRequest(BaseModel):
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE)
    sex: Literal["male", "female"]
    height_cm: float = Field(..., ge=MIN_HEIGHT_CM, le=MAX_HEIGHT_CM)
    weight_kg: float = Field(..., ge=MIN_WEIGHT_KG, le=MAX_WEIGHT_KG)
    activity_level: Literal["low", "medium", "high"]
    goal: Literal["lose", "maintain", "gain"]
    meals_per_day: int = Field(..., ge=min(MEAL_COUNTS), le=max(MEAL_COUNTS))
