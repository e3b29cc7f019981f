"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from uuid import UUID

from meal_vision.domain.foods import NutrientTotals


class MealType(str, Enum):
    """Meal slot a logged meal belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealItem:
    """Snapshot of one food at save time."""

    food_name: str
    portion_grams: float
    calories: float
    protein: float
    carbs: float
    fat: float
    food_item_id: UUID | None = None
    id: UUID | None = None
    meal_id: UUID | None = None


@dataclass(frozen=True)
class MealRecord:
    """Logged meal with its totals and items."""

    id: UUID | None
    user_id: UUID
    meal_type: MealType
    meal_date: date
    meal_time: time
    totals: NutrientTotals
    image_url: str | None = None
    notes: str | None = None
    items: list[MealItem] = field(default_factory=list)


@dataclass(frozen=True)
class DailySummary:
    """Running nutrient totals for one user on one date."""

    user_id: UUID
    summary_date: date
    totals: NutrientTotals
    water_intake_ml: int = 0


@dataclass(frozen=True)
class SavedMeal:
    """Result of a meal save: the meal and the updated daily summary."""

    meal: MealRecord
    daily_summary: DailySummary
