"""Domain models for meal recommendations."""

from dataclasses import dataclass

from meal_vision.domain.meals import MealType


@dataclass(frozen=True)
class RecommendedFood:
    """Food entry inside a recommendation template."""

    name: str
    portion: float
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MealRecommendation:
    """Generated recommendation for one meal slot."""

    meal_type: MealType
    recommended_foods: list[RecommendedFood]
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    reasoning: str
