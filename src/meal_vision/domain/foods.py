"""Domain models for detected and enriched foods."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class NutrientTotals:
    """Calories and macronutrient grams."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )

    def __sub__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories - other.calories,
            protein=self.protein - other.protein,
            carbs=self.carbs - other.carbs,
            fat=self.fat - other.fat,
        )


@dataclass(frozen=True)
class EnrichedFoodRecord:
    """A detected food with nutrients scaled to its portion.

    Portion and nutrients only ever change together, through
    ``meal_vision.services.portions.rescale``.
    """

    id: str
    name: str
    portion_grams: float
    calories: float
    protein: float
    carbs: float
    fat: float
    matched: bool
    confidence: float = 0.0
    food_item_id: UUID | None = None

    @property
    def nutrients(self) -> NutrientTotals:
        return NutrientTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )
