"""Rule-based meal recommendations from daily targets."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_vision.domain.meals import MealType
from meal_vision.domain.profiles import DailyTargets
from meal_vision.domain.recommendations import MealRecommendation, RecommendedFood
from meal_vision.errors import ProfileRequiredError
from meal_vision.services.profiles import ProfileService

MEALS_PER_DAY = 3

_TEMPLATES: tuple[tuple[MealType, str, tuple[RecommendedFood, ...]], ...] = (
    (
        MealType.BREAKFAST,
        "High protein breakfast to start your day with sustained energy",
        (
            RecommendedFood("Oatmeal", 60, 233, 10.2, 39.6, 4.2),
            RecommendedFood("Eggs", 100, 155, 13, 1.1, 11),
            RecommendedFood("Banana", 120, 107, 1.3, 27.6, 0.4),
            RecommendedFood("Greek Yogurt", 150, 89, 15, 5.4, 0.6),
        ),
    ),
    (
        MealType.LUNCH,
        "Balanced meal with lean protein and complex carbs for afternoon energy",
        (
            RecommendedFood("Chicken Breast", 150, 248, 46.5, 0, 5.4),
            RecommendedFood("Brown Rice", 150, 167, 3.9, 34.5, 1.4),
            RecommendedFood("Broccoli", 150, 51, 4.2, 10.5, 0.6),
            RecommendedFood("Avocado", 50, 80, 1, 4.5, 7.5),
        ),
    ),
    (
        MealType.DINNER,
        "Omega-3 rich meal with vegetables for optimal recovery and health",
        (
            RecommendedFood("Salmon", 150, 312, 30, 0, 19.5),
            RecommendedFood("Sweet Potato", 200, 172, 3.2, 40, 0.2),
            RecommendedFood("Broccoli", 100, 34, 2.8, 7, 0.4),
        ),
    ),
)

_logger = logging.getLogger(__name__)


class RecommendationRepository(Protocol):
    """Write-only store for generated recommendations."""

    def create_recommendation(
        self, user_id: UUID, recommendation: MealRecommendation
    ) -> None:
        """Persist one recommendation."""


def generate(targets: DailyTargets) -> list[MealRecommendation]:
    """Split daily targets across breakfast, lunch and dinner.

    Allotments are informational: the fixed food templates are not fitted to
    them. Dietary preferences and health conditions are not considered.
    """
    resolved = targets.resolved()
    calories = resolved.daily_calorie_target // MEALS_PER_DAY
    protein = resolved.protein_target // MEALS_PER_DAY
    carbs = resolved.carbs_target // MEALS_PER_DAY
    fat = resolved.fat_target // MEALS_PER_DAY
    return [
        MealRecommendation(
            meal_type=meal_type,
            recommended_foods=list(foods),
            total_calories=calories,
            total_protein=protein,
            total_carbs=carbs,
            total_fat=fat,
            reasoning=reasoning,
        )
        for meal_type, reasoning, foods in _TEMPLATES
    ]


@dataclass
class RecommendationService:
    """Generates and records recommendations for users with a profile."""

    profile_service: ProfileService
    repository: RecommendationRepository

    def generate_for_user(self, user_id: UUID) -> list[MealRecommendation]:
        """Generate recommendations from the user's stored targets."""
        targets = self.profile_service.get_targets(user_id)
        if targets is None:
            raise ProfileRequiredError()
        recommendations = generate(targets)
        for recommendation in recommendations:
            self.repository.create_recommendation(user_id, recommendation)
        _logger.info("Recommendations generated", extra={"user_id": str(user_id)})
        return recommendations
