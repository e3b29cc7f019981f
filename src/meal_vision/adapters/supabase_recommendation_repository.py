"""Supabase repository for generated meal recommendations."""

from dataclasses import asdict, dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from meal_vision.domain.recommendations import MealRecommendation
from meal_vision.errors import PersistenceError
from meal_vision.services.recommendations import RecommendationRepository


@dataclass
class SupabaseRecommendationRepository(RecommendationRepository):
    """Supabase implementation for the recommendation audit trail."""

    client: Client

    def create_recommendation(
        self, user_id: UUID, recommendation: MealRecommendation
    ) -> None:
        """Insert one recommendation row."""
        payload = {
            "user_id": str(user_id),
            "meal_type": recommendation.meal_type.value,
            "recommended_foods": [
                asdict(food) for food in recommendation.recommended_foods
            ],
            "total_calories": recommendation.total_calories,
            "reasoning": recommendation.reasoning,
        }
        try:
            self.client.table("meal_recommendations").insert(payload).execute()
        except APIError as exc:
            raise PersistenceError(
                "Failed to save recommendation", details=str(exc)
            ) from exc
