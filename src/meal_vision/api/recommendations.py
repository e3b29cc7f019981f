"""Meal recommendation endpoint."""

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from meal_vision.api.auth import require_user
from meal_vision.api.schemas import RecommendationPayload

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer

router = APIRouter(tags=["recommendations"])


@router.post("/recommendations")
async def generate_recommendations(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, list[RecommendationPayload]]:
    """Generate breakfast, lunch and dinner recommendations."""
    container: AppContainer = request.app.state.container
    recommendations = container.recommendation_service.generate_for_user(user_id)
    return {
        "recommendations": [
            RecommendationPayload.from_domain(item) for item in recommendations
        ]
    }
