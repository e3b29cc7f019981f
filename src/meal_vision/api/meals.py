"""Meal log and daily summary endpoints."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query, Request, Response, status

from meal_vision.api.auth import require_user
from meal_vision.api.schemas import (
    DailySummaryPayload,
    MealPayload,
    SavedMealResponse,
    SaveMealRequest,
    TodayResponse,
    WeekResponse,
)
from meal_vision.domain.meals import MealType
from meal_vision.domain.profiles import DailyTargets
from meal_vision.errors import NotFoundError
from meal_vision.services.summaries import progress

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer

router = APIRouter(tags=["meals"])


@router.post(
    "/meals", status_code=status.HTTP_201_CREATED, response_model=SavedMealResponse
)
async def save_meal(
    body: SaveMealRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> SavedMealResponse:
    """Save edited foods as a meal and update the day's totals."""
    container: AppContainer = request.app.state.container
    saved = container.meal_log_service.save_meal(
        user_id=user_id,
        meal_type=body.meal_type,
        foods=[food.to_domain() for food in body.foods],
        image_url=body.image_url,
        notes=body.notes,
    )
    return SavedMealResponse(
        meal=MealPayload.from_domain(saved.meal),
        daily_summary=DailySummaryPayload.from_domain(saved.daily_summary),
    )


@router.get("/meals")
async def list_meals(
    request: Request,
    meal_type: MealType | None = Query(default=None, alias="mealType"),
    limit: int = Query(default=20, ge=1, le=100),
    user_id: UUID = Depends(require_user),
) -> dict[str, list[MealPayload]]:
    """Return recent meals, newest first."""
    container: AppContainer = request.app.state.container
    meals = container.meal_log_service.list_meals(user_id, meal_type, limit)
    return {"meals": [MealPayload.from_domain(meal) for meal in meals]}


@router.get("/meals/{meal_id}", response_model=MealPayload)
async def get_meal(
    meal_id: UUID,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> MealPayload:
    """Return a meal with its items."""
    container: AppContainer = request.app.state.container
    meal = container.meal_log_service.get_meal(user_id, meal_id)
    if meal is None:
        raise NotFoundError("Meal", str(meal_id))
    return MealPayload.from_domain(meal)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> Response:
    """Delete a meal and its items."""
    container: AppContainer = request.app.state.container
    container.meal_log_service.delete_meal(user_id, meal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/summaries/today", response_model=TodayResponse)
async def today_summary(
    request: Request,
    user_id: UUID = Depends(require_user),
) -> TodayResponse:
    """Return today's totals with progress toward the user's targets."""
    container: AppContainer = request.app.state.container
    today = datetime.now(tz=ZoneInfo(container.settings.timezone)).date()
    summary = container.summary_service.get_day(user_id, today)
    targets = container.profile_service.get_targets(user_id) or DailyTargets()
    return TodayResponse(
        summary=DailySummaryPayload.from_domain(summary),
        progress=progress(summary, targets),
    )


@router.get("/summaries/week", response_model=WeekResponse)
async def week_summary(
    request: Request,
    user_id: UUID = Depends(require_user),
) -> WeekResponse:
    """Return the trailing seven days of summaries."""
    container: AppContainer = request.app.state.container
    today = datetime.now(tz=ZoneInfo(container.settings.timezone)).date()
    overview = container.summary_service.get_week(user_id, today)
    return WeekResponse(
        days=[DailySummaryPayload.from_domain(day) for day in overview.days],
        avg_calories=overview.avg_calories,
        avg_protein=overview.avg_protein,
        avg_carbs=overview.avg_carbs,
        avg_fat=overview.avg_fat,
    )
