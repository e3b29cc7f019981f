"""Meal aggregation and transactional meal logging."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from meal_vision.domain.foods import EnrichedFoodRecord, NutrientTotals
from meal_vision.domain.meals import (
    DailySummary,
    MealItem,
    MealRecord,
    MealType,
    SavedMeal,
)
from meal_vision.errors import NotFoundError
from meal_vision.services.portions import round_half_up

DEFAULT_HISTORY_LIMIT = 20

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals, items and daily summaries."""

    def record_meal(self, meal: MealRecord) -> SavedMeal:
        """Insert the meal with its items and add its totals to the day.

        Must run as one transaction with an atomic summary increment.
        """

    def list_meals(
        self, user_id: UUID, meal_type: MealType | None, limit: int
    ) -> list[MealRecord]:
        """Return the user's meals, newest first, without items."""

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal with items if the user owns it."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal, its items and its share of the daily summary."""


def aggregate(records: Iterable[EnrichedFoodRecord | MealItem]) -> NutrientTotals:
    """Sum calories and macros over food records; empty input gives zeros."""
    total = NutrientTotals()
    for record in records:
        total = NutrientTotals(
            calories=total.calories + record.calories,
            protein=total.protein + record.protein,
            carbs=total.carbs + record.carbs,
            fat=total.fat + record.fat,
        )
    return _round_totals(total)


def fold_into_daily_summary(
    existing: DailySummary | None,
    totals: NutrientTotals,
    *,
    user_id: UUID,
    summary_date: date,
) -> DailySummary:
    """Add a meal's totals to the day's summary, creating it if missing."""
    if existing is None:
        return DailySummary(
            user_id=user_id, summary_date=summary_date, totals=_round_totals(totals)
        )
    return DailySummary(
        user_id=existing.user_id,
        summary_date=existing.summary_date,
        totals=_round_totals(existing.totals + totals),
        water_intake_ml=existing.water_intake_ml,
    )


@dataclass
class MealLogService:
    """Service that snapshots edited foods and persists meals."""

    repository: MealRepository
    timezone: str = "UTC"

    def save_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_type: MealType,
        foods: list[EnrichedFoodRecord],
        image_url: str | None = None,
        notes: str | None = None,
        logged_at: datetime | None = None,
    ) -> SavedMeal:
        """Persist a meal and fold its totals into the daily summary."""
        when = logged_at or datetime.now(tz=ZoneInfo(self.timezone))
        items = [_snapshot(food) for food in foods]
        meal = MealRecord(
            id=None,
            user_id=user_id,
            meal_type=meal_type,
            meal_date=when.date(),
            meal_time=when.time().replace(second=0, microsecond=0, tzinfo=None),
            totals=aggregate(items),
            image_url=image_url,
            notes=notes,
            items=items,
        )
        saved = self.repository.record_meal(meal)
        _logger.info(
            "Meal saved",
            extra={
                "user_id": str(user_id),
                "meal_id": str(saved.meal.id),
                "items": len(items),
            },
        )
        return saved

    def list_meals(
        self,
        user_id: UUID,
        meal_type: MealType | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[MealRecord]:
        """Return recent meals, optionally filtered by meal type."""
        return self.repository.list_meals(user_id, meal_type, limit)

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal with its items."""
        return self.repository.get_meal(user_id, meal_id)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal owned by the user."""
        if not self.repository.delete_meal(user_id, meal_id):
            raise NotFoundError("Meal", str(meal_id))
        _logger.info(
            "Meal deleted", extra={"user_id": str(user_id), "meal_id": str(meal_id)}
        )


def _snapshot(food: EnrichedFoodRecord) -> MealItem:
    return MealItem(
        food_name=food.name,
        portion_grams=food.portion_grams,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        food_item_id=food.food_item_id if food.matched else None,
    )


def _round_totals(totals: NutrientTotals) -> NutrientTotals:
    return NutrientTotals(
        calories=round_half_up(totals.calories, 2),
        protein=round_half_up(totals.protein, 2),
        carbs=round_half_up(totals.carbs, 2),
        fat=round_half_up(totals.fat, 2),
    )
