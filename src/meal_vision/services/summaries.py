"""Daily summary reads and target progress."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from meal_vision.domain.foods import NutrientTotals
from meal_vision.domain.meals import DailySummary
from meal_vision.domain.profiles import DailyTargets
from meal_vision.services.portions import round_half_up

WEEK_DAYS = 7


class SummaryRepository(Protocol):
    """Read access to daily summaries."""

    def get_summary(self, user_id: UUID, day: date) -> DailySummary | None:
        """Return the stored summary for a day."""

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return summaries with start <= date <= end, oldest first."""


@dataclass
class WeeklyOverview:
    """Last seven days of summaries with averages over logged days."""

    days: list[DailySummary]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float


@dataclass
class SummaryService:
    """Service for daily and weekly nutrient totals."""

    repository: SummaryRepository

    def get_day(self, user_id: UUID, day: date) -> DailySummary:
        """Return the day's summary, or an empty one."""
        summary = self.repository.get_summary(user_id, day)
        if summary is None:
            return DailySummary(
                user_id=user_id, summary_date=day, totals=NutrientTotals()
            )
        return summary

    def list_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return stored summaries in a date range."""
        if end < start:
            return []
        return self.repository.list_summaries(user_id, start, end)

    def get_week(self, user_id: UUID, today: date) -> WeeklyOverview:
        """Return the trailing week ending today."""
        start = today - timedelta(days=WEEK_DAYS - 1)
        days = self.list_range(user_id, start, today)
        count = len(days)
        if count == 0:
            return WeeklyOverview(
                days=[], avg_calories=0, avg_protein=0, avg_carbs=0, avg_fat=0
            )
        total = NutrientTotals()
        for day in days:
            total = total + day.totals
        return WeeklyOverview(
            days=days,
            avg_calories=round_half_up(total.calories / count),
            avg_protein=round_half_up(total.protein / count, 1),
            avg_carbs=round_half_up(total.carbs / count, 1),
            avg_fat=round_half_up(total.fat / count, 1),
        )


def progress(summary: DailySummary, targets: DailyTargets) -> dict[str, float]:
    """Percent of each resolved target reached, capped at 100."""
    resolved = targets.resolved()
    return {
        "calories": _percent(summary.totals.calories, resolved.daily_calorie_target),
        "protein": _percent(summary.totals.protein, resolved.protein_target),
        "carbs": _percent(summary.totals.carbs, resolved.carbs_target),
        "fat": _percent(summary.totals.fat, resolved.fat_target),
    }


def _percent(current: float, target: int | None) -> float:
    if not target:
        return 0.0
    return min(current / target * 100, 100.0)
