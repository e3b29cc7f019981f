"""Supabase repository for daily summaries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from meal_vision.domain.foods import NutrientTotals
from meal_vision.domain.meals import DailySummary
from meal_vision.errors import PersistenceError
from meal_vision.services.summaries import SummaryRepository


@dataclass
class SupabaseSummaryRepository(SummaryRepository):
    """Supabase implementation for daily summary reads."""

    client: Client

    def get_summary(self, user_id: UUID, day: date) -> DailySummary | None:
        """Return the summary row for a user and date."""
        try:
            response = (
                self.client.table("daily_summaries")
                .select("*")
                .eq("user_id", str(user_id))
                .eq("summary_date", day.isoformat())
                .limit(1)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError(
                "Failed to load daily summary", details=str(exc)
            ) from exc
        if not response.data:
            return None
        return parse_summary(response.data[0])

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return summaries in the inclusive date range."""
        try:
            response = (
                self.client.table("daily_summaries")
                .select("*")
                .eq("user_id", str(user_id))
                .gte("summary_date", start.isoformat())
                .lte("summary_date", end.isoformat())
                .order("summary_date", desc=False)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError(
                "Failed to load daily summaries", details=str(exc)
            ) from exc
        return [parse_summary(row) for row in response.data or []]


def parse_summary(row: dict[str, object]) -> DailySummary:
    """Build a ``DailySummary`` from a ``daily_summaries`` row."""
    return DailySummary(
        user_id=UUID(str(row["user_id"])),
        summary_date=date.fromisoformat(str(row["summary_date"])),
        totals=NutrientTotals(
            calories=float(row.get("total_calories") or 0.0),
            protein=float(row.get("total_protein") or 0.0),
            carbs=float(row.get("total_carbs") or 0.0),
            fat=float(row.get("total_fat") or 0.0),
        ),
        water_intake_ml=int(row.get("water_intake_ml") or 0),
    )
