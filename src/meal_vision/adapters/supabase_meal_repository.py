"""Supabase repository for meals, meal items and daily summaries."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from meal_vision.adapters.supabase_summary_repository import parse_summary
from meal_vision.domain.foods import NutrientTotals
from meal_vision.domain.meals import MealItem, MealRecord, MealType, SavedMeal
from meal_vision.errors import PersistenceError
from meal_vision.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation backed by the ``log_meal`` and
    ``delete_meal`` database functions for transactional writes.
    """

    client: Client

    def record_meal(self, meal: MealRecord) -> SavedMeal:
        """Insert meal, items and summary increment in one transaction."""
        params = {
            "p_user_id": str(meal.user_id),
            "p_meal_type": meal.meal_type.value,
            "p_meal_date": meal.meal_date.isoformat(),
            "p_meal_time": meal.meal_time.isoformat(timespec="minutes"),
            "p_image_url": meal.image_url,
            "p_notes": meal.notes,
            "p_total_calories": meal.totals.calories,
            "p_total_protein": meal.totals.protein,
            "p_total_carbs": meal.totals.carbs,
            "p_total_fat": meal.totals.fat,
            "p_items": [_item_payload(item) for item in meal.items],
        }
        try:
            response = self.client.rpc("log_meal", params).execute()
        except APIError as exc:
            raise PersistenceError("Failed to save meal", details=str(exc)) from exc
        payload = _single(response.data)
        if not payload:
            raise PersistenceError("Failed to save meal")
        saved_meal = _parse_meal(payload["meal"])
        items = [_parse_item(row) for row in payload.get("items") or []]
        return SavedMeal(
            meal=MealRecord(
                id=saved_meal.id,
                user_id=saved_meal.user_id,
                meal_type=saved_meal.meal_type,
                meal_date=saved_meal.meal_date,
                meal_time=saved_meal.meal_time,
                totals=saved_meal.totals,
                image_url=saved_meal.image_url,
                notes=saved_meal.notes,
                items=items,
            ),
            daily_summary=parse_summary(payload["summary"]),
        )

    def list_meals(
        self, user_id: UUID, meal_type: MealType | None, limit: int
    ) -> list[MealRecord]:
        """Return the user's meals, newest first."""
        query = self.client.table("meals").select("*").eq("user_id", str(user_id))
        if meal_type is not None:
            query = query.eq("meal_type", meal_type.value)
        try:
            response = (
                query.order("meal_date", desc=True)
                .order("meal_time", desc=True)
                .limit(limit)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError("Failed to load meals", details=str(exc)) from exc
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, user_id: UUID, meal_id: UUID) -> MealRecord | None:
        """Return a meal with its items."""
        try:
            response = (
                self.client.table("meals")
                .select("*")
                .eq("id", str(meal_id))
                .eq("user_id", str(user_id))
                .limit(1)
                .execute()
            )
            if not response.data:
                return None
            items_response = (
                self.client.table("meal_items")
                .select("*")
                .eq("meal_id", str(meal_id))
                .order("created_at", desc=False)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError("Failed to load meal", details=str(exc)) from exc
        meal = _parse_meal(response.data[0])
        return MealRecord(
            id=meal.id,
            user_id=meal.user_id,
            meal_type=meal.meal_type,
            meal_date=meal.meal_date,
            meal_time=meal.meal_time,
            totals=meal.totals,
            image_url=meal.image_url,
            notes=meal.notes,
            items=[_parse_item(row) for row in items_response.data or []],
        )

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete the meal and subtract it from its daily summary."""
        try:
            response = self.client.rpc(
                "delete_meal",
                {"p_user_id": str(user_id), "p_meal_id": str(meal_id)},
            ).execute()
        except APIError as exc:
            raise PersistenceError("Failed to delete meal", details=str(exc)) from exc
        return bool(_single(response.data))


def _single(data: object) -> object:
    # RPC results arrive either as a scalar/object or wrapped in a list.
    if isinstance(data, list):
        return data[0] if data else None
    return data


def _item_payload(item: MealItem) -> dict[str, object]:
    return {
        "food_item_id": str(item.food_item_id) if item.food_item_id else None,
        "food_name": item.food_name,
        "portion_size_grams": item.portion_grams,
        "calories": item.calories,
        "protein": item.protein,
        "carbs": item.carbs,
        "fat": item.fat,
    }


def _parse_meal(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        meal_type=MealType(str(row["meal_type"])),
        meal_date=date.fromisoformat(str(row["meal_date"])),
        meal_time=time.fromisoformat(str(row["meal_time"])),
        totals=NutrientTotals(
            calories=float(row.get("total_calories") or 0.0),
            protein=float(row.get("total_protein") or 0.0),
            carbs=float(row.get("total_carbs") or 0.0),
            fat=float(row.get("total_fat") or 0.0),
        ),
        image_url=row.get("image_url"),
        notes=row.get("notes"),
    )


def _parse_item(row: dict[str, object]) -> MealItem:
    return MealItem(
        id=UUID(str(row["id"])) if row.get("id") else None,
        meal_id=UUID(str(row["meal_id"])) if row.get("meal_id") else None,
        food_item_id=(
            UUID(str(row["food_item_id"])) if row.get("food_item_id") else None
        ),
        food_name=str(row.get("food_name", "")),
        portion_grams=float(row.get("portion_size_grams") or 0.0),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
    )
