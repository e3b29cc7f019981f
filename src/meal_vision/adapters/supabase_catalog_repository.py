"""Supabase repository for the nutrition catalog."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from meal_vision.domain.catalog import FoodCatalogEntry
from meal_vision.errors import PersistenceError
from meal_vision.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase implementation for catalog reads."""

    client: Client

    def find_containing(self, fragment: str, limit: int) -> list[FoodCatalogEntry]:
        """Return entries whose name contains ``fragment`` (ILIKE)."""
        pattern = _escape_like(fragment)
        if not pattern.strip():
            return []
        try:
            response = (
                self.client.table("food_items")
                .select("*")
                .ilike("name", f"%{pattern}%")
                .limit(limit)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError(
                "Failed to search food catalog", details=str(exc)
            ) from exc
        return [_parse_entry(row) for row in response.data or []]

    def list_entries(self) -> list[FoodCatalogEntry]:
        """Return the full catalog ordered by name."""
        try:
            response = (
                self.client.table("food_items")
                .select("*")
                .order("name", desc=False)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError(
                "Failed to load food catalog", details=str(exc)
            ) from exc
        return [_parse_entry(row) for row in response.data or []]


def _escape_like(value: str) -> str:
    # PostgREST reads "*" in ilike values as "%", so it cannot be escaped.
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "")


def _parse_entry(row: dict[str, object]) -> FoodCatalogEntry:
    return FoodCatalogEntry(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_100g=float(row.get("calories_per_100g") or 0.0),
        protein_per_100g=float(row.get("protein_per_100g") or 0.0),
        carbs_per_100g=float(row.get("carbs_per_100g") or 0.0),
        fat_per_100g=float(row.get("fat_per_100g") or 0.0),
        fiber_per_100g=float(row.get("fiber_per_100g") or 0.0),
        category=row.get("category"),
    )
