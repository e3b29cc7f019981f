"""Nutrition catalog domain models."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class FoodCatalogEntry:
    """Canonical food with nutrients per 100 grams."""

    id: UUID
    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fat_per_100g: float
    fiber_per_100g: float = 0.0
    category: str | None = None
