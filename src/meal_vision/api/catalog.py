"""Catalog search and portion rescaling endpoints."""

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from meal_vision.api.auth import require_user
from meal_vision.api.schemas import (
    CatalogEntryPayload,
    FoodRecordPayload,
    RescaleRequest,
)
from meal_vision.services.portions import rescale

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def search_foods(
    request: Request,
    query: str | None = None,
    limit: int = Query(default=10, ge=1, le=100),
    _user_id: UUID = Depends(require_user),
) -> dict[str, list[CatalogEntryPayload]]:
    """Search the nutrition catalog for manual entry."""
    container: AppContainer = request.app.state.container
    entries = container.catalog_service.search(query, limit=limit)
    return {"foods": [CatalogEntryPayload.from_domain(entry) for entry in entries]}


@router.post("/rescale", response_model=FoodRecordPayload)
async def rescale_food(
    body: RescaleRequest,
    _user_id: UUID = Depends(require_user),
) -> FoodRecordPayload:
    """Rescale a food record's nutrients to a new portion."""
    updated = rescale(body.food.to_domain(), body.portion_grams)
    return FoodRecordPayload.from_domain(updated)
