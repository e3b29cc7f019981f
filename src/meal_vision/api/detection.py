"""Food detection endpoint."""

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from meal_vision.api.auth import require_user
from meal_vision.api.schemas import (
    DetectFoodRequest,
    DetectFoodResponse,
    FoodRecordPayload,
)

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer

router = APIRouter(tags=["detection"])

_logger = logging.getLogger(__name__)


@router.post(
    "/detect-food",
    response_model=DetectFoodResponse,
    response_model_exclude_none=True,
)
async def detect_food(
    request: Request,
    body: DetectFoodRequest | None = None,
    user_id: UUID = Depends(require_user),
) -> DetectFoodResponse | JSONResponse:
    """Detect foods in a meal photo and enrich them with catalog nutrients."""
    if body is None or not body.image_url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Image URL is required"},
        )
    container: AppContainer = request.app.state.container
    try:
        result = await container.detection_service.detect(body.image_url)
    except Exception as exc:
        _logger.exception("Food detection failed", extra={"user_id": str(user_id)})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to detect food", "details": str(exc)},
        )
    return DetectFoodResponse(
        foods=[FoodRecordPayload.from_domain(food) for food in result.foods],
        message=result.message,
    )
