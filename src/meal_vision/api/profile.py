"""User profile endpoints."""

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from meal_vision.api.auth import require_user
from meal_vision.api.schemas import ProfilePayload
from meal_vision.errors import NotFoundError

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfilePayload)
async def get_profile(
    request: Request, user_id: UUID = Depends(require_user)
) -> ProfilePayload:
    """Return the caller's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise NotFoundError("Profile", str(user_id))
    return ProfilePayload.from_domain(profile)


@router.put("", response_model=ProfilePayload)
async def save_profile(
    body: ProfilePayload, request: Request, user_id: UUID = Depends(require_user)
) -> ProfilePayload:
    """Replace the caller's profile."""
    container: AppContainer = request.app.state.container
    saved = container.profile_service.save_profile(body.to_domain(user_id))
    return ProfilePayload.from_domain(saved)
