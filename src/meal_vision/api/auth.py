"""Bearer token authentication dependency."""

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, Request

if TYPE_CHECKING:
    from meal_vision.containers import AppContainer


async def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UUID:
    """Return the authenticated user id or raise ``AuthenticationError``."""
    container: AppContainer = request.app.state.container
    return container.identity_service.authenticate(authorization)
