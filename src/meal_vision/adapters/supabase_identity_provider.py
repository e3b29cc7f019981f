"""Supabase Auth token verification."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_vision.services.identity import IdentityProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolve access tokens through Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the token's user id, or None when Supabase rejects it."""
        try:
            response = self.client.auth.get_user(access_token)
        except Exception as exc:
            _logger.warning("Token verification failed: %s", type(exc).__name__)
            return None
        user = getattr(response, "user", None)
        if user is None:
            return None
        return UUID(str(user.id))
