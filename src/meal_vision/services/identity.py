"""Bearer token verification."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_vision.errors import AuthenticationError


class IdentityProvider(Protocol):
    """Resolves an access token to the user it was issued for."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, else None."""


@dataclass
class IdentityService:
    """Turns Authorization headers into authenticated user ids."""

    provider: IdentityProvider

    def authenticate(self, authorization: str | None) -> UUID:
        """Return the caller's user id or raise ``AuthenticationError``."""
        token = parse_bearer_token(authorization)
        if token is None:
            raise AuthenticationError("Missing bearer token")
        user_id = self.provider.get_user_id(token)
        if user_id is None:
            raise AuthenticationError("Invalid bearer token")
        return user_id


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from a ``Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None
