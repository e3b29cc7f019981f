"""User profile service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_vision.domain.profiles import DailyTargets, UserProfile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile if stored."""

    def upsert_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or replace the profile as a whole."""


@dataclass
class ProfileService:
    """Service for reading and saving user profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile."""
        return self.repository.get_profile(user_id)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Replace the stored profile with the given one."""
        saved = self.repository.upsert_profile(profile)
        _logger.info("Profile saved", extra={"user_id": str(profile.user_id)})
        return saved

    def get_targets(self, user_id: UUID) -> DailyTargets | None:
        """Return the user's daily targets, or None without a profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return profile.targets
