"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from meal_vision.domain.profiles import (
    ActivityLevel,
    DailyTargets,
    FitnessGoal,
    Gender,
    UserProfile,
)
from meal_vision.errors import PersistenceError
from meal_vision.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user."""
        try:
            response = (
                self.client.table("user_profiles")
                .select("*")
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
        except APIError as exc:
            raise PersistenceError(
                "Failed to load profile", details=str(exc)
            ) from exc
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def upsert_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or replace the whole profile row."""
        payload = {
            "id": str(profile.user_id),
            "age": profile.age,
            "weight": profile.weight,
            "height": profile.height,
            "gender": profile.gender.value if profile.gender else None,
            "activity_level": (
                profile.activity_level.value if profile.activity_level else None
            ),
            "fitness_goals": (
                profile.fitness_goals.value if profile.fitness_goals else None
            ),
            "dietary_preferences": list(profile.dietary_preferences),
            "health_conditions": list(profile.health_conditions),
            "daily_calorie_target": profile.targets.daily_calorie_target,
            "protein_target": profile.targets.protein_target,
            "carbs_target": profile.targets.carbs_target,
            "fat_target": profile.targets.fat_target,
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        try:
            response = self.client.table("user_profiles").upsert(payload).execute()
        except APIError as exc:
            raise PersistenceError("Failed to save profile", details=str(exc)) from exc
        if not response.data:
            raise PersistenceError("Failed to save profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        user_id=UUID(str(row["id"])),
        age=_optional_int(row.get("age")),
        weight=_optional_float(row.get("weight")),
        height=_optional_float(row.get("height")),
        gender=Gender(row["gender"]) if row.get("gender") else None,
        activity_level=(
            ActivityLevel(row["activity_level"]) if row.get("activity_level") else None
        ),
        fitness_goals=(
            FitnessGoal(row["fitness_goals"]) if row.get("fitness_goals") else None
        ),
        dietary_preferences=list(row.get("dietary_preferences") or []),
        health_conditions=list(row.get("health_conditions") or []),
        targets=DailyTargets(
            daily_calorie_target=_optional_int(row.get("daily_calorie_target")),
            protein_target=_optional_int(row.get("protein_target")),
            carbs_target=_optional_int(row.get("carbs_target")),
            fat_target=_optional_int(row.get("fat_target")),
        ),
    )


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    return int(float(value))


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
