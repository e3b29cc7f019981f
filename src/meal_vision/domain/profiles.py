"""User profile domain models."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

DEFAULT_CALORIE_TARGET = 2000
DEFAULT_PROTEIN_TARGET = 150
DEFAULT_CARBS_TARGET = 200
DEFAULT_FAT_TARGET = 65


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    GENERAL_HEALTH = "general_health"


@dataclass(frozen=True)
class DailyTargets:
    """Daily nutrient targets; unset values fall back to defaults."""

    daily_calorie_target: int | None = None
    protein_target: int | None = None
    carbs_target: int | None = None
    fat_target: int | None = None

    def resolved(self) -> "DailyTargets":
        """Return targets with every unset value replaced by its default."""
        return DailyTargets(
            daily_calorie_target=_or_default(
                self.daily_calorie_target, DEFAULT_CALORIE_TARGET
            ),
            protein_target=_or_default(self.protein_target, DEFAULT_PROTEIN_TARGET),
            carbs_target=_or_default(self.carbs_target, DEFAULT_CARBS_TARGET),
            fat_target=_or_default(self.fat_target, DEFAULT_FAT_TARGET),
        )


@dataclass(frozen=True)
class UserProfile:
    """Biometrics, goals and daily targets for a user."""

    user_id: UUID
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    fitness_goals: FitnessGoal | None = None
    dietary_preferences: list[str] = field(default_factory=list)
    health_conditions: list[str] = field(default_factory=list)
    targets: DailyTargets = field(default_factory=DailyTargets)


def _or_default(value: int | None, default: int) -> int:
    # Zero targets count as unset.
    return value if value else default
