"""Request and response models for the HTTP API."""

from datetime import date, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from meal_vision.domain.catalog import FoodCatalogEntry
from meal_vision.domain.foods import EnrichedFoodRecord
from meal_vision.domain.meals import DailySummary, MealItem, MealRecord, MealType
from meal_vision.domain.profiles import (
    ActivityLevel,
    DailyTargets,
    FitnessGoal,
    Gender,
    UserProfile,
)
from meal_vision.domain.recommendations import MealRecommendation


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodRecordPayload(CamelModel):
    """Editable food record exchanged with clients."""

    id: str
    name: str = Field(min_length=1)
    portion_grams: float = Field(gt=0)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    matched: bool = False

    @classmethod
    def from_domain(cls, record: EnrichedFoodRecord) -> "FoodRecordPayload":
        return cls(
            id=record.id,
            name=record.name,
            portion_grams=record.portion_grams,
            calories=record.calories,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
            confidence=record.confidence,
            matched=record.matched,
        )

    def to_domain(self) -> EnrichedFoodRecord:
        return EnrichedFoodRecord(
            id=self.id,
            name=self.name,
            portion_grams=self.portion_grams,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            matched=self.matched,
            confidence=self.confidence,
            food_item_id=_catalog_id(self.id) if self.matched else None,
        )


class DetectFoodRequest(CamelModel):
    image_url: str | None = None


class DetectFoodResponse(CamelModel):
    foods: list[FoodRecordPayload]
    message: str | None = None


class RescaleRequest(CamelModel):
    food: FoodRecordPayload
    portion_grams: float


class CatalogEntryPayload(CamelModel):
    id: UUID
    name: str
    calories_per_100g: float = Field(alias="caloriesPer100g")
    protein_per_100g: float = Field(alias="proteinPer100g")
    carbs_per_100g: float = Field(alias="carbsPer100g")
    fat_per_100g: float = Field(alias="fatPer100g")
    fiber_per_100g: float = Field(alias="fiberPer100g")
    category: str | None = None

    @classmethod
    def from_domain(cls, entry: FoodCatalogEntry) -> "CatalogEntryPayload":
        return cls(
            id=entry.id,
            name=entry.name,
            calories_per_100g=entry.calories_per_100g,
            protein_per_100g=entry.protein_per_100g,
            carbs_per_100g=entry.carbs_per_100g,
            fat_per_100g=entry.fat_per_100g,
            fiber_per_100g=entry.fiber_per_100g,
            category=entry.category,
        )


class SaveMealRequest(CamelModel):
    meal_type: MealType
    foods: list[FoodRecordPayload]
    image_url: str | None = None
    notes: str | None = None


class MealItemPayload(CamelModel):
    id: UUID | None = None
    food_item_id: UUID | None = None
    food_name: str
    portion_grams: float
    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_domain(cls, item: MealItem) -> "MealItemPayload":
        return cls(
            id=item.id,
            food_item_id=item.food_item_id,
            food_name=item.food_name,
            portion_grams=item.portion_grams,
            calories=item.calories,
            protein=item.protein,
            carbs=item.carbs,
            fat=item.fat,
        )


class MealPayload(CamelModel):
    id: UUID | None
    meal_type: MealType
    meal_date: date
    meal_time: time
    image_url: str | None = None
    notes: str | None = None
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    items: list[MealItemPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, meal: MealRecord) -> "MealPayload":
        return cls(
            id=meal.id,
            meal_type=meal.meal_type,
            meal_date=meal.meal_date,
            meal_time=meal.meal_time,
            image_url=meal.image_url,
            notes=meal.notes,
            total_calories=meal.totals.calories,
            total_protein=meal.totals.protein,
            total_carbs=meal.totals.carbs,
            total_fat=meal.totals.fat,
            items=[MealItemPayload.from_domain(item) for item in meal.items],
        )


class DailySummaryPayload(CamelModel):
    summary_date: date
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    water_intake_ml: int = 0

    @classmethod
    def from_domain(cls, summary: DailySummary) -> "DailySummaryPayload":
        return cls(
            summary_date=summary.summary_date,
            total_calories=summary.totals.calories,
            total_protein=summary.totals.protein,
            total_carbs=summary.totals.carbs,
            total_fat=summary.totals.fat,
            water_intake_ml=summary.water_intake_ml,
        )


class SavedMealResponse(CamelModel):
    meal: MealPayload
    daily_summary: DailySummaryPayload


class TodayResponse(CamelModel):
    summary: DailySummaryPayload
    progress: dict[str, float]


class WeekResponse(CamelModel):
    days: list[DailySummaryPayload]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float


class ProfilePayload(CamelModel):
    age: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    fitness_goals: FitnessGoal | None = None
    dietary_preferences: list[str] = Field(default_factory=list)
    health_conditions: list[str] = Field(default_factory=list)
    daily_calorie_target: int | None = Field(default=None, ge=0)
    protein_target: int | None = Field(default=None, ge=0)
    carbs_target: int | None = Field(default=None, ge=0)
    fat_target: int | None = Field(default=None, ge=0)

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfilePayload":
        return cls(
            age=profile.age,
            weight=profile.weight,
            height=profile.height,
            gender=profile.gender,
            activity_level=profile.activity_level,
            fitness_goals=profile.fitness_goals,
            dietary_preferences=profile.dietary_preferences,
            health_conditions=profile.health_conditions,
            daily_calorie_target=profile.targets.daily_calorie_target,
            protein_target=profile.targets.protein_target,
            carbs_target=profile.targets.carbs_target,
            fat_target=profile.targets.fat_target,
        )

    def to_domain(self, user_id: UUID) -> UserProfile:
        return UserProfile(
            user_id=user_id,
            age=self.age,
            weight=self.weight,
            height=self.height,
            gender=self.gender,
            activity_level=self.activity_level,
            fitness_goals=self.fitness_goals,
            dietary_preferences=list(self.dietary_preferences),
            health_conditions=list(self.health_conditions),
            targets=DailyTargets(
                daily_calorie_target=self.daily_calorie_target,
                protein_target=self.protein_target,
                carbs_target=self.carbs_target,
                fat_target=self.fat_target,
            ),
        )


class RecommendedFoodPayload(CamelModel):
    name: str
    portion: float
    calories: float
    protein: float
    carbs: float
    fat: float


class RecommendationPayload(CamelModel):
    meal_type: MealType
    recommended_foods: list[RecommendedFoodPayload]
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    reasoning: str

    @classmethod
    def from_domain(cls, recommendation: MealRecommendation) -> "RecommendationPayload":
        return cls(
            meal_type=recommendation.meal_type,
            recommended_foods=[
                RecommendedFoodPayload(
                    name=food.name,
                    portion=food.portion,
                    calories=food.calories,
                    protein=food.protein,
                    carbs=food.carbs,
                    fat=food.fat,
                )
                for food in recommendation.recommended_foods
            ],
            total_calories=recommendation.total_calories,
            total_protein=recommendation.total_protein,
            total_carbs=recommendation.total_carbs,
            total_fat=recommendation.total_fat,
            reasoning=recommendation.reasoning,
        )


def _catalog_id(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None
