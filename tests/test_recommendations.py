"""Tests for profiles and meal recommendations."""

from uuid import uuid4

import pytest

from meal_vision.domain.meals import MealType
from meal_vision.domain.profiles import DailyTargets, FitnessGoal, UserProfile
from meal_vision.errors import ProfileRequiredError
from meal_vision.services.profiles import ProfileService
from meal_vision.services.recommendations import RecommendationService, generate
from tests.conftest import InMemoryProfileRepository, InMemoryRecommendationRepository


def test_generate_splits_targets_across_three_meals() -> None:
    recommendations = generate(
        DailyTargets(
            daily_calorie_target=2000,
            protein_target=150,
            carbs_target=200,
            fat_target=65,
        )
    )

    assert [item.meal_type for item in recommendations] == [
        MealType.BREAKFAST,
        MealType.LUNCH,
        MealType.DINNER,
    ]
    for item in recommendations:
        assert item.total_calories == 666
        assert item.total_protein == 50
        assert item.total_carbs == 66
        assert item.total_fat == 21
    assert [food.name for food in recommendations[2].recommended_foods] == [
        "Salmon",
        "Sweet Potato",
        "Broccoli",
    ]


def test_generate_uses_defaults_for_unset_targets() -> None:
    recommendations = generate(DailyTargets(daily_calorie_target=2400))

    assert recommendations[0].total_calories == 800
    assert recommendations[0].total_protein == 50
    assert recommendations[0].total_fat == 21


def test_generate_is_deterministic() -> None:
    targets = DailyTargets(daily_calorie_target=1800)

    assert generate(targets) == generate(targets)


def test_recommendations_require_profile() -> None:
    service = RecommendationService(
        profile_service=ProfileService(InMemoryProfileRepository()),
        repository=InMemoryRecommendationRepository(),
    )

    with pytest.raises(ProfileRequiredError) as excinfo:
        service.generate_for_user(uuid4())

    assert excinfo.value.status_code == 409


def test_recommendations_are_recorded_per_meal() -> None:
    profiles = InMemoryProfileRepository()
    repository = InMemoryRecommendationRepository()
    user_id = uuid4()
    profile_service = ProfileService(profiles)
    profile_service.save_profile(
        UserProfile(
            user_id=user_id,
            fitness_goals=FitnessGoal.MUSCLE_GAIN,
            targets=DailyTargets(daily_calorie_target=3000, protein_target=180),
        )
    )
    service = RecommendationService(
        profile_service=profile_service, repository=repository
    )

    recommendations = service.generate_for_user(user_id)

    assert len(repository.created) == 3
    assert all(owner == user_id for owner, _ in repository.created)
    assert recommendations[1].total_calories == 1000
    assert recommendations[1].total_protein == 60


def test_profile_service_targets() -> None:
    service = ProfileService(InMemoryProfileRepository())
    user_id = uuid4()

    assert service.get_targets(user_id) is None

    service.save_profile(
        UserProfile(user_id=user_id, targets=DailyTargets(fat_target=70))
    )

    targets = service.get_targets(user_id)
    assert targets is not None
    assert targets.fat_target == 70
    assert targets.resolved().daily_calorie_target == 2000
