"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_vision.adapters.image_client import HttpxImageClient
from meal_vision.adapters.openai_vision_client import OpenAIVisionClient
from meal_vision.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from meal_vision.adapters.supabase_identity_provider import SupabaseIdentityProvider
from meal_vision.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_vision.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from meal_vision.adapters.supabase_recommendation_repository import (
    SupabaseRecommendationRepository,
)
from meal_vision.adapters.supabase_summary_repository import (
    SupabaseSummaryRepository,
)
from meal_vision.config import Settings, parse_match_strategy
from meal_vision.services.cache import InMemoryCache
from meal_vision.services.catalog import CatalogService
from meal_vision.services.detection import DetectionService
from meal_vision.services.enrichment import EnrichmentService
from meal_vision.services.identity import IdentityService
from meal_vision.services.matching import build_match_strategy
from meal_vision.services.meals import MealLogService
from meal_vision.services.profiles import ProfileService
from meal_vision.services.recommendations import RecommendationService
from meal_vision.services.summaries import SummaryService
from meal_vision.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_service: IdentityService
    catalog_service: CatalogService
    detection_service: DetectionService
    meal_log_service: MealLogService
    summary_service: SummaryService
    profile_service: ProfileService
    recommendation_service: RecommendationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_service = CatalogService(
        repository=SupabaseCatalogRepository(supabase_client),
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.catalog_cache_ttl_seconds,
    )
    image_client = HttpxImageClient.create(
        timeout_seconds=resolved_settings.image_timeout_seconds
    )
    openai_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    vision_service = VisionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        timeout_seconds=resolved_settings.vision_timeout_seconds,
    )
    enrichment_service = EnrichmentService(
        catalog=catalog_service,
        strategy=build_match_strategy(
            parse_match_strategy(resolved_settings.catalog_match_strategy)
        ),
    )
    detection_service = DetectionService(
        image_client=image_client,
        vision_service=vision_service,
        enrichment_service=enrichment_service,
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    recommendation_service = RecommendationService(
        profile_service=profile_service,
        repository=SupabaseRecommendationRepository(supabase_client),
    )

    async def close_resources() -> None:
        await image_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_service=IdentityService(SupabaseIdentityProvider(supabase_client)),
        catalog_service=catalog_service,
        detection_service=detection_service,
        meal_log_service=MealLogService(
            repository=SupabaseMealRepository(supabase_client),
            timezone=resolved_settings.timezone,
        ),
        summary_service=SummaryService(SupabaseSummaryRepository(supabase_client)),
        profile_service=profile_service,
        recommendation_service=recommendation_service,
        close_resources=close_resources,
    )
