"""Photo-to-foods detection pipeline."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_vision.domain.foods import EnrichedFoodRecord
from meal_vision.errors import VisionInferenceError
from meal_vision.services.enrichment import EnrichmentService
from meal_vision.services.vision import VisionService

NO_FOODS_MESSAGE = "No foods detected. Please add manually."

_logger = logging.getLogger(__name__)


class ImageClient(Protocol):
    """Interface for downloading images by URL."""

    async def download(self, url: str) -> bytes:
        """Return the image bytes at ``url``."""


@dataclass(frozen=True)
class DetectionResult:
    """Enriched foods plus an advisory message when nothing was found."""

    foods: list[EnrichedFoodRecord]
    message: str | None = None


@dataclass
class DetectionService:
    """Download an image, run vision inference and enrich the candidates."""

    image_client: ImageClient
    vision_service: VisionService
    enrichment_service: EnrichmentService

    async def detect(self, image_url: str) -> DetectionResult:
        """Detect foods in the image at ``image_url``."""
        try:
            image_bytes = await self.image_client.download(image_url)
        except (TimeoutError, httpx.TimeoutException) as exc:
            _logger.warning(
                "Image download timed out; returning empty detection",
                extra={"error": type(exc).__name__},
            )
            return DetectionResult(foods=[], message=NO_FOODS_MESSAGE)
        try:
            candidates = await self.vision_service.detect(image_bytes)
        except VisionInferenceError as exc:
            _logger.warning(
                "Vision inference failed; returning empty detection",
                extra={"details": exc.details},
            )
            return DetectionResult(foods=[], message=NO_FOODS_MESSAGE)
        if not candidates:
            return DetectionResult(foods=[], message=NO_FOODS_MESSAGE)
        return DetectionResult(foods=self.enrichment_service.enrich(candidates))
