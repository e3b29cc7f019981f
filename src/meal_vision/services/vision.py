"""Vision inference: prompt the model and parse food candidates."""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import ValidationError

from meal_vision.domain.vision import DetectedFoodCandidate
from meal_vision.errors import VisionInferenceError

DETECTION_PROMPT = (
    "Analyze this food image and identify ALL food items visible. "
    "For each item, provide: 1) The exact food name, "
    "2) Estimated portion size in grams, 3) Your confidence from 0 to 1. "
    'Return ONLY a JSON array like this: '
    '[{"name": "Food Name", "portionGrams": 150, "confidence": 0.9}]. '
    'Be specific with food names (e.g., "Tandoori Chicken" not just "Chicken"). '
    "If you see multiple items, list them all."
)

_logger = logging.getLogger(__name__)
_decoder = json.JSONDecoder()


class VisionClient(Protocol):
    """Interface for multimodal model calls."""

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str,
        timeout: float,
    ) -> str:
        """Return the model's free-form response text.

        Timeouts raise ``TimeoutError``; other failures raise
        ``VisionInferenceError``.
        """


@dataclass
class VisionService:
    """Service that prompts the vision model and extracts candidates."""

    client: VisionClient
    model: str
    timeout_seconds: float = 30.0

    async def detect(self, image_bytes: bytes) -> list[DetectedFoodCandidate]:
        """Return detected candidates; timeouts and unparseable output yield []."""
        data_url = _to_data_url(image_bytes)
        try:
            text = await self.client.complete(
                model=self.model,
                prompt=DETECTION_PROMPT,
                image_data_url=data_url,
                timeout=self.timeout_seconds,
            )
        except (TimeoutError, httpx.TimeoutException):
            _logger.warning(
                "Vision inference timed out",
                extra={"timeout_seconds": self.timeout_seconds},
            )
            return []
        except VisionInferenceError:
            raise
        except Exception as exc:
            raise VisionInferenceError(
                "Vision inference failed", details=f"{type(exc).__name__}: {exc}"
            ) from exc
        candidates = parse_candidates(text)
        _logger.info("Vision detected candidates: count=%s", len(candidates))
        return candidates


def parse_candidates(text: str | None) -> list[DetectedFoodCandidate]:
    """Parse the first JSON array embedded in free-form model output."""
    if not text:
        return []
    items = _first_json_array(text)
    if items is None:
        _logger.warning("Vision response had no JSON array")
        return []
    candidates: list[DetectedFoodCandidate] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            candidates.append(DetectedFoodCandidate.model_validate(item))
        except ValidationError as exc:
            _logger.warning(
                "Skipping invalid vision candidate",
                extra={"item": item, "errors": exc.error_count()},
            )
    return candidates


def _first_json_array(text: str) -> list[object] | None:
    start = text.find("[")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, list):
            return value
        start = text.find("[", start + 1)
    return None


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
