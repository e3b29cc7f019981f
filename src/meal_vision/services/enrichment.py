"""Detection enrichment: catalog matching and per-portion nutrient scaling."""

import logging
from dataclasses import dataclass, field
from uuid import uuid4

from meal_vision.domain.catalog import FoodCatalogEntry
from meal_vision.domain.foods import EnrichedFoodRecord, NutrientTotals
from meal_vision.domain.vision import DetectedFoodCandidate
from meal_vision.services.catalog import CatalogService
from meal_vision.services.matching import MatchStrategy, SubstringMatchStrategy
from meal_vision.services.portions import scale_nutrients

_logger = logging.getLogger(__name__)


@dataclass
class EnrichmentService:
    """Turn vision candidates into editable food records."""

    catalog: CatalogService
    strategy: MatchStrategy = field(default_factory=SubstringMatchStrategy)

    def enrich(
        self, candidates: list[DetectedFoodCandidate]
    ) -> list[EnrichedFoodRecord]:
        """Match and scale each candidate independently."""
        records = [self.enrich_one(candidate) for candidate in candidates]
        _logger.info(
            "Enriched candidates: total=%s matched=%s",
            len(records),
            sum(1 for record in records if record.matched),
        )
        return records

    def enrich_one(self, candidate: DetectedFoodCandidate) -> EnrichedFoodRecord:
        """Enrich a single candidate; unmatched names get zero nutrients."""
        entry = self.strategy.match(candidate.name, self.catalog)
        if entry is None:
            return unmatched_record(candidate)
        scaled = scale_catalog_entry(entry, candidate.portion_grams)
        return EnrichedFoodRecord(
            id=str(entry.id),
            name=entry.name,
            portion_grams=candidate.portion_grams,
            calories=scaled.calories,
            protein=scaled.protein,
            carbs=scaled.carbs,
            fat=scaled.fat,
            matched=True,
            confidence=candidate.confidence,
            food_item_id=entry.id,
        )


def scale_catalog_entry(
    entry: FoodCatalogEntry, portion_grams: float
) -> NutrientTotals:
    """Scale per-100g catalog values to a portion in grams."""
    base = NutrientTotals(
        calories=entry.calories_per_100g,
        protein=entry.protein_per_100g,
        carbs=entry.carbs_per_100g,
        fat=entry.fat_per_100g,
    )
    return scale_nutrients(base, portion_grams / 100.0)


def unmatched_record(candidate: DetectedFoodCandidate) -> EnrichedFoodRecord:
    """Build a zero-nutrient record with a temporary id."""
    return EnrichedFoodRecord(
        id=f"temp-{uuid4().hex}",
        name=candidate.name,
        portion_grams=candidate.portion_grams,
        calories=0.0,
        protein=0.0,
        carbs=0.0,
        fat=0.0,
        matched=False,
        confidence=candidate.confidence,
    )
