"""Portion scaling for enriched food records."""

import math
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from meal_vision.domain.foods import EnrichedFoodRecord, NutrientTotals
from meal_vision.errors import PortionValidationError


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero to ``digits`` decimals (247.5 -> 248)."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def scale_nutrients(base: NutrientTotals, factor: float) -> NutrientTotals:
    """Scale nutrients linearly: whole calories, macros to one decimal."""
    return NutrientTotals(
        calories=round_half_up(base.calories * factor),
        protein=round_half_up(base.protein * factor, 1),
        carbs=round_half_up(base.carbs * factor, 1),
        fat=round_half_up(base.fat * factor, 1),
    )


def rescale(record: EnrichedFoodRecord, new_portion_grams: float) -> EnrichedFoodRecord:
    """Return the record scaled from its current portion to a new one."""
    if not _is_valid_portion(new_portion_grams):
        raise PortionValidationError(new_portion_grams)
    if new_portion_grams == record.portion_grams:
        return record
    ratio = new_portion_grams / record.portion_grams
    scaled = scale_nutrients(record.nutrients, ratio)
    return replace(
        record,
        portion_grams=float(new_portion_grams),
        calories=scaled.calories,
        protein=scaled.protein,
        carbs=scaled.carbs,
        fat=scaled.fat,
    )


def _is_valid_portion(value: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value > 0
