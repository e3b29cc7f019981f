"""Strategies for matching detected food names against the catalog."""

import re
from dataclasses import dataclass, field
from typing import Protocol

from meal_vision.domain.catalog import FoodCatalogEntry
from meal_vision.services.catalog import CatalogService

_TOKEN_PATTERN = re.compile(r"[^\W_]+")


class MatchStrategy(Protocol):
    """Resolve a candidate name to at most one catalog entry."""

    def match(self, name: str, catalog: CatalogService) -> FoodCatalogEntry | None:
        """Return the matching catalog entry, or None."""


@dataclass
class SubstringMatchStrategy(MatchStrategy):
    """Case-insensitive containment of the name in catalog names.

    When several entries contain the name, the first one in store order wins.
    """

    def match(self, name: str, catalog: CatalogService) -> FoodCatalogEntry | None:
        hits = catalog.find_containing(name, limit=1)
        return hits[0] if hits else None


@dataclass
class ExactMatchStrategy(MatchStrategy):
    """Case-insensitive equality with a catalog name."""

    candidate_limit: int = 20

    def match(self, name: str, catalog: CatalogService) -> FoodCatalogEntry | None:
        target = name.strip().casefold()
        for entry in catalog.find_containing(name, limit=self.candidate_limit):
            if entry.name.strip().casefold() == target:
                return entry
        return None


@dataclass
class TokenOverlapMatchStrategy(MatchStrategy):
    """Best Jaccard overlap of word tokens across the whole catalog."""

    min_score: float = 0.5

    def match(self, name: str, catalog: CatalogService) -> FoodCatalogEntry | None:
        tokens = _tokens(name)
        if not tokens:
            return None
        best: FoodCatalogEntry | None = None
        best_score = 0.0
        for entry in catalog.list_entries():
            entry_tokens = _tokens(entry.name)
            if not entry_tokens:
                continue
            score = len(tokens & entry_tokens) / len(tokens | entry_tokens)
            if score > best_score:
                best, best_score = entry, score
        if best_score >= self.min_score:
            return best
        return None


@dataclass
class CascadeMatchStrategy(MatchStrategy):
    """Try each strategy in order and keep the first hit."""

    strategies: list[MatchStrategy] = field(
        default_factory=lambda: [
            ExactMatchStrategy(),
            SubstringMatchStrategy(),
            TokenOverlapMatchStrategy(),
        ]
    )

    def match(self, name: str, catalog: CatalogService) -> FoodCatalogEntry | None:
        for strategy in self.strategies:
            entry = strategy.match(name, catalog)
            if entry is not None:
                return entry
        return None


def build_match_strategy(name: str) -> MatchStrategy:
    """Return the strategy registered under ``name``."""
    if name == "cascade":
        return CascadeMatchStrategy()
    return SubstringMatchStrategy()


def _tokens(value: str) -> set[str]:
    return {token for token in _TOKEN_PATTERN.findall(value.casefold()) if token}
