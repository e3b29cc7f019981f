"""Nutrition catalog access with cached listings."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_vision.domain.catalog import FoodCatalogEntry
from meal_vision.services.cache import Cache

_CATALOG_KEY = "catalog:entries"

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Read-only access to the nutrition catalog."""

    def find_containing(self, fragment: str, limit: int) -> list[FoodCatalogEntry]:
        """Return entries whose name contains the fragment, case-insensitively."""

    def list_entries(self) -> list[FoodCatalogEntry]:
        """Return every catalog entry in store order."""


@dataclass
class CatalogService:
    """Catalog lookups shared by matching and manual food search."""

    repository: CatalogRepository
    cache: Cache
    ttl_seconds: int = 300

    def find_containing(self, fragment: str, limit: int = 1) -> list[FoodCatalogEntry]:
        """Return catalog entries whose name contains ``fragment``."""
        cleaned = fragment.strip()
        if not cleaned:
            return []
        return self.repository.find_containing(cleaned, limit)

    def search(self, query: str | None, limit: int = 10) -> list[FoodCatalogEntry]:
        """Search the catalog by name, or list it when no query is given."""
        if query and query.strip():
            return self.find_containing(query, limit)
        return self.list_entries()[:limit]

    def list_entries(self) -> list[FoodCatalogEntry]:
        """Return the whole catalog, cached for ``ttl_seconds``."""
        cached = self.cache.get(_CATALOG_KEY)
        if isinstance(cached, list):
            return cached
        entries = self.repository.list_entries()
        self.cache.set(_CATALOG_KEY, entries, ttl_seconds=self.ttl_seconds)
        _logger.info("Catalog loaded: entries=%s", len(entries))
        return entries
