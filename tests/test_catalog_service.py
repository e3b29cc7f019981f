"""Tests for catalog service and cache."""

from meal_vision.services.cache import InMemoryCache
from meal_vision.services.catalog import CatalogService
from tests.conftest import InMemoryCatalogRepository


def test_list_entries_is_cached(catalog_repository: InMemoryCatalogRepository) -> None:
    service = CatalogService(repository=catalog_repository, cache=InMemoryCache())

    first = service.list_entries()
    second = service.list_entries()

    assert len(first) == 10
    assert first == second
    assert catalog_repository.list_calls == 1


def test_zero_ttl_disables_cache(catalog_repository: InMemoryCatalogRepository) -> None:
    service = CatalogService(
        repository=catalog_repository, cache=InMemoryCache(), ttl_seconds=0
    )

    service.list_entries()
    service.list_entries()

    assert catalog_repository.list_calls == 2


def test_search_by_query_and_without_query(catalog_service: CatalogService) -> None:
    hits = catalog_service.search("o", limit=3)
    everything = catalog_service.search(None, limit=4)
    blank = catalog_service.search("   ", limit=2)

    assert len(hits) == 3
    assert all("o" in entry.name.lower() for entry in hits)
    assert [entry.name for entry in everything] == [
        "Chicken Breast",
        "Brown Rice",
        "Broccoli",
        "Salmon",
    ]
    assert len(blank) == 2


def test_find_containing_blank_fragment(catalog_service: CatalogService) -> None:
    assert catalog_service.find_containing("  ") == []

