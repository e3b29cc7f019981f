"""Tests for catalog match strategies."""

from meal_vision.services.cache import InMemoryCache
from meal_vision.services.catalog import CatalogService
from meal_vision.services.matching import (
    CascadeMatchStrategy,
    ExactMatchStrategy,
    SubstringMatchStrategy,
    TokenOverlapMatchStrategy,
    build_match_strategy,
)
from tests.conftest import InMemoryCatalogRepository, catalog_entry


def _catalog(*names: str) -> CatalogService:
    repository = InMemoryCatalogRepository(
        entries=[catalog_entry(name, 100, 1, 1, 1) for name in names]
    )
    return CatalogService(repository=repository, cache=InMemoryCache())


def test_substring_match_is_case_insensitive(catalog_service: CatalogService) -> None:
    entry = SubstringMatchStrategy().match("SALMON", catalog_service)

    assert entry is not None
    assert entry.name == "Salmon"


def test_substring_match_needs_name_inside_catalog_name(
    catalog_service: CatalogService,
) -> None:
    assert SubstringMatchStrategy().match("Tandoori Chicken", catalog_service) is None
    assert SubstringMatchStrategy().match("   ", catalog_service) is None


def test_exact_match_prefers_equal_name() -> None:
    catalog = _catalog("Rice Cake", "Rice")

    entry = ExactMatchStrategy().match("rice", catalog)

    assert entry is not None
    assert entry.name == "Rice"
    assert ExactMatchStrategy().match("ric", catalog) is None


def test_token_overlap_match_uses_jaccard_threshold() -> None:
    catalog = _catalog("Chicken Breast", "Grilled Salmon Fillet")

    entry = TokenOverlapMatchStrategy().match("Grilled Chicken Breast", catalog)

    assert entry is not None
    assert entry.name == "Chicken Breast"
    assert TokenOverlapMatchStrategy().match("Fried Chicken Wings", catalog) is None


def test_token_overlap_ties_keep_first_entry() -> None:
    catalog = _catalog("Green Apple", "Red Apple")

    entry = TokenOverlapMatchStrategy(min_score=0.3).match("Apple Pie", catalog)

    assert entry is not None
    assert entry.name == "Green Apple"


def test_cascade_falls_through_strategies() -> None:
    catalog = _catalog("Chicken Breast", "Rice Cake", "Rice")
    strategy = CascadeMatchStrategy()

    exact = strategy.match("Rice", catalog)
    substring = strategy.match("Breast", catalog)
    overlap = strategy.match("Breast of Chicken", catalog)

    assert exact is not None and exact.name == "Rice"
    assert substring is not None and substring.name == "Chicken Breast"
    assert overlap is not None and overlap.name == "Chicken Breast"
    assert strategy.match("Lasagna", catalog) is None


def test_build_match_strategy() -> None:
    assert isinstance(build_match_strategy("substring"), SubstringMatchStrategy)
    assert isinstance(build_match_strategy("cascade"), CascadeMatchStrategy)
