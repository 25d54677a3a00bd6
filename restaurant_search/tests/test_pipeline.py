from __future__ import annotations

import random

from restaurant_search.catalog.mock_data import CUISINE_TYPES, generate_mock_restaurants
from restaurant_search.catalog.models import Restaurant
from restaurant_search.search.matching import matches_filters, matches_search_query
from restaurant_search.search.models import (
    DeliveryTimeLimit,
    PriceRange,
    RatingFloor,
    SearchFilters,
)
from restaurant_search.search.pipeline import apply_multiple_filters, filter_restaurants

BISTRO = Restaurant(
    id="1",
    name="Italian Bistro",
    description="Authentic Italian cuisine with fresh ingredients",
    cuisine_types=["Italian", "Mediterranean"],
    rating=4.5,
    review_count=120,
    delivery_time="25-35 min",
    delivery_fee=3.99,
)
DRAGON = Restaurant(
    id="2",
    name="Golden Dragon",
    description="Dim sum",
    cuisine_types=["Chinese"],
    rating=4.7,
    delivery_time="30-45 min",
    delivery_fee=1.5,
)


def _random_filters(rng: random.Random) -> SearchFilters:
    return SearchFilters(
        cuisine_types=rng.sample(CUISINE_TYPES, rng.randint(0, 3)),
        price_range=PriceRange(min=rng.uniform(0, 3), max=rng.uniform(3, 8)) if rng.random() > 0.5 else None,
        delivery_time=DeliveryTimeLimit(max=rng.randint(20, 60)) if rng.random() > 0.5 else None,
        rating=RatingFloor(min=round(rng.uniform(3.5, 5.0), 1)) if rng.random() > 0.5 else None,
    )


# ── filter_restaurants ───────────────────────────────────────────────────


class TestFilterRestaurants:
    def test_empty_query_and_filters_returns_catalog_ranked(self):
        results = filter_restaurants([BISTRO, DRAGON], "", SearchFilters())
        assert results == [DRAGON, BISTRO]
        assert results[0] is DRAGON

    def test_filters_by_query(self):
        assert filter_restaurants([BISTRO, DRAGON], "italian", SearchFilters()) == [BISTRO]
        assert filter_restaurants([BISTRO, DRAGON], "thai", SearchFilters()) == []

    def test_filters_by_filters(self):
        filters = SearchFilters(cuisine_types=["Chinese"])
        assert filter_restaurants([BISTRO, DRAGON], "", filters) == [DRAGON]

    def test_query_and_filters_are_anded(self):
        filters = SearchFilters(cuisine_types=["Chinese"])
        assert filter_restaurants([BISTRO, DRAGON], "italian", filters) == []

    def test_empty_catalog(self):
        assert filter_restaurants([], "pizza", SearchFilters()) == []

    def test_does_not_mutate_input(self):
        catalog = [BISTRO, DRAGON]
        filter_restaurants(catalog, "", SearchFilters())
        assert catalog[0] is BISTRO
        assert catalog[1] is DRAGON


class TestPipelineProperties:
    def test_results_are_identity_subset_satisfying_both_matchers(self):
        rng = random.Random(21)
        queries = ["", "  ", "ital", "GRILL", "fresh", "thai", "zzz"]
        for _ in range(100):
            catalog = generate_mock_restaurants(rng.randint(0, 20), rng=rng)
            query = rng.choice(queries)
            filters = _random_filters(rng)
            results = filter_restaurants(catalog, query, filters)

            assert len(results) <= len(catalog)
            for restaurant in results:
                assert any(restaurant is item for item in catalog)
                assert matches_search_query(restaurant, query)
                assert matches_filters(restaurant, filters)

    def test_blank_query_keeps_everything_without_filters(self):
        rng = random.Random(3)
        catalog = generate_mock_restaurants(15, rng=rng)
        assert len(filter_restaurants(catalog, "   ", SearchFilters())) == 15

    def test_narrowing_cuisines_never_grows_results(self):
        rng = random.Random(5)
        for _ in range(100):
            catalog = generate_mock_restaurants(rng.randint(5, 25), rng=rng)
            selected = rng.sample(CUISINE_TYPES, rng.randint(1, 5))
            subset = selected[: rng.randint(1, len(selected))]
            query = rng.choice(["", "a", "cuisine"])

            wide = filter_restaurants(catalog, query, SearchFilters(cuisine_types=selected))
            narrow = filter_restaurants(catalog, query, SearchFilters(cuisine_types=subset))
            assert len(narrow) <= len(wide)
            assert all(any(r is w for w in wide) for r in narrow)

    def test_ranking_is_reproducible(self):
        rng = random.Random(11)
        catalog = generate_mock_restaurants(30, rng=rng)
        first = filter_restaurants(catalog, "", SearchFilters())
        second = filter_restaurants(list(catalog), "", SearchFilters())
        assert [r.id for r in first] == [r.id for r in second]


# ── apply_multiple_filters ───────────────────────────────────────────────


class TestApplyMultipleFilters:
    def test_applies_every_given_dimension(self):
        results = apply_multiple_filters(
            [BISTRO, DRAGON],
            query="italian",
            cuisine_types=["Italian"],
            rating={"min": 4.0},
        )
        assert results == [BISTRO]

    def test_no_options_returns_everything(self):
        assert len(apply_multiple_filters([BISTRO, DRAGON])) == 2

    def test_accepts_models(self):
        results = apply_multiple_filters(
            [BISTRO, DRAGON],
            price_range=PriceRange(min=0, max=2),
            delivery_time=DeliveryTimeLimit(max=45),
        )
        assert results == [DRAGON]

    def test_dietary_filter_excludes_untagged(self):
        assert apply_multiple_filters([BISTRO, DRAGON], dietary_restrictions=["Vegan"]) == []
