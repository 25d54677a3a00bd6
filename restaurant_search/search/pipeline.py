from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.models import Restaurant
from .matching import matches_filters, matches_search_query
from .models import DeliveryTimeLimit, PriceRange, RatingFloor, SearchFilters
from .ranking import sort_by_relevance

logger = logging.getLogger(__name__)


def filter_restaurants(
    restaurants: Sequence[Restaurant],
    query: str,
    filters: SearchFilters,
) -> list[Restaurant]:
    """
    Keep the restaurants that match both the query and the filters, ranked by relevance.

    The returned list holds the same objects as ``restaurants``; nothing is copied.
    """
    matched = [
        restaurant
        for restaurant in restaurants
        if matches_search_query(restaurant, query) and matches_filters(restaurant, filters)
    ]
    logger.debug("Matched %d of %d restaurants for query=%r", len(matched), len(restaurants), query)
    return sort_by_relevance(matched, query)


def apply_multiple_filters(
    restaurants: Sequence[Restaurant],
    *,
    query: str | None = None,
    cuisine_types: Sequence[str] | None = None,
    dietary_restrictions: Sequence[str] | None = None,
    price_range: PriceRange | dict | None = None,
    delivery_time: DeliveryTimeLimit | dict | None = None,
    rating: RatingFloor | dict | None = None,
) -> list[Restaurant]:
    """Build a filter set from whichever dimensions are given and run the pipeline."""
    filters = SearchFilters(
        cuisine_types=list(cuisine_types or []),
        dietary_restrictions=list(dietary_restrictions or []),
        price_range=price_range,
        delivery_time=delivery_time,
        rating=rating,
    )
    return filter_restaurants(restaurants, query or "", filters)
