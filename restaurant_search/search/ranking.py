from __future__ import annotations

from typing import Iterable

from ..catalog.models import Restaurant
from .matching import matches_search_query, normalize_search_text

TIER_EXACT_NAME = 0
TIER_NAME_PREFIX = 1
TIER_OTHER_MATCH = 2
TIER_NO_MATCH = 3


def _relevance_tier(restaurant: Restaurant, normalized_query: str) -> int:
    """Return the ranking bucket of a restaurant; lower sorts first."""
    if not normalized_query:
        return TIER_OTHER_MATCH

    name = restaurant.name.lower()
    if name == normalized_query:
        return TIER_EXACT_NAME
    if name.startswith(normalized_query):
        return TIER_NAME_PREFIX
    if matches_search_query(restaurant, normalized_query):
        return TIER_OTHER_MATCH
    # Only reachable when called on an unfiltered list.
    return TIER_NO_MATCH


def sort_by_relevance(restaurants: Iterable[Restaurant], query: str) -> list[Restaurant]:
    """
    Order restaurants by relevance to ``query``.

    Exact name matches come first, then names starting with the query, then
    every other restaurant. Inside a tier higher ratings come first, and
    restaurants with the same tier and rating keep their input order because
    ``sorted`` is stable. With a blank query this reduces to rating order.
    """
    normalized = normalize_search_text(query)
    return sorted(
        restaurants,
        key=lambda r: (_relevance_tier(r, normalized), -r.rating),
    )
