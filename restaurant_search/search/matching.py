from __future__ import annotations

import re

from ..catalog.models import Restaurant
from .models import SearchFilters

# "30 min", "45 minutes", "25-35 min", "15 - 20 minutes"
_DELIVERY_TIME_RE = re.compile(
    r"^\s*(\d+)(?:\s*-\s*(\d+))?\s*min(?:ute)?s?\s*$",
    re.IGNORECASE,
)


def normalize_search_text(text: str) -> str:
    return text.strip().lower()


def matches_search_query(restaurant: Restaurant, query: str) -> bool:
    """True if the query is blank or is a substring of the name, description or a cuisine tag."""
    normalized = normalize_search_text(query)
    if not normalized:
        return True

    if normalized in restaurant.name.lower():
        return True
    if normalized in restaurant.description.lower():
        return True
    return any(normalized in cuisine.lower() for cuisine in restaurant.cuisine_types)


def parse_delivery_time(delivery_time: str | None) -> int | None:
    """
    Return the worst-case delivery time in minutes.

    A single value ("30 min") is returned as is; for a range ("25-35 min")
    the upper bound is returned. Any other text yields ``None``, which is
    not the same as zero.
    """
    if not delivery_time:
        return None
    match = _DELIVERY_TIME_RE.match(delivery_time)
    if not match:
        return None
    upper = match.group(2) or match.group(1)
    return int(upper)


def matches_filters(restaurant: Restaurant, filters: SearchFilters) -> bool:
    """True if the restaurant satisfies every dimension present in ``filters``."""
    if filters.cuisine_types:
        if not set(restaurant.cuisine_types) & set(filters.cuisine_types):
            return False

    if filters.dietary_restrictions:
        if not set(restaurant.dietary_tags) & set(filters.dietary_restrictions):
            return False

    if filters.price_range is not None:
        price = filters.price_range
        if not price.min <= restaurant.delivery_fee <= price.max:
            return False

    if filters.delivery_time is not None:
        minutes = parse_delivery_time(restaurant.delivery_time)
        # Unparseable times stay in the results.
        if minutes is not None and minutes > filters.delivery_time.max:
            return False

    if filters.rating is not None and restaurant.rating < filters.rating.min:
        return False

    return True
