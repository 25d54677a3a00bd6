"""
Pure helpers that compute the next filter state from the current one.

None of these functions mutate their arguments; every call returns a new value.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import BaseModel

from .models import FilterSummary, SearchFilters


def _toggle(current: Sequence[str], value: str) -> list[str]:
    if value in current:
        return [item for item in current if item != value]
    return [*current, value]


def toggle_cuisine_filter(current: Sequence[str], cuisine: str) -> list[str]:
    """Remove ``cuisine`` if selected, otherwise append it."""
    return _toggle(current, cuisine)


def toggle_dietary_filter(current: Sequence[str], restriction: str) -> list[str]:
    """Remove ``restriction`` if selected, otherwise append it."""
    return _toggle(current, restriction)


def merge_filters(
    current: SearchFilters,
    updates: Mapping[str, Any] | SearchFilters,
) -> SearchFilters:
    """
    Shallow-merge ``updates`` over ``current``.

    A field present in ``updates`` replaces the current value outright, even
    when it is an empty list or ``None`` (which clears that dimension). Fields
    not present are carried over. For a ``SearchFilters`` update only the
    fields that were explicitly set count as present.
    """
    if isinstance(updates, BaseModel):
        updates = updates.model_dump(exclude_unset=True)
    return SearchFilters.model_validate({**current.model_dump(), **dict(updates)})


def reset_all_filters() -> SearchFilters:
    return SearchFilters()


def has_active_filters(filters: SearchFilters) -> bool:
    return bool(
        filters.cuisine_types
        or filters.dietary_restrictions
        or filters.price_range is not None
        or filters.delivery_time is not None
        or filters.rating is not None
    )


def _format_number(value: float) -> str:
    # 4.0 -> "4", 3.99 -> "3.99", 1234567.0 -> "1234567"
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def get_filter_summary(filters: SearchFilters) -> FilterSummary:
    """Count the active dimensions and describe each one, in a fixed order."""
    summary: list[str] = []

    if filters.cuisine_types:
        summary.append(_pluralize(len(filters.cuisine_types), "cuisine"))
    if filters.dietary_restrictions:
        summary.append(_pluralize(len(filters.dietary_restrictions), "dietary restriction"))
    if filters.price_range is not None:
        price = filters.price_range
        summary.append(f"${_format_number(price.min)}-${_format_number(price.max)}")
    if filters.delivery_time is not None:
        summary.append(f"≤{filters.delivery_time.max} min")
    if filters.rating is not None:
        summary.append(f"≥{_format_number(filters.rating.min)}★")

    return FilterSummary(active_count=len(summary), summary=summary)
