from __future__ import annotations

from typing import Sequence

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .filter_state import get_filter_summary, has_active_filters
from .matching import normalize_search_text
from .models import (
    EmptyStateAction,
    EmptyStateActionKind,
    EmptyStateContent,
    EmptyStateIcon,
    SearchFilters,
)

REMOVE_FILTERS_HINT = "Try removing some filters"
CHECK_SPELLING_HINT = "Check your spelling"


def _dedupe(items: Sequence[str], limit: int) -> list[str]:
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen[:limit]


def get_search_suggestions(
    available_cuisines: Sequence[str],
    query: str | None = None,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[str]:
    """
    Suggest cuisines to search for.

    Without a query the first cuisines are offered in the order given.
    With one, only cuisines containing the query are offered.
    """
    normalized = normalize_search_text(query or "")
    if not normalized:
        return list(available_cuisines[: config.max_suggestions])

    matching = [c for c in available_cuisines if normalized in c.lower()]
    return matching[: config.max_suggestions]


def get_empty_state_content(
    query: str,
    filters: SearchFilters,
    available_cuisines: Sequence[str],
    result_count: int = 0,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> EmptyStateContent | None:
    """
    Explain an empty result set.

    Returns ``None`` when there are results, since nothing needs explaining.
    """
    if result_count > 0:
        return None

    has_query = bool(query.strip())
    has_filters = has_active_filters(filters)

    if has_query and has_filters:
        return EmptyStateContent(
            title="No matches found",
            message=f'We couldn\'t find any restaurants matching "{query}" with your current filters.',
            icon=EmptyStateIcon.combined,
            suggestions=[REMOVE_FILTERS_HINT, CHECK_SPELLING_HINT, "Try a broader search term"][
                : config.max_suggestions
            ],
        )

    if has_query:
        # Nothing in the catalog contains the query, so fall back to the default picks.
        cuisine_hints = get_search_suggestions(available_cuisines, query, config) or get_search_suggestions(
            available_cuisines, None, config
        )
        return EmptyStateContent(
            title="No results for your search",
            message=f'We couldn\'t find any restaurants matching "{query}".',
            icon=EmptyStateIcon.search,
            suggestions=_dedupe(
                [CHECK_SPELLING_HINT, "Try a different search term", *cuisine_hints],
                config.max_suggestions,
            ),
        )

    if has_filters:
        summary = get_filter_summary(filters).summary
        return EmptyStateContent(
            title="No restaurants match your filters",
            message=f"We couldn't find any restaurants with {', '.join(summary)}.",
            icon=EmptyStateIcon.filter,
            suggestions=[REMOVE_FILTERS_HINT, "Expand your delivery area", "Browse all restaurants"][
                : config.max_suggestions
            ],
        )

    return EmptyStateContent(
        title="No restaurants available",
        message="We're working to bring you more dining options.",
        icon=EmptyStateIcon.search,
        suggestions=["Check back later", "Try a different location"][: config.max_suggestions],
    )


def get_empty_state_action(query: str, filters: SearchFilters) -> EmptyStateAction:
    """Pick the one corrective action to offer; clearing filters wins over clearing the query."""
    if has_active_filters(filters):
        return EmptyStateAction(label="Clear filters", action=EmptyStateActionKind.clear_filters)
    if query.strip():
        return EmptyStateAction(label="Clear search", action=EmptyStateActionKind.clear_search)
    return EmptyStateAction(label="Browse all restaurants", action=EmptyStateActionKind.browse_all)
