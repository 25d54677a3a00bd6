from __future__ import annotations

import logging
import time
from typing import Sequence

from ..catalog.data_store import get_catalog, get_cuisine_types
from ..catalog.models import Restaurant
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .empty_state import get_empty_state_action, get_empty_state_content, get_search_suggestions
from .filter_state import get_filter_summary
from .models import SearchRequest, SearchResponse
from .pipeline import filter_restaurants

logger = logging.getLogger(__name__)


def run_search(
    request: SearchRequest,
    restaurants: Sequence[Restaurant] | None = None,
    available_cuisines: Sequence[str] | None = None,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> SearchResponse:
    """
    Run one search end to end.

    Falls back to the in-memory catalog when no restaurants are passed in.
    Empty-state content and the corrective action are only attached when
    nothing matched.
    """
    start_time = time.time()

    if restaurants is None:
        restaurants = get_catalog()
    if available_cuisines is None:
        available_cuisines = get_cuisine_types()

    results = filter_restaurants(restaurants, request.query, request.filters)

    empty_state = get_empty_state_content(
        request.query, request.filters, available_cuisines, len(results), config
    )
    response = SearchResponse(
        results=results,
        total_results=len(results),
        catalog_size=len(restaurants),
        filter_summary=get_filter_summary(request.filters),
        suggestions=get_search_suggestions(available_cuisines, request.query, config),
        empty_state=empty_state,
        empty_state_action=(
            get_empty_state_action(request.query, request.filters) if empty_state is not None else None
        ),
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "search query=%r active_filters=%d results=%d/%d elapsed_ms=%.1f",
        request.query,
        response.filter_summary.active_count,
        response.total_results,
        response.catalog_size,
        elapsed_ms,
    )
    return response
