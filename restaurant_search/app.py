from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .catalog.data_store import get_catalog, get_cuisine_types, get_restaurant_by_id
from .catalog.models import Restaurant
from .logging_config import setup_logging
from .search.config import DEFAULT_SEARCH_CONFIG
from .search.filter_state import (
    get_filter_summary,
    merge_filters,
    reset_all_filters,
    toggle_cuisine_filter,
    toggle_dietary_filter,
)
from .search.models import (
    FilterDimension,
    FilterMergeRequest,
    FilterSummary,
    FilterToggleRequest,
    SearchFilters,
    SearchRequest,
    SearchResponse,
)
from .search.ranking import sort_by_relevance
from .search.service import run_search


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    get_catalog()
    yield


app = FastAPI(title="Restaurant Search API", version="1.0.0", lifespan=lifespan)


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "cuisines": get_cuisine_types(),
        "dietary_options": list(DEFAULT_SEARCH_CONFIG.dietary_options),
    }


@app.get("/restaurants", response_model=list[Restaurant])
def restaurants() -> list[Restaurant]:
    return sort_by_relevance(get_catalog(), "")


@app.get("/restaurants/{restaurant_id}", response_model=Restaurant)
def restaurant_detail(restaurant_id: str) -> Restaurant:
    restaurant = get_restaurant_by_id(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant


# ── Search endpoint ──────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(body: SearchRequest) -> SearchResponse:
    return run_search(body)


# ── Filter-state endpoints ───────────────────────────────────────────────


@app.get("/filters/default", response_model=SearchFilters)
def default_filters() -> SearchFilters:
    return reset_all_filters()


@app.post("/filters/toggle", response_model=SearchFilters)
def toggle_filter(body: FilterToggleRequest) -> SearchFilters:
    if body.dimension == FilterDimension.cuisine:
        update = {"cuisine_types": toggle_cuisine_filter(body.filters.cuisine_types, body.value)}
    else:
        update = {
            "dietary_restrictions": toggle_dietary_filter(body.filters.dietary_restrictions, body.value)
        }
    return merge_filters(body.filters, update)


@app.post("/filters/merge", response_model=SearchFilters)
def merge(body: FilterMergeRequest) -> SearchFilters:
    try:
        return merge_filters(body.current, body.updates)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/filters/summary", response_model=FilterSummary)
def filter_summary(body: SearchFilters) -> FilterSummary:
    return get_filter_summary(body)
