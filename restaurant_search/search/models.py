from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.models import Restaurant


class PriceRange(BaseModel):
    """Inclusive bounds on the delivery fee. ``min > max`` is kept as given and matches nothing."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class DeliveryTimeLimit(BaseModel):
    model_config = ConfigDict(frozen=True)

    max: int = Field(..., description="Inclusive ceiling in minutes")


class RatingFloor(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float = Field(..., ge=0.0, le=5.0)


class SearchFilters(BaseModel):
    """
    Structured filter state.

    ``None`` on an optional dimension means the dimension is absent and puts
    no constraint on the results. Empty tag lists likewise constrain nothing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cuisine_types: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)
    price_range: PriceRange | None = None
    delivery_time: DeliveryTimeLimit | None = None
    rating: RatingFloor | None = None

    @field_validator("cuisine_types", "dietary_restrictions")
    @classmethod
    def drop_duplicate_tags(cls, v: list[str]) -> list[str]:
        """Keep the first occurrence of each tag, in selection order."""
        return list(dict.fromkeys(v))


class FilterSummary(BaseModel):
    active_count: int = Field(default=0, ge=0)
    summary: list[str] = Field(default_factory=list)


class EmptyStateIcon(str, Enum):
    search = "search"
    filter = "filter"
    combined = "combined"


class EmptyStateContent(BaseModel):
    title: str
    message: str
    icon: EmptyStateIcon
    suggestions: list[str] = Field(default_factory=list)


class EmptyStateActionKind(str, Enum):
    clear_filters = "clearFilters"
    clear_search = "clearSearch"
    browse_all = "browseAll"


class EmptyStateAction(BaseModel):
    label: str
    action: EmptyStateActionKind


class FilterDimension(str, Enum):
    cuisine = "cuisine"
    dietary = "dietary"


# ── Service / API payloads ───────────────────────────────────────────────


class SearchRequest(BaseModel):
    query: str = Field(default="", max_length=200)
    filters: SearchFilters = Field(default_factory=SearchFilters)


class SearchResponse(BaseModel):
    results: list[Restaurant]
    total_results: int
    catalog_size: int
    filter_summary: FilterSummary
    suggestions: list[str] = Field(default_factory=list)
    empty_state: EmptyStateContent | None = None
    empty_state_action: EmptyStateAction | None = None


class FilterToggleRequest(BaseModel):
    filters: SearchFilters = Field(default_factory=SearchFilters)
    dimension: FilterDimension
    value: str = Field(..., min_length=1)


class FilterMergeRequest(BaseModel):
    current: SearchFilters = Field(default_factory=SearchFilters)
    updates: dict = Field(default_factory=dict)
