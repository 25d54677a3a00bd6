from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str = ""
    coordinates: Coordinates | None = None


class Restaurant(BaseModel):
    """A catalog entry. The search core reads these and never copies or edits them."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    cuisine_types: list[str] = Field(default_factory=list)
    dietary_tags: list[str] = Field(default_factory=list)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    delivery_time: str | None = Field(
        default=None, description='e.g. "30 min" or "25-35 min"'
    )
    delivery_fee: float = Field(default=0.0, ge=0.0)
    minimum_order: float = Field(default=0.0, ge=0.0)
    is_open: bool = True
    location: Location = Field(default_factory=Location)
