from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Coordinates, Location, Restaurant

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["id", "name"]

_catalog: list[Restaurant] | None = None


def _split_list(value: Any, separator: str) -> list[str]:
    if value is None or pd.isna(value):
        return []
    return [part.strip() for part in str(value).split(separator) if part.strip()]


def _optional_str(value: Any) -> str | None:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _normalize_rating(rating: Any) -> float:
    if rating is None or pd.isna(rating):
        return 0.0
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0

    # Clamp to [0, 5]
    return max(0.0, min(5.0, value))


def _to_float(value: Any, default: float = 0.0) -> float:
    if value is None or pd.isna(value):
        return default
    try:
        return max(0.0, float(value))
    except (TypeError, ValueError):
        return default


def _to_int(value: Any, default: int = 0) -> int:
    if value is None or pd.isna(value):
        return default
    try:
        return max(0, int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return default


def _to_bool(value: Any) -> bool:
    if value is None or pd.isna(value):
        return True
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "open"}
    return bool(value)


def _row_to_restaurant(row: pd.Series, separator: str) -> Restaurant | None:
    restaurant_id = _optional_str(row.get("id"))
    if restaurant_id is None:
        return None

    coordinates = None
    latitude, longitude = row.get("latitude"), row.get("longitude")
    if latitude is not None and longitude is not None and pd.notna(latitude) and pd.notna(longitude):
        coordinates = Coordinates(latitude=float(latitude), longitude=float(longitude))

    return Restaurant(
        id=restaurant_id,
        name=_optional_str(row.get("name")) or "",
        description=_optional_str(row.get("description")) or "",
        cuisine_types=_split_list(row.get("cuisines"), separator),
        dietary_tags=_split_list(row.get("dietary_tags"), separator),
        rating=_normalize_rating(row.get("rating")),
        review_count=_to_int(row.get("review_count")),
        delivery_time=_optional_str(row.get("delivery_time")),
        delivery_fee=_to_float(row.get("delivery_fee")),
        minimum_order=_to_float(row.get("minimum_order")),
        is_open=_to_bool(row.get("is_open")),
        location=Location(
            address=_optional_str(row.get("address")) or "",
            coordinates=coordinates,
        ),
    )


def load_catalog(path: Path, separator: str = ",") -> list[Restaurant]:
    """
    Read a catalog CSV into Restaurant records, in file order.

    List columns (``cuisines``, ``dietary_tags``) hold comma-separated tags
    inside a quoted cell. Missing descriptions become empty strings and
    missing delivery times stay ``None`` so the search core can fail open on them.
    """
    if not path.is_file():
        logger.error("Restaurant catalog not found at %s", path)
        raise FileNotFoundError(f"Restaurant catalog not found: {path}")

    df = pd.read_csv(path, dtype={"id": str})

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Catalog {path} is missing required columns: {', '.join(missing)}")

    restaurants: list[Restaurant] = []
    for index, row in df.iterrows():
        restaurant = _row_to_restaurant(row, separator)
        if restaurant is None:
            logger.warning("Skipping catalog row %s in %s: missing id", index, path)
            continue
        restaurants.append(restaurant)
    logger.info("Loaded %d restaurants from %s", len(restaurants), path)
    return restaurants


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Restaurant]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.catalog_path, config.list_separator)
    return _catalog


def set_catalog(restaurants: Iterable[Restaurant]) -> None:
    """Replace the in-memory catalog, e.g. after a fresh fetch."""
    global _catalog
    _catalog = list(restaurants)


def clear_catalog() -> None:
    global _catalog
    _catalog = None


def get_restaurant_by_id(restaurant_id: str) -> Restaurant | None:
    for restaurant in get_catalog():
        if restaurant.id == restaurant_id:
            return restaurant
    return None


def get_cuisine_types() -> list[str]:
    """Return every cuisine tag present in the catalog, sorted alphabetically."""
    cuisines: set[str] = set()
    for restaurant in get_catalog():
        cuisines.update(restaurant.cuisine_types)
    return sorted(cuisines)
