"""
Mock restaurant generators for development and tests.

Usage:
    rng = random.Random(7)
    catalog = generate_mock_restaurants(20, rng=rng)
"""
from __future__ import annotations

import random
import uuid
from typing import Any

from .models import Coordinates, Location, Restaurant

RESTAURANT_NAMES = [
    "The Garden Bistro",
    "Sage & Thyme",
    "Harvest Moon",
    "Olive Branch",
    "Golden Spoon",
    "Fresh & Co",
    "The Green Table",
    "Artisan Kitchen",
    "Farm to Fork",
    "Coastal Catch",
    "Mountain View Grill",
    "Urban Eats",
]

CUISINE_TYPES = [
    "Mediterranean",
    "Italian",
    "Asian Fusion",
    "American",
    "Mexican",
    "French",
    "Japanese",
    "Indian",
    "Thai",
    "Greek",
    "Vietnamese",
    "Korean",
]

DIETARY_TAGS = ["Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free"]

_ADDRESSES = [
    "123 Main St, San Francisco",
    "456 Oak Ave, Los Angeles",
    "789 Pine Rd, New York",
    "321 Elm St, Chicago",
    "654 Maple Dr, Austin",
]


def generate_mock_restaurant(rng: random.Random | None = None, **overrides: Any) -> Restaurant:
    """Build one plausible restaurant; keyword overrides replace generated fields."""
    rng = rng or random.Random()
    cuisines = rng.sample(CUISINE_TYPES, rng.randint(1, 3))
    low = rng.randint(15, 40)

    fields: dict[str, Any] = {
        "id": uuid.UUID(int=rng.getrandbits(128)).hex[:9],
        "name": rng.choice(RESTAURANT_NAMES),
        "description": (
            f"Experience authentic {cuisines[0]} cuisine with a modern twist. "
            "Fresh ingredients, expertly prepared dishes, and warm hospitality await you."
        ),
        "cuisine_types": cuisines,
        "dietary_tags": rng.sample(DIETARY_TAGS, rng.randint(0, 2)),
        "rating": round(rng.uniform(3.5, 5.0), 1),
        "review_count": rng.randint(50, 2000),
        "delivery_time": f"{low}-{low + rng.randint(5, 20)} min",
        "delivery_fee": round(rng.uniform(0.0, 5.99), 2),
        "minimum_order": round(rng.uniform(15.0, 35.0), 2),
        "is_open": rng.random() > 0.2,
        "location": Location(
            address=rng.choice(_ADDRESSES),
            coordinates=Coordinates(
                latitude=round(rng.uniform(37.7, 37.8), 6),
                longitude=round(rng.uniform(-122.5, -122.4), 6),
            ),
        ),
    }
    fields.update(overrides)
    return Restaurant(**fields)


def generate_mock_restaurants(count: int, rng: random.Random | None = None) -> list[Restaurant]:
    rng = rng or random.Random()
    return [generate_mock_restaurant(rng) for _ in range(count)]
