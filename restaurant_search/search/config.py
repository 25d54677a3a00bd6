from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    max_suggestions: int = 5
    dietary_options: tuple[str, ...] = (
        "Vegetarian",
        "Vegan",
        "Gluten-Free",
        "Dairy-Free",
        "Nut-Free",
        "Keto",
        "Low-Carb",
    )


DEFAULT_SEARCH_CONFIG = SearchConfig()
