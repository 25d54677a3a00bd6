from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "restaurants.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the restaurant catalog is read from.

    ``RESTAURANT_CATALOG_PATH`` overrides the sample catalog shipped with the package.
    """

    catalog_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("RESTAURANT_CATALOG_PATH", str(_BUNDLED_CATALOG))
        )
    )
    list_separator: str = ","


DEFAULT_CATALOG_CONFIG = CatalogConfig()
