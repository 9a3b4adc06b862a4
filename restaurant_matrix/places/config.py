from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

FIELD_MASK = (
    "places.id",
    "places.placeId",
    "places.displayName",
    "places.rating",
    "places.userRatingCount",
    "places.priceLevel",
    "places.types",
    "places.currentOpeningHours.openNow",
    "places.businessStatus",
)


@dataclass(frozen=True)
class PlacesConfig:
    search_url: str = "https://places.googleapis.com/v1/places:searchText"
    api_key_env: str = "GOOGLE_PLACES_API_KEY"
    field_mask: tuple[str, ...] = FIELD_MASK
    max_result_count: int = 50
    language_code: str = "en"
    region_code: str = "US"
    default_type: str = "restaurant"


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: float = 60 * 60 * 12
    max_entries: int = 1024


DEFAULT_PLACES_CONFIG = PlacesConfig()
DEFAULT_CACHE_CONFIG = CacheConfig()
