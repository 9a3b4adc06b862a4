"""
Map raw Places API (v1) records into the canonical Place schema.

Missing optional fields are filled with defaults; the only reason a record
is dropped is a business status other than ``OPERATIONAL``.
"""
from __future__ import annotations

import math
from typing import Any, Iterable

from .models import OpenStatus, Place, PlacesQuery

OPERATIONAL = "OPERATIONAL"
PRICE_LEVELS = (0, 1, 2, 3, 4)

# The v1 API reports price levels as enum names.
PRICE_LEVEL_NAMES = {
    "PRICE_LEVEL_FREE": 0,
    "PRICE_LEVEL_INEXPENSIVE": 1,
    "PRICE_LEVEL_MODERATE": 2,
    "PRICE_LEVEL_EXPENSIVE": 3,
    "PRICE_LEVEL_VERY_EXPENSIVE": 4,
}


def _normalize_price_level(value: Any) -> int:
    if isinstance(value, str):
        return PRICE_LEVEL_NAMES.get(value, 0)
    # bool is an int subclass, never a tier
    if isinstance(value, int) and not isinstance(value, bool) and value in PRICE_LEVELS:
        return value
    return 0


def _normalize_rating(value: Any) -> float:
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(rating):
        return 0.0
    # Clamp to [0, 5]
    return max(0.0, min(5.0, rating))


def _normalize_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, count)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def normalize_place(raw: dict[str, Any]) -> Place | None:
    """Return the canonical Place for ``raw``, or ``None`` if it is not operating."""
    if not isinstance(raw, dict) or raw.get("businessStatus") != OPERATIONAL:
        return None

    display_name = _as_dict(raw.get("displayName"))
    opening_hours = _as_dict(raw.get("currentOpeningHours"))
    open_flag = opening_hours.get("openNow")
    name = display_name.get("text")
    place_id = raw.get("placeId")
    types = raw.get("types")

    return Place(
        id=str(raw.get("id", "")),
        place_id=str(place_id) if place_id is not None else None,
        name=name if isinstance(name, str) and name else "Unknown",
        rating=_normalize_rating(raw.get("rating")),
        user_ratings_total=_normalize_count(raw.get("userRatingCount")),
        price_level=_normalize_price_level(raw.get("priceLevel")),
        types=[t for t in types if isinstance(t, str)] if isinstance(types, list) else [],
        open_now=OpenStatus.from_flag(open_flag if isinstance(open_flag, bool) else None),
    )


def normalize_places(raws: Iterable[dict[str, Any]]) -> list[Place]:
    places: list[Place] = []
    for raw in raws:
        place = normalize_place(raw)
        if place is not None:
            places.append(place)
    return places


def apply_query_filters(places: list[Place], query: PlacesQuery) -> list[Place]:
    """Keep places inside the requested price range and, if asked, not closed."""
    return [
        p
        for p in places
        if query.min_price <= p.price_level <= query.max_price
        and p.open_now.passes(query.open_now)
    ]
