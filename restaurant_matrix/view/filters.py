from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..places.models import Place

ALL_OPTION = ("", "All")


@dataclass(frozen=True)
class FilterState:
    search: str = ""
    open_now_only: bool = False
    price_range: tuple[int, int] = (0, 4)
    category: str = ""


@dataclass(frozen=True)
class MatrixView:
    filtered: list[Place] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    @property
    def options(self) -> list[tuple[str, str]]:
        """Select options as ``(value, label)`` pairs, "All" first."""
        return [ALL_OPTION] + [(c, c) for c in self.categories]


def matches(place: Place, filters: FilterState) -> bool:
    # Search by name (case insensitive substring match)
    if filters.search and filters.search.lower() not in place.name.lower():
        return False
    if not place.open_now.passes(filters.open_now_only):
        return False
    low, high = filters.price_range
    if place.price_level < low or place.price_level > high:
        return False
    if filters.category and filters.category not in place.types:
        return False
    return True


def filter_places(places: Iterable[Place], filters: FilterState) -> list[Place]:
    return [p for p in places if matches(p, filters)]


def category_options(places: Iterable[Place]) -> list[str]:
    labels: set[str] = set()
    for p in places:
        labels.update(p.types)
    return sorted(labels)


def compute_view(records: list[Place], filters: FilterState) -> MatrixView:
    """Derive the filtered records and category choices for one render."""
    return MatrixView(
        filtered=filter_places(records, filters),
        categories=category_options(records),
    )
