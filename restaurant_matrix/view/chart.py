"""
Scatter chart description handed to the rendering layer.

The x axis is the average rating, the y axis the review count on a log
scale. Dashed reference lines split the plane into four quadrants.
"""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from ..places.models import Place

RATING_REFERENCE = 4.35
REVIEWS_REFERENCE = 1000


class Axis(BaseModel):
    data_key: str
    title: str
    domain: tuple[float, float | None]
    scale: str = "linear"
    tick_count: int = 4


class ReferenceLine(BaseModel):
    axis: str
    value: float


class ScatterPoint(BaseModel):
    x: float
    y: int
    label: str
    tooltip: list[str] = Field(default_factory=list)


class ScatterChart(BaseModel):
    name: str = "Places"
    x_axis: Axis = Axis(
        data_key="rating", title="Average rating (1–5)", domain=(3.5, 5.0)
    )
    y_axis: Axis = Axis(
        data_key="user_ratings_total",
        title="Total number of reviews",
        domain=(10, None),
        scale="log",
    )
    reference_lines: list[ReferenceLine] = Field(
        default_factory=lambda: [
            ReferenceLine(axis="x", value=RATING_REFERENCE),
            ReferenceLine(axis="y", value=REVIEWS_REFERENCE),
        ]
    )
    points: list[ScatterPoint] = Field(default_factory=list)


def tooltip_lines(place: Place) -> list[str]:
    return [
        place.name,
        f"Rating: {place.rating:.1f}",
        f"Reviews: {place.user_ratings_total}",
        f"Price: {'$' * (place.price_level + 1)}",
    ]


def build_chart(places: Iterable[Place]) -> ScatterChart:
    points = [
        ScatterPoint(
            x=p.rating,
            y=p.user_ratings_total,
            label=p.name,
            tooltip=tooltip_lines(p),
        )
        for p in places
    ]
    return ScatterChart(points=points)
