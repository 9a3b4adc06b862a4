from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

DEFAULT_QUERY = "restaurants in Boston, MA"


class OpenStatus(str, Enum):
    open = "open"
    closed = "closed"
    unknown = "unknown"

    @classmethod
    def from_flag(cls, flag: bool | None) -> OpenStatus:
        if flag is None:
            return cls.unknown
        return cls.open if flag else cls.closed

    def to_flag(self) -> bool | None:
        if self is OpenStatus.open:
            return True
        if self is OpenStatus.closed:
            return False
        return None

    def passes(self, open_now_only: bool) -> bool:
        """Whether a place with this status survives the open-now filter."""
        if not open_now_only:
            return True
        if self is OpenStatus.closed:
            return False
        if self is OpenStatus.open or self is OpenStatus.unknown:
            return True
        raise ValueError(f"Unhandled open status: {self!r}")


class Place(BaseModel):
    id: str
    place_id: str | None = None
    name: str
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    user_ratings_total: int = Field(default=0, ge=0)
    price_level: int = Field(default=0, ge=0, le=4)
    types: list[str] = Field(default_factory=list)
    open_now: OpenStatus = OpenStatus.unknown

    @field_validator("open_now", mode="before")
    @classmethod
    def _parse_open_now(cls, value: Any) -> Any:
        # Wire format is true / false / null, enum names are also accepted.
        if value is None or isinstance(value, bool):
            return OpenStatus.from_flag(value)
        return value

    @field_serializer("open_now")
    def _dump_open_now(self, value: OpenStatus) -> bool | None:
        return value.to_flag()


class PlacesQuery(BaseModel):
    q: str = DEFAULT_QUERY
    open_now: bool = False
    min_price: int = Field(default=0, ge=0, le=4)
    max_price: int = Field(default=4, ge=0, le=4)
    type: str = ""


class PlacesResponse(BaseModel):
    places: list[Place]


class ErrorResponse(BaseModel):
    error: str
