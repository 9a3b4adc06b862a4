from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass
from typing import Callable

from .config import DEFAULT_CACHE_CONFIG
from .models import Place, PlacesQuery


@dataclass
class CacheEntry:
    created_at: float
    places: list[Place]


def make_key(query: PlacesQuery) -> str:
    normalized = json.dumps(query.model_dump(), sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class PlacesCache:
    """
    In-memory TTL cache of filtered search results, keyed by query parameters.

    Expired entries are not swept; they stay in the table until the next
    ``set`` for the same key overwrites them.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CACHE_CONFIG.ttl_seconds,
        max_entries: int = DEFAULT_CACHE_CONFIG.max_entries,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def get(self, query: PlacesQuery) -> list[Place] | None:
        entry = self._entries.get(make_key(query))
        if entry and self._clock() - entry.created_at < self.ttl_seconds:
            self._hits += 1
            return entry.places
        self._misses += 1
        return None

    def set(self, query: PlacesQuery, places: list[Place]) -> None:
        key = make_key(query)
        if key not in self._entries and len(self._entries) >= self.max_entries:
            oldest = min(self._entries, key=lambda k: self._entries[k].created_at)
            del self._entries[oldest]
        self._entries[key] = CacheEntry(created_at=self._clock(), places=places)

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)
