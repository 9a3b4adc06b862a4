from __future__ import annotations

import logging
import time

from .cache import PlacesCache
from .client import PlacesClient
from .models import Place, PlacesQuery
from .normalize import apply_query_filters, normalize_places

logger = logging.getLogger(__name__)


class PlacesService:
    def __init__(self, client: PlacesClient, cache: PlacesCache) -> None:
        self.client = client
        self.cache = cache

    def fetch_places(self, query: PlacesQuery) -> list[Place]:
        """
        Return normalized places for ``query``, served from cache when fresh.

        On a miss the Places API is called once; its errors propagate
        unchanged and nothing is cached.
        """
        cached = self.cache.get(query)
        if cached is not None:
            logger.debug("Places cache hit for %r", query.q)
            return cached

        start_time = time.time()
        raw = self.client.search_text(query.q, query.type)
        places = apply_query_filters(normalize_places(raw), query)
        self.cache.set(query, places)

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "Places cache miss for %r: %d raw, %d kept (%.1f ms)",
            query.q, len(raw), len(places), elapsed_ms,
        )
        return places
