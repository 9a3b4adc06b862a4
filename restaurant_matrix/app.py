from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from .places.cache import PlacesCache
from .places.client import PlacesClient
from .places.config import DEFAULT_CACHE_CONFIG
from .places.errors import PlacesFetchError
from .places.models import DEFAULT_QUERY, ErrorResponse, PlacesQuery, PlacesResponse
from .places.service import PlacesService


def build_default_service() -> PlacesService:
    cache = PlacesCache(
        ttl_seconds=DEFAULT_CACHE_CONFIG.ttl_seconds,
        max_entries=DEFAULT_CACHE_CONFIG.max_entries,
    )
    return PlacesService(client=PlacesClient(), cache=cache)


def get_places_service(request: Request) -> PlacesService:
    return request.app.state.places_service


def create_app(service: PlacesService | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.places_service.client.close()

    app = FastAPI(title="Restaurant Review Matrix API", version="1.0.0", lifespan=lifespan)
    app.state.places_service = service or build_default_service()

    @app.exception_handler(PlacesFetchError)
    def places_fetch_error(request: Request, exc: PlacesFetchError) -> JSONResponse:
        return JSONResponse(ErrorResponse(error=exc.detail).model_dump(), status_code=500)

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/places", response_model=PlacesResponse)
    def places(
        q: str = Query(DEFAULT_QUERY),
        open_now: bool = Query(False, alias="openNow"),
        min_price: int = Query(0, alias="minPrice", ge=0, le=4),
        max_price: int = Query(4, alias="maxPrice", ge=0, le=4),
        type: str = Query(""),
        service: PlacesService = Depends(get_places_service),
    ) -> PlacesResponse:
        query = PlacesQuery(
            q=q,
            open_now=open_now,
            min_price=min_price,
            max_price=max_price,
            type=type,
        )
        return PlacesResponse(places=service.fetch_places(query))

    @app.get("/cache/stats")
    def cache_stats(service: PlacesService = Depends(get_places_service)) -> dict:
        return service.cache.stats()

    return app


app = create_app()
