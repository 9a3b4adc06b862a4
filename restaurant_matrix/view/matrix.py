from __future__ import annotations

import logging
from dataclasses import replace

import httpx

from ..places.models import Place, PlacesResponse
from .chart import ScatterChart, build_chart
from .filters import FilterState, MatrixView, compute_view, filter_places

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_ENDPOINT = "/api/places"


class RestaurantMatrix:
    """
    Interactive rating-vs-reviews matrix state.

    When ``initial_data`` is given it is shown as-is; otherwise ``mount()``
    loads the places once from the API. Filter changes never hit the network.
    """

    def __init__(
        self,
        initial_data: list[Place] | None = None,
        http_client: httpx.Client | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url)
        self._endpoint = endpoint
        self._has_initial_data = initial_data is not None
        self._mounted = False
        self.loading = False
        self.error: str | None = None
        self.filters = FilterState()
        self._records: list[Place] = []
        self._categories: list[str] = []
        self._filtered: list[Place] = []
        self.set_records(initial_data or [])

    # ── Data ─────────────────────────────────────────────────────────────

    def mount(self) -> None:
        """Fetch places on first display when no initial data was supplied."""
        if self._mounted:
            return
        self._mounted = True
        if self._has_initial_data:
            return

        self.loading = True
        try:
            self.set_records(self._load())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to load places, showing empty matrix", exc_info=True)
            self.error = str(exc) or exc.__class__.__name__
        finally:
            self.loading = False

    def _load(self) -> list[Place]:
        response = self._http.get(self._endpoint)
        response.raise_for_status()
        return PlacesResponse.model_validate(response.json()).places

    def close(self) -> None:
        """Close the HTTP client if this matrix created it."""
        if self._owns_http:
            self._http.close()

    def set_records(self, records: list[Place]) -> None:
        self._records = list(records)
        view = compute_view(self._records, self.filters)
        self._categories = view.categories
        self._filtered = view.filtered

    # ── Filters ──────────────────────────────────────────────────────────

    def set_search(self, search: str) -> None:
        self._update(search=search)

    def set_open_now_only(self, open_now_only: bool) -> None:
        self._update(open_now_only=open_now_only)

    def set_price_range(self, low: int, high: int) -> None:
        self._update(price_range=(low, high))

    def set_category(self, category: str) -> None:
        self._update(category=category)

    def _update(self, **changes) -> None:
        self.filters = replace(self.filters, **changes)
        self._recompute()

    def _recompute(self) -> None:
        self._filtered = filter_places(self._records, self.filters)

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def records(self) -> list[Place]:
        return self._records

    @property
    def filtered(self) -> list[Place]:
        return self._filtered

    @property
    def categories(self) -> list[str]:
        return self._categories

    @property
    def view(self) -> MatrixView:
        return MatrixView(filtered=self._filtered, categories=self._categories)

    @property
    def chart(self) -> ScatterChart:
        return build_chart(self._filtered)
