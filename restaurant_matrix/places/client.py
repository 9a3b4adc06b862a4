from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .errors import NetworkError, UpstreamError

logger = logging.getLogger(__name__)


class PlacesClient:
    """Thin wrapper around the Places API ``searchText`` endpoint."""

    def __init__(
        self,
        config: PlacesConfig = DEFAULT_PLACES_CONFIG,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.config = config
        self._http = http_client or httpx.Client()

    def _headers(self) -> dict[str, str]:
        # Read per request; a missing key surfaces as an upstream auth failure.
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": os.getenv(self.config.api_key_env, ""),
            "X-Goog-FieldMask": ",".join(self.config.field_mask),
        }

    def _body(self, query_text: str, included_type: str) -> dict[str, Any]:
        return {
            "textQuery": query_text,
            "maxResultCount": self.config.max_result_count,
            "includedType": included_type or self.config.default_type,
            "languageCode": self.config.language_code,
            "regionCode": self.config.region_code,
        }

    def search_text(self, query_text: str, included_type: str = "") -> list[dict[str, Any]]:
        """
        Run one text search and return the raw ``places`` array.

        Raises ``UpstreamError`` on a non-success status and ``NetworkError``
        when the API cannot be reached. Neither is retried.
        """
        try:
            response = self._http.post(
                self.config.search_url,
                headers=self._headers(),
                json=self._body(query_text, included_type),
            )
        except httpx.HTTPError as exc:
            logger.error("Error reaching Places API: %s", exc)
            raise NetworkError(str(exc)) from exc

        if not response.is_success:
            logger.error("Error calling Places API (%s): %s", response.status_code, response.text)
            raise UpstreamError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Places API returned a non-JSON body: %s", response.text)
            raise UpstreamError(response.status_code, response.text) from exc

        places = payload.get("places", []) if isinstance(payload, dict) else None
        if places is None and isinstance(payload, dict):
            return []
        # A non-object body or a non-array "places" field
        if not isinstance(places, list):
            logger.error("Places API returned an unexpected payload: %s", response.text)
            raise UpstreamError(response.status_code, response.text)
        return places

    def close(self) -> None:
        self._http.close()
