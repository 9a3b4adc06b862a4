from __future__ import annotations


class PlacesFetchError(Exception):
    """A search against the places API did not produce results."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class UpstreamError(PlacesFetchError):
    """The places API answered with a non-success status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code


class NetworkError(PlacesFetchError):
    """The places API could not be reached."""
