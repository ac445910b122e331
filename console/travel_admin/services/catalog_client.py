from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import requests

from travel_admin.services.responses import unwrap_envelope

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def _jsonable(value: Any) -> Any:
    """Replace non-finite floats with None so the body stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def error_message(exc: BaseException, fallback: str) -> str:
    """Prefer the ``message`` field of an error response body, else ``fallback``."""
    response = getattr(exc, "response", None)
    if response is None:
        return fallback
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback


class CatalogResource:
    """CRUD operations for one collection of the catalog API."""

    def __init__(self, client: "CatalogClient", path: str):
        self.client = client
        self.path = path.rstrip("/")

    def list(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.client.request("GET", self.path, params=params)

    def get(self, record_id: str) -> Any:
        return self.client.request("GET", f"{self.path}/{record_id}")

    def create(self, data: Dict[str, Any]) -> Any:
        return self.client.request("POST", self.path, json=data)

    def update(self, record_id: str, data: Dict[str, Any]) -> Any:
        return self.client.request("PUT", f"{self.path}/{record_id}", json=data)

    def delete(self, record_id: str) -> Any:
        return self.client.request("DELETE", f"{self.path}/{record_id}")


class CatalogClient:
    """
    Thin wrapper over the travel catalog REST API.

    No retries and no caching: every call is one HTTP round trip, failures are
    logged and re-raised unchanged (``requests.HTTPError`` for non-2xx,
    other ``requests.RequestException`` subclasses for transport errors).
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.timeout = timeout
        self.destinations = CatalogResource(self, "/destinations")
        self.hotels = CatalogResource(self, "/hotels")

    def resource(self, kind: str) -> CatalogResource:
        resources = {"destination": self.destinations, "hotel": self.hotels}
        try:
            return resources[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}") from None

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        body = _jsonable(json) if json is not None else None
        try:
            resp = self.session.request(
                method, url, params=params, json=body, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("API Error: %s %s: %s", method, url, exc)
            raise
        if not resp.ok:
            logger.error(
                "API Error: %s %s returned %s: %s",
                method,
                url,
                resp.status_code,
                resp.text or resp.reason,
            )
            resp.raise_for_status()
        if not resp.content:
            return None
        try:
            return unwrap_envelope(resp.json())
        except ValueError:
            logger.error("API Error: %s %s returned a non-JSON body", method, url)
            raise

    def close(self) -> None:
        self.session.close()

    # Destinations

    def list_destinations(self) -> Any:
        return self.destinations.list()

    def get_destination(self, destination_id: str) -> Any:
        return self.destinations.get(destination_id)

    def create_destination(self, data: Dict[str, Any]) -> Any:
        return self.destinations.create(data)

    def update_destination(self, destination_id: str, data: Dict[str, Any]) -> Any:
        return self.destinations.update(destination_id, data)

    def delete_destination(self, destination_id: str) -> Any:
        return self.destinations.delete(destination_id)

    # Hotels

    def list_hotels(self, destination_id: Optional[str] = None) -> Any:
        params = {"destinationId": destination_id} if destination_id else None
        return self.hotels.list(params=params)

    def get_hotel(self, hotel_id: str) -> Any:
        return self.hotels.get(hotel_id)

    def list_hotels_by_destination(self, destination_id: str) -> Any:
        return self.request("GET", f"/hotels/destination/{destination_id}")

    def create_hotel(self, data: Dict[str, Any]) -> Any:
        return self.hotels.create(data)

    def update_hotel(self, hotel_id: str, data: Dict[str, Any]) -> Any:
        return self.hotels.update(hotel_id, data)

    def delete_hotel(self, hotel_id: str) -> Any:
        return self.hotels.delete(hotel_id)
