from __future__ import annotations

import copy
import itertools
import json
from typing import Any, Dict, List, Optional

import pytest
import requests


def http_error(status: int = 500, body: Optional[dict] = None) -> requests.HTTPError:
    response = requests.Response()
    response.status_code = status
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return requests.HTTPError(f"{status} Server Error", response=response)


class InMemoryResource:
    """Stand-in for CatalogResource backed by a dict, answering with envelopes."""

    _ids = itertools.count(1)

    def __init__(self, prefix: str, records: Optional[List[Dict[str, Any]]] = None):
        self.prefix = prefix
        self.records: Dict[str, Dict[str, Any]] = {}
        self.calls: List[tuple] = []
        self.fail_with: Optional[Exception] = None
        for record in records or []:
            self.records[record["_id"]] = copy.deepcopy(record)

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc

    def list(self, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append(("list", params))
        self._maybe_fail()
        return [copy.deepcopy(r) for r in self.records.values()]

    def get(self, record_id: str) -> Any:
        self.calls.append(("get", record_id))
        self._maybe_fail()
        return copy.deepcopy(self.records[record_id])

    def create(self, data: Dict[str, Any]) -> Any:
        self.calls.append(("create", data))
        self._maybe_fail()
        record = {"_id": f"{self.prefix}{next(self._ids)}", **copy.deepcopy(data)}
        self.records[record["_id"]] = record
        return copy.deepcopy(record)

    def update(self, record_id: str, data: Dict[str, Any]) -> Any:
        self.calls.append(("update", record_id, data))
        self._maybe_fail()
        record = {"_id": record_id, **copy.deepcopy(data)}
        self.records[record_id] = record
        return copy.deepcopy(record)

    def delete(self, record_id: str) -> Any:
        self.calls.append(("delete", record_id))
        self._maybe_fail()
        self.records.pop(record_id, None)
        return {"message": "deleted"}

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def paris() -> Dict[str, Any]:
    return {
        "_id": "d1",
        "name": "Paris",
        "country": "France",
        "description": "City of light",
        "coordinates": {"latitude": 48.8566, "longitude": 2.3522},
        "bestTimeToVisit": "April to June",
        "currency": "EUR",
        "language": "French",
    }


@pytest.fixture
def ritz() -> Dict[str, Any]:
    return {
        "_id": "h1",
        "name": "Ritz",
        "destinationId": {"_id": "d1", "name": "Paris", "country": "France"},
        "address": "15 Place Vendome",
        "starRating": 5,
        "guestRating": 4.7,
        "pricePerNight": 1200.0,
        "imageUrl": "https://example.com/ritz.jpg",
        "hotelAmenities": ["Spa", "Pool"],
        "nearbyAttractions": [{"name": "Louvre", "distance": "1km"}],
        "contactInfo": {"phoneNumber": "+33 1 43 16 30 30", "email": "", "website": ""},
    }


@pytest.fixture
def destinations(paris) -> InMemoryResource:
    return InMemoryResource("d", [paris])


@pytest.fixture
def hotels(ritz) -> InMemoryResource:
    return InMemoryResource("h", [ritz])


@pytest.fixture
def make_http_error():
    return http_error
