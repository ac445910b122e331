from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, List, Optional

import requests

from travel_admin.models.domain import DestinationSummary, HotelSummary, PriceFormat
from travel_admin.services.catalog_client import CatalogClient
from travel_admin.services.responses import as_collection, record_id

logger = logging.getLogger(__name__)


class HotelViewer:
    """
    Read-only "hotels by destination" view.

    Destinations are loaded once per activation. Each selection change
    fetches that destination's hotels; only the response for the most recent
    selection is applied.
    """

    def __init__(self, client: CatalogClient, price_format: Optional[PriceFormat] = None):
        self.client = client
        self.price_format = price_format or PriceFormat()
        self.destinations: List[Dict[str, Any]] = []
        self.selected_destination_id = ""
        self.hotels: List[Dict[str, Any]] = []
        self.loading = False
        self.loading_destinations = False
        self.error = ""
        self.active = True
        self._activated = False
        self._tickets = itertools.count(1)
        self._latest_ticket = 0

    def activate(self) -> None:
        if self._activated or not self.active:
            return
        self._activated = True
        self.loading_destinations = True
        try:
            payload = self.client.list_destinations()
        except requests.RequestException as exc:
            logger.warning("Loading destinations failed: %s", exc)
            if self.active:
                self.error = "Failed to load destinations"
            return
        finally:
            if self.active:
                self.loading_destinations = False
        if not self.active:
            logger.debug("Viewer closed before destinations arrived; dropping result")
            return
        self.destinations = [d for d in as_collection(payload) if isinstance(d, dict)]

    def close(self) -> None:
        self.active = False

    def select_destination(self, destination_id: Optional[str]) -> None:
        destination_id = "" if destination_id is None else str(destination_id)
        ticket = next(self._tickets)
        self._latest_ticket = ticket
        self.selected_destination_id = destination_id
        self.error = ""
        self.hotels = []
        if not destination_id:
            self.loading = False
            return

        self.loading = True
        try:
            payload = self.client.list_hotels_by_destination(destination_id)
        except requests.RequestException as exc:
            if ticket != self._latest_ticket:
                logger.debug("Discarding stale hotel failure for %s", destination_id)
                return
            logger.warning("Loading hotels for %s failed: %s", destination_id, exc)
            self.error = "Failed to load hotels for this destination"
            self.hotels = []
            self.loading = False
            return
        if ticket != self._latest_ticket:
            logger.debug("Discarding stale hotel response for %s", destination_id)
            return
        self.hotels = [h for h in as_collection(payload) if isinstance(h, dict)]
        self.loading = False

    def selected_destination(self) -> Optional[Dict[str, Any]]:
        if not self.selected_destination_id:
            return None
        for destination in self.destinations:
            if record_id(destination) == self.selected_destination_id:
                return destination
        return None

    def destination_summary(self) -> Optional[DestinationSummary]:
        destination = self.selected_destination()
        return DestinationSummary.from_record(destination) if destination else None

    def hotel_summaries(self) -> List[HotelSummary]:
        return [HotelSummary.from_record(h, self.price_format) for h in self.hotels]
