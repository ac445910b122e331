from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from travel_admin.core.config import Settings, get_settings
from travel_admin.core.logging import configure_logging
from travel_admin.forms.entities import DESTINATION_SCHEMA, HOTEL_SCHEMA
from travel_admin.forms.state import EntityForm
from travel_admin.models.domain import PriceFormat
from travel_admin.services.catalog_client import CatalogClient
from travel_admin.views.hotel_viewer import HotelViewer
from travel_admin.views.list_view import EntityListView


def create_client(settings: Optional[Settings] = None) -> CatalogClient:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return CatalogClient(settings.api_base_url, timeout=settings.request_timeout)


@dataclass
class Console:
    """Per-operator view state wired to one shared catalog client."""

    client: CatalogClient
    price_format: PriceFormat
    destination_form: EntityForm
    destination_list: EntityListView
    hotel_form: EntityForm
    hotel_list: EntityListView
    # destination choices for the hotel form's select box
    hotel_destinations: EntityListView

    def new_viewer(self) -> HotelViewer:
        return HotelViewer(self.client, price_format=self.price_format)


def create_console(
    client: Optional[CatalogClient] = None, settings: Optional[Settings] = None
) -> Console:
    settings = settings or get_settings()
    client = client or create_client(settings)

    destination_form = EntityForm(DESTINATION_SCHEMA, client.destinations)
    # the hotel form offers destinations too, so destination changes reload both lists
    hotel_destinations = EntityListView(DESTINATION_SCHEMA, client.destinations)
    destination_list = EntityListView(
        DESTINATION_SCHEMA,
        client.destinations,
        destination_form,
        on_deleted=hotel_destinations.load,
    )

    def destinations_saved() -> None:
        destination_list.load()
        hotel_destinations.load()

    destination_form.on_saved = destinations_saved

    hotel_form = EntityForm(HOTEL_SCHEMA, client.hotels)
    hotel_list = EntityListView(HOTEL_SCHEMA, client.hotels, hotel_form)
    hotel_form.on_saved = hotel_list.load

    return Console(
        client=client,
        price_format=PriceFormat(settings.price_currency, settings.price_locale),
        destination_form=destination_form,
        destination_list=destination_list,
        hotel_form=hotel_form,
        hotel_list=hotel_list,
        hotel_destinations=hotel_destinations,
    )
