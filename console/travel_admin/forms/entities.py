from __future__ import annotations

from typing import Any, Dict

from travel_admin.forms.parsing import (
    join_attractions,
    join_list,
    parse_attractions,
    parse_float,
    parse_int,
    split_list,
)
from travel_admin.forms.schema import EntitySchema, FieldSpec
from travel_admin.models.schemas import DestinationPayload, HotelPayload
from travel_admin.services.responses import record_id


def _keep(value: Any) -> Any:
    return value


def _destination_ref(record: Dict[str, Any]) -> Any:
    # list responses populate destinationId with the destination document
    value = record.get("destinationId")
    if isinstance(value, dict):
        return record_id(value)
    return value


DESTINATION_SCHEMA = EntitySchema(
    kind="destination",
    payload_model=DestinationPayload,
    fields=(
        FieldSpec(("name",), "Destination Name", required=True),
        FieldSpec(("country",), "Country", required=True),
        FieldSpec(("description",), "Description", required=True),
        FieldSpec(("coordinates", "latitude"), "Latitude", required=True, parse=parse_float),
        FieldSpec(("coordinates", "longitude"), "Longitude", required=True, parse=parse_float),
        FieldSpec(("bestTimeToVisit",), "Best Time to Visit"),
        FieldSpec(("currency",), "Currency"),
        FieldSpec(("language",), "Language"),
    ),
)

HOTEL_SCHEMA = EntitySchema(
    kind="hotel",
    payload_model=HotelPayload,
    fields=(
        FieldSpec(("name",), "Hotel Name", required=True),
        FieldSpec(("destinationId",), "Destination", required=True),
        FieldSpec(("address",), "Address", required=True),
        FieldSpec(("starRating",), "Star Rating", default=3, required=True, hydrate=_keep, parse=parse_int),
        FieldSpec(("guestRating",), "Guest Rating (0-5)", default=0, hydrate=_keep, parse=parse_float),
        FieldSpec(("pricePerNight",), "Price per Night", required=True, parse=parse_float),
        FieldSpec(("imageUrl",), "Hotel Image URL"),
        FieldSpec(("hotelAmenities",), "Hotel Amenities", hydrate=join_list, parse=split_list),
        FieldSpec(
            ("nearbyAttractions",),
            "Nearby Attractions",
            hydrate=join_attractions,
            parse=parse_attractions,
        ),
        FieldSpec(("contactInfo", "phoneNumber"), "Phone Number"),
        FieldSpec(("contactInfo", "email"), "Email"),
        FieldSpec(("contactInfo", "website"), "Website"),
    ),
    extractors={"destinationId": _destination_ref},
)
