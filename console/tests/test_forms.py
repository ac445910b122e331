import math

import pytest

from travel_admin.forms.entities import DESTINATION_SCHEMA, HOTEL_SCHEMA
from travel_admin.forms.state import EntityForm, FormMode
from travel_admin.views.list_view import EntityListView


def fill_destination(form: EntityForm) -> None:
    form.change_field("name", "Rome")
    form.change_field("country", "Italy")
    form.change_field("description", "Eternal city")
    form.change_field("coordinates.latitude", "41.9028")
    form.change_field(("coordinates", "longitude"), "12.4964")


def fill_hotel(form: EntityForm) -> None:
    form.change_field("name", "Hotel Artemide")
    form.change_field("destinationId", "d1")
    form.change_field("address", "Via Nazionale 22")
    form.change_field("pricePerNight", "180.50")


def test_new_form_starts_in_create_mode_with_defaults(destinations):
    form = EntityForm(HOTEL_SCHEMA, destinations)

    assert form.mode is FormMode.create
    assert form.title == "Add New Hotel"
    assert form.value("starRating") == 3
    assert form.value("guestRating") == 0
    assert form.value("contactInfo.email") == ""


def test_create_submits_parsed_payload_and_resets(destinations):
    view = EntityListView(DESTINATION_SCHEMA, destinations)
    form = EntityForm(DESTINATION_SCHEMA, destinations, on_saved=view.load)
    fill_destination(form)

    assert form.submit() is True

    kind, payload = destinations.calls[0]
    assert kind == "create"
    assert payload["coordinates"] == {"latitude": 41.9028, "longitude": 12.4964}
    assert payload["bestTimeToVisit"] == ""
    assert form.mode is FormMode.create
    assert form.values == DESTINATION_SCHEMA.defaults()
    assert form.success == "Destination created successfully!"
    assert "Rome" in [item["name"] for item in view.items]


def test_hotel_payload_transforms(hotels):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    fill_hotel(form)
    form.change_field("hotelAmenities", "Wifi, , Pool")
    form.change_field("nearbyAttractions", "Beach|5km, Park")
    form.change_field("contactInfo.email", "desk@artemide.it")

    assert form.submit() is True

    _, payload = hotels.calls[0]
    assert payload["starRating"] == 3
    assert payload["guestRating"] == 0.0
    assert payload["pricePerNight"] == 180.5
    assert payload["hotelAmenities"] == ["Wifi", "Pool"]
    assert payload["nearbyAttractions"] == [
        {"name": "Beach", "distance": "5km"},
        {"name": "Park", "distance": ""},
    ]
    assert payload["contactInfo"] == {
        "phoneNumber": "",
        "email": "desk@artemide.it",
        "website": "",
    }


def test_empty_amenities_submit_an_empty_list(hotels):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    fill_hotel(form)

    form.submit()

    _, payload = hotels.calls[0]
    assert payload["hotelAmenities"] == []
    assert payload["nearbyAttractions"] == []


def test_missing_required_fields_block_the_request(destinations):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    form.change_field("name", "Rome")
    form.change_field("country", "   ")

    assert form.submit() is False

    assert destinations.calls == []
    assert "country" in form.missing
    assert "coordinates.latitude" in form.missing
    assert "Country" in form.error
    assert form.value("name") == "Rome"


def test_unparsable_coordinates_are_forwarded(destinations):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    fill_destination(form)
    form.change_field("coordinates.latitude", "north")

    assert form.submit() is True

    _, payload = destinations.calls[0]
    assert math.isnan(payload["coordinates"]["latitude"])
    assert payload["coordinates"]["longitude"] == 12.4964


def test_edit_round_trip_sends_equivalent_record(destinations, paris):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    form.start_edit(paris)

    assert form.mode is FormMode.editing
    assert form.title == "Edit Destination"
    assert form.submit() is True

    kind, identity, payload = destinations.calls[0]
    assert (kind, identity) == ("update", "d1")
    expected = {k: v for k, v in paris.items() if k != "_id"}
    assert payload == expected
    assert form.success == "Destination updated successfully!"


def test_hotel_edit_round_trip(hotels, ritz):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    form.start_edit(ritz)

    assert form.value("destinationId") == "d1"
    assert form.value("hotelAmenities") == "Spa, Pool"
    assert form.value("nearbyAttractions") == "Louvre|1km"

    form.submit()

    _, identity, payload = hotels.calls[0]
    assert identity == "h1"
    expected = {k: v for k, v in ritz.items() if k != "_id"}
    expected["destinationId"] = "d1"
    assert payload == expected


def test_start_edit_defaults_missing_optional_fields(hotels):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    form.start_edit(
        {"_id": "h9", "name": "Bare", "destinationId": "d1", "address": "x", "pricePerNight": 0}
    )

    assert form.value("imageUrl") == ""
    assert form.value("starRating") == 3
    assert form.value("guestRating") == 0
    assert form.value("pricePerNight") == "0"
    assert form.values["contactInfo"] == {"phoneNumber": "", "email": "", "website": ""}


def test_destination_zero_coordinates_are_kept(destinations):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    form.start_edit({"_id": "d5", "name": "Null Island", "coordinates": {"latitude": 0, "longitude": 0.0}})

    assert form.value("coordinates.latitude") == "0"
    assert form.value("coordinates.longitude") == "0.0"
    assert form.value("country") == ""


def test_text_amenities_hydrate_as_one_item(hotels):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    form.start_edit(
        {
            "_id": "h8",
            "name": "Loose",
            "destinationId": "d1",
            "hotelAmenities": "Spa",
            "nearbyAttractions": {"name": "Pier", "distance": "200m"},
        }
    )

    assert form.value("hotelAmenities") == "Spa"
    assert form.value("nearbyAttractions") == "Pier|200m"


def test_change_field_touches_one_field(hotels, ritz):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    form.start_edit(ritz)
    before = form.snapshot()["values"]

    form.change_field("contactInfo.website", "https://ritz.example")

    after = form.snapshot()["values"]
    assert after["contactInfo"]["website"] == "https://ritz.example"
    after["contactInfo"]["website"] = before["contactInfo"]["website"]
    assert after == before

    with pytest.raises(KeyError):
        form.change_field("rooms", 3)
    with pytest.raises(KeyError):
        form.change_field("contactInfo.fax", "x")


def test_reset_is_idempotent(hotels, ritz):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    form.start_edit(ritz)
    form.error = "stale"

    form.reset()
    once = form.snapshot()
    form.reset()

    assert form.snapshot() == once
    assert once["mode"] is FormMode.create
    assert once["error"] == ""


def test_failed_create_keeps_fields_and_reports(hotels, make_http_error):
    form = EntityForm(HOTEL_SCHEMA, hotels)
    fill_hotel(form)
    hotels.fail_with = make_http_error(500, {"message": "Hotel validation failed"})
    entered = form.snapshot()["values"]

    assert form.submit() is False

    assert form.error == "Hotel validation failed"
    assert form.snapshot()["values"] == entered
    assert form.mode is FormMode.create
    assert form.busy is False


def test_failed_update_uses_generic_message(destinations, paris, make_http_error):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    form.start_edit(paris)
    destinations.fail_with = make_http_error(502)

    assert form.submit() is False

    assert form.error == "Failed to save destination"
    assert form.identity == "d1"


def test_submit_while_busy_is_ignored(destinations):
    form = EntityForm(DESTINATION_SCHEMA, destinations)
    fill_destination(form)
    nested = []

    original_create = destinations.create

    def create(data):
        nested.append(form.submit())
        return original_create(data)

    destinations.create = create

    assert form.submit() is True
    assert nested == [False]
    assert destinations.call_names() == ["create"]
