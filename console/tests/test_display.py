from travel_admin.models.domain import DestinationSummary, HotelSummary, PriceFormat
from travel_admin.views.display import (
    clamp_stars,
    destination_label,
    destination_options,
    format_price,
    guest_rating_display,
    star_display,
)


def test_clamp_stars():
    assert clamp_stars(4) == 4
    assert clamp_stars("3") == 3
    assert clamp_stars(7) == 5
    assert clamp_stars(-2) == 0
    assert clamp_stars(None) == 0
    assert clamp_stars("lots") == 0
    assert star_display(2) == "★★"


def test_format_price_uses_locale_grouping():
    assert "1,23,456.50" in format_price(123456.5, "USD", "en_IN")
    assert "1,200.00" in format_price("1200", "EUR", "en_US")


def test_format_price_not_available():
    assert format_price(None) == "N/A"
    assert format_price("") == "N/A"
    assert format_price("free") == "N/A"
    assert format_price(float("nan")) == "N/A"


def test_guest_rating_display():
    assert guest_rating_display(None) == "N/A"
    assert guest_rating_display(4.5) == "4.5"
    assert guest_rating_display(0) == "0"


def test_destination_labels():
    assert destination_label({"name": "Paris", "country": "France"}) == "Paris, France"
    assert destination_label({"name": "Atlantis"}) == "Atlantis"
    assert destination_label("d1") == ""
    assert destination_options([{"_id": "d1", "name": "Paris", "country": "France"}, {"name": "no id"}, "junk"]) == {
        "d1": "Paris, France"
    }


def test_hotel_summary_from_full_record(ritz):
    ritz["roomCategories"] = [
        {"categoryName": "Suite", "pricePerNight": 3000, "amenities": ["Butler"]},
        {"pricePerNight": None},
    ]
    ritz["nearbyLandmarks"] = [{"landmarkName": "Eiffel Tower", "distanceInKm": 3.2}, {}]

    summary = HotelSummary.from_record(ritz, PriceFormat("EUR", "en_US"))

    assert summary.destination == "Paris, France"
    assert summary.stars == 5
    assert "1,200.00" in summary.price
    assert [str(a) for a in summary.attractions] == ["Louvre (1km)"]
    assert summary.room_categories[0].name == "Suite"
    assert summary.room_categories[1].name == "Room"
    assert summary.room_categories[1].price == "N/A"
    assert [str(l) for l in summary.landmarks] == ["Eiffel Tower - 3.2km away", "Landmark - -km away"]
    assert summary.contact.phone_number == "+33 1 43 16 30 30"


def test_hotel_summary_resolves_destination_id_from_labels():
    summary = HotelSummary.from_record(
        {"_id": "h1", "destinationId": "d1"}, destination_labels={"d1": "Paris, France"}
    )
    assert summary.destination == "Paris, France"


def test_destination_summary(paris):
    summary = DestinationSummary.from_record(paris)
    assert summary.label == "Paris, France"
    assert summary.coordinates == "48.8566, 2.3522"

    bare = DestinationSummary.from_record({"name": "Nowhere", "coordinates": "bad"})
    assert bare.has_coordinates is False
    assert bare.coordinates == "-, -"
