"""
Read-only display summaries built from catalog records.

Records come straight from the API and any optional field may be missing or
malformed; building a summary never raises.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from travel_admin.services.responses import record_id
from travel_admin.views.display import (
    clamp_stars,
    destination_label,
    format_price,
    guest_rating_display,
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _dicts(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


@dataclass
class PriceFormat:
    currency: str = "USD"
    locale: str = "en_IN"

    def __call__(self, value: Any) -> str:
        return format_price(value, self.currency, self.locale)


@dataclass
class Attraction:
    name: str
    distance: str

    def __str__(self) -> str:
        return f"{self.name} ({self.distance})" if self.distance else self.name


@dataclass
class RoomCategory:
    name: str
    price: str
    amenities: List[str] = field(default_factory=list)


@dataclass
class Landmark:
    name: str
    distance_km: str

    def __str__(self) -> str:
        return f"{self.name} - {self.distance_km}km away"


@dataclass
class ContactDetails:
    phone_number: str = ""
    email: str = ""
    website: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.phone_number or self.email or self.website)


@dataclass
class DestinationSummary:
    destination_id: Optional[str]
    name: str
    country: str
    description: str
    latitude: str
    longitude: str
    best_time_to_visit: str = ""
    currency: str = ""
    language: str = ""

    @property
    def label(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name

    @property
    def has_coordinates(self) -> bool:
        return bool(self.latitude or self.longitude)

    @property
    def coordinates(self) -> str:
        return f"{self.latitude or '-'}, {self.longitude or '-'}"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "DestinationSummary":
        coordinates = record.get("coordinates")
        if not isinstance(coordinates, dict):
            coordinates = {}
        return cls(
            destination_id=record_id(record),
            name=_text(record.get("name")),
            country=_text(record.get("country")),
            description=_text(record.get("description")),
            latitude=_text(coordinates.get("latitude")),
            longitude=_text(coordinates.get("longitude")),
            best_time_to_visit=_text(record.get("bestTimeToVisit")),
            currency=_text(record.get("currency")),
            language=_text(record.get("language")),
        )


@dataclass
class HotelSummary:
    hotel_id: Optional[str]
    name: str
    destination: str
    address: str
    stars: int
    guest_rating: str
    price: str
    image_url: str = ""
    amenities: List[str] = field(default_factory=list)
    attractions: List[Attraction] = field(default_factory=list)
    room_categories: List[RoomCategory] = field(default_factory=list)
    landmarks: List[Landmark] = field(default_factory=list)
    contact: ContactDetails = field(default_factory=ContactDetails)

    @classmethod
    def from_record(
        cls,
        record: Dict[str, Any],
        price_format: Optional[PriceFormat] = None,
        destination_labels: Optional[Dict[str, str]] = None,
    ) -> "HotelSummary":
        price_format = price_format or PriceFormat()
        destination = record.get("destinationId")
        if isinstance(destination, dict):
            destination_text = destination_label(destination)
        else:
            destination_text = (destination_labels or {}).get(_text(destination), "")
        contact = record.get("contactInfo")
        if not isinstance(contact, dict):
            contact = {}
        return cls(
            hotel_id=record_id(record),
            name=_text(record.get("name")) or "Unnamed Hotel",
            destination=destination_text,
            address=_text(record.get("address")),
            stars=clamp_stars(record.get("starRating")),
            guest_rating=guest_rating_display(record.get("guestRating")),
            price=price_format(record.get("pricePerNight")),
            image_url=_text(record.get("imageUrl")),
            amenities=_strings(record.get("hotelAmenities")),
            attractions=[
                Attraction(name=_text(a.get("name")), distance=_text(a.get("distance")))
                for a in _dicts(record.get("nearbyAttractions"))
            ],
            room_categories=[
                RoomCategory(
                    name=_text(room.get("categoryName")) or "Room",
                    price=price_format(room.get("pricePerNight")),
                    amenities=_strings(room.get("amenities")),
                )
                for room in _dicts(record.get("roomCategories"))
            ],
            landmarks=[
                Landmark(
                    name=_text(landmark.get("landmarkName")) or "Landmark",
                    distance_km=_text(landmark.get("distanceInKm")) or "-",
                )
                for landmark in _dicts(record.get("nearbyLandmarks"))
            ],
            contact=ContactDetails(
                phone_number=_text(contact.get("phoneNumber")),
                email=_text(contact.get("email")),
                website=_text(contact.get("website")),
            ),
        )

