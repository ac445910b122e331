from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogPayload(BaseModel):
    """Request bodies sent to the catalog API, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class Coordinates(CatalogPayload):
    latitude: float
    longitude: float


class DestinationPayload(CatalogPayload):
    name: str
    country: str
    description: str
    coordinates: Coordinates
    best_time_to_visit: str = ""
    currency: str = ""
    language: str = ""


class NearbyAttraction(CatalogPayload):
    name: str
    distance: str = ""


class ContactInfo(CatalogPayload):
    phone_number: str = ""
    email: str = ""
    website: str = ""


class HotelPayload(CatalogPayload):
    name: str
    destination_id: str
    address: str
    # None when the entered value was not an integer; sent as null
    star_rating: Optional[int] = 3
    guest_rating: float = 0.0
    price_per_night: float
    image_url: str = ""
    hotel_amenities: List[str] = Field(default_factory=list)
    nearby_attractions: List[NearbyAttraction] = Field(default_factory=list)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
