from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderCreate(BaseModel):
    # Missing form fields arrive as empty strings, never as errors
    name: str = ""
    phone: str = ""
    address: str = ""
    preferable_delivery_time: str = ""


class OrderRead(BaseModel):
    """An order as handed to pages and the JSON API (no store identity)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: str = Field(alias="Name")
    phone: str = Field(alias="Phone")
    address: str = Field(alias="Address")
    preferable_delivery_time: str = Field(alias="PreferableDeliveryTime")


class Location(BaseModel):
    lat: float
    lng: float


class OrdersWithLocations(BaseModel):
    """Orders paired by index with their geocoded locations."""

    model_config = ConfigDict(populate_by_name=True)

    orders: List[OrderRead] = Field(default_factory=list, alias="Orders")
    locations: List[Location] = Field(default_factory=list, alias="Locations")
