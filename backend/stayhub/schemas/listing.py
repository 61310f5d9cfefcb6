# stayhub/schemas/listing.py
from datetime import datetime
from typing import List
from pydantic import BaseModel


class AvailabilityWindow(BaseModel):
    start_date: datetime
    end_date: datetime

    model_config = {"from_attributes": True}


class PropertyOut(BaseModel):
    id: int
    owner_id: int
    title: str

    model_config = {"from_attributes": True}


class ListingOut(BaseModel):
    id: int
    property_id: int
    title: str
    available_dates: List[AvailabilityWindow] = []

    model_config = {"from_attributes": True}


class ListingWithProperty(ListingOut):
    property: PropertyOut
