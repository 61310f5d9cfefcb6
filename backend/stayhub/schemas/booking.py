# stayhub/schemas/booking.py
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from stayhub.schemas.listing import ListingOut, ListingWithProperty
from stayhub.schemas.user import GuestInfo


class BookingCreate(BaseModel):
    """
    Request body for placing a booking.

    Fields are optional here so the booking engine can report every missing
    or zero value with one message. There is no `guest` field:
    the guest is always the authenticated caller, and unknown keys are dropped.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    listing_id: Optional[int] = Field(None, alias="listing")
    check_in: Optional[datetime] = Field(None, alias="checkIn")
    check_out: Optional[datetime] = Field(None, alias="checkOut")
    number_of_adults: Optional[int] = Field(None, alias="numberOfAdults", ge=0)
    number_of_children: Optional[int] = Field(None, alias="numberOfChildren", ge=0)
    total_price: Optional[Decimal] = Field(None, alias="totalPrice", ge=0)


class BookingOut(BaseModel):
    id: int
    listing_id: int
    guest_id: int
    check_in: datetime
    check_out: datetime
    number_of_adults: int
    number_of_children: int
    total_price: float
    created_at: datetime

    # Pydantic v2 style – replaces orm_mode=True
    model_config = {"from_attributes": True}


class BookingDetail(BookingOut):
    listing: ListingOut


class GuestBooking(BookingOut):
    listing: ListingWithProperty


class Reservation(BookingOut):
    listing: ListingWithProperty
    guest: GuestInfo
