from fastapi import APIRouter, status

from stayhub.api.dependencies import CurrentUser, DbSession
from stayhub.schemas.booking import BookingCreate, BookingDetail, BookingOut, GuestBooking
from stayhub.services import booking_queries, booking_service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(body: BookingCreate, db: DbSession, current_user: CurrentUser):
    booking = await booking_service.place_booking(
        db,
        guest_id=current_user.id,
        listing_id=body.listing_id,
        check_in=body.check_in,
        check_out=body.check_out,
        number_of_adults=body.number_of_adults,
        number_of_children=body.number_of_children,
        total_price=body.total_price,
    )
    return {
        "success": True,
        "message": "Booking successful",
        "data": {"booking": BookingOut.model_validate(booking)},
    }


@router.get("")
async def list_my_bookings(db: DbSession, current_user: CurrentUser):
    bookings = await booking_queries.list_my_bookings(db, current_user.id)
    return {"success": True, "data": {"items": [GuestBooking.model_validate(b) for b in bookings]}}


@router.get("/listing/{listing_id}")
async def list_my_bookings_for_listing(listing_id: str, db: DbSession, current_user: CurrentUser):
    bookings = await booking_queries.list_my_bookings_for_listing(db, listing_id, current_user.id)
    return {"success": True, "data": {"items": [BookingDetail.model_validate(b) for b in bookings]}}


@router.get("/{booking_id}")
async def get_booking(booking_id: str, db: DbSession, current_user: CurrentUser):
    """
    Any authenticated caller may read a booking by id.
    """
    booking = await booking_queries.get_booking(db, booking_id)
    return {"success": True, "data": {"booking": BookingDetail.model_validate(booking)}}
