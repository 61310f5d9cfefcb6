from fastapi import APIRouter

from stayhub.api.dependencies import CurrentUser, DbSession
from stayhub.schemas.booking import Reservation
from stayhub.services import booking_queries

router = APIRouter()


@router.get("/reservations")
async def host_reservations(db: DbSession, current_user: CurrentUser):
    """
    Bookings on listings whose property belongs to the current user.
    Guest details are limited to id, name, email and mobile.
    """
    reservations = await booking_queries.list_my_reservations(db, current_user.id)
    return {"success": True, "data": {"items": [Reservation.model_validate(r) for r in reservations]}}
