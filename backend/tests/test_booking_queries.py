"""Tests for the guest and owner booking views."""

from datetime import datetime
from decimal import Decimal

import pytest

from stayhub.core.errors import NotFoundError, ValidationError
from stayhub.core.validators import parse_id
from stayhub.services import booking_queries
from stayhub.services.booking_service import place_booking


def d(day):
    return datetime(2024, 6, day)


async def book(session, listing_id, guest_id, start, end):
    booking = await place_booking(
        session,
        guest_id=guest_id,
        listing_id=listing_id,
        check_in=d(start),
        check_out=d(end),
        number_of_adults=1,
        total_price=Decimal("120"),
    )
    return booking.id


@pytest.fixture
async def second_listing(users, make_listing):
    """Belongs to other_owner."""
    return await make_listing(users.other_owner, [(d(1), d(30))], title="Cabin")


class TestParseId:
    @pytest.mark.parametrize(
        "raw", ["abc", "0", "-3", "", "1.5", "12abc", "2147483648", "99999999999", 0, -1, 2**31, True]
    )
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError) as exc:
            parse_id(raw)
        assert exc.value.status_code == 400

    @pytest.mark.parametrize(
        "raw,expected", [("7", 7), (" 42 ", 42), (3, 3), ("2147483647", 2147483647)]
    )
    def test_accepts(self, raw, expected):
        assert parse_id(raw) == expected


class TestGuestBookings:
    async def test_empty_is_not_found(self, session, users):
        with pytest.raises(NotFoundError):
            await booking_queries.list_my_bookings(session, users.guest)

    async def test_only_callers_bookings_with_property(
        self, session, users, listing_id, second_listing
    ):
        mine = {
            await book(session, listing_id, users.guest, 1, 3),
            await book(session, second_listing, users.guest, 5, 7),
        }
        await book(session, listing_id, users.other_guest, 4, 6)

        bookings = await booking_queries.list_my_bookings(session, users.guest)

        assert {b.id for b in bookings} == mine
        assert all(b.guest_id == users.guest for b in bookings)
        owners = {b.listing.property.owner_id for b in bookings}
        assert owners == {users.owner, users.other_owner}

    async def test_for_listing_filters_by_listing_and_guest(
        self, session, users, listing_id, second_listing
    ):
        wanted = await book(session, listing_id, users.guest, 1, 3)
        await book(session, second_listing, users.guest, 1, 3)
        await book(session, listing_id, users.other_guest, 4, 6)

        bookings = await booking_queries.list_my_bookings_for_listing(
            session, str(listing_id), users.guest
        )

        assert [b.id for b in bookings] == [wanted]
        assert bookings[0].listing.id == listing_id
        assert [(w.start_date, w.end_date) for w in bookings[0].listing.available_dates] == [
            (d(1), d(10))
        ]

    async def test_for_listing_empty_is_fine(self, session, users, listing_id):
        assert await booking_queries.list_my_bookings_for_listing(session, listing_id, users.guest) == []

    async def test_for_listing_rejects_bad_id(self, session, users):
        with pytest.raises(ValidationError):
            await booking_queries.list_my_bookings_for_listing(session, "not-an-id", users.guest)


class TestBookingDetail:
    async def test_found_with_listing(self, session, users, listing_id):
        booking_id = await book(session, listing_id, users.guest, 1, 3)
        booking = await booking_queries.get_booking(session, str(booking_id))
        assert booking.id == booking_id
        assert booking.listing.title == "Lake House - room"

    async def test_missing(self, session):
        with pytest.raises(NotFoundError):
            await booking_queries.get_booking(session, "12345")

    async def test_malformed_checked_first(self, session):
        with pytest.raises(ValidationError):
            await booking_queries.get_booking(session, "xyz")


class TestOwnerReservations:
    async def test_only_owned_listings(self, session, users, listing_id, second_listing):
        on_mine = await book(session, listing_id, users.guest, 1, 3)
        await book(session, second_listing, users.guest, 1, 3)

        reservations = await booking_queries.list_my_reservations(session, users.owner)

        assert [r.id for r in reservations] == [on_mine]
        assert all(r.listing.property.owner_id == users.owner for r in reservations)

    async def test_other_owner_sees_own_only(self, session, users, listing_id, second_listing):
        await book(session, listing_id, users.guest, 1, 3)
        theirs = await book(session, second_listing, users.other_guest, 2, 4)

        reservations = await booking_queries.list_my_reservations(session, users.other_owner)
        assert [r.id for r in reservations] == [theirs]

    async def test_guest_owner_of_nothing_gets_empty(self, session, users, listing_id):
        await book(session, listing_id, users.guest, 1, 3)
        assert await booking_queries.list_my_reservations(session, users.guest) == []

    async def test_guest_contact_loaded(self, session, users, listing_id):
        await book(session, listing_id, users.guest, 1, 3)
        [reservation] = await booking_queries.list_my_reservations(session, users.owner)
        assert reservation.guest.id == users.guest
        assert reservation.guest.email == "guest@example.com"
        assert reservation.guest.mobile == "5550002"
