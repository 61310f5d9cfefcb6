"""Request and response models."""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from stayhub.schemas.booking import BookingCreate
from stayhub.schemas.user import GuestInfo


class TestBookingCreate:
    def test_camel_case_keys(self):
        body = BookingCreate.model_validate(
            {
                "listing": 3,
                "checkIn": "2024-06-01T00:00:00",
                "checkOut": "2024-06-05T00:00:00",
                "numberOfAdults": 2,
                "totalPrice": "120.50",
            }
        )
        assert body.listing_id == 3
        assert body.check_in == datetime(2024, 6, 1)
        assert body.total_price == Decimal("120.50")
        assert body.number_of_children is None

    def test_guest_key_is_dropped(self):
        body = BookingCreate.model_validate({"listing": 3, "guest": 99, "guest_id": 99})
        assert not hasattr(body, "guest")
        assert "guest_id" not in body.model_dump()

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            BookingCreate.model_validate({"numberOfAdults": -1})


class TestGuestInfo:
    def test_projection_from_user_row(self):
        row = SimpleNamespace(
            id=5, name="Gary Guest", email="guest@example.com", mobile="5550002",
            hashed_password="x",
        )
        info = GuestInfo.model_validate(row)
        assert info.model_dump() == {
            "id": 5,
            "name": "Gary Guest",
            "email": "guest@example.com",
            "mobile": "5550002",
        }

    def test_rejects_malformed_email(self):
        with pytest.raises(ValidationError):
            GuestInfo(id=5, name="Gary Guest", email="not-an-email")
