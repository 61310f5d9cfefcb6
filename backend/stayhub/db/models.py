# stayhub/db/models.py

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
)
from sqlalchemy.orm import relationship, validates

from stayhub.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    mobile = Column(String(20), nullable=True)

    # DB column name: password_hash
    # Python attribute: hashed_password
    hashed_password = Column("password_hash", String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    properties = relationship("Property", back_populates="owner")
    bookings = relationship("Booking", back_populates="guest")


class Property(Base):
    """
    Owned by the listing service. The booking core only reads `owner_id`
    to decide who may see reservations on the listings below it.
    """

    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)

    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    owner = relationship("User", back_populates="properties")
    listings = relationship("Listing", back_populates="property")


class Listing(Base):
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, index=True)

    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    property = relationship("Property", back_populates="listings")

    # advertised order is insertion order
    available_dates = relationship(
        "AvailableDate",
        back_populates="listing",
        order_by="AvailableDate.id",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    bookings = relationship("Booking", back_populates="listing")


class AvailableDate(Base):
    __tablename__ = "listing_available_dates"

    id = Column(Integer, primary_key=True, index=True)

    listing_id = Column(
        Integer,
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # naive UTC; start <= end by convention, not enforced
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)

    listing = relationship("Listing", back_populates="available_dates")


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_listing_span", "listing_id", "check_in", "check_out"),
    )

    id = Column(Integer, primary_key=True, index=True)

    listing_id = Column(
        Integer,
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # naive UTC
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=False)

    number_of_adults = Column(Integer, nullable=False)
    number_of_children = Column(Integer, nullable=False, default=0)
    total_price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    listing = relationship("Listing", back_populates="bookings")
    guest = relationship("User", back_populates="bookings")

    @validates("listing_id", "guest_id", "listing", "guest")
    def _bind_once(self, key, value):
        # listing and guest are fixed when the booking is built; relationships
        # are compared by key so the current target is never lazy-loaded
        column = key if key.endswith("_id") else f"{key}_id"
        current = getattr(self, column)
        new = value if key == column else getattr(value, "id", None)
        if current is not None and current != new:
            raise ValueError(f"Booking.{key} cannot be changed once set")
        return value
