from decimal import Decimal
from typing import Iterable

import pytest

from tour_booking.booking.domain.entity import Booking
from tour_booking.booking.domain.enum import BookingMostValued, BookingStatus
from tour_booking.booking.domain.value_object import (
    BookingId,
    ContactInfo,
    CustomerId,
    CustomerInfo,
    Trip,
)
from tour_booking.shared.domain import Currency, IsoDateTime, Money, TripId

TRIP_START_TIME = "2025-03-01T08:00:00"


def _money(amount: Decimal | None) -> Money | None:
    if amount is None:
        return None
    return Money(amount=amount, currency=Currency.vnd())


def _date(value: str | None) -> IsoDateTime | None:
    if value is None:
        return None
    return IsoDateTime.from_string(value)


@pytest.fixture
def trip():
    """出発日時 2025-03-01T08:00:00 のツアー"""
    return Trip(
        id=TripId(value="trip-123"),
        start_time=IsoDateTime.from_string(TRIP_START_TIME),
    )


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.AWAITING_DEPOSIT,
        booking_id: str = "booking-1",
        customer_id: str = "customer-1",
        trip_start_time: str = TRIP_START_TIME,
        total_amount: Decimal = Decimal("1000"),
        deposit_amount: Decimal | None = None,
        points_applied: int | None = 0,
        refunded_amount: Decimal | None = None,
        date_deposited: str | None = None,
        date_completed: str | None = None,
        payment_deadline: str | None = None,
        customer_infos: Iterable[CustomerInfo] = (),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            customer_id=CustomerId(value=customer_id),
            trip=Trip(
                id=TripId(value="trip-123"),
                start_time=IsoDateTime.from_string(trip_start_time),
            ),
            total=Money(amount=total_amount, currency=Currency.vnd()),
            contact=ContactInfo(
                name="Nguyen Van A",
                email="a@example.com",
                phone="0901234567",
            ),
            ticket_count=2,
            most_valued=BookingMostValued.ACCOMMODATION,
            customer_infos=customer_infos,
            status=status,
            deposit=_money(deposit_amount),
            points_applied=points_applied,
            refunded=_money(refunded_amount),
            date_deposited=_date(date_deposited),
            date_completed=_date(date_completed),
            payment_deadline=_date(payment_deadline),
        )

    return _factory
