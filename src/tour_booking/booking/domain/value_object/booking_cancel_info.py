from dataclasses import dataclass

from tour_booking.shared.domain import Money

from .booking_id import BookingId
from .trip import Trip


@dataclass(frozen=True)
class BookingCancelInfo:
    """キャンセル時の精算結果

    永続化はしない。キャンセル前の見積もりにも、実際のキャンセルにも使う。
    """

    booking_id: BookingId
    amount_lost: Money
    refund: Money
    points_lost: int
    days_early: int
    trip: Trip
