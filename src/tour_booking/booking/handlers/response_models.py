from __future__ import annotations

from pydantic import BaseModel

from tour_booking.booking.domain.entity import Booking
from tour_booking.booking.domain.enum import BookingStatus
from tour_booking.booking.domain.value_object import BookingCancelInfo
from tour_booking.shared.domain import IsoDateTime, Money


class TripData(BaseModel):
    trip_id: str
    start_time: str


class ContactData(BaseModel):
    name: str
    email: str
    phone: str
    address: str | None


class TravelerData(BaseModel):
    full_name: str
    age_group: str


class BookingData(BaseModel):
    """予約データのレスポンスモデル

    リクエストの BookingSnapshot と同じキーを持つため、そのまま次のリクエストに渡せる。
    """

    booking_id: str
    customer_id: str
    trip: TripData
    total_amount: str
    currency: str
    ticket_count: int
    most_valued: str
    contact: ContactData
    travelers: list[TravelerData]
    note: str | None
    status: str
    deposit_amount: str | None
    points_applied: int | None
    refunded_amount: str | None
    date_deposited: str | None
    date_completed: str | None
    payment_deadline: str | None
    next_statuses: list[str]


class CancelInfoData(BaseModel):
    """キャンセル精算結果のレスポンスモデル"""

    booking_id: str
    trip_id: str
    amount_lost: str
    refund: str
    currency: str
    points_lost: int
    days_early: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class PayDepositResponse(SuccessResponse):
    """デポジット支払いのレスポンスモデル"""

    final_payment: str


class CancelBookingResponse(SuccessResponse):
    """キャンセルのレスポンスモデル"""

    cancel_info: CancelInfoData


class QuoteCancellationResponse(BaseModel):
    """キャンセル見積もりのレスポンスモデル"""

    status: str = "success"
    cancelable: bool
    data: CancelInfoData


def _amount(money: Money | None) -> str | None:
    return None if money is None else str(money.amount)


def _date(value: IsoDateTime | None) -> str | None:
    return None if value is None else str(value)


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    reachable = booking.next_statuses()
    return BookingData(
        booking_id=str(booking.id),
        customer_id=str(booking.customer_id),
        trip=TripData(
            trip_id=str(booking.trip.id),
            start_time=str(booking.trip.start_time),
        ),
        total_amount=str(booking.total.amount),
        currency=str(booking.total.currency),
        ticket_count=booking.ticket_count,
        most_valued=booking.most_valued.value,
        contact=ContactData(
            name=booking.contact.name,
            email=booking.contact.email,
            phone=booking.contact.phone,
            address=booking.contact.address,
        ),
        travelers=[
            TravelerData(full_name=info.full_name, age_group=info.age_group.value)
            for info in booking.customer_infos
        ],
        note=booking.note,
        status=booking.status.value,
        deposit_amount=_amount(booking.deposit),
        points_applied=booking.points_applied,
        refunded_amount=_amount(booking.refunded),
        date_deposited=_date(booking.date_deposited),
        date_completed=_date(booking.date_completed),
        payment_deadline=_date(booking.payment_deadline),
        # BookingStatus の定義順
        next_statuses=[s.value for s in BookingStatus if s in reachable],
    )


def to_cancel_info_data(info: BookingCancelInfo) -> CancelInfoData:
    """BookingCancelInfo をレスポンスモデルに変換する"""
    return CancelInfoData(
        booking_id=str(info.booking_id),
        trip_id=str(info.trip.id),
        amount_lost=str(info.amount_lost.amount),
        refund=str(info.refund.amount),
        currency=str(info.refund.currency),
        points_lost=info.points_lost,
        days_early=info.days_early,
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(booking)).model_dump()
