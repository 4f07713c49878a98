from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from tour_booking.booking.domain.entity import Booking
from tour_booking.booking.domain.enum import AgeGroup, BookingMostValued, BookingStatus
from tour_booking.booking.domain.factory import (
    BookingDetails,
    BookingFactory,
    BookingState,
)
from tour_booking.booking.domain.value_object import BookingId, CustomerId, Trip
from tour_booking.shared.domain import IsoDateTime, TripId
from tour_booking.shared.utils import to_decimal

factory = BookingFactory()


class TripRequest(BaseModel):
    """ツアー催行回の入力スキーマ"""

    trip_id: str = Field(..., min_length=1, examples=["trip-123"])
    start_time: str = Field(
        ...,
        description="出発日時（ISO 8601形式）",
        examples=["2025-03-01T08:00:00"],
    )


class ContactRequest(BaseModel):
    """連絡先の入力スキーマ"""

    name: str
    email: str
    phone: str
    address: str | None = None


class TravelerRequest(BaseModel):
    """参加者の入力スキーマ"""

    full_name: str
    age_group: AgeGroup


class BookingSnapshot(BaseModel):
    """予約の現在の状態"""

    booking_id: str = Field(..., min_length=1)
    customer_id: str = Field(..., min_length=1)
    trip: TripRequest
    total_amount: Decimal = Field(..., ge=0, description="合計金額", examples=[1000])
    currency: str = Field(
        default="VND",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
        examples=["VND", "USD"],
    )
    ticket_count: int = Field(..., ge=1)
    most_valued: BookingMostValued
    contact: ContactRequest
    travelers: list[TravelerRequest] = Field(default_factory=list)
    note: str | None = Field(default=None, max_length=512)

    status: BookingStatus = BookingStatus.AWAITING_DEPOSIT
    deposit_amount: Decimal | None = None
    points_applied: int | None = None
    refunded_amount: Decimal | None = None
    date_deposited: str | None = None
    date_completed: str | None = None
    payment_deadline: str | None = None

    @field_validator("total_amount", "deposit_amount", "refunded_amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        """Decimalに変換する"""
        if v is None:
            return v
        return to_decimal(v)


class ChangeStatusRequest(BaseModel):
    """ステータス変更リクエストモデル"""

    booking: BookingSnapshot
    new_status: BookingStatus
    today: str = Field(..., description="処理日（ISO 8601形式）")


class PayDepositRequest(BaseModel):
    """デポジット支払いリクエストモデル"""

    booking: BookingSnapshot
    deposit_percentage: Decimal = Field(
        ..., description="合計金額に対するデポジットの割合（%）"
    )
    today: str = Field(..., description="処理日（ISO 8601形式）")
    next_status: BookingStatus = BookingStatus.PROCESSING

    @field_validator("deposit_percentage", mode="before")
    @classmethod
    def convert_percentage_to_decimal(cls, v):
        return to_decimal(v)


class RedeemPointsRequest(BaseModel):
    """ポイント利用リクエストモデル"""

    booking: BookingSnapshot
    available_points: int = Field(..., ge=0, description="顧客の保有ポイント")


class CancelBookingRequest(BaseModel):
    """キャンセル（見積もり）リクエストモデル"""

    booking: BookingSnapshot
    cancel_date: str = Field(..., description="キャンセル日（ISO 8601形式）")


def to_booking(snapshot: BookingSnapshot) -> Booking:
    """リクエストの予約状態から Booking エンティティを復元する"""
    booking_details: BookingDetails = {
        "total_amount": snapshot.total_amount,
        "currency": snapshot.currency,
        "ticket_count": snapshot.ticket_count,
        "most_valued": snapshot.most_valued.value,
        "contact_name": snapshot.contact.name,
        "contact_email": snapshot.contact.email,
        "contact_phone": snapshot.contact.phone,
        "contact_address": snapshot.contact.address,
        "note": snapshot.note,
        "travelers": [
            {"full_name": t.full_name, "age_group": t.age_group.value}
            for t in snapshot.travelers
        ],
    }
    state: BookingState = {
        "status": snapshot.status.value,
        "deposit_amount": snapshot.deposit_amount,
        "points_applied": snapshot.points_applied,
        "refunded_amount": snapshot.refunded_amount,
        "date_deposited": snapshot.date_deposited,
        "date_completed": snapshot.date_completed,
        "payment_deadline": snapshot.payment_deadline,
    }
    trip = Trip(
        id=TripId(value=snapshot.trip.trip_id),
        start_time=IsoDateTime.from_string(snapshot.trip.start_time),
    )

    return factory.restore(
        booking_id=BookingId(value=snapshot.booking_id),
        customer_id=CustomerId(value=snapshot.customer_id),
        trip=trip,
        booking_details=booking_details,
        state=state,
    )
