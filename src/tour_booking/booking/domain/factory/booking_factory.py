from decimal import Decimal
from typing import TypedDict

from tour_booking.booking.domain.entity import Booking
from tour_booking.booking.domain.enum import AgeGroup, BookingMostValued, BookingStatus
from tour_booking.booking.domain.value_object import (
    BookingId,
    ContactInfo,
    CustomerId,
    CustomerInfo,
    Trip,
)
from tour_booking.shared.domain import Currency, IsoDateTime, Money


class TravelerDetails(TypedDict):
    """参加者の入力データ構造"""

    full_name: str
    age_group: str


class BookingDetails(TypedDict):
    """予約内容の入力データ構造"""

    total_amount: Decimal
    currency: str
    ticket_count: int
    most_valued: str
    contact_name: str
    contact_email: str
    contact_phone: str
    contact_address: str | None
    note: str | None
    travelers: list[TravelerDetails]


class BookingState(TypedDict):
    """ライフサイクル上の状態（既存予約の復元用）"""

    status: str
    deposit_amount: Decimal | None
    points_applied: int | None
    refunded_amount: Decimal | None
    date_deposited: str | None
    date_completed: str | None
    payment_deadline: str | None


class BookingFactory:
    """ツアー予約エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 新規予約の初期状態の設定
    """

    def create(
        self,
        booking_id: BookingId,
        customer_id: CustomerId,
        trip: Trip,
        booking_details: BookingDetails,
    ) -> Booking:
        """新規予約エンティティを生成する（AWAITING_DEPOSIT 状態）"""
        return Booking(
            id=booking_id,
            customer_id=customer_id,
            trip=trip,
            status=BookingStatus.AWAITING_DEPOSIT,
            **self._descriptive_fields(booking_details),
        )

    def restore(
        self,
        booking_id: BookingId,
        customer_id: CustomerId,
        trip: Trip,
        booking_details: BookingDetails,
        state: BookingState,
    ) -> Booking:
        """保存済みの状態から予約エンティティを復元する

        Args:
            booking_id: 予約ID
            customer_id: 予約者ID
            trip: ツアー催行回
            booking_details: 予約内容
            state: ステータス・支払い・日付の状態

        Returns:
            Booking: 復元された予約エンティティ
        """
        currency = Currency(booking_details["currency"])

        return Booking(
            id=booking_id,
            customer_id=customer_id,
            trip=trip,
            status=BookingStatus(state["status"]),
            deposit=self._to_money(state["deposit_amount"], currency),
            points_applied=state["points_applied"],
            refunded=self._to_money(state["refunded_amount"], currency),
            date_deposited=self._to_date_time(state["date_deposited"]),
            date_completed=self._to_date_time(state["date_completed"]),
            payment_deadline=self._to_date_time(state["payment_deadline"]),
            **self._descriptive_fields(booking_details),
        )

    def _descriptive_fields(self, booking_details: BookingDetails) -> dict:
        return {
            "total": Money(
                amount=booking_details["total_amount"],
                currency=Currency(booking_details["currency"]),
            ),
            "contact": ContactInfo(
                name=booking_details["contact_name"],
                email=booking_details["contact_email"],
                phone=booking_details["contact_phone"],
                address=booking_details["contact_address"],
            ),
            "ticket_count": booking_details["ticket_count"],
            "most_valued": BookingMostValued(booking_details["most_valued"]),
            "customer_infos": [
                CustomerInfo(
                    full_name=traveler["full_name"],
                    age_group=AgeGroup(traveler["age_group"]),
                )
                for traveler in booking_details["travelers"]
            ],
            "note": booking_details["note"],
        }

    @staticmethod
    def _to_money(amount: Decimal | None, currency: Currency) -> Money | None:
        if amount is None:
            return None
        return Money(amount=amount, currency=currency)

    @staticmethod
    def _to_date_time(value: str | None) -> IsoDateTime | None:
        if value is None:
            return None
        return IsoDateTime.from_string(value)
