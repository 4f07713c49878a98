from decimal import Decimal
from typing import Iterable

from tour_booking.booking.domain.enum import (
    AgeGroup,
    BookingMostValued,
    BookingStatus,
    next_statuses,
)
from tour_booking.booking.domain.exception import (
    InvalidCancellationException,
    InvalidTransitionException,
    PreconditionException,
)
from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.value_object import (
    BookingCancelInfo,
    BookingId,
    ContactInfo,
    CustomerId,
    CustomerInfo,
    Trip,
)
from tour_booking.shared.domain import AggregateRoot, IsoDateTime, Money
from tour_booking.shared.domain.exception import BusinessRuleViolationException
from tour_booking.shared.utils import to_decimal


class Booking(AggregateRoot[BookingId]):
    """ツアー予約

    ステータスは遷移表に沿ってのみ進み、日付の記録は遷移「元」のステータスで決まる。
    """

    def __init__(
        self,
        id: BookingId,
        customer_id: CustomerId,
        trip: Trip,
        total: Money,
        contact: ContactInfo,
        ticket_count: int,
        most_valued: BookingMostValued,
        customer_infos: Iterable[CustomerInfo] = (),
        note: str | None = None,
        status: BookingStatus = BookingStatus.AWAITING_DEPOSIT,
        deposit: Money | None = None,
        points_applied: int | None = None,
        refunded: Money | None = None,
        date_deposited: IsoDateTime | None = None,
        date_completed: IsoDateTime | None = None,
        payment_deadline: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        if total.is_negative():
            raise ValueError("Total amount cannot be negative")

        self._customer_id = customer_id
        self._trip = trip
        self._total = total
        self._contact = contact
        self._ticket_count = ticket_count
        self._most_valued = most_valued
        self._customer_infos = tuple(customer_infos)
        self._note = note
        self._status = status
        self._deposit = deposit
        self._points_applied = points_applied
        self._refunded = refunded
        self._date_deposited = date_deposited
        self._date_completed = date_completed
        self._payment_deadline = payment_deadline

        self._validate_refunded()

    def _validate_refunded(self) -> None:
        """返金額はキャンセル済みの予約にだけ存在する"""
        is_canceled = self._status == BookingStatus.CANCELED
        if is_canceled != (self._refunded is not None):
            raise BusinessRuleViolationException(
                "Refunded amount must be set if and only if the booking is canceled"
            )

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def trip(self) -> Trip:
        return self._trip

    @property
    def total(self) -> Money:
        return self._total

    @property
    def contact(self) -> ContactInfo:
        return self._contact

    @property
    def ticket_count(self) -> int:
        return self._ticket_count

    @property
    def most_valued(self) -> BookingMostValued:
        return self._most_valued

    @property
    def customer_infos(self) -> tuple[CustomerInfo, ...]:
        return self._customer_infos

    @property
    def note(self) -> str | None:
        return self._note

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def deposit(self) -> Money | None:
        return self._deposit

    @property
    def points_applied(self) -> int | None:
        return self._points_applied

    @property
    def refunded(self) -> Money | None:
        return self._refunded

    @property
    def date_deposited(self) -> IsoDateTime | None:
        return self._date_deposited

    @property
    def date_completed(self) -> IsoDateTime | None:
        return self._date_completed

    @property
    def payment_deadline(self) -> IsoDateTime | None:
        return self._payment_deadline

    def next_statuses(self) -> frozenset[BookingStatus]:
        """現在のステータスから遷移可能なステータス"""
        return next_statuses(self._status)

    def change_status(
        self, new_status: BookingStatus, today: IsoDateTime, policy: BookingPolicy
    ) -> None:
        """ステータスを変更する

        キャンセルは返金額の記録を伴うため cancel() からのみ行う。
        """
        if new_status == BookingStatus.CANCELED:
            raise InvalidTransitionException(
                f"{self._status.value} -> CANCELED must go through cancel(), "
                "which records the refund"
            )
        self._transition(new_status, today, policy)

    def _transition(
        self, new_status: BookingStatus, today: IsoDateTime, policy: BookingPolicy
    ) -> None:
        if new_status not in self.next_statuses():
            raise InvalidTransitionException(
                f"Invalid booking status change: "
                f"{self._status.value} -> {new_status.value}"
            )

        # 遷移先ではなく遷移元で記録内容が決まる（PROCESSING を飛ばす場合も同じ）
        if self._status == BookingStatus.AWAITING_DEPOSIT:
            self._date_deposited = today
            self._payment_deadline = policy.payment_deadline(self._trip.start_time)
        elif self._status == BookingStatus.AWAITING_PAYMENT:
            self._date_completed = today

        self._status = new_status

    def set_deposit(self, deposit_percentage: Decimal | float | int) -> None:
        """合計金額に対する割合（%）からデポジット額を設定する

        [0, 100] の範囲外もそのまま計算する（負の割合なら負のデポジット）。
        """
        if self._deposit is not None:
            raise BusinessRuleViolationException("Deposit has already been set")
        percentage = to_decimal(deposit_percentage)
        self._deposit = self._total.multiply(percentage / Decimal("100"))

    def final_payment(self) -> Money:
        """残金（合計金額 - デポジット）

        デポジットが合計金額を超える場合は負の値になる。
        """
        if self._deposit is None:
            raise PreconditionException(
                "Cannot compute final payment before the deposit is set"
            )
        return self._total.subtract(self._deposit)

    def apply_points(self, available_points: int, policy: BookingPolicy) -> int:
        """保有ポイントのうち利用可能な分を予約に適用し、適用数を返す"""
        if self._points_applied is not None:
            raise BusinessRuleViolationException("Points have already been applied")
        self._points_applied = policy.applicable_points(self._total, available_points)
        return self._points_applied

    def member_count_by_age_group(self, age_group: AgeGroup) -> int:
        """指定した年齢区分の参加者数"""
        return sum(1 for info in self._customer_infos if info.age_group == age_group)

    def can_cancel(self, cancel_date: IsoDateTime) -> bool:
        """キャンセル済みでなく、かつ出発前であればキャンセルできる"""
        return self._status != BookingStatus.CANCELED and not (
            self._trip.start_time.is_before(cancel_date)
        )

    def _amount_paid(self) -> Money:
        """これまでに支払われた金額"""
        # 全額支払い済み
        if self._date_completed is not None:
            return self._total
        # デポジットのみ支払い済み
        if self._date_deposited is not None:
            if self._deposit is None:
                raise PreconditionException(
                    "Booking is marked as deposited but has no deposit amount"
                )
            return self._deposit
        return Money.zero(self._total.currency)

    def cancel_info(
        self, cancel_date: IsoDateTime, policy: BookingPolicy
    ) -> BookingCancelInfo:
        """指定日にキャンセルした場合の精算結果を計算する（状態は変更しない）"""
        if self._points_applied is None:
            raise PreconditionException(
                "Cannot compute cancellation before points are applied"
            )

        amount_paid = self._amount_paid()
        days_early = cancel_date.days_until(self._trip.start_time)
        ratio_lost = policy.cancel_ratio(days_early)

        refund = amount_paid.subtract(self._total.multiply(ratio_lost))
        if refund.is_negative():
            refund = Money.zero(self._total.currency)

        return BookingCancelInfo(
            booking_id=self.id,
            amount_lost=amount_paid.subtract(refund),
            refund=refund,
            points_lost=self._points_applied,
            days_early=int(days_early),
            trip=self._trip,
        )

    def cancel(
        self, cancel_date: IsoDateTime, policy: BookingPolicy
    ) -> BookingCancelInfo:
        """予約をキャンセルし、記録した返金額の精算結果を返す

        返金額はステータス変更前の状態（支払い済み金額）から計算する。
        """
        if not self.can_cancel(cancel_date):
            raise InvalidCancellationException(
                "Attempting to cancel an uncancelable booking"
            )

        info = self.cancel_info(cancel_date, policy)
        self._transition(BookingStatus.CANCELED, cancel_date, policy)
        self._refunded = info.refund
        return info
