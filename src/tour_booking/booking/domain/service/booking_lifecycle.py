from decimal import Decimal

from tour_booking.booking.domain.entity import Booking
from tour_booking.booking.domain.enum import BookingStatus, next_statuses
from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.value_object import BookingCancelInfo
from tour_booking.shared.domain import IsoDateTime, Money


class BookingLifecycle:
    """予約ライフサイクルのドメインサービス

    - ステータス遷移・デポジット・ポイント・キャンセル精算の入口
    - 設定値（BookingPolicy）はインスタンスごとに保持する
    - 日時は必ず呼び出し側から受け取り、現在時刻は参照しない
    - 集約は引数で受け取ったものを更新して返す（永続化は呼び出し側の責務）
    """

    def __init__(self, policy: BookingPolicy | None = None) -> None:
        self._policy = policy or BookingPolicy()

    @property
    def policy(self) -> BookingPolicy:
        return self._policy

    def next_statuses(self, status: BookingStatus) -> frozenset[BookingStatus]:
        """遷移可能なステータス"""
        return next_statuses(status)

    def transition(
        self, booking: Booking, new_status: BookingStatus, today: IsoDateTime
    ) -> Booking:
        """ステータスを遷移させる

        同じ引数で2回呼ぶと日付が再記録されるため、1回の遷移につき1回だけ呼ぶこと。
        """
        booking.change_status(BookingStatus(new_status), today, self._policy)
        return booking

    def set_deposit(
        self, booking: Booking, deposit_percentage: Decimal | float | int
    ) -> Booking:
        """デポジット額を設定する"""
        booking.set_deposit(deposit_percentage)
        return booking

    def final_payment(self, booking: Booking) -> Money:
        """残金"""
        return booking.final_payment()

    def applicable_points(self, booking: Booking, requested_points: int) -> int:
        """利用可能なポイント数（記録はしない）"""
        return self._policy.applicable_points(booking.total, requested_points)

    def apply_points(self, booking: Booking, available_points: int) -> Booking:
        """利用可能なポイント数を予約に記録する"""
        booking.apply_points(available_points, self._policy)
        return booking

    def can_cancel(self, booking: Booking, cancel_date: IsoDateTime) -> bool:
        return booking.can_cancel(cancel_date)

    def cancel_ratio(self, days_early: float) -> Decimal:
        """出発までの日数に応じたキャンセル料の割合"""
        return self._policy.cancel_ratio(days_early)

    def cancel_info(
        self, booking: Booking, cancel_date: IsoDateTime
    ) -> BookingCancelInfo:
        """キャンセル時の精算結果"""
        return booking.cancel_info(cancel_date, self._policy)

    def cancel(self, booking: Booking, cancel_date: IsoDateTime) -> Booking:
        """予約をキャンセルし、返金額を記録する"""
        booking.cancel(cancel_date, self._policy)
        return booking

    def cancel_with_report(
        self, booking: Booking, cancel_date: IsoDateTime
    ) -> BookingCancelInfo:
        """予約をキャンセルし、記録した返金額の精算結果を返す"""
        return booking.cancel(cancel_date, self._policy)
