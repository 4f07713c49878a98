from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from decimal import Decimal

from tour_booking.shared.domain import IsoDateTime, Money
from tour_booking.shared.utils import to_decimal


@dataclass(frozen=True)
class CancelTier:
    """キャンセル料の段階

    出発 min_days_early 日前以降のキャンセルでは、合計金額の ratio_lost を失う。
    """

    min_days_early: int
    ratio_lost: Decimal


DEFAULT_CANCEL_TIERS: tuple[CancelTier, ...] = (
    CancelTier(min_days_early=20, ratio_lost=Decimal("0.3")),
    CancelTier(min_days_early=15, ratio_lost=Decimal("0.5")),
    CancelTier(min_days_early=10, ratio_lost=Decimal("0.7")),
    CancelTier(min_days_early=5, ratio_lost=Decimal("0.9")),
)

DEFAULT_MAX_POINT_RATIO = Decimal("0.8")
DEFAULT_PAYMENT_DEADLINE_DAYS = 5


def _validate_ratio(name: str, ratio: Decimal) -> None:
    if not Decimal("0") <= ratio <= Decimal("1"):
        raise ValueError(f"{name} must be between 0 and 1: {ratio}")


@dataclass(frozen=True)
class BookingPolicy:
    """予約ライフサイクルの設定値

    - max_point_ratio: 合計金額に対してポイントで支払える上限の割合
    - payment_deadline_days: 出発日の何日前を残金の支払期限とするか
    - cancel_tiers: キャンセル料の段階（出発までの日数が多い順に並べ替える）
    - late_cancel_ratio: どの段階にも当てはまらない直前キャンセルの割合
    """

    max_point_ratio: Decimal = DEFAULT_MAX_POINT_RATIO
    payment_deadline_days: int = DEFAULT_PAYMENT_DEADLINE_DAYS
    cancel_tiers: tuple[CancelTier, ...] = field(default=DEFAULT_CANCEL_TIERS)
    late_cancel_ratio: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        _validate_ratio("max_point_ratio", self.max_point_ratio)
        _validate_ratio("late_cancel_ratio", self.late_cancel_ratio)
        for tier in self.cancel_tiers:
            _validate_ratio("ratio_lost", tier.ratio_lost)
        if self.payment_deadline_days < 0:
            raise ValueError("payment_deadline_days cannot be negative")

        ordered = tuple(
            sorted(self.cancel_tiers, key=lambda t: t.min_days_early, reverse=True)
        )
        object.__setattr__(self, "cancel_tiers", ordered)

    @classmethod
    def from_env(cls) -> BookingPolicy:
        """環境変数から設定を読み込む（未設定の項目はデフォルト値）

        - MAX_POINT_RATIO
        - PAYMENT_DEADLINE_DAYS
        """
        max_point_ratio = os.getenv("MAX_POINT_RATIO")
        payment_deadline_days = os.getenv("PAYMENT_DEADLINE_DAYS")

        return cls(
            max_point_ratio=(
                to_decimal(max_point_ratio)
                if max_point_ratio
                else DEFAULT_MAX_POINT_RATIO
            ),
            payment_deadline_days=(
                int(payment_deadline_days)
                if payment_deadline_days
                else DEFAULT_PAYMENT_DEADLINE_DAYS
            ),
        )

    def cancel_ratio(self, days_early: float) -> Decimal:
        """出発までの日数から、合計金額のうち失う割合を返す

        日数は端数を切り捨てずに判定する。出発に近いほど割合は大きくなる。
        """
        for tier in self.cancel_tiers:
            if days_early >= tier.min_days_early:
                return tier.ratio_lost
        return self.late_cancel_ratio

    def applicable_points(self, total: Money, points: int) -> int:
        """利用可能なポイント数を返す（合計金額 × 上限割合 まで、端数切り捨て）"""
        if points < 0:
            raise ValueError("Points cannot be negative")
        cap = total.amount * self.max_point_ratio
        return math.floor(min(Decimal(points), cap))

    def payment_deadline(self, start_time: IsoDateTime) -> IsoDateTime:
        """残金の支払期限"""
        return start_time.minus_days(self.payment_deadline_days)
