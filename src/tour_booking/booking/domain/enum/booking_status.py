from enum import Enum
from types import MappingProxyType
from typing import Mapping


class BookingStatus(str, Enum):
    """ツアー予約ステータス"""

    AWAITING_DEPOSIT = "AWAITING_DEPOSIT"
    PROCESSING = "PROCESSING"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


# 遷移表: 現在のステータス -> 遷移可能なステータス
# CANCELED 以外への逆戻りは存在しない
BOOKING_STATUS_TRANSITIONS: Mapping[BookingStatus, frozenset[BookingStatus]] = (
    MappingProxyType(
        {
            BookingStatus.AWAITING_DEPOSIT: frozenset(
                {
                    BookingStatus.PROCESSING,
                    BookingStatus.AWAITING_PAYMENT,
                    BookingStatus.CANCELED,
                }
            ),
            BookingStatus.PROCESSING: frozenset(
                {BookingStatus.AWAITING_PAYMENT, BookingStatus.CANCELED}
            ),
            BookingStatus.AWAITING_PAYMENT: frozenset(
                {BookingStatus.COMPLETED, BookingStatus.CANCELED}
            ),
            BookingStatus.COMPLETED: frozenset({BookingStatus.CANCELED}),
            BookingStatus.CANCELED: frozenset(),
        }
    )
)


def next_statuses(status: BookingStatus) -> frozenset[BookingStatus]:
    """現在のステータスから遷移可能なステータスを返す

    遷移表に存在しない値はデータ破損とみなし ValueError を送出する。
    """
    try:
        return BOOKING_STATUS_TRANSITIONS[status]
    except KeyError as e:
        raise ValueError(f"Unknown booking status: {status!r}") from e
