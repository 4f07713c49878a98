from tour_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
)


class InvalidTransitionException(BusinessRuleViolationException):
    """現在のステータスから遷移できないステータスが指定された場合"""

    pass


class InvalidCancellationException(BusinessRuleViolationException):
    """キャンセルできない予約をキャンセルしようとした場合"""

    pass


class PreconditionException(DomainException):
    """前提となる手続き（デポジット記録・ポイント適用など）が済んでいない場合"""

    pass
