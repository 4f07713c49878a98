from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.service import BookingLifecycle
from tour_booking.booking.handlers.request_models import (
    CancelBookingRequest,
    to_booking,
)
from tour_booking.booking.handlers.response_models import (
    QuoteCancellationResponse,
    to_cancel_info_data,
)
from tour_booking.shared.domain import IsoDateTime

logger = Logger()

lifecycle = BookingLifecycle(policy=BookingPolicy.from_env())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """キャンセル見積もり Lambda Handler（予約の状態は変更しない）"""
    logger.info("Received cancellation quote request")

    payload = event.get("Payload", event)
    request = CancelBookingRequest.model_validate(payload)

    booking = to_booking(request.booking)
    cancel_date = IsoDateTime.from_string(request.cancel_date)

    cancelable = lifecycle.can_cancel(booking, cancel_date)
    info = lifecycle.cancel_info(booking, cancel_date)

    logger.info(
        "Cancellation quoted",
        extra={
            "booking_id": str(booking.id),
            "cancelable": cancelable,
            "days_early": info.days_early,
            "refund": str(info.refund),
        },
    )
    return QuoteCancellationResponse(
        cancelable=cancelable,
        data=to_cancel_info_data(info),
    ).model_dump()
