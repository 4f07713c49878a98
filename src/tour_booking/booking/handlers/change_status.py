from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from tour_booking.booking.domain.exception import InvalidTransitionException
from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.service import BookingLifecycle
from tour_booking.booking.handlers.request_models import (
    ChangeStatusRequest,
    to_booking,
)
from tour_booking.booking.handlers.response_models import to_response
from tour_booking.shared.domain import IsoDateTime

logger = Logger()

lifecycle = BookingLifecycle(policy=BookingPolicy.from_env())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約ステータス変更 Lambda Handler

    Step Functions からの入力を受け取り、予約の現在の状態に遷移を適用して返す。
    """
    logger.info("Received change booking status request")

    payload = event.get("Payload", event)
    request = ChangeStatusRequest.model_validate(payload)

    booking = to_booking(request.booking)
    previous_status = booking.status
    today = IsoDateTime.from_string(request.today)

    try:
        lifecycle.transition(booking, request.new_status, today)
    except InvalidTransitionException:
        logger.warning(
            "Rejected booking status change",
            extra={
                "booking_id": str(booking.id),
                "from_status": previous_status.value,
                "to_status": request.new_status.value,
            },
        )
        raise

    logger.info(
        "Booking status changed",
        extra={
            "booking_id": str(booking.id),
            "from_status": previous_status.value,
            "to_status": booking.status.value,
        },
    )
    return to_response(booking)
