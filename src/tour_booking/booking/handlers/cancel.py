from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from tour_booking.booking.domain.exception import InvalidCancellationException
from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.service import BookingLifecycle
from tour_booking.booking.handlers.request_models import (
    CancelBookingRequest,
    to_booking,
)
from tour_booking.booking.handlers.response_models import (
    CancelBookingResponse,
    to_booking_data,
    to_cancel_info_data,
)
from tour_booking.shared.domain import IsoDateTime

logger = Logger()

lifecycle = BookingLifecycle(policy=BookingPolicy.from_env())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    logger.info("Received cancel booking request")

    payload = event.get("Payload", event)
    request = CancelBookingRequest.model_validate(payload)

    booking = to_booking(request.booking)
    cancel_date = IsoDateTime.from_string(request.cancel_date)

    if not lifecycle.can_cancel(booking, cancel_date):
        logger.warning(
            "Booking cannot be canceled",
            extra={
                "booking_id": str(booking.id),
                "status": booking.status.value,
                "trip_start_time": str(booking.trip.start_time),
            },
        )
        raise InvalidCancellationException(
            f"Booking cannot be canceled: {booking.id}"
        )

    info = lifecycle.cancel_with_report(booking, cancel_date)

    logger.info(
        "Booking canceled",
        extra={
            "booking_id": str(booking.id),
            "refund": str(info.refund),
            "amount_lost": str(info.amount_lost),
            "points_lost": info.points_lost,
        },
    )
    return CancelBookingResponse(
        data=to_booking_data(booking),
        cancel_info=to_cancel_info_data(info),
    ).model_dump()
