from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.service import BookingLifecycle
from tour_booking.booking.handlers.request_models import (
    RedeemPointsRequest,
    to_booking,
)
from tour_booking.booking.handlers.response_models import to_response
from tour_booking.shared.domain import BusinessRuleViolationException

logger = Logger()

lifecycle = BookingLifecycle(policy=BookingPolicy.from_env())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """ポイント利用 Lambda Handler

    利用可能なポイント数を予約に記録する。顧客の保有ポイントの減算は呼び出し側で行う。
    """
    logger.info("Received redeem points request")

    payload = event.get("Payload", event)
    request = RedeemPointsRequest.model_validate(payload)

    booking = to_booking(request.booking)

    try:
        lifecycle.apply_points(booking, request.available_points)
    except BusinessRuleViolationException:
        logger.warning(
            "Points already applied to booking",
            extra={"booking_id": str(booking.id)},
        )
        raise

    logger.info(
        "Points applied",
        extra={
            "booking_id": str(booking.id),
            "available_points": request.available_points,
            "points_applied": booking.points_applied,
        },
    )
    return to_response(booking)
