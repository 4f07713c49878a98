from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from tour_booking.booking.domain.policy import BookingPolicy
from tour_booking.booking.domain.service import BookingLifecycle
from tour_booking.booking.handlers.request_models import (
    PayDepositRequest,
    to_booking,
)
from tour_booking.booking.handlers.response_models import (
    PayDepositResponse,
    to_booking_data,
)
from tour_booking.shared.domain import DomainException, IsoDateTime

logger = Logger()

lifecycle = BookingLifecycle(policy=BookingPolicy.from_env())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """デポジット支払い Lambda Handler

    デポジット額を設定し、AWAITING_DEPOSIT から次のステータスへ進める。
    """
    logger.info("Received pay deposit request")

    payload = event.get("Payload", event)
    request = PayDepositRequest.model_validate(payload)

    booking = to_booking(request.booking)
    today = IsoDateTime.from_string(request.today)

    try:
        lifecycle.set_deposit(booking, request.deposit_percentage)
        lifecycle.transition(booking, request.next_status, today)
    except DomainException:
        logger.warning(
            "Rejected deposit payment",
            extra={"booking_id": str(booking.id), "status": booking.status.value},
        )
        raise

    final_payment = lifecycle.final_payment(booking)
    logger.info(
        "Deposit recorded",
        extra={
            "booking_id": str(booking.id),
            "deposit": str(booking.deposit),
            "payment_deadline": str(booking.payment_deadline),
        },
    )
    return PayDepositResponse(
        data=to_booking_data(booking),
        final_payment=str(final_payment.amount),
    ).model_dump()
