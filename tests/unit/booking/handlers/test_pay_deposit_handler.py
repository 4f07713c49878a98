from decimal import Decimal

import pytest

from tour_booking.booking.handlers import pay_deposit
from tour_booking.shared.domain.exception import BusinessRuleViolationException


class TestPayDepositHandler:
    """デポジット支払い Lambda Handler のテスト"""

    def test_pay_deposit(self, booking_payload, lambda_context):
        event = {
            "Payload": {
                "booking": booking_payload(total_amount="1000"),
                "deposit_percentage": 30,
                "today": "2025-01-10T00:00:00",
            }
        }

        response = pay_deposit.lambda_handler(event, lambda_context)

        assert response["status"] == "success"
        assert Decimal(response["data"]["deposit_amount"]) == Decimal("300")
        assert Decimal(response["final_payment"]) == Decimal("700")
        assert response["data"]["status"] == "PROCESSING"
        assert response["data"]["date_deposited"] == "2025-01-10T00:00:00"

    def test_pay_deposit_skipping_processing(self, booking_payload, lambda_context):
        event = {
            "booking": booking_payload(),
            "deposit_percentage": "50",
            "today": "2025-01-10T00:00:00",
            "next_status": "AWAITING_PAYMENT",
        }

        response = pay_deposit.lambda_handler(event, lambda_context)

        assert response["data"]["status"] == "AWAITING_PAYMENT"
        assert response["data"]["payment_deadline"] == "2025-02-24T08:00:00"

    def test_deposit_already_set_is_rejected(self, booking_payload, lambda_context):
        event = {
            "booking": booking_payload(status="PROCESSING", deposit_amount="300"),
            "deposit_percentage": 30,
            "today": "2025-01-10T00:00:00",
        }

        with pytest.raises(BusinessRuleViolationException):
            pay_deposit.lambda_handler(event, lambda_context)

    @pytest.mark.parametrize(
        ("percentage", "deposit", "final_payment"),
        [(150, "1500", "-500"), (-10, "-100", "1100")],
    )
    def test_out_of_range_percentage_is_calculated(
        self, booking_payload, lambda_context, percentage, deposit, final_payment
    ):
        """0〜100% の範囲外でもそのまま計算して返す"""
        event = {
            "booking": booking_payload(total_amount="1000"),
            "deposit_percentage": percentage,
            "today": "2025-01-10T00:00:00",
        }

        response = pay_deposit.lambda_handler(event, lambda_context)

        assert response["data"]["status"] == "PROCESSING"
        assert Decimal(response["data"]["deposit_amount"]) == Decimal(deposit)
        assert Decimal(response["final_payment"]) == Decimal(final_payment)
