import pytest
from pydantic import ValidationError

from tour_booking.booking.domain.exception import InvalidTransitionException
from tour_booking.booking.handlers import change_status


class TestChangeStatusHandler:
    """予約ステータス変更 Lambda Handler のテスト"""

    def test_change_status_from_awaiting_deposit(self, booking_payload, lambda_context):
        # Arrange
        event = {
            "Payload": {
                "booking": booking_payload(),
                "new_status": "PROCESSING",
                "today": "2025-01-10T00:00:00",
            }
        }

        # Act
        response = change_status.lambda_handler(event, lambda_context)

        # Assert
        assert response["status"] == "success"
        data = response["data"]
        assert data["status"] == "PROCESSING"
        assert data["date_deposited"] == "2025-01-10T00:00:00"
        assert data["payment_deadline"] == "2025-02-24T08:00:00"
        assert data["date_completed"] is None
        assert data["next_statuses"] == ["AWAITING_PAYMENT", "CANCELED"]

    def test_event_without_payload_envelope(self, booking_payload, lambda_context):
        """Payload キーがない場合はイベント自体をリクエストとして扱う"""
        event = {
            "booking": booking_payload(status="AWAITING_PAYMENT"),
            "new_status": "COMPLETED",
            "today": "2025-01-20T00:00:00",
        }

        response = change_status.lambda_handler(event, lambda_context)

        assert response["data"]["status"] == "COMPLETED"
        assert response["data"]["date_completed"] == "2025-01-20T00:00:00"
        assert response["data"]["next_statuses"] == ["CANCELED"]

    def test_response_can_be_sent_back_as_snapshot(
        self, booking_payload, lambda_context
    ):
        """レスポンスの data はそのまま次のリクエストの booking に使える"""
        first = change_status.lambda_handler(
            {
                "booking": booking_payload(),
                "new_status": "AWAITING_PAYMENT",
                "today": "2025-01-10T00:00:00",
            },
            lambda_context,
        )

        second = change_status.lambda_handler(
            {
                "booking": first["data"],
                "new_status": "COMPLETED",
                "today": "2025-01-20T00:00:00",
            },
            lambda_context,
        )

        assert second["data"]["status"] == "COMPLETED"
        assert second["data"]["date_deposited"] == "2025-01-10T00:00:00"
        assert second["data"]["date_completed"] == "2025-01-20T00:00:00"

    def test_invalid_transition_is_raised(self, booking_payload, lambda_context):
        event = {
            "booking": booking_payload(status="COMPLETED"),
            "new_status": "PROCESSING",
            "today": "2025-01-10T00:00:00",
        }

        with pytest.raises(InvalidTransitionException):
            change_status.lambda_handler(event, lambda_context)

    def test_invalid_payload_raises_validation_error(self, lambda_context):
        with pytest.raises(ValidationError):
            change_status.lambda_handler(
                {"new_status": "PROCESSING", "today": "2025-01-10T00:00:00"},
                lambda_context,
            )
