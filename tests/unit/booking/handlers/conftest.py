from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    """Logger.inject_lambda_context が参照する属性だけを持つ LambdaContext"""

    function_name: str = "tour-booking-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-southeast-1:123456789012:function:tour-booking-test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def booking_payload():
    """BookingSnapshot の辞書を生成する Factory fixture"""

    def _factory(**overrides) -> dict:
        payload = {
            "booking_id": "booking-1",
            "customer_id": "customer-1",
            "trip": {"trip_id": "trip-123", "start_time": "2025-03-01T08:00:00"},
            "total_amount": "1000",
            "currency": "VND",
            "ticket_count": 2,
            "most_valued": "ACTIVITIES",
            "contact": {
                "name": "Nguyen Van A",
                "email": "a@example.com",
                "phone": "0901234567",
            },
            "travelers": [
                {"full_name": "Nguyen Van A", "age_group": "ADULT"},
                {"full_name": "Nguyen Van B", "age_group": "INFANT"},
            ],
            "points_applied": 0,
        }
        payload.update(overrides)
        return payload

    return _factory
