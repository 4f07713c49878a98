from decimal import Decimal

import pytest

from tour_booking.shared.domain import Currency, IsoDateTime, Money, TripId


@pytest.fixture
def trip_id():
    """全テスト共通の TripId フィクスチャ"""
    return TripId(value="trip-123")


@pytest.fixture
def at():
    """ISO 8601 文字列から IsoDateTime を作るヘルパー"""
    return IsoDateTime.from_string


@pytest.fixture
def vnd():
    """金額からベトナムドンの Money を作るヘルパー"""

    def _vnd(amount) -> Money:
        return Money(amount=Decimal(amount), currency=Currency.vnd())

    return _vnd
