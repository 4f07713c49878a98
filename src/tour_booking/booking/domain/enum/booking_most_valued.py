from enum import Enum


class BookingMostValued(str, Enum):
    """予約者が最も重視する項目"""

    TRANSPORTATION = "TRANSPORTATION"
    ACCOMMODATION = "ACCOMMODATION"
    ACTIVITIES = "ACTIVITIES"
    CUISINE = "CUISINE"
