from enum import Enum


class AgeGroup(str, Enum):
    """参加者の年齢区分"""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"
