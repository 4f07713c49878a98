from dataclasses import dataclass

from tour_booking.booking.domain.enum import AgeGroup


@dataclass(frozen=True)
class CustomerInfo:
    """参加者1名分の情報"""

    full_name: str
    age_group: AgeGroup
