from .age_group import AgeGroup as AgeGroup
from .booking_most_valued import BookingMostValued as BookingMostValued
from .booking_status import (
    BOOKING_STATUS_TRANSITIONS as BOOKING_STATUS_TRANSITIONS,
)
from .booking_status import BookingStatus as BookingStatus
from .booking_status import next_statuses as next_statuses
