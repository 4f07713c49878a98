from .booking_policy import DEFAULT_CANCEL_TIERS as DEFAULT_CANCEL_TIERS
from .booking_policy import BookingPolicy as BookingPolicy
from .booking_policy import CancelTier as CancelTier
